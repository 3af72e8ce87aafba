"""Random non-zero field elements that never repeat within one split."""
from __future__ import annotations

import secrets
from typing import Callable, Optional, Set

from .field import PRIME


class UniqueScalarGenerator:
    """Draw distinct values from ``[1, PRIME - 1]``.

    Every returned value is added to ``pool``. The pool always holds ``0``,
    the evaluation point of the secret, so it can never be handed out as an
    x-coordinate.
    """

    def __init__(
        self,
        pool: Optional[Set[int]] = None,
        randbelow: Callable[[int], int] = secrets.randbelow,
    ) -> None:
        self.pool: Set[int] = set() if pool is None else pool
        self.pool.add(0)
        self._randbelow = randbelow

    def next(self) -> int:
        value = self._randbelow(PRIME - 1) + 1
        while value in self.pool:
            value = self._randbelow(PRIME - 1) + 1
        self.pool.add(value)
        return value

    def __len__(self) -> int:
        return len(self.pool)


__all__ = ["UniqueScalarGenerator"]
