"""Structural and range checks on raw share buffers."""
from __future__ import annotations

from typing import Optional, Sequence

from .codec import POINT_SIZE
from .errors import InconsistentShareSetError, InvalidShareError
from .field import ELEMENT_SIZE, is_element


def _label(index: Optional[int]) -> str:
    return "share" if index is None else f"share {index}"


def validate_share(buffer: bytes, index: Optional[int] = None) -> None:
    """Raise :class:`InvalidShareError` if ``buffer`` is not a usable share."""
    if not isinstance(buffer, (bytes, bytearray, memoryview)):
        raise InvalidShareError(f"{_label(index)} must be bytes, got {type(buffer).__name__}")
    if len(buffer) % POINT_SIZE != 0:
        raise InvalidShareError(
            f"{_label(index)} length {len(buffer)} is not a multiple of {POINT_SIZE}"
        )
    view = bytes(buffer)
    for offset in range(0, len(view), ELEMENT_SIZE):
        value = int.from_bytes(view[offset : offset + ELEMENT_SIZE], byteorder="big")
        if not is_element(value):
            raise InvalidShareError(
                f"{_label(index)} component at byte {offset} is outside the field"
            )


def is_valid_share(buffer: bytes) -> bool:
    try:
        validate_share(buffer)
    except InvalidShareError:
        return False
    return True


def validate_share_set(buffers: Sequence[bytes]) -> int:
    """Validate every buffer and return their common chunk count."""
    counts = set()
    for index, buffer in enumerate(buffers):
        validate_share(buffer, index)
        counts.add(len(buffer) // POINT_SIZE)
    if len(counts) > 1:
        raise InconsistentShareSetError(
            f"shares disagree on chunk count: {sorted(counts)}"
        )
    return counts.pop() if counts else 0


__all__ = ["validate_share", "is_valid_share", "validate_share_set"]
