"""Split a secret into share buffers.

Each 32-byte chunk of the secret gets its own random polynomial of degree
``minimum - 1``. Every share owns one x-coordinate, shared across all chunks,
and stores the evaluation of each chunk polynomial at that point.
"""
from __future__ import annotations

import logging
from typing import List, Optional, Set

from . import codec
from .errors import ArgumentError
from .polynomial import build_polynomial, evaluate
from .policy import policy
from .scalars import UniqueScalarGenerator

_logger = logging.getLogger(__name__)


def _check_arguments(minimum: int, shares: int, secret: bytes) -> None:
    if isinstance(minimum, bool) or not isinstance(minimum, int):
        raise ArgumentError("minimum must be an integer")
    if isinstance(shares, bool) or not isinstance(shares, int):
        raise ArgumentError("shares must be an integer")
    if minimum < 1 or shares < 1:
        raise ArgumentError("minimum and shares must both be at least 1")
    if minimum > shares:
        raise ArgumentError(f"minimum ({minimum}) cannot exceed shares ({shares})")
    if shares > policy.max_shares:
        raise ArgumentError(f"at most {policy.max_shares} shares are allowed")
    if not isinstance(secret, (bytes, bytearray, memoryview)):
        raise ArgumentError(f"secret must be bytes, got {type(secret).__name__}")
    if len(secret) == 0:
        raise ArgumentError("secret must not be empty")


def create_bytes(
    minimum: int,
    shares: int,
    secret: bytes,
    *,
    pool: Optional[Set[int]] = None,
) -> List[bytes]:
    """Split ``secret`` into ``shares`` buffers, any ``minimum`` of which recover it.

    ``pool`` may be passed to observe the x-coordinates and coefficients
    drawn during the call; it is otherwise private to this invocation.
    """
    _check_arguments(minimum, shares, secret)
    chunks = codec.encode(bytes(secret))
    scalars = UniqueScalarGenerator(pool)

    polynomials = [build_polynomial(chunk, minimum - 1, scalars) for chunk in chunks]

    result: List[bytes] = []
    for i in range(shares):
        x = scalars.next()
        points = [(x, evaluate(coeffs, x)) for coeffs in polynomials]
        if policy.trace_points:
            for j, (_, y) in enumerate(points):
                _logger.debug("share[%d][%d].x = %x (%dB)", i, j, x, (x.bit_length() + 7) // 8)
                _logger.debug("share[%d][%d].y = %x (%dB)", i, j, y, (y.bit_length() + 7) // 8)
        buffer = codec.pack_points(points)
        _logger.info("share %d is %d bytes", i, len(buffer))
        result.append(buffer)
    return result


__all__ = ["create_bytes"]
