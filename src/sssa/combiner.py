"""Recover a secret from share buffers by Lagrange interpolation."""
from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from . import codec
from .errors import ArgumentError, InvalidShareError
from .polynomial import interpolate_at_zero
from .policy import policy
from .validation import validate_share_set

_logger = logging.getLogger(__name__)


def combine_bytes(shares: Sequence[bytes], length: Optional[int] = None) -> bytes:
    """Reconstruct the secret from ``shares``.

    Passing at least the ``minimum`` used at split time gives the secret back;
    extra shares do not change the result. Passing fewer silently yields a
    wrong value, since the threshold is not recorded in the shares.

    ``length`` trims the output to the original secret size when it was not
    a multiple of 32 bytes.
    """
    if isinstance(shares, (bytes, bytearray)):
        raise ArgumentError("shares must be a sequence of buffers, not a single buffer")
    shares = list(shares)
    if not shares:
        raise ArgumentError("at least one share is required")

    count = validate_share_set(shares)
    parsed = [codec.unpack_points(bytes(share)) for share in shares]

    columns = [[points[j] for points in parsed] for j in range(count)]
    for j, column in enumerate(columns):
        if len({x for x, _ in column}) != len(column):
            raise InvalidShareError(f"chunk {j} has repeated x-coordinates")

    _logger.info("combining %d shares of %d chunks", len(parsed), count)
    secret: List[int] = []
    for j, column in enumerate(columns):
        value = interpolate_at_zero(column)
        if policy.trace_points:
            _logger.debug("chunk[%d] recovered from %d points", j, len(column))
        secret.append(value)
    return codec.decode(secret, length)


__all__ = ["combine_bytes"]
