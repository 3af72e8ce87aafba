"""Conversion between secret bytes, field elements and share buffers.

A secret is cut into 32-byte chunks, each read as a big-endian integer. The
final chunk may be shorter and then behaves as if left-padded with zeros.
Share buffers are a flat run of 64-byte ``x || y`` pairs, one per chunk.
"""
from __future__ import annotations

from typing import Iterable, List, Optional, Sequence, Tuple

from .errors import ArgumentError
from .field import ELEMENT_SIZE, PRIME

POINT_SIZE = 2 * ELEMENT_SIZE

Point = Tuple[int, int]


def to_bytes32(value: int) -> bytes:
    return value.to_bytes(ELEMENT_SIZE, byteorder="big")


def from_bytes32(buf: bytes) -> int:
    return int.from_bytes(buf, byteorder="big")


def chunk_count(length: int) -> int:
    return -(-length // ELEMENT_SIZE)


def encode(secret: bytes) -> List[int]:
    """Split ``secret`` into field elements, one per 32-byte chunk."""
    elements: List[int] = []
    for offset in range(0, len(secret), ELEMENT_SIZE):
        value = from_bytes32(secret[offset : offset + ELEMENT_SIZE])
        if value >= PRIME:
            raise ArgumentError(
                f"secret chunk {offset // ELEMENT_SIZE} does not fit in the field"
            )
        elements.append(value)
    return elements


def decode(elements: Iterable[int], length: Optional[int] = None) -> bytes:
    """Concatenate the 32-byte encoding of ``elements``.

    Without ``length`` the result is always a multiple of 32 bytes. With it,
    the left padding of the final chunk is dropped so the original secret
    comes back byte for byte.
    """
    chunks = [to_bytes32(value) for value in elements]
    if length is None:
        return b"".join(chunks)
    if length < 0 or chunk_count(length) != len(chunks):
        raise ArgumentError(
            f"length {length} does not match {len(chunks)} reconstructed chunks"
        )
    if chunks:
        pad = ELEMENT_SIZE - (length - ELEMENT_SIZE * (len(chunks) - 1))
        if chunks[-1][:pad].strip(b"\x00"):
            raise ArgumentError(
                f"length {length} would drop non-zero bytes from the final chunk"
            )
        chunks[-1] = chunks[-1][pad:]
    return b"".join(chunks)


def pack_points(points: Sequence[Point]) -> bytes:
    """Serialise share points into the 64-byte-per-chunk wire form."""
    out = bytearray()
    for x, y in points:
        out += to_bytes32(x)
        out += to_bytes32(y)
    return bytes(out)


def unpack_points(buffer: bytes) -> List[Point]:
    """Inverse of :func:`pack_points`; expects a validated buffer."""
    points: List[Point] = []
    for offset in range(0, len(buffer), POINT_SIZE):
        pair = buffer[offset : offset + POINT_SIZE]
        points.append((from_bytes32(pair[:ELEMENT_SIZE]), from_bytes32(pair[ELEMENT_SIZE:])))
    return points


__all__ = [
    "POINT_SIZE",
    "Point",
    "to_bytes32",
    "from_bytes32",
    "chunk_count",
    "encode",
    "decode",
    "pack_points",
    "unpack_points",
]
