"""Arithmetic in the prime field used for every share.

All helpers take and return plain ``int`` values and normalise their result
into ``[0, PRIME)``.
"""
from __future__ import annotations

# 2**256 - 189, the largest prime below 2**256
PRIME = 115792089237316195423570985008687907853269984665640564039457584007913129639747

ELEMENT_SIZE = 32


def add(a: int, b: int) -> int:
    return (a + b) % PRIME


def sub(a: int, b: int) -> int:
    # Python's % already maps negative values into [0, PRIME)
    return (a - b) % PRIME


def mul(a: int, b: int) -> int:
    return (a * b) % PRIME


def inverse(a: int) -> int:
    """Return the multiplicative inverse of ``a`` modulo :data:`PRIME`.

    Raises ``ZeroDivisionError`` for ``a == 0 (mod PRIME)``.
    """
    a %= PRIME
    if a == 0:
        raise ZeroDivisionError("0 has no inverse in the field")
    return pow(a, -1, PRIME)


def is_element(value: int) -> bool:
    return 0 <= value < PRIME


__all__ = ["PRIME", "ELEMENT_SIZE", "add", "sub", "mul", "inverse", "is_element"]
