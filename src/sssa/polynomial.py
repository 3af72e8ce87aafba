"""Polynomial construction, evaluation and interpolation over the field."""
from __future__ import annotations

from typing import List, Sequence

from .codec import Point
from .field import add, inverse, mul, sub
from .scalars import UniqueScalarGenerator


def build_polynomial(constant: int, degree: int, scalars: UniqueScalarGenerator) -> List[int]:
    """Return ``degree + 1`` coefficients with ``constant`` as the free term."""
    return [constant] + [scalars.next() for _ in range(degree)]


def evaluate(coeffs: Sequence[int], x: int) -> int:
    """Evaluate the polynomial at ``x`` using Horner's method."""
    y = 0
    for c in reversed(coeffs):
        y = add(mul(y, x), c)
    return y


def interpolate_at_zero(points: Sequence[Point]) -> int:
    """Lagrange interpolation of ``points`` evaluated at ``x = 0``."""
    total = 0
    for i, (xi, yi) in enumerate(points):
        num = 1
        den = 1
        for k, (xk, _) in enumerate(points):
            if k == i:
                continue
            num = mul(num, sub(0, xk))
            den = mul(den, sub(xi, xk))
        total = add(total, mul(mul(yi, num), inverse(den)))
    return total


__all__ = ["build_polynomial", "evaluate", "interpolate_at_zero"]
