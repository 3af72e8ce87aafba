from sssa.field import PRIME
from sssa.polynomial import build_polynomial, evaluate, interpolate_at_zero
from sssa.scalars import UniqueScalarGenerator


def test_build_polynomial_keeps_constant_term():
    gen = UniqueScalarGenerator()
    coeffs = build_polynomial(1234, 3, gen)
    assert len(coeffs) == 4
    assert coeffs[0] == 1234
    assert set(coeffs[1:]) <= gen.pool


def test_degree_zero_polynomial_is_constant():
    coeffs = build_polynomial(99, 0, UniqueScalarGenerator())
    assert coeffs == [99]
    assert evaluate(coeffs, 5) == 99


def test_horner_matches_direct_evaluation():
    coeffs = [7, 3, 2]  # 7 + 3x + 2x^2
    assert evaluate(coeffs, 0) == 7
    assert evaluate(coeffs, 2) == 7 + 6 + 8
    x = PRIME - 1  # -1 in the field
    assert evaluate(coeffs, x) == (7 - 3 + 2) % PRIME


def test_interpolation_recovers_constant_term():
    gen = UniqueScalarGenerator()
    coeffs = build_polynomial(555, 2, gen)
    points = [(x, evaluate(coeffs, x)) for x in (gen.next(), gen.next(), gen.next())]
    assert interpolate_at_zero(points) == 555


def test_engine_uses_field_helpers(monkeypatch):
    from sssa import field, polynomial

    calls = []

    def counting_mul(a, b):
        calls.append((a, b))
        return field.mul(a, b)

    monkeypatch.setattr(polynomial, "mul", counting_mul)
    assert evaluate([7, 3, 2], 2) == 21
    assert len(calls) == 3

    calls.clear()
    points = [(1, evaluate([9, 4], 1)), (2, evaluate([9, 4], 2))]
    assert interpolate_at_zero(points) == 9
    assert calls
