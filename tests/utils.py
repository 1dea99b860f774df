"""Test utilities: polynomial builders and tolerance-aware assertions."""

from core.complex_number import ComplexNumber
from core.polynomial import Polynomial


def poly(*coeffs) -> Polynomial:
    """Polynomial from low-to-high coefficients given as numbers or complex."""
    return Polynomial(coeffs)


def c(real: float, imag: float = 0.0) -> ComplexNumber:
    return ComplexNumber(real, imag)


def assert_poly_equal(actual: Polynomial, expected: Polynomial):
    assert actual == expected, f"{actual!r} != {expected!r}"


def assert_division_law(dividend: Polynomial, divisor: Polynomial):
    """Check dividend == divisor*q + r and the remainder degree bound; return (q, r)."""
    q, r = dividend.divide(divisor)
    assert_poly_equal(divisor * q + r, dividend)
    assert r.is_zero() or r.degree < divisor.degree, \
        f"remainder degree {r.degree} not below divisor degree {divisor.degree}"
    return q, r
