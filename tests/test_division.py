"""Tests for polynomial long division."""

import pytest

from core import rng
from core.errors import DivisionByZero
from core.polynomial import Polynomial
from core.tolerance import override_epsilon
from tests.utils import poly, assert_poly_equal, assert_division_law


def test_exact_division():
    p1 = poly(2, 3, 1)
    p2 = poly(1, 1)
    q, r = p1.divide(p2)
    assert_poly_equal(q, poly(2, 1))
    assert r.is_zero()


def test_division_with_remainder():
    # x^2 + 1 = (x - 1)(x + 1) + 2
    q, r = assert_division_law(poly(1, 0, 1), poly(-1, 1))
    assert_poly_equal(q, poly(1, 1))
    assert_poly_equal(r, poly(2))


def test_division_with_zero_interior_coefficients():
    # x^4 - 1 = (x^2 + 1)(x^2 - 1)
    q, r = poly(-1, 0, 0, 0, 1).divide(poly(1, 0, 1))
    assert_poly_equal(q, poly(-1, 0, 1))
    assert r.is_zero()


def test_complex_coefficients():
    # (x - i)(x + 1 + 2i) + 3
    divisor = poly(-1j, 1)
    quotient = poly(1 + 2j, 1)
    dividend = divisor * quotient + poly(3)
    q, r = assert_division_law(dividend, divisor)
    assert_poly_equal(q, quotient)
    assert_poly_equal(r, poly(3))


def test_non_monic_divisor():
    q, r = assert_division_law(poly(1, 2, 3, 4), poly(1, 2j))
    assert q.degree == 2
    assert r.degree == 0


def test_constant_divisor():
    q, r = poly(2, 4j, 6).divide(poly(2))
    assert_poly_equal(q, poly(1, 2j, 3))
    assert r.is_zero()


def test_dividend_degree_below_divisor():
    a = poly(1, 1)
    q, r = a.divide(poly(1, 0, 0, 1))
    assert q.is_zero()
    assert_poly_equal(r, a)
    assert r is not a


def test_zero_dividend():
    q, r = Polynomial.zero().divide(poly(1, 1))
    assert q.is_zero() and r.is_zero()
    q, r = Polynomial.zero().divide(poly(5))
    assert q.is_zero() and r.is_zero()


def test_equal_degrees():
    q, r = assert_division_law(poly(3, 2, 1), poly(1, 1, 1))
    assert_poly_equal(q, poly(1))
    assert_poly_equal(r, poly(2, 1))


def test_divide_by_zero_polynomial():
    with pytest.raises(DivisionByZero):
        poly(1, 2).divide(Polynomial.zero())


def test_divide_by_trimmed_zero_polynomial():
    with pytest.raises(ZeroDivisionError):
        poly(1, 2).divide(poly(0, 0, 1e-12))


def test_operators():
    a, b = poly(2, 3, 1), poly(1, 1)
    q, r = divmod(a, b)
    assert_poly_equal(q, poly(2, 1))
    assert_poly_equal(a // b, poly(2, 1))
    assert (a % b).is_zero()


def test_division_operators_reject_scalars():
    with pytest.raises(TypeError):
        divmod(poly(1, 1), 2)
    with pytest.raises(TypeError):
        poly(1, 1) // 2


def _well_conditioned(degree):
    """Divisor whose roots lie near the unit disc, so quotients stay bounded."""
    return Polynomial.random(degree, -0.5, 0.5) + Polynomial.monomial(4, degree)


def test_division_law_random():
    rng.set_seed(12)
    with override_epsilon(1e-8):
        for n, m in [(8, 3), (20, 5), (6, 6), (15, 1), (10, 0)]:
            assert_division_law(Polynomial.random(n), _well_conditioned(m))


def test_quotient_degree_random():
    rng.set_seed(13)
    a, b = Polynomial.random(12), Polynomial.random(4)
    q, _ = a.divide(b)
    assert q.degree == 8


def test_product_divides_exactly():
    rng.set_seed(14)
    with override_epsilon(1e-8):
        p, q = Polynomial.random(7), _well_conditioned(3)
        quotient, remainder = (p * q).divide(q)
        assert_poly_equal(quotient, p)
        assert remainder.is_zero()


def test_logs_rejected_division(caplog):
    with caplog.at_level("DEBUG", logger="core.polynomial"):
        with pytest.raises(DivisionByZero):
            poly(1).divide(Polynomial.zero())
    assert "zero polynomial" in caplog.text


def test_tiny_leading_coefficient_divisor_rejected():
    # |L|^2 = 1e-12 is below the default tolerance
    divisor = poly(1, 1e-6)
    assert not divisor.is_zero()
    with pytest.raises(DivisionByZero):
        poly(1, 2, 3).divide(divisor)
    with override_epsilon(1e-14):
        assert_division_law(poly(1, 2), divisor)
