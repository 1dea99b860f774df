"""Polynomials with complex coefficients: arithmetic, long division, Horner evaluation."""

import logging
from typing import Iterable

from core.complex_number import ComplexNumber, as_complex_number, coerce_scalar
from core.errors import DivisionByZero

logger = logging.getLogger(__name__)


class Polynomial:
    """Polynomial over the complex numbers. coeffs[0] = constant term.

    Always stored in canonical form: never empty, and for degree > 0 the
    leading coefficient is nonzero. Instances are immutable and every
    operation returns a new Polynomial.
    """

    __slots__ = ('_coeffs',)

    def __init__(self, coeffs: Iterable = ()):
        coeffs = [as_complex_number(c) for c in coeffs]
        if not coeffs:
            coeffs = [ComplexNumber.zero()]
        d = len(coeffs) - 1
        while d > 0 and coeffs[d].is_zero():
            d -= 1
        self._coeffs = tuple(coeffs[:d + 1])

    @property
    def degree(self) -> int:
        return len(self._coeffs) - 1

    @property
    def coefficients(self) -> tuple[ComplexNumber, ...]:
        return self._coeffs

    @property
    def leading_coefficient(self) -> ComplexNumber:
        return self._coeffs[-1]

    def __len__(self):
        return len(self._coeffs)

    def __bool__(self):
        return not self.is_zero()

    def __iter__(self):
        return iter(self._coeffs)

    def __getitem__(self, i: int) -> ComplexNumber:
        """Coefficient of x^i; zero above the degree."""
        if i < 0:
            raise IndexError("No negative exponents")
        if i > self.degree:
            return ComplexNumber.zero()
        return self._coeffs[i]

    # --- arithmetic ---

    def add(self, other: 'Polynomial') -> 'Polynomial':
        n = max(self.degree, other.degree) + 1
        return Polynomial([self[i] + other[i] for i in range(n)])

    def subtract(self, other: 'Polynomial') -> 'Polynomial':
        n = max(self.degree, other.degree) + 1
        return Polynomial([self[i] - other[i] for i in range(n)])

    def multiply(self, other: 'Polynomial') -> 'Polynomial':
        """Schoolbook product, O(n*m).

        Transform-based multiplication is intentionally not used.
        """
        a, b = self._coeffs, other._coeffs
        result = [ComplexNumber.zero()] * (len(a) + len(b) - 1)
        for i, ai in enumerate(a):
            for j, bj in enumerate(b):
                result[i + j] = result[i + j] + ai * bj
        return Polynomial(result)

    def scale(self, factor) -> 'Polynomial':
        factor = as_complex_number(factor)
        return Polynomial([c * factor for c in self._coeffs])

    def divide(self, divisor: 'Polynomial') -> tuple['Polynomial', 'Polynomial']:
        """Long division. Returns (quotient, remainder) with self == divisor*q + r.

        The remainder is zero or has degree below the divisor's. Raises
        DivisionByZero when divisor is the zero polynomial, and also when its
        leading coefficient has squared magnitude below the tolerance (e.g.
        1 + 1e-6x), since each quotient term divides by that coefficient.
        """
        if divisor.is_zero():
            logger.debug("Polynomial division by the zero polynomial rejected")
            raise DivisionByZero("Division by zero polynomial")

        n, m = self.degree, divisor.degree
        if n < m:
            logger.debug("Dividend degree %d below divisor degree %d, quotient is zero", n, m)
            return Polynomial.zero(), Polynomial(self._coeffs)

        remainder = list(self._coeffs)
        quotient = [ComplexNumber.zero()] * (n - m + 1)
        lead = divisor._coeffs[m]
        for i in range(n, m - 1, -1):
            if remainder[i].is_zero():
                continue
            term = remainder[i] / lead
            quotient[i - m] = term
            for j, bj in enumerate(divisor._coeffs):
                remainder[i - m + j] = remainder[i - m + j] - bj * term

        # positions m..n have been eliminated
        return Polynomial(quotient), Polynomial(remainder[:m])

    def evaluate(self, x) -> ComplexNumber:
        """Evaluate at x using Horner's method."""
        x = as_complex_number(x)
        result = self._coeffs[self.degree]
        for i in range(self.degree - 1, -1, -1):
            result = result * x + self._coeffs[i]
        return result

    # --- predicates ---

    def is_zero(self) -> bool:
        return self.degree == 0 and self._coeffs[0].is_zero()

    def __eq__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        if self.degree != other.degree:
            return False
        return all(a == b for a, b in zip(self._coeffs, other._coeffs))

    __hash__ = None

    # --- operators ---

    def __add__(self, other):
        other = _as_polynomial(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        other = _as_polynomial(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        other = _as_polynomial(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other):
        if isinstance(other, Polynomial):
            return self.multiply(other)
        if coerce_scalar(other) is None:
            return NotImplemented
        return self.scale(other)

    __rmul__ = __mul__

    def __neg__(self):
        return Polynomial([-c for c in self._coeffs])

    def __divmod__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.divide(other)

    def __floordiv__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.divide(other)[0]

    def __mod__(self, other):
        if not isinstance(other, Polynomial):
            return NotImplemented
        return self.divide(other)[1]

    def __call__(self, x) -> ComplexNumber:
        return self.evaluate(x)

    def __str__(self):
        if self.is_zero():
            return "0"
        terms = []
        for e in range(self.degree, -1, -1):
            c = self._coeffs[e]
            if c.is_zero():
                continue
            coeff = str(c)
            if e > 0 and coeff.endswith("i"):
                coeff = f"({coeff})"
            if e == 0:
                terms.append(coeff)
            elif e == 1:
                terms.append(f"{coeff}x")
            else:
                terms.append(f"{coeff}x^{e}")
        return " + ".join(terms)

    def __repr__(self):
        return f"Polynomial([{', '.join(repr(c) for c in self._coeffs)}])"

    # --- constructors ---

    @staticmethod
    def zero() -> 'Polynomial':
        return Polynomial([ComplexNumber.zero()])

    @staticmethod
    def monomial(coeff, power: int) -> 'Polynomial':
        """coeff * x^power."""
        if power < 0:
            raise ValueError("No negative exponents")
        return Polynomial([ComplexNumber.zero()] * power + [as_complex_number(coeff)])

    @staticmethod
    def random(degree: int, low: float = -5.0, high: float = 5.0) -> 'Polynomial':
        """Random polynomial of exactly the given degree.

        Coefficients are uniform in [low, high) per component; for degree > 0
        the leading coefficient is drawn from real [1, 6), imag [0, 5) so it is
        never zero.
        """
        if degree < 0:
            raise ValueError(f"Degree must be non-negative, got {degree}")
        coeffs = [ComplexNumber.random(low, high) for _ in range(degree + 1)]
        if degree > 0:
            lead = ComplexNumber.random(0.0, 5.0)
            coeffs[degree] = ComplexNumber(lead.real + 1.0, lead.imag)
        return Polynomial(coeffs)


def _as_polynomial(value):
    if isinstance(value, Polynomial):
        return value
    scalar = coerce_scalar(value)
    if scalar is None:
        return None
    return Polynomial([scalar])
