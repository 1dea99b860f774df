"""Immutable complex scalar with tolerance-based comparison."""

import logging
import math
from numbers import Number

from core import rng
from core.errors import DivisionByZero
from core.tolerance import get_epsilon

logger = logging.getLogger(__name__)


class ComplexNumber:
    """Complex value real + imag*i. Immutable; every operation returns a new value.

    Equality is approximate: two values are equal when both component-wise
    differences are below the shared tolerance. That relation is not
    transitive near the boundary, so the type is not hashable.
    """

    __slots__ = ('real', 'imag')

    def __init__(self, real: float = 0.0, imag: float = 0.0):
        object.__setattr__(self, 'real', float(real))
        object.__setattr__(self, 'imag', float(imag))

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    # --- arithmetic ---

    def add(self, other: 'ComplexNumber') -> 'ComplexNumber':
        return ComplexNumber(self.real + other.real, self.imag + other.imag)

    def subtract(self, other: 'ComplexNumber') -> 'ComplexNumber':
        return ComplexNumber(self.real - other.real, self.imag - other.imag)

    def multiply(self, other: 'ComplexNumber') -> 'ComplexNumber':
        return ComplexNumber(self.real * other.real - self.imag * other.imag,
                             self.real * other.imag + self.imag * other.real)

    def divide(self, other: 'ComplexNumber') -> 'ComplexNumber':
        """Quotient self / other. Raises DivisionByZero when |other|^2 < epsilon."""
        d = other.real * other.real + other.imag * other.imag
        if d < get_epsilon():
            logger.debug("Scalar division by %r rejected (|b|^2=%g)", other, d)
            raise DivisionByZero(f"Division by zero-magnitude value {other}")
        return ComplexNumber((self.real * other.real + self.imag * other.imag) / d,
                             (self.imag * other.real - self.real * other.imag) / d)

    def conjugate(self) -> 'ComplexNumber':
        return ComplexNumber(self.real, -self.imag)

    def magnitude_squared(self) -> float:
        return self.real * self.real + self.imag * self.imag

    # --- predicates ---

    def is_zero(self) -> bool:
        eps = get_epsilon()
        return abs(self.real) < eps and abs(self.imag) < eps

    def is_negative(self) -> bool:
        """True for a negative real value (imaginary part within tolerance of 0)."""
        eps = get_epsilon()
        return self.real < -eps and abs(self.imag) < eps

    # --- operators ---

    def __add__(self, other):
        other = coerce_scalar(other)
        if other is None:
            return NotImplemented
        return self.add(other)

    def __radd__(self, other):
        other = coerce_scalar(other)
        if other is None:
            return NotImplemented
        return other.add(self)

    def __sub__(self, other):
        other = coerce_scalar(other)
        if other is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        other = coerce_scalar(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other):
        other = coerce_scalar(other)
        if other is None:
            return NotImplemented
        return self.multiply(other)

    def __rmul__(self, other):
        other = coerce_scalar(other)
        if other is None:
            return NotImplemented
        return other.multiply(self)

    def __truediv__(self, other):
        other = coerce_scalar(other)
        if other is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        other = coerce_scalar(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __neg__(self):
        return ComplexNumber(-self.real, -self.imag)

    def __pos__(self):
        return self

    def __abs__(self):
        return math.hypot(self.real, self.imag)

    def __eq__(self, other):
        other = coerce_scalar(other)
        if other is None:
            return NotImplemented
        eps = get_epsilon()
        return abs(self.real - other.real) < eps and abs(self.imag - other.imag) < eps

    __hash__ = None

    def __bool__(self):
        return not self.is_zero()

    def __complex__(self):
        return complex(self.real, self.imag)

    def __repr__(self):
        return f"ComplexNumber({self.real!r}, {self.imag!r})"

    def __str__(self):
        eps = get_epsilon()
        if abs(self.imag) < eps:
            return f"{self.real:.2f}"
        if abs(self.real) < eps:
            return f"{self.imag:.2f}i"
        return f"{self.real:.2f}{self.imag:+.2f}i"

    # --- constructors ---

    @staticmethod
    def from_complex(value: complex) -> 'ComplexNumber':
        return ComplexNumber(value.real, value.imag)

    @staticmethod
    def random(low: float = -5.0, high: float = 5.0) -> 'ComplexNumber':
        """Both components drawn uniformly from [low, high) using core.rng."""
        return ComplexNumber(rng.uniform(low, high), rng.uniform(low, high))

    @staticmethod
    def zero():
        return ComplexNumber(0.0, 0.0)

    @staticmethod
    def one():
        return ComplexNumber(1.0, 0.0)


def coerce_scalar(value):
    """ComplexNumber for value, or None when the type is not supported."""
    if isinstance(value, ComplexNumber):
        return value
    if isinstance(value, Number):
        try:
            c = complex(value)
        except TypeError:
            return None
        return ComplexNumber(c.real, c.imag)
    return None


def as_complex_number(value) -> ComplexNumber:
    """Coerce a ComplexNumber, int, float or complex. Raises TypeError otherwise."""
    result = coerce_scalar(value)
    if result is None:
        raise TypeError(f"Cannot use {type(value).__name__} as a complex coefficient")
    return result
