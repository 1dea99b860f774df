"""Core primitives: complex scalars, polynomials, tolerance, deterministic RNG."""

from core.tolerance import (DEFAULT_EPSILON, get_epsilon, set_epsilon,
                            reset_epsilon, override_epsilon)
from core.errors import DivisionByZero
from core.complex_number import ComplexNumber, as_complex_number
from core.polynomial import Polynomial
from core import rng
