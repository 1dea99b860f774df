"""Failure kinds raised by the arithmetic core."""


class DivisionByZero(ZeroDivisionError):
    """Division by a zero-magnitude scalar or by the zero polynomial.

    Subclasses the builtin ZeroDivisionError so callers can catch either.
    """

    pass
