"""Shared absolute tolerance for approximate comparisons.

Every ComplexNumber and Polynomial comparison reads the current value at call
time. Set POLYNOMIAL_EPSILON in the environment to change the start-up value,
call set_epsilon() to change the process-wide default, or use
override_epsilon() for a value local to the current thread or task.
"""

import logging
import os
from contextlib import contextmanager
from contextvars import ContextVar

logger = logging.getLogger(__name__)

DEFAULT_EPSILON = 1e-10


def _validate(eps) -> float:
    eps = float(eps)
    if not eps > 0:
        raise ValueError(f"Tolerance must be positive, got {eps}")
    return eps


# Process-wide default, used wherever no override is active
_epsilon = _validate(os.environ.get("POLYNOMIAL_EPSILON", DEFAULT_EPSILON))

_override: ContextVar[float] = ContextVar("polynomial_epsilon")


def get_epsilon() -> float:
    return _override.get(_epsilon)


def set_epsilon(eps: float):
    """Set the process-wide tolerance. Raises ValueError unless eps > 0."""
    global _epsilon
    _epsilon = _validate(eps)
    logger.debug("Tolerance set to %g", _epsilon)


def reset_epsilon():
    set_epsilon(DEFAULT_EPSILON)


@contextmanager
def override_epsilon(eps: float):
    """Use a different tolerance inside a with-block.

    The override is local to the current thread or asyncio task; other
    threads keep seeing the process-wide value.
    """
    token = _override.set(_validate(eps))
    try:
        yield
    finally:
        _override.reset(token)
