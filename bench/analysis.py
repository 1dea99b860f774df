"""Empirical complexity measurement for the polynomial operations.

Each Profile times one operation over a doubling series of operand sizes.
For an O(n) operation the time ratio between consecutive rows should approach
2.0, for O(n^2) it should approach 4.0.
"""

import logging
import statistics
from dataclasses import dataclass, field
from functools import partial
from typing import Callable

from core.complex_number import ComplexNumber
from core.polynomial import Polynomial
from bench.metrics import Timer

logger = logging.getLogger(__name__)

DIVISOR_DEGREE = 50
EVAL_POINT = ComplexNumber(1.5, 0.5)


@dataclass(frozen=True)
class Profile:
    """How to benchmark one operation and what growth to expect."""
    name: str
    time_complexity: str
    space_complexity: str
    sizes: tuple[int, ...]
    warmup: int
    iterations: int
    setup: Callable[[int], Callable[[], object]]
    normalizer: Callable[[int], float]
    expected_ratio: float
    size_label: str = "Size"
    time_unit: str = "ms"
    per_unit_label: str = "Time/n (us)"
    per_unit_scale: float = 1e6
    notes: tuple[str, ...] = ()

    @property
    def time_scale(self) -> float:
        return {"s": 1.0, "ms": 1e3, "us": 1e6, "ns": 1e9}[self.time_unit]


@dataclass
class Row:
    size: int
    seconds: float
    per_unit: float
    ratio: float = 0.0
    iterations: int = field(default=0, repr=False)


def _linear(n: int) -> float:
    return float(n)


def _quadratic(n: int) -> float:
    return float(n) * float(n)


def _setup_add(size: int):
    p1, p2 = Polynomial.random(size), Polynomial.random(size)
    return partial(p1.add, p2)


def _setup_multiply(size: int):
    p1, p2 = Polynomial.random(size), Polynomial.random(size)
    return partial(p1.multiply, p2)


def _setup_divide(size: int):
    dividend = Polynomial.random(size)
    divisor = Polynomial.random(DIVISOR_DEGREE)
    return partial(dividend.divide, divisor)


def _setup_evaluate(size: int):
    p = Polynomial.random(size)
    return partial(p.evaluate, EVAL_POINT)


ADDITION = Profile(
    name="addition",
    time_complexity="O(max(n, m))",
    space_complexity="O(max(n, m))",
    sizes=(100, 200, 400, 800, 1600, 3200),
    warmup=10,
    iterations=1000,
    setup=_setup_add,
    normalizer=_linear,
    expected_ratio=2.0,
    notes=("Ratio should be approximately 2.0 for O(n) complexity.",
           "Time/n should remain relatively constant."),
)

MULTIPLICATION = Profile(
    name="multiplication",
    time_complexity="O(n * m) [Naive Algorithm]",
    space_complexity="O(n + m)",
    sizes=(50, 100, 200, 400, 800),
    warmup=5,
    iterations=100,
    setup=_setup_multiply,
    normalizer=_quadratic,
    expected_ratio=4.0,
    per_unit_label="Time/n^2 (ns)",
    per_unit_scale=1e9,
    notes=("Ratio should be approximately 4.0 for O(n^2) complexity.",
           "Time/n^2 should remain relatively constant.",
           "FFT-based multiplication could achieve O(n log n) but is not used."),
)

DIVISION = Profile(
    name="division",
    time_complexity="O((n - m + 1) * m)",
    space_complexity="O(n)",
    sizes=(100, 200, 400, 800, 1600),
    warmup=5,
    iterations=100,
    setup=_setup_divide,
    normalizer=_linear,
    expected_ratio=2.0,
    size_label="Dividend Size",
    notes=(f"Divisor degree is fixed at {DIVISOR_DEGREE}, so complexity is O(n).",
           "Ratio should be approximately 2.0 when doubling dividend size."),
)

EVALUATION = Profile(
    name="evaluation",
    time_complexity="O(n) [Horner's Method]",
    space_complexity="O(1)",
    sizes=(100, 200, 400, 800, 1600, 3200, 6400),
    warmup=100,
    iterations=10000,
    setup=_setup_evaluate,
    normalizer=_linear,
    expected_ratio=2.0,
    time_unit="us",
    per_unit_label="Time/n (ns)",
    per_unit_scale=1e9,
    notes=("Ratio should be approximately 2.0 for O(n) complexity.",
           "Time/n should remain relatively constant.",
           "Horner's method visits each coefficient exactly once."),
)

PROFILES = (ADDITION, MULTIPLICATION, DIVISION, EVALUATION)


def measure(profile: Profile, iterations: int | None = None,
            sizes: tuple[int, ...] | None = None,
            warmup: int | None = None) -> list[Row]:
    """Time profile's operation at each size and return one Row per size.

    Overrides replace the profile's own iteration count, sizes and warm-up.
    """
    iterations = profile.iterations if iterations is None else iterations
    sizes = profile.sizes if sizes is None else tuple(sizes)
    warmup = profile.warmup if warmup is None else warmup
    if iterations < 1:
        raise ValueError(f"iterations must be at least 1, got {iterations}")
    if not sizes:
        raise ValueError("sizes must not be empty")

    rows = []
    prev = 0.0
    for size in sizes:
        op = profile.setup(size)
        for _ in range(warmup):
            op()

        timer = Timer()
        timer.start()
        for _ in range(iterations):
            op()
        avg = timer.stop() / iterations

        ratio = avg / prev if prev > 0 else 0.0
        row = Row(size=size, seconds=avg,
                  per_unit=avg / profile.normalizer(size),
                  ratio=ratio, iterations=iterations)
        logger.info("%s size=%d avg=%.3gs ratio=%.2f",
                    profile.name, size, avg, ratio)
        rows.append(row)
        prev = avg
    return rows


def within_expectation(rows: list[Row], profile: Profile, slack: float = 0.5) -> bool:
    """True when the median doubling ratio is within slack of the expected ratio.

    slack is relative: 0.5 accepts [0.5, 1.5] times the expected ratio.
    """
    ratios = [r.ratio for r in rows[1:] if r.ratio > 0]
    if not ratios:
        return False
    median = statistics.median(ratios)
    low = profile.expected_ratio * (1 - slack)
    high = profile.expected_ratio * (1 + slack)
    return low <= median <= high
