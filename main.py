"""Polynomial Operations Performance Analysis: entry point.

Times addition, multiplication, division and evaluation over doubling operand
sizes and prints one table per operation.

Usage: python main.py [seed] [--quick] [--verbose]
"""

import logging
import sys

from core import rng
from bench.analysis import PROFILES, measure, within_expectation
from bench.logging_setup import setup_logging
from bench.report import format_table

logger = logging.getLogger(__name__)

DEFAULT_SEED = 42
QUICK_DIVISOR = 10


def run_analysis(seed: int = DEFAULT_SEED, quick: bool = False) -> dict[str, bool]:
    """Run every profile and print its table.

    Returns profile name -> whether the measured growth matched expectations.
    """
    rng.set_seed(seed)

    print("Polynomial Operations Performance Analysis")
    print("=" * 70)
    print(f"Seed: {seed}{' (quick)' if quick else ''}")
    print()

    verdicts = {}
    for profile in PROFILES:
        iterations = max(1, profile.iterations // QUICK_DIVISOR) if quick else None
        rows = measure(profile, iterations=iterations)
        print(format_table(profile, rows))
        print()
        verdicts[profile.name] = within_expectation(rows, profile)
        if not verdicts[profile.name]:
            logger.warning("%s growth deviates from expected ratio %.1f",
                           profile.name, profile.expected_ratio)

    print("Performance analysis complete.")
    return verdicts


def main(argv: list[str] | None = None):
    argv = sys.argv[1:] if argv is None else argv
    quick = "--quick" in argv
    positional = [a for a in argv if not a.startswith("--")]
    seed = int(positional[0]) if positional else DEFAULT_SEED

    setup_logging("INFO" if "--verbose" in argv else "WARNING")
    run_analysis(seed=seed, quick=quick)


if __name__ == "__main__":
    main()
