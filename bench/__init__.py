"""Benchmark harness: timing, complexity profiles, table reporting."""

from bench.metrics import Timer
from bench.analysis import (Profile, Row, PROFILES, ADDITION, MULTIPLICATION,
                            DIVISION, EVALUATION, measure, within_expectation)
from bench.report import format_table
from bench.logging_setup import setup_logging
