"""Logging configuration for the benchmark entry point."""

import logging
import sys
from typing import Optional


def setup_logging(
    level: str = "INFO",
    format_string: Optional[str] = None
) -> None:
    """
    Configure the root logger once for console runs.

    Args:
        level: Logging level name (DEBUG, INFO, WARNING, ERROR)
        format_string: Custom format string (uses default if None)
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown logging level: {level}")

    logging.basicConfig(
        level=numeric,
        format=format_string,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
