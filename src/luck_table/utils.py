"""Utility helpers for the luck table.

Includes:
    - ANSI colorized logging setup.
    - Percent/multiplier parsing for config values.
"""

from __future__ import annotations

import logging
import sys
from typing import Any


# === ANSI color codes for logger ===
class ColorFormatter(logging.Formatter):
    """Custom log formatter with ANSI color codes."""

    COLORS = {
        logging.DEBUG: "\033[92m",   # Green
        logging.INFO: "\033[94m",    # Blue
        logging.WARNING: "\033[93m", # Yellow
        logging.ERROR: "\033[91m",   # Red
        logging.CRITICAL: "\033[95m" # Magenta
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelno, self.RESET)
        message = super().format(record)
        return f"{color}{message}{self.RESET}"


def setup_logger(verbose: bool = False) -> logging.Logger:
    """Configure a colorized logger.

    Args:
        verbose: If True, sets log level to DEBUG; otherwise INFO.

    Returns:
        logging.Logger: Configured logger.
    """
    logger = logging.getLogger("luck_table")

    if logger.handlers:
        logger.setLevel(logging.DEBUG if verbose else logging.INFO)
        return logger

    # STDERR so the tables on STDOUT stay clean
    handler = logging.StreamHandler(sys.stderr)
    formatter = ColorFormatter("%(asctime)s [%(levelname)s]\t| %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.INFO)
    logger.propagate = False
    return logger


# === Helper functions ===
def parse_multiplier(value: Any) -> float:
    """Parse a multiplier given as a number (2.5) or a percent string ("250%").

    Args:
        value: The raw value.

    Returns:
        float: The multiplier (percent strings are divided by 100).

    Raises:
        ValueError: If the value is not numeric.
    """
    if isinstance(value, bool):
        raise ValueError(f"not a multiplier: {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("%"):
            return float(text[:-1].strip()) / 100
        return float(text)
    raise ValueError(f"not a multiplier: {value!r}")
