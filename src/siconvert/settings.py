"""Environment-driven configuration.

Values are read on every call so that tests and long-running processes pick
up changes to the environment.
"""

from __future__ import annotations

import logging
import os

DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_API_TITLE = "siconvert API"


def log_level() -> int:
    """Return the logging level named by ``SICONVERT_LOG_LEVEL``."""

    raw = os.getenv("SICONVERT_LOG_LEVEL", DEFAULT_LOG_LEVEL).strip().upper()
    level = logging.getLevelName(raw)
    if not isinstance(level, int):
        return logging.getLevelName(DEFAULT_LOG_LEVEL)
    return level


def magnitude_precision() -> int | None:
    """Return significant digits from ``SICONVERT_PRECISION``, or ``None``."""

    raw = os.getenv("SICONVERT_PRECISION")
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def api_title() -> str:
    return os.getenv("SICONVERT_API_TITLE", DEFAULT_API_TITLE)
