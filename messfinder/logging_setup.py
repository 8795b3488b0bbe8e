"""Logging configuration for the command-line entrypoint.

Diagnostics go to stderr so they never mix with the report stream.
"""

from __future__ import annotations

import logging
import os
import sys

LOG_LEVEL_ENV = "MESSFINDER_LOG_LEVEL"
DEFAULT_LOG_LEVEL = logging.WARNING
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def log_level_from_env() -> int:
    """Resolve ``MESSFINDER_LOG_LEVEL``; unknown names fall back to WARNING."""
    raw = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not raw:
        return DEFAULT_LOG_LEVEL
    level = logging.getLevelName(raw)
    return level if isinstance(level, int) else DEFAULT_LOG_LEVEL


def configure_logging() -> None:
    logging.basicConfig(level=log_level_from_env(), format=LOG_FORMAT, stream=sys.stderr)
