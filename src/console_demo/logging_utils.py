"""Logging helpers; all log records go to stderr so stdout stays exact."""

from __future__ import annotations

import logging
import sys
from typing import Optional

LOGGER_NAME = "console_demo"
HANDLER_NAME = "console_demo.stderr"
LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


def _resolve_level(level: Optional[str]) -> int:
    """Map a level name to its numeric value; unknown names become WARNING."""
    resolved = getattr(logging, (level or "WARNING").upper(), None)
    return resolved if isinstance(resolved, int) else logging.WARNING


def find_stderr_handler(logger: logging.Logger) -> Optional[logging.Handler]:
    """Return the handler installed by configure_logging, if any."""
    for handler in logger.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler
    return None


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Configure the package logger for the program runtime.

    Repeat calls only adjust the level of the stderr handler installed here;
    handlers attached by other code are left untouched.
    """
    log_level = _resolve_level(level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(log_level)
    logger.propagate = False

    handler = find_stderr_handler(logger)
    if handler is None:
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
    handler.setLevel(log_level)

    return logger
