"""Runs the three console steps in their fixed order."""

from __future__ import annotations

import logging
import sys
from contextlib import redirect_stdout
from typing import Any, Dict, Optional, TextIO

from .config import build_config
from .demo import MyClass
from .parity import report_parity
from .spacer import write_spaced


STEP_ORDER = ("parity", "spacer", "demo")


def _run_parity(config: Dict[str, Any], stream: TextIO, logger: logging.Logger) -> None:
    numbers = config["parity"]["numbers"]
    written = report_parity(numbers, stream)
    logger.debug("parity lines written: %d", written)


def _run_spacer(config: Dict[str, Any], stream: TextIO, logger: logging.Logger) -> None:
    text = config["spacer"]["text"]
    write_spaced(text, stream)
    logger.debug("spaced characters written: %d", len(text))


def _run_demo(config: Dict[str, Any], stream: TextIO, logger: logging.Logger) -> None:
    my_object = MyClass()
    with redirect_stdout(stream):
        my_object.my_method()
    logger.debug("demo action invoked on %s", type(my_object).__name__)


_STEPS = {
    "parity": _run_parity,
    "spacer": _run_spacer,
    "demo": _run_demo,
}


def run_program(
    config: Optional[Dict[str, Any]] = None,
    stream: Optional[TextIO] = None,
    logger: Optional[logging.Logger] = None,
) -> int:
    """Run parity, spacer and demo steps against stream and return the exit code."""
    config = config if config is not None else build_config()
    stream = stream if stream is not None else sys.stdout
    logger = logger or logging.getLogger("console_demo")

    for name in STEP_ORDER:
        logger.info("STEP_START: %s", name)
        _STEPS[name](config, stream, logger)
        logger.info("STEP_DONE: %s", name)

    stream.flush()
    return 0
