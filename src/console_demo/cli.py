"""CLI orchestration module; coordinates logging and the program steps."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, Sequence, Tuple

from .config import build_config, resolve_log_level
from .logging_utils import configure_logging
from .program import run_program


def parse_args(argv: Optional[Sequence[str]] = None) -> Tuple[argparse.Namespace, List[str]]:
    """
    Parse command-line arguments.

    Only --log-level is recognised; anything else is returned unparsed and ignored.
    """
    parser = argparse.ArgumentParser(
        prog="console-demo",
        description="Print parity lines, a spaced greeting and a method call notice.",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log verbosity on stderr (DEBUG, INFO, WARNING, ERROR).",
    )
    return parser.parse_known_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the console program as the process entrypoint."""
    args, ignored = parse_args(argv)
    logger = configure_logging(resolve_log_level(args.log_level))
    logger.info("STEP_START: cli")
    if ignored:
        logger.debug("Ignoring arguments: %s", ignored)

    try:
        exit_code = run_program(build_config(), sys.stdout, logger)
    except KeyboardInterrupt:
        logger.warning("STEP_ABORTED: run_program")
        print("Interrupted by user.", file=sys.stderr)
        return 130
    except Exception as exc:
        logger.error("STEP_FAILED: run_program")
        print(f"Program failed: {exc}", file=sys.stderr)
        return 1

    logger.info("STEP_DONE: cli")
    return exit_code
