"""Parity reporting step: one even/odd line per integer."""

from __future__ import annotations

from typing import Iterable, TextIO


def describe_parity(number: int) -> str:
    """Return the report line for a single integer."""
    label = "even" if number % 2 == 0 else "odd"
    return f"{number} is {label}"


def report_parity(numbers: Iterable[int], stream: TextIO) -> int:
    """
    Write one parity line per number in input order, then a blank line.

    Returns the number of report lines written, excluding the trailing blank line.
    """
    written = 0
    for number in numbers:
        print(describe_parity(number), file=stream)
        written += 1
    print(file=stream)
    return written
