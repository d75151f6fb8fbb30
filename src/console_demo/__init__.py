"""Educational console program: parity lines, a spaced greeting and a method call."""

__version__ = "0.1.0"
