"""Demonstration object with a single action."""

from __future__ import annotations


MESSAGE = "MyClass.MyMethod() was called"


class MyClass:
    """Stateless object exposing one action."""

    def my_method(self) -> None:
        """Print the call notice to the current stdout."""
        print(MESSAGE)
