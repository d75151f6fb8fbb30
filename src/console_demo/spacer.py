"""Character spacing step."""

from __future__ import annotations

from typing import TextIO


def space_characters(text: str) -> str:
    """Render every character followed by a single space."""
    return "".join(f"{char} " for char in text)


def write_spaced(text: str, stream: TextIO) -> None:
    """Write the spaced rendering of text on one line, ending with a line break."""
    stream.write(space_characters(text))
    print(file=stream)
