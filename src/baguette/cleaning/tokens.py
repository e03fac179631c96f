## Line representation shared by the cleaning stages.
# baguette/src/baguette/cleaning/tokens.py

from __future__ import annotations

from typing import Iterable, Iterator, Union


class Boundary:
    """
    Structural marker between two turns or segments of a post.

    Kept as its own type (never as text) until the assembler substitutes
    the pad token, so post content can never be mistaken for a boundary.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "BOUNDARY"


BOUNDARY = Boundary()


class Turns(tuple):
    """
    One line whose words include BOUNDARY, e.g. ``"@ HELLO"`` or ``"HELLO @"``.

    Such a line still counts as a single line for the minimum-structure
    check; its boundaries only surface when the stream is assembled.
    """

    def __repr__(self) -> str:
        return f"Turns({list(self)!r})"


# A line is content text ("" for a blank line), BOUNDARY, or Turns.
Line = Union[str, Boundary, Turns]


def is_boundary(line) -> bool:
    return line is BOUNDARY


def is_blank(line: Line) -> bool:
    return isinstance(line, str) and not line.strip()


def line_words(line: Line) -> list:
    """Words of a content line; BOUNDARY entries stand for inline markers."""
    if isinstance(line, Turns):
        return list(line)
    return line.split()


def line_from_words(words: list) -> Line:
    """Inverse of line_words: plain text, a bare BOUNDARY, or Turns."""
    if not any(is_boundary(w) for w in words):
        return " ".join(words)
    if len(words) == 1:
        return BOUNDARY
    return Turns(words)


def flatten(lines: Iterable[Line]) -> Iterator[Union[str, Boundary]]:
    """Yield text pieces and boundaries in reading order."""
    for line in lines:
        if isinstance(line, Turns):
            yield from line
        else:
            yield line
