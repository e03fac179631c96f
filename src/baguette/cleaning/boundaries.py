## Stage 4: fold blank lines into boundaries and enforce minimum structure.
# baguette/src/baguette/cleaning/boundaries.py

from __future__ import annotations

from typing import Optional

from .tokens import BOUNDARY, Line, Turns, is_blank, is_boundary, line_from_words

MIN_LINES = 3


def trim_blank(lines: list[Line]) -> list[Line]:
    """Drop blank lines at both ends of the sequence."""
    start, end = 0, len(lines)
    while start < end and is_blank(lines[start]):
        start += 1
    while end > start and is_blank(lines[end - 1]):
        end -= 1
    return lines[start:end]


def fold_blank_runs(lines: list[Line]) -> list[Line]:
    """Replace every run of blank lines with a single BOUNDARY."""
    out: list[Line] = []
    in_run = False
    for line in lines:
        if is_blank(line):
            if not in_run:
                out.append(BOUNDARY)
            in_run = True
            continue
        in_run = False
        out.append(line)
    return out


def _only_boundaries(line: Line) -> bool:
    if isinstance(line, Turns):
        return all(is_boundary(w) for w in line)
    return is_boundary(line)


def _trim_inline(line: Line, leading: bool) -> Line:
    if not isinstance(line, Turns):
        return line
    words = list(line)
    if leading:
        while is_boundary(words[0]):
            words.pop(0)
    else:
        while is_boundary(words[-1]):
            words.pop()
    return line_from_words(words)


def strip_edge_boundaries(lines: list[Line]) -> list[Line]:
    """Drop boundaries before the first and after the last content word."""
    start, end = 0, len(lines)
    while start < end and _only_boundaries(lines[start]):
        start += 1
    while end > start and _only_boundaries(lines[end - 1]):
        end -= 1
    lines = lines[start:end]

    if lines:
        lines[0] = _trim_inline(lines[0], leading=True)
        lines[-1] = _trim_inline(lines[-1], leading=False)
    return lines


def collapse_boundaries(lines: list[Line]) -> Optional[list[Line]]:
    """
    Return the collapsed sequence, or None when the post is too short.

    A post needs at least three lines after trimming blank edges (two
    internal line breaks), and still three once dangling boundaries at
    either end are removed.
    """
    lines = trim_blank(lines)
    if len(lines) < MIN_LINES:
        return None

    lines = strip_edge_boundaries(fold_blank_runs(lines))
    if len(lines) < MIN_LINES:
        return None
    return lines
