## Stage 2: trim, upper-case and split inline turn markers.
# baguette/src/baguette/cleaning/line_normalizer.py

from __future__ import annotations

from .tokens import BOUNDARY, Line, Turns

TURN_MARKER = "@"
TURN_SPLIT = f" {TURN_MARKER} "


def upper_per_char(line: str) -> str:
    """
    Upper-case ``line`` without changing its length.

    Characters whose upper case is longer than one code point (``ß`` ->
    ``SS``) are left as they are.
    """
    upper = line.upper()
    if len(upper) == len(line):
        return upper
    return "".join(ch.upper() if len(ch.upper()) == 1 else ch for ch in line)


def classify_piece(piece: str) -> Line:
    """
    One piece between two `` @ `` splits becomes one line.

    A piece that is just ``@`` is a boundary line. A piece that still holds
    a standalone ``@`` word (``"@ HELLO"``, ``"HELLO @"``) stays one line
    with the marker kept inline as Turns. Anything else is text as is.
    """
    if piece == TURN_MARKER:
        return BOUNDARY

    words = piece.split()
    if TURN_MARKER not in words:
        return piece
    return Turns(BOUNDARY if w == TURN_MARKER else w for w in words)


def split_turns(line: str) -> list[Line]:
    """
    Split one normalized line on every `` @ `` occurrence.

    ``"A @ B"`` becomes ``["A", BOUNDARY, "B"]``. An ``@`` glued to a word
    is content. A blank line stays a single empty string.
    """
    out: list[Line] = []
    for i, piece in enumerate(line.split(TURN_SPLIT)):
        if i:
            out.append(BOUNDARY)
        out.append(classify_piece(piece))
    return out


def normalize_line(line: str) -> list[Line]:
    return split_turns(upper_per_char(line.strip()))


def normalize_lines(text: str) -> list[Line]:
    """Normalize every raw line of a post, in order."""
    lines: list[Line] = []
    for raw in text.split("\n"):
        lines.extend(normalize_line(raw))
    return lines
