## Stage 3: unpack leading hashtags into their own segments.
# baguette/src/baguette/cleaning/hashtags.py

from __future__ import annotations

import re
from typing import Iterable

from .tokens import BOUNDARY, Line, Turns, line_from_words, line_words

HASHTAG_LED = re.compile(r"^#\S")


def is_hashtag_led(line: Line) -> bool:
    head = line[0] if isinstance(line, Turns) else line
    return isinstance(head, str) and HASHTAG_LED.match(head) is not None


def _is_hashtag(word) -> bool:
    return isinstance(word, str) and word.startswith("#")


def unpack_hashtags(line: Line) -> list[Line]:
    """
    ``"#A #B body"`` -> ``["#A", BOUNDARY, "#B", BOUNDARY, "body"]``.

    Extraction continues while the remainder starts with ``#``; whatever
    follows the last hashtag is kept as one line.
    """
    out: list[Line] = []
    words = line_words(line)

    while True:
        head, rest = words[0], words[1:]
        if not rest:
            out.append(head)
            break

        out.extend([head, BOUNDARY])
        if not _is_hashtag(rest[0]):
            out.append(line_from_words(rest))
            break
        words = rest

    return out


def segment_hashtags(lines: Iterable[Line]) -> list[Line]:
    out: list[Line] = []
    for line in lines:
        if is_hashtag_led(line):
            out.extend(unpack_hashtags(line))
        else:
            out.append(line)
    return out
