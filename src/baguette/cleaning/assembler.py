## Stage 5: flatten the line sequence into one padded token stream.
# baguette/src/baguette/cleaning/assembler.py

from __future__ import annotations

from typing import Iterable, Union

from .tokens import BOUNDARY, Boundary, Line, flatten, is_boundary

TRIPLE = 3


def pad_run(run_length: int, pad_token: str) -> list[str]:
    """
    Tokens for ``run_length`` consecutive boundaries.

    Every full group of three fuses into one ``pad*3`` token; a leftover
    of one or two boundaries becomes a single pad token.
    """
    triples, rest = divmod(run_length, TRIPLE)
    tokens = [pad_token * TRIPLE] * triples
    if rest:
        tokens.append(pad_token)
    return tokens


def to_valid_text(text: str) -> str:
    """Drop code points that cannot be encoded as UTF-8 (lone surrogates)."""
    return text.encode("utf-8", errors="ignore").decode("utf-8")


def assemble_stream(lines: Iterable[Line], pad_token: str) -> str:
    pieces: list[str] = []
    run = 0

    for piece in flatten(lines):
        if is_boundary(piece):
            run += 1
            continue
        if run:
            pieces.extend(pad_run(run, pad_token))
            run = 0
        pieces.append(piece)
    if run:
        pieces.extend(pad_run(run, pad_token))

    # sanitize before whitespace normalization
    stream = to_valid_text(" ".join(pieces))
    return " ".join(stream.split())


def split_stream(stream: str, pad_token: str) -> list[Union[str, Boundary]]:
    """
    Re-tokenize an assembled stream: pad tokens become boundaries again
    (a fused triple becomes three), every other token is content.
    """
    out: list[Union[str, Boundary]] = []
    for token in stream.split():
        if token == pad_token:
            out.append(BOUNDARY)
        elif token == pad_token * TRIPLE:
            out.extend([BOUNDARY] * TRIPLE)
        else:
            out.append(token)
    return out
