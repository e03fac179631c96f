## Per-post cleaning pipeline: raw post text -> normalized stream or None.
# baguette/src/baguette/cleaning/pipeline.py

from __future__ import annotations

from typing import Optional

from .assembler import assemble_stream
from .boundaries import collapse_boundaries
from .garbage_filter import is_garbage, strip_group_tag
from .hashtags import segment_hashtags
from .line_normalizer import normalize_lines
from .tokens import Line

# Order matters: hashtags are unpacked before blank lines are folded.
# A stage returning None rejects the post.
LINE_STAGES = (
    segment_hashtags,
    collapse_boundaries,
)


def normalize_post(text: str) -> Optional[list[Line]]:
    """
    Run the garbage filter and every line stage on one raw post.

    Returns the collapsed line sequence, or None if the post is rejected.
    """
    text = strip_group_tag(text)
    if is_garbage(text):
        return None

    lines: Optional[list[Line]] = normalize_lines(text)
    for stage in LINE_STAGES:
        lines = stage(lines)
        if lines is None:
            return None
    return lines


def clean_post(text: str, pad_token: str = "<PAD>") -> Optional[str]:
    """
    Turn one raw post into a single-line token stream.

    Returns None when the post is garbage or too short to carry any turn
    structure; that is a normal outcome, not an error.
    """
    lines = normalize_post(text)
    if lines is None:
        return None
    return assemble_stream(lines, pad_token)
