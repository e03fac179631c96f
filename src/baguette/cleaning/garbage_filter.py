## Stage 1: drop spam / unusable posts before any rewriting.
# baguette/src/baguette/cleaning/garbage_filter.py

import re

# The group tagging itself in its own posts; carries no structure.
GROUP_TAG = re.compile(r"@bugurt_thread", re.IGNORECASE)

# Links, the news channel hashtag and [club123|name] mentions.
SPAM_SIGNATURE = re.compile(r"(://|#БТnews|\[CLUB\d+\|.+\])")

STRUCTURE_CHARS = ("@", ">")


def strip_group_tag(text: str) -> str:
    """Delete every group self-mention from ``text``."""
    return GROUP_TAG.sub("", text)


def is_garbage(text: str) -> bool:
    """
    Return True if a raw post should be dropped.

    ``text`` is expected to be tag-stripped already (see strip_group_tag).
    A post is garbage when it has none of the characters that mark turns
    (``@`` or ``>``) or when it carries a spam signature.
    """
    if not any(ch in text for ch in STRUCTURE_CHARS):
        return True
    return SPAM_SIGNATURE.search(text) is not None
