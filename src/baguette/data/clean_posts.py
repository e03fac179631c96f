#!/usr/bin/env python3
"""
Raw post dump -> training records.

Reads the file written by scrape_posts.py (posts separated by a sentinel
line), cleans every post and writes one record per accepted post:

    [id<TAB>][context ]<BOS> <stream> <EOS>

With tsv enabled the file starts with an ``id<TAB>baguette`` header.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Iterator, Optional, TextIO

from baguette.cleaning.pipeline import clean_post
from baguette.utils.config_util import CleanerConfig
from baguette.utils.interrupts import stop_on_signals
from baguette.utils.logger import get_logger

logger = get_logger(__name__)

TSV_HEADER = "id\tbaguette\n"
PROGRESS_EVERY = 10_000


@dataclass
class CleanSummary:
    seen: int = 0
    accepted: int = 0
    cancelled: bool = False

    @property
    def rejected(self) -> int:
        return self.seen - self.accepted


def split_posts(lines: Iterable[str], separator: str) -> Iterator[str]:
    """
    Yield the text of each post terminated by a ``separator`` line.

    Every post gets a fresh buffer. Lines after the last separator do not
    form a post.
    """
    buffer: list[str] = []
    for line in lines:
        line = line.rstrip("\r\n")
        if line != separator:
            buffer.append(line + "\n")
            continue
        yield "".join(buffer)
        buffer = []


def format_record(stream: str, cfg: CleanerConfig, record_id: int) -> str:
    parts = []
    if cfg.tsv:
        parts.append(f"{record_id}\t")
    if cfg.context.strip():
        parts.append(f"{cfg.context} ")
    parts.append(f"{cfg.bos_token} {stream} {cfg.eos_token}\n")
    return "".join(parts)


def clean_posts(
    lines: Iterable[str],
    cfg: CleanerConfig,
    should_stop: Callable[[], bool] = lambda: False,
    summary: Optional[CleanSummary] = None,
) -> Iterator[str]:
    """
    Yield formatted records for every accepted post in ``lines``.

    The limit and ``should_stop`` are checked once per separator, after
    the post that ended there has been handled, so a record is never cut
    short. ``summary`` (if given) is updated in place.
    """
    if summary is None:
        summary = CleanSummary()

    for post in split_posts(lines, cfg.separator):
        summary.seen += 1

        stream = clean_post(post, cfg.pad_token)
        if stream is not None:
            summary.accepted += 1
            yield format_record(stream, cfg, summary.accepted)

        if summary.seen % PROGRESS_EVERY == 0:
            logger.debug(f"seen {summary.seen} posts, accepted {summary.accepted}")

        if cfg.limit > 0 and summary.accepted >= cfg.limit:
            break
        if should_stop():
            summary.cancelled = True
            break


def write_records(
    lines: Iterable[str],
    out: TextIO,
    cfg: CleanerConfig,
    should_stop: Callable[[], bool] = lambda: False,
) -> CleanSummary:
    """Write the optional header and all records to ``out``."""
    summary = CleanSummary()
    if cfg.tsv:
        out.write(TSV_HEADER)
    for record in clean_posts(lines, cfg, should_stop, summary):
        out.write(record)
    return summary


def run_cleaner(cfg: CleanerConfig) -> CleanSummary:
    """
    Clean ``cfg.input_path`` into ``cfg.output_path``.

    Invalid UTF-8 in the input is carried as surrogate escapes and removed
    by the assembler, so malformed bytes never abort the run. I/O errors
    propagate to the caller.
    """
    input_path = cfg.input_path.expanduser().resolve()
    output_path = cfg.output_path.expanduser().resolve()

    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")

    logger.info(f"📂 Parsing posts from {input_path}")
    logger.info(f"💾 Saving posts to {output_path}")
    logger.info(f"Processing posts, limit {cfg.limit}")

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with stop_on_signals() as stop, \
            input_path.open("r", encoding="utf-8", errors="surrogateescape") as fin, \
            output_path.open("w", encoding="utf-8", newline="\n") as fout:
        summary = write_records(fin, fout, cfg, should_stop=stop.is_set)

    if summary.cancelled:
        logger.info("🛑 Stopped early on interrupt")
    logger.info(
        f"✅ Processed {summary.accepted} posts "
        f"(seen {summary.seen}, rejected {summary.rejected})"
    )
    return summary
