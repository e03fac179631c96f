from __future__ import annotations

from pathlib import Path

import numpy as np

from baguette.cleaning.assembler import split_stream
from baguette.cleaning.tokens import is_boundary
from baguette.data.clean_posts import TSV_HEADER
from baguette.utils.logger import get_logger

logger = get_logger(__name__)


def read_records(path: Path, tsv: bool = True, encoding: str = "utf-8") -> list[str]:
    """Return record bodies (id column and header removed)."""
    records = []
    with path.open(encoding=encoding) as f:
        for i, line in enumerate(f):
            line = line.rstrip("\n")
            if not line.strip():
                continue
            if tsv:
                if i == 0 and line + "\n" == TSV_HEADER:
                    continue
                _, _, line = line.partition("\t")
            records.append(line)
    return records


def corpus_statistics(
    path: Path,
    pad_token: str = "<PAD>",
    tsv: bool = True,
    encoding: str = "utf-8",
) -> dict[str, float]:
    """
    Compute statistics for a cleaned record file.

    Args:
        path: Output of clean_posts.py
        pad_token: Pad token the file was written with
        tsv: Whether the file has the id column and header
        encoding: Text encoding for reading the file

    Returns:
        Dictionary with record count, words-per-record percentiles and
        pad tokens per record, e.g. {"records": 3, "words_mean": 12.0, ...}
    """
    if not path.exists():
        raise FileNotFoundError(f"Corpus not found: {path}")

    records = read_records(path, tsv=tsv, encoding=encoding)
    if not records:
        logger.warning(f"{path} has no records")
        return {"records": 0}

    words = np.array([len(r.split()) for r in records], dtype=np.int32)
    # a fused triple boundary counts as three pads
    pads = np.array(
        [sum(is_boundary(t) for t in split_stream(r, pad_token)) for r in records],
        dtype=np.int32,
    )

    stats = {
        "records": len(records),
        "words_mean": float(words.mean()),
        "words_median": float(np.median(words)),
        "words_p90": float(np.percentile(words, 90)),
        "words_p99": float(np.percentile(words, 99)),
        "words_max": int(words.max()),
        "pads_mean": float(pads.mean()),
        "pads_min": int(pads.min()),
    }

    logger.info(
        f"{path.name}: records {stats['records']}, words mean={stats['words_mean']:.1f} "
        f"median={stats['words_median']:.1f} p90={stats['words_p90']:.1f} max={stats['words_max']}, "
        f"pads mean={stats['pads_mean']:.1f} min={stats['pads_min']}"
    )
    return stats
