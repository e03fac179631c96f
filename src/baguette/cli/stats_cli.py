#!/usr/bin/env python3
"""Print statistics for a cleaned record file."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import Optional

from baguette.data.corpus_stats import corpus_statistics
from baguette.utils.logger import get_logger

logger = get_logger(__name__)


def build_parser(p: Optional[argparse.ArgumentParser] = None) -> argparse.ArgumentParser:
    if p is None:
        p = argparse.ArgumentParser(description="Statistics for a cleaned bugurt corpus.")
    p.add_argument("path", type=Path, help="Cleaned file (output of baguette-clean).")
    p.add_argument("-p", "--pad", dest="pad_token", default="<PAD>", help="PAD token the file was written with.")
    p.add_argument("-t", "--tsv", action=argparse.BooleanOptionalAction, default=True, help="File has id column and header.")
    p.add_argument("--output", type=Path, default=None, help="Optional: save results to JSON file.")
    return p


def run(args: argparse.Namespace) -> int:
    try:
        stats = corpus_statistics(args.path, pad_token=args.pad_token, tsv=args.tsv)
    except OSError as e:
        logger.error(f"❌ Could not read {args.path}: {e}")
        return 1

    if args.output:
        with args.output.open("w", encoding="utf-8") as f:
            json.dump(stats, f, indent=2)
        logger.info(f"📁 Results saved to: {args.output}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    return run(build_parser().parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
