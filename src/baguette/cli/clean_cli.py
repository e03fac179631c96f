#!/usr/bin/env python3
"""
Clean a raw post dump into training records.

Usage examples:

# Defaults: raw.txt -> clean.tsv
baguette-clean

# Explicit paths, first 1000 accepted posts, plain text output
baguette-clean -i dump.txt -o train.txt --limit 1000 --no-tsv

# Settings from a JSON file ({"cleaner": {...}} or a flat object), flags win
baguette-clean --config baguette.json --pad "<SEP>"
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Optional

from baguette.data.clean_posts import run_cleaner
from baguette.utils.config_util import CleanerConfig, load_section_config
from baguette.utils.logger import get_logger, set_verbosity

logger = get_logger(__name__)


def build_parser(p: Optional[argparse.ArgumentParser] = None) -> argparse.ArgumentParser:
    if p is None:
        p = argparse.ArgumentParser(description="Clean raw bugurt posts into training records.")
    p.add_argument("--config", type=Path, default=None, help="JSON config file (section 'cleaner').")
    p.add_argument("-i", "--input", dest="input_path", type=Path, default=None, help="Input file path (default: raw.txt).")
    p.add_argument("-o", "--output", dest="output_path", type=Path, default=None, help="Output file path (default: clean.tsv).")
    p.add_argument("-r", "--separator", default=None, help="Raw posts separator (default: <BAGUETTE>).")
    p.add_argument("-c", "--context", default=None, help="Context prefix; empty string disables it.")
    p.add_argument("-b", "--bos", dest="bos_token", default=None, help="BOS token (default: <BOS>).")
    p.add_argument("-e", "--eos", dest="eos_token", default=None, help="EOS token (default: <EOS>).")
    p.add_argument("-p", "--pad", dest="pad_token", default=None, help="PAD token (default: <PAD>).")
    p.add_argument("-l", "--limit", type=int, default=None, help="Accepted posts limit, 0 = no limit.")
    p.add_argument(
        "-t",
        "--tsv",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Write id column and header (default: on).",
    )
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return p


def run(args: argparse.Namespace) -> int:
    set_verbosity(args.verbose)

    try:
        cfg = load_section_config(
            CleanerConfig,
            args.config,
            "cleaner",
            input_path=args.input_path,
            output_path=args.output_path,
            separator=args.separator,
            context=args.context,
            bos_token=args.bos_token,
            eos_token=args.eos_token,
            pad_token=args.pad_token,
            limit=args.limit,
            tsv=args.tsv,
        )
    except (ValueError, FileNotFoundError) as e:
        logger.error(f"❌ Invalid configuration: {e}")
        return 2

    try:
        run_cleaner(cfg)
    except OSError as e:
        logger.error(f"❌ Cleaning failed for {cfg.input_path} -> {cfg.output_path}: {e}")
        return 1
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    return run(build_parser().parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
