#!/usr/bin/env python3
"""
baguette - unified command line interface

Available commands:
- scrape: download a VK group's wall into a raw post dump
- clean:  turn the raw dump into training records
- stats:  statistics for a cleaned record file

Usage:
    baguette <command> [options]

Examples:
    baguette scrape --token $VK_API_TOKEN -o raw.txt
    baguette clean -i raw.txt -o clean.tsv --limit 5000
    baguette stats clean.tsv
"""

from __future__ import annotations

import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import Optional

from baguette.cli import clean_cli, scrape_cli, stats_cli

COMMANDS = {
    "scrape": (scrape_cli, "Download VK wall posts into a raw post dump"),
    "clean": (clean_cli, "Clean raw posts into training records"),
    "stats": (stats_cli, "Statistics for a cleaned record file"),
}


def package_version() -> str:
    try:
        return version("baguette")
    except PackageNotFoundError:
        return "unknown"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="baguette",
        description="Bugurt corpus preparation",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--version", action="version", version=f"baguette {package_version()}")
    sub = parser.add_subparsers(dest="command", required=True)
    for name, (module, help_text) in COMMANDS.items():
        module.build_parser(sub.add_parser(name, help=help_text, description=help_text))
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    module, _ = COMMANDS[args.command]
    return module.run(args)


if __name__ == "__main__":
    sys.exit(main())
