#!/usr/bin/env python3
"""
Download a VK group's wall into a raw post dump.

Usage examples:

VK_API_TOKEN=... baguette-scrape -o raw.txt
baguette-scrape --token ... --group 57536014 --delay 0.5
"""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import Optional

from baguette.data.scrape_posts import ScraperError, run_scraper
from baguette.utils.config_util import ScraperConfig, load_section_config
from baguette.utils.logger import get_logger, set_verbosity

logger = get_logger(__name__)


def build_parser(p: Optional[argparse.ArgumentParser] = None) -> argparse.ArgumentParser:
    if p is None:
        p = argparse.ArgumentParser(description="Download VK wall posts into a raw post dump.")
    p.add_argument("--config", type=Path, default=None, help="JSON config file (section 'scraper').")
    p.add_argument("-o", "--output", dest="output_path", type=Path, default=None, help="Output file path (default: raw.txt).")
    p.add_argument("-r", "--separator", default=None, help="Raw posts separator (default: <BAGUETTE>).")
    p.add_argument("-g", "--group", default=None, help="VK group id (default: 57536014).")
    p.add_argument("-t", "--token", default=None, help="VK API token (default: $VK_API_TOKEN).")
    p.add_argument("--api-version", default=None, help="VK API version (default: 5.199).")
    p.add_argument("-s", "--delay", type=float, default=None, help="Seconds to sleep between requests.")
    p.add_argument("--timeout", type=float, default=None, help="Per-request timeout in seconds.")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    return p


def run(args: argparse.Namespace) -> int:
    set_verbosity(args.verbose)

    try:
        cfg = load_section_config(
            ScraperConfig,
            args.config,
            "scraper",
            output_path=args.output_path,
            separator=args.separator,
            group=args.group,
            token=args.token or os.environ.get("VK_API_TOKEN"),
            api_version=args.api_version,
            delay=args.delay,
            timeout=args.timeout,
        )
        run_scraper(cfg)
    except ValueError as e:
        logger.error(f"❌ Invalid configuration: {e}")
        return 2
    except (ScraperError, OSError) as e:
        logger.error(f"❌ Scraping failed: {e}")
        return 1
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    return run(build_parser().parse_args(argv))


if __name__ == "__main__":
    sys.exit(main())
