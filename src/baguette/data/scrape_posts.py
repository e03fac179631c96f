#!/usr/bin/env python3
"""
scrape_posts.py

Download a VK group's wall into a raw post dump for clean_posts.py.

- Uses the public VK API (groups.getById, wall.get), not HTML scraping.
- Pages through the wall in batches of 100 with a fixed delay between pages.
- Writes each non-empty post followed by the separator line.

Output format (one post may span many lines):

    first post text
    <BAGUETTE>
    second post text
    <BAGUETTE>
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Callable, Optional, TextIO

import requests

from baguette.utils.config_util import ScraperConfig
from baguette.utils.interrupts import stop_on_signals
from baguette.utils.logger import get_logger

logger = get_logger(__name__)

API_HOST = "https://api.vk.com"
API_MAX_BATCH = 100


class ScraperError(RuntimeError):
    """Raised when the VK API call fails or returns an error object."""


@dataclass
class Group:
    id: int
    name: str


class VKClient:
    """
    Thin wrapper around a requests.Session for VK API methods.

    Every call carries the API version and access token; non-2xx responses
    and API-level ``error`` objects raise ScraperError.
    """

    def __init__(
        self,
        token: str,
        *,
        api_version: str = "5.199",
        timeout: float = 15.0,
        session: Optional[requests.Session] = None,
    ):
        self.token = token
        self.api_version = api_version
        self.timeout = timeout
        self.sess = session or requests.Session()

    def get(self, method: str, **params) -> dict:
        query = {"v": self.api_version, "access_token": self.token}
        query.update({k: str(v) for k, v in params.items()})

        try:
            r = self.sess.get(f"{API_HOST}/method/{method}", params=query, timeout=self.timeout)
        except requests.RequestException as e:
            raise ScraperError(f"{method}: failed to send request: {e}") from e

        if not 200 <= r.status_code <= 204:
            raise ScraperError(f"{method}: failed to make request: HTTP {r.status_code}")

        try:
            data = r.json()
        except ValueError as e:
            raise ScraperError(f"{method}: failed to decode response: {e}") from e

        if "error" in data:
            err = data["error"]
            raise ScraperError(f"{method}: API error {err.get('error_code')}: {err.get('error_msg')}")

        return data.get("response", {})

    def group(self, group_id: str) -> Group:
        resp = self.get("groups.getById", group_id=group_id, owner_id=f"-{group_id}")
        # 5.199 wraps groups in an object; older versions return a bare list
        groups = resp.get("groups", []) if isinstance(resp, dict) else resp
        if not groups:
            raise ScraperError("group not found")
        return Group(id=groups[0]["id"], name=groups[0].get("name", ""))

    def wall(self, owner_id: str, count: Optional[int] = None, offset: Optional[int] = None) -> dict:
        params = {"owner_id": owner_id}
        if count is not None:
            params["count"] = count
        if offset is not None:
            params["offset"] = offset
        return self.get("wall.get", **params)


def write_post(out: TextIO, text: str, separator: str) -> None:
    out.write(text)
    out.write("\n")
    out.write(separator)
    out.write("\n")


def scrape_wall(
    client: VKClient,
    out: TextIO,
    cfg: ScraperConfig,
    should_stop: Callable[[], bool] = lambda: False,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """
    Write every post of ``cfg.group`` to ``out``.

    Returns the number of posts visited (empty posts are counted but not
    written). The stop flag is checked before each page.
    """
    group = client.group(cfg.group)
    logger.info(f"🎯 Target group: {group.id} {group.name!r}")

    owner_id = f"-{cfg.group}"
    total = int(client.wall(owner_id).get("count", 0))
    logger.info(f"Posts count: {total}")

    count = 0
    for offset in range(0, total, API_MAX_BATCH):
        if should_stop():
            logger.info("🛑 Stopping on interrupt")
            break

        batch = min(API_MAX_BATCH, total - offset)
        items = client.wall(owner_id, count=batch, offset=offset).get("items", [])

        for item in items[:batch]:
            count += 1
            text = item.get("text", "")
            if text:
                write_post(out, text, cfg.separator)

        logger.info(f"Processed {count}/{total} posts")
        sleep(cfg.delay)

    return count


def run_scraper(cfg: ScraperConfig, session: Optional[requests.Session] = None) -> int:
    if not cfg.token:
        raise ValueError("VK API token is required (--token or $VK_API_TOKEN)")

    output_path = cfg.output_path.expanduser().resolve()
    output_path.parent.mkdir(parents=True, exist_ok=True)

    client = VKClient(cfg.token, api_version=cfg.api_version, timeout=cfg.timeout, session=session)

    logger.info(f"💾 Saving posts to {output_path}")
    with stop_on_signals() as stop, output_path.open("w", encoding="utf-8", newline="\n") as out:
        count = scrape_wall(client, out, cfg, should_stop=stop.is_set)

    logger.info(f"✅ Saved {count} posts")
    return count
