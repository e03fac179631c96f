## Configuration Utilities for baguette
# baguette/src/baguette/utils/config_util.py

from __future__ import annotations

import json
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Optional

DEFAULT_SEPARATOR = "<BAGUETTE>"


@dataclass(frozen=True)
class CleanerConfig:
    """
    Settings for turning a raw post dump into training records.

    Parameters
    ----------
    input_path : Path
        Raw file produced by the scraper (posts separated by ``separator``).
    output_path : Path
        Where records are written.
    separator : str
        Line that separates two raw posts.
    context : str
        Literal prefix written before the BOS token; blank disables it.
    bos_token, eos_token, pad_token : str
        Sequence begin/end tokens and the text substituted for boundaries.
    limit : int
        Stop after this many accepted posts; 0 processes the whole input.
    tsv : bool
        Prepend a 1-based id column and an ``id\\tbaguette`` header row.
    """

    input_path: Path = Path("raw.txt")
    output_path: Path = Path("clean.tsv")
    separator: str = DEFAULT_SEPARATOR
    context: str = "НАПИШИ БАГЕТ"
    bos_token: str = "<BOS>"
    eos_token: str = "<EOS>"
    pad_token: str = "<PAD>"
    limit: int = 0
    tsv: bool = True

    def __post_init__(self):
        if self.limit < 0:
            raise ValueError(f"limit must be >= 0, got {self.limit}")
        if not self.separator:
            raise ValueError("separator must not be empty")
        if not self.pad_token.strip():
            raise ValueError("pad_token must not be blank")


@dataclass(frozen=True)
class ScraperConfig:
    """Settings for downloading a group's wall into a raw post dump."""

    output_path: Path = Path("raw.txt")
    separator: str = DEFAULT_SEPARATOR
    group: str = "57536014"
    token: str = ""
    api_version: str = "5.199"
    delay: float = 0.1     ## seconds between wall.get pages
    timeout: float = 15.0  ## per-request timeout

    def __post_init__(self):
        if self.delay < 0:
            raise ValueError(f"delay must be >= 0, got {self.delay}")


_PATH_FIELDS = ("input_path", "output_path")


def _section(cfg: dict, name: str) -> dict:
    """Return the named sub-dict if present, otherwise the whole dict."""
    return cfg.get(name, cfg)


def load_config(config_path: Path | str) -> dict:
    """Load a JSON config file and return it as a dict."""
    config_path = Path(config_path).expanduser()

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found at: {config_path}")

    with config_path.open("r", encoding="utf-8") as f:
        cfg = json.load(f)

    if not isinstance(cfg, dict):
        raise ValueError(f"Config must be a JSON object: {config_path}")
    return cfg


def build_config(cls, file_values: Optional[dict] = None, **overrides: Any):
    """
    Build a config dataclass from defaults, a config dict and CLI overrides.

    Precedence: overrides (non-None) > file_values > dataclass defaults.
    Unknown keys in ``file_values`` raise ValueError so typos do not
    silently fall back to defaults.
    """
    known = {f.name for f in fields(cls)}
    values: dict[str, Any] = {}

    for key, value in (file_values or {}).items():
        if key not in known:
            raise ValueError(f"Unknown {cls.__name__} key '{key}'")
        values[key] = value

    for key, value in overrides.items():
        if value is not None:
            values[key] = value

    for key in _PATH_FIELDS:
        if key in values:
            values[key] = Path(values[key]).expanduser()

    return replace(cls(), **values)


def load_section_config(cls, config_path: Path | str | None, section: str, **overrides: Any):
    """
    Convenience wrapper used by the CLIs: read ``config_path`` (if given),
    pick ``section`` out of it and apply CLI overrides on top.
    """
    file_values = None
    if config_path is not None:
        file_values = _section(load_config(config_path), section)
    return build_config(cls, file_values, **overrides)
