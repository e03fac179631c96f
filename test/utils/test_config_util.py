import json
from pathlib import Path

import pytest

from baguette.utils.config_util import (
    CleanerConfig,
    ScraperConfig,
    build_config,
    load_config,
    load_section_config,
)


def test_defaults():
    cfg = CleanerConfig()
    assert cfg.separator == "<BAGUETTE>"
    assert (cfg.bos_token, cfg.eos_token, cfg.pad_token) == ("<BOS>", "<EOS>", "<PAD>")
    assert cfg.limit == 0
    assert cfg.tsv is True


def test_overrides_beat_file_values():
    cfg = build_config(CleanerConfig, {"limit": 10, "pad_token": "<SEP>"}, limit=3, context=None)
    assert cfg.limit == 3
    assert cfg.pad_token == "<SEP>"
    assert cfg.context == CleanerConfig().context


def test_paths_are_converted():
    cfg = build_config(CleanerConfig, {"input_path": "dump.txt"})
    assert cfg.input_path == Path("dump.txt")


def test_unknown_key_rejected():
    with pytest.raises(ValueError, match="Unknown CleanerConfig key"):
        build_config(CleanerConfig, {"limt": 3})


@pytest.mark.parametrize("kwargs", [{"limit": -1}, {"separator": ""}, {"pad_token": " "}])
def test_invalid_cleaner_values(kwargs):
    with pytest.raises(ValueError):
        CleanerConfig(**kwargs)


def test_negative_delay_rejected():
    with pytest.raises(ValueError):
        ScraperConfig(delay=-1)


def test_load_section_config_nested(tmp_path):
    p = tmp_path / "baguette.json"
    p.write_text(
        json.dumps({"cleaner": {"limit": 5, "tsv": False}, "scraper": {"group": "1"}}),
        encoding="utf-8",
    )
    cleaner = load_section_config(CleanerConfig, p, "cleaner", tsv=None)
    scraper = load_section_config(ScraperConfig, p, "scraper")

    assert (cleaner.limit, cleaner.tsv) == (5, False)
    assert scraper.group == "1"


def test_load_section_config_flat(tmp_path):
    p = tmp_path / "cleaner.json"
    p.write_text(json.dumps({"context": ""}), encoding="utf-8")
    assert load_section_config(CleanerConfig, p, "cleaner").context == ""


def test_load_config_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.json")

    p = tmp_path / "list.json"
    p.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(p)
