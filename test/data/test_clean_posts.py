import threading

import pytest

from baguette.data.clean_posts import (
    TSV_HEADER,
    CleanSummary,
    clean_posts,
    format_record,
    run_cleaner,
    split_posts,
    write_records,
)
from baguette.utils.config_util import CleanerConfig

SEP = "<BAGUETTE>"

RAW = (
    "first guy says stuff @ second guy replies\n"
    f"{SEP}\n"
    "@BUGURT_THREAD\n"
    "just one line no markers\n"
    f"{SEP}\n"
    "#greentext some body text @ reply\n"
    f"{SEP}\n"
    "trailing @ post without separator\n"
)

FIRST = "FIRST GUY SAYS STUFF <PAD> SECOND GUY REPLIES"
SECOND = "#GREENTEXT <PAD> SOME BODY TEXT <PAD> REPLY"


def _lines(text):
    return text.splitlines(keepends=True)


def test_split_posts_ignores_unterminated_tail():
    posts = list(split_posts(_lines(RAW), SEP))
    assert len(posts) == 3
    assert posts[0] == "first guy says stuff @ second guy replies\n"
    assert posts[1] == "@BUGURT_THREAD\njust one line no markers\n"


def test_split_posts_handles_crlf():
    posts = list(split_posts(["a @ b\r\n", f"{SEP}\r\n"], SEP))
    assert posts == ["a @ b\n"]


def test_separator_must_match_whole_line():
    posts = list(split_posts(["x <BAGUETTE> y\n", f"{SEP}\n"], SEP))
    assert posts == ["x <BAGUETTE> y\n"]


def test_format_record_variants():
    cfg = CleanerConfig()
    assert format_record("A <PAD> B", cfg, 7) == "7\tНАПИШИ БАГЕТ <BOS> A <PAD> B <EOS>\n"

    plain = CleanerConfig(tsv=False, context="  ")
    assert format_record("A <PAD> B", plain, 7) == "<BOS> A <PAD> B <EOS>\n"


def test_clean_posts_default_records():
    summary = CleanSummary()
    records = list(clean_posts(_lines(RAW), CleanerConfig(), summary=summary))

    assert records == [
        f"1\tНАПИШИ БАГЕТ <BOS> {FIRST} <EOS>\n",
        f"2\tНАПИШИ БАГЕТ <BOS> {SECOND} <EOS>\n",
    ]
    assert (summary.seen, summary.accepted, summary.rejected) == (3, 2, 1)
    assert not summary.cancelled


def test_clean_posts_plain_output():
    cfg = CleanerConfig(tsv=False, context="")
    records = list(clean_posts(_lines(RAW), cfg))
    assert records[0] == f"<BOS> {FIRST} <EOS>\n"
    assert all("TRAILING" not in r for r in records)


@pytest.mark.parametrize("limit, expected", [(1, 1), (2, 2), (5, 2), (0, 2)])
def test_limit(limit, expected):
    records = list(clean_posts(_lines(RAW), CleanerConfig(limit=limit)))
    assert len(records) == expected


def test_limit_stops_reading():
    summary = CleanSummary()
    list(clean_posts(_lines(RAW), CleanerConfig(limit=1), summary=summary))
    assert summary.seen == 1


def test_stop_is_checked_after_each_post():
    summary = CleanSummary()
    records = list(clean_posts(_lines(RAW), CleanerConfig(), lambda: True, summary))
    assert len(records) == 1
    assert summary.cancelled
    assert summary.seen == 1


def test_stop_during_accumulation_never_truncates_a_record():
    lines = [
        "a @ b\n",
        f"{SEP}\n",
        "c @ d\n",
        "e @ f\n",
        f"{SEP}\n",
        "g @ h\n",
        f"{SEP}\n",
    ]
    stop = threading.Event()

    def feed():
        for i, line in enumerate(lines):
            if i == 3:
                stop.set()
            yield line

    cfg = CleanerConfig(tsv=False, context="")
    records = list(clean_posts(feed(), cfg, stop.is_set))

    assert records == [
        "<BOS> A <PAD> B <EOS>\n",
        "<BOS> C <PAD> D E <PAD> F <EOS>\n",
    ]


def test_write_records_header(tmp_path):
    out = tmp_path / "out.tsv"
    with out.open("w", encoding="utf-8") as f:
        summary = write_records(_lines(RAW), f, CleanerConfig())
    text = out.read_text(encoding="utf-8")
    assert text.startswith(TSV_HEADER)
    assert text.count("\n") == 3
    assert summary.accepted == 2


def test_run_cleaner_sanitizes_bytes(tmp_path):
    raw = tmp_path / "raw.txt"
    raw.write_bytes(b"bad \xff byte @ ok\n<BAGUETTE>\n")
    out = tmp_path / "nested" / "clean.tsv"

    summary = run_cleaner(CleanerConfig(input_path=raw, output_path=out))

    assert summary.accepted == 1
    assert out.read_text(encoding="utf-8") == (
        TSV_HEADER + "1\tНАПИШИ БАГЕТ <BOS> BAD BYTE <PAD> OK <EOS>\n"
    )


def test_run_cleaner_missing_input(tmp_path):
    cfg = CleanerConfig(input_path=tmp_path / "nope.txt", output_path=tmp_path / "out.tsv")
    with pytest.raises(FileNotFoundError):
        run_cleaner(cfg)
    assert not (tmp_path / "out.tsv").exists()
