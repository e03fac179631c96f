import pytest

from baguette.cleaning.boundaries import (
    collapse_boundaries,
    fold_blank_runs,
    strip_edge_boundaries,
    trim_blank,
)
from baguette.cleaning.tokens import BOUNDARY, Turns


def test_trim_blank():
    assert trim_blank(["", "X", "", "Y", " "]) == ["X", "", "Y"]


def test_fold_blank_runs_into_single_boundary():
    assert fold_blank_runs(["X", "", "", "Y", "", "Z"]) == ["X", BOUNDARY, "Y", BOUNDARY, "Z"]


@pytest.mark.parametrize(
    "lines",
    [
        [],
        ["X"],
        ["X", BOUNDARY],
        ["", "X", "Y", "", ""],
        [BOUNDARY, BOUNDARY, "X"],
        ["X", BOUNDARY, BOUNDARY, BOUNDARY, ""],
    ],
)
def test_too_short_is_rejected(lines):
    assert collapse_boundaries(lines) is None


def test_outer_blank_lines_do_not_count():
    assert collapse_boundaries(["", "X", BOUNDARY, "Y", ""]) == ["X", BOUNDARY, "Y"]


def test_three_lines_without_boundary_pass():
    assert collapse_boundaries([">A", ">B", ">C"]) == [">A", ">B", ">C"]


def test_dangling_boundaries_are_stripped():
    assert collapse_boundaries([BOUNDARY, "X", BOUNDARY, "Y", BOUNDARY]) == ["X", BOUNDARY, "Y"]


def test_only_boundaries_is_rejected():
    assert collapse_boundaries([BOUNDARY, BOUNDARY, BOUNDARY]) is None


def test_inline_edge_markers_are_trimmed():
    lines = [Turns([BOUNDARY, "X"]), BOUNDARY, Turns(["Y", BOUNDARY])]
    assert strip_edge_boundaries(lines) == ["X", BOUNDARY, "Y"]


def test_marker_only_turns_line_is_dangling():
    lines = [Turns([BOUNDARY, BOUNDARY]), "X", BOUNDARY, "Y"]
    assert strip_edge_boundaries(lines) == ["X", BOUNDARY, "Y"]


def test_interior_turns_line_is_kept():
    lines = ["X", Turns([BOUNDARY, "Y"]), "Z"]
    assert collapse_boundaries(lines) == lines
