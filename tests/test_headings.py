"""Tests for heading line matching."""

from __future__ import annotations

import pytest

from tagselector.headings import HeadingMatch, match_heading


@pytest.mark.parametrize(
    ("line", "depth", "label"),
    [
        ("# Project", 1, "Project"),
        ("## Backend", 2, "Backend"),
        ("###### Deep", 6, "Deep"),
        ("######## Deeper", 8, "Deeper"),
        ("#\tTabbed", 1, "Tabbed"),
        ("#    Spaced   ", 1, "Spaced"),
        ("# Windows\r", 1, "Windows"),
        ("# 项目", 1, "项目"),
    ],
)
def test_matches_headings(line: str, depth: int, label: str) -> None:
    assert match_heading(line) == HeadingMatch(depth=depth, label=label)


@pytest.mark.parametrize(
    "line",
    [
        "",
        "plain text",
        "#tag",
        "##NoSpace",
        "#",
        "###   ",
        " # indented",
        "text # not at start",
    ],
)
def test_rejects_non_headings(line: str) -> None:
    assert match_heading(line) is None


def test_label_stops_at_first_whitespace_run() -> None:
    """Only the first token after the markers becomes the label."""
    result = match_heading("## Backend API services")

    assert result is not None
    assert result.label == "Backend"
    assert result.depth == 2


@pytest.mark.parametrize("label", ["A", "Project", "a/b", "x#y"])
def test_depth_is_independent_of_label(label: str) -> None:
    for depth in range(1, 5):
        result = match_heading("#" * depth + " " + label)
        assert result is not None
        assert result.depth == depth
        assert result.label == label
