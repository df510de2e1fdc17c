"""Tests for the outline line grammar."""

from __future__ import annotations

import pytest

from pdfmeta.codec.grammar import format_line, parse_line, split_page_number
from pdfmeta.errors import MalformedLineError


def test_parse_line_measures_indent() -> None:
    """It should return the width of the leading whitespace and the raw title."""

    parsed = parse_line("        Title  1.1|2")
    assert parsed.depth == 8
    assert parsed.title == "Title  1.1|2"


def test_parse_line_counts_tab_as_shift() -> None:
    """It should expand a tab in the indent to one shift unit."""

    assert parse_line("\tTitle").depth == parse_line("    Title").depth


@pytest.mark.parametrize("line", ["", "   ", "\t\t"])
def test_parse_line_rejects_blank(line: str) -> None:
    """It should reject lines without a title."""

    with pytest.raises(MalformedLineError) as excinfo:
        parse_line(line, 3)
    assert excinfo.value.index == 3


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Title 1|1", ("Title 1", 1)),
        ("A|B|12", ("A|B", 12)),
        ("Title", ("Title", None)),
        ("Title|", ("Title|", None)),
        ("Title|0", ("Title|0", None)),
        ("Title|-1", ("Title|-1", None)),
        ("Title|05", ("Title|05", None)),
        ("Title|5a", ("Title|5a", None)),
        ("Title|5|x", ("Title|5|x", None)),
    ],
)
def test_split_page_number(title: str, expected: tuple[str, int | None]) -> None:
    """It should only treat a positive number after the last separator as a page."""

    assert split_page_number(title) == expected


def test_format_line() -> None:
    """It should indent by four spaces per level and append the page."""

    assert format_line(0, "Bookmarks") == "Bookmarks"
    assert format_line(2, "Title 1.1", 2) == "        Title 1.1|2"


def test_format_line_rejects_negative_depth() -> None:
    with pytest.raises(ValueError):
        format_line(-1, "x")
