"""Tests for title sanitization."""

from __future__ import annotations

import itertools

import pytest

from pdfmeta.codec.sanitizer import sanitize_title
from pdfmeta.errors import EmptyTitleError


@pytest.mark.parametrize("raw", ["", " ", "  ", "\t", " \t \t  ", "\r", "\n", "\r\n"])
def test_sanitize_title_rejects_whitespace_only(raw: str) -> None:
    """It should fail on input made of whitespace only."""

    with pytest.raises(EmptyTitleError):
        sanitize_title(raw)


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("a", "a"),
        (" a", "a"),
        ("a  ", "a"),
        ("  a   ", "a"),
        ("\ta\t\t", "a"),
        ("  a   b    ", "a b"),
        ("  a   b    c     ", "a b c"),
        ("a–b", "a – b"),
        ("a - b", "a – b"),
        ("`quoted’ and ‘single’", "'quoted' and 'single'"),
        ("“double” and ''twice''", '"double" and "twice"'),
        ("wait…", "wait..."),
        ("wait. . .", "wait..."),
        ("one , two .", "one, two."),
        ("a\tb", "a b"),
    ],
)
def test_sanitize_title_normalizes(raw: str, expected: str) -> None:
    """It should fold typographic artifacts into one canonical spelling."""

    assert sanitize_title(raw) == expected


@pytest.mark.parametrize(
    "raw",
    [
        "Chapter 1 - Intro",
        "a - - b",
        "a\t-\tb",
        "a  ,  b",
        "Well . . . maybe",
        "''''",
        "x––y",
        "Title|5",
        "a -–b",
        "a– .",
        "Intro– .",
        "x–-–y",
    ],
)
def test_sanitize_title_is_idempotent(raw: str) -> None:
    """It should not change an already sanitized title."""

    once = sanitize_title(raw)
    assert sanitize_title(once) == once


def test_sanitize_title_keeps_separator() -> None:
    """It should not strip separator characters occurring in the text."""

    assert sanitize_title("A|B") == "A|B"


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("a -–b", "a – – b"),
        ("a– .", "a –."),
        ("x– ,y", "x –,y"),
    ],
)
def test_sanitize_title_settles_interacting_rules(raw: str, expected: str) -> None:
    """It should apply dash rules again when later rules expose new matches."""

    assert sanitize_title(raw) == expected


def test_sanitize_title_is_idempotent_over_small_alphabet() -> None:
    """It should be idempotent for every short string of troublesome characters."""

    alphabet = "a -–.,'`\t…"
    failures = []
    for length in range(1, 6):
        for chars in itertools.product(alphabet, repeat=length):
            raw = "".join(chars)
            try:
                once = sanitize_title(raw)
            except EmptyTitleError:
                continue
            if sanitize_title(once) != once:
                failures.append(raw)

    assert failures == []
