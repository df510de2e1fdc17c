"""Line grammar shared by the outline and metadata codecs.

An outline line is `<indent><title>` or `<indent><title>|<page>`; the indent is a
run of whitespace whose width encodes the nesting depth.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from pdfmeta.codec.sanitizer import SHIFT
from pdfmeta.errors import MalformedLineError

SEPARATOR = "|"

OUTLINE_LINE_PATTERN = re.compile(r"^(?P<shift>\s*)(?P<title>\S.*)$")
PAGE_NUMBER_PATTERN = re.compile(r"[1-9][0-9]*")


@dataclass(frozen=True)
class ParsedLine:
    """Depth and raw title of one outline line."""

    depth: int
    title: str


def parse_line(line: str, index: int | None = None) -> ParsedLine:
    """Split a line into indentation depth and title.

    Tabs in the indentation count as one full shift unit. The title is returned
    as-is; sanitizing it is left to node construction.

    Raises:
        MalformedLineError: If the line is empty or whitespace-only.
    """

    match = OUTLINE_LINE_PATTERN.match(line.rstrip("\r\n"))
    if match is None:
        raise MalformedLineError(line, index)
    shift = match.group("shift").replace("\t", SHIFT)
    return ParsedLine(depth=len(shift), title=match.group("title"))


def split_page_number(title: str) -> tuple[str, int | None]:
    """Split an optional `|<page>` suffix off a title.

    Only the last separator counts. When the text after it is not a positive
    decimal number without leading zeros, the whole string is the title.
    """

    head, sep, tail = title.rpartition(SEPARATOR)
    if not sep or PAGE_NUMBER_PATTERN.fullmatch(tail) is None:
        return title, None
    return head, int(tail)


def format_line(depth: int, title: str, page_number: int | None = None) -> str:
    """Render one outline line; `depth` counts shift units."""

    if depth < 0:
        raise ValueError("depth can not be negative")
    line = f"{SHIFT * depth}{title}"
    if page_number is not None:
        line = f"{line}{SEPARATOR}{page_number}"
    return line
