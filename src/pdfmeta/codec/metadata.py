"""Metadata codec: flat key/value mappings to `key|value` lines and back."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping

from pdfmeta.codec.grammar import SEPARATOR
from pdfmeta.errors import EmptyMetadataKeyError, MalformedMetadataLineError

METADATA_LINE_PATTERN = re.compile(f"(?P<key>.+){re.escape(SEPARATOR)}(?P<value>.*)")


def map_to_lines(entries: Mapping[str, str | None] | None) -> list[str]:
    """Render metadata entries sorted by key; a missing value is written as empty."""

    lines: list[str] = []
    for key in sorted(entries or {}):
        if not key:
            raise EmptyMetadataKeyError("metadata key can not be empty")
        value = entries[key]  # type: ignore[index]
        lines.append(f"{key}{SEPARATOR}{value if value is not None else ''}")
    return lines


def lines_to_map(lines: Iterable[str] | None) -> dict[str, str]:
    """Parse `key|value` lines; the key runs up to the last separator.

    Raises:
        MalformedMetadataLineError: On the first line that does not match; nothing is returned.
    """

    entries: dict[str, str] = {}
    for line in lines or ():
        match = METADATA_LINE_PATTERN.fullmatch(line)
        if match is None:
            raise MalformedMetadataLineError(line)
        entries[match.group("key")] = match.group("value")
    return entries
