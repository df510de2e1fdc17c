"""Title normalization.

Titles are hand-edited in plain text files, so editors tend to leave typographic
auto-correction artifacts behind. `sanitize_title` folds them into one canonical
spelling, which keeps the codec deterministic.
"""

from __future__ import annotations

import re

from pdfmeta.errors import EmptyTitleError

SHIFT = "    "

_REPLACEMENTS: tuple[tuple[re.Pattern[str], str], ...] = (
    # Quotes and apostrophes
    (re.compile("[`‘’]"), "'"),
    (re.compile("[“”]|''"), '"'),
    # Dashes
    (re.compile(r"(?<=\s)-(?=\s)"), "–"),
    (re.compile(r"(?<=\S)–(?=\S)"), " – "),
    # Ellipsis
    (re.compile("…|\\. \\. \\."), "..."),
    # Stray space before punctuation
    (re.compile(r"\s+(?=[,.])"), ""),
    # Whitespace
    (re.compile("\t"), SHIFT),
    (re.compile(r"\s{2,}"), " "),
)


def _apply(title: str) -> str:
    title = title.strip()
    for pattern, replacement in _REPLACEMENTS:
        title = pattern.sub(replacement, title)
    return title


def sanitize_title(raw: str) -> str:
    """Normalize a free-text outline title.

    Args:
        raw: Title as found in a text line or a PDF outline item.

    Returns:
        The normalized title.

    Raises:
        EmptyTitleError: If nothing but whitespace is left.
    """

    title = _apply(raw)
    # Later rules can expose input for earlier ones, so run until stable.
    while (normalized := _apply(title)) != title:
        title = normalized
    if not title:
        raise EmptyTitleError(f"title is empty: {raw!r}")
    return title
