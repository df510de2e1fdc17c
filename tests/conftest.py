"""Shared fixtures: small PDFs generated with pypdf."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
from pypdf import PdfWriter
from pypdf.generic import DictionaryObject, NameObject, TextStringObject

# (title, 0-based page index or None, children)
OutlineItems = list[tuple[str, Any, list]]


def _add_outline(writer: PdfWriter, items: OutlineItems, parent: Any = None) -> None:
    for title, page, children in items:
        if isinstance(page, str) and page.startswith("name:"):
            reference = writer.add_outline_item(title, None, parent=parent)
            reference.get_object()[NameObject("/Dest")] = TextStringObject(page[len("name:"):])
        elif isinstance(page, str) and page.startswith("uri:"):
            reference = writer.add_outline_item(title, None, parent=parent)
            reference.get_object()[NameObject("/A")] = DictionaryObject(
                {
                    NameObject("/S"): NameObject("/URI"),
                    NameObject("/URI"): TextStringObject(page[len("uri:"):]),
                }
            )
        else:
            reference = writer.add_outline_item(title, page, parent=parent)
        _add_outline(writer, children, reference)


@pytest.fixture
def make_pdf(tmp_path: Path) -> Callable[..., Path]:
    """Build a PDF with blank pages, an optional outline, metadata and named destinations."""

    def _make(
        name: str = "doc.pdf",
        *,
        pages: int = 5,
        outline: OutlineItems | None = None,
        metadata: dict[str, str] | None = None,
        named: dict[str, int] | None = None,
        password: str | None = None,
    ) -> Path:
        writer = PdfWriter()
        for _ in range(pages):
            writer.add_blank_page(width=200, height=200)
        for title, page_index in (named or {}).items():
            writer.add_named_destination(title, page_index)
        _add_outline(writer, outline or [])
        if metadata:
            writer.add_metadata({f"/{key}": value for key, value in metadata.items()})
        if password:
            writer.encrypt(password)
        path = tmp_path / name
        writer.write(path)
        return path

    return _make
