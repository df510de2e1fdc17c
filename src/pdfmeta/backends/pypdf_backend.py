"""pypdf-backed PDF document.

Reading walks the raw `/Outlines` dictionaries rather than `PdfReader.outline`, so
that named destinations and unsupported actions stay visible to the codec instead
of being resolved (or silently dropped) by pypdf.
"""

from __future__ import annotations

import contextlib
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from pypdf import PdfReader, PdfWriter
from pypdf.generic import ArrayObject, DictionaryObject, IndirectObject, NameObject, NullObject

from pdfmeta.backends.protocol import (
    MetadataConsumer,
    MetadataProvider,
    NamedDestinationResolver,
    OutlineConsumer,
    OutlineProvider,
    PageResolver,
)
from pdfmeta.errors import DocumentEncryptedError, PageNotFoundError
from pdfmeta.logging import get_logger
from pdfmeta.models import (
    Destination,
    NamedDestination,
    OutlineNode,
    PageDestination,
    UnsupportedDestination,
)

logger = get_logger(__name__)


class PypdfPageResolver(PageResolver):
    """Resolve page references of one `PdfReader`."""

    def __init__(self, reader: PdfReader) -> None:
        self._page_count = len(reader.pages)
        self._numbers: dict[int, int] = {}
        for index, page in enumerate(reader.pages):
            if page.indirect_reference is not None:
                self._numbers[page.indirect_reference.idnum] = index + 1

    def page_number(self, page: Any) -> int:
        if isinstance(page, IndirectObject):
            number = self._numbers.get(page.idnum)
        elif isinstance(page, int):
            # Remote-style destinations address pages by 0-based index.
            number = page + 1 if 0 <= page < self._page_count else None
        else:
            reference = getattr(page, "indirect_reference", None)
            number = self._numbers.get(reference.idnum) if reference is not None else None
        if number is None:
            raise PageNotFoundError(f"page not found in document: {page!r}")
        return number


class PypdfNamedDestinations(NamedDestinationResolver):
    """Resolve names through the reader's named destinations."""

    def __init__(self, reader: PdfReader) -> None:
        self._reader = reader
        self._destinations: dict[str, Any] | None = None

    def resolve(self, name: str) -> PageDestination | None:
        if self._destinations is None:
            self._destinations = dict(self._reader.named_destinations)
        destination = self._destinations.get(name)
        if destination is None:
            return None
        return PageDestination(page=destination.page)


class PdfDocument(OutlineProvider, OutlineConsumer, MetadataProvider, MetadataConsumer):
    """An open PDF document.

    Changes made through `write_outline`/`write_metadata` are kept in memory and only
    reach the disk through `save`.
    """

    def __init__(self, reader: PdfReader) -> None:
        self._reader = reader
        self._outline: list[OutlineNode] | None = None
        self._metadata: dict[str, str] | None = None

        self.pages = PypdfPageResolver(reader)
        self.named_destinations = PypdfNamedDestinations(reader)

    @property
    def page_count(self) -> int:
        return len(self._reader.pages)

    # ── Outline ──────────────────────────────────────────────────────────────
    def read_outline(self) -> list[OutlineNode]:
        catalog = self._reader.trailer["/Root"]
        if "/Outlines" not in catalog:
            return []
        outlines = catalog["/Outlines"]
        if not isinstance(outlines, DictionaryObject):
            return []
        return self._read_items(outlines, seen=set())

    def _read_items(self, parent: DictionaryObject, seen: set[int]) -> list[OutlineNode]:
        nodes: list[OutlineNode] = []
        reference = parent.raw_get("/First") if "/First" in parent else None
        while reference is not None:
            if isinstance(reference, IndirectObject):
                if reference.idnum in seen:
                    logger.warning("Outline item %d is referenced twice, stopping here", reference.idnum)
                    break
                seen.add(reference.idnum)
            item = reference.get_object()
            if not isinstance(item, DictionaryObject):
                break

            nodes.append(
                OutlineNode(
                    title=str(item["/Title"]) if "/Title" in item else "",
                    destination=_item_destination(item),
                    children=self._read_items(item, seen),
                )
            )
            reference = item.raw_get("/Next") if "/Next" in item else None
        return nodes

    def write_outline(self, roots: list[OutlineNode]) -> None:
        self._outline = list(roots)

    def _add_items(self, writer: PdfWriter, nodes: list[OutlineNode], parent: IndirectObject | None) -> None:
        for node in nodes:
            page_index = node.page_number - 1 if node.page_number is not None else None
            reference = writer.add_outline_item(node.title, page_index, parent=parent, is_open=False)
            self._add_items(writer, node.children, reference)

    # ── Metadata ─────────────────────────────────────────────────────────────
    def read_metadata(self) -> dict[str, str | None]:
        info = self._reader.metadata
        if info is None:
            return {}
        entries: dict[str, str | None] = {}
        for key in info:
            value = info[key]
            if value is None or isinstance(value, NullObject):
                continue
            name = key[1:] if key.startswith("/") else key
            entries[name] = str(value)
        return entries

    def write_metadata(self, entries: Mapping[str, str]) -> None:
        self._metadata = dict(entries)

    # ── Output ───────────────────────────────────────────────────────────────
    def save(self, path: Path) -> None:
        """Write the document, with any replaced outline or metadata, to `path`."""

        writer = PdfWriter(clone_from=self._reader)
        if self._outline is not None:
            writer.root_object.pop(NameObject("/Outlines"), None)
            self._add_items(writer, self._outline, None)
        if self._metadata is not None:
            writer.metadata = {f"/{key}": value for key, value in self._metadata.items()}
        writer.write(path)


def _item_destination(item: DictionaryObject) -> Destination | None:
    if "/A" in item:
        action = item["/A"]
        kind = str(action.get("/S", "")) if isinstance(action, DictionaryObject) else ""
        if kind == "/GoTo" and "/D" in action:
            return _destination(action["/D"])
        return UnsupportedDestination(kind=f"action {kind or '?'}")
    if "/Dest" in item:
        return _destination(item["/Dest"])
    return None


def _destination(dest: Any) -> Destination:
    dest = dest.get_object() if hasattr(dest, "get_object") else dest
    if isinstance(dest, DictionaryObject) and "/D" in dest:
        dest = dest["/D"]
    if isinstance(dest, ArrayObject) and len(dest) > 0:
        return PageDestination(page=dest[0])
    if isinstance(dest, str):
        return NamedDestination(name=str(dest))
    if isinstance(dest, bytes):
        return NamedDestination(name=dest.decode("latin-1"))
    return UnsupportedDestination(kind=type(dest).__name__)


@contextlib.contextmanager
def open_document(path: Path) -> Iterator[PdfDocument]:
    """Open a PDF for the duration of one conversion.

    Raises:
        DocumentEncryptedError: If the document is encrypted.
    """

    with PdfReader(path) as reader:
        if reader.is_encrypted:
            raise DocumentEncryptedError(f"document is encrypted: {path}")
        yield PdfDocument(reader)
