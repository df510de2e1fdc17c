"""PDF layer: resolver interfaces and the pypdf-backed document."""

from __future__ import annotations

from pdfmeta.backends.protocol import (
    MappingDestinationResolver,
    MetadataConsumer,
    MetadataProvider,
    NamedDestinationMap,
    NamedDestinationResolver,
    OutlineConsumer,
    OutlineProvider,
    PageResolver,
)
from pdfmeta.backends.pypdf_backend import PdfDocument, open_document

__all__ = [
    "MappingDestinationResolver",
    "MetadataConsumer",
    "MetadataProvider",
    "NamedDestinationMap",
    "NamedDestinationResolver",
    "OutlineConsumer",
    "OutlineProvider",
    "PageResolver",
    "PdfDocument",
    "open_document",
]
