"""Pydantic models used across the project."""

from __future__ import annotations

from pdfmeta.models.destination import (
    Destination,
    NamedDestination,
    PageDestination,
    UnsupportedDestination,
)
from pdfmeta.models.outline import OutlineNode

__all__ = [
    "Destination",
    "NamedDestination",
    "OutlineNode",
    "PageDestination",
    "UnsupportedDestination",
]
