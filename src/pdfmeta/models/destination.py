"""Outline destination models.

A destination tells where an outline item points to. Only page destinations
(direct, or indirect through a named destination) can be turned into a page number.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, ConfigDict


class PageDestination(BaseModel):
    """Direct page destination.

    `page` is an opaque token owned by the PDF layer (e.g. an indirect page
    reference) and is only interpreted by a `PageResolver`.
    """

    model_config = ConfigDict(frozen=True)

    page: Any


class NamedDestination(BaseModel):
    """Reference to an entry of the document's named destinations."""

    model_config = ConfigDict(frozen=True)

    name: str


class UnsupportedDestination(BaseModel):
    """Any other destination or action type (URI, launch, remote GoTo, ...)."""

    model_config = ConfigDict(frozen=True)

    kind: str


Destination = Union[PageDestination, NamedDestination, UnsupportedDestination]
