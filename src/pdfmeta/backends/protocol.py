"""Interfaces between the codecs and the PDF layer."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Union

from pdfmeta.errors import UnsupportedDestinationError
from pdfmeta.models import OutlineNode, PageDestination

# name -> page destination, resolved 1-based page number, or raw legacy token ("5 XYZ -1 10000 0")
NamedDestinationMap = Mapping[str, Union[PageDestination, int, str]]

PAGE_TOKEN_PATTERN = re.compile(r"^(?P<page>[1-9][0-9]*) (.+)$")


class PageResolver(ABC):
    """Maps page destination tokens to page numbers of one document."""

    @abstractmethod
    def page_number(self, page: Any) -> int:
        """Return the 1-based page number of `page`.

        Raises:
            PageNotFoundError: If the token does not point at a page of the document.
        """


class NamedDestinationResolver(ABC):
    """Looks up named destinations of one document."""

    @abstractmethod
    def resolve(self, name: str) -> PageDestination | int | None:
        """Return the destination behind `name`, a resolved page number, or None if not found."""


class OutlineProvider(ABC):
    @abstractmethod
    def read_outline(self) -> list[OutlineNode]:
        """Return the root outline nodes of the document."""


class OutlineConsumer(ABC):
    @abstractmethod
    def write_outline(self, roots: list[OutlineNode]) -> None:
        """Replace the document outline with `roots`."""


class MetadataProvider(ABC):
    @abstractmethod
    def read_metadata(self) -> dict[str, str | None]:
        """Return the document information entries."""


class MetadataConsumer(ABC):
    @abstractmethod
    def write_metadata(self, entries: Mapping[str, str]) -> None:
        """Replace the document information entries."""


class MappingDestinationResolver(NamedDestinationResolver):
    """Named destination resolver over a plain mapping."""

    def __init__(self, destinations: NamedDestinationMap | None = None) -> None:
        self._destinations = dict(destinations or {})

    def resolve(self, name: str) -> PageDestination | int | None:
        target = self._destinations.get(name)
        if isinstance(target, str):
            return parse_page_token(target)
        return target


def parse_page_token(token: str) -> int:
    """Parse a legacy `"<page> <fit> ..."` destination token into its page number.

    Raises:
        UnsupportedDestinationError: If the token does not start with a positive page number.
    """

    match = PAGE_TOKEN_PATTERN.match(token)
    if match is None:
        raise UnsupportedDestinationError(f"page destination has a wrong format: {token!r}")
    return int(match.group("page"))
