"""Outline models."""

from __future__ import annotations

from pydantic import BaseModel, Field

from pdfmeta.codec.sanitizer import sanitize_title
from pdfmeta.models.destination import Destination


class OutlineNode(BaseModel):
    """One outline (bookmark) entry.

    Nodes built from text lines carry `page_number`; nodes read from a live document
    carry the raw `destination` instead, which is resolved when writing lines.
    An empty `children` list means "no children".
    """

    title: str
    page_number: int | None = Field(default=None, ge=1)
    destination: Destination | None = Field(default=None, exclude=True)

    children: list["OutlineNode"] = Field(default_factory=list)

    @classmethod
    def from_title(cls, raw_title: str, page_number: int | None = None) -> "OutlineNode":
        """Build a node from a hand-edited title.

        Raises:
            EmptyTitleError: If the title is empty after sanitization.
            pydantic.ValidationError: If `page_number` is not positive.
        """

        return cls(title=sanitize_title(raw_title), page_number=page_number)

    def walk(self, depth: int = 0):
        """Yield `(depth, node)` pairs in pre-order."""

        yield depth, self
        for child in self.children:
            yield from child.walk(depth + 1)
