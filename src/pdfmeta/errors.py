"""Exception hierarchy."""

from __future__ import annotations


class PdfMetaError(RuntimeError):
    pass


class EmptyTitleError(PdfMetaError, ValueError):
    """Title is empty after sanitization."""


class MalformedLineError(PdfMetaError, ValueError):
    """An outline line does not match the line grammar."""

    def __init__(self, line: str, index: int | None = None) -> None:
        self.line = line
        self.index = index
        super().__init__(f"outline line has a wrong format: {line!r}")


class MalformedMetadataLineError(PdfMetaError, ValueError):
    """A metadata line does not match `key|value`."""

    def __init__(self, line: str) -> None:
        self.line = line
        super().__init__(f"metadata line has a wrong format: {line!r}")


class EmptyMetadataKeyError(PdfMetaError, ValueError):
    pass


class DestinationError(PdfMetaError):
    """An outline destination could not be turned into a page number."""


class UnsupportedDestinationError(DestinationError):
    pass


class PageNotFoundError(DestinationError):
    pass


class DocumentEncryptedError(PdfMetaError):
    pass
