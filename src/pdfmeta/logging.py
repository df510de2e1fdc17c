"""Logging utilities."""

from __future__ import annotations

import contextlib
import contextvars
import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler


_document_var: contextvars.ContextVar[str] = contextvars.ContextVar("pdfmeta_document", default="-")
_operation_var: contextvars.ContextVar[str] = contextvars.ContextVar("pdfmeta_operation", default="-")


class _ContextFilter(logging.Filter):
    """Inject document context into log records."""

    def filter(self, record: logging.LogRecord) -> bool:  # noqa: A003
        record.document = _document_var.get()  # type: ignore[attr-defined]
        record.operation = _operation_var.get()  # type: ignore[attr-defined]
        return True


@contextlib.contextmanager
def document_context(*, document: str, operation: str | None = None) -> Any:
    """Temporarily bind the document being processed for structured logging.

    Args:
        document: Path of the PDF document.
        operation: Optional operation name (e.g. `save-outline`).
    """

    token_document = _document_var.set(document)
    token_operation = _operation_var.set(operation or _operation_var.get())
    try:
        yield
    finally:
        _document_var.reset(token_document)
        _operation_var.reset(token_operation)


def configure_logging(level: str = "INFO") -> None:
    """Configure application logging.

    Diagnostics go to stderr so they never mix with text written to stdout.

    Args:
        level: Logging level name.
    """

    handler = RichHandler(
        console=Console(stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_level=True,
    )
    handler.addFilter(_ContextFilter())

    formatter = logging.Formatter(
        fmt="op=%(operation)s doc=%(document)s %(name)s: %(message)s",
    )
    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    # Avoid duplicate handlers if configure_logging is called multiple times
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        root.addHandler(handler)
    else:
        for h in root.handlers:
            if isinstance(h, RichHandler):
                if not any(isinstance(f, _ContextFilter) for f in h.filters):
                    h.addFilter(_ContextFilter())
                h.setFormatter(formatter)


def get_logger(name: str) -> logging.Logger:
    """Get a module logger."""

    return logging.getLogger(name)


def log_exception(logger: logging.Logger, msg: str, **context: Any) -> None:
    """Log an exception with optional structured context."""

    if context:
        logger.exception("%s | context=%s", msg, context)
    else:
        logger.exception("%s", msg)
