"""Conversions between PDF documents and their text representations.

Each operation opens the document once, converts, and closes it on every exit path.
Updated PDFs are written to a temporary file first and only then moved over the target.
"""

from __future__ import annotations

from pathlib import Path

from pdfmeta.backends import open_document
from pdfmeta.codec.metadata import lines_to_map, map_to_lines
from pdfmeta.codec.outline import lines_to_tree, tree_to_lines
from pdfmeta.config import Settings, load_settings
from pdfmeta.files import atomic_path, read_lines, write_lines
from pdfmeta.logging import document_context, get_logger

logger = get_logger(__name__)


def save_outline(pdf_path: Path, outline_path: Path, settings: Settings | None = None) -> list[str]:
    """Write the document outline to a text file.

    Returns:
        The written lines.
    """

    settings = settings or load_settings()
    with document_context(document=str(pdf_path), operation="save-outline"):
        with open_document(pdf_path) as document:
            lines = tree_to_lines(
                document.read_outline(),
                document.pages,
                document.named_destinations,
                policy=settings.unsupported_destination_policy,
            )
        write_lines(outline_path, lines, settings.text_encoding, settings.temp_dir)
        logger.info("Saved %d outline lines to %s", len(lines), outline_path)
    return lines


def update_outline(
    pdf_path: Path,
    outline_path: Path,
    settings: Settings | None = None,
    *,
    output: Path | None = None,
) -> Path:
    """Replace the document outline with the one described by a text file.

    Args:
        pdf_path: Source PDF.
        outline_path: Text file with one outline line per entry.
        settings: Settings; loaded from the environment when omitted.
        output: Where to write the result; defaults to replacing `pdf_path`.

    Returns:
        Path of the written PDF.
    """

    settings = settings or load_settings()
    target = output or pdf_path
    with document_context(document=str(pdf_path), operation="update-outline"):
        lines = read_lines(outline_path, settings.text_encoding)
        with open_document(pdf_path) as document:
            roots = lines_to_tree(
                lines,
                page_count=document.page_count,
                strict_titles=settings.strict_titles,
            )
            document.write_outline(roots)
            with atomic_path(target, temp_dir=settings.temp_dir) as tmp:
                document.save(tmp)
        logger.info("Updated outline of %s (%d root items)", target, len(roots))
    return target


def save_metadata(pdf_path: Path, metadata_path: Path, settings: Settings | None = None) -> list[str]:
    """Write the document information entries to a text file."""

    settings = settings or load_settings()
    with document_context(document=str(pdf_path), operation="save-metadata"):
        with open_document(pdf_path) as document:
            lines = map_to_lines(document.read_metadata())
        write_lines(metadata_path, lines, settings.text_encoding, settings.temp_dir)
        logger.info("Saved %d metadata entries to %s", len(lines), metadata_path)
    return lines


def update_metadata(
    pdf_path: Path,
    metadata_path: Path,
    settings: Settings | None = None,
    *,
    output: Path | None = None,
) -> Path:
    """Replace the document information entries with those of a text file.

    A malformed line aborts before the document is opened.
    """

    settings = settings or load_settings()
    target = output or pdf_path
    with document_context(document=str(pdf_path), operation="update-metadata"):
        entries = lines_to_map(read_lines(metadata_path, settings.text_encoding))
        with open_document(pdf_path) as document:
            document.write_metadata(entries)
            with atomic_path(target, temp_dir=settings.temp_dir) as tmp:
                document.save(tmp)
        logger.info("Updated %d metadata entries of %s", len(entries), target)
    return target
