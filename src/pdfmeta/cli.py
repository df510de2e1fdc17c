"""CLI entrypoints for pdfmeta."""

from __future__ import annotations

from pathlib import Path
from typing import Callable

import typer

from pdfmeta import service
from pdfmeta.config import APP_NAME, APP_VERSION, load_settings
from pdfmeta.errors import PdfMetaError
from pdfmeta.logging import configure_logging, get_logger, log_exception

app = typer.Typer(add_completion=False, help="Edit PDF outlines (bookmarks) and metadata as plain text")
logger = get_logger(__name__)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} ver. {APP_VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show program version.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """Convert PDF outlines and metadata to and from text files."""


def _run(action: Callable[..., object], *args: object, **kwargs: object) -> None:
    settings = load_settings()
    configure_logging(settings.log_level)
    try:
        action(*args, settings, **kwargs)
    except (PdfMetaError, OSError) as exc:
        log_exception(logger, "Conversion failed", error=str(exc))
        raise typer.Exit(code=1) from exc


@app.command("save-outline")
def save_outline(
    pdf: Path = typer.Argument(..., exists=True, dir_okay=False, help="Source PDF file."),
    outline_file: Path = typer.Argument(..., help="Text file to write the outline (bookmarks) to."),
) -> None:
    """Save Outline (bookmarks) to a text file."""

    _run(service.save_outline, pdf, outline_file)


@app.command("update-outline")
def update_outline(
    pdf: Path = typer.Argument(..., exists=True, dir_okay=False, help="Source PDF file."),
    outline_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Text file with the outline."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the result here instead of in place."),
) -> None:
    """Update Outline (bookmarks) from a text file."""

    _run(service.update_outline, pdf, outline_file, output=output)


@app.command("save-metadata")
def save_metadata(
    pdf: Path = typer.Argument(..., exists=True, dir_okay=False, help="Source PDF file."),
    metadata_file: Path = typer.Argument(..., help="Text file to write the metadata to."),
) -> None:
    """Save Metadata to a text file."""

    _run(service.save_metadata, pdf, metadata_file)


@app.command("update-metadata")
def update_metadata(
    pdf: Path = typer.Argument(..., exists=True, dir_okay=False, help="Source PDF file."),
    metadata_file: Path = typer.Argument(..., exists=True, dir_okay=False, help="Text file with the metadata."),
    output: Path | None = typer.Option(None, "--output", "-o", help="Write the result here instead of in place."),
) -> None:
    """Update Metadata from a text file."""

    _run(service.update_metadata, pdf, metadata_file, output=output)


if __name__ == "__main__":
    app()
