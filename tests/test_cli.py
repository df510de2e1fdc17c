"""Tests for the command-line interface."""

from __future__ import annotations

from pathlib import Path

from typer.testing import CliRunner

from pdfmeta.cli import app
from pdfmeta.config import APP_VERSION

runner = CliRunner()


def test_version() -> None:
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert APP_VERSION in result.stdout


def test_save_and_update_outline(make_pdf, tmp_path: Path) -> None:
    pdf = make_pdf(outline=[("Intro", 0, [])])
    outline_file = tmp_path / "outline.txt"

    result = runner.invoke(app, ["save-outline", str(pdf), str(outline_file)])
    assert result.exit_code == 0, result.output
    assert outline_file.read_text(encoding="utf-8") == "Intro|1\n"

    outline_file.write_text("Intro|1\n    Details|2\n", encoding="utf-8")
    output = tmp_path / "out.pdf"
    result = runner.invoke(app, ["update-outline", str(pdf), str(outline_file), "--output", str(output)])
    assert result.exit_code == 0, result.output

    saved = tmp_path / "saved.txt"
    result = runner.invoke(app, ["save-outline", str(output), str(saved)])
    assert result.exit_code == 0, result.output
    assert saved.read_text(encoding="utf-8") == "Intro|1\n    Details|2\n"


def test_metadata_commands(make_pdf, tmp_path: Path) -> None:
    pdf = make_pdf(metadata={"Title": "Doc"})
    metadata_file = tmp_path / "metadata.txt"
    metadata_file.write_text("Title|Changed\n", encoding="utf-8")

    result = runner.invoke(app, ["update-metadata", str(pdf), str(metadata_file)])
    assert result.exit_code == 0, result.output

    saved = tmp_path / "saved.txt"
    result = runner.invoke(app, ["save-metadata", str(pdf), str(saved)])
    assert result.exit_code == 0, result.output
    assert "Title|Changed" in saved.read_text(encoding="utf-8").splitlines()


def test_failure_exits_with_error(make_pdf, tmp_path: Path) -> None:
    """A malformed metadata file should fail the command and keep the PDF."""

    pdf = make_pdf()
    original = pdf.read_bytes()
    metadata_file = tmp_path / "metadata.txt"
    metadata_file.write_text("no separator here\n", encoding="utf-8")

    result = runner.invoke(app, ["update-metadata", str(pdf), str(metadata_file)])

    assert result.exit_code == 1
    assert pdf.read_bytes() == original


def test_encrypted_document_fails(make_pdf, tmp_path: Path) -> None:
    pdf = make_pdf(password="secret")
    result = runner.invoke(app, ["save-outline", str(pdf), str(tmp_path / "outline.txt")])
    assert result.exit_code == 1
