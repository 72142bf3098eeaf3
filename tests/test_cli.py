from __future__ import annotations

from click.testing import CliRunner

from pdfcontentx.cli import cli


def test_cli_prints_progress_and_operations(text_pdf):
    runner = CliRunner()
    result = runner.invoke(cli, [str(text_pdf)])

    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == f"Loading from {text_pdf}..."
    assert lines.count("Decompressing stream...") == 3
    assert "ShowText(body='Hello')" in lines
    assert "ShowText(body='World')" in lines
    assert not any(line.startswith("SetTextFontAndSize") for line in lines)
    assert not any(line.startswith("ShowTextAllowingIndividualGlyphPositioning") for line in lines)


def test_cli_missing_file_exits_with_error(tmp_path):
    runner = CliRunner()
    result = runner.invoke(cli, [str(tmp_path / "missing.pdf")])

    assert result.exit_code == 1
    assert "✗ Error:" in result.output
    assert "not found" in result.output


def test_cli_unknown_operator_exits_with_error(content_pdf_factory):
    path = content_pdf_factory("shading.pdf", [[b"q /Sh0 sh Q"]])
    runner = CliRunner()
    result = runner.invoke(cli, [str(path)])

    assert result.exit_code == 1
    assert "Decompressing stream..." in result.output
    assert "Unknown content stream operator: 'sh'" in result.output


def test_cli_requires_argument():
    runner = CliRunner()
    result = runner.invoke(cli, [])

    assert result.exit_code != 0
