"""Tests for script file loading."""

from teleprompter import files
from teleprompter.files import read_text_file


def test_reads_utf8(tmp_path):
    """Plain UTF-8 text loads unchanged."""
    path = tmp_path / "script.txt"
    path.write_text("Grüße aus Köln\n\nZweiter Absatz", encoding="utf-8")
    text, err = read_text_file(path)
    assert err is None
    assert text == "Grüße aus Köln\n\nZweiter Absatz"


def test_strips_bom(tmp_path):
    """A UTF-8 byte-order mark is not part of the script."""
    path = tmp_path / "bom.txt"
    path.write_bytes("\ufeffHello".encode("utf-8"))
    text, err = read_text_file(path)
    assert err is None
    assert text == "Hello"


def test_falls_back_to_legacy_encoding(tmp_path):
    """Windows-1252 files decode through the fallback list."""
    path = tmp_path / "legacy.txt"
    path.write_bytes("café – naïve".encode("cp1252"))
    text, err = read_text_file(path)
    assert err is None
    assert "caf" in text and "na" in text


def test_missing_file_reports_error(tmp_path):
    """Unreadable paths return an error message instead of raising."""
    text, err = read_text_file(tmp_path / "nope.txt")
    assert text == ""
    assert "Could not open file" in err


def test_pdf_without_pymupdf(tmp_path, monkeypatch):
    """PDF paths explain the missing optional dependency."""
    monkeypatch.setattr(files, "PYMUPDF_OK", False)
    text, err = read_text_file(tmp_path / "deck.pdf")
    assert text == ""
    assert "PyMuPDF" in err


def test_file_filter_mentions_pdf_only_when_available(monkeypatch):
    """The dialog filter follows PDF support."""
    monkeypatch.setattr(files, "PYMUPDF_OK", False)
    assert "pdf" not in files.file_filter()
    monkeypatch.setattr(files, "PYMUPDF_OK", True)
    assert "*.pdf" in files.file_filter()
