"""Script file loading: plain text with encoding fallback, PDF when PyMuPDF is present."""

from __future__ import annotations

import logging
from pathlib import Path

try:
    import fitz as _fitz          # PyMuPDF, optional PDF text extraction
    PYMUPDF_OK = True
except ImportError:
    _fitz = None
    PYMUPDF_OK = False

log = logging.getLogger(__name__)

# Encoding fallback order for file loading
ENCODINGS = ['utf-8-sig', 'utf-8', 'cp1254', 'cp1252', 'cp1250', 'latin-1']


def file_filter() -> str:
    """Filter string for the open-file dialog."""
    if PYMUPDF_OK:
        return ("Text & PDF Files (*.txt *.pdf);;Text Files (*.txt);;"
                "PDF Files (*.pdf);;All Files (*)")
    return "Text Files (*.txt);;All Files (*)"


def read_text_file(path: str | Path) -> tuple[str, str | None]:
    """
    Return (text, error_msg).

    Tries multiple encodings so Windows-1252 / Latin-1 files load cleanly.
    On failure the text is empty and the message is ready to show the user.
    """
    p = Path(path)
    # ── PDF via PyMuPDF ───────────────────────────────────────────────────────
    if p.suffix.lower() == '.pdf':
        if not PYMUPDF_OK:
            return '', (
                "PDF text extraction requires PyMuPDF.\n\n"
                "Install with:  pip install PyMuPDF"
            )
        try:
            doc   = _fitz.open(str(p))
            pages = [page.get_text() for page in doc]
            doc.close()
        except Exception as exc:
            log.warning("PDF read failed for %s: %s", p, exc)
            return '', f"Could not read PDF:\n{exc}"
        return '\n\n'.join(pages).strip(), None

    # ── Plain text with encoding fallback ─────────────────────────────────────
    try:
        raw = p.read_bytes()
    except OSError as exc:
        log.warning("Could not open %s: %s", p, exc)
        return '', f"Could not open file:\n{exc}"
    for enc in ENCODINGS:
        try:
            text = raw.decode(enc)
        except (UnicodeDecodeError, LookupError):
            continue
        log.debug("Loaded %s as %s (%d chars)", p.name, enc, len(text))
        return text, None
    return '', (
        "Could not decode the file with any known encoding.\n"
        "Please save the file as UTF-8 and try again."
    )
