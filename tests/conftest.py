"""Shared fixtures and path setup for the test suite."""

import sys
from pathlib import Path

import pymupdf
import pytest

# Mirror the sys.path setup used by the pipeline scripts; src/ goes first so
# the `book` package wins over scripts/book.py.
_APP = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_APP / "scripts"))
sys.path.insert(0, str(_APP / "src"))


# ---------------------------------------------------------------------------
# Tiny PDFs built with PyMuPDF
# ---------------------------------------------------------------------------

def write_pdf(path, page_texts, toc=None, fontsize=12, header=None):
    """Write a 7x10in PDF with one text line per page; return the path as str.

    *header*, when given, is printed in the top margin of every page.
    """
    doc = pymupdf.open()
    for text in page_texts:
        page = doc.new_page(width=504, height=720)
        if text:
            page.insert_text((72, 100), text, fontname="helv", fontsize=fontsize)
        if header:
            page.insert_text((72, 30), header, fontname="helv", fontsize=7)
    if toc:
        doc.set_toc(toc)
    doc.save(str(path))
    doc.close()
    return str(path)


@pytest.fixture
def make_pdf(tmp_path):
    """Factory fixture: make_pdf("name.pdf", ["page 1 text", ...], toc=None, ...)."""
    def _make(name, page_texts, toc=None, **kwargs):
        return write_pdf(tmp_path / name, page_texts, toc, **kwargs)
    return _make
