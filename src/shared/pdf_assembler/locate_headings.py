"""Find the page each heading landed on in a rendered PDF via PyMuPDF."""

import re

import pymupdf

_MARKUP = re.compile(r"[`*_~]")

HEADER_BAND = 61.2  # points; the 0.85in top margin holding the running header
MIN_HEADING_SIZE = 14.0  # points; h3 prints at 16pt, body text at 10pt


def _normalize(title: str) -> str:
    """Casefolded title without inline markup or repeated whitespace."""
    return " ".join(_MARKUP.sub("", title).split()).casefold()


def _from_outline(raw_toc: list, wanted: list[str]) -> list[int | None]:
    """Match titles against the outline in order, never moving backwards."""
    pages: list[int | None] = []
    cursor = 0
    for title in wanted:
        found = None
        for pos in range(cursor, len(raw_toc)):
            _level, text, page_1based = raw_toc[pos][:3]
            if page_1based >= 1 and _normalize(text) == title:
                found = page_1based - 1
                cursor = pos + 1
                break
        pages.append(found)
    return pages


def _heading_lines(
    page: pymupdf.Page,
    header_band: float,
    min_size: float,
) -> set[str]:
    """Normalised heading-sized text on *page*, below the running header.

    Each heading-sized line counts on its own, and so does every block's
    heading-sized lines joined together (titles that wrap).
    """
    clip = pymupdf.Rect(0, header_band, page.rect.width, page.rect.height)
    found: set[str] = set()
    for block in page.get_text("dict", clip=clip)["blocks"]:
        joined = []
        for line in block.get("lines", []):
            spans = line["spans"]
            if not spans or max(span["size"] for span in spans) < min_size:
                continue
            text = "".join(span["text"] for span in spans)
            found.add(_normalize(text))
            joined.append(text)
        if len(joined) > 1:
            found.add(_normalize(" ".join(joined)))
    return found


def locate_headings(
    pdf_path: str,
    titles: list[str],
    header_band: float = HEADER_BAND,
    min_size: float = MIN_HEADING_SIZE,
) -> list[int | None]:
    """Return the 0-based page of each heading title, in order.

    Uses the document outline the browser embedded during capture. Titles
    missing from it are matched against whole heading-sized lines below the
    running header, starting from the last page already resolved. Unresolvable
    titles map to None.
    """
    wanted = [_normalize(t) for t in titles]
    doc = pymupdf.open(pdf_path)
    try:
        pages = _from_outline(doc.get_toc(), wanted)
        headings: dict[int, set[str]] = {}
        last = 0
        for i, page in enumerate(pages):
            if page is not None:
                last = page
                continue
            for page_num in range(last, len(doc)):
                if page_num not in headings:
                    headings[page_num] = _heading_lines(doc[page_num], header_band, min_size)
                if wanted[i] in headings[page_num]:
                    pages[i] = last = page_num
                    break
    finally:
        doc.close()
    return pages


def count_pages(pdf_path: str) -> int:
    """Number of pages in a PDF."""
    doc = pymupdf.open(pdf_path)
    try:
        return len(doc)
    finally:
        doc.close()
