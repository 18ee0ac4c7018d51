"""Merge the rendered passes into one book PDF and post-process it with PyMuPDF."""

from __future__ import annotations

import os
from pathlib import Path

import pymupdf

from shared.markdown_renderer.types import TocEntry

from .page_labels import page_label
from .types import AssemblyReport, BookInfo, PassResult, StampStyle


def stamp_page_numbers(
    doc: pymupdf.Document,
    front_count: int,
    style: StampStyle | None = None,
) -> None:
    """Overlay a centred page label near the bottom of every page but the first.

    Drawn on top of whatever the browser printed, so the numbering is
    continuous across passes that were rendered independently.
    """
    style = style or StampStyle()
    for index, page in enumerate(doc):
        label = page_label(index, front_count)
        if label is None:
            continue
        width = pymupdf.get_text_length(label, fontname=style.fontname, fontsize=style.fontsize)
        point = pymupdf.Point(
            (page.rect.width - width) / 2,
            page.rect.height - style.bottom_offset,
        )
        page.insert_text(
            point,
            label,
            fontname=style.fontname,
            fontsize=style.fontsize,
            color=style.color,
        )


def build_outline(
    entries: list[TocEntry],
    anchor_pages: dict[str, int],
    default_page: int,
) -> list[list]:
    """Two-level outline in PyMuPDF ``set_toc`` format (1-based pages).

    Chapters, appendices and the preface sit at level 1 with their sections
    nested below. Sections seen before any top-level entry are promoted to
    level 1. An entry whose anchor was not observed points at the previous
    entry's page (or *default_page* for the first one).
    """
    outline: list[list] = []
    last_page = default_page
    has_parent = False
    for entry in entries:
        page = anchor_pages.get(entry.slug, last_page)
        last_page = page
        if entry.is_top_level:
            level = 1
            has_parent = True
        else:
            level = 2 if has_parent else 1
        outline.append([level, entry.label, page + 1])
    return outline


def _append(final: pymupdf.Document, pdf_path: str) -> int:
    """Copy every page of *pdf_path* onto the end of *final*; return the count."""
    src = pymupdf.open(pdf_path)
    try:
        final.insert_pdf(src)
        return len(src)
    finally:
        src.close()


def assemble_book(
    front: PassResult,
    batches: list[PassResult],
    output_path: str,
    entries: list[TocEntry],
    info: BookInfo,
    style: StampStyle | None = None,
    cleanup: bool = True,
) -> AssemblyReport:
    """Concatenate front matter and body batches into the final book.

    Args:
        front: Front-matter pass (title, copyright, TOC).
        batches: Body passes in batch order.
        output_path: Where to write the book. Written through a ``.part``
            file and renamed, so a failed merge leaves nothing here.
        entries: TOC entries collected while rendering, for the outline.
        info: Document metadata.
        style: Page-number overlay style.
        cleanup: Delete the intermediate PDFs once the book is saved.

    Returns:
        AssemblyReport with page counts and file size.
    """
    if not batches:
        print("  Warning: no body batches, the book will only hold front matter")

    partial = f"{output_path}.part"
    final = pymupdf.open()
    try:
        front_pages = _append(final, front.path)
        print(f"  Front matter: {front_pages} pages")

        anchors: dict[str, int] = {}
        body_pages = 0
        for i, part in enumerate(batches):
            offset = len(final)
            count = _append(final, part.path)
            for slug, page in part.anchor_pages.items():
                anchors[slug] = offset + page
            body_pages += count
            print(f"  Body batch {i + 1}: {count} pages")
        print(f"  Body content total: {body_pages} pages")

        stamp_page_numbers(final, front_pages, style)

        now = pymupdf.get_pdf_now()
        final.set_metadata({
            "title": info.title,
            "author": info.author,
            "subject": info.subject,
            "keywords": info.keywords,
            "creator": info.creator,
            "producer": info.producer,
            "creationDate": now,
            "modDate": now,
        })

        print("  Adding PDF bookmarks...")
        last_index = len(final) - 1
        outline = [
            [level, title, min(page, last_index + 1)]
            for level, title, page in build_outline(entries, anchors, default_page=front_pages)
        ]
        final.set_toc(outline)

        Path(output_path).parent.mkdir(parents=True, exist_ok=True)
        final.save(partial, garbage=3, deflate=True)
    except BaseException:
        Path(partial).unlink(missing_ok=True)
        raise
    finally:
        final.close()

    os.replace(partial, output_path)

    if cleanup:
        for part in [front, *batches]:
            Path(part.path).unlink(missing_ok=True)

    return AssemblyReport(
        output_path=output_path,
        front_pages=front_pages,
        body_pages=body_pages,
        size_bytes=os.path.getsize(output_path),
    )
