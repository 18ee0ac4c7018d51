"""Classify manuscript headings as chapter, appendix, preface, or section."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .types import RenderState, TocEntry

# Checked in this order, only on depth-2 headings (case-insensitive labels)
CHAPTER_PATTERN = re.compile(r"^chapter\s+(\d+):\s*(.+)", re.IGNORECASE)
APPENDIX_PATTERN = re.compile(r"^appendix\s+([a-z]):\s*(.+)", re.IGNORECASE)
PREFACE_PATTERN = re.compile(r"^preface$", re.IGNORECASE)

# Label prefix removed from the rendered title of chapters and appendices
LABEL_PREFIX = re.compile(r"^(?:chapter|appendix)\s+\w+:\s*", re.IGNORECASE)


@dataclass(frozen=True)
class HeadingMatch:
    """Result of classifying one heading."""

    kind: str  # "chapter", "appendix", "preface", "section", "plain"
    label: str  # "Chapter 3", "Appendix B" or ""
    title: str
    slug: str

    @property
    def is_page_break(self) -> bool:
        return self.kind in ("chapter", "appendix", "preface")


def slugify(text: str) -> str:
    """Return a URL-safe anchor for *text*.

    >>> slugify("Chapter 1: Getting Started!")
    'chapter-1-getting-started'
    """
    slug = re.sub(r"[^\w\s-]", "", text.lower()).strip()
    return re.sub(r"\s+", "-", slug)


def unique_slug(text: str, state: RenderState) -> str:
    """Slugify *text* and suffix repeats with ``-1``, ``-2``, ... in traversal order.

    A suffixed candidate that another heading already owns is skipped, so
    every id in the document is distinct.
    """
    base = slugify(text)
    slug = base
    suffix = state.slug_counts[base]
    while slug in state.used_slugs:
        suffix += 1
        slug = f"{base}-{suffix}"
    state.slug_counts[base] = suffix
    state.used_slugs.add(slug)
    return slug


def classify_heading(raw_text: str, depth: int, state: RenderState) -> HeadingMatch:
    """Classify a heading and advance *state* accordingly.

    Chapter, appendix and preface headings append a TOC entry and move the
    state forward; depth-3 headings append a section entry; everything else
    only consumes a slug.
    """
    raw_text = raw_text.strip()
    slug = unique_slug(raw_text, state)

    if depth == 2:
        chapter = CHAPTER_PATTERN.match(raw_text)
        if chapter:
            number = int(chapter.group(1))
            state.in_front_matter = False
            state.chapter_number = max(state.chapter_number, number)
            label = f"Chapter {number}"
            title = chapter.group(2).strip()
            state.toc.append(TocEntry(2, label, title, slug, "chapter"))
            return HeadingMatch("chapter", label, title, slug)

        appendix = APPENDIX_PATTERN.match(raw_text)
        if appendix:
            state.appendix_letter = appendix.group(1).upper()
            label = f"Appendix {state.appendix_letter}"
            title = appendix.group(2).strip()
            state.toc.append(TocEntry(2, label, title, slug, "appendix"))
            return HeadingMatch("appendix", label, title, slug)

        if PREFACE_PATTERN.match(raw_text):
            state.toc.append(TocEntry(2, "", "Preface", slug, "preface"))
            return HeadingMatch("preface", "", "Preface", slug)

    if depth == 3:
        state.toc.append(TocEntry(3, "", raw_text, slug, "section"))
        return HeadingMatch("section", "", raw_text, slug)

    return HeadingMatch("plain", "", raw_text, slug)
