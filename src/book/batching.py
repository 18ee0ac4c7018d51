"""Cut the rendered body into chapter batches small enough to print in one pass.

Chromium stops rendering a document past roughly 65K px of height, so a
whole book cannot be printed at once. Batches always end on a chapter
boundary: a chapter is never split between two passes.
"""

import re
from dataclasses import dataclass, field

from shared.markdown_renderer import TocEntry

CHAPTER_BREAK = re.compile(r'(?=<div class="chapter-break")')
LEADING_DIVIDERS = re.compile(r'^(?:\s*<hr class="section-divider"\s*/?>\s*)+')


@dataclass
class BodyBatch:
    """Consecutive chapters rendered together in one pass."""

    index: int
    chapters: list[str]
    entries: list[TocEntry] = field(default_factory=list)

    def html(self, about_html: str = "") -> str:
        """Batch body markup; *about_html* is appended after the last chapter."""
        return f'<div class="book-body">{"".join(self.chapters)}{about_html}</div>'


def strip_leading_dividers(html: str) -> str:
    """Drop section dividers at the very start of the body (they print blank pages)."""
    return LEADING_DIVIDERS.sub("", html, count=1)


def split_chapters(html: str) -> list[str]:
    """Split body markup before every chapter / appendix / preface break.

    Content ahead of the first break stays at the head of the first chunk,
    so the chunk count equals the number of breaks (or 1 when there are none
    but the body is not blank).
    """
    chunks = [c for c in CHAPTER_BREAK.split(html) if c.strip()]
    if len(chunks) > 1 and not chunks[0].lstrip().startswith('<div class="chapter-break"'):
        chunks[1] = chunks[0] + chunks[1]
        del chunks[0]
    return chunks


def _chunk_of_entries(entries: list[TocEntry]) -> list[int]:
    """Chunk index for each TOC entry: sections follow their chapter."""
    indexes = []
    current = -1
    for entry in entries:
        if entry.is_top_level:
            current += 1
        indexes.append(max(current, 0))
    return indexes


def batch_chapters(
    chunks: list[str],
    entries: list[TocEntry],
    size: int = 5,
) -> list[BodyBatch]:
    """Group consecutive chapter chunks into batches of at most *size*.

    Produces ``ceil(len(chunks) / size)`` batches in document order; every
    TOC entry is attached to the batch holding its chapter.
    """
    if size < 1:
        raise ValueError(f"Batch size must be >= 1, got {size}")

    batches = [
        BodyBatch(index=i, chapters=chunks[start:start + size])
        for i, start in enumerate(range(0, len(chunks), size))
    ]

    for entry, chunk in zip(entries, _chunk_of_entries(entries), strict=True):
        if batches:
            batches[min(chunk // size, len(batches) - 1)].entries.append(entry)
    return batches


def plan_batches(body_html: str, entries: list[TocEntry], size: int = 5) -> list[BodyBatch]:
    """Strip leading dividers, split at chapter breaks and group into batches."""
    return batch_chapters(split_chapters(strip_leading_dividers(body_html)), entries, size)
