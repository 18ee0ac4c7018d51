"""Shared dataclasses for manuscript rendering."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field

TOP_LEVEL_KINDS = ("chapter", "appendix", "preface")


@dataclass(frozen=True)
class TocEntry:
    depth: int  # 2 = chapter/appendix/preface, 3 = section
    number: str  # "Chapter 3", "Appendix B" or ""
    title: str
    slug: str
    kind: str  # "chapter", "appendix", "preface", "section"

    @property
    def is_top_level(self) -> bool:
        return self.kind in TOP_LEVEL_KINDS

    @property
    def label(self) -> str:
        """Display text used by the TOC page and the PDF outline."""
        return f"{self.number}: {self.title}" if self.number else self.title


@dataclass
class RenderState:
    """Parse state accumulated over one top-to-bottom traversal.

    Only the heading handler mutates it, and only forward: the chapter number
    never decreases and ``in_front_matter`` never flips back to True.
    """

    chapter_number: int = 0
    appendix_letter: str = ""
    in_front_matter: bool = True
    toc: list[TocEntry] = field(default_factory=list)
    slug_counts: Counter[str] = field(default_factory=Counter)  # last suffix per base slug
    used_slugs: set[str] = field(default_factory=set)

    @property
    def chapter_count(self) -> int:
        """Number of page-break headings (chapters, appendices, preface)."""
        return sum(1 for e in self.toc if e.is_top_level)


@dataclass
class RenderResult:
    """Rendered body markup plus the state it finished in."""

    html: str
    state: RenderState

    @property
    def toc(self) -> list[TocEntry]:
        return self.state.toc
