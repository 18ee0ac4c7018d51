"""Tests for the front-matter layout and book configuration."""

import pytest

from book import BatchingConfig, BookConfig, BookMetadata, PageLayout
from book.layout import (
    build_about_author,
    build_copyright_page,
    build_front_matter,
    build_title_page,
    build_toc_page,
)
from book.stylesheet import build_stylesheet
from shared.markdown_renderer import TocEntry

META = BookMetadata(
    title="Building Things",
    subtitle="From Zero",
    tagline="A Guide",
    author="Sam Author",
    author_role="Engineer",
    version="v1.0.0",
    published="February 2026",
    copyright_year="2026",
    built_with="Python & PyMuPDF",
    source_code="example.org/repo",
    about_author=("First paragraph.", "Second <paragraph>."),
)


class TestTitleAndCopyright:
    """Title and copyright pages render the book metadata."""

    def test_title_words_stacked_uppercase(self):
        html = build_title_page(META)
        assert '<div class="title-word">BUILDING</div>' in html
        assert '<div class="title-word">THINGS</div>' in html
        assert "First Edition &middot; v1.0.0 &middot; February 2026" in html

    def test_copyright_lines(self):
        html = build_copyright_page(META)
        assert "Building Things: From Zero" in html
        assert "Copyright &copy; 2026 Sam Author. All rights reserved." in html
        assert "Python &amp; PyMuPDF" in html
        assert "example.org/repo" in html

    def test_copyright_optional_lines_omitted(self):
        html = build_copyright_page(BookMetadata(title="Bare"))
        assert "Built with" not in html
        assert "Source code" not in html

    def test_about_author_escaped(self):
        html = build_about_author(META)
        assert "<p>First paragraph.</p>" in html
        assert "Second &lt;paragraph&gt;." in html


class TestTocPage:
    """The contents page links every entry to its anchor."""

    def test_entries(self):
        entries = [
            TocEntry(2, "Chapter 1", "Start & Go", "chapter-1-start-go", "chapter"),
            TocEntry(3, "", "Setup", "setup", "section"),
        ]
        html = build_toc_page(entries)
        assert (
            '<div class="toc-chapter"><a href="#chapter-1-start-go">'
            "Chapter 1: Start &amp; Go</a></div>"
        ) in html
        assert '<div class="toc-section"><a href="#setup">Setup</a></div>' in html

    def test_front_matter_document(self):
        html = build_front_matter(META, [], PageLayout())
        assert html.startswith("<!DOCTYPE html>")
        assert "size: 7in 10in;" in html
        body = html[html.index("<body>"):]
        assert body.index("title-page") < body.index("copyright-page") < body.index("toc-page")


class TestConfig:
    """Dataclass defaults and validation."""

    def test_defaults_filled(self):
        config = BookConfig(metadata=BookMetadata(title="T"))
        assert config.layout.width == "7in"
        assert config.batching.chapters_per_batch == 5
        assert config.batching.max_render_height == 65_000
        assert config.code_blocks.long_code_lines == 35
        assert config.timeouts.capture == 300_000
        assert config.metadata.running_header == "T"

    def test_full_title_without_subtitle(self):
        assert BookMetadata(title="Solo").full_title == "Solo"

    def test_invalid_batch_size(self):
        with pytest.raises(ValueError, match="chapters_per_batch"):
            BatchingConfig(chapters_per_batch=0)

    def test_empty_layout(self):
        with pytest.raises(ValueError):
            PageLayout(width=" ")

    def test_stylesheet_margins(self):
        css = build_stylesheet(PageLayout(margin_left="1.25in"))
        assert "margin: 0.85in 0.75in 0.85in 1.25in;" in css

    def test_shipped_book_config(self):
        from configs.book import config

        assert config.metadata.title == "Building Microservices Full-Stack"
        assert config.metadata.author == "Manazir Ali"
        assert len(config.metadata.about_author) == 3
        assert config.batching.chapters_per_batch == 5
