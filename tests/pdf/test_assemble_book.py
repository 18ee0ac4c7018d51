"""Tests for assemble_book: merge, stamping, metadata, outline and cleanup."""

import os
from unittest.mock import patch

import pymupdf
import pytest

from shared.markdown_renderer import TocEntry
from shared.pdf_assembler import BookInfo, PassResult, assemble_book

CH1 = TocEntry(2, "Chapter 1", "Start", "chapter-1-start", "chapter")
S1 = TocEntry(3, "", "Setup", "setup", "section")
CH2 = TocEntry(2, "Chapter 2", "Next", "chapter-2-next", "chapter")

INFO = BookInfo(title="Test Book: Subtitle", author="A. Writer", subject="Tagline")


def _footer_text(page):
    clip = pymupdf.Rect(0, page.rect.height - 60, page.rect.width, page.rect.height)
    return page.get_text("text", clip=clip).strip()


@pytest.fixture
def passes(make_pdf):
    front = PassResult(make_pdf("front.pdf", [f"front {i}" for i in range(4)]))
    body1 = PassResult(
        make_pdf("body_0.pdf", [f"one {i}" for i in range(10)]),
        anchor_pages={"chapter-1-start": 0, "setup": 3},
    )
    body2 = PassResult(
        make_pdf("body_1.pdf", [f"two {i}" for i in range(8)]),
        anchor_pages={"chapter-2-next": 0},
    )
    return front, [body1, body2]


class TestAssembleBook:
    """assemble_book() produces one numbered, bookmarked PDF."""

    def test_page_counts_and_labels(self, passes, tmp_path):
        front, batches = passes
        output = str(tmp_path / "book.pdf")

        report = assemble_book(front, batches, output, [CH1, S1, CH2], INFO)

        assert report.front_pages == 4
        assert report.body_pages == 18
        assert report.total_pages == 22
        assert report.size_bytes == os.path.getsize(output)

        doc = pymupdf.open(output)
        try:
            labels = [_footer_text(page) for page in doc]
        finally:
            doc.close()
        assert labels == ["", "ii", "iii", "iv"] + [str(n) for n in range(1, 19)]

    def test_pages_in_order(self, passes, tmp_path):
        front, batches = passes
        output = str(tmp_path / "book.pdf")
        assemble_book(front, batches, output, [], INFO)

        doc = pymupdf.open(output)
        try:
            assert "front 0" in doc[0].get_text()
            assert "one 0" in doc[4].get_text()
            assert "two 0" in doc[14].get_text()
            assert "two 7" in doc[21].get_text()
        finally:
            doc.close()

    def test_metadata(self, passes, tmp_path):
        front, batches = passes
        output = str(tmp_path / "book.pdf")
        assemble_book(front, batches, output, [], INFO)

        doc = pymupdf.open(output)
        try:
            meta = doc.metadata
        finally:
            doc.close()
        assert meta["title"] == "Test Book: Subtitle"
        assert meta["author"] == "A. Writer"
        assert meta["subject"] == "Tagline"
        assert meta["creator"] == "book-gen"
        assert meta["creationDate"]

    def test_outline_offsets_batches(self, passes, tmp_path):
        front, batches = passes
        output = str(tmp_path / "book.pdf")
        assemble_book(front, batches, output, [CH1, S1, CH2], INFO)

        doc = pymupdf.open(output)
        try:
            toc = doc.get_toc()
        finally:
            doc.close()
        assert toc == [
            [1, "Chapter 1: Start", 5],
            [2, "Setup", 8],
            [1, "Chapter 2: Next", 15],
        ]

    def test_intermediates_removed(self, passes, tmp_path):
        front, batches = passes
        assemble_book(front, batches, str(tmp_path / "book.pdf"), [], INFO)
        for part in [front, *batches]:
            assert not os.path.exists(part.path)
        assert not os.path.exists(str(tmp_path / "book.pdf.part"))

    def test_cleanup_can_be_disabled(self, passes, tmp_path):
        front, batches = passes
        assemble_book(front, batches, str(tmp_path / "book.pdf"), [], INFO, cleanup=False)
        assert os.path.exists(front.path)

    def test_creates_output_directory(self, passes, tmp_path):
        front, batches = passes
        output = str(tmp_path / "nested" / "out" / "book.pdf")
        assemble_book(front, batches, output, [], INFO)
        assert os.path.exists(output)


class TestAssembleFailure:
    """A failed merge leaves nothing at the output path."""

    def test_no_output_on_failure(self, passes, tmp_path):
        front, batches = passes
        output = str(tmp_path / "book.pdf")

        with patch("shared.pdf_assembler.assemble_book.stamp_page_numbers") as mock_stamp:
            mock_stamp.side_effect = RuntimeError("stamp failed")
            with pytest.raises(RuntimeError, match="stamp failed"):
                assemble_book(front, batches, output, [], INFO)

        assert not os.path.exists(output)
        assert not os.path.exists(output + ".part")

    def test_existing_output_untouched_on_failure(self, passes, tmp_path):
        front, batches = passes
        output = tmp_path / "book.pdf"
        output.write_bytes(b"previous book")

        with patch("shared.pdf_assembler.assemble_book.stamp_page_numbers") as mock_stamp:
            mock_stamp.side_effect = RuntimeError("stamp failed")
            with pytest.raises(RuntimeError):
                assemble_book(front, batches, str(output), [], INFO)

        assert output.read_bytes() == b"previous book"

    def test_missing_intermediate_raises(self, passes, tmp_path):
        front, batches = passes
        os.remove(batches[1].path)
        output = str(tmp_path / "book.pdf")

        with pytest.raises((OSError, RuntimeError)):
            assemble_book(front, batches, output, [], INFO)

        assert not os.path.exists(output)
