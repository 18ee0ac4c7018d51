"""Shared dataclasses for PDF assembly."""

from dataclasses import dataclass, field


@dataclass
class PassResult:
    """One intermediate PDF produced by a rendering pass."""

    path: str
    page_count: int = 0
    anchor_pages: dict[str, int] = field(default_factory=dict)  # slug -> 0-indexed page in this PDF


@dataclass
class StampStyle:
    """Look of the page-number overlay."""

    fontname: str = "helv"  # PyMuPDF base-14 Helvetica
    fontsize: float = 8
    color: tuple[float, float, float] = (0.53, 0.53, 0.53)
    bottom_offset: float = 36  # points from the bottom edge (0.5in)


@dataclass
class BookInfo:
    """Document metadata written into the final PDF."""

    title: str
    author: str = ""
    subject: str = ""
    creator: str = "book-gen"
    producer: str = "PyMuPDF"
    keywords: str = ""


@dataclass
class AssemblyReport:
    """Summary of the merged book."""

    output_path: str
    front_pages: int
    body_pages: int
    size_bytes: int

    @property
    def total_pages(self) -> int:
        return self.front_pages + self.body_pages
