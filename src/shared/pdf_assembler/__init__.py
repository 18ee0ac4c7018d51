from .assemble_book import assemble_book, build_outline, stamp_page_numbers
from .locate_headings import count_pages, locate_headings
from .page_labels import page_label, to_roman
from .types import AssemblyReport, BookInfo, PassResult, StampStyle

__all__ = [
    "assemble_book",
    "build_outline",
    "stamp_page_numbers",
    "locate_headings",
    "count_pages",
    "page_label",
    "to_roman",
    "AssemblyReport",
    "BookInfo",
    "PassResult",
    "StampStyle",
]
