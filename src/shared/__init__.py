from .markdown_renderer import preprocess_manuscript, render_manuscript
from .pdf_assembler import assemble_book, locate_headings

__all__ = [
    "preprocess_manuscript",
    "render_manuscript",
    "assemble_book",
    "locate_headings",
]
