from .classify_heading import HeadingMatch, classify_heading, slugify
from .code_blocks import highlight_code, is_ascii_diagram, render_code_block
from .preprocess_manuscript import preprocess_manuscript
from .render_manuscript import render_manuscript
from .types import RenderResult, RenderState, TocEntry

__all__ = [
    "preprocess_manuscript",
    "render_manuscript",
    "classify_heading",
    "slugify",
    "is_ascii_diagram",
    "highlight_code",
    "render_code_block",
    "HeadingMatch",
    "RenderResult",
    "RenderState",
    "TocEntry",
]
