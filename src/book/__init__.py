from .batching import BodyBatch, batch_chapters, plan_batches, split_chapters, strip_leading_dividers
from .build import build_book
from .config import (
    BatchingConfig,
    BookConfig,
    BookMetadata,
    CodeBlockConfig,
    PageLayout,
    RenderTimeouts,
)
from .layout import build_about_author, build_front_matter, build_toc_page, wrap_html
from .render import BookRenderer, RenderError
from .stylesheet import build_stylesheet

__all__ = [
    "build_book",
    "BookRenderer",
    "RenderError",
    "BookConfig",
    "BookMetadata",
    "PageLayout",
    "BatchingConfig",
    "CodeBlockConfig",
    "RenderTimeouts",
    "BodyBatch",
    "batch_chapters",
    "plan_batches",
    "split_chapters",
    "strip_leading_dividers",
    "build_front_matter",
    "build_toc_page",
    "build_about_author",
    "wrap_html",
    "build_stylesheet",
]
