"""Page chrome around the rendered manuscript: title, copyright, TOC, about pages."""

from __future__ import annotations

from html import escape

from shared.markdown_renderer import TocEntry

from .config import BookMetadata, PageLayout
from .stylesheet import build_stylesheet


def build_title_page(meta: BookMetadata) -> str:
    words = "\n".join(
        f'    <div class="title-word">{escape(word)}</div>' for word in meta.title.upper().split()
    )
    version = " &middot; ".join(
        escape(part) for part in (meta.edition, meta.version, meta.published) if part
    )
    return f"""
<div class="title-page">
  <hr class="title-rule" />
  <div class="title-block">
{words}
  </div>
  <div class="title-subtitle">{escape(meta.subtitle)}</div>
  <hr class="title-rule" />
  <div class="title-tagline">{escape(meta.tagline)}</div>
  <div class="title-author">{escape(meta.author)}</div>
  <div class="title-role">{escape(meta.author_role)}</div>
  <div class="title-version">{version}</div>
</div>
"""


def build_copyright_page(meta: BookMetadata) -> str:
    lines = [
        f'<p class="copyright-title">{escape(meta.full_title)}</p>',
        f'<p class="copyright-edition">{escape(meta.edition)}</p>',
        "<br/>",
        f"<p>Copyright &copy; {escape(meta.copyright_year)} {escape(meta.author)}. All rights reserved.</p>",
        "<p>No part of this publication may be reproduced, distributed, or transmitted "
        "in any form or by any means without the prior written permission of the author.</p>",
        "<br/>",
    ]
    if meta.built_with:
        lines.append(f'<p class="copyright-meta"><strong>Built with:</strong> {escape(meta.built_with)}</p>')
    if meta.source_code:
        lines.append(f'<p class="copyright-meta"><strong>Source code:</strong> {escape(meta.source_code)}</p>')
    if meta.published:
        lines += ["<br/>", f'<p class="copyright-meta">{escape(meta.edition)}, {escape(meta.published)}</p>']
    body = "\n    ".join(lines)
    return f"""
<div class="copyright-page">
  <div class="copyright-content">
    {body}
  </div>
</div>
"""


def build_toc_page(entries: list[TocEntry]) -> str:
    """Contents page: chapters as bold lines, depth-3 sections indented below."""
    rows = []
    for entry in entries:
        css = "toc-chapter" if entry.depth == 2 else "toc-section"
        rows.append(f'<div class="{css}"><a href="#{entry.slug}">{escape(entry.label)}</a></div>')
    return (
        '<div class="toc-page"><h1 class="toc-heading">Contents</h1>'
        f'<div class="toc-entries">{"".join(rows)}</div></div>'
    )


def build_about_author(meta: BookMetadata) -> str:
    paragraphs = "\n    ".join(f"<p>{escape(p)}</p>" for p in meta.about_author)
    return f"""
<div class="about-author-page">
  <h1 class="about-heading">About the Author</h1>
  <hr class="chapter-rule" />
  <div class="about-content">
    {paragraphs}
  </div>
</div>
"""


def wrap_html(body: str, title: str, layout: PageLayout) -> str:
    """Full HTML document around *body* with the shared stylesheet inlined."""
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8" />
<title>{escape(title)}</title>
<style>
{build_stylesheet(layout)}
</style>
</head>
<body>{body}</body>
</html>"""


def build_front_matter(meta: BookMetadata, entries: list[TocEntry], layout: PageLayout) -> str:
    """Title + copyright + contents as one document (rendered without header/footer)."""
    body = build_title_page(meta) + build_copyright_page(meta) + build_toc_page(entries)
    return wrap_html(body, meta.title, layout)
