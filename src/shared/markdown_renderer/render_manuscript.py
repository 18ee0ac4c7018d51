"""Markdown to book markup, with a table of contents collected on the way.

Built on markdown-it-py: headings are classified in one pass over the token
stream (threading an explicit ``RenderState``), then custom render rules emit
the styled fragments the book stylesheet expects.
"""

from __future__ import annotations

import re

from markdown_it import MarkdownIt
from markdown_it.common.utils import escapeHtml

from .classify_heading import LABEL_PREFIX, HeadingMatch, classify_heading
from .code_blocks import (
    DIAGRAM_MIN_LINES,
    DIAGRAM_MIN_RATIO,
    LONG_CODE_LINES,
    render_code_block,
)
from .types import RenderResult, RenderState

TASK_MARKER = re.compile(r"^\[([ xX])\]\s+")
CHECKBOX = {True: "☑", False: "☐"}


# ---------------------------------------------------------------------------
# Token passes (run before rendering)
# ---------------------------------------------------------------------------


def _drop_leading_text(inline, length: int) -> None:
    """Remove *length* source characters from the start of an inline token."""
    inline.content = inline.content[length:]
    for child in inline.children or []:
        if length <= 0 or child.type != "text":
            break
        cut = min(length, len(child.content))
        child.content = child.content[cut:]
        length -= cut


def _classify_headings(tokens, state: RenderState) -> None:
    """Attach a HeadingMatch to every heading_open/close pair, in document order."""
    for idx, token in enumerate(tokens):
        if token.type != "heading_open":
            continue
        inline = tokens[idx + 1]
        match = classify_heading(inline.content, int(token.tag[1:]), state)
        token.meta["heading"] = match
        tokens[idx + 2].meta["heading"] = match
        if match.kind in ("chapter", "appendix"):
            prefix = LABEL_PREFIX.match(inline.content.strip())
            if prefix:
                _drop_leading_text(inline, prefix.end())


def _mark_task_items(tokens) -> None:
    """Flag ``- [ ]`` / ``- [x]`` list items and drop the marker from their text."""
    for idx, token in enumerate(tokens):
        if token.type != "list_item_open" or idx + 2 >= len(tokens):
            continue
        if tokens[idx + 1].type != "paragraph_open" or tokens[idx + 2].type != "inline":
            continue
        inline = tokens[idx + 2]
        marker = TASK_MARKER.match(inline.content)
        if not marker:
            continue
        _drop_leading_text(inline, marker.end())
        token.meta["checked"] = marker.group(1).lower() == "x"


# ---------------------------------------------------------------------------
# Render rules
# ---------------------------------------------------------------------------


def _heading_open(self, tokens, idx, options, env):
    match: HeadingMatch | None = tokens[idx].meta.get("heading")
    if match is None:
        return self.renderToken(tokens, idx, options, env)
    if match.is_page_break:
        label = (
            f'<div class="chapter-label">{escapeHtml(match.label)}</div>\n'
            if match.label else ""
        )
        return f'<div class="chapter-break" id="{match.slug}">\n{label}<h1 class="chapter-title">'
    return f'<{tokens[idx].tag} id="{match.slug}">'


def _heading_close(self, tokens, idx, options, env):
    match: HeadingMatch | None = tokens[idx].meta.get("heading")
    if match is not None and match.is_page_break:
        return '</h1>\n<hr class="chapter-rule" />\n</div>\n'
    return f"</{tokens[idx].tag}>\n"


def _fence(self, tokens, idx, options, env):
    token = tokens[idx]
    info = token.info.strip()
    language = info.split(maxsplit=1)[0] if info else ""
    return render_code_block(token.content, language, **env["code_blocks"])


def _code_block(self, tokens, idx, options, env):
    return render_code_block(tokens[idx].content, "", **env["code_blocks"])


def _code_inline(self, tokens, idx, options, env):
    return f'<code class="inline-code">{escapeHtml(tokens[idx].content)}</code>'


def _hr(self, tokens, idx, options, env):
    # Thematic breaks are section dividers, never page breaks
    return '<hr class="section-divider" />\n'


def _blockquote_open(self, tokens, idx, options, env):
    return '<blockquote class="styled-quote">\n'


def _table_open(self, tokens, idx, options, env):
    return '<table class="styled-table">\n'


def _list_item_open(self, tokens, idx, options, env):
    checked = tokens[idx].meta.get("checked")
    if checked is None:
        return self.renderToken(tokens, idx, options, env)
    return f'<li class="task-item"><span class="checkbox">{CHECKBOX[checked]}</span> '


RENDER_RULES = {
    "heading_open": _heading_open,
    "heading_close": _heading_close,
    "fence": _fence,
    "code_block": _code_block,
    "code_inline": _code_inline,
    "hr": _hr,
    "blockquote_open": _blockquote_open,
    "table_open": _table_open,
    "list_item_open": _list_item_open,
}


def build_parser() -> MarkdownIt:
    """CommonMark + GFM tables and strikethrough, raw HTML passed through."""
    md = MarkdownIt("commonmark", {"html": True})
    md.enable(["table", "strikethrough"])
    for name, rule in RENDER_RULES.items():
        md.add_render_rule(name, rule)
    return md


def render_manuscript(
    text: str,
    state: RenderState | None = None,
    long_code_lines: int = LONG_CODE_LINES,
    diagram_min_lines: int = DIAGRAM_MIN_LINES,
    diagram_min_ratio: float = DIAGRAM_MIN_RATIO,
) -> RenderResult:
    """Render manuscript Markdown to book markup.

    Args:
        text: Preprocessed manuscript Markdown.
        state: Parse state to continue from; a fresh one when omitted.
        long_code_lines: Fences longer than this may break across pages.
        diagram_min_lines: Minimum fence length considered for diagrams.
        diagram_min_ratio: Share of box-drawing lines a diagram must exceed.

    Returns:
        RenderResult with the body markup and the final state (TOC included).
    """
    state = state if state is not None else RenderState()
    env = {
        "code_blocks": {
            "long_code_lines": long_code_lines,
            "diagram_min_lines": diagram_min_lines,
            "diagram_min_ratio": diagram_min_ratio,
        }
    }
    md = build_parser()
    tokens = md.parse(text, env)
    _classify_headings(tokens, state)
    _mark_task_items(tokens)
    html = md.renderer.render(tokens, md.options, env)
    return RenderResult(html=html, state=state)
