"""Code-fence rendering: ASCII-diagram detection and syntax highlighting."""

from __future__ import annotations

import html

from pygments import highlight
from pygments.formatters import HtmlFormatter
from pygments.lexers import get_lexer_by_name, guess_lexer
from pygments.util import ClassNotFound

BOX_DRAWING_CHARS = frozenset("┌┐└┘│─┬┴├┤▶◀▼▲═║╔╗╚╝╠╣╦╩")

DIAGRAM_MIN_LINES = 5
DIAGRAM_MIN_RATIO = 0.3  # strictly more than this share of lines must hold a glyph
LONG_CODE_LINES = 35  # longer fences may break across pages

_FORMATTER = HtmlFormatter(nowrap=True)


def _lines(code: str) -> list[str]:
    return code.removesuffix("\n").split("\n")


def is_ascii_diagram(
    code: str,
    min_lines: int = DIAGRAM_MIN_LINES,
    min_ratio: float = DIAGRAM_MIN_RATIO,
) -> bool:
    """True when *code* has at least *min_lines* lines and more than
    *min_ratio* of them contain a box-drawing character."""
    lines = _lines(code)
    box_lines = sum(1 for line in lines if BOX_DRAWING_CHARS.intersection(line))
    return len(lines) >= min_lines and box_lines / len(lines) > min_ratio


def render_diagram(code: str) -> str:
    """Render an ASCII diagram as an escaped monospace block."""
    escaped = html.escape("\n".join(_lines(code)), quote=False)
    return f'<div class="diagram"><pre>{escaped}</pre></div>\n'


def highlight_code(code: str, language: str = "") -> str:
    """Return highlighted HTML for *code*, best effort.

    Lexer by declared language, then auto-detection; escaped raw text when
    neither works or highlighting itself fails.
    """
    lexer = None
    if language:
        try:
            lexer = get_lexer_by_name(language)
        except ClassNotFound:
            pass  # fall through to auto-detection
    try:
        if lexer is None:
            lexer = guess_lexer(code)
        return highlight(code, lexer, _FORMATTER)
    except Exception:  # noqa: BLE001 - a bad fence must never stop the build
        return html.escape(code, quote=False)


def render_code_block(
    code: str,
    language: str = "",
    long_code_lines: int = LONG_CODE_LINES,
    diagram_min_lines: int = DIAGRAM_MIN_LINES,
    diagram_min_ratio: float = DIAGRAM_MIN_RATIO,
) -> str:
    """Render one fenced block: diagram, or highlighted code with a language badge."""
    if is_ascii_diagram(code, diagram_min_lines, diagram_min_ratio):
        return render_diagram(code)

    body = highlight_code(code, language)
    lang_label = f'<span class="code-lang">{html.escape(language)}</span>' if language else ""
    break_class = " code-long" if len(_lines(code)) > long_code_lines else ""
    return (
        f'<div class="code-block{break_class}">\n'
        f"{lang_label}"
        f'<pre><code class="highlight language-{html.escape(language)}">{body}</code></pre>\n'
        f"</div>\n"
    )
