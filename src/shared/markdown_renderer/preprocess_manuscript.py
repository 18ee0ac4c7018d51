"""Strip redundant front matter and comments from a raw manuscript."""

import re

# Leading "# Title" line, the blank lines after it, and the "> author" quote block
TITLE_BLOCK = re.compile(r"\A\s*# [^\n]*\n(?:[ \t]*\n)*(?:>.*\n)*")

# <!-- ... --> on a single line
INLINE_COMMENT = re.compile(r"<!--(?:(?!-->)[^\n])*-->")

# Multi-line comment closed by "-->" on its own line (Mermaid sources use --> inside)
BLOCK_COMMENT = re.compile(r"^[ \t]*<!--[\s\S]*?^[ \t]*-->[ \t]*$", re.MULTILINE)

# Anything left that cannot contain ">"
SIMPLE_COMMENT = re.compile(r"<!--[^>]*-->")

# The manuscript's own TOC, up to the next thematic break
INLINE_TOC = re.compile(r"^## Table of Contents[\s\S]*?(?=\n---\n)", re.MULTILINE)


def preprocess_manuscript(text: str) -> str:
    """Remove the title block, HTML comments and the inline TOC section.

    The book gets its own title page and generated TOC, so the manuscript's
    versions would be rendered twice.
    """
    text = text.replace("\r\n", "\n")
    text = TITLE_BLOCK.sub("", text, count=1)
    text = INLINE_COMMENT.sub("", text)
    text = BLOCK_COMMENT.sub("", text)
    text = SIMPLE_COMMENT.sub("", text)
    text = INLINE_TOC.sub("", text, count=1)
    return text
