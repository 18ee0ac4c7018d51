"""Tests for render_manuscript: book markup and TOC collection."""

from shared.markdown_renderer import RenderState, render_manuscript


class TestChapterMarkup:
    """Chapter headings become page-break blocks with a label, title and rule."""

    def test_single_chapter(self):
        result = render_manuscript("## Chapter 1: Intro\n\nHello.\n")

        assert '<div class="chapter-break" id="chapter-1-intro">' in result.html
        assert '<div class="chapter-label">Chapter 1</div>' in result.html
        assert '<h1 class="chapter-title">Intro</h1>' in result.html
        assert '<hr class="chapter-rule" />' in result.html
        assert len(result.toc) == 1
        assert result.toc[0].label == "Chapter 1: Intro"

    def test_label_prefix_with_inline_markup(self):
        result = render_manuscript("## Chapter 2: The `api` Layer\n")
        assert (
            '<h1 class="chapter-title">The <code class="inline-code">api</code> Layer</h1>'
            in result.html
        )

    def test_preface_has_no_label(self):
        result = render_manuscript("## Preface\n\nWhy this book.\n")
        assert '<div class="chapter-break" id="preface">' in result.html
        assert "chapter-label" not in result.html
        assert '<h1 class="chapter-title">Preface</h1>' in result.html

    def test_appendix(self):
        result = render_manuscript("## Appendix A: Glossary\n")
        assert '<div class="chapter-label">Appendix A</div>' in result.html
        assert '<h1 class="chapter-title">Glossary</h1>' in result.html

    def test_plain_h2_keeps_its_level(self):
        result = render_manuscript("## Introduction\n")
        assert '<h2 id="introduction">Introduction</h2>' in result.html
        assert result.toc == []

    def test_sections_get_anchor_and_entry(self):
        result = render_manuscript("## Chapter 1: A\n\n### Why Services\n\n### Why Services\n")
        assert '<h3 id="why-services">Why Services</h3>' in result.html
        assert '<h3 id="why-services-1">Why Services</h3>' in result.html
        assert [e.slug for e in result.toc] == [
            "chapter-1-a", "why-services", "why-services-1",
        ]

    def test_anchor_ids_distinct_when_suffix_would_collide(self):
        result = render_manuscript("### Intro\n\n### Intro\n\n### Intro 1\n")
        assert [e.slug for e in result.toc] == ["intro", "intro-1", "intro-1-1"]
        assert '<h3 id="intro-1-1">Intro 1</h3>' in result.html

    def test_state_is_threaded_through(self):
        state = RenderState()
        result = render_manuscript("## Chapter 4: Late\n", state=state)
        assert result.state is state
        assert state.chapter_number == 4


class TestBlockElements:
    """Dividers, quotes, tables, task lists and code use the book's classes."""

    def test_thematic_break_is_section_divider(self):
        result = render_manuscript("para\n\n---\n\nmore\n")
        assert '<hr class="section-divider" />' in result.html
        assert "chapter-break" not in result.html

    def test_blockquote(self):
        result = render_manuscript("> Quoted wisdom\n")
        assert '<blockquote class="styled-quote">' in result.html

    def test_table(self):
        result = render_manuscript("| a | b |\n|---|---|\n| 1 | 2 |\n")
        assert '<table class="styled-table">' in result.html
        assert "<th>a</th>" in result.html

    def test_task_list(self):
        result = render_manuscript("- [ ] write tests\n- [x] ship it\n- plain item\n")
        assert '<li class="task-item"><span class="checkbox">☐</span> write tests' in result.html
        assert '<li class="task-item"><span class="checkbox">☑</span> ship it' in result.html
        assert "<li>plain item</li>" in result.html
        assert "[ ]" not in result.html

    def test_fenced_code(self):
        result = render_manuscript("```python\nprint('hi')\n```\n")
        assert '<span class="code-lang">python</span>' in result.html

    def test_fenced_diagram(self):
        fence = "┌─┐\n│a│\n└─┘\n│\n▼\n"
        result = render_manuscript(f"```\n{fence}```\n")
        assert '<div class="diagram">' in result.html

    def test_diagram_threshold_passed_through(self):
        fence = "┌─┐\n│a│\n└─┘\n"
        result = render_manuscript(f"```\n{fence}```\n", diagram_min_lines=3)
        assert '<div class="diagram">' in result.html

    def test_inline_code(self):
        result = render_manuscript("Run `npm test` now.\n")
        assert '<code class="inline-code">npm test</code>' in result.html

    def test_raw_html_passes_through(self):
        result = render_manuscript('<div class="note">Raw</div>\n')
        assert '<div class="note">Raw</div>' in result.html
