"""Manuscript to book: preprocess, render, batch, print and merge."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from shared.markdown_renderer import preprocess_manuscript, render_manuscript
from shared.pdf_assembler import AssemblyReport, BookInfo, assemble_book

from .batching import BodyBatch, plan_batches
from .config import BookConfig
from .layout import build_about_author, build_front_matter, wrap_html
from .render import BookRenderer


def _stage(title: str) -> None:
    print()
    print("=" * 60)
    print(title)
    print("=" * 60)


def build_book(
    source: str,
    output: str,
    config: BookConfig,
    executable_path: str | None = None,
) -> AssemblyReport:
    """Build the PDF book at *output* from the Markdown manuscript at *source*.

    Intermediate HTML and PDF files live in a per-run temporary directory
    that is removed whatever happens; *output* is only written once the
    merge has fully succeeded.

    Raises:
        FileNotFoundError: the manuscript does not exist.
        RenderError: the browser could not launch, load or print a pass.
    """
    if not os.path.isfile(source):
        raise FileNotFoundError(f"Manuscript not found: {source}")

    meta = config.metadata
    layout = config.layout

    _stage("Stage 1: Reading and rendering manuscript")
    markdown = preprocess_manuscript(Path(source).read_text(encoding="utf-8"))
    print(f"Manuscript: {source} ({len(markdown):,} chars after preprocessing)")

    codes = config.code_blocks
    rendered = render_manuscript(
        markdown,
        long_code_lines=codes.long_code_lines,
        diagram_min_lines=codes.diagram_min_lines,
        diagram_min_ratio=codes.diagram_min_ratio,
    )
    entries = rendered.toc
    print(f"Chapters: {rendered.state.chapter_count}, TOC entries: {len(entries)}")

    batches = plan_batches(rendered.html, entries, config.batching.chapters_per_batch)
    print(
        f"Body split into {len(batches)} batch(es) of up to "
        f"{config.batching.chapters_per_batch} chapters"
    )

    front_html = build_front_matter(meta, entries, layout)
    about_html = build_about_author(meta) if meta.about_author else ""
    if not batches:
        if about_html:
            print("Body is blank, printing the about-author page on its own")
            batches = [BodyBatch(index=0, chapters=[])]
        else:
            print("Warning: body is blank, the book will only hold front matter")

    with tempfile.TemporaryDirectory(prefix="book-gen-") as work_dir:
        _stage("Stage 2: Printing passes")
        with BookRenderer(
            layout,
            config.timeouts,
            running_header=meta.running_header,
            executable_path=executable_path,
            launch_args=config.browser_args,
            max_render_height=config.batching.max_render_height,
        ) as renderer:
            print("Pass 1: Generating front matter...")
            front = renderer.render_front(front_html, os.path.join(work_dir, "front.pdf"))

            passes = []
            for b, batch in enumerate(batches):
                print(f"Pass {b + 2}: Generating body batch {b + 1}/{len(batches)}...")
                is_last = b == len(batches) - 1
                html = wrap_html(batch.html(about_html if is_last else ""), meta.title, layout)
                passes.append(renderer.render_batch(
                    html,
                    os.path.join(work_dir, f"body_{b}.pdf"),
                    batch.entries,
                    batch_number=b + 1,
                ))

        _stage("Stage 3: Merging and numbering pages")
        report = assemble_book(
            front,
            passes,
            output,
            entries,
            BookInfo(title=meta.full_title, author=meta.author, subject=meta.tagline),
        )

    print()
    print("=" * 60)
    print(f"Book generated: {report.output_path}")
    print(f"  Size: {report.size_bytes / 1024 / 1024:.2f} MB")
    print(
        f"  Pages: {report.total_pages} "
        f"({report.front_pages} front matter + {report.body_pages} content)"
    )
    return report
