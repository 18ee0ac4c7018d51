"""Print HTML documents to PDF with one shared headless Chromium (Playwright)."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from html import escape
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import Page, sync_playwright

from shared.markdown_renderer import TocEntry
from shared.pdf_assembler import PassResult, count_pages, locate_headings

from .config import PageLayout, RenderTimeouts

DEFAULT_LAUNCH_ARGS = ("--no-sandbox", "--disable-setuid-sandbox", "--disable-gpu")

FONTS_LOADED = "document.fonts.status === 'loaded'"
# Stringified so a zero height still resolves the wait
BODY_HEIGHT = "String(document.body.scrollHeight)"

HEADER_TEMPLATE = (
    '<div style="width: 100%; font-size: 7pt; '
    "font-family: 'Helvetica Neue', Helvetica, Arial, sans-serif; color: #999; "
    "padding: 0 {right} 0 {left}; text-transform: uppercase; letter-spacing: 0.08em;\">"
    "<span>{title}</span></div>"
)
# Page numbers are stamped after the merge; the footer only reserves the area.
FOOTER_TEMPLATE = '<div style="width: 100%;"></div>'


class RenderError(RuntimeError):
    """A browser launch, navigation or capture failed."""


@contextmanager
def scratch_html(path: str | Path, html: str) -> Iterator[Path]:
    """Write *html* to *path* for the duration of the block, then delete it."""
    path = Path(path)
    path.write_text(html, encoding="utf-8")
    try:
        yield path
    finally:
        path.unlink(missing_ok=True)


class BookRenderer:
    """Headless Chromium shared by every pass of one book build.

    Usage::

        with BookRenderer(layout, timeouts) as renderer:
            front = renderer.render_front(front_html, "front.pdf")
            body = renderer.render_batch(batch_html, "body_0.pdf", entries)
    """

    def __init__(
        self,
        layout: PageLayout,
        timeouts: RenderTimeouts,
        running_header: str = "",
        executable_path: str | None = None,
        launch_args: tuple[str, ...] = DEFAULT_LAUNCH_ARGS,
        max_render_height: int = 65_000,
    ):
        self.layout = layout
        self.timeouts = timeouts
        self.running_header = running_header
        self.executable_path = executable_path
        self.launch_args = launch_args
        self.max_render_height = max_render_height
        self._playwright = None
        self._browser = None

    def __enter__(self) -> BookRenderer:
        self._playwright = sync_playwright().start()
        try:
            self._browser = self._playwright.chromium.launch(
                headless=True,
                executable_path=self.executable_path,
                args=list(self.launch_args),
            )
        except PlaywrightError as exc:
            self._playwright.stop()
            self._playwright = None
            raise RenderError(f"Could not launch Chromium: {exc}") from exc
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if self._browser is not None:
                self._browser.close()
        finally:
            self._browser = None
            if self._playwright is not None:
                self._playwright.stop()
                self._playwright = None

    @contextmanager
    def page_context(self) -> Iterator[Page]:
        """A fresh page, closed when the block exits."""
        if self._browser is None:
            raise RuntimeError("BookRenderer must be used as a context manager")
        page = self._browser.new_page()
        try:
            page.set_default_timeout(self.timeouts.capture)
            yield page
        finally:
            page.close()

    def _load(self, page: Page, html_path: Path, navigation_timeout: int) -> None:
        page.goto(html_path.resolve().as_uri(), wait_until="load", timeout=navigation_timeout)
        page.wait_for_function(FONTS_LOADED, timeout=self.timeouts.fonts_ready)
        # No load event signals that print layout is final; wait a fixed interval.
        page.wait_for_timeout(self.timeouts.settle_delay)

    def _body_height(self, page: Page) -> int:
        handle = page.wait_for_function(BODY_HEIGHT, timeout=self.timeouts.measure)
        return int(handle.json_value())

    def render_front(self, html: str, pdf_path: str) -> PassResult:
        """Pass 1: title, copyright and contents pages, without header or footer."""
        try:
            with scratch_html(Path(pdf_path).with_suffix(".html"), html) as html_path, \
                    self.page_context() as page:
                self._load(page, html_path, self.timeouts.front_navigation)
                page.pdf(
                    path=pdf_path,
                    width=self.layout.width,
                    height=self.layout.height,
                    margin=self.layout.margins,
                    print_background=True,
                    display_header_footer=False,
                )
        except PlaywrightError as exc:
            raise RenderError(f"Front matter pass failed: {exc}") from exc
        return PassResult(path=pdf_path, page_count=count_pages(pdf_path))

    def render_batch(
        self,
        batch_html: str,
        pdf_path: str,
        entries: list[TocEntry],
        batch_number: int = 1,
    ) -> PassResult:
        """One body pass with the running header.

        The capture embeds the browser outline, which is then used to find
        the 0-based page every entry's heading landed on.
        """
        header = HEADER_TEMPLATE.format(
            title=escape(self.running_header),
            left=self.layout.margin_left,
            right=self.layout.margin_right,
        )
        try:
            with scratch_html(Path(pdf_path).with_suffix(".html"), batch_html) as html_path, \
                    self.page_context() as page:
                self._load(page, html_path, self.timeouts.body_navigation)

                height = self._body_height(page)
                print(f"  Batch {batch_number} height: {height}px")
                if height > self.max_render_height:
                    print(
                        f"  Warning: batch {batch_number} exceeds {self.max_render_height}px,"
                        " later pages may print blank (lower chapters_per_batch)"
                    )

                page.pdf(
                    path=pdf_path,
                    width=self.layout.width,
                    height=self.layout.height,
                    margin=self.layout.margins,
                    print_background=True,
                    display_header_footer=True,
                    header_template=header,
                    footer_template=FOOTER_TEMPLATE,
                    outline=True,
                    tagged=True,
                )
        except PlaywrightError as exc:
            raise RenderError(f"Body batch {batch_number} pass failed: {exc}") from exc

        pages = locate_headings(pdf_path, [e.title for e in entries])
        anchor_pages = {e.slug: p for e, p in zip(entries, pages) if p is not None}
        unresolved = len(entries) - len(anchor_pages)
        if unresolved:
            print(f"  Warning: {unresolved} heading(s) not found in batch {batch_number}")
        return PassResult(
            path=pdf_path,
            page_count=count_pages(pdf_path),
            anchor_pages=anchor_pages,
        )
