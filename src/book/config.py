"""Book pipeline configuration."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class PageLayout:
    """Physical trim size and margins, shared by every rendering pass."""

    width: str = "7in"
    height: str = "10in"
    margin_top: str = "0.85in"
    margin_right: str = "0.75in"
    margin_bottom: str = "0.85in"
    margin_left: str = "1.0in"

    def __post_init__(self):
        for name in ("width", "height"):
            if not getattr(self, name).strip():
                raise ValueError(f"PageLayout.{name} must not be empty")

    @property
    def margins(self) -> dict[str, str]:
        return {
            "top": self.margin_top,
            "right": self.margin_right,
            "bottom": self.margin_bottom,
            "left": self.margin_left,
        }


@dataclass
class BatchingConfig:
    """How the body is cut into rendering passes."""

    chapters_per_batch: int = 5
    max_render_height: int = 65_000  # px; Chromium stops painting tall documents past ~65K

    def __post_init__(self):
        if self.chapters_per_batch < 1:
            raise ValueError(
                f"chapters_per_batch must be >= 1, got {self.chapters_per_batch}"
            )


@dataclass
class CodeBlockConfig:
    """Thresholds for fenced code rendering."""

    long_code_lines: int = 35  # longer blocks may break across pages
    diagram_min_lines: int = 5
    diagram_min_ratio: float = 0.3  # share of box-drawing lines a diagram must exceed


@dataclass
class RenderTimeouts:
    """Bounds on every wait in a rendering pass (milliseconds)."""

    front_navigation: int = 60_000
    body_navigation: int = 120_000
    fonts_ready: int = 30_000
    settle_delay: int = 2_000  # heuristic: lets late layout settle after fonts load
    measure: int = 10_000
    capture: int = 300_000


@dataclass
class BookMetadata:
    """Everything printed on the title, copyright and about-author pages."""

    title: str
    subtitle: str = ""
    tagline: str = ""
    author: str = ""
    author_role: str = ""
    edition: str = "First Edition"
    version: str = ""
    published: str = ""
    copyright_year: str = ""
    built_with: str = ""
    source_code: str = ""
    about_author: tuple[str, ...] = ()
    running_header: str | None = None  # defaults to title

    def __post_init__(self):
        if self.running_header is None:
            self.running_header = self.title

    @property
    def full_title(self) -> str:
        return f"{self.title}: {self.subtitle}" if self.subtitle else self.title


@dataclass
class BookConfig:
    """Top-level book pipeline configuration.

    Composes metadata, page layout, batching, code-block and timeout configs.
    """

    metadata: BookMetadata
    layout: PageLayout | None = None
    batching: BatchingConfig | None = None
    code_blocks: CodeBlockConfig | None = None
    timeouts: RenderTimeouts | None = None
    browser_args: tuple[str, ...] = field(
        default=("--no-sandbox", "--disable-setuid-sandbox", "--disable-gpu"),
    )

    def __post_init__(self):
        if self.layout is None:
            self.layout = PageLayout()
        if self.batching is None:
            self.batching = BatchingConfig()
        if self.code_blocks is None:
            self.code_blocks = CodeBlockConfig()
        if self.timeouts is None:
            self.timeouts = RenderTimeouts()
