"""In-memory page model produced by the layout engine.

A :class:`LayoutDocument` is a list of :class:`Page` objects, each holding
its draw operations in paint order plus the clickable link regions that
sit on it. Coordinates are PDF page space: points, origin bottom-left.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from resume_pdf.constants.layout_constants import INK, PAGE_HEIGHT, PAGE_WIDTH, Color
from resume_pdf.layout.metrics import FontVariant

Rect = tuple[float, float, float, float]


@dataclass(frozen=True)
class TextRun:
    """A single run of text drawn with its baseline at ``(x, y)``."""

    text: str
    x: float
    y: float
    font: FontVariant
    size: float
    color: Color = INK


@dataclass(frozen=True)
class Rule:
    """A straight stroked line from ``(x0, y0)`` to ``(x1, y1)``."""

    x0: float
    y0: float
    x1: float
    y1: float
    thickness: float
    color: Color


@dataclass(frozen=True)
class LinkAnnotation:
    """A rectangle on a page that opens *target* when clicked."""

    page: int
    rect: Rect
    target: str


DrawOperation = TextRun | Rule


@dataclass
class Page:
    """A fixed-size portrait page."""

    index: int
    width: float = PAGE_WIDTH
    height: float = PAGE_HEIGHT
    operations: list[DrawOperation] = field(default_factory=list)
    annotations: list[LinkAnnotation] = field(default_factory=list)

    def draw_text(
        self,
        text: str,
        x: float,
        y: float,
        font: FontVariant,
        size: float,
        color: Color = INK,
    ) -> None:
        self.operations.append(TextRun(text, x, y, font, size, color))

    def draw_rule(
        self,
        start: tuple[float, float],
        end: tuple[float, float],
        thickness: float,
        color: Color,
    ) -> None:
        self.operations.append(Rule(start[0], start[1], end[0], end[1], thickness, color))

    @property
    def text_runs(self) -> list[TextRun]:
        return [op for op in self.operations if isinstance(op, TextRun)]


@dataclass
class LayoutDocument:
    """Ordered collection of pages. Pages are only ever appended."""

    pages: list[Page] = field(default_factory=list)

    def add_page(self) -> Page:
        page = Page(index=len(self.pages))
        self.pages.append(page)
        return page

    @property
    def annotations(self) -> list[LinkAnnotation]:
        return [annot for page in self.pages for annot in page.annotations]

    @property
    def text_runs(self) -> list[TextRun]:
        return [run for page in self.pages for run in page.text_runs]


def register_link(page: Page, rect: Rect, target: str) -> LinkAnnotation:
    """Attach a clickable *rect* opening *target* to *page*.

    Every call adds a new annotation, even for a rectangle and target that
    are already registered.
    """
    annotation = LinkAnnotation(page=page.index, rect=rect, target=target)
    page.annotations.append(annotation)
    return annotation
