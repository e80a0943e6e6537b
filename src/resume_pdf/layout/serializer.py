"""Serialize a :class:`LayoutDocument` to PDF bytes with fpdf2.

fpdf2 measures y downwards from the top of the page, so every coordinate
is flipped on the way out.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from resume_pdf.layout.document import Rule, TextRun
from resume_pdf.layout.metrics import FONT_FAMILY, create_pdf

if TYPE_CHECKING:
    from fpdf import FPDF

    from resume_pdf.constants.layout_constants import Color
    from resume_pdf.layout.document import LayoutDocument, LinkAnnotation, Page

__all__ = ["serialize"]


def _rgb(color: Color) -> tuple[int, int, int]:
    r, g, b = color
    return round(r * 255), round(g * 255), round(b * 255)


def _draw_text(pdf: FPDF, page: Page, run: TextRun) -> None:
    pdf.set_font(FONT_FAMILY, run.font.style, run.size)
    pdf.set_text_color(*_rgb(run.color))
    pdf.text(run.x, page.height - run.y, run.text)


def _draw_rule(pdf: FPDF, page: Page, rule: Rule) -> None:
    pdf.set_draw_color(*_rgb(rule.color))
    pdf.set_line_width(rule.thickness)
    pdf.line(rule.x0, page.height - rule.y0, rule.x1, page.height - rule.y1)


def _add_link(pdf: FPDF, page: Page, annotation: LinkAnnotation) -> None:
    x0, y0, x1, y1 = annotation.rect
    pdf.link(x0, page.height - y1, x1 - x0, y1 - y0, annotation.target)


def serialize(document: LayoutDocument, pdf: FPDF | None = None) -> bytes:
    """Write every page of *document* into *pdf* and return the PDF bytes.

    Args:
        document: Laid-out pages.
        pdf: Target document. A fresh one is created when omitted; pass the
            instance whose metrics were used for layout to keep a single
            font set.
    """
    if pdf is None:
        pdf = create_pdf()

    for page in document.pages:
        pdf.add_page()
        for op in page.operations:
            if isinstance(op, TextRun):
                _draw_text(pdf, page, op)
            elif isinstance(op, Rule):
                _draw_rule(pdf, page, op)
        for annotation in page.annotations:
            _add_link(pdf, page, annotation)

    return bytes(pdf.output())
