"""Font metrics for the three Times core font variants."""

from __future__ import annotations

from enum import StrEnum
from typing import Protocol

from fpdf import FPDF

from resume_pdf.constants.layout_constants import PAGE_HEIGHT, PAGE_WIDTH

FONT_FAMILY = "Times"

# Core fonts only cover a single-byte encoding; Windows-1252 adds the en-dash
# and bullet glyphs on top of latin-1.
CORE_FONTS_ENCODING = "windows-1252"


class FontVariant(StrEnum):
    """The closed set of font variants used by the layout."""

    REGULAR = "regular"
    BOLD = "bold"
    ITALIC = "italic"

    @property
    def style(self) -> str:
        """fpdf2 style string for this variant."""
        return _STYLES[self]


_STYLES: dict[FontVariant, str] = {
    FontVariant.REGULAR: "",
    FontVariant.BOLD: "B",
    FontVariant.ITALIC: "I",
}


class FontMetrics(Protocol):
    """Answers "how wide is this text at this size" for a font variant."""

    def width(self, text: str, font: FontVariant, size: float) -> float: ...


def create_pdf() -> FPDF:
    """Return an empty fpdf2 document set up for the résumé page geometry."""
    pdf = FPDF(orientation="portrait", unit="pt", format=(PAGE_WIDTH, PAGE_HEIGHT))
    pdf.core_fonts_encoding = CORE_FONTS_ENCODING
    pdf.set_auto_page_break(False)
    pdf.set_margins(0, 0, 0)
    return pdf


class CoreFontMetrics:
    """:class:`FontMetrics` backed by the core-font width tables of fpdf2."""

    def __init__(self, pdf: FPDF | None = None) -> None:
        self._pdf = pdf if pdf is not None else create_pdf()

    def width(self, text: str, font: FontVariant, size: float) -> float:
        self._pdf.set_font(FONT_FAMILY, font.style, size)
        return self._pdf.get_string_width(text)
