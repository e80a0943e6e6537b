"""Text-flow and pagination engine for the résumé PDF."""

from resume_pdf.layout.cursor import FlowCursor
from resume_pdf.layout.document import (
    LayoutDocument,
    LinkAnnotation,
    Page,
    Rule,
    TextRun,
    register_link,
)
from resume_pdf.layout.metrics import CoreFontMetrics, FontMetrics, FontVariant, create_pdf
from resume_pdf.layout.renderers import ContactItem, Renderer, build_contact_items
from resume_pdf.layout.serializer import serialize
from resume_pdf.layout.wrap import wrap_text

__all__ = [
    "ContactItem",
    "CoreFontMetrics",
    "FlowCursor",
    "FontMetrics",
    "FontVariant",
    "LayoutDocument",
    "LinkAnnotation",
    "Page",
    "Renderer",
    "Rule",
    "TextRun",
    "build_contact_items",
    "create_pdf",
    "register_link",
    "serialize",
    "wrap_text",
]
