"""Drawing primitives built on the flow cursor and the line wrapper.

Every primitive draws onto ``cursor.page`` at ``cursor.y`` and moves the
cursor below what it drew. Space is reserved per line, never per block.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from resume_pdf.constants.layout_constants import (
    BULLET_GLYPH,
    BULLET_INDENT,
    BULLET_MARKER_COLUMN,
    CONTACT_FONT_SIZE,
    CONTACT_GAP_AFTER,
    CONTACT_SEPARATOR,
    CONTENT_WIDTH,
    INK,
    LINE_HEIGHT_FACTOR,
    LINK,
    LINK_RECT_OFFSET,
    LINK_RECT_PADDING,
    LINK_UNDERLINE_OFFSET,
    LINK_UNDERLINE_THICKNESS,
    MARGIN,
    PAGE_WIDTH,
    PARAGRAPH_LINE_HEIGHT_FACTOR,
    RULE,
    SECTION_GAP_AFTER,
    SECTION_GAP_BEFORE,
    SECTION_GAP_TITLE_TO_RULE,
    SECTION_RESERVE,
    SECTION_RULE_THICKNESS,
    SECTION_TITLE_SIZE,
    SUBTLE,
    Color,
)
from resume_pdf.layout.document import register_link
from resume_pdf.layout.metrics import FontVariant
from resume_pdf.layout.wrap import wrap_text

if TYPE_CHECKING:
    from resume_pdf.api.schemas.resume import ContactInfo
    from resume_pdf.layout.cursor import FlowCursor
    from resume_pdf.layout.metrics import FontMetrics

__all__ = ["ContactItem", "Renderer", "build_contact_items"]


@dataclass(frozen=True)
class ContactItem:
    """One entry of the contact bar."""

    label: str
    target: str
    is_link: bool = False


def _is_present(value: str | None) -> bool:
    return value is not None and value.strip() != ""


def build_contact_items(contact: ContactInfo | None) -> list[ContactItem]:
    """Return the contact bar entries in display order.

    Order is email, website, LinkedIn, GitHub; fields that are ``None``
    or blank are left out. The email entry gets a ``mailto:`` target but is not
    drawn as a link.
    """
    items: list[ContactItem] = []
    if contact is None:
        return items
    if _is_present(contact.email):
        items.append(ContactItem(contact.email, f"mailto:{contact.email}"))
    if _is_present(contact.website):
        items.append(ContactItem("Personal site", contact.website, is_link=True))
    if _is_present(contact.linkedin):
        items.append(ContactItem("LinkedIn", contact.linkedin, is_link=True))
    if _is_present(contact.github):
        items.append(ContactItem("GitHub", contact.github, is_link=True))
    return items


class Renderer:
    """Layout primitives bound to one cursor and one metrics provider."""

    def __init__(self, cursor: FlowCursor, metrics: FontMetrics) -> None:
        self.cursor = cursor
        self.metrics = metrics

    def width(self, text: str, font: FontVariant, size: float) -> float:
        return self.metrics.width(text, font, size)

    # ------------------------------------------------------------------
    # Single lines
    # ------------------------------------------------------------------

    def line(
        self,
        text: str,
        font: FontVariant,
        size: float,
        x: float,
        color: Color = INK,
        gap: float = 0.0,
    ) -> None:
        line_height = size * LINE_HEIGHT_FACTOR
        self.cursor.ensure_space(line_height)
        self.cursor.page.draw_text(text, x, self.cursor.y, font, size, color)
        self.cursor.advance(line_height, gap)

    def centered(self, text: str, font: FontVariant, size: float, gap: float = 2.0) -> None:
        x = (PAGE_WIDTH - self.width(text, font, size)) / 2
        self.line(text, font, size, x, INK, gap)

    def two_column(
        self,
        left: str,
        left_font: FontVariant,
        right: str,
        right_font: FontVariant,
        size: float,
        gap: float = 2.0,
    ) -> None:
        """Draw *left* at the margin and *right* flush right on one baseline.

        The two runs are not checked for overlap.
        """
        line_height = size * LINE_HEIGHT_FACTOR
        self.cursor.ensure_space(line_height)
        right_width = self.width(right, right_font, size)
        page, y = self.cursor.page, self.cursor.y
        page.draw_text(left, MARGIN, y, left_font, size, INK)
        page.draw_text(right, PAGE_WIDTH - MARGIN - right_width, y, right_font, size, SUBTLE)
        self.cursor.advance(line_height, gap)

    def section_header(self, title: str) -> None:
        """Upper-cased bold title over a full-width hairline rule."""
        self.cursor.skip(SECTION_GAP_BEFORE)
        self.cursor.ensure_space(SECTION_RESERVE)
        self.cursor.page.draw_text(
            title.upper(), MARGIN, self.cursor.y, FontVariant.BOLD, SECTION_TITLE_SIZE, INK
        )
        self.cursor.skip(SECTION_GAP_TITLE_TO_RULE)
        y = self.cursor.y
        self.cursor.page.draw_rule(
            (MARGIN, y), (PAGE_WIDTH - MARGIN, y), SECTION_RULE_THICKNESS, RULE
        )
        self.cursor.skip(SECTION_GAP_AFTER)

    # ------------------------------------------------------------------
    # Multi-line blocks
    # ------------------------------------------------------------------

    def wrapped(
        self,
        text: str,
        font: FontVariant,
        size: float,
        indent: float = 0.0,
        gap: float = 4.0,
    ) -> None:
        line_height = size * PARAGRAPH_LINE_HEIGHT_FACTOR
        for text_line in wrap_text(text, font, size, CONTENT_WIDTH - indent, self.metrics):
            self.cursor.ensure_space(line_height)
            self.cursor.page.draw_text(text_line, MARGIN + indent, self.cursor.y, font, size, INK)
            self.cursor.advance(line_height)
        self.cursor.skip(gap)

    def bulleted_paragraph(
        self,
        text: str,
        font: FontVariant,
        size: float,
        indent: float = BULLET_INDENT,
        marker_column: float = BULLET_MARKER_COLUMN,
    ) -> None:
        """Wrapped text with a bullet glyph in front of its first line only."""
        line_height = size * PARAGRAPH_LINE_HEIGHT_FACTOR
        lines = wrap_text(text, font, size, CONTENT_WIDTH - indent, self.metrics)
        for i, text_line in enumerate(lines):
            self.cursor.ensure_space(line_height)
            page, y = self.cursor.page, self.cursor.y
            if i == 0:
                page.draw_text(BULLET_GLYPH, MARGIN + marker_column, y, font, size, INK)
            page.draw_text(text_line, MARGIN + indent, y, font, size, INK)
            self.cursor.advance(line_height)

    def labelled_list(
        self,
        label: str,
        text: str,
        size: float,
        gap: float = 0.0,
    ) -> None:
        """Bold *label* followed by *text* wrapped with a hanging indent.

        The first wrapped line shares the label's baseline; the following
        lines start under the end of the label.
        """
        line_height = size * PARAGRAPH_LINE_HEIGHT_FACTOR
        label_width = self.width(label, FontVariant.BOLD, size)
        max_width = CONTENT_WIDTH - label_width
        lines = wrap_text(text, FontVariant.REGULAR, size, max_width, self.metrics)

        self.cursor.ensure_space(line_height)
        page, y = self.cursor.page, self.cursor.y
        page.draw_text(label, MARGIN, y, FontVariant.BOLD, size, INK)
        if lines:
            page.draw_text(lines[0], MARGIN + label_width, y, FontVariant.REGULAR, size, INK)
        self.cursor.advance(line_height)

        for text_line in lines[1:]:
            self.cursor.ensure_space(line_height)
            self.cursor.page.draw_text(
                text_line, MARGIN + label_width, self.cursor.y, FontVariant.REGULAR, size, INK
            )
            self.cursor.advance(line_height)

        self.cursor.skip(gap)

    # ------------------------------------------------------------------
    # Contact bar
    # ------------------------------------------------------------------

    def contact_bar(
        self,
        items: list[ContactItem],
        size: float = CONTACT_FONT_SIZE,
        separator: str = CONTACT_SEPARATOR,
    ) -> float | None:
        """Draw *items* as one centred row joined by *separator*.

        Items flagged as links are underlined and made clickable.

        Returns:
            The x coordinate of the row's left edge, or None when there is
            nothing to draw.
        """
        if not items:
            return None

        font = FontVariant.REGULAR
        separator_width = self.width(separator, font, size)
        item_widths = [self.width(item.label, font, size) for item in items]
        total_width = sum(item_widths) + separator_width * (len(items) - 1)
        line_height = size * LINE_HEIGHT_FACTOR

        self.cursor.ensure_space(line_height)
        page, y = self.cursor.page, self.cursor.y
        left = (PAGE_WIDTH - total_width) / 2
        x = left

        for i, (item, item_width) in enumerate(zip(items, item_widths, strict=True)):
            color = LINK if item.is_link else INK
            page.draw_text(item.label, x, y, font, size, color)

            if item.is_link:
                underline_y = y - LINK_UNDERLINE_OFFSET
                page.draw_rule(
                    (x, underline_y), (x + item_width, underline_y), LINK_UNDERLINE_THICKNESS, LINK
                )
                rect_y = y - LINK_RECT_OFFSET
                register_link(
                    page,
                    (x, rect_y, x + item_width, rect_y + size + LINK_RECT_PADDING),
                    item.target,
                )

            x += item_width
            if i < len(items) - 1:
                page.draw_text(separator, x, y, font, size, INK)
                x += separator_width

        self.cursor.advance(line_height, CONTACT_GAP_AFTER)
        return left
