"""Page geometry, colours and line metrics for the résumé layout.

All lengths are PDF points (1/72 inch) in page space, origin bottom-left.
The page is A4 portrait.
"""

from __future__ import annotations

PAGE_WIDTH = 595.28
PAGE_HEIGHT = 841.89
MARGIN = 40.0
CONTENT_WIDTH = PAGE_WIDTH - MARGIN * 2

# Line height as a multiple of font size.
LINE_HEIGHT_FACTOR = 1.3
PARAGRAPH_LINE_HEIGHT_FACTOR = 1.35

# RGB components in the 0..1 range.
Color = tuple[float, float, float]

INK: Color = (0.05, 0.05, 0.05)
SUBTLE: Color = (0.38, 0.38, 0.38)
RULE: Color = (0.55, 0.55, 0.55)
LINK: Color = (0.15, 0.15, 0.55)

SECTION_TITLE_SIZE = 10.5
SECTION_GAP_BEFORE = 8.0
SECTION_RESERVE = 18.0
SECTION_GAP_TITLE_TO_RULE = 4.0
SECTION_GAP_AFTER = 15.0
SECTION_RULE_THICKNESS = 0.6

BULLET_GLYPH = "•"
BULLET_INDENT = 14.0
BULLET_MARKER_COLUMN = 2.0

CONTACT_FONT_SIZE = 9.0
CONTACT_SEPARATOR = "   |   "
CONTACT_GAP_AFTER = 12.0
LINK_UNDERLINE_OFFSET = 1.0
LINK_UNDERLINE_THICKNESS = 0.4
LINK_RECT_OFFSET = 2.0
LINK_RECT_PADDING = 4.0
