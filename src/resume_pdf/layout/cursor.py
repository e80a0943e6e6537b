"""Vertical write position and page allocation."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resume_pdf.constants.layout_constants import MARGIN, PAGE_HEIGHT

if TYPE_CHECKING:
    from resume_pdf.layout.document import LayoutDocument, Page

logger = logging.getLogger(__name__)


class FlowCursor:
    """Tracks the current page and the baseline of the next line.

    The cursor moves downwards from ``PAGE_HEIGHT - MARGIN``. Space is
    checked one line at a time, so a multi-line block may be split across
    a page break.
    """

    def __init__(self, document: LayoutDocument) -> None:
        self.document = document
        self.page: Page = document.add_page()
        self.y: float = PAGE_HEIGHT - MARGIN

    @property
    def page_index(self) -> int:
        return self.page.index

    def ensure_space(self, height: float) -> bool:
        """Start a new page when *height* does not fit above the bottom margin.

        Returns:
            True if a new page was allocated.
        """
        if self.y - height < MARGIN:
            self.page = self.document.add_page()
            self.y = PAGE_HEIGHT - MARGIN
            logger.debug("Started page %d", self.page.index + 1)
            return True
        return False

    def advance(self, line_height: float, gap: float = 0.0) -> None:
        """Move below a line that was just drawn."""
        self.y -= line_height + gap

    def skip(self, gap: float) -> None:
        """Leave *gap* points of vertical space."""
        self.y -= gap
