from __future__ import annotations

from resume_pdf.constants.layout_constants import (
    CONTENT_WIDTH,
    MARGIN,
    PAGE_HEIGHT,
    PAGE_WIDTH,
)
from resume_pdf.constants.site_constants import (
    EMAIL_ADDRESS,
    GITHUB_URL,
    LINKEDIN_URL,
    SITE_HEADLINE,
    SITE_TITLE,
    WEBSITE_URL,
)

__all__ = [
    "CONTENT_WIDTH",
    "EMAIL_ADDRESS",
    "GITHUB_URL",
    "LINKEDIN_URL",
    "MARGIN",
    "PAGE_HEIGHT",
    "PAGE_WIDTH",
    "SITE_HEADLINE",
    "SITE_TITLE",
    "WEBSITE_URL",
]
