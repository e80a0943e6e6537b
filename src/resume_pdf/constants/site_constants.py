"""Owner details shown in the résumé header and used for contact placeholders."""

from __future__ import annotations

SITE_TITLE = "Nicolas Dartayeta"
SITE_HEADLINE = "Software Engineer"

EMAIL_ADDRESS = "nicodarta1305@gmail.com"
WEBSITE_URL = "https://ndartayeta.com"
LINKEDIN_URL = "https://www.linkedin.com/in/nicolas-dartayeta/"
GITHUB_URL = "https://github.com/nicolasdartayeta"

RESUME_COLLECTION = "resume"
DEFAULT_RESUME_SLUG = "main"
