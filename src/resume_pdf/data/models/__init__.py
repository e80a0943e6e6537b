"""ORM models package.

- ContentEntry: one JSON document of a named content collection
"""

from resume_pdf.data.db import Base
from resume_pdf.data.models.content_entry import ContentEntry

__all__ = ["Base", "ContentEntry"]
