"""Route handlers for the API."""

from resume_pdf.api.routes import health, resume

__all__ = ["health", "resume"]
