"""Résumé download route."""

from __future__ import annotations

import logging
import os

from fastapi import APIRouter, status
from fastapi.responses import PlainTextResponse, Response

from resume_pdf.constants.site_constants import DEFAULT_RESUME_SLUG
from resume_pdf.services.content_store import get_resume_record
from resume_pdf.services.resume_pdf import render_resume_pdf

logger = logging.getLogger(__name__)

router = APIRouter(tags=["resume"])

PDF_HEADERS = {
    "Content-Disposition": 'attachment; filename="resume.pdf"',
    "Cache-Control": "public, max-age=31536000, immutable",
}


def get_resume_slug() -> str:
    """Return the slug of the résumé entry to serve."""
    return os.getenv("RESUME_ENTRY_SLUG") or DEFAULT_RESUME_SLUG


@router.get(
    "/resume.pdf",
    response_class=Response,
    responses={
        200: {"content": {"application/pdf": {}}},
        404: {"content": {"text/plain": {}}},
    },
)
def download_resume() -> Response:
    """Generate the résumé PDF from the stored record."""
    slug = get_resume_slug()
    record = get_resume_record(slug)
    if record is None:
        return PlainTextResponse("Resume not found", status_code=status.HTTP_404_NOT_FOUND)

    try:
        pdf_bytes = render_resume_pdf(record)
    except Exception:
        logger.exception("Failed to render resume %r", slug)
        raise

    return Response(content=pdf_bytes, media_type="application/pdf", headers=PDF_HEADERS)
