"""Résumé PDF generation.

Lays a :class:`ResumeRecord` out in a fixed order (header, summary,
experience, education, courses, skills) and serializes the result with
fpdf2.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from resume_pdf.constants.layout_constants import MARGIN, SUBTLE
from resume_pdf.constants.site_constants import SITE_HEADLINE, SITE_TITLE
from resume_pdf.layout.cursor import FlowCursor
from resume_pdf.layout.document import LayoutDocument
from resume_pdf.layout.metrics import CoreFontMetrics, FontVariant, create_pdf
from resume_pdf.layout.renderers import Renderer, build_contact_items
from resume_pdf.layout.serializer import serialize

if TYPE_CHECKING:
    from resume_pdf.api.schemas.resume import (
        Course,
        DateRange,
        EducationItem,
        Job,
        ResumeRecord,
        SkillGroup,
    )
    from resume_pdf.layout.metrics import FontMetrics

__all__ = ["build_resume_layout", "format_date_range", "render_resume_pdf"]

logger = logging.getLogger(__name__)

R = FontVariant.REGULAR
B = FontVariant.BOLD
I = FontVariant.ITALIC  # noqa: E741

DATE_SEPARATOR = " – "
ONGOING = "Present"


def format_date_range(start: str, end: str | None, *, ongoing_label: str | None = None) -> str:
    """Return ``"start – end"``.

    When *end* is None the result is ``"start – <ongoing_label>"`` if an
    ongoing label is given, otherwise just *start*.
    """
    if end is not None:
        return f"{start}{DATE_SEPARATOR}{end}"
    if ongoing_label is not None:
        return f"{start}{DATE_SEPARATOR}{ongoing_label}"
    return start


# -----------------------------------------------------------------------
# Sections


def _add_header(r: Renderer, record: ResumeRecord, name: str, headline: str) -> None:
    r.centered(name, B, 24, 0)
    r.centered(headline, I, 12, 2)
    r.centered(record.location, R, 10, 4)

    items = build_contact_items(record.contact)
    if items:
        r.contact_bar(items)


def _add_summary(r: Renderer, summary: str) -> None:
    r.section_header("Summary")
    r.wrapped(summary, R, 11, 0, 0)


def _add_job(r: Renderer, job: Job) -> None:
    dates = format_date_range(job.start, job.end, ongoing_label=ONGOING)
    r.two_column(f"{job.title}, {job.company}", B, dates, R, 11.5, 1)
    r.line(job.location, I, 10, MARGIN, SUBTLE, 4)
    if job.description is not None:
        r.wrapped(job.description, R, 10.5, 0, 3)
    for bullet in job.bullets:
        r.bulleted_paragraph(bullet, R, 10.5)
    r.cursor.skip(6)


def _add_study(
    r: Renderer,
    heading: str,
    institution: str,
    location: str,
    dates: DateRange,
    description: str | None,
    size: float,
) -> None:
    r.two_column(heading, B, format_date_range(dates.start, dates.end), R, size, 1)
    r.line(f"{institution}, {location}", I, 10, MARGIN, SUBTLE, 3)
    if description is not None:
        r.wrapped(description, R, 10, 0, 3)
    r.cursor.skip(3)


def _add_education(r: Renderer, education: list[EducationItem]) -> None:
    r.section_header("Education")
    for item in education:
        _add_study(
            r, item.degree, item.institution, item.location, item.dates, item.description, 11.5
        )


def _add_courses(r: Renderer, courses: list[Course]) -> None:
    r.section_header("Courses")
    for course in courses:
        _add_study(
            r,
            course.title,
            course.institution,
            course.location,
            course.dates,
            course.description,
            11,
        )


def _add_skills(r: Renderer, skills: list[SkillGroup]) -> None:
    r.section_header("Skills")
    for group in skills:
        r.labelled_list(f"{group.category}: ", ", ".join(group.skills), 10.5, gap=3)


# -----------------------------------------------------------------------
# Public API


def build_resume_layout(
    record: ResumeRecord,
    metrics: FontMetrics,
    *,
    name: str = SITE_TITLE,
    headline: str = SITE_HEADLINE,
) -> LayoutDocument:
    """Lay *record* out into pages.

    Args:
        record: Validated résumé record.
        metrics: Width provider for the three font variants.
        name: Owner name shown at the top.
        headline: Job title shown under the name.
    """
    document = LayoutDocument()
    r = Renderer(FlowCursor(document), metrics)

    _add_header(r, record, name, headline)
    _add_summary(r, record.summary)

    r.section_header("Experience")
    for job in record.experience:
        _add_job(r, job)

    _add_education(r, record.education)

    if record.courses is not None and len(record.courses) > 0:
        _add_courses(r, record.courses)

    if record.skills is not None and len(record.skills) > 0:
        _add_skills(r, record.skills)

    return document


def render_resume_pdf(
    record: ResumeRecord,
    *,
    name: str = SITE_TITLE,
    headline: str = SITE_HEADLINE,
) -> bytes:
    """Generate the résumé PDF for *record* and return its bytes."""
    pdf = create_pdf()
    document = build_resume_layout(record, CoreFontMetrics(pdf), name=name, headline=headline)
    data = serialize(document, pdf)
    logger.info(
        "Rendered resume PDF: %d page(s), %d link(s), %d bytes",
        len(document.pages),
        len(document.annotations),
        len(data),
    )
    return data
