"""Pydantic schema of the résumé record.

Records are immutable once validated. Optional values are ``None``; an
absent ``end`` date means the entry is ongoing.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class ContactInfo(_Frozen):
    """Resolved contact addresses shown in the header bar."""

    email: str | None = None
    website: str | None = None
    linkedin: str | None = None
    github: str | None = None


class DateRange(_Frozen):
    start: str
    end: str | None = None


class Job(_Frozen):
    """A single work-experience entry."""

    title: str
    company: str
    location: str
    start: str
    end: str | None = None
    description: str | None = None
    bullets: list[str] = Field(default_factory=list)


class EducationItem(_Frozen):
    degree: str
    institution: str
    location: str
    dates: DateRange
    description: str | None = None


class Course(_Frozen):
    title: str
    institution: str
    location: str
    dates: DateRange
    description: str | None = None


class SkillGroup(_Frozen):
    category: str
    skills: list[str] = Field(default_factory=list)


class ResumeRecord(_Frozen):
    """Everything the résumé PDF is generated from."""

    summary: str
    location: str
    contact: ContactInfo | None = None
    education: list[EducationItem]
    experience: list[Job]
    courses: list[Course] | None = None
    skills: list[SkillGroup] | None = None
