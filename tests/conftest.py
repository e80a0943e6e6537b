from __future__ import annotations

import copy
from pathlib import Path

import pytest

import resume_pdf.data.db as app_db
from resume_pdf.api.schemas.resume import (
    ContactInfo,
    DateRange,
    EducationItem,
    Job,
    ResumeRecord,
)
from resume_pdf.data.db import init_db
from resume_pdf.layout.metrics import FontVariant

# Fixed advance per character, as a fraction of the font size.
CHAR_WIDTH = 0.5


class FixedWidthMetrics:
    """Every character is ``size * CHAR_WIDTH`` wide, in every variant."""

    def width(self, text: str, font: FontVariant, size: float) -> float:
        return len(text) * size * CHAR_WIDTH


@pytest.fixture
def metrics() -> FixedWidthMetrics:
    return FixedWidthMetrics()


@pytest.fixture
def api_db(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Use a temporary SQLite DB for content-store and API tests."""
    db_path = tmp_path / "content.db"
    monkeypatch.setenv("DB_URL", f"sqlite:///{db_path.as_posix()}")
    monkeypatch.delenv("RESUME_DATA_PATH", raising=False)
    monkeypatch.delenv("RESUME_ENTRY_SLUG", raising=False)
    app_db._engine = None
    app_db._SessionLocal = None
    init_db()
    yield
    if app_db._engine is not None:
        app_db._engine.dispose()
        app_db._engine = None
        app_db._SessionLocal = None


def _make_record(**overrides) -> ResumeRecord:
    fields = {
        "summary": "Engineer who builds reliable web services and tidy tooling.",
        "location": "Buenos Aires, Argentina",
        "contact": ContactInfo(
            email="me@example.com",
            website="https://example.com",
            linkedin="https://www.linkedin.com/in/example/",
            github="https://github.com/example",
        ),
        "experience": [
            Job(
                title="Software Engineer",
                company="Acme",
                location="Remote",
                start="Jan 2020",
                end=None,
                bullets=["Shipped things.", "Fixed other things."],
            )
        ],
        "education": [
            EducationItem(
                degree="B.Sc. Computer Science",
                institution="State University",
                location="Springfield",
                dates=DateRange(start="2015", end="2019"),
            )
        ],
    }
    fields.update(overrides)
    return ResumeRecord(**fields)


@pytest.fixture
def make_record():
    """Factory for a small valid record; keyword arguments replace fields."""
    return _make_record


RESUME_DOC = {
    "summary": "Summary text.",
    "location": "Somewhere",
    "contact": {"email": "me@example.com", "github": "{{GITHUB}}", "linkedin": "{{ LINKEDIN }}"},
    "experience": [
        {
            "title": "Dev",
            "company": "Acme",
            "location": "Remote",
            "start": "2020",
            "end": None,
            "bullets": ["Did things."],
        }
    ],
    "education": [
        {
            "degree": "B.Sc.",
            "institution": "Uni",
            "location": "Town",
            "dates": {"start": "2015", "end": "2019"},
        }
    ],
}


@pytest.fixture
def resume_doc() -> dict:
    """A stored résumé document using contact placeholders."""
    return copy.deepcopy(RESUME_DOC)
