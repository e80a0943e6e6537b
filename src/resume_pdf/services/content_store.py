"""Content store for site documents.

Documents are JSON objects grouped in named collections and addressed by
slug. The résumé record lives in the ``resume`` collection; its contact
block may reference the site-wide addresses through ``{{KEY}}``
placeholders, which are resolved when the record is loaded.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from resume_pdf.api.schemas.resume import ResumeRecord
from resume_pdf.constants.site_constants import (
    DEFAULT_RESUME_SLUG,
    EMAIL_ADDRESS,
    GITHUB_URL,
    LINKEDIN_URL,
    RESUME_COLLECTION,
    WEBSITE_URL,
)
from resume_pdf.data.db import get_session
from resume_pdf.data.models import ContentEntry

logger = logging.getLogger(__name__)

__all__ = [
    "get_entry",
    "get_resume_record",
    "load_entries_from_file",
    "put_entry",
    "resolve_placeholders",
]

CONTACT_PLACEHOLDERS: dict[str, str] = {
    "EMAIL": EMAIL_ADDRESS,
    "WEBSITE": WEBSITE_URL,
    "LINKEDIN": LINKEDIN_URL,
    "GITHUB": GITHUB_URL,
}

_PLACEHOLDER_RE = re.compile(r"\{\{\s*([A-Z_]+)\s*\}\}")


def get_entry(collection: str, slug: str) -> dict[str, Any] | None:
    """Return the document stored under *collection*/*slug*, or None."""
    with get_session() as session:
        entry = (
            session.query(ContentEntry)
            .filter(ContentEntry.collection == collection, ContentEntry.slug == slug)
            .first()
        )
        if entry is None:
            return None
        return json.loads(entry.data)


def put_entry(collection: str, slug: str, data: dict[str, Any]) -> None:
    """Insert or replace the document stored under *collection*/*slug*."""
    payload = json.dumps(data, ensure_ascii=False)
    with get_session() as session:
        entry = (
            session.query(ContentEntry)
            .filter(ContentEntry.collection == collection, ContentEntry.slug == slug)
            .first()
        )
        if entry is None:
            session.add(ContentEntry(collection=collection, slug=slug, data=payload))
        else:
            entry.data = payload


def load_entries_from_file(path: Path, collection: str) -> int:
    """Seed *collection* from a JSON file.

    The file holds either a list of objects that each carry an ``id``, or
    an object mapping slugs to documents. Existing entries with the same
    slug are replaced.

    Returns:
        Number of entries written.

    Raises:
        ValueError: If the file has neither shape.
    """
    raw = json.loads(Path(path).read_text(encoding="utf-8"))

    if isinstance(raw, list):
        documents: dict[str, dict[str, Any]] = {}
        for item in raw:
            if not isinstance(item, dict) or "id" not in item:
                msg = f"Every entry in {path} needs an 'id'"
                raise ValueError(msg)
            documents[str(item["id"])] = {k: v for k, v in item.items() if k != "id"}
    elif isinstance(raw, dict):
        documents = {str(slug): doc for slug, doc in raw.items()}
    else:
        msg = f"Unsupported content file layout in {path}"
        raise ValueError(msg)

    for slug, document in documents.items():
        put_entry(collection, slug, document)

    logger.info("Loaded %d entries into %r from %s", len(documents), collection, path)
    return len(documents)


def resolve_placeholders(value: str) -> str:
    """Replace ``{{KEY}}`` tokens in *value* with the matching site address.

    Raises:
        ValueError: For a key outside :data:`CONTACT_PLACEHOLDERS`.
    """

    def _sub(match: re.Match[str]) -> str:
        key = match.group(1)
        if key not in CONTACT_PLACEHOLDERS:
            msg = f"Unknown contact placeholder {key!r}"
            raise ValueError(msg)
        return CONTACT_PLACEHOLDERS[key]

    return _PLACEHOLDER_RE.sub(_sub, value)


def _normalize_contact(contact: dict[str, Any]) -> dict[str, Any]:
    resolved: dict[str, Any] = {}
    for key, value in contact.items():
        if isinstance(value, str):
            resolved[key] = resolve_placeholders(value)
        else:
            resolved[key] = value
    return resolved


def get_resume_record(slug: str = DEFAULT_RESUME_SLUG) -> ResumeRecord | None:
    """Load and validate the résumé record stored under *slug*.

    Returns:
        The record, or None when no such entry exists.

    Raises:
        pydantic.ValidationError: If the stored document does not match
            the résumé schema.
    """
    data = get_entry(RESUME_COLLECTION, slug)
    if data is None:
        logger.info("No %s entry named %r", RESUME_COLLECTION, slug)
        return None

    contact = data.get("contact")
    if isinstance(contact, dict):
        data = {**data, "contact": _normalize_contact(contact)}

    return ResumeRecord.model_validate(data)
