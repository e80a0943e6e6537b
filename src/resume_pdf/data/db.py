"""SQLAlchemy engine and sessions for the content store.

``DB_URL`` selects the database; without it content lives in
``content.db`` at the project root. Tables are created the first time
the engine is needed.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker


class Base(DeclarativeBase):
    pass


_engine: Engine | None = None
_SessionLocal: sessionmaker[Session] | None = None


def get_database_url() -> str:
    env_url = os.getenv("DB_URL")
    if env_url:
        return env_url
    db_path = Path(__file__).resolve().parents[3] / "content.db"
    return URL.create("sqlite", database=str(db_path)).render_as_string(hide_password=False)


def init_db() -> Engine:
    """Return the engine, creating it and the content tables on first use."""
    global _engine
    if _engine is None:
        from resume_pdf.data.models import content_entry  # noqa: F401

        _engine = create_engine(get_database_url(), future=True)
        Base.metadata.create_all(bind=_engine)
    return _engine


@contextmanager
def get_session() -> Iterator[Session]:
    """Yield a session that commits on success and rolls back on error."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(bind=init_db(), autoflush=False, expire_on_commit=False)
    session = _SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
