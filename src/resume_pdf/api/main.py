"""FastAPI application entry point for the résumé PDF service."""

from __future__ import annotations

import logging
import os
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import FastAPI

from resume_pdf.api.routes import health, resume

if TYPE_CHECKING:
    from collections.abc import AsyncIterator


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize the content store on startup.

    When RESUME_DATA_PATH points at a JSON file, the résumé collection is
    seeded from it.
    """
    from resume_pdf.constants.site_constants import RESUME_COLLECTION
    from resume_pdf.data.db import init_db
    from resume_pdf.services.content_store import load_entries_from_file

    init_db()
    data_path = os.getenv("RESUME_DATA_PATH")
    if data_path:
        load_entries_from_file(Path(data_path), RESUME_COLLECTION)
    yield


app = FastAPI(
    title="Resume PDF API",
    description="Generates the downloadable résumé PDF from site content",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(health.router)
app.include_router(resume.router)


def main() -> None:
    """Start the development server."""
    import uvicorn

    logging.basicConfig(level=logging.INFO)
    uvicorn.run(
        "resume_pdf.api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
    )


if __name__ == "__main__":
    main()
