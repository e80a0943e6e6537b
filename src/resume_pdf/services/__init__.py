"""Services"""

from resume_pdf.services.content_store import (
    get_entry,
    get_resume_record,
    load_entries_from_file,
    put_entry,
)
from resume_pdf.services.resume_pdf import build_resume_layout, render_resume_pdf

__all__ = [
    "build_resume_layout",
    "get_entry",
    "get_resume_record",
    "load_entries_from_file",
    "put_entry",
    "render_resume_pdf",
]
