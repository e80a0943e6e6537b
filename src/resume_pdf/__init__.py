def main() -> None:
    """Entry point for the development server."""
    from resume_pdf.api.main import main as api_main

    api_main()
