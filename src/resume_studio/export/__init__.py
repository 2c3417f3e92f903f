from resume_studio.export.engines import PageGeometry, PdfEngine, WeasyPrintEngine
from resume_studio.export.pdf_renderer import (
    content_disposition,
    export_filename,
    export_pdf,
    resolve_page_margins,
)

__all__ = [
    "PageGeometry",
    "PdfEngine",
    "WeasyPrintEngine",
    "content_disposition",
    "export_filename",
    "export_pdf",
    "resolve_page_margins",
]
