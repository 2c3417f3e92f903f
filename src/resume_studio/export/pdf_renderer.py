"""Export projected resumes to PDF with template-specific page geometry."""

from __future__ import annotations

import logging
import re
import unicodedata
from urllib.parse import quote

from resume_studio.errors import ExportError
from resume_studio.export.engines import PageGeometry, PdfEngine
from resume_studio.models.customization import PageMargins, ResolvedMargins
from resume_studio.models.template import TemplateId
from resume_studio.pipeline.customization import resolve_margins
from resume_studio.templates.profiles import get_profile

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"
EXPORT_FAILED_MESSAGE = "Failed to generate PDF"

_UNSAFE_FILENAME_CHARS = re.compile(r'[/\\"\x00-\x1f\x7f]')


def resolve_page_margins(
    template_id: TemplateId | str,
    override: PageMargins | None = None,
) -> ResolvedMargins:
    """User override first, then the template's margin family, then the global fallback."""
    return resolve_margins(override, get_profile(template_id))


async def export_pdf(
    markup: str,
    template_id: TemplateId | str,
    margin_override: PageMargins | None = None,
    *,
    engine: PdfEngine,
    page_size: str = "A4",
    print_background: bool = True,
) -> bytes:
    """Hand *markup* to *engine* once and return the PDF bytes.

    Raises:
        ExportError: On any engine failure (timeout, crash, unsupported
            markup). Nothing is retried and no partial output is returned.
    """
    geometry = PageGeometry(
        margins=resolve_page_margins(template_id, margin_override),
        page_size=page_size,
        print_background=print_background,
    )
    try:
        content = await engine.render(markup, geometry)
    except Exception as exc:
        logger.error("PDF export failed for template %s", template_id, exc_info=True)
        raise ExportError(EXPORT_FAILED_MESSAGE) from exc
    if not content:
        raise ExportError(EXPORT_FAILED_MESSAGE)
    logger.debug("PDF export: %d bytes", len(content))
    return content


def export_filename(full_name: str) -> str:
    """``Jane Doe`` -> ``Jane Doe_Resume.pdf``; a blank name gives ``Resume_Resume.pdf``."""
    name = _UNSAFE_FILENAME_CHARS.sub("", full_name or "").strip()
    return f"{name or 'Resume'}_Resume.pdf"


def content_disposition(filename: str) -> str:
    """``attachment`` header value for *filename* (RFC 6266).

    Non-ASCII names get an ASCII ``filename`` fallback plus a UTF-8
    ``filename*`` parameter, since HTTP headers are sent as latin-1.
    """
    if filename.isascii():
        return f'attachment; filename="{filename}"'
    fallback = unicodedata.normalize("NFKD", filename).encode("ascii", "ignore").decode("ascii")
    if fallback.startswith("_"):
        fallback = f"Resume{fallback}"
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename)}"
