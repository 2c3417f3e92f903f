"""Main rendering pipeline: merge, resolve, order, project, serialize."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from resume_studio.export.engines import PdfEngine
from resume_studio.export.pdf_renderer import (
    PDF_MEDIA_TYPE,
    export_filename,
    export_pdf,
)
from resume_studio.models.ai_content import AIContent
from resume_studio.models.customization import (
    Customization,
    OrderedSections,
    PageMargins,
    ResolvedCustomization,
)
from resume_studio.models.merged import MergedResume
from resume_studio.models.resume import ResumeData
from resume_studio.models.template import TemplateId
from resume_studio.pipeline.customization import resolve
from resume_studio.pipeline.merge import merge
from resume_studio.pipeline.sections import order
from resume_studio.templates import get_template
from resume_studio.templates.renderer import render_to_html
from resume_studio.templates.tree import Node

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RenderedDocument:
    """Every intermediate of one render, ending in the HTML document."""

    template_id: TemplateId
    merged: MergedResume
    customization: ResolvedCustomization
    sections: OrderedSections
    tree: Node
    html: str


@dataclass(frozen=True)
class ExportResult:
    filename: str
    content: bytes
    media_type: str = PDF_MEDIA_TYPE


def render_document(
    resume_data: ResumeData,
    ai_content: AIContent | None,
    template_id: TemplateId | str,
    customization: Customization | ResolvedCustomization | None = None,
    *,
    title: str | None = None,
) -> RenderedDocument:
    """Run the synchronous pipeline once.

    The preview and the PDF export both go through here, so they always
    serialize the same tree.
    """
    template_id = TemplateId(template_id)
    merged = merge(resume_data, ai_content)
    resolved = resolve(customization, template_id)
    sections = order(resolved, template_id)
    tree = get_template(template_id).project(merged, resolved, sections)

    if title is None:
        name = merged.personal_info.full_name.strip()
        title = f"{name} - Resume" if name else "Resume"
    html = render_to_html(tree, template_id, title=title)
    logger.debug(
        "Rendered %s: primary=%s sidebar=%s",
        template_id.value,
        [s.value for s in sections.primary],
        [s.value for s in sections.sidebar],
    )
    return RenderedDocument(
        template_id=template_id,
        merged=merged,
        customization=resolved,
        sections=sections,
        tree=tree,
        html=html,
    )


def render_html(
    resume_data: ResumeData,
    ai_content: AIContent | None,
    template_id: TemplateId | str,
    customization: Customization | ResolvedCustomization | None = None,
) -> str:
    """HTML preview of the resume."""
    return render_document(resume_data, ai_content, template_id, customization).html


async def export_resume(
    resume_data: ResumeData,
    ai_content: AIContent | None,
    template_id: TemplateId | str,
    customization: Customization | ResolvedCustomization | None = None,
    *,
    engine: PdfEngine,
    page_size: str = "A4",
    print_background: bool = True,
) -> ExportResult:
    """Render the resume and export it to PDF.

    Raises:
        ExportError: If the engine fails.
    """
    document = render_document(resume_data, ai_content, template_id, customization)
    margins = PageMargins.model_validate(document.customization.margins.model_dump())
    content = await export_pdf(
        document.html,
        document.template_id,
        margins,
        engine=engine,
        page_size=page_size,
        print_background=print_background,
    )
    return ExportResult(
        filename=export_filename(resume_data.personal_info.full_name),
        content=content,
    )
