"""Resume preview, PDF export, AI generation and template listing."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse, Response

from resume_studio.api.dependencies import (
    get_config,
    get_content_generator,
    get_pdf_engine,
)
from resume_studio.api.schemas import (
    CoverLetterRequest,
    CoverLetterResponse,
    RenderRequest,
    TemplateInfo,
)
from resume_studio.config import AppConfig
from resume_studio.errors import ExportError, GenerationError, InputPolicyError
from resume_studio.export.engines import PdfEngine
from resume_studio.export.pdf_renderer import EXPORT_FAILED_MESSAGE, content_disposition
from resume_studio.models.ai_content import AIContent
from resume_studio.models.resume import ResumeData
from resume_studio.models.template import TemplateId
from resume_studio.pipeline.content_generator import ContentGenerator
from resume_studio.pipeline.orchestrator import export_resume, render_html
from resume_studio.templates import list_templates


router = APIRouter(tags=["resumes"])


@router.get("/templates", response_model=list[TemplateInfo])
def get_templates() -> list[TemplateInfo]:
    """List the available layouts in display order."""
    return [
        TemplateInfo(id=t.template_id, name=t.name, description=t.profile.description)
        for t in list_templates()
    ]


def _template_for(body: RenderRequest, config: AppConfig) -> TemplateId:
    return body.template_id or TemplateId(config.render.default_template)


@router.post("/preview", response_class=HTMLResponse)
def preview_resume(
    body: RenderRequest,
    config: Annotated[AppConfig, Depends(get_config)],
) -> HTMLResponse:
    """Return the same HTML document the export path hands to the PDF engine."""
    html = render_html(
        body.resume_data,
        body.ai_content,
        _template_for(body, config),
        body.customization,
    )
    return HTMLResponse(content=html)


@router.post(
    "/export",
    responses={200: {"content": {"application/pdf": {}}}},
)
async def export_resume_pdf(
    body: RenderRequest,
    engine: Annotated[PdfEngine, Depends(get_pdf_engine)],
    config: Annotated[AppConfig, Depends(get_config)],
) -> Response:
    """Render the resume and return it as a downloadable PDF.

    Raises:
        HTTPException: 502 if the PDF engine fails.
    """
    try:
        result = await export_resume(
            body.resume_data,
            body.ai_content,
            _template_for(body, config),
            body.customization,
            engine=engine,
            page_size=config.export.page_size,
            print_background=config.export.print_background,
        )
    except ExportError as exc:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=EXPORT_FAILED_MESSAGE,
        ) from exc

    return Response(
        content=result.content,
        media_type=result.media_type,
        headers={"Content-Disposition": content_disposition(result.filename)},
    )


@router.post("/generate", response_model=AIContent)
async def generate_content(
    resume_data: ResumeData,
    generator: Annotated[ContentGenerator, Depends(get_content_generator)],
) -> AIContent:
    """Generate a professional summary and bullets with the AI provider.

    Raises:
        HTTPException: 400 if the input cannot be used for generation,
            502 if the provider fails.
    """
    try:
        return await generator.generate(resume_data)
    except InputPolicyError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except GenerationError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc


@router.post("/cover-letter", response_model=CoverLetterResponse)
async def generate_cover_letter(
    body: CoverLetterRequest,
    generator: Annotated[ContentGenerator, Depends(get_content_generator)],
) -> CoverLetterResponse:
    try:
        text = await generator.cover_letter(body.resume_data, body.job_description)
    except InputPolicyError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    except GenerationError as exc:
        raise HTTPException(status_code=status.HTTP_502_BAD_GATEWAY, detail=str(exc)) from exc
    return CoverLetterResponse(cover_letter=text)
