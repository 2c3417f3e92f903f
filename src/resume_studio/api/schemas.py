"""Request and response bodies for the resume routes."""

from __future__ import annotations

from pydantic import Field

from resume_studio.models.ai_content import AIContent
from resume_studio.models.base import CamelModel
from resume_studio.models.customization import Customization
from resume_studio.models.resume import ResumeData
from resume_studio.models.template import TemplateId


class RenderRequest(CamelModel):
    """Body shared by preview and export."""

    resume_data: ResumeData
    ai_content: AIContent | None = None
    template_id: TemplateId | None = None
    customization: Customization | None = None


class CoverLetterRequest(CamelModel):
    resume_data: ResumeData
    job_description: str = Field(..., min_length=1)


class CoverLetterResponse(CamelModel):
    cover_letter: str


class TemplateInfo(CamelModel):
    id: TemplateId
    name: str
    description: str
