"""Data models for the resume rendering pipeline."""

from resume_studio.models.ai_content import AIContent, AIWorkExperience
from resume_studio.models.customization import (
    DEFAULT_SECTION_ORDER,
    Customization,
    FontSize,
    OrderedSections,
    PageMargins,
    ResolvedCustomization,
    ResolvedFontSize,
    ResolvedMargins,
    Section,
)
from resume_studio.models.merged import MergedResume, MergedWorkExperience
from resume_studio.models.resume import (
    EducationEntry,
    PersonalInfo,
    ResumeData,
    WorkExperienceEntry,
)
from resume_studio.models.template import MarginFamily, TemplateId

__all__ = [
    "AIContent",
    "AIWorkExperience",
    "Customization",
    "DEFAULT_SECTION_ORDER",
    "EducationEntry",
    "FontSize",
    "MarginFamily",
    "MergedResume",
    "MergedWorkExperience",
    "OrderedSections",
    "PageMargins",
    "PersonalInfo",
    "ResolvedCustomization",
    "ResolvedFontSize",
    "ResolvedMargins",
    "ResumeData",
    "Section",
    "TemplateId",
    "WorkExperienceEntry",
]
