"""Pydantic models for user-entered resume data."""

from __future__ import annotations

import uuid

from pydantic import AliasChoices, Field

from resume_studio.models.base import CamelModel


def _new_id() -> str:
    return uuid.uuid4().hex


class PersonalInfo(CamelModel):
    full_name: str = ""
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin_url: str = Field(
        "",
        validation_alias=AliasChoices("linkedin_url", "linkedinUrl", "linkedInUrl", "linkedIn"),
    )
    website_url: str = Field(
        "",
        validation_alias=AliasChoices("website_url", "websiteUrl", "website"),
    )


class EducationEntry(CamelModel):
    id: str = Field(default_factory=_new_id)
    institution: str = ""
    degree: str = ""
    field_of_study: str = Field(
        "",
        validation_alias=AliasChoices("field_of_study", "fieldOfStudy", "field"),
    )
    graduation_date: str = ""  # YYYY-MM
    gpa: str | None = None


class WorkExperienceEntry(CamelModel):
    id: str = Field(default_factory=_new_id)
    company: str = ""
    position: str = ""
    start_date: str = ""  # YYYY-MM
    end_date: str = ""  # YYYY-MM, ignored when current
    current: bool = False
    description: str = Field(
        "",
        validation_alias=AliasChoices("description", "freeTextDescription"),
    )


class ResumeData(CamelModel):
    """Everything the user typed into the intake form for one session."""

    personal_info: PersonalInfo = Field(default_factory=PersonalInfo)
    target_job_title: str = ""
    professional_summary: str = ""
    work_experience: list[WorkExperienceEntry] = Field(default_factory=list)
    education: list[EducationEntry] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    # AI generation input only; never rendered
    existing_resume_text: str = Field(
        "",
        validation_alias=AliasChoices(
            "existing_resume_text", "existingResumeText", "existingResume"
        ),
    )
    custom_instructions: str = ""
