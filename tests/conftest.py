"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from resume_studio.clients.llm_client import LLMClient, LLMResponse
from resume_studio.models.ai_content import AIContent, AIWorkExperience
from resume_studio.models.customization import Customization
from resume_studio.models.resume import (
    EducationEntry,
    PersonalInfo,
    ResumeData,
    WorkExperienceEntry,
)

FAKE_PDF = b"%PDF-1.7\n% fake document\n%%EOF"


@pytest.fixture
def personal_info() -> PersonalInfo:
    return PersonalInfo(
        full_name="Jane Doe",
        email="jane@example.com",
        phone="555-0100",
        location="Vancouver, BC",
        linkedin_url="linkedin.com/in/janedoe",
        website_url="janedoe.dev",
    )


@pytest.fixture
def resume_data(personal_info: PersonalInfo) -> ResumeData:
    return ResumeData(
        personal_info=personal_info,
        target_job_title="Senior Frontend Engineer",
        professional_summary="Frontend engineer with eight years of product experience.",
        work_experience=[
            WorkExperienceEntry(
                id="job-1",
                company="Acme Corp",
                position="Senior Engineer",
                start_date="2021-03",
                end_date="",
                current=True,
                description="Led the design system rewrite\n\nMentored four engineers\nOwned web performance",
            ),
            WorkExperienceEntry(
                id="job-2",
                company="Globex",
                position="Engineer",
                start_date="2018-01",
                end_date="2021-02",
                description="Built checkout flows\nShipped the mobile web app",
            ),
        ],
        education=[
            EducationEntry(
                id="edu-1",
                institution="University of British Columbia",
                degree="BSc",
                field_of_study="Computer Science",
                graduation_date="2017-05",
                gpa="3.8",
            )
        ],
        skills=["JavaScript", "TypeScript", "React"],
    )


@pytest.fixture
def empty_resume() -> ResumeData:
    return ResumeData()


@pytest.fixture
def ai_content() -> AIContent:
    return AIContent(
        professional_summary="Product-minded engineer who ships accessible interfaces.",
        work_experience=[
            AIWorkExperience(
                bullet_points=[
                    "Led a design system rewrite adopted by six product teams",
                    "Mentored four engineers through their first production launches",
                ]
            ),
            AIWorkExperience(bullet_points=["Built checkout flows used by every web customer"]),
        ],
    )


@pytest.fixture
def customization() -> Customization:
    return Customization(accent_color="#10B981", font_family="Georgia")


@pytest.fixture
def mock_engine() -> AsyncMock:
    engine = AsyncMock()
    engine.render = AsyncMock(return_value=FAKE_PDF)
    return engine


@pytest.fixture
def mock_llm() -> AsyncMock:
    llm = AsyncMock(spec=LLMClient)
    llm.generate = AsyncMock(
        return_value=LLMResponse(text="Dear Hiring Manager,", input_tokens=10, output_tokens=5)
    )
    llm.generate_json = AsyncMock(
        return_value={
            "professionalSummary": "Engineer focused on fast, accessible products.",
            "workExperience": [
                {"bulletPoints": ["Led the design system rewrite", "Mentored four engineers"]},
                {"bulletPoints": ["Built checkout flows"]},
            ],
        }
    )
    return llm
