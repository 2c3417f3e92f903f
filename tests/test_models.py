"""Tests for Pydantic data models."""

import pytest
from pydantic import ValidationError

from resume_studio.models.ai_content import AIContent
from resume_studio.models.customization import (
    Customization,
    PageMargins,
    ResolvedCustomization,
    Section,
)
from resume_studio.models.resume import EducationEntry, ResumeData, WorkExperienceEntry
from resume_studio.models.template import TemplateId


class TestResumeData:
    def test_defaults_are_empty(self):
        data = ResumeData()
        assert data.personal_info.full_name == ""
        assert data.work_experience == []
        assert data.skills == []

    def test_accepts_camel_case_ui_payload(self):
        data = ResumeData.model_validate(
            {
                "personalInfo": {"fullName": "Jane Doe", "linkedIn": "in/jane", "website": "jane.dev"},
                "targetJobTitle": "Engineer",
                "workExperience": [
                    {"id": 1, "company": "Acme", "startDate": "2020-01", "current": True}
                ],
                "education": [{"institution": "UBC", "field": "CS", "graduationDate": "2019-05"}],
                "existingResume": "old text",
            }
        )
        assert data.personal_info.full_name == "Jane Doe"
        assert data.personal_info.linkedin_url == "in/jane"
        assert data.personal_info.website_url == "jane.dev"
        assert data.work_experience[0].id == "1"
        assert data.work_experience[0].current is True
        assert data.education[0].field_of_study == "CS"
        assert data.existing_resume_text == "old text"

    def test_accepts_snake_case(self):
        data = ResumeData(target_job_title="Engineer", skills=["Go"])
        assert data.target_job_title == "Engineer"

    def test_entry_ids_are_stable_and_unique(self):
        a, b = WorkExperienceEntry(), WorkExperienceEntry()
        assert a.id and b.id and a.id != b.id
        assert EducationEntry().id != EducationEntry().id


class TestAIContent:
    def test_parses_provider_shape(self):
        content = AIContent.model_validate(
            {"professionalSummary": "Hi", "workExperience": [{"bulletPoints": ["a", "b"]}]}
        )
        assert content.work_experience[0].bullet_points == ["a", "b"]
        assert content.work_experience[0].entry_id is None

    def test_wrong_shape_rejected(self):
        with pytest.raises(ValidationError):
            AIContent.model_validate({"workExperience": "not a list"})


class TestCustomization:
    def test_all_fields_optional(self):
        c = Customization()
        assert c.accent_color is None
        assert c.font_size.header is None
        assert c.section_order is None
        assert c.margins is None

    def test_camel_case_payload(self):
        c = Customization.model_validate(
            {
                "accentColor": "#10B981",
                "fontSize": {"header": 30, "sectionTitle": 18},
                "sectionOrder": ["skills", "summary"],
            }
        )
        assert c.font_size.section_title == 18
        assert c.section_order == [Section.SKILLS, Section.SUMMARY]

    @pytest.mark.parametrize("color", ["#fff", "#3B82F6", "teal"])
    def test_valid_colors(self, color):
        assert Customization(accent_color=color).accent_color == color

    @pytest.mark.parametrize("color", ["red; background: url(x)", "#12", "rgb(0,0,0)"])
    def test_invalid_colors(self, color):
        with pytest.raises(ValidationError):
            Customization(accent_color=color)

    def test_font_family_quotes_stripped(self):
        assert Customization(font_family="'Open Sans'").font_family == "Open Sans"

    def test_font_family_injection_rejected(self):
        with pytest.raises(ValidationError):
            Customization(font_family="Inter; } body { display: none")

    def test_unknown_section_rejected(self):
        with pytest.raises(ValidationError):
            Customization(section_order=["projects"])

    def test_font_size_bounds(self):
        with pytest.raises(ValidationError):
            Customization.model_validate({"fontSize": {"body": 2}})


class TestPageMargins:
    @pytest.mark.parametrize("value", ["0.5in", "12mm", "1cm", "10pt", "0"])
    def test_physical_lengths(self, value):
        assert PageMargins(top=value).top == value

    @pytest.mark.parametrize("value", ["half an inch", "5", "-1in", "10%"])
    def test_rejects_non_lengths(self, value):
        with pytest.raises(ValidationError):
            PageMargins(top=value)


class TestResolvedCustomization:
    def test_frozen(self):
        from resume_studio.pipeline.customization import resolve

        resolved = resolve(None, TemplateId.MODERN)
        assert isinstance(resolved, ResolvedCustomization)
        with pytest.raises(ValidationError):
            resolved.accent_color = "#000000"


class TestTemplateId:
    def test_eight_templates(self):
        assert {t.value for t in TemplateId} == {
            "modern",
            "minimalist",
            "classic",
            "creative",
            "executive",
            "technical",
            "academic",
            "compact",
        }
