"""Properties every layout must hold, checked across all eight templates."""

import pytest

from resume_studio.models.ai_content import AIContent, AIWorkExperience
from resume_studio.models.customization import Customization, Section
from resume_studio.models.resume import ResumeData, WorkExperienceEntry
from resume_studio.models.template import TemplateId
from resume_studio.pipeline.customization import resolve
from resume_studio.pipeline.merge import merge
from resume_studio.pipeline.sections import order
from resume_studio.templates import get_template, list_templates
from resume_studio.templates.base import (
    NAME_PLACEHOLDER,
    TITLE_PLACEHOLDER,
    date_range,
    format_month,
)

ALL_TEMPLATES = list(TemplateId)


def project(template_id, resume_data, ai_content=None, customization=None):
    merged = merge(resume_data, ai_content)
    resolved = resolve(customization, template_id)
    return get_template(template_id).project(merged, resolved, order(resolved, template_id))


def rendered_sections(tree):
    return [n.attr("data-section") for n in tree.find_all(tag="section")]


class TestRegistry:
    def test_all_templates_registered(self):
        assert [t.template_id for t in list_templates()] == ALL_TEMPLATES

    def test_unknown_template(self):
        with pytest.raises(ValueError, match="Available"):
            get_template("poster")

    def test_lookup_by_string(self):
        assert get_template("compact").template_id is TemplateId.COMPACT


class TestFormatting:
    def test_short_month(self):
        assert format_month("2020-01") == "Jan 2020"

    def test_long_month(self):
        assert format_month("2020-09", long=True) == "September 2020"

    def test_full_date(self):
        assert format_month("2020-12-31") == "Dec 2020"

    @pytest.mark.parametrize("raw", ["2020", "Spring 2020", "2020-13"])
    def test_unparseable_shown_as_typed(self, raw):
        assert format_month(raw) == raw

    def test_empty(self):
        assert format_month("") == ""

    def test_current_wins_over_end(self):
        assert date_range("2020-01", "2021-06", True) == "Jan 2020 - Present"

    def test_missing_start(self):
        assert date_range("", "2021-06", False) == "Jun 2021"


@pytest.mark.parametrize("template_id", ALL_TEMPLATES)
class TestEveryTemplate:
    def test_root_node(self, template_id, resume_data):
        tree = project(template_id, resume_data)
        assert tree.attr("data-template") == template_id.value
        assert f"resume--{template_id.value}" in tree.classes

    def test_customization_carried_as_css_variables(self, template_id, resume_data):
        tree = project(template_id, resume_data, customization=Customization(accent_color="#10B981"))
        assert dict(tree.style)["--accent"] == "#10B981"

    def test_header_with_values(self, template_id, resume_data):
        tree = project(template_id, resume_data)
        assert tree.find_all(cls="name")[0].text == "Jane Doe"
        assert tree.find_all(cls="target-title")[0].text == "Senior Frontend Engineer"
        assert "jane@example.com" in tree.text

    def test_placeholders_and_no_sections_when_empty(self, template_id, empty_resume):
        tree = project(template_id, empty_resume)
        assert tree.find_all(cls="name")[0].text == NAME_PLACEHOLDER
        assert tree.find_all(cls="target-title")[0].text == TITLE_PLACEHOLDER
        assert rendered_sections(tree) == []

    def test_all_sections_rendered(self, template_id, resume_data):
        tree = project(template_id, resume_data)
        assert sorted(rendered_sections(tree)) == ["education", "experience", "skills", "summary"]

    def test_empty_summary_omitted(self, template_id, resume_data):
        data = resume_data.model_copy(update={"professional_summary": "  "})
        assert "summary" not in rendered_sections(project(template_id, data))

    def test_empty_experience_omitted(self, template_id, resume_data):
        data = resume_data.model_copy(update={"work_experience": []})
        assert "experience" not in rendered_sections(project(template_id, data))

    def test_empty_education_omitted(self, template_id, resume_data):
        data = resume_data.model_copy(update={"education": []})
        assert "education" not in rendered_sections(project(template_id, data))

    def test_blank_skills_omitted(self, template_id, resume_data):
        data = resume_data.model_copy(update={"skills": ["", "   "]})
        assert "skills" not in rendered_sections(project(template_id, data))

    def test_blank_skills_filtered(self, template_id, resume_data):
        data = resume_data.model_copy(update={"skills": ["JavaScript", "  ", "React"]})
        skills = project(template_id, data).find_all(cls="skill")
        assert [s.text for s in skills] == ["JavaScript", "React"]

    def test_current_shows_present(self, template_id, resume_data):
        tree = project(template_id, resume_data)
        dates = [n.text for n in tree.find_all(cls="date-range")]
        assert "Present" in dates[0]
        assert "Present" not in dates[1]

    def test_single_bullet_glyph(self, template_id, resume_data):
        ai = AIContent(
            work_experience=[AIWorkExperience(bullet_points=["• Already bulleted", "Plain"])]
        )
        bullets = [n.text for n in project(template_id, resume_data, ai).find_all(cls="bullet")]
        assert bullets[:2] == ["• Already bulleted", "• Plain"]

    def test_pure(self, template_id, resume_data, ai_content, customization):
        first = project(template_id, resume_data, ai_content, customization)
        second = project(template_id, resume_data, ai_content, customization)
        assert first == second
        assert first.to_html() == second.to_html()

    def test_user_text_escaped(self, template_id, resume_data):
        data = resume_data.model_copy(update={"professional_summary": "<b>bold</b> & more"})
        html = project(template_id, data).to_html()
        assert "<b>bold</b>" not in html
        assert "&lt;b&gt;bold&lt;/b&gt; &amp; more" in html


@pytest.mark.parametrize(
    ("template_id", "expected"),
    [
        (TemplateId.COMPACT, 3),
        (TemplateId.TECHNICAL, 3),
        (TemplateId.MODERN, 5),
        (TemplateId.CLASSIC, 5),
    ],
)
def test_bullet_limits(template_id, expected):
    data = ResumeData(work_experience=[WorkExperienceEntry(company="Acme")])
    ai = AIContent(
        work_experience=[AIWorkExperience(bullet_points=[f"Point {i}" for i in range(1, 6)])]
    )
    bullets = project(template_id, data, ai).find_all(cls="bullet")
    assert len(bullets) == expected
    assert bullets[-1].text == f"• Point {expected}"


@pytest.mark.parametrize("template_id", [TemplateId.COMPACT, TemplateId.TECHNICAL])
def test_fixed_sidebar_holds_skills_and_education(template_id, resume_data):
    side_cls = f"{template_id.value}-side"
    customization = Customization(section_order=["skills", "education", "experience", "summary"])
    tree = project(template_id, resume_data, customization=customization)
    side = tree.find_all(cls=side_cls)[0]
    main = tree.find_all(cls=f"{template_id.value}-main")[0]
    assert rendered_sections(side) == ["skills", "education"]
    assert rendered_sections(main) == ["experience", "summary"]


@pytest.mark.parametrize(
    "template_id",
    [TemplateId.MINIMALIST, TemplateId.CLASSIC, TemplateId.CREATIVE, TemplateId.EXECUTIVE, TemplateId.ACADEMIC],
)
def test_requested_order_respected(template_id, resume_data):
    customization = Customization(section_order=["skills", "education", "experience", "summary"])
    tree = project(template_id, resume_data, customization=customization)
    assert rendered_sections(tree) == ["skills", "education", "experience", "summary"]


def test_modern_puts_skills_in_sidebar(resume_data):
    tree = project(TemplateId.MODERN, resume_data)
    assert rendered_sections(tree.find_all(cls="modern-side")[0]) == ["skills"]
    assert rendered_sections(tree.find_all(cls="modern-main")[0]) == [
        "summary",
        "experience",
        "education",
    ]


def test_academic_uses_long_month_names(resume_data):
    tree = project(TemplateId.ACADEMIC, resume_data)
    assert tree.find_all(cls="date-range")[1].text == "January 2018 - February 2021"


def test_short_month_names_elsewhere(resume_data):
    tree = project(TemplateId.CLASSIC, resume_data)
    assert tree.find_all(cls="date-range")[1].text == "Jan 2018 - Feb 2021"


def test_academic_default_order(resume_data):
    assert rendered_sections(project(TemplateId.ACADEMIC, resume_data)) == [
        "summary",
        "education",
        "experience",
        "skills",
    ]


def test_modern_empty_contact_block_omitted(empty_resume):
    tree = project(TemplateId.MODERN, empty_resume)
    assert tree.find_all(cls="contact") == []


def test_section_titles_differ_by_template(resume_data):
    technical = project(TemplateId.TECHNICAL, resume_data)
    titles = [n.text for n in technical.find_all(cls="section-title")]
    assert "Technical Skills" in titles
    assert Section.SKILLS.value in rendered_sections(technical)
