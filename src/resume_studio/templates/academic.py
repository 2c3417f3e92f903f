"""Academic layout: a curriculum vitae in a book face, education first."""

from __future__ import annotations

from resume_studio.models.customization import (
    OrderedSections,
    ResolvedCustomization,
    Section,
)
from resume_studio.models.merged import MergedResume
from resume_studio.models.template import TemplateId
from resume_studio.templates.base import LayoutTemplate, contact_items
from resume_studio.templates.tree import Node, h

__all__ = ["AcademicTemplate"]


class AcademicTemplate(LayoutTemplate):
    template_id = TemplateId.ACADEMIC
    section_titles = {
        Section.SUMMARY: "Research Interests",
        Section.EXPERIENCE: "Professional Experience",
        Section.EDUCATION: "Education",
        Section.SKILLS: "Skills & Expertise",
    }

    def layout(
        self,
        resume: MergedResume,
        customization: ResolvedCustomization,
        sections: OrderedSections,
    ) -> list[Node]:
        return [
            self.header(resume, customization),
            *self.render_sections(sections.primary, resume, customization),
        ]

    def header(self, resume: MergedResume, customization: ResolvedCustomization) -> Node:
        return h(
            "header",
            h("h1", self.name_text(resume), cls="name"),
            h("h2", self.title_text(resume), cls="target-title italic"),
            h("div", " | ".join(contact_items(resume.personal_info)), cls="contact small"),
            h("hr", cls="rule double"),
            cls="resume-header academic-header",
        )

    def section_block(
        self,
        section: Section,
        body: list[Node],
        customization: ResolvedCustomization,
    ) -> Node:
        return h(
            "section",
            h("h3", self.section_titles[section], cls="section-title underline"),
            *body,
            cls="section",
            data_section=section.value,
        )

    def summary(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        return [h("p", resume.professional_summary, cls="summary justify")]

    def experience(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        return [
            h(
                "div",
                h(
                    "div",
                    h("h4", exp.position, cls="position"),
                    h("span", self.dates(exp.start_date, exp.end_date, exp.current), cls="date-range"),
                    cls="row baseline",
                ),
                h("p", exp.company, cls="company italic"),
                self.bullets(exp),
                cls="job",
            )
            for exp in resume.work_experience
        ]

    def education(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        return [
            h(
                "div",
                h(
                    "div",
                    h("h4", edu.degree, cls="degree"),
                    h("span", self.graduation(edu), cls="date"),
                    cls="row baseline",
                ),
                h("p", edu.field_of_study, cls="field italic") if edu.field_of_study else None,
                h("p", edu.institution, cls="institution"),
                h("p", f"GPA: {edu.gpa}", cls="gpa small") if edu.gpa else None,
                cls="school",
            )
            for edu in resume.education
        ]

    def skills(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        return [h("ul", *self.skill_items(resume, tag="li"), cls="skills-list two-columns")]
