"""Classic layout: serif type, centred headings, skills as one line."""

from __future__ import annotations

from resume_studio.models.customization import (
    OrderedSections,
    ResolvedCustomization,
    Section,
)
from resume_studio.models.merged import MergedResume
from resume_studio.models.template import TemplateId
from resume_studio.templates.base import LayoutTemplate, contact_items, degree_line
from resume_studio.templates.tree import Node, h

__all__ = ["ClassicTemplate"]


class ClassicTemplate(LayoutTemplate):
    template_id = TemplateId.CLASSIC
    section_titles = {
        Section.SUMMARY: "PROFESSIONAL SUMMARY",
        Section.EXPERIENCE: "PROFESSIONAL EXPERIENCE",
        Section.EDUCATION: "EDUCATION",
        Section.SKILLS: "SKILLS & COMPETENCIES",
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
            h("h2", self.title_text(resume), cls="target-title accent"),
            h(
                "div",
                *(h("div", item, cls="contact-item") for item in contact_items(resume.personal_info)),
                cls="contact",
            ),
            h("hr", cls="rule"),
            cls="resume-header classic-header",
        )

    def summary(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        return [h("p", resume.professional_summary, cls="summary italic")]

    def experience(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        return [
            h(
                "div",
                h(
                    "div",
                    h(
                        "div",
                        h("h4", exp.position, cls="position"),
                        h("p", exp.company, cls="company italic muted"),
                    ),
                    h("p", self.dates(exp.start_date, exp.end_date, exp.current), cls="date-range muted"),
                    cls="row baseline underline",
                ),
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
                    h("h4", degree_line(edu), cls="degree"),
                    h("p", edu.institution, cls="institution italic muted"),
                ),
                h(
                    "div",
                    h("p", self.graduation(edu), cls="date"),
                    h("p", f"GPA: {edu.gpa}", cls="gpa") if edu.gpa else None,
                    cls="muted align-right",
                ),
                cls="school row baseline",
            )
            for edu in resume.education
        ]

    def skills(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        items: list[Node | str] = []
        for i, item in enumerate(self.skill_items(resume)):
            if i:
                items.append(" • ")
            items.append(item)
        return [h("p", *items, cls="skills-line")]
