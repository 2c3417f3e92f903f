"""Creative layout.

A full-bleed accent band carries the header; experience is drawn as a
timeline of cards. Education and skills are half-width blocks that sit
side by side when they follow each other.
"""

from __future__ import annotations

from resume_studio.models.customization import (
    OrderedSections,
    ResolvedCustomization,
    Section,
)
from resume_studio.models.merged import MergedResume
from resume_studio.models.template import TemplateId
from resume_studio.templates.base import LayoutTemplate, degree_line
from resume_studio.templates.tree import Node, h

__all__ = ["CreativeTemplate"]

_HALF_WIDTH = frozenset({Section.EDUCATION, Section.SKILLS})


class CreativeTemplate(LayoutTemplate):
    template_id = TemplateId.CREATIVE
    section_titles = {
        Section.SUMMARY: "About Me",
        Section.EXPERIENCE: "Experience",
        Section.EDUCATION: "Education",
        Section.SKILLS: "Skills",
    }

    def layout(
        self,
        resume: MergedResume,
        customization: ResolvedCustomization,
        sections: OrderedSections,
    ) -> list[Node]:
        return [
            self.header(resume, customization),
            h(
                "div",
                *self.render_sections(sections.primary, resume, customization),
                cls="creative-body",
            ),
        ]

    def header(self, resume: MergedResume, customization: ResolvedCustomization) -> Node:
        info = resume.personal_info
        left = [
            h("div", f"Email: {info.email}", cls="contact-item") if info.email.strip() else None,
            h("div", f"Phone: {info.phone}", cls="contact-item") if info.phone.strip() else None,
        ]
        right = [
            h("div", f"Location: {info.location}", cls="contact-item") if info.location.strip() else None,
            h("div", info.linkedin_url, cls="contact-item") if info.linkedin_url.strip() else None,
            h("div", info.website_url, cls="contact-item") if info.website_url.strip() else None,
        ]
        return h(
            "header",
            h("div", cls="blob blob--top"),
            h("div", cls="blob blob--bottom"),
            h(
                "div",
                h("h1", self.name_text(resume), cls="name"),
                h("h2", self.title_text(resume), cls="target-title"),
                h("div", h("div", *left), h("div", *right), cls="contact grid-2"),
                cls="creative-header-inner",
            ),
            cls="resume-header creative-header",
        )

    def section_block(
        self,
        section: Section,
        body: list[Node],
        customization: ResolvedCustomization,
    ) -> Node:
        width = "half" if section in _HALF_WIDTH else "full"
        return h(
            "section",
            h(
                "div",
                h("span", cls="marker"),
                h("h3", self.section_titles[section], cls="section-title"),
                cls="section-heading",
            ),
            *body,
            cls=f"section section--{width}",
            data_section=section.value,
        )

    def summary(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        return [h("p", resume.professional_summary, cls="summary quote")]

    def experience(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        cards = [
            h(
                "div",
                h("span", cls="timeline-dot"),
                h(
                    "div",
                    h(
                        "div",
                        h(
                            "div",
                            h("h4", exp.position, cls="position"),
                            h("p", exp.company, cls="company accent"),
                        ),
                        h(
                            "span",
                            self.dates(exp.start_date, exp.end_date, exp.current),
                            cls="date-range badge",
                        ),
                        cls="row",
                    ),
                    self.bullets(exp),
                    cls="card",
                ),
                cls="job timeline-item",
            )
            for exp in resume.work_experience
        ]
        return [h("div", *cards, cls="timeline")]

    def education(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        return [
            h(
                "div",
                h("h4", degree_line(edu), cls="degree"),
                h("p", edu.institution, cls="institution muted"),
                h("p", self.graduation(edu), cls="date faint"),
                h("p", f"GPA: {edu.gpa}", cls="gpa faint") if edu.gpa else None,
                cls="school ruled",
            )
            for edu in resume.education
        ]

    def skills(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        return [
            h("div", h("span", cls="dot"), skill, cls="skill-row")
            for skill in self.skill_items(resume)
        ]
