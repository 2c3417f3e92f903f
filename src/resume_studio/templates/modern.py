"""Modern layout.

Two columns: a wide main column with the header, summary, experience and
education, and a tinted sidebar with contact details and skills. Prints
edge to edge, so the sidebar tint reaches the paper edge.
"""

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

__all__ = ["ModernTemplate"]

# Sections that sit in the sidebar when requested; relative order is kept.
_SIDEBAR = frozenset({Section.SKILLS})


class ModernTemplate(LayoutTemplate):
    template_id = TemplateId.MODERN

    def layout(
        self,
        resume: MergedResume,
        customization: ResolvedCustomization,
        sections: OrderedSections,
    ) -> list[Node]:
        main_order = tuple(s for s in sections.primary if s not in _SIDEBAR)
        side_order = tuple(s for s in sections.primary if s in _SIDEBAR)
        main = h(
            "div",
            self.header(resume, customization),
            *self.render_sections(main_order, resume, customization),
            cls="modern-main",
        )
        side = h(
            "aside",
            self._contact(resume),
            *self.render_sections(side_order, resume, customization),
            cls="modern-side",
        )
        return [h("div", main, side, cls="modern-columns")]

    def header(self, resume: MergedResume, customization: ResolvedCustomization) -> Node:
        return h(
            "header",
            h("h1", self.name_text(resume), cls="name"),
            h("h2", self.title_text(resume), cls="target-title accent"),
            cls="resume-header modern-header",
        )

    def _contact(self, resume: MergedResume) -> Node | None:
        items = contact_items(resume.personal_info)
        if not items:
            return None
        return h(
            "div",
            h("h3", "Contact", cls="section-title"),
            *(h("p", item, cls="contact-item") for item in items),
            cls="contact modern-contact",
        )

    def summary(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        return [h("p", resume.professional_summary, cls="summary")]

    def experience(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        return [
            h(
                "div",
                h(
                    "div",
                    h(
                        "div",
                        h("h4", exp.position, cls="position"),
                        h("p", exp.company, cls="company muted"),
                    ),
                    h("p", self.dates(exp.start_date, exp.end_date, exp.current), cls="date-range muted"),
                    cls="row",
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
                    h("p", edu.institution, cls="institution muted"),
                ),
                h(
                    "div",
                    h("p", self.graduation(edu), cls="date"),
                    h("p", f"GPA: {edu.gpa}", cls="gpa") if edu.gpa else None,
                    cls="muted align-right",
                ),
                cls="school row",
            )
            for edu in resume.education
        ]

    def skills(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        return [
            h("div", h("span", cls="dot"), skill, cls="skill-row")
            for skill in self.skill_items(resume)
        ]
