"""Technical layout.

A grey left sidebar holds contact details, skills and education in a fixed
order; the main column holds the header, summary and experience. Each job
shows at most three bullets.
"""

from __future__ import annotations

from resume_studio.models.customization import (
    OrderedSections,
    ResolvedCustomization,
    Section,
)
from resume_studio.models.merged import MergedResume
from resume_studio.models.template import TemplateId
from resume_studio.templates.base import LayoutTemplate
from resume_studio.templates.tree import Node, h

__all__ = ["TechnicalTemplate"]

_CONTACT_GLYPHS = (("email", "@"), ("phone", "#"), ("location", ">"),
                   ("linkedin_url", "in"), ("website_url", "www"))


class TechnicalTemplate(LayoutTemplate):
    template_id = TemplateId.TECHNICAL
    section_titles = {
        Section.SUMMARY: "Summary",
        Section.EXPERIENCE: "Experience",
        Section.EDUCATION: "Education",
        Section.SKILLS: "Technical Skills",
    }

    def layout(
        self,
        resume: MergedResume,
        customization: ResolvedCustomization,
        sections: OrderedSections,
    ) -> list[Node]:
        sidebar = h(
            "aside",
            self._contact(resume),
            *self.render_sections(sections.sidebar, resume, customization),
            cls="technical-side",
        )
        main = h(
            "div",
            self.header(resume, customization),
            *self.render_sections(sections.primary, resume, customization),
            cls="technical-main",
        )
        return [h("div", sidebar, main, cls="technical-columns")]

    def header(self, resume: MergedResume, customization: ResolvedCustomization) -> Node:
        return h(
            "header",
            h("h1", self.name_text(resume), cls="name"),
            h("h2", self.title_text(resume), cls="target-title accent"),
            h("div", cls="accent-bar"),
            cls="resume-header technical-header",
        )

    def _contact(self, resume: MergedResume) -> Node | None:
        info = resume.personal_info
        rows = []
        for attr, glyph in _CONTACT_GLYPHS:
            value = getattr(info, attr).strip()
            if value:
                rows.append(h("div", h("span", glyph, cls="glyph muted"), value, cls="contact-item"))
        if not rows:
            return None
        return h("div", h("h3", "Contact", cls="section-title"), *rows, cls="contact")

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
                        h("p", exp.company, cls="company accent"),
                    ),
                    h("p", self.dates(exp.start_date, exp.end_date, exp.current), cls="date-range mono muted"),
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
                h("h4", edu.degree, cls="degree"),
                h("p", edu.field_of_study, cls="field") if edu.field_of_study else None,
                h("p", edu.institution, cls="institution muted"),
                h("p", self.graduation(edu), cls="date muted"),
                h("p", f"GPA: {edu.gpa}", cls="gpa muted") if edu.gpa else None,
                cls="school",
            )
            for edu in resume.education
        ]

    def skills(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        return [h("div", *self.skill_items(resume, cls="tag mono"), cls="tags")]
