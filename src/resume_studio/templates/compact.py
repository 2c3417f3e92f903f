"""Compact layout.

Dense single page: a tight header with contact details on the right, a
one-third column with skills and education pinned in place, and a
two-thirds column with summary and experience. At most three bullets per
job are shown.
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

__all__ = ["CompactTemplate"]


class CompactTemplate(LayoutTemplate):
    template_id = TemplateId.COMPACT
    section_titles = {
        Section.SUMMARY: "Summary",
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
                h(
                    "div",
                    *self.render_sections(sections.sidebar, resume, customization),
                    cls="compact-side",
                ),
                h(
                    "div",
                    *self.render_sections(sections.primary, resume, customization),
                    cls="compact-main",
                ),
                cls="compact-columns",
            ),
        ]

    def header(self, resume: MergedResume, customization: ResolvedCustomization) -> Node:
        info = resume.personal_info
        direct = [v for v in (info.email, info.phone, info.location) if v.strip()]
        links = [v for v in (info.linkedin_url, info.website_url) if v.strip()]
        return h(
            "header",
            h(
                "div",
                h(
                    "div",
                    h("h1", self.name_text(resume), cls="name"),
                    h("h2", self.title_text(resume), cls="target-title accent"),
                ),
                h("div", *(h("div", v, cls="contact-item") for v in direct), cls="contact align-right"),
                cls="row",
            ),
            h("div", *(h("span", v, cls="contact-item") for v in links), cls="contact links")
            if links
            else None,
            h("div", cls="accent-bar"),
            cls="resume-header compact-header",
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
                        h("p", exp.company, cls="company"),
                    ),
                    h("p", self.dates(exp.start_date, exp.end_date, exp.current), cls="date-range muted"),
                    cls="row baseline",
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
                h("p", self.graduation(edu), cls="date faint"),
                cls="school",
            )
            for edu in resume.education
        ]

    def skills(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        return [h("div", *self.skill_items(resume, tag="div"), cls="skills-stack")]
