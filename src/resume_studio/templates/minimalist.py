"""Minimalist layout: one centred column, thin rules, pill-shaped skills."""

from __future__ import annotations

from resume_studio.models.customization import OrderedSections, ResolvedCustomization
from resume_studio.models.merged import MergedResume
from resume_studio.models.template import TemplateId
from resume_studio.templates.base import LayoutTemplate, degree_line
from resume_studio.templates.tree import Node, h

__all__ = ["MinimalistTemplate"]


class MinimalistTemplate(LayoutTemplate):
    template_id = TemplateId.MINIMALIST

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
        info = resume.personal_info
        primary = [v for v in (info.email, info.phone, info.location) if v.strip()]
        links = [v for v in (info.linkedin_url, info.website_url) if v.strip()]
        return h(
            "header",
            h("h1", self.name_text(resume), cls="name"),
            h("h2", self.title_text(resume), cls="target-title accent"),
            h("div", " • ".join(primary), cls="contact muted") if primary else None,
            h("div", " • ".join(links), cls="contact links muted") if links else None,
            cls="resume-header minimalist-header",
        )

    def summary(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        return [h("p", resume.professional_summary, cls="summary")]

    def experience(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        jobs = []
        for exp in resume.work_experience:
            jobs.append(
                h(
                    "div",
                    h(
                        "div",
                        h(
                            "div",
                            h("h4", exp.position, cls="position"),
                            h("p", exp.company, cls="company muted"),
                        ),
                        h(
                            "p",
                            self.dates(exp.start_date, exp.end_date, exp.current),
                            cls="date-range muted",
                        ),
                        cls="row baseline",
                    ),
                    self.bullets(exp),
                    cls="job",
                )
            )
        return jobs

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
                cls="school row baseline",
            )
            for edu in resume.education
        ]

    def skills(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        return [h("div", *self.skill_items(resume, cls="pill"), cls="pills")]
