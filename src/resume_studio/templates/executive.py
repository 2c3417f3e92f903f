"""Executive layout: formal serif page with accent-ruled section headings."""

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

__all__ = ["ExecutiveTemplate"]


class ExecutiveTemplate(LayoutTemplate):
    template_id = TemplateId.EXECUTIVE
    section_titles = {
        Section.SUMMARY: "Executive Summary",
        Section.EXPERIENCE: "Professional Experience",
        Section.EDUCATION: "Education",
        Section.SKILLS: "Core Competencies",
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
                cls="executive-sections",
            ),
        ]

    def header(self, resume: MergedResume, customization: ResolvedCustomization) -> Node:
        info = resume.personal_info
        primary = [v for v in (info.email, info.phone, info.location) if v.strip()]
        links = [v for v in (info.linkedin_url, info.website_url) if v.strip()]
        size = customization.font_size
        return h(
            "header",
            h("h1", self.name_text(resume), cls="name"),
            h(
                "h2",
                self.title_text(resume),
                cls="target-title accent",
                # subtitle scales with the header size
                style={"font-size": f"{size.header * 0.75:g}px"},
            ),
            h("div", *(h("span", v, cls="contact-item") for v in primary), cls="contact") if primary else None,
            h("div", *(h("span", v, cls="contact-item") for v in links), cls="contact links")
            if links
            else None,
            cls="resume-header executive-header",
        )

    def section_block(
        self,
        section: Section,
        body: list[Node],
        customization: ResolvedCustomization,
    ) -> Node:
        return h(
            "section",
            h("h3", self.section_titles[section], cls="section-title small-caps"),
            h("div", cls="title-rule"),
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
                    h("span", self.dates(exp.start_date, exp.end_date, exp.current), cls="date-range small"),
                    cls="row baseline",
                ),
                h("p", exp.company, cls="company accent"),
                self.bullets(exp),
                cls="job",
            )
            for exp in resume.work_experience
        ]

    def education(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        entries = []
        for edu in resume.education:
            detail = edu.institution
            if edu.gpa:
                detail = f"{detail} | GPA: {edu.gpa}" if detail else f"GPA: {edu.gpa}"
            entries.append(
                h(
                    "div",
                    h(
                        "div",
                        h("h4", edu.degree, cls="degree"),
                        h("span", self.graduation(edu), cls="date small"),
                        cls="row baseline",
                    ),
                    h("p", edu.field_of_study, cls="field muted") if edu.field_of_study else None,
                    h("p", detail, cls="institution small muted"),
                    cls="school",
                )
            )
        return entries

    def skills(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]:
        return [h("div", *self.skill_items(resume, tag="div", cls="competency"), cls="grid-3")]
