"""Abstract base class for the pluggable resume layouts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import ClassVar

from resume_studio.models.customization import (
    OrderedSections,
    ResolvedCustomization,
    Section,
)
from resume_studio.models.merged import MergedResume, MergedWorkExperience
from resume_studio.models.resume import EducationEntry, PersonalInfo
from resume_studio.models.template import TemplateId
from resume_studio.templates.profiles import TemplateProfile, get_profile
from resume_studio.templates.tree import Node, h

__all__ = [
    "BULLET",
    "LayoutTemplate",
    "NAME_PLACEHOLDER",
    "TITLE_PLACEHOLDER",
    "bullet_line",
    "contact_items",
    "date_range",
    "degree_line",
    "format_month",
    "has_content",
    "visible_skills",
]

NAME_PLACEHOLDER = "Your Name"
TITLE_PLACEHOLDER = "Your Target Job Title"
BULLET = "•"

_MONTH_ABBR = ["", "Jan", "Feb", "Mar", "Apr", "May", "Jun",
               "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]
_MONTH_NAMES = ["", "January", "February", "March", "April", "May", "June",
                "July", "August", "September", "October", "November", "December"]


# ---------------------------------------------------------------------------
# Formatting helpers shared by every layout
# ---------------------------------------------------------------------------


def format_month(value: str, *, long: bool = False) -> str:
    """Format ``YYYY-MM`` (or ``YYYY-MM-DD``) as ``Mon YYYY``/``Month YYYY``.

    Values that do not parse are shown as typed.
    """
    value = (value or "").strip()
    if not value:
        return ""
    parts = value.split("-")
    try:
        month = int(parts[1])
    except (IndexError, ValueError):
        return value
    if not parts[0].isdigit() or not 1 <= month <= 12:
        return value
    names = _MONTH_NAMES if long else _MONTH_ABBR
    return f"{names[month]} {parts[0]}"


def date_range(start: str, end: str, current: bool, *, long: bool = False) -> str:
    """Return ``Jan 2020 - Present``; ``current`` always wins over *end*."""
    start_str = format_month(start, long=long)
    end_str = "Present" if current else format_month(end, long=long)
    if start_str and end_str:
        return f"{start_str} - {end_str}"
    return start_str or end_str


def bullet_line(text: str) -> str:
    """Prefix *text* with a bullet glyph unless it already has one."""
    text = text.strip()
    if text.startswith(BULLET):
        return text
    return f"{BULLET} {text}"


def visible_skills(resume: MergedResume) -> list[str]:
    return [s.strip() for s in resume.skills if s.strip()]


def contact_items(info: PersonalInfo) -> list[str]:
    """Non-empty contact fields in display order."""
    fields = [info.email, info.phone, info.location, info.linkedin_url, info.website_url]
    return [f.strip() for f in fields if f and f.strip()]


def has_content(section: Section, resume: MergedResume) -> bool:
    """Whether *section* has anything to show; empty sections are omitted."""
    if section is Section.SUMMARY:
        return bool(resume.professional_summary.strip())
    if section is Section.EXPERIENCE:
        return bool(resume.work_experience)
    if section is Section.EDUCATION:
        return bool(resume.education)
    if section is Section.SKILLS:
        return bool(visible_skills(resume))
    return False


def degree_line(edu: EducationEntry) -> str:
    if edu.degree and edu.field_of_study:
        return f"{edu.degree} in {edu.field_of_study}"
    return edu.degree or edu.field_of_study


# ---------------------------------------------------------------------------
# Layout base class
# ---------------------------------------------------------------------------


class LayoutTemplate(ABC):
    """Interface every layout implements.

    Subclasses supply :meth:`layout` plus one renderer per section. The
    base class takes care of the root container, section omission and the
    shared pieces (bullets, dates, skills) so each layout only decides
    *where* things go and how they look.
    """

    template_id: ClassVar[TemplateId]
    section_titles: ClassVar[dict[Section, str]] = {
        Section.SUMMARY: "Professional Summary",
        Section.EXPERIENCE: "Professional Experience",
        Section.EDUCATION: "Education",
        Section.SKILLS: "Skills",
    }

    @property
    def profile(self) -> TemplateProfile:
        return get_profile(self.template_id)

    @property
    def name(self) -> str:
        return self.profile.name

    # ------------------------------------------------------------------
    # public API
    # ------------------------------------------------------------------

    def project(
        self,
        resume: MergedResume,
        customization: ResolvedCustomization,
        sections: OrderedSections,
    ) -> Node:
        """Project the render model into this layout's tree. Pure."""
        return h(
            "div",
            *self.layout(resume, customization, sections),
            cls=f"resume resume--{self.template_id.value}",
            style=self.root_style(customization),
            data_template=self.template_id.value,
        )

    @abstractmethod
    def layout(
        self,
        resume: MergedResume,
        customization: ResolvedCustomization,
        sections: OrderedSections,
    ) -> list[Node]:
        """Return the top-level blocks of the page."""

    @abstractmethod
    def header(self, resume: MergedResume, customization: ResolvedCustomization) -> Node:
        """Name, target title and contact details; always rendered."""

    @abstractmethod
    def summary(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]: ...

    @abstractmethod
    def experience(
        self, resume: MergedResume, customization: ResolvedCustomization
    ) -> list[Node]: ...

    @abstractmethod
    def education(
        self, resume: MergedResume, customization: ResolvedCustomization
    ) -> list[Node]: ...

    @abstractmethod
    def skills(self, resume: MergedResume, customization: ResolvedCustomization) -> list[Node]: ...

    # ------------------------------------------------------------------
    # shared helpers
    # ------------------------------------------------------------------

    def root_style(self, customization: ResolvedCustomization) -> dict[str, str]:
        size = customization.font_size
        return {
            "--accent": customization.accent_color,
            "--font-family": f"'{customization.font_family}'",
            "--fs-header": f"{size.header}px",
            "--fs-title": f"{size.section_title}px",
            "--fs-body": f"{size.body}px",
            "--pad": f"{customization.content_padding:g}rem",
        }

    def render_sections(
        self,
        order: tuple[Section, ...],
        resume: MergedResume,
        customization: ResolvedCustomization,
    ) -> list[Node]:
        """Render *order* in sequence, skipping sections with no content."""
        renderers: dict[Section, Callable[..., list[Node]]] = {
            Section.SUMMARY: self.summary,
            Section.EXPERIENCE: self.experience,
            Section.EDUCATION: self.education,
            Section.SKILLS: self.skills,
        }
        return [
            self.section_block(section, renderers[section](resume, customization), customization)
            for section in order
            if has_content(section, resume)
        ]

    def section_block(
        self,
        section: Section,
        body: list[Node],
        customization: ResolvedCustomization,
    ) -> Node:
        return h(
            "section",
            h("h3", self.section_titles[section], cls="section-title"),
            *body,
            cls="section",
            data_section=section.value,
        )

    def name_text(self, resume: MergedResume) -> str:
        return resume.personal_info.full_name.strip() or NAME_PLACEHOLDER

    def title_text(self, resume: MergedResume) -> str:
        return resume.target_job_title.strip() or TITLE_PLACEHOLDER

    def dates(self, start: str, end: str, current: bool = False) -> str:
        return date_range(start, end, current, long=self.profile.long_month_names)

    def graduation(self, edu: EducationEntry) -> str:
        return format_month(edu.graduation_date, long=self.profile.long_month_names)

    def bullets(self, exp: MergedWorkExperience) -> Node | None:
        """Detail lines for one job, capped at the layout's bullet limit."""
        points = list(exp.bullet_points)
        if self.profile.bullet_limit is not None:
            points = points[: self.profile.bullet_limit]
        if not points:
            return None
        return h("div", *(h("p", bullet_line(p), cls="bullet") for p in points), cls="bullets")

    def skill_items(self, resume: MergedResume, *, tag: str = "span", cls: str = "") -> list[Node]:
        return [h(tag, skill, cls=f"skill {cls}".strip()) for skill in visible_skills(resume)]
