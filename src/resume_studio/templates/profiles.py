"""Per-template defaults: fonts, spacing, sections and page margins.

Every default a layout relies on lives here so the customization resolver,
the section orderer and the exporter all read one table.
"""

from __future__ import annotations

from dataclasses import dataclass

from resume_studio.models.customization import (
    DEFAULT_SECTION_ORDER,
    ResolvedFontSize,
    ResolvedMargins,
    Section,
)
from resume_studio.models.template import MarginFamily, TemplateId

GLOBAL_ACCENT_COLOR = "#3B82F6"
GLOBAL_FONT_FAMILY = "Inter"
GLOBAL_FONT_SIZE = ResolvedFontSize(header=24, section_title=16, body=14)
GLOBAL_CONTENT_PADDING = 1.0

MARGIN_PRESETS: dict[MarginFamily, ResolvedMargins] = {
    MarginFamily.EDGE_TO_EDGE: ResolvedMargins(top="0in", right="0in", bottom="0in", left="0in"),
    MarginFamily.TIGHT: ResolvedMargins(top="0.2in", right="0.3in", bottom="0.2in", left="0.3in"),
    MarginFamily.STANDARD: ResolvedMargins(top="0.5in", right="0.5in", bottom="0.5in", left="0.5in"),
}
GLOBAL_MARGINS = MARGIN_PRESETS[MarginFamily.STANDARD]

_ALL_SECTIONS = frozenset(Section)
_MAIN_COLUMN = frozenset({Section.SUMMARY, Section.EXPERIENCE})
_FIXED_SIDEBAR = (Section.SKILLS, Section.EDUCATION)


@dataclass(frozen=True)
class TemplateProfile:
    """Static description of one layout.

    ``None`` in a default slot means "use the global default".
    ``allowed_sections`` is what the reorderable column accepts;
    ``sidebar_sections`` are always rendered in a fixed column.
    """

    template_id: TemplateId
    name: str
    description: str
    font_family: str | None = None
    font_size: ResolvedFontSize | None = None
    content_padding: float | None = None
    section_order: tuple[Section, ...] | None = None
    allowed_sections: frozenset[Section] = _ALL_SECTIONS
    sidebar_sections: tuple[Section, ...] = ()
    bullet_limit: int | None = None
    long_month_names: bool = False
    margin_family: MarginFamily = MarginFamily.STANDARD

    @property
    def margins(self) -> ResolvedMargins:
        return MARGIN_PRESETS[self.margin_family]


PROFILES: dict[TemplateId, TemplateProfile] = {
    TemplateId.MODERN: TemplateProfile(
        template_id=TemplateId.MODERN,
        name="Modern",
        description="Two columns with a tinted contact and skills sidebar.",
        font_family="Inter",
        margin_family=MarginFamily.EDGE_TO_EDGE,
    ),
    TemplateId.MINIMALIST: TemplateProfile(
        template_id=TemplateId.MINIMALIST,
        name="Minimalist",
        description="Centred single column with generous whitespace.",
        font_family="Inter",
    ),
    TemplateId.CLASSIC: TemplateProfile(
        template_id=TemplateId.CLASSIC,
        name="Classic",
        description="Traditional serif layout with centred headings.",
        font_family="Georgia",
    ),
    TemplateId.CREATIVE: TemplateProfile(
        template_id=TemplateId.CREATIVE,
        name="Creative",
        description="Full-bleed accent header and a timeline of experience.",
        font_family="Montserrat",
        margin_family=MarginFamily.EDGE_TO_EDGE,
    ),
    TemplateId.EXECUTIVE: TemplateProfile(
        template_id=TemplateId.EXECUTIVE,
        name="Executive",
        description="Formal serif layout with ruled section headings.",
        font_family="Georgia",
    ),
    TemplateId.TECHNICAL: TemplateProfile(
        template_id=TemplateId.TECHNICAL,
        name="Technical",
        description="Skills-first sidebar next to summary and experience.",
        font_family="Inter",
        font_size=ResolvedFontSize(header=24, section_title=14, body=13),
        allowed_sections=_MAIN_COLUMN,
        sidebar_sections=_FIXED_SIDEBAR,
        bullet_limit=3,
    ),
    TemplateId.ACADEMIC: TemplateProfile(
        template_id=TemplateId.ACADEMIC,
        name="Academic",
        description="Education-first curriculum vitae in a book face.",
        font_family="Times New Roman",
        font_size=ResolvedFontSize(header=24, section_title=18, body=12),
        content_padding=2.0,
        section_order=(
            Section.SUMMARY,
            Section.EDUCATION,
            Section.EXPERIENCE,
            Section.SKILLS,
        ),
        long_month_names=True,
    ),
    TemplateId.COMPACT: TemplateProfile(
        template_id=TemplateId.COMPACT,
        name="Compact",
        description="Dense one-page layout with a narrow skills column.",
        font_family="Arial",
        font_size=ResolvedFontSize(header=20, section_title=12, body=11),
        content_padding=0.5,
        allowed_sections=_MAIN_COLUMN,
        sidebar_sections=_FIXED_SIDEBAR,
        bullet_limit=3,
        margin_family=MarginFamily.TIGHT,
    ),
}


def get_profile(template_id: TemplateId | str) -> TemplateProfile:
    """Return the profile for *template_id*.

    Raises:
        ValueError: If *template_id* is not one of the eight templates.
    """
    try:
        return PROFILES[TemplateId(template_id)]
    except ValueError:
        available = ", ".join(t.value for t in TemplateId)
        msg = f"Unknown template {template_id!r}. Available: {available}"
        raise ValueError(msg) from None


__all__ = [
    "DEFAULT_SECTION_ORDER",
    "GLOBAL_ACCENT_COLOR",
    "GLOBAL_CONTENT_PADDING",
    "GLOBAL_FONT_FAMILY",
    "GLOBAL_FONT_SIZE",
    "GLOBAL_MARGINS",
    "MARGIN_PRESETS",
    "PROFILES",
    "TemplateProfile",
    "get_profile",
]
