"""Resolve a sparse customization profile against template defaults."""

from __future__ import annotations

from resume_studio.models.customization import (
    DEFAULT_SECTION_ORDER,
    Customization,
    PageMargins,
    ResolvedCustomization,
    ResolvedFontSize,
    ResolvedMargins,
    Section,
)
from resume_studio.models.template import TemplateId
from resume_studio.templates.profiles import (
    GLOBAL_ACCENT_COLOR,
    GLOBAL_CONTENT_PADDING,
    GLOBAL_FONT_FAMILY,
    GLOBAL_FONT_SIZE,
    GLOBAL_MARGINS,
    TemplateProfile,
    get_profile,
)


def resolve(
    partial: Customization | ResolvedCustomization | None,
    template_id: TemplateId | str,
) -> ResolvedCustomization:
    """Fill every customization field: user value, then template, then global.

    Idempotent: passing the result back in returns an equal value.
    """
    if partial is None:
        partial = Customization()
    elif isinstance(partial, ResolvedCustomization):
        partial = partial.to_customization()

    profile = get_profile(template_id)

    return ResolvedCustomization(
        accent_color=partial.accent_color or GLOBAL_ACCENT_COLOR,
        font_family=partial.font_family or profile.font_family or GLOBAL_FONT_FAMILY,
        font_size=_resolve_font_size(partial, profile),
        content_padding=_first_set(
            partial.content_padding, profile.content_padding, GLOBAL_CONTENT_PADDING
        ),
        section_order=_resolve_section_order(partial.section_order, profile),
        margins=resolve_margins(partial.margins, profile),
    )


def resolve_margins(
    override: PageMargins | None,
    profile: TemplateProfile,
) -> ResolvedMargins:
    """Resolve page margins as one unit.

    A user override is never mixed with the template's own sides: sides the
    override leaves out come from the global fallback.
    """
    if override is None:
        return profile.margins
    return ResolvedMargins(
        top=override.top or GLOBAL_MARGINS.top,
        right=override.right or GLOBAL_MARGINS.right,
        bottom=override.bottom or GLOBAL_MARGINS.bottom,
        left=override.left or GLOBAL_MARGINS.left,
    )


def _resolve_font_size(partial: Customization, profile: TemplateProfile) -> ResolvedFontSize:
    template_size = profile.font_size or GLOBAL_FONT_SIZE
    requested = partial.font_size
    return ResolvedFontSize(
        header=requested.header or template_size.header,
        section_title=requested.section_title or template_size.section_title,
        body=requested.body or template_size.body,
    )


def _resolve_section_order(
    requested: list[Section] | None,
    profile: TemplateProfile,
) -> tuple[Section, ...]:
    if requested:
        # dict.fromkeys drops repeats, keeping the first position
        return tuple(dict.fromkeys(requested))
    return profile.section_order or DEFAULT_SECTION_ORDER


def _first_set(*values: float | None) -> float:
    for value in values:
        if value is not None:
            return float(value)
    raise ValueError("no default supplied")
