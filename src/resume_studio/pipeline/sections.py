"""Decide which sections render, and where, for a given template."""

from __future__ import annotations

import logging

from resume_studio.models.customization import (
    DEFAULT_SECTION_ORDER,
    OrderedSections,
    ResolvedCustomization,
)
from resume_studio.models.template import TemplateId
from resume_studio.templates.profiles import get_profile

logger = logging.getLogger(__name__)


def order(
    customization: ResolvedCustomization,
    template_id: TemplateId | str,
) -> OrderedSections:
    """Intersect the requested order with what the template accepts.

    Templates with a fixed sidebar (compact, technical) always get their
    sidebar sections back unchanged, whatever the requested order says.
    """
    profile = get_profile(template_id)
    requested = customization.section_order or DEFAULT_SECTION_ORDER

    primary = tuple(s for s in requested if s in profile.allowed_sections)
    dropped = [s.value for s in requested if s not in profile.allowed_sections]
    if dropped:
        logger.debug(
            "%s places %s outside the reorderable column",
            profile.template_id.value,
            ", ".join(dropped),
        )
    return OrderedSections(primary=primary, sidebar=profile.sidebar_sections)
