"""Layout registry: one projection per template id."""

from __future__ import annotations

from resume_studio.models.template import TemplateId
from resume_studio.templates.academic import AcademicTemplate
from resume_studio.templates.base import LayoutTemplate
from resume_studio.templates.classic import ClassicTemplate
from resume_studio.templates.compact import CompactTemplate
from resume_studio.templates.creative import CreativeTemplate
from resume_studio.templates.executive import ExecutiveTemplate
from resume_studio.templates.minimalist import MinimalistTemplate
from resume_studio.templates.modern import ModernTemplate
from resume_studio.templates.technical import TechnicalTemplate

__all__ = [
    "LayoutTemplate",
    "get_template",
    "list_templates",
]

_REGISTRY: dict[TemplateId, LayoutTemplate] = {
    TemplateId.MODERN: ModernTemplate(),
    TemplateId.MINIMALIST: MinimalistTemplate(),
    TemplateId.CLASSIC: ClassicTemplate(),
    TemplateId.CREATIVE: CreativeTemplate(),
    TemplateId.EXECUTIVE: ExecutiveTemplate(),
    TemplateId.TECHNICAL: TechnicalTemplate(),
    TemplateId.ACADEMIC: AcademicTemplate(),
    TemplateId.COMPACT: CompactTemplate(),
}


def get_template(template_id: TemplateId | str) -> LayoutTemplate:
    """Return the layout registered under *template_id*.

    Raises:
        ValueError: If no layout with that id exists.
    """
    try:
        return _REGISTRY[TemplateId(template_id)]
    except ValueError:
        available = ", ".join(t.value for t in _REGISTRY)
        msg = f"Unknown template {template_id!r}. Available: {available}"
        raise ValueError(msg) from None


def list_templates() -> list[LayoutTemplate]:
    """Return every registered layout in display order."""
    return list(_REGISTRY.values())
