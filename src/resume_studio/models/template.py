"""Identity of the eight layout templates."""

from __future__ import annotations

from enum import Enum


class TemplateId(str, Enum):
    MODERN = "modern"
    MINIMALIST = "minimalist"
    CLASSIC = "classic"
    CREATIVE = "creative"
    EXECUTIVE = "executive"
    TECHNICAL = "technical"
    ACADEMIC = "academic"
    COMPACT = "compact"


class MarginFamily(str, Enum):
    """Page-margin profile a template prints with."""

    EDGE_TO_EDGE = "edge_to_edge"
    TIGHT = "tight"
    STANDARD = "standard"
