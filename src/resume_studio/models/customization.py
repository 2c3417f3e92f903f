"""Customization profile models: sparse user input and its resolved form."""

from __future__ import annotations

import re
from enum import Enum
from typing import NamedTuple

from pydantic import ConfigDict, Field, field_validator

from resume_studio.models.base import CamelModel

_HEX_COLOR = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")
_NAMED_COLOR = re.compile(r"^[a-zA-Z]+$")
_FONT_FAMILY = re.compile(r"^[\w \-]+$")
_LENGTH = re.compile(r"^\d+(?:\.\d+)?(?:in|cm|mm|pt|px)$|^0$")


class Section(str, Enum):
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"


DEFAULT_SECTION_ORDER: tuple[Section, ...] = (
    Section.SUMMARY,
    Section.EXPERIENCE,
    Section.EDUCATION,
    Section.SKILLS,
)


def _check_length(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    if not _LENGTH.match(value):
        raise ValueError(f"not a physical length: {value!r}")
    return value


class FontSize(CamelModel):
    header: int | None = Field(None, ge=6, le=96)
    section_title: int | None = Field(None, ge=6, le=96)
    body: int | None = Field(None, ge=6, le=96)


class PageMargins(CamelModel):
    """Margin override; any side left out falls back to the global default."""

    top: str | None = None
    right: str | None = None
    bottom: str | None = None
    left: str | None = None

    @field_validator("top", "right", "bottom", "left")
    @classmethod
    def check_sides(cls, value: str | None) -> str | None:
        return _check_length(value)


class Customization(CamelModel):
    """Style/layout profile as sent by the UI; every field is optional."""

    accent_color: str | None = None
    font_family: str | None = None
    font_size: FontSize = Field(default_factory=FontSize)
    content_padding: float | None = Field(None, ge=0, le=10)
    section_order: list[Section] | None = None
    margins: PageMargins | None = None

    @field_validator("accent_color")
    @classmethod
    def check_color(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip()
        if not (_HEX_COLOR.match(value) or _NAMED_COLOR.match(value)):
            raise ValueError(f"unsupported color: {value!r}")
        return value

    @field_validator("font_family")
    @classmethod
    def check_font(cls, value: str | None) -> str | None:
        if value is None:
            return None
        value = value.strip().strip("'\"")
        if not value:
            return None
        if not _FONT_FAMILY.match(value):
            raise ValueError(f"unsupported font family: {value!r}")
        return value


class ResolvedFontSize(CamelModel):
    model_config = ConfigDict(frozen=True)

    header: int
    section_title: int
    body: int


class ResolvedMargins(CamelModel):
    model_config = ConfigDict(frozen=True)

    top: str
    right: str
    bottom: str
    left: str


class ResolvedCustomization(CamelModel):
    """A customization with every field filled in."""

    model_config = ConfigDict(frozen=True)

    accent_color: str
    font_family: str
    font_size: ResolvedFontSize
    content_padding: float
    section_order: tuple[Section, ...]
    margins: ResolvedMargins

    def to_customization(self) -> Customization:
        return Customization.model_validate(self.model_dump())


class OrderedSections(NamedTuple):
    """Sections to render: the reorderable main column and a fixed sidebar."""

    primary: tuple[Section, ...]
    sidebar: tuple[Section, ...] = ()
