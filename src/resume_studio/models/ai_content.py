"""Pydantic models for AI-generated resume prose."""

from __future__ import annotations

from pydantic import Field

from resume_studio.models.base import CamelModel


class AIWorkExperience(CamelModel):
    bullet_points: list[str] = Field(default_factory=list)
    # Set when the generator knows which entry it wrote for; merge then
    # matches by id instead of list position.
    entry_id: str | None = None


class AIContent(CamelModel):
    professional_summary: str = ""
    work_experience: list[AIWorkExperience] = Field(default_factory=list)
