"""The render model: user data merged with AI content."""

from __future__ import annotations

from pydantic import ConfigDict

from resume_studio.models.base import CamelModel
from resume_studio.models.resume import EducationEntry, PersonalInfo


class MergedWorkExperience(CamelModel):
    model_config = ConfigDict(frozen=True)

    id: str
    company: str
    position: str
    start_date: str
    end_date: str
    current: bool
    bullet_points: tuple[str, ...] = ()


class MergedResume(CamelModel):
    """Derived on every render; never stored or mutated."""

    model_config = ConfigDict(frozen=True)

    personal_info: PersonalInfo
    target_job_title: str
    professional_summary: str
    work_experience: tuple[MergedWorkExperience, ...] = ()
    education: tuple[EducationEntry, ...] = ()
    skills: tuple[str, ...] = ()
