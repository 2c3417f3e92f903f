"""Merge user-entered resume data with optional AI-generated prose."""

from __future__ import annotations

import logging

from resume_studio.models.ai_content import AIContent, AIWorkExperience
from resume_studio.models.merged import MergedResume, MergedWorkExperience
from resume_studio.models.resume import ResumeData, WorkExperienceEntry

logger = logging.getLogger(__name__)


def split_description(description: str) -> list[str]:
    """Split a free-text description into lines, dropping blank ones."""
    return [line for line in description.split("\n") if line.strip()]


def merge(resume_data: ResumeData, ai_content: AIContent | None = None) -> MergedResume:
    """Build the render model from user data and (optionally) AI content.

    Each field is decided on its own: a non-empty AI value wins, anything
    else falls back to what the user typed. Entries are never dropped or
    reordered. This never raises on partial or missing AI content.
    """
    summary = resume_data.professional_summary
    if ai_content is not None and ai_content.professional_summary.strip():
        summary = ai_content.professional_summary

    aligned = _align_ai_entries(resume_data.work_experience, ai_content)
    work = tuple(
        _merge_entry(entry, ai_entry)
        for entry, ai_entry in zip(resume_data.work_experience, aligned)
    )

    return MergedResume(
        personal_info=resume_data.personal_info,
        target_job_title=resume_data.target_job_title,
        professional_summary=summary,
        work_experience=work,
        education=tuple(resume_data.education),
        skills=tuple(resume_data.skills),
    )


def _align_ai_entries(
    entries: list[WorkExperienceEntry],
    ai_content: AIContent | None,
) -> list[AIWorkExperience | None]:
    """Pair every work entry with the AI entry written for it, if any.

    Tagged AI entries are matched by ``entry_id`` only when every tag
    names a current work entry. Otherwise, and for untagged AI entries,
    pairing is by list position, so a shorter AI list leaves the trailing
    entries unmatched.
    """
    if ai_content is None:
        return [None] * len(entries)

    ai_entries = ai_content.work_experience
    by_id = {a.entry_id: a for a in ai_entries if a.entry_id}
    known_ids = {entry.id for entry in entries}
    if by_id and not by_id.keys() <= known_ids:
        logger.debug("AI entry ids do not match the work entries; pairing by position")
        by_id = {}

    if len(ai_entries) != len(entries):
        logger.debug(
            "AI content has %d experience entries for %d work entries",
            len(ai_entries),
            len(entries),
        )

    aligned: list[AIWorkExperience | None] = []
    for i, entry in enumerate(entries):
        if entry.id in by_id:
            aligned.append(by_id[entry.id])
            continue
        positional = ai_entries[i] if i < len(ai_entries) else None
        # an entry tagged for another job never falls through by position
        if positional is not None and positional.entry_id and by_id:
            positional = None
        aligned.append(positional)
    return aligned


def _merge_entry(
    entry: WorkExperienceEntry,
    ai_entry: AIWorkExperience | None,
) -> MergedWorkExperience:
    bullets: list[str] = []
    if ai_entry is not None:
        # blank AI bullets are dropped; an all-blank list counts as empty
        bullets = [b for b in ai_entry.bullet_points if b.strip()]
    if not bullets:
        bullets = split_description(entry.description)

    return MergedWorkExperience(
        id=entry.id,
        company=entry.company,
        position=entry.position,
        start_date=entry.start_date,
        end_date=entry.end_date,
        current=entry.current,
        bullet_points=tuple(bullets),
    )
