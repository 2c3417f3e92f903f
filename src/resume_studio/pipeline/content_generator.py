"""AI content generation: professional summary and bullets for each job."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from resume_studio.clients.llm_client import DEFAULT_MODEL, LLMClient
from resume_studio.errors import GenerationError, InputPolicyError
from resume_studio.models.ai_content import AIContent
from resume_studio.models.resume import ResumeData

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
You are a professional resume writer with expertise in creating ATS-friendly, \
compelling resume content. Always respond with valid JSON."""

WRITING_RULES = """\
CRITICAL RESUME WRITING RULES:

1. BULLET POINT LENGTH:
   - Each bullet point must be 1-2 lines only (12-20 words maximum)
   - Short bullets are easier to skim and more impactful

2. BULLET POINT STRUCTURE:
   - Follow the formula: Action + Impact + Metric (when available)
   - Start with strong action verbs (Led, Developed, Increased, Streamlined, etc.)
   - Focus on achievements and results, not just job duties

3. QUANTIFIABLE RESULTS:
   - ONLY use specific numbers/percentages if provided in the user's information
   - DO NOT invent or fabricate metrics that weren't mentioned
   - If no metrics are provided, focus on qualitative impact and achievements

4. CONTENT QUALITY:
   - Make each bullet point unique - avoid repetition
   - Use keywords relevant to the target job title
   - Generate 2-4 bullet points per work experience based on role importance"""

RESPONSE_FORMAT = """\
Respond with JSON only, using exactly this structure. Return one workExperience \
item per work experience entry above, in the same order:
{
  "professionalSummary": "2-3 sentences",
  "workExperience": [
    {"bulletPoints": ["...", "..."]}
  ]
}"""

COVER_LETTER_SYSTEM_PROMPT = (
    "You are a professional career counselor specializing in writing compelling cover letters."
)


def check_generation_input(resume_data: ResumeData) -> None:
    """Reject generation requests the prompt cannot serve.

    Raises:
        InputPolicyError: If the target job title is blank or there is no
            work experience to write bullets for.
    """
    if not resume_data.target_job_title.strip():
        raise InputPolicyError("A target job title is required to generate content")
    if not resume_data.work_experience:
        raise InputPolicyError("At least one work experience entry is required to generate content")


class ContentGenerator:
    def __init__(
        self,
        llm: LLMClient,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.7,
        max_tokens: int = 1500,
    ):
        self.llm = llm
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens

    async def generate(self, resume_data: ResumeData) -> AIContent:
        """Generate a summary and bullets for *resume_data*.

        All or nothing: on any provider, parse or shape failure a single
        :class:`GenerationError` is raised and no partial content escapes.

        Raises:
            InputPolicyError: From :func:`check_generation_input`.
            GenerationError: On any failure after the input check.
        """
        check_generation_input(resume_data)
        prompt = self._build_prompt(resume_data)

        try:
            data = await self.llm.generate_json(
                prompt=prompt,
                system=SYSTEM_PROMPT,
                model=self.model,
                temperature=self.temperature,
                max_tokens=self.max_tokens,
            )
            content = AIContent.model_validate(data)
        except ValidationError as exc:
            logger.warning("AI response had the wrong shape: %s", exc)
            raise GenerationError("AI response did not match the expected structure") from exc
        except Exception as exc:
            logger.error("AI content generation failed", exc_info=True)
            raise GenerationError(f"AI content generation failed: {exc}") from exc

        return self._attach_entry_ids(content, resume_data)

    async def cover_letter(self, resume_data: ResumeData, job_description: str) -> str:
        """Write a three-paragraph cover letter for *job_description*.

        Raises:
            InputPolicyError: If the job description is blank.
            GenerationError: If the provider call fails or returns nothing.
        """
        if not job_description.strip():
            raise InputPolicyError("A job description is required to write a cover letter")

        recent = resume_data.work_experience[0] if resume_data.work_experience else None
        skills = ", ".join(s.strip() for s in resume_data.skills if s.strip())
        prompt = f"""Generate a professional cover letter based on:

Candidate Info:
- Name: {resume_data.personal_info.full_name}
- Target Role: {resume_data.target_job_title}
- Key Skills: {skills}
- Recent Experience: {f"{recent.position} at {recent.company}" if recent else "none listed"}

Job Description:
{job_description}

Create a compelling 3-paragraph cover letter that:
1. Opens with enthusiasm for the specific role
2. Highlights relevant experience and achievements
3. Closes with a call to action

Make it professional, personalized, and ATS-friendly."""

        try:
            response = await self.llm.generate(
                prompt=prompt,
                system=COVER_LETTER_SYSTEM_PROMPT,
                model=self.model,
                temperature=self.temperature,
                max_tokens=800,
            )
        except Exception as exc:
            logger.error("Cover letter generation failed", exc_info=True)
            raise GenerationError("Failed to generate cover letter") from exc

        text = response.text.strip()
        if not text:
            raise GenerationError("Failed to generate cover letter")
        return text

    def _build_prompt(self, resume_data: ResumeData) -> str:
        work_lines = []
        for i, exp in enumerate(resume_data.work_experience, 1):
            end = "Present" if exp.current else exp.end_date
            work_lines.append(
                f"{i}. {exp.position} at {exp.company} ({exp.start_date} - {end}): {exp.description}"
            )
        education_lines = [
            f"- {edu.degree} in {edu.field_of_study} from {edu.institution}"
            for edu in resume_data.education
        ]
        skills = ", ".join(s.strip() for s in resume_data.skills if s.strip())

        parts = [
            "Based on the following information, generate compelling resume content.",
            f"\nTarget Job Title: {resume_data.target_job_title}",
            "\nWork Experience:\n" + "\n".join(work_lines),
            f"\nSkills: {skills}",
            "\nEducation:\n" + "\n".join(education_lines),
        ]
        if resume_data.existing_resume_text.strip():
            parts.append(f"\nExisting Resume Content:\n{resume_data.existing_resume_text}")
        if resume_data.custom_instructions.strip():
            parts.append(
                f"\nAdditional Instructions & Information:\n{resume_data.custom_instructions}"
            )
        parts.append("\n" + WRITING_RULES)
        parts.append(
            "\nPlease generate:\n"
            "1. A professional summary (2-3 sentences) that highlights the candidate's "
            "value proposition for the target role\n"
            "2. For each work experience entry, 2-4 bullet points following the rules above"
        )
        parts.append("\n" + RESPONSE_FORMAT)
        return "\n".join(parts)

    def _attach_entry_ids(self, content: AIContent, resume_data: ResumeData) -> AIContent:
        """Tag each AI entry with the id of the work entry it was written for.

        Ids the caller never sent are minted fresh on every validation, so
        tagging with them would break the next merge; those entries stay
        untagged and pair by position.
        """
        entries = resume_data.work_experience
        if len(content.work_experience) != len(entries):
            logger.warning(
                "AI returned %d experience entries for %d work entries",
                len(content.work_experience),
                len(entries),
            )
        tagged = []
        for i, ai_entry in enumerate(content.work_experience):
            if i < len(entries) and ai_entry.entry_id is None and "id" in entries[i].model_fields_set:
                ai_entry = ai_entry.model_copy(update={"entry_id": entries[i].id})
            tagged.append(ai_entry)
        return content.model_copy(update={"work_experience": tagged})
