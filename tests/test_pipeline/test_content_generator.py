"""Tests for AI content generation."""

from unittest.mock import AsyncMock

import pytest

from resume_studio.clients.llm_client import LLMResponse
from resume_studio.errors import GenerationError, InputPolicyError
from resume_studio.models.ai_content import AIContent
from resume_studio.models.resume import ResumeData
from resume_studio.pipeline.content_generator import (
    SYSTEM_PROMPT,
    ContentGenerator,
    check_generation_input,
)
from resume_studio.pipeline.merge import merge


class TestInputPolicy:
    def test_valid_input(self, resume_data):
        check_generation_input(resume_data)

    def test_blank_title(self, resume_data):
        data = resume_data.model_copy(update={"target_job_title": "  "})
        with pytest.raises(InputPolicyError, match="target job title"):
            check_generation_input(data)

    def test_no_work_experience(self, resume_data):
        data = resume_data.model_copy(update={"work_experience": []})
        with pytest.raises(InputPolicyError, match="work experience"):
            check_generation_input(data)

    async def test_generate_checks_before_calling_provider(self, mock_llm, empty_resume):
        generator = ContentGenerator(mock_llm)
        with pytest.raises(InputPolicyError):
            await generator.generate(empty_resume)
        mock_llm.generate_json.assert_not_called()


class TestGenerate:
    async def test_returns_ai_content(self, mock_llm, resume_data):
        content = await ContentGenerator(mock_llm).generate(resume_data)
        assert isinstance(content, AIContent)
        assert content.professional_summary.startswith("Engineer focused")
        assert content.work_experience[0].bullet_points == [
            "Led the design system rewrite",
            "Mentored four engineers",
        ]

    async def test_entries_tagged_with_work_ids(self, mock_llm, resume_data):
        content = await ContentGenerator(mock_llm).generate(resume_data)
        assert [e.entry_id for e in content.work_experience] == ["job-1", "job-2"]

    async def test_output_merges(self, mock_llm, resume_data):
        content = await ContentGenerator(mock_llm).generate(resume_data)
        merged = merge(resume_data, content)
        assert merged.work_experience[1].bullet_points == ("Built checkout flows",)

    async def test_prompt_contents(self, mock_llm, resume_data):
        data = resume_data.model_copy(
            update={"existing_resume_text": "OLD RESUME", "custom_instructions": "Mention Rust"}
        )
        generator = ContentGenerator(mock_llm, model="claude-test", temperature=0.2, max_tokens=900)
        await generator.generate(data)

        kwargs = mock_llm.generate_json.await_args.kwargs
        prompt = kwargs["prompt"]
        assert "Target Job Title: Senior Frontend Engineer" in prompt
        assert "Senior Engineer at Acme Corp (2021-03 - Present)" in prompt
        assert "JavaScript, TypeScript, React" in prompt
        assert "BSc in Computer Science from University of British Columbia" in prompt
        assert "OLD RESUME" in prompt
        assert "Mention Rust" in prompt
        assert "DO NOT invent or fabricate metrics" in prompt
        assert kwargs["system"] == SYSTEM_PROMPT
        assert kwargs["model"] == "claude-test"
        assert kwargs["temperature"] == 0.2
        assert kwargs["max_tokens"] == 900

    async def test_optional_sections_left_out_of_prompt(self, mock_llm, resume_data):
        await ContentGenerator(mock_llm).generate(resume_data)
        prompt = mock_llm.generate_json.await_args.kwargs["prompt"]
        assert "Existing Resume Content" not in prompt
        assert "Additional Instructions" not in prompt

    async def test_provider_failure(self, mock_llm, resume_data):
        mock_llm.generate_json = AsyncMock(side_effect=RuntimeError("overloaded"))
        with pytest.raises(GenerationError, match="overloaded"):
            await ContentGenerator(mock_llm).generate(resume_data)

    async def test_unparseable_reply(self, mock_llm, resume_data):
        mock_llm.generate_json = AsyncMock(side_effect=ValueError("Could not extract"))
        with pytest.raises(GenerationError):
            await ContentGenerator(mock_llm).generate(resume_data)

    async def test_wrong_shape(self, mock_llm, resume_data):
        mock_llm.generate_json = AsyncMock(
            return_value={"professionalSummary": ["not", "a", "string"], "workExperience": {}}
        )
        with pytest.raises(GenerationError, match="expected structure"):
            await ContentGenerator(mock_llm).generate(resume_data)

    async def test_short_reply_still_tagged(self, mock_llm, resume_data):
        mock_llm.generate_json = AsyncMock(
            return_value={"professionalSummary": "Hi", "workExperience": [{"bulletPoints": ["x"]}]}
        )
        content = await ContentGenerator(mock_llm).generate(resume_data)
        assert [e.entry_id for e in content.work_experience] == ["job-1"]

    async def test_minted_ids_are_not_tagged(self, mock_llm, resume_data):
        data = resume_data.model_dump(by_alias=True)
        for entry in data["workExperience"]:
            del entry["id"]
        content = await ContentGenerator(mock_llm).generate(ResumeData.model_validate(data))
        assert [e.entry_id for e in content.work_experience] == [None, None]

        # the next request validates the same JSON and mints new ids
        merged = merge(ResumeData.model_validate(data), content)
        assert merged.work_experience[0].bullet_points == (
            "Led the design system rewrite",
            "Mentored four engineers",
        )
        assert merged.work_experience[1].bullet_points == ("Built checkout flows",)


class TestCoverLetter:
    async def test_returns_text(self, mock_llm, resume_data):
        text = await ContentGenerator(mock_llm).cover_letter(resume_data, "We need a React lead")
        assert text == "Dear Hiring Manager,"
        prompt = mock_llm.generate.await_args.kwargs["prompt"]
        assert "We need a React lead" in prompt
        assert "Senior Engineer at Acme Corp" in prompt

    async def test_blank_job_description(self, mock_llm, resume_data):
        with pytest.raises(InputPolicyError):
            await ContentGenerator(mock_llm).cover_letter(resume_data, "  ")

    async def test_provider_failure(self, mock_llm, resume_data):
        mock_llm.generate = AsyncMock(side_effect=RuntimeError("down"))
        with pytest.raises(GenerationError):
            await ContentGenerator(mock_llm).cover_letter(resume_data, "JD")

    async def test_empty_reply(self, mock_llm, resume_data):
        mock_llm.generate = AsyncMock(return_value=LLMResponse(text=" ", input_tokens=1, output_tokens=0))
        with pytest.raises(GenerationError):
            await ContentGenerator(mock_llm).cover_letter(resume_data, "JD")
