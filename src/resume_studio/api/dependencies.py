"""Shared dependencies for API routes; override them in tests."""

from __future__ import annotations

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from resume_studio.clients.llm_client import LLMClient
from resume_studio.config import AppConfig, load_config
from resume_studio.export.engines import PdfEngine, WeasyPrintEngine
from resume_studio.pipeline.content_generator import ContentGenerator


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    return load_config()


def get_pdf_engine(config: Annotated[AppConfig, Depends(get_config)]) -> PdfEngine:
    return WeasyPrintEngine(timeout=config.export.timeout)


def get_content_generator(
    config: Annotated[AppConfig, Depends(get_config)],
) -> ContentGenerator:
    llm = LLMClient(timeout=config.llm.timeout, max_retries=config.llm.max_retries)
    return ContentGenerator(
        llm,
        model=config.llm.model,
        temperature=config.llm.temperature,
        max_tokens=config.llm.max_tokens,
    )
