"""Rendering pipeline stages: merge, resolve, order, generate."""

from resume_studio.pipeline.customization import resolve
from resume_studio.pipeline.merge import merge
from resume_studio.pipeline.sections import order

__all__ = ["merge", "order", "resolve"]
