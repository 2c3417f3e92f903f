"""Exception types raised at the pipeline's collaborator boundaries."""

from __future__ import annotations


class ResumeStudioError(Exception):
    """Base class for all resume-studio failures."""


class InputPolicyError(ResumeStudioError):
    """The caller asked for an operation its input does not support.

    Raised by pre-flight checks (e.g. AI generation without a target job
    title). The rendering core itself never raises this.
    """


class GenerationError(ResumeStudioError):
    """The AI provider failed or returned content of the wrong shape."""


class ExportError(ResumeStudioError):
    """The PDF engine failed to produce a document."""
