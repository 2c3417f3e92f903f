"""Route handlers for the API."""

from resume_studio.api.routes import health, resumes

__all__ = ["health", "resumes"]
