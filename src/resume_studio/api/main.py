"""FastAPI application entry point for the resume-studio API."""

from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from resume_studio import __version__
from resume_studio.api.routes import health, resumes

app = FastAPI(
    title="Resume Studio API",
    description="Preview, export and AI-assisted writing for resumes",
    version=__version__,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(resumes.router, prefix="/api")


def main(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Start the API server."""
    import uvicorn

    uvicorn.run("resume_studio.api.main:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    main()
