"""CLI interface using typer + rich."""

from __future__ import annotations

import asyncio
import json
import logging
import webbrowser
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table

from resume_studio.clients.llm_client import LLMClient
from resume_studio.config import load_config
from resume_studio.errors import ExportError, GenerationError, InputPolicyError
from resume_studio.export.engines import WeasyPrintEngine
from resume_studio.models.ai_content import AIContent
from resume_studio.models.customization import Customization
from resume_studio.models.resume import ResumeData
from resume_studio.models.template import TemplateId
from resume_studio.pipeline.content_generator import ContentGenerator
from resume_studio.pipeline.orchestrator import export_resume, render_html
from resume_studio.templates import list_templates
from resume_studio.templates.renderer import save_html

app = typer.Typer(
    name="resume-studio",
    help="Render resumes in eight layouts and export them to PDF",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _load_model(path: Path | None, model, label: str):
    if path is None:
        return None
    if not path.exists():
        console.print(f"[red]{label} file not found: {path}[/red]")
        raise typer.Exit(1)
    try:
        return model.model_validate(json.loads(path.read_text(encoding="utf-8")))
    except (json.JSONDecodeError, ValidationError) as exc:
        console.print(f"[red]Invalid {label} file {path}:[/red]\n{exc}")
        raise typer.Exit(1) from exc


@app.command()
def templates() -> None:
    """List the available resume layouts."""
    table = Table(title="Templates")
    table.add_column("id", style="bold")
    table.add_column("name")
    table.add_column("description")
    for tmpl in list_templates():
        table.add_row(tmpl.template_id.value, tmpl.name, tmpl.profile.description)
    console.print(table)


@app.command()
def preview(
    data: Path = typer.Argument(help="Resume data JSON file"),
    template: TemplateId = typer.Option(None, "--template", "-t", help="Layout id (config default)"),
    custom: Path = typer.Option(None, "--custom", "-c", help="Customization JSON file"),
    ai: Path = typer.Option(None, "--ai", help="AI content JSON file (from `generate`)"),
    output: Path = typer.Option(None, "--output", "-o", help="Output .html path"),
    open_browser: bool = typer.Option(False, "--open", help="Open the preview in a browser"),
) -> None:
    """Render the resume to a standalone HTML file."""
    resume_data = _load_model(data, ResumeData, "resume data")
    customization = _load_model(custom, Customization, "customization")
    ai_content = _load_model(ai, AIContent, "AI content")
    template = template or TemplateId(load_config().render.default_template)

    html = render_html(resume_data, ai_content, template, customization)
    html_path = save_html(html, output or data.with_suffix(".html"))
    console.print(f"[green]HTML saved: {html_path}[/green]")

    if open_browser:
        webbrowser.open(html_path.resolve().as_uri())


@app.command()
def export(
    data: Path = typer.Argument(help="Resume data JSON file"),
    template: TemplateId = typer.Option(None, "--template", "-t", help="Layout id (config default)"),
    custom: Path = typer.Option(None, "--custom", "-c", help="Customization JSON file"),
    ai: Path = typer.Option(None, "--ai", help="AI content JSON file (from `generate`)"),
    output: Path = typer.Option(None, "--output", "-o", help="Output .pdf path"),
) -> None:
    """Export the resume to PDF."""
    resume_data = _load_model(data, ResumeData, "resume data")
    customization = _load_model(custom, Customization, "customization")
    ai_content = _load_model(ai, AIContent, "AI content")
    config = load_config()
    template = template or TemplateId(config.render.default_template)
    engine = WeasyPrintEngine(timeout=config.export.timeout)

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        progress.add_task(f"Rendering {template.value} PDF...", total=None)
        try:
            result = asyncio.run(
                export_resume(
                    resume_data,
                    ai_content,
                    template,
                    customization,
                    engine=engine,
                    page_size=config.export.page_size,
                    print_background=config.export.print_background,
                )
            )
        except ExportError as exc:
            console.print(f"[red]{exc}[/red]")
            raise typer.Exit(1) from exc

    path = output or data.parent / result.filename
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(result.content)
    console.print(f"[green]PDF saved: {path}[/green]")


@app.command()
def generate(
    data: Path = typer.Argument(help="Resume data JSON file"),
    output: Path = typer.Option(None, "--output", "-o", help="Output AI content JSON path"),
) -> None:
    """Write a professional summary and bullets with Claude."""
    resume_data = _load_model(data, ResumeData, "resume data")
    config = load_config()
    llm = LLMClient(timeout=config.llm.timeout, max_retries=config.llm.max_retries)
    generator = ContentGenerator(
        llm,
        model=config.llm.model,
        temperature=config.llm.temperature,
        max_tokens=config.llm.max_tokens,
    )

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
    ) as progress:
        progress.add_task("Generating resume content...", total=None)
        try:
            content = asyncio.run(generator.generate(resume_data))
        except (InputPolicyError, GenerationError) as exc:
            console.print(f"[red]{exc}[/red]")
            raise typer.Exit(1) from exc

    path = output or data.with_name(f"{data.stem}.ai.json")
    path.write_text(content.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
    console.print(f"[green]AI content saved: {path}[/green]")


@app.command("cover-letter")
def cover_letter(
    data: Path = typer.Argument(help="Resume data JSON file"),
    jd: Path = typer.Option(..., "--jd", help="Job description text file"),
    output: Path = typer.Option(None, "--output", "-o", help="Output .txt path"),
) -> None:
    """Write a cover letter for a job description with Claude."""
    resume_data = _load_model(data, ResumeData, "resume data")
    if not jd.exists():
        console.print(f"[red]Job description file not found: {jd}[/red]")
        raise typer.Exit(1)
    config = load_config()
    llm = LLMClient(timeout=config.llm.timeout, max_retries=config.llm.max_retries)
    generator = ContentGenerator(llm, model=config.llm.model, temperature=config.llm.temperature)

    try:
        text = asyncio.run(generator.cover_letter(resume_data, jd.read_text(encoding="utf-8")))
    except (InputPolicyError, GenerationError) as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(1) from exc

    if output is None:
        console.print(text)
        return
    output.write_text(text, encoding="utf-8")
    console.print(f"[green]Cover letter saved: {output}[/green]")


@app.command()
def serve(
    host: str = typer.Option("127.0.0.1", "--host"),
    port: int = typer.Option(8000, "--port"),
    reload: bool = typer.Option(False, "--reload"),
) -> None:
    """Run the HTTP API."""
    from resume_studio.api.main import main as run_server

    run_server(host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
