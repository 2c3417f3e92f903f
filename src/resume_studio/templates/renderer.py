"""Serialize a projected render tree into a self-contained HTML document."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markupsafe import Markup

from resume_studio.models.template import TemplateId
from resume_studio.templates.tree import Node

HTML_TEMPLATES_DIR = Path(__file__).parent / "html"
CSS_DIR = Path(__file__).parent / "css"


@lru_cache(maxsize=1)
def _environment() -> Environment:
    return Environment(
        loader=FileSystemLoader(str(HTML_TEMPLATES_DIR)),
        autoescape=True,
    )


def load_css(template_id: TemplateId | str) -> str:
    """Shared stylesheet followed by the layout's own rules."""
    template_id = TemplateId(template_id)
    parts = []
    for name in ("base.css", f"{template_id.value}.css"):
        path = CSS_DIR / name
        if path.exists():
            parts.append(path.read_text(encoding="utf-8"))
    return "\n".join(parts)


def render_to_html(tree: Node, template_id: TemplateId | str, title: str = "Resume") -> str:
    """Wrap *tree* in the page shell with inlined CSS (no external assets)."""
    template = _environment().get_template("base.html")
    return template.render(
        title=title,
        css=Markup(load_css(template_id)),
        body=Markup(tree.to_html()),
    )


def save_html(html_content: str, output_path: str | Path) -> Path:
    """Save HTML content to file."""
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(html_content, encoding="utf-8")
    return path
