"""PDF engines: the collaborator that turns HTML markup into document bytes."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol

from resume_studio.models.customization import ResolvedMargins

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PageGeometry:
    """Physical page setup handed to the engine alongside the markup."""

    margins: ResolvedMargins
    page_size: str = "A4"
    print_background: bool = True

    def page_css(self) -> str:
        m = self.margins
        css = (
            f"@page {{ size: {self.page_size}; "
            f"margin: {m.top} {m.right} {m.bottom} {m.left}; }}"
        )
        if not self.print_background:
            css += " * { background: none !important; }"
        return css


class PdfEngine(Protocol):
    async def render(self, markup: str, geometry: PageGeometry) -> bytes: ...


def inject_page_style(markup: str, geometry: PageGeometry) -> str:
    """Insert the ``@page`` rule just before ``</head>`` (or prepend it)."""
    style = f"<style>{geometry.page_css()}</style>"
    head_end = markup.find("</head>")
    if head_end == -1:
        return style + markup
    return markup[:head_end] + style + markup[head_end:]


class WeasyPrintEngine:
    """Render with WeasyPrint in a worker thread, bounded by *timeout* seconds."""

    def __init__(self, timeout: float = 30.0):
        self.timeout = timeout

    async def render(self, markup: str, geometry: PageGeometry) -> bytes:
        document = inject_page_style(markup, geometry)
        logger.debug("WeasyPrint render: page=%s timeout=%ss", geometry.page_size, self.timeout)
        return await asyncio.wait_for(
            asyncio.to_thread(self._write_pdf, document),
            timeout=self.timeout,
        )

    @staticmethod
    def _write_pdf(document: str) -> bytes:
        from weasyprint import HTML

        return HTML(string=document).write_pdf()
