"""Immutable render tree produced by layout projections.

A projection returns a :class:`Node`; the preview and the PDF export both
serialize that same tree with :meth:`Node.to_html`, so the two can never
disagree about what is on the page.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Union

from markupsafe import escape

_VOID_TAGS = frozenset({"br", "hr", "img", "meta"})

Child = Union["Node", str]


@dataclass(frozen=True)
class Node:
    tag: str
    children: tuple[Child, ...] = ()
    classes: tuple[str, ...] = ()
    style: tuple[tuple[str, str], ...] = ()
    attrs: tuple[tuple[str, str], ...] = ()

    def iter(self) -> Iterator[Node]:
        """Yield this node and every descendant element, depth first."""
        yield self
        for child in self.children:
            if isinstance(child, Node):
                yield from child.iter()

    def find_all(self, *, cls: str | None = None, tag: str | None = None) -> list[Node]:
        return [
            n
            for n in self.iter()
            if (cls is None or cls in n.classes) and (tag is None or n.tag == tag)
        ]

    def attr(self, name: str) -> str | None:
        return dict(self.attrs).get(name)

    @property
    def text(self) -> str:
        """Concatenated text content, like the DOM's ``textContent``."""
        return "".join(
            child.text if isinstance(child, Node) else child for child in self.children
        )

    def to_html(self) -> str:
        parts = [f"<{self.tag}"]
        if self.classes:
            parts.append(f' class="{escape(" ".join(self.classes))}"')
        if self.style:
            css = "; ".join(f"{k}: {v}" for k, v in self.style)
            parts.append(f' style="{escape(css)}"')
        for name, value in self.attrs:
            parts.append(f' {name}="{escape(value)}"')
        parts.append(">")
        if self.tag in _VOID_TAGS:
            return "".join(parts)
        for child in self.children:
            parts.append(child.to_html() if isinstance(child, Node) else str(escape(child)))
        parts.append(f"</{self.tag}>")
        return "".join(parts)


def h(
    tag: str,
    *children: Child | None,
    cls: str = "",
    style: Mapping[str, str] | None = None,
    **attrs: str,
) -> Node:
    """Build a :class:`Node`; ``None`` children are skipped.

    Attribute names use underscores for dashes (``data_section`` becomes
    ``data-section``).
    """
    return Node(
        tag=tag,
        children=tuple(c for c in children if c is not None),
        classes=tuple(cls.split()),
        style=tuple((style or {}).items()),
        attrs=tuple((k.replace("_", "-"), v) for k, v in attrs.items()),
    )
