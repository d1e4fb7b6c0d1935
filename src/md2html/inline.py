"""Render inline nodes (emphasis, code spans, links, images, text) to HTML."""

from __future__ import annotations

from typing import Iterable

from md2html.html_utils import escape_html
from md2html.schemas import (
    Bold,
    BoldItalic,
    Char,
    Image,
    InlineCode,
    Italic,
    Link,
    Strikethrough,
    Text,
    Whitespace,
)
from md2html.schemas.inline import InlineNode


def render_inline(nodes: Iterable[InlineNode], *, escape: bool = True) -> str:
    """Fold a sequence of inline nodes into one HTML fragment, left to right."""
    return "".join(_render_node(node, escape=escape) for node in nodes)


def _render_node(node: InlineNode, *, escape: bool) -> str:
    if isinstance(node, BoldItalic):
        return f"<strong><em>{_bold_italic_text(node, escape=escape)}</em></strong>"

    if isinstance(node, Bold):
        return f"<strong>{_render_bold_run(node, escape=escape)}</strong>"

    if isinstance(node, Italic):
        return f"<em>{escape_html(node.text, enabled=escape)}</em>"

    if isinstance(node, InlineCode):
        return f"<code>{escape_html(node.text, enabled=escape)}</code>"

    if isinstance(node, Strikethrough):
        return f"<s>{escape_html(node.text, enabled=escape)}</s>"

    if isinstance(node, Link):
        href = escape_html(node.url, enabled=escape, quote=True)
        return f'<a href="{href}">{escape_html(node.title, enabled=escape)}</a>'

    if isinstance(node, Image):
        src = escape_html(node.url, enabled=escape, quote=True)
        alt = escape_html(node.alt, enabled=escape, quote=True)
        return f'<img src="{src}" alt="{alt}"/>'

    if isinstance(node, (Char, Whitespace, Text)):
        return escape_html(node.text, enabled=escape)

    return ""


def _bold_italic_text(node: BoldItalic, *, escape: bool) -> str:
    if node.inner is None:
        return ""
    return escape_html(node.inner.text, enabled=escape)


def _render_bold_run(node: Bold, *, escape: bool) -> str:
    parts: list[str] = []
    for child in node.children:
        if isinstance(child, Italic):
            parts.append(f"<em>{escape_html(child.text, enabled=escape)}</em>")
        else:
            parts.append(escape_html(child.text, enabled=escape))
    return "".join(parts)
