"""Renderers for the simple block kinds."""

from __future__ import annotations

from md2html.html_utils import escape_html
from md2html.inline import render_inline
from md2html.options import RenderOptions
from md2html.schemas import Blockquote, CodeBlock, Heading, HorizontalRule, Paragraph

CODE_BLOCK_STYLE = "background-color: #f5f5f5; padding: 8px; overflow-x: auto;"


def render_heading(heading: Heading, options: RenderOptions) -> str:
    """Render ``<hN>`` where N is the marker length, clamped if configured."""
    level = heading.level
    if options.max_heading_level is not None:
        level = min(level, options.max_heading_level)
    tag = f"h{level}"
    content = render_inline(heading.content, escape=options.escape_html)
    return f"<{tag}>{content}</{tag}>\n"


def render_paragraph(paragraph: Paragraph, options: RenderOptions) -> str:
    """Render each line's inline content followed by a newline.

    Lines are not wrapped in ``<p>``.
    """
    return "".join(
        render_inline(line, escape=options.escape_html) + "\n"
        for line in paragraph.lines
    )


def render_code_block(code: CodeBlock, options: RenderOptions) -> str:
    text = escape_html(code.text, enabled=options.escape_html)
    return f'<pre style="{CODE_BLOCK_STYLE}"><code>{text}</code></pre>\n'


def render_blockquote(quote: Blockquote, options: RenderOptions) -> str:
    # Inner markdown is copied, not parsed.
    text = escape_html(quote.text, enabled=options.escape_html)
    return f"<blockquote>{text}</blockquote>\n"


def render_horizontal_rule(rule: HorizontalRule, options: RenderOptions) -> str:
    return "<hr/>\n"
