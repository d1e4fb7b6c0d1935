"""Render a parsed markdown document into a standalone HTML document."""

from __future__ import annotations

import logging
from typing import Callable

from md2html.blocks import (
    render_blockquote,
    render_code_block,
    render_heading,
    render_horizontal_rule,
    render_paragraph,
)
from md2html.exceptions import ParseError
from md2html.grammar import parse_markdown
from md2html.html_utils import escape_html, wrap_document
from md2html.lists import render_list
from md2html.options import RenderOptions
from md2html.schemas import (
    Blockquote,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    ListItem,
    Paragraph,
)
from md2html.schemas.blocks import BlockNode

logger = logging.getLogger(__name__)

_BLOCK_RENDERERS: dict[type[BlockNode], Callable[..., str]] = {
    Heading: render_heading,
    Paragraph: render_paragraph,
    CodeBlock: render_code_block,
    Blockquote: render_blockquote,
    HorizontalRule: render_horizontal_rule,
}


def markdown_to_html(text: str, options: RenderOptions | None = None) -> str:
    """Convert markdown text into a complete HTML document.

    A parse error never escapes: it is logged and rendered into the body of
    an otherwise complete document.
    """
    try:
        result: Document | ParseError = parse_markdown(text)
    except ParseError as exc:
        result = exc
    return render_document(result, options)


def render_document(
    result: Document | ParseError, options: RenderOptions | None = None
) -> str:
    """Wrap rendered blocks, or a parse error report, in the HTML skeleton.

    Args:
        result: The parser's outcome, either a tree or the error it raised.
        options: Rendering options. Uses defaults if None.

    Returns:
        The full document: doctype, head with charset and title, body.
    """
    opts = options or RenderOptions()
    if isinstance(result, ParseError):
        logger.warning("Rendering parse error into document: %s", result.description)
        body = _render_parse_error(result)
    else:
        body = render_fragment(result, opts)
    return wrap_document(body, title=opts.title)


def render_fragment(document: Document, options: RenderOptions | None = None) -> str:
    """Render the document's blocks in source order, without the skeleton.

    Consecutive list items are handed to the list renderer together so that
    nesting can be rebuilt across them.
    """
    opts = options or RenderOptions()
    parts: list[str] = []
    pending_items: list[ListItem] = []

    for block in document.blocks:
        if isinstance(block, ListItem):
            pending_items.append(block)
            continue
        if pending_items:
            parts.append(render_list(pending_items, opts))
            pending_items = []
        parts.append(_render_block(block, opts))

    if pending_items:
        parts.append(render_list(pending_items, opts))

    logger.debug("Rendered %d blocks", len(document.blocks))
    return "".join(parts)


def _render_block(block: BlockNode, options: RenderOptions) -> str:
    renderer = _BLOCK_RENDERERS.get(type(block))
    if renderer is None:
        logger.debug("No renderer for block %r", block)
        return ""
    return renderer(block, options)


def _render_parse_error(error: ParseError) -> str:
    return f"<pre>Parse error: {escape_html(error.description)}</pre>\n"
