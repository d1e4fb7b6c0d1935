"""Rendering options shared by every renderer."""

from __future__ import annotations

from dataclasses import dataclass, field

from md2html.config import (
    MD2HTML_DOCUMENT_TITLE,
    MD2HTML_ESCAPE_HTML,
    MD2HTML_MAX_HEADING_LEVEL,
    MD2HTML_RESTART_LIST_ON_TYPE_CHANGE,
)


def _default_max_heading_level() -> int | None:
    return MD2HTML_MAX_HEADING_LEVEL if MD2HTML_MAX_HEADING_LEVEL > 0 else None


@dataclass(frozen=True)
class RenderOptions:
    """Options for markdown rendering.

    Attributes:
        title: Text of the ``<title>`` element in the document skeleton.
        escape_html: If True, ``<``, ``>`` and ``&`` in literal text, code
            spans, code blocks and blockquotes are escaped. If False, source
            text is copied into the output verbatim (raw HTML passes through).
        max_heading_level: Upper bound for heading tags. ``None`` keeps the
            marker length as-is, so ``#######`` renders as ``<h7>``.
        restart_list_on_type_change: If True, an ordered item following an
            unordered one at the same indentation (or vice versa) closes the
            open list and starts a new one. If False, the item joins the list
            that is already open.
    """

    title: str = MD2HTML_DOCUMENT_TITLE
    escape_html: bool = MD2HTML_ESCAPE_HTML
    max_heading_level: int | None = field(default_factory=_default_max_heading_level)
    restart_list_on_type_change: bool = MD2HTML_RESTART_LIST_ON_TYPE_CHANGE

    def __post_init__(self) -> None:
        if self.max_heading_level is not None and self.max_heading_level < 1:
            raise ValueError("max_heading_level must be at least 1, or None to disable clamping")
