"""Rebuild nested ``<ul>``/``<ol>`` structure from a flat run of list items."""

from __future__ import annotations

import logging
from typing import Iterable

from md2html.inline import render_inline
from md2html.options import RenderOptions
from md2html.schemas import ListItem, ListType

logger = logging.getLogger(__name__)


def render_list(items: Iterable[ListItem], options: RenderOptions) -> str:
    """Render consecutive list items as nested lists.

    Nesting is derived from each item's indentation alone. A stack of
    ``(indent, list_type)`` pairs tracks the open lists, outermost first:

    1. lists deeper than the current item are closed;
    2. a new list is opened when the item is deeper than the innermost open
       list (or nothing is open);
    3. at equal depth a change of list type is ignored unless
       ``options.restart_list_on_type_change`` is set, in which case the open
       list is closed and one of the new type is opened.

    Whatever is still open after the last item is closed innermost first, so
    every opening tag has exactly one closing tag in reverse order.
    """
    stack: list[tuple[int, ListType]] = []
    parts: list[str] = []

    for item in items:
        width = item.indent
        list_type = item.list_type

        while stack and stack[-1][0] > width:
            parts.append(_close_list(*stack.pop()))

        if (
            stack
            and stack[-1][0] == width
            and stack[-1][1] is not list_type
            and options.restart_list_on_type_change
        ):
            parts.append(_close_list(*stack.pop()))

        if not stack or stack[-1][0] < width:
            stack.append((width, list_type))
            parts.append(_open_list(width, list_type))
            logger.debug("Opened %s list at indent %d (depth %d)", list_type.value, width, len(stack))

        content = render_inline(item.content, escape=options.escape_html)
        parts.append(f"{' ' * width}  <li>{content}</li>\n")

    while stack:
        parts.append(_close_list(*stack.pop()))

    return "".join(parts)


def _open_list(width: int, list_type: ListType) -> str:
    return f"{' ' * width}<{list_type.tag}>\n"


def _close_list(width: int, list_type: ListType) -> str:
    return f"{' ' * width}</{list_type.tag}>\n"
