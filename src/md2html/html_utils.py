"""Shared HTML utilities: escaping and the document skeleton."""

from __future__ import annotations

import html

DOCUMENT_TEMPLATE = (
    "<!DOCTYPE html>\n"
    "<html>\n"
    "<head>\n"
    '<meta charset="utf-8">\n'
    "<title>{title}</title>\n"
    "</head>\n"
    "<body>\n"
    "{body}"
    "</body>\n"
    "</html>\n"
)


def escape_html(text: str, *, enabled: bool = True, quote: bool = False) -> str:
    """Escape ``&``, ``<`` and ``>`` (and quotes when ``quote`` is set).

    With ``enabled=False`` the text is returned unchanged so raw HTML written
    in the markdown source reaches the output.
    """
    if not enabled:
        return text
    return html.escape(text, quote=quote)


def wrap_document(body: str, *, title: str) -> str:
    """Insert rendered body content into the fixed HTML5 skeleton."""
    return DOCUMENT_TEMPLATE.format(title=escape_html(title), body=body)
