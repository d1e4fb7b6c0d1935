"""Local configuration for md2html."""

from __future__ import annotations

import os


DEFAULT_DOCUMENT_TITLE = "Document"
DEFAULT_ESCAPE_HTML = True
DEFAULT_MAX_HEADING_LEVEL = 6
DEFAULT_RESTART_LIST_ON_TYPE_CHANGE = False

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


MD2HTML_DOCUMENT_TITLE = os.getenv("MD2HTML_DOCUMENT_TITLE", DEFAULT_DOCUMENT_TITLE)
MD2HTML_ESCAPE_HTML = _env_flag("MD2HTML_ESCAPE_HTML", DEFAULT_ESCAPE_HTML)
# 0 (or a negative value) turns heading clamping off.
MD2HTML_MAX_HEADING_LEVEL = int(os.getenv("MD2HTML_MAX_HEADING_LEVEL", str(DEFAULT_MAX_HEADING_LEVEL)))
MD2HTML_RESTART_LIST_ON_TYPE_CHANGE = _env_flag(
    "MD2HTML_RESTART_LIST_ON_TYPE_CHANGE", DEFAULT_RESTART_LIST_ON_TYPE_CHANGE
)
