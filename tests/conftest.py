"""Test setup for md2html."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from md2html.options import RenderOptions  # noqa: E402


@pytest.fixture
def options() -> RenderOptions:
    """Explicit defaults so tests do not depend on MD2HTML_* environment variables."""
    return RenderOptions(
        title="Notes",
        escape_html=True,
        max_heading_level=6,
        restart_list_on_type_change=False,
    )


@pytest.fixture
def raw_options(options: RenderOptions) -> RenderOptions:
    """Options with escaping and heading clamping turned off."""
    return RenderOptions(
        title=options.title,
        escape_html=False,
        max_heading_level=None,
        restart_list_on_type_change=False,
    )
