"""Convert markdown files on disk into HTML files."""

from __future__ import annotations

import logging
from pathlib import Path

from md2html.exceptions import ConversionError
from md2html.file_utils import html_target_for, read_markdown_async, write_html_async
from md2html.options import RenderOptions
from md2html.renderer import markdown_to_html

logger = logging.getLogger(__name__)


def convert_file(
    source: Path | str,
    target: Path | str | None = None,
    options: RenderOptions | None = None,
) -> Path:
    """Read a markdown file, render it and write the HTML document.

    Args:
        source: Markdown file to read (UTF-8).
        target: Output file or directory. Defaults to the source path with an
            ``.html`` suffix.
        options: Rendering options. Uses defaults if None.

    Returns:
        Path of the written HTML file.

    Raises:
        ConversionError: If the source cannot be read or the output cannot
            be written. Markdown syntax errors are rendered, not raised.
    """
    source_path = Path(source)
    target_path = html_target_for(source_path, Path(target) if target is not None else None)

    try:
        text = source_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ConversionError(f"Cannot read {source_path}: {exc}") from exc

    html = markdown_to_html(text, options)

    try:
        target_path.parent.mkdir(parents=True, exist_ok=True)
        target_path.write_text(html, encoding="utf-8")
    except OSError as exc:
        raise ConversionError(f"Cannot write {target_path}: {exc}") from exc

    logger.debug("Converted %s -> %s", source_path, target_path)
    return target_path


async def convert_file_async(
    source: Path | str,
    target: Path | str | None = None,
    options: RenderOptions | None = None,
) -> Path:
    """Async version of ``convert_file``; file I/O runs in a worker thread."""
    source_path = Path(source)
    target_path = html_target_for(source_path, Path(target) if target is not None else None)

    try:
        text = await read_markdown_async(source_path)
    except (OSError, UnicodeDecodeError) as exc:
        raise ConversionError(f"Cannot read {source_path}: {exc}") from exc

    html = markdown_to_html(text, options)

    try:
        await write_html_async(target_path, html)
    except OSError as exc:
        raise ConversionError(f"Cannot write {target_path}: {exc}") from exc

    logger.debug("Converted %s -> %s", source_path, target_path)
    return target_path
