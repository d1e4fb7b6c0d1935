"""Output paths and thread-pool I/O for markdown sources and HTML documents."""

from __future__ import annotations

import asyncio
from pathlib import Path


def html_target_for(source: Path, target: Path | None = None) -> Path:
    """Get the output path for a markdown source file.

    Args:
        source: Path to the markdown source.
        target: Explicit output path or directory. If None, the source path
            with an ``.html`` suffix is used. If it is an existing directory,
            the file is placed inside it under the source's stem.

    Returns:
        Path of the HTML file to write.
    """
    if target is None:
        return source.with_suffix(".html")
    if target.is_dir():
        return target / f"{source.stem}.html"
    return target


async def read_markdown_async(source: Path) -> str:
    """Read a UTF-8 markdown source in a worker thread."""
    return await asyncio.to_thread(source.read_text, encoding="utf-8")


async def write_html_async(target: Path, html: str) -> None:
    """Write a rendered HTML document in a worker thread.

    Missing parent directories of ``target`` are created first.

    Args:
        target: Path of the HTML file to write.
        html: Rendered document text, written as UTF-8.
    """

    def _write() -> None:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(html, encoding="utf-8")

    await asyncio.to_thread(_write)
