"""Command-line entry point: convert a markdown file into an HTML file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from md2html.convert import convert_file
from md2html.exceptions import ConversionError
from md2html.options import RenderOptions

logger = logging.getLogger("md2html")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="md2html", description="Convert a markdown file into a standalone HTML document."
    )
    parser.add_argument("source", type=Path, help="Markdown file to convert")
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        help="Output file or directory [default: source name with .html extension]",
    )
    parser.add_argument("--title", help="Document title")
    parser.add_argument(
        "--no-escape", action="store_true", help="Copy raw HTML in the source through unescaped"
    )
    parser.add_argument(
        "--max-heading-level",
        type=int,
        help="Clamp heading levels to this value; 0 keeps every level as written",
    )
    parser.add_argument(
        "--restart-lists",
        action="store_true",
        help="Start a new list when the list type changes at the same indentation",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    options = _build_options(args)
    try:
        target = convert_file(args.source, args.output, options)
    except ConversionError as exc:
        logger.error("%s", exc)
        return 1

    logger.info("Wrote %s", target)
    return 0


def _build_options(args: argparse.Namespace) -> RenderOptions:
    overrides: dict[str, object] = {}
    if args.title is not None:
        overrides["title"] = args.title
    if args.no_escape:
        overrides["escape_html"] = False
    if args.max_heading_level is not None:
        level = args.max_heading_level
        overrides["max_heading_level"] = level if level > 0 else None
    if args.restart_lists:
        overrides["restart_list_on_type_change"] = True
    return RenderOptions(**overrides)


if __name__ == "__main__":
    sys.exit(main())
