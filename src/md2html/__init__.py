"""md2html: convert markdown documents into standalone HTML."""

from md2html.convert import convert_file, convert_file_async
from md2html.exceptions import ConversionError, Md2htmlError, ParseError
from md2html.grammar import parse_markdown
from md2html.options import RenderOptions
from md2html.renderer import markdown_to_html, render_document, render_fragment
from md2html.schemas import Document

__all__ = [
    "ConversionError",
    "Document",
    "Md2htmlError",
    "ParseError",
    "RenderOptions",
    "convert_file",
    "convert_file_async",
    "markdown_to_html",
    "parse_markdown",
    "render_document",
    "render_fragment",
]
