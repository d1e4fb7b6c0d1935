"""Custom exceptions for md2html."""

from __future__ import annotations


class Md2htmlError(Exception):
    """Base exception for md2html operations."""


class ParseError(Md2htmlError):
    """Markdown source does not match the grammar.

    Attributes:
        description: Human-readable message (expected/found plus position).
        line: 1-based line of the failure, if known.
        column: 1-based column of the failure, if known.
    """

    def __init__(
        self, description: str, *, line: int | None = None, column: int | None = None
    ) -> None:
        super().__init__(description)
        self.description = description
        self.line = line
        self.column = column


class ConversionError(Md2htmlError):
    """Error while reading a source file or writing the HTML output."""
