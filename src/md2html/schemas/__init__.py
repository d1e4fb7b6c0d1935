"""Syntax tree models for md2html."""

from md2html.schemas.blocks import (
    Block,
    Blockquote,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    ListItem,
    ListType,
    Paragraph,
)
from md2html.schemas.inline import (
    Bold,
    BoldItalic,
    Char,
    Image,
    Inline,
    InlineCode,
    Italic,
    Link,
    Strikethrough,
    Text,
    Whitespace,
)

__all__ = [
    "Block",
    "Blockquote",
    "Bold",
    "BoldItalic",
    "Char",
    "CodeBlock",
    "Document",
    "Heading",
    "HorizontalRule",
    "Image",
    "Inline",
    "InlineCode",
    "Italic",
    "Link",
    "ListItem",
    "ListType",
    "Paragraph",
    "Strikethrough",
    "Text",
    "Whitespace",
]
