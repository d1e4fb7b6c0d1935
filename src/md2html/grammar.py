"""Parse markdown text into the md2html syntax tree.

The grammar is line oriented and built with pyparsing. Every block consumes
its trailing newline and no inline construct spans a line break. Blocks are
tried in this order::

    document   := (blank_line | block)* end
    block      := heading | horizontal_rule | code_block | blockquote
                | list_item | paragraph

Inline content is tried as image, link, bold-italic, bold, italic, code span,
strikethrough, whitespace and finally any single character, so unmatched
emphasis markers fall back to literal text. The only syntax error a
well-formed string can produce is a fenced code block that is never closed
by a bare fence line.
"""

from __future__ import annotations

import logging

from pyparsing import (
    Group,
    OneOrMore,
    ParseBaseException,
    ParseResults,
    Regex,
    StringEnd,
    Suppress,
    ZeroOrMore,
)

from md2html.exceptions import ParseError
from md2html.schemas import (
    Blockquote,
    Bold,
    BoldItalic,
    Char,
    CodeBlock,
    Document,
    Heading,
    HorizontalRule,
    Image,
    InlineCode,
    Italic,
    Link,
    ListItem,
    ListType,
    Paragraph,
    Strikethrough,
    Text,
    Whitespace,
)

logger = logging.getLogger(__name__)

_UNORDERED_MARKERS = frozenset("-*+")


def _regex(pattern: str) -> Regex:
    # Markdown is whitespace sensitive; no element may skip blanks on its own.
    return Regex(pattern, as_match=True).leave_whitespace()


# Inline grammar. Bracketed labels and link targets stop at the next bracket,
# so a failed attempt never rescans the rest of the line.

_IMAGE = _regex(
    r'!\[(?P<alt>[^\[\]\n]*)\]\((?P<url>[^\s()\[\]]*)(?:[ \t]+"(?P<title>[^"\n]*)")?[ \t]*\)'
).set_parse_action(
    lambda t: Image(url=t[0].group("url"), alt=t[0].group("alt"), title=t[0].group("title"))
)
_LINK = _regex(
    r'\[(?P<title>[^\[\]\n]*)\]\((?P<url>[^\s()\[\]]*)(?:[ \t]+"(?P<alt>[^"\n]*)")?[ \t]*\)'
).set_parse_action(
    lambda t: Link(url=t[0].group("url"), title=t[0].group("title"), alt=t[0].group("alt"))
)
_BOLD_ITALIC = _regex(r"\*\*\*(?P<text>[^*\n]+)\*\*\*").set_parse_action(
    lambda t: BoldItalic(inner=Italic(text=t[0].group("text")))
)
_ITALIC = _regex(r"\*(?P<text>[^*\n]+)\*").set_parse_action(
    lambda t: Italic(text=t[0].group("text"))
)
_BOLD_TEXT = _regex(r"[^*\n]+").set_parse_action(lambda t: Text(text=t[0].group()))
_BOLD_DELIMITER = Suppress(_regex(r"\*\*"))
_BOLD = (
    _BOLD_DELIMITER + Group(OneOrMore(_ITALIC | _BOLD_TEXT)) + _BOLD_DELIMITER
).set_parse_action(lambda t: Bold(children=list(t[0])))
_INLINE_CODE = _regex(r"`(?P<text>[^`\n]+)`").set_parse_action(
    lambda t: InlineCode(text=t[0].group("text"))
)
_STRIKETHROUGH = _regex(r"~~(?P<text>[^~\n]+)~~").set_parse_action(
    lambda t: Strikethrough(text=t[0].group("text"))
)
_WHITESPACE = _regex(r"[ \t]").set_parse_action(lambda t: Whitespace(text=t[0].group()))
_CHAR = _regex(r"[^\n]").set_parse_action(lambda t: Char(text=t[0].group()))

_INLINE = (
    _IMAGE
    | _LINK
    | _BOLD_ITALIC
    | _BOLD
    | _ITALIC
    | _INLINE_CODE
    | _STRIKETHROUGH
    | _WHITESPACE
    | _CHAR
)

# Block grammar

_NEWLINE = Suppress(_regex(r"\n"))
_BLANK_LINE = _regex(r"[ \t]*\n")

_HEADING_MARKER = _regex(r"(?P<marker>#+)(?:[ \t]+|(?=\n))")
_HEADING = (_HEADING_MARKER + Group(ZeroOrMore(_INLINE)) + _NEWLINE).set_parse_action(
    lambda t: Heading(level=len(t[0].group("marker")), content=list(t[1]))
)

_HORIZONTAL_RULE = _regex(
    r"[ \t]{0,3}(?:(?:-[ \t]*){3,}|(?:\*[ \t]*){3,}|(?:_[ \t]*){3,})\n"
).set_parse_action(lambda t: HorizontalRule())

_FENCE_OPEN = _regex(r"[ \t]{0,3}```[^`\n]*\n")
# Only a bare fence closes a block; "```js" inside a block is code.
_CODE_BODY = _regex(r"(?:(?![ \t]{0,3}```[ \t]*\n)[^\n]*\n)*")
_FENCE_CLOSE = _regex(r"[ \t]{0,3}```[ \t]*\n").set_name("closing code fence")
# Once a fence is opened, a missing closing fence is a hard syntax error.
_CODE_BLOCK = (Suppress(_FENCE_OPEN) - _CODE_BODY - _FENCE_CLOSE).set_parse_action(
    lambda t: CodeBlock(text=t[0].group().removesuffix("\n"))
)

_QUOTE_LINE = _regex(r"[ \t]{0,3}>[ \t]?(?P<text>[^\n]*)\n")
_BLOCKQUOTE = OneOrMore(_QUOTE_LINE).set_parse_action(
    lambda t: Blockquote(text="\n".join(match.group("text") for match in t))
)

_LIST_MARKER = _regex(r"(?P<indent>[ \t]*)(?P<marker>[-*+]|\d+[.)])[ \t]+")
_LIST_ITEM = (_LIST_MARKER + Group(ZeroOrMore(_INLINE)) + _NEWLINE).set_parse_action(
    lambda t: _make_list_item(t[0], t[1])
)

_BLOCK_START = (
    _BLANK_LINE | _HEADING_MARKER | _HORIZONTAL_RULE | _FENCE_OPEN | _QUOTE_LINE | _LIST_MARKER
)
_PARAGRAPH_LINE = ~_BLOCK_START + Group(OneOrMore(_INLINE)) + _NEWLINE
_PARAGRAPH = OneOrMore(_PARAGRAPH_LINE).set_parse_action(
    lambda t: Paragraph(lines=[list(line) for line in t])
)

_BLOCK = _HEADING | _HORIZONTAL_RULE | _CODE_BLOCK | _BLOCKQUOTE | _LIST_ITEM | _PARAGRAPH
_DOCUMENT = ZeroOrMore(Suppress(_BLANK_LINE) | _BLOCK) + StringEnd().leave_whitespace()
_DOCUMENT.parse_with_tabs()


def _make_list_item(marker, content: ParseResults) -> ListItem:
    symbol = marker.group("marker")
    list_type = ListType.UNORDERED if symbol in _UNORDERED_MARKERS else ListType.ORDERED
    return ListItem(
        indent=len(marker.group("indent")),
        list_type=list_type,
        content=list(content),
    )


def parse_markdown(text: str) -> Document:
    """Parse markdown text into a ``Document`` tree.

    Line endings are normalized to ``\\n`` and a final newline is added when
    missing.

    Raises:
        ParseError: If the text does not match the grammar. The description
            names what was expected, what was found and where.
    """
    source = _normalize_newlines(text)
    try:
        tokens = _DOCUMENT.parse_string(source)
    except ParseBaseException as exc:
        raise ParseError(str(exc), line=exc.lineno, column=exc.col) from exc

    document = Document(blocks=list(tokens))
    logger.debug("Parsed %d blocks from %d characters", len(document.blocks), len(source))
    return document


def _normalize_newlines(text: str) -> str:
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    if text and not text.endswith("\n"):
        text += "\n"
    return text
