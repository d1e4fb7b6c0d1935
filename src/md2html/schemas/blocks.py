"""Block node models and the document root."""

from __future__ import annotations

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from md2html.schemas.inline import Inline


class ListType(str, Enum):
    """Kind of list a list item marker opens."""

    ORDERED = "ordered"
    UNORDERED = "unordered"

    @property
    def tag(self) -> str:
        return "ol" if self is ListType.ORDERED else "ul"


class BlockNode(BaseModel):
    """Base class for top-level structural nodes."""

    model_config = ConfigDict(frozen=True)


class Heading(BlockNode):
    """A heading; ``level`` is the number of ``#`` markers, unbounded."""

    kind: Literal["heading"] = "heading"
    level: int = Field(..., ge=1)
    content: list[Inline] = Field(default_factory=list)


class Paragraph(BlockNode):
    """Consecutive text lines, each one a sequence of inline nodes."""

    kind: Literal["paragraph"] = "paragraph"
    lines: list[list[Inline]] = Field(default_factory=list)


class CodeBlock(BlockNode):
    kind: Literal["code_block"] = "code_block"
    text: str = ""


class Blockquote(BlockNode):
    """Quoted lines with their ``>`` markers stripped, kept as raw text."""

    kind: Literal["blockquote"] = "blockquote"
    text: str = ""


class ListItem(BlockNode):
    """One list entry; nesting comes from ``indent`` alone."""

    kind: Literal["list_item"] = "list_item"
    indent: int = Field(0, ge=0)
    list_type: ListType = ListType.UNORDERED
    content: list[Inline] = Field(default_factory=list)


class HorizontalRule(BlockNode):
    kind: Literal["horizontal_rule"] = "horizontal_rule"


Block = Annotated[
    Union[Heading, Paragraph, CodeBlock, Blockquote, ListItem, HorizontalRule],
    Field(discriminator="kind"),
]


class Document(BaseModel):
    """Parsed markdown document: blocks in source order."""

    model_config = ConfigDict(frozen=True)

    blocks: list[Block] = Field(default_factory=list)
