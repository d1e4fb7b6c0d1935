"""Inline node models."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field


class InlineNode(BaseModel):
    """Base class for text-level nodes."""

    model_config = ConfigDict(frozen=True)


class Text(InlineNode):
    """Plain text payload inside a bold run or a bold-italic span."""

    kind: Literal["text"] = "text"
    text: str = ""


class Italic(InlineNode):
    kind: Literal["italic"] = "italic"
    text: str = ""


class BoldItalic(InlineNode):
    """``***text***``; ``inner`` is the italic run, or raw text."""

    kind: Literal["bold_italic"] = "bold_italic"
    inner: Italic | Text | None = None


class Bold(InlineNode):
    """``**text**``; may hold nested italic runs between plain text."""

    kind: Literal["bold"] = "bold"
    children: list[Annotated[Union[Italic, Text], Field(discriminator="kind")]] = Field(
        default_factory=list
    )


class InlineCode(InlineNode):
    kind: Literal["code"] = "code"
    text: str = ""


class Strikethrough(InlineNode):
    kind: Literal["strikethrough"] = "strikethrough"
    text: str = ""


class Link(InlineNode):
    """``[title](url "alt")``; ``alt`` is parsed but not rendered."""

    kind: Literal["link"] = "link"
    url: str = ""
    title: str = ""
    alt: str | None = None


class Image(InlineNode):
    """``![alt](url "title")``; ``title`` is parsed but not rendered."""

    kind: Literal["image"] = "image"
    url: str = ""
    alt: str = ""
    title: str | None = None


class Char(InlineNode):
    kind: Literal["char"] = "char"
    text: str


class Whitespace(InlineNode):
    kind: Literal["whitespace"] = "whitespace"
    text: str


Inline = Annotated[
    Union[
        BoldItalic,
        Bold,
        Italic,
        InlineCode,
        Strikethrough,
        Link,
        Image,
        Char,
        Whitespace,
        Text,
    ],
    Field(discriminator="kind"),
]
