"""Tests for the document renderer."""

from __future__ import annotations

import logging

import pytest
from bs4 import BeautifulSoup

from md2html.exceptions import ParseError
from md2html.grammar import parse_markdown
from md2html.options import RenderOptions
from md2html.renderer import markdown_to_html, render_document, render_fragment
from md2html.schemas import Document

SAMPLE = """\
# Shopping

Things to buy **this *week***:

- fruit
  - apples
  - pears
    1. green
  - plums
- bread

> keep *receipts*

```
total = a + b
```

---

See [the shop](https://shop.example "Shop") or ![map](map.png).
"""


def _body(html: str) -> str:
    start = html.index("<body>\n") + len("<body>\n")
    end = html.index("</body>")
    return html[start:end]


class TestDocumentSkeleton:
    """Tests for the fixed HTML skeleton."""

    def test_exact_document(self, options: RenderOptions) -> None:
        html = markdown_to_html("# Hello", options)

        assert html == (
            "<!DOCTYPE html>\n"
            "<html>\n"
            "<head>\n"
            '<meta charset="utf-8">\n'
            "<title>Notes</title>\n"
            "</head>\n"
            "<body>\n"
            "<h1>Hello</h1>\n"
            "</body>\n"
            "</html>\n"
        )

    def test_empty_input_still_has_skeleton(self, options: RenderOptions) -> None:
        html = markdown_to_html("", options)

        assert _body(html) == ""
        assert html.startswith("<!DOCTYPE html>\n")
        assert html.endswith("</body>\n</html>\n")

    def test_title_is_escaped(self) -> None:
        html = render_document(Document(), RenderOptions(title="A <b> & C"))

        assert "<title>A &lt;b&gt; &amp; C</title>" in html


class TestBlockDispatch:
    """Tests for block ordering and dispatch."""

    def test_blocks_render_in_source_order(self, options: RenderOptions) -> None:
        html = markdown_to_html("# A\n\npara\n\n---\n\n## B\n", options)

        assert _body(html) == "<h1>A</h1>\npara\n<hr/>\n<h2>B</h2>\n"

    def test_consecutive_items_form_one_list(self, options: RenderOptions) -> None:
        fragment = render_fragment(parse_markdown("- a\n\n- b\n"), options)

        assert fragment == "<ul>\n  <li>a</li>\n  <li>b</li>\n</ul>\n"

    def test_paragraph_splits_lists(self, options: RenderOptions) -> None:
        fragment = render_fragment(parse_markdown("- a\n\ntext\n\n- b\n"), options)

        assert fragment == (
            "<ul>\n  <li>a</li>\n</ul>\n"
            "text\n"
            "<ul>\n  <li>b</li>\n</ul>\n"
        )

    def test_heading_beyond_six_unclamped(self, raw_options: RenderOptions) -> None:
        html = markdown_to_html("####### deep", raw_options)

        assert "<h7>deep</h7>\n" in html

    def test_heading_beyond_six_clamped(self, options: RenderOptions) -> None:
        html = markdown_to_html("####### deep", options)

        assert "<h6>deep</h6>\n" in html

    def test_bold_italic_from_markdown(self, options: RenderOptions) -> None:
        html = markdown_to_html("***bold italic***", options)

        assert "<strong><em>bold italic</em></strong>\n" in html

    def test_image_without_title_attribute(self, options: RenderOptions) -> None:
        html = markdown_to_html('![logo](logo.png "The logo")', options)

        assert '<img src="logo.png" alt="logo"/>' in html
        assert 'title="' not in html

    def test_code_block_script_verbatim_when_unescaped(
        self, raw_options: RenderOptions
    ) -> None:
        """Raw mode keeps the historical no-escaping behavior for code blocks."""
        html = markdown_to_html("```\n<script>alert(1)</script>\n```\n", raw_options)

        assert "<code><script>alert(1)</script></code></pre>" in html

    def test_code_block_script_escaped_by_default(self, options: RenderOptions) -> None:
        html = markdown_to_html("```\n<script>alert(1)</script>\n```\n", options)

        assert "<code>&lt;script&gt;alert(1)&lt;/script&gt;</code>" in html
        assert "<script>" not in html


class TestParseFailure:
    """Tests for the parse-error path."""

    def test_invalid_input_renders_error_document(self, options: RenderOptions) -> None:
        """A syntax error is reported inside <pre>, never raised."""
        html = markdown_to_html("# Title\n\n```\nnever closed\n", options)

        body = _body(html)
        assert body.startswith("<pre>Parse error: ")
        assert body.endswith("</pre>\n")
        description = body[len("<pre>Parse error: ") : -len("</pre>\n")]
        assert description.strip()
        assert html.startswith("<!DOCTYPE html>\n<html>\n<head>\n")
        assert html.endswith("</body>\n</html>\n")

    def test_error_document_is_well_formed(self, options: RenderOptions) -> None:
        html = markdown_to_html("```", options)

        soup = BeautifulSoup(html, "lxml")
        assert soup.title.get_text() == "Notes"
        pre = soup.body.find("pre")
        assert pre is not None
        assert pre.get_text().startswith("Parse error: ")
        assert len(pre.get_text()) > len("Parse error: ")

    def test_render_document_accepts_error_result(self, options: RenderOptions) -> None:
        error = ParseError("Expected <x>, found end of text", line=2, column=1)

        html = render_document(error, options)

        assert _body(html) == "<pre>Parse error: Expected &lt;x&gt;, found end of text</pre>\n"

    def test_parse_error_is_logged(
        self, options: RenderOptions, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="md2html.renderer"):
            markdown_to_html("```\n", options)

        assert "Rendering parse error" in caplog.text


class TestFullDocument:
    """End-to-end rendering of a realistic document."""

    def test_rendering_is_deterministic(self, options: RenderOptions) -> None:
        document = parse_markdown(SAMPLE)
        snapshot = document.model_copy(deep=True)

        first = render_document(document, options)
        second = render_document(document, options)

        assert first == second
        assert document == snapshot

    def test_structure(self, options: RenderOptions) -> None:
        html = markdown_to_html(SAMPLE, options)
        soup = BeautifulSoup(html, "lxml")

        assert soup.h1.get_text() == "Shopping"
        assert soup.strong.get_text() == "this week"
        assert soup.strong.em.get_text() == "week"
        assert [li.get_text() for li in soup.find_all("li")] == [
            "fruit",
            "apples",
            "pears",
            "green",
            "plums",
            "bread",
        ]
        assert len(soup.find_all("ul")) == 2
        assert len(soup.find_all("ol")) == 1
        assert soup.blockquote.get_text() == "keep *receipts*"
        assert soup.pre.code.get_text() == "total = a + b"
        assert soup.find("hr") is not None
        link = soup.find("a")
        assert link["href"] == "https://shop.example"
        assert link.get_text() == "the shop"
        image = soup.find("img")
        assert image["src"] == "map.png"
        assert image["alt"] == "map"
        assert not image.has_attr("title")

    def test_list_tags_balanced(self, options: RenderOptions) -> None:
        body = _body(markdown_to_html(SAMPLE, options))

        assert body.count("<ul>") == body.count("</ul>") == 2
        assert body.count("<ol>") == body.count("</ol>") == 1
