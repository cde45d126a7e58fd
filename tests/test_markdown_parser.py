"""Unit tests for front-matter and heading extraction.

These tests drive :func:`docs_toc.markdown_parser.parse_document` with small
markdown snippets and check how front matter is split off, which headings are
collected, and how inline children of a heading collapse to plain text.
"""

from __future__ import annotations

from textwrap import dedent
from xml.etree.ElementTree import Element, SubElement

import pytest

from docs_toc.markdown_parser import (
    FrontMatterError,
    collapse_heading_text,
    parse_document,
    split_front_matter,
)
from docs_toc.models import Header


def test_plain_heading_collapses_to_literal_text() -> None:
    """A heading without inline markup keeps its text unchanged."""
    doc = parse_document("# Getting Started\n")
    assert doc.headers == [Header(level=1, text="Getting Started")], (
        f"expected a single level-1 header, got {doc.headers!r}"
    )


def test_link_wrapping_formatted_text_collapses_in_order() -> None:
    """Link targets are ignored while all descendant text is concatenated."""
    doc = parse_document(
        "## Use [**strict** mode](https://example.invalid/strict) now\n"
    )
    assert doc.headers[0].text == "Use strict mode now", (
        f"expected link text flattened in order, got {doc.headers[0].text!r}"
    )
    assert "example.invalid" not in doc.headers[0].text, "link target must not leak"


def test_inline_code_keeps_literal_characters() -> None:
    """Code spans contribute their source text, not escaped entities."""
    doc = parse_document("### The `<div>` & `a && b` forms\n")
    assert doc.headers[0].text == "The <div> & a && b forms", (
        f"unexpected collapsed code heading {doc.headers[0].text!r}"
    )


def test_escapes_and_entities_resolve_to_characters() -> None:
    """Backslash escapes and HTML entities become their literal characters."""
    doc = parse_document("## 1\\. Tom &amp; Jerry\n")
    assert doc.headers[0].text == "1. Tom & Jerry", (
        f"expected escapes resolved, got {doc.headers[0].text!r}"
    )


def test_inline_html_contributes_nothing() -> None:
    """Raw inline HTML (e.g. MDX components) is dropped from header text."""
    doc = parse_document("## Setup <Badge />\n")
    assert doc.headers[0].text == "Setup", (
        f"expected inline HTML dropped, got {doc.headers[0].text!r}"
    )


def test_collects_all_levels_in_document_order() -> None:
    """Every heading level is collected, and the first becomes the main header."""
    markdown = dedent(
        """
        # Overview

        Intro text.

        ## Install

        ### From source

        Setext Heading
        --------------
        """
    )
    doc = parse_document(markdown)
    assert [(h.level, h.text) for h in doc.headers] == [
        (1, "Overview"),
        (2, "Install"),
        (3, "From source"),
        (2, "Setext Heading"),
    ], f"unexpected headers {doc.headers!r}"
    assert doc.main_header == "Overview", (
        f"expected main header 'Overview', got {doc.main_header!r}"
    )


def test_fenced_code_comments_are_not_headings() -> None:
    """Shell comments inside fenced code must not appear as headers."""
    markdown = "## Run\n\n```sh\n# not a heading\nnpm run build\n```\n"
    doc = parse_document(markdown)
    assert [h.text for h in doc.headers] == ["Run"], (
        f"expected only the real heading, got {doc.headers!r}"
    )


def test_document_without_headings_has_no_main_header() -> None:
    """Legacy pages without headings yield no headers and no main header."""
    doc = parse_document("export default function Page() {}\n")
    assert doc.headers == [], f"expected no headers, got {doc.headers!r}"
    assert doc.main_header is None, "expected main_header to be None"


def test_front_matter_is_parsed_and_removed_from_body() -> None:
    """The leading YAML block populates matter and is not parsed as markdown."""
    doc = parse_document("---\ntitle: Installation Guide\n---\n\n# Install\n")
    assert doc.matter == {"title": "Installation Guide"}, (
        f"unexpected front matter {doc.matter!r}"
    )
    assert [h.text for h in doc.headers] == ["Install"], (
        f"front matter must not produce headers, got {doc.headers!r}"
    )


def test_empty_front_matter_yields_empty_mapping() -> None:
    """An empty fenced block parses to an empty mapping."""
    matter, body = split_front_matter("---\n---\n# Title\n")
    assert matter == {}, f"expected empty matter, got {matter!r}"
    assert body == "# Title\n", f"unexpected body {body!r}"


def test_text_without_front_matter_is_returned_unchanged() -> None:
    """Documents without a leading fence keep their full body."""
    text = "# Title\n\n---\n\nAfter a thematic break.\n"
    matter, body = split_front_matter(text)
    assert matter == {}, f"expected no front matter, got {matter!r}"
    assert body == text, "expected body to be untouched"


def test_crlf_front_matter_is_parsed() -> None:
    """Windows line endings around the fences still delimit front matter."""
    doc = parse_document("---\r\ntitle: Guide\r\n---\r\n\r\n# Intro\r\n")
    assert doc.matter == {"title": "Guide"}, (
        f"expected CRLF front matter parsed, got {doc.matter!r}"
    )
    assert [h.text for h in doc.headers] == ["Intro"], (
        f"front matter must not produce headers, got {doc.headers!r}"
    )


def test_byte_order_mark_before_front_matter_is_ignored() -> None:
    """A leading BOM does not hide the opening fence."""
    matter, body = split_front_matter("\ufeff---\ntitle: Guide\n---\n# Intro\n")
    assert matter == {"title": "Guide"}, f"unexpected front matter {matter!r}"
    assert body == "# Intro\n", f"unexpected body {body!r}"


@pytest.mark.parametrize(
    "text",
    [
        "---\ntitle: [unclosed\n---\n# T\n",
        "---\n- just\n- a list\n---\n# T\n",
    ],
    ids=["invalid-yaml", "non-mapping"],
)
def test_malformed_front_matter_raises(text: str) -> None:
    """Broken or non-mapping front matter is a fatal authoring error."""
    with pytest.raises(FrontMatterError):
        parse_document(text)


def test_collapse_handles_bare_element_trees() -> None:
    """Elements without text contribute nothing; tails keep their position."""
    heading = Element("h2")
    heading.text = "Intro "
    link = SubElement(heading, "a", href="#anchor")
    emphasis = SubElement(link, "em")
    emphasis.text = "nested"
    link.tail = " and "
    SubElement(heading, "img", src="icon.png")
    heading[-1].tail = "more"
    assert collapse_heading_text(heading) == "Intro nested and more", (
        f"unexpected collapsed text {collapse_heading_text(heading)!r}"
    )
