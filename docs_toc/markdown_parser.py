r"""Extract front matter and heading metadata from markdown documents.

Python-Markdown builds the element tree; a tree processor registered by
:class:`HeaderCollectorExtension` walks every ``h1``-``h6`` element in document
order and flattens its inline children into plain text. Front matter is a
leading ``---`` fenced YAML block parsed with ruamel.yaml before the body is
handed to Markdown.

Example
-------
>>> from docs_toc.markdown_parser import parse_document
>>> doc = parse_document("---\ntitle: Guide\n---\n# [Intro](#intro)\n")
>>> doc.matter["title"], doc.main_header
('Guide', 'Intro')
>>> doc.headers[0].level
1
"""

from __future__ import annotations

import dataclasses as dc
import html
import re
import typing as typ

from markdown import Markdown, util
from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor
from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .models import Header

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element
else:  # pragma: no cover - type-checking fallback
    Element = typ.Any

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(?P<body>.*?)^---[ \t]*\r?$\n?", re.MULTILINE | re.DOTALL
)
HEADING_TAGS = {"h1": 1, "h2": 2, "h3": 3, "h4": 4, "h5": 5, "h6": 6}
ESCAPED_CHAR_PATTERN = re.compile(rf"{util.STX}(\d+){util.ETX}")
STASH_PLACEHOLDER_PATTERN = re.compile(rf"{util.STX}wzxhzdk:(\d+){util.ETX}")


class FrontMatterError(ValueError):
    """Raised when a document's front matter cannot be parsed."""


@dc.dataclass(slots=True)
class ParsedDocument:
    """Metadata extracted from one markdown document.

    Attributes
    ----------
    matter : dict[str, Any]
        Front-matter fields; empty when the document has none.
    headers : list[Header]
        Every heading in document order.
    main_header : str or None
        Text of the first heading, or ``None`` for documents without headings.
    """

    matter: dict[str, typ.Any]
    headers: list[Header]
    main_header: str | None


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Return the parsed front matter and the remaining markdown body.

    A leading byte-order mark is dropped before the fence is matched.

    Raises
    ------
    FrontMatterError
        If the fenced block is not valid YAML or is not a mapping.
    """
    text = text.removeprefix("\ufeff")
    match = FRONT_MATTER_PATTERN.match(text)
    if not match:
        return {}, text

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(match.group("body"))
    except YAMLError as exc:
        msg = f"Front matter is not valid YAML: {exc}"
        raise FrontMatterError(msg) from exc
    if loaded is None:
        loaded = {}
    if not isinstance(loaded, dict):
        msg = "Front matter must be a mapping."
        raise FrontMatterError(msg)
    return dict(loaded), text[match.end() :]


def parse_document(text: str) -> ParsedDocument:
    """Parse ``text`` into front matter, headers, and the main header."""
    matter, body = split_front_matter(text)
    collector = HeaderCollectorExtension()
    md = Markdown(extensions=["fenced_code", "tables", "sane_lists", collector])
    md.convert(body)
    headers = collector.headers
    main_header = headers[0].text if headers else None
    return ParsedDocument(matter=matter, headers=headers, main_header=main_header)


def collapse_heading_text(element: Element, md: Markdown | None = None) -> str:
    """Flatten a heading element into its visible text.

    Link targets are ignored and only their inner text is kept. Elements
    without text (images, empty wrappers) contribute nothing, and so does
    raw inline HTML stashed by Markdown. ``md`` resolves stashed entities;
    without it every stashed fragment is dropped.
    """
    return _collapse(element, md).strip()


def _collapse(element: Element, md: Markdown | None) -> str:
    parts = [_element_text(element, md)]
    for child in element:
        parts.append(_collapse(child, md))
        parts.append(_resolve_placeholders(child.tail or "", md))
    return "".join(parts)


def _element_text(element: Element, md: Markdown | None) -> str:
    text = _resolve_placeholders(element.text or "", md)
    if element.tag == "code":
        # code spans arrive with &, < and > already escaped
        return html.unescape(text)
    return text


def _resolve_placeholders(text: str, md: Markdown | None) -> str:
    """Replace Markdown's escape and stash placeholders with literal text."""
    if not text:
        return ""

    def _stashed(match: re.Match[str]) -> str:
        if md is None:
            return ""
        raw = str(md.htmlStash.rawHtmlBlocks[int(match.group(1))])
        if raw.lstrip().startswith("<"):
            return ""
        return html.unescape(raw)

    text = STASH_PLACEHOLDER_PATTERN.sub(_stashed, text)
    return ESCAPED_CHAR_PATTERN.sub(lambda match: chr(int(match.group(1))), text)


class HeaderCollectorExtension(Extension):
    """Record every heading of a converted document as :class:`Header` entries.

    The collected headers are available on :attr:`headers` after
    ``Markdown.convert`` returns. Each conversion replaces the previous list.
    """

    def __init__(self, **kwargs: typ.Any) -> None:
        super().__init__(**kwargs)
        self.headers: list[Header] = []

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the header-collecting treeprocessor on the Markdown instance."""
        processor = HeaderCollectorTreeprocessor(md, self)
        # after inline patterns (20) and prettify (10), before unescape (0)
        md.treeprocessors.register(processor, "docs_toc_headers", 5)


class HeaderCollectorTreeprocessor(Treeprocessor):
    """Walk the element tree and collect heading text in document order."""

    def __init__(self, md: Markdown, extension: HeaderCollectorExtension) -> None:
        super().__init__(md)
        self.extension = extension

    def run(self, root: Element) -> None:
        """Store collapsed headings on the owning extension."""
        headers: list[Header] = []
        for element in root.iter():
            level = HEADING_TAGS.get(element.tag)
            if level is None:
                continue
            text = collapse_heading_text(element, self.md)
            headers.append(Header(level=level, text=text))
        self.extension.headers = headers


__all__ = [
    "FrontMatterError",
    "HeaderCollectorExtension",
    "ParsedDocument",
    "collapse_heading_text",
    "parse_document",
    "split_front_matter",
]
