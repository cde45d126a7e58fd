"""Dataclasses shared by the TOC extraction pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ


@dc.dataclass(frozen=True, slots=True)
class Header:
    """A heading extracted from a document.

    Attributes
    ----------
    level : int
        Heading depth (``1`` for ``#``).
    text : str
        Flattened visible text of the heading.
    """

    level: int
    text: str

    def as_dict(self) -> dict[str, typ.Any]:
        """Return the JSON projection of the header."""
        return {"level": self.level, "text": self.text}


@dc.dataclass(frozen=True, slots=True)
class DocumentRecord:
    """Normalized metadata for one source document.

    Attributes
    ----------
    id : str
        Filename stem, unique within one documentation set.
    title : str
        Resolved display title.
    headers : tuple[Header, ...]
        Headings in document order.
    href : str
        POSIX path relative to the pages root, without extension or leading
        slash.
    category : str or None
        Sidebar category that declares the document, if any.
    """

    id: str
    title: str
    headers: tuple[Header, ...]
    href: str
    category: str | None = None

    @property
    def url_path(self) -> str:
        """Return the router pathname under which the document is served."""
        return "/" + self.href

    def toc_entry(self) -> dict[str, typ.Any]:
        """Return the reduced projection stored in a TOC index.

        The ``category`` key is omitted for uncategorized documents.
        """
        entry: dict[str, typ.Any] = {
            "id": self.id,
            "title": self.title,
            "headers": [header.as_dict() for header in self.headers],
        }
        if self.category is not None:
            entry["category"] = self.category
        return entry


__all__ = ["DocumentRecord", "Header"]
