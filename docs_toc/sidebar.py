"""Sidebar ordering files and the resolver that orders documents by them.

A sidebar file is a JSON object mapping category names to ordered lists of
document ids (filename stems). Its declaration order is the published
navigation order, so TOC output follows it instead of filesystem order.

Example
-------
>>> from pathlib import Path
>>> from docs_toc.sidebar import SidebarSpec, order_files
>>> sidebar = SidebarSpec.from_mapping({"Intro": ["overview", "install"]})
>>> sidebar.category_of("install")
'Intro'
>>> order_files([Path("install.mdx"), Path("overview.md")], sidebar.document_ids())
[PosixPath('overview.md'), PosixPath('install.mdx')]
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import json
import types
import typing as typ

if typ.TYPE_CHECKING:
    from pathlib import Path


class SidebarError(ValueError):
    """Raised when a sidebar file is malformed."""


class MissingDocumentError(ValueError):
    """Raised when a sidebar declares a document with no source file."""


@dc.dataclass(frozen=True, slots=True)
class SidebarCategory:
    """A named sidebar group and its ordered document ids."""

    name: str
    document_ids: tuple[str, ...]


@dc.dataclass(frozen=True, slots=True)
class SidebarSpec:
    """Ordered association of sidebar categories to document ids.

    The id -> category index is built once at construction; document ids must
    be unique across all categories.
    """

    categories: tuple[SidebarCategory, ...] = ()
    _index: cabc.Mapping[str, str] = dc.field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        index: dict[str, str] = {}
        for category in self.categories:
            for document_id in category.document_ids:
                if document_id in index:
                    msg = (
                        f"Document '{document_id}' is declared in both "
                        f"'{index[document_id]}' and '{category.name}'."
                    )
                    raise SidebarError(msg)
                index[document_id] = category.name
        object.__setattr__(self, "_index", types.MappingProxyType(index))

    @classmethod
    def from_mapping(cls, raw: typ.Any) -> SidebarSpec:
        """Build a spec from a decoded sidebar JSON object.

        Raises
        ------
        SidebarError
            If ``raw`` is not a mapping of category names to lists of strings,
            or if an id appears more than once.
        """
        if not isinstance(raw, cabc.Mapping):
            msg = "Sidebar must be a JSON object mapping categories to document ids."
            raise SidebarError(msg)
        categories: list[SidebarCategory] = []
        for name, items in raw.items():
            if not isinstance(items, list):
                msg = f"Sidebar category '{name}' must be a list of document ids."
                raise SidebarError(msg)
            if not all(isinstance(item, str) for item in items):
                msg = f"Sidebar category '{name}' contains a non-string document id."
                raise SidebarError(msg)
            categories.append(
                SidebarCategory(name=str(name), document_ids=tuple(items))
            )
        return cls(categories=tuple(categories))

    def document_ids(self) -> list[str]:
        """Return every document id flattened in declaration order."""
        return [
            document_id
            for category in self.categories
            for document_id in category.document_ids
        ]

    def category_of(self, document_id: str) -> str | None:
        """Return the category declaring ``document_id``, or ``None``."""
        return self._index.get(document_id)


def load_sidebar(path: Path) -> SidebarSpec:
    """Read and validate a sidebar JSON file.

    Raises
    ------
    FileNotFoundError
        If ``path`` does not exist.
    SidebarError
        If the file is not valid JSON or does not describe a sidebar.
    """
    if not path.exists():
        msg = f"Sidebar file '{path}' not found."
        raise FileNotFoundError(msg)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"Sidebar file '{path}' is not valid JSON: {exc}"
        raise SidebarError(msg) from exc
    return SidebarSpec.from_mapping(raw)


def order_files(
    paths: cabc.Iterable[Path], document_ids: cabc.Sequence[str]
) -> list[Path]:
    """Order ``paths`` so that position ``i`` matches ``document_ids[i]``.

    Files whose stem is not declared are ignored. When several files share a
    stem, the last one seen wins.

    Raises
    ------
    MissingDocumentError
        For the first declared id, in declaration order, without a file.
    """
    by_stem = {path.stem: path for path in paths}
    ordered: list[Path] = []
    for document_id in document_ids:
        path = by_stem.get(document_id)
        if path is None:
            msg = (
                f'Cannot find file for "{document_id}". '
                "Does it exist in the pages folder?"
            )
            raise MissingDocumentError(msg)
        ordered.append(path)
    return ordered


__all__ = [
    "MissingDocumentError",
    "SidebarCategory",
    "SidebarError",
    "SidebarSpec",
    "load_sidebar",
    "order_files",
]
