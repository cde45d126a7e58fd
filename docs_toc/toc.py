"""Assemble document records into the TOC lookup and persist it as JSON.

The TOC maps router pathnames (``"/" + href``) to the metadata the page
components need for navigation: id, title, headers and category.
"""

from __future__ import annotations

import json
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from .models import DocumentRecord

TocIndex = dict[str, dict[str, typ.Any]]


def create_toc(records: cabc.Iterable[DocumentRecord]) -> TocIndex:
    """Return the TOC mapping for ``records``.

    Entries are collected as ordered pairs first; a later record with the same
    href replaces an earlier one.
    """
    pairs = [(record.url_path, record.toc_entry()) for record in records]
    return dict(pairs)


def dump_toc(toc: TocIndex) -> str:
    """Serialize ``toc`` to compact JSON, keeping non-ASCII text literal."""
    return json.dumps(toc, ensure_ascii=False, separators=(",", ":"))


def write_toc(toc: TocIndex, output_path: Path) -> Path:
    """Write ``toc`` to ``output_path`` as UTF-8 JSON and return the path."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(dump_toc(toc), encoding="utf-8")
    return output_path


__all__ = ["TocIndex", "create_toc", "dump_toc", "write_toc"]
