"""Turn one source document into a :class:`~docs_toc.models.DocumentRecord`."""

from __future__ import annotations

import os
import typing as typ
from pathlib import Path

from .markdown_parser import parse_document
from .models import DocumentRecord

if typ.TYPE_CHECKING:
    from .sidebar import SidebarSpec


def process_file(
    path: Path, sidebar: SidebarSpec, *, pages_root: Path
) -> DocumentRecord:
    """Read ``path`` and build its document record.

    Parameters
    ----------
    path : Path
        Source markdown, MDX, or legacy JS page.
    sidebar : SidebarSpec
        Sidebar of the documentation set, used for the category lookup.
    pages_root : Path
        Root the router serves pages from; ``href`` is relative to it.

    Returns
    -------
    DocumentRecord
        Record titled by front matter, then first heading, then filename stem.
    """
    content = path.read_text(encoding="utf-8-sig")
    parsed = parse_document(content)
    document_id = path.stem
    return DocumentRecord(
        id=document_id,
        title=resolve_title(
            parsed.matter.get("title"), parsed.main_header, document_id
        ),
        headers=tuple(parsed.headers),
        href=_build_href(path, pages_root),
        category=sidebar.category_of(document_id),
    )


def resolve_title(
    front_matter_title: typ.Any, main_header: str | None, document_id: str
) -> str:
    """Return the first non-empty of the front-matter title, main header, or id."""
    if front_matter_title:
        return str(front_matter_title)
    return main_header or document_id


def _build_href(path: Path, pages_root: Path) -> str:
    """Return the extensionless POSIX path of ``path`` relative to ``pages_root``."""
    # relpath tolerates files outside the root where Path.relative_to raises
    relative = Path(os.path.relpath(path.with_suffix(""), start=pages_root))
    return relative.as_posix()


__all__ = ["process_file", "resolve_title"]
