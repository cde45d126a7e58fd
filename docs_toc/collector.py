"""Collect candidate source documents for one documentation set."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path


def collect_files(directory: Path, extensions: cabc.Iterable[str]) -> list[Path]:
    """Return files directly inside ``directory`` with one of ``extensions``.

    Parameters
    ----------
    directory : Path
        Folder holding the documents of a single version or family.
    extensions : Iterable[str]
        Accepted suffixes including the dot, e.g. ``(".md", ".mdx")``.

    Returns
    -------
    list[Path]
        Matching paths sorted by name. Ordering is imposed later by the
        sidebar, so callers must not depend on it.

    Raises
    ------
    FileNotFoundError
        If ``directory`` does not exist or is not a directory.
    """
    if not directory.is_dir():
        msg = f"Source directory '{directory}' not found."
        raise FileNotFoundError(msg)
    accepted = {ext.lower() for ext in extensions}
    return sorted(
        path
        for path in directory.iterdir()
        if path.is_file() and path.suffix.lower() in accepted
    )


__all__ = ["collect_files"]
