"""Build and persist TOC indexes for configured documentation sets.

For each :class:`~docs_toc.config.TocTarget` the builder collects the source
files, orders them by the sidebar, extracts per-document metadata and
assembles the lookup keyed by router pathname:

>>> from pathlib import Path
>>> from docs_toc.builder import build_all
>>> from docs_toc.config import default_toc_config
>>> written = build_all(default_toc_config(Path(".")))  # doctest: +SKIP
>>> written[0].as_posix()  # doctest: +SKIP
'index_data/manual_v1200_toc.json'

Any authoring error (missing sidebar, sidebar entry without a file, broken
front matter) propagates and aborts the run. :func:`build_all` builds every
index before writing any of them, so a failed run leaves no new output.
"""

from __future__ import annotations

import typing as typ

from .collector import collect_files
from .processor import process_file
from .sidebar import load_sidebar, order_files
from .toc import TocIndex, create_toc, write_toc

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import TocConfig, TocTarget


class TocIndexBuilder:
    """Produce the TOC index of a single documentation set."""

    def __init__(self, target: TocTarget) -> None:
        self.target = target

    def build(self) -> TocIndex:
        """Return the TOC index for the target without touching the output.

        Raises
        ------
        FileNotFoundError
            If the source directory or sidebar file does not exist.
        SidebarError
            If the sidebar file is malformed.
        MissingDocumentError
            If the sidebar declares a document with no source file.
        FrontMatterError
            If a document's front matter cannot be parsed.
        """
        sidebar = load_sidebar(self.target.sidebar_path)
        files = collect_files(self.target.source_dir, self.target.extensions)
        ordered = order_files(files, sidebar.document_ids())
        records = [
            process_file(path, sidebar, pages_root=self.target.pages_root)
            for path in ordered
        ]
        return create_toc(records)

    def run(self) -> Path:
        """Build the index and write it to the target's output path."""
        return write_toc(self.build(), self.target.output_path)


def build_all(config: TocConfig) -> list[Path]:
    """Build every configured index, then write them in configuration order.

    Returns
    -------
    list[Path]
        Written output paths, one per target.
    """
    built = [(target, TocIndexBuilder(target).build()) for target in config.targets]
    return [write_toc(toc, target.output_path) for target, toc in built]


__all__ = ["TocIndexBuilder", "build_all"]
