"""Typed dataclasses describing which TOC indexes to build."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path


class TocConfigError(ValueError):
    """Raised when the TOC configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True)
class TocTarget:
    """One documentation set (a family at a version) and where its TOC goes.

    Attributes
    ----------
    family : str
        Documentation family, e.g. ``"manual"``, ``"react"`` or ``"community"``.
    version : str or None
        Version label such as ``"v12.0.0"``; ``None`` for unversioned families.
    source_dir : Path
        Directory holding the family's documents for this version.
    sidebar_path : Path
        Sidebar JSON file that orders and categorizes the documents.
    output_path : Path
        Destination of the TOC JSON file.
    pages_root : Path
        Router root; document hrefs are relative to it.
    extensions : tuple[str, ...]
        Accepted source file suffixes.
    """

    family: str
    version: str | None
    source_dir: Path
    sidebar_path: Path
    output_path: Path
    pages_root: Path
    extensions: tuple[str, ...]

    @property
    def name(self) -> str:
        """Return the identifier used to select the target, e.g. ``manual-v12.0.0``."""
        if self.version is None:
            return self.family
        return f"{self.family}-{self.version}"


@dc.dataclass(slots=True)
class TocConfig:
    """Ordered collection of TOC targets processed in a single run."""

    targets: list[TocTarget] = dc.field(default_factory=list)

    def get_target(self, name: str) -> TocTarget:
        """Return the target called ``name``.

        Raises
        ------
        TocConfigError
            If no target with that name is configured.
        """
        for target in self.targets:
            if target.name == name:
                return target
        known = ", ".join(target.name for target in self.targets) or "none"
        msg = f"Unknown TOC target '{name}' (known: {known})."
        raise TocConfigError(msg)


__all__ = ["TocConfig", "TocConfigError", "TocTarget"]
