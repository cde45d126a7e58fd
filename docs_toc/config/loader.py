"""Build TOC configuration from the built-in families or a YAML file."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from docs_toc._constants import DEFAULT_FAMILIES, DEFAULT_PAGES_ROOT, DOC_EXTENSIONS

from .models import TocConfig, TocConfigError, TocTarget

_REQUIRED_FIELDS = ("source_dir", "sidebar", "output")


def version_key(version: str) -> str:
    """Return ``version`` with dots stripped, as used in sidebar/output names.

    >>> version_key("v12.0.0")
    'v1200'
    """
    return version.replace(".", "")


def default_toc_config(root: Path) -> TocConfig:
    """Return the built-in manual, react and community targets under ``root``.

    Targets keep the family order manual, react, community and, within a
    family, the declared version order.
    """
    return _build_config(
        {"pages_root": DEFAULT_PAGES_ROOT, "families": DEFAULT_FAMILIES}, root=root
    )


def load_toc_config(path: Path, *, root: Path | None = None) -> TocConfig:
    """Load TOC targets from a YAML file.

    Parameters
    ----------
    path : Path
        YAML file with an optional ``pages_root`` and a ``families`` mapping.
        Each family defines ``source_dir``, ``sidebar`` and ``output`` path
        templates plus optional ``versions`` and ``extensions``.
    root : Path, optional
        Base for relative paths; defaults to the directory holding ``path``.

    Returns
    -------
    TocConfig
        Targets in file order.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist.
    TocConfigError
        If no families are defined or a family lacks a required field.

    Examples
    --------
    >>> from pathlib import Path
    >>> config = load_toc_config(Path("config/tocs.yaml"))  # doctest: +SKIP
    >>> [target.name for target in config.targets]  # doctest: +SKIP
    ['manual-v12.0.0', 'community']
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TocConfigError(msg)
    return _build_config(loaded, root=root if root is not None else path.parent)


def _build_config(raw: typ.Mapping[str, typ.Any], *, root: Path) -> TocConfig:
    pages_root = root / str(raw.get("pages_root") or DEFAULT_PAGES_ROOT)
    families = raw.get("families") or {}
    if not isinstance(families, dict) or not families:
        msg = "No documentation families defined in TOC configuration."
        raise TocConfigError(msg)

    targets: list[TocTarget] = []
    for family, payload in families.items():
        match payload:
            case dict():
                targets.extend(
                    _build_family_targets(
                        str(family), payload, root=root, pages_root=pages_root
                    )
                )
            case _:
                msg = f"Family '{family}' must be a mapping."
                raise TocConfigError(msg)
    return TocConfig(targets=targets)


def _build_family_targets(
    family: str,
    payload: typ.Mapping[str, typ.Any],
    *,
    root: Path,
    pages_root: Path,
) -> list[TocTarget]:
    """Expand one family entry into a target per configured version."""
    missing = [field for field in _REQUIRED_FIELDS if not payload.get(field)]
    if missing:
        msg = f"Family '{family}' is missing {', '.join(repr(f) for f in missing)}."
        raise TocConfigError(msg)

    extensions = tuple(payload.get("extensions") or DOC_EXTENSIONS)
    versions = payload.get("versions")
    if versions is None:
        return [
            _build_target(family, None, payload, root, pages_root, extensions)
        ]
    if not isinstance(versions, list):
        msg = f"Family '{family}' versions must be a list."
        raise TocConfigError(msg)
    return [
        _build_target(family, str(version), payload, root, pages_root, extensions)
        for version in versions
    ]


def _build_target(
    family: str,
    version: str | None,
    payload: typ.Mapping[str, typ.Any],
    root: Path,
    pages_root: Path,
    extensions: tuple[str, ...],
) -> TocTarget:
    """Resolve the path templates of ``payload`` for a single version."""

    def _resolve(field: str) -> Path:
        template = str(payload[field])
        if version is not None:
            template = template.format(version=version, key=version_key(version))
        return root / template

    return TocTarget(
        family=family,
        version=version,
        source_dir=_resolve("source_dir"),
        sidebar_path=_resolve("sidebar"),
        output_path=_resolve("output"),
        pages_root=pages_root,
        extensions=extensions,
    )


__all__ = ["default_toc_config", "load_toc_config", "version_key"]
