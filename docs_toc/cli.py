"""Cyclopts CLI entrypoint that regenerates the documentation TOC indexes.

The ``extract-tocs`` console script needs no arguments: run from the site's
project root it processes every built-in documentation family (manual
versions, React versions and community docs) and writes one JSON index per
set under ``index_data/``. The optional flags exist for CI and local
debugging and can also be supplied as ``INPUT_*`` environment variables.

Examples
--------
Rebuild every index from the project root:

>>> from docs_toc.cli import main
>>> main()  # doctest: +SKIP

Rebuild only the v12 manual index:

>>> from docs_toc.cli import app
>>> app(["--target", "manual-v12.0.0"])  # doctest: +SKIP
"""

from __future__ import annotations

import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .builder import TocIndexBuilder, build_all
from .config import default_toc_config, load_toc_config

app = App(name="extract-tocs", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.default
def extract(
    *,
    root: typ.Annotated[
        Path,
        Parameter(help="Project root holding pages/ and data/", env_var="INPUT_ROOT"),
    ] = Path(),
    config: typ.Annotated[
        Path | None,
        Parameter(
            help="Optional YAML file overriding the built-in families",
            env_var="INPUT_CONFIG",
        ),
    ] = None,
    target: typ.Annotated[
        str | None,
        Parameter(
            help="Only build this target (e.g. manual-v12.0.0)", env_var="INPUT_TARGET"
        ),
    ] = None,
) -> None:
    """Extract TOC indexes for the configured documentation sets.

    Parameters
    ----------
    root : Path, optional
        Project root that relative paths resolve against; defaults to the
        current directory.
    config : Path or None, optional
        YAML configuration to use instead of the built-in families. Relative
        paths inside it resolve against ``root``.
    target : str or None, optional
        Name of a single target to rebuild; all targets are built when
        ``None``.

    Returns
    -------
    None
        Writes the JSON indexes and prints each written path.
    """
    if config is not None:
        toc_config = load_toc_config(config, root=root)
    else:
        toc_config = default_toc_config(root)

    if target:
        written = [TocIndexBuilder(toc_config.get_target(target)).run()]
    else:
        written = build_all(toc_config)
    for path in written:
        print(f"wrote {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application behind the ``extract-tocs`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
