"""Extract table-of-contents indexes from versioned documentation sources.

This package powers the ``extract-tocs`` command that turns the manual, React
and community markdown trees into JSON lookups keyed by router pathname. The
page components read those files to render navigation and header anchors.

Exports
-------
- ``app``: Cyclopts application behind the command.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from docs_toc import main
>>> main()  # doctest: +SKIP
>>> from docs_toc import app
>>> app.name  # doctest: +SKIP
("extract-tocs",)
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
