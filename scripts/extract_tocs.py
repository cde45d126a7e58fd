#!/usr/bin/env -S uv run python
# /// script
# requires-python = ">=3.11"
# dependencies = [
#   "cyclopts>=2.9",
#   "Markdown>=3.5",
#   "ruamel.yaml>=0.18",
# ]
# ///

"""Regenerate every documentation TOC index from the project root."""

from __future__ import annotations

from docs_toc.cli import main

if __name__ == "__main__":
    main()
