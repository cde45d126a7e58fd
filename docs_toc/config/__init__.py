"""Describe which documentation sets get a TOC index and where files live.

The built-in configuration enumerates the manual, React and community
documentation families by naming convention; :func:`load_toc_config` reads
the same structure from YAML when a project needs other paths.

Examples
--------
>>> from pathlib import Path
>>> from docs_toc.config import default_toc_config
>>> config = default_toc_config(Path("."))
>>> config.get_target("manual-v12.0.0").sidebar_path.as_posix()
'data/sidebar_manual_v1200.json'
"""

from .loader import default_toc_config, load_toc_config, version_key
from .models import TocConfig, TocConfigError, TocTarget

__all__ = [
    "TocConfig",
    "TocConfigError",
    "TocTarget",
    "default_toc_config",
    "load_toc_config",
    "version_key",
]
