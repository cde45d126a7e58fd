"""Built-in documentation families and path conventions.

Paths are templates relative to the project root. ``{version}`` is replaced by
the version label and ``{key}`` by the label with its dots stripped, so the
manual ``v12.0.0`` sidebar lives at ``data/sidebar_manual_v1200.json``.

Examples
--------
>>> from docs_toc import _constants
>>> _constants.DEFAULT_FAMILIES["manual"]["sidebar"].format(key="v1200")
'data/sidebar_manual_v1200.json'
>>> _constants.DEFAULT_FAMILIES["community"]["versions"] is None
True
"""

DOC_EXTENSIONS = (".md", ".mdx", ".js")
MARKDOWN_EXTENSIONS = (".md", ".mdx")

MANUAL_VERSIONS = ["v12.0.0", "v11.0.0", "v10.0.0", "v9.0.0", "v8.0.0"]
REACT_VERSIONS = ["latest", "v0.10.0", "v0.11.0"]

DEFAULT_PAGES_ROOT = "pages"

DEFAULT_FAMILIES = {
    "manual": {
        "versions": MANUAL_VERSIONS,
        "source_dir": "pages/docs/manual/{version}",
        "sidebar": "data/sidebar_manual_{key}.json",
        "output": "index_data/manual_{key}_toc.json",
        "extensions": list(DOC_EXTENSIONS),
    },
    "react": {
        "versions": REACT_VERSIONS,
        "source_dir": "pages/docs/react/{version}",
        "sidebar": "data/sidebar_react_{key}.json",
        "output": "index_data/react_{key}_toc.json",
        "extensions": list(MARKDOWN_EXTENSIONS),
    },
    "community": {
        "versions": None,
        "source_dir": "pages/community",
        "sidebar": "data/sidebar_community.json",
        "output": "index_data/community_toc.json",
        "extensions": list(DOC_EXTENSIONS),
    },
}
