"""Sphinx configuration for blanklines documentation."""

import blanklines

project = "blanklines"
copyright = "2026, blanklines contributors"
author = "blanklines contributors"
release = blanklines.__version__
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx_copybutton",
]

exclude_patterns = ["_build"]

html_theme = "furo"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
}

autodoc_member_order = "bysource"
autodoc_typehints = "description"
