from __future__ import annotations

import sys
from pathlib import Path

# -----------------------------------------------------------------------------
# Paths
# -----------------------------------------------------------------------------

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT))

__version__: str = "unknown"
try:
    from vecmathpy import __version__ as _vecmathpy_version
except ImportError:  # pragma: no cover
    pass
else:
    __version__ = _vecmathpy_version

# -----------------------------------------------------------------------------
# Project information
# -----------------------------------------------------------------------------

project = "vecmathpy"
author = "vecmathpy developers"
copyright = f"2026, {author}"
version = release = __version__

# -----------------------------------------------------------------------------
# General configuration
# -----------------------------------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
    "autoapi.extension",
    "myst_parser",
    "sphinx_autodoc_typehints",
    "sphinx_copybutton",
]

templates_path = ["_templates"]
exclude_patterns: list[str] = ["_build"]

language = "en"

source_suffix = {
    ".rst": "restructuredtext",
    ".md": "markdown",
}

myst_enable_extensions = [
    "colon_fence",
    "deflist",
    "linkify",
]
myst_heading_anchors = 3

# -----------------------------------------------------------------------------
# Napoleon (NumPy-style docstrings)
# -----------------------------------------------------------------------------

napoleon_numpy_docstring = True
napoleon_include_init_with_doc = False
napoleon_include_private_with_doc = False
napoleon_attr_annotations = True
napoleon_use_ivar = True

# -----------------------------------------------------------------------------
# autodoc
# -----------------------------------------------------------------------------

autoclass_content = "class"
autodoc_typehints = "none"
autodoc_default_options = {
    "members": True,
    "member-order": "bysource",
    "show-inheritance": True,
}

always_document_param_types = True
typehints_fully_qualified = False

# -----------------------------------------------------------------------------
# AutoAPI
# -----------------------------------------------------------------------------

autoapi_type = "python"
autoapi_dirs = [str(ROOT / "vecmathpy")]
autoapi_root = "autoapi"

# Benchmark scripts are not part of the API reference.
autoapi_ignore = ["*benchmark*"]
autoapi_add_toctree_entry = False
autoapi_own_page_level = "module"
autoapi_options = [
    "members",
    "undoc-members",
    "show-module-summary",
    "show-inheritance",
]

# -----------------------------------------------------------------------------
# Intersphinx
# -----------------------------------------------------------------------------

intersphinx_mapping = {
    "python": ("https://docs.python.org/3/", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "numba": ("https://numba.readthedocs.io/en/stable/", None),
}

# -----------------------------------------------------------------------------
# HTML output
# -----------------------------------------------------------------------------

html_theme = "pydata_sphinx_theme"
html_title = "vecmathpy documentation"
