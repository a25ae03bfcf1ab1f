from __future__ import annotations

import os
import sys
from datetime import date
from pathlib import Path


# -- Path setup ----------------------------------------------------------------

_ROOT = Path(__file__).resolve().parents[1]
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))


# -- Project information --------------------------------------------------------

project = "extremum-jax"
author = "extremum_jax contributors"
copyright = f"{date.today().year}, {author}"  # noqa: A001


# -- General configuration ------------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.napoleon",
    "sphinx.ext.mathjax",
    "sphinx.ext.viewcode",
]

exclude_patterns = ["_build", "Thumbs.db", ".DS_Store"]

autodoc_member_order = "bysource"
napoleon_numpy_docstring = True
napoleon_google_docstring = False


# -- Options for HTML output ----------------------------------------------------

_theme = os.environ.get("SPHINX_THEME")
if _theme:
    html_theme = _theme
else:
    try:  # furo comes with the docs extra
        import furo  # noqa: F401

        html_theme = "furo"
    except ImportError:
        html_theme = "alabaster"
