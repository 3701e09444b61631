"""Sphinx configuration file for map2d documentation.

Build with ``sphinx-build docs docs/_build`` after installing the ``docs``
extra; ``index.rst`` is the single page.
"""

import os
import sys

# Make the package importable without installing it
sys.path.insert(0, os.path.abspath(".."))

from map2d import __version__  # noqa: E402

project = "map2d"
copyright = "2025, map2d developers"
author = "map2d developers"
release = version = __version__

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.doctest",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
    "sphinx_autodoc_typehints",
    "sphinx_copybutton",
]

root_doc = "index"
exclude_patterns = ["_build"]

html_theme = "furo"
html_title = f"{project} {version}"

# Map2D groups its methods by purpose, so keep source order
autodoc_member_order = "bysource"
autodoc_default_options = {
    "members": True,
    "special-members": "__contains__, __iter__, __len__",
}

# All docstrings are NumPy style
napoleon_google_docstring = False
napoleon_numpy_docstring = True

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "pandas": ("https://pandas.pydata.org/docs/", None),
}

autodoc_typehints = "description"

copybutton_prompt_text = r">>> |\.\.\. "
copybutton_prompt_is_regexp = True
