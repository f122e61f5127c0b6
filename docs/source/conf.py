"""Sphinx configuration for the PySATL Reparam cheat sheet and API reference."""

__author__ = "Leonid Elkin, Mikhail Mikhailov"
__copyright__ = "Copyright (c) 2025 PySATL project"
__license__ = "SPDX-License-Identifier: MIT"

import os
import sys

sys.path.insert(0, os.path.abspath("../../src"))

project = "PySATL Reparam"
copyright = "2025, PySATL project"
author = "Leonid Elkin, Mikhail Mikhailov"
release = "0.1.0"

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.autosummary",
    "sphinx.ext.napoleon",
    "sphinx.ext.intersphinx",
    "sphinx.ext.mathjax",
    "sphinx.ext.viewcode",
    "myst_parser",
    "sphinx_autodoc_typehints",
    "sphinx_copybutton",
]
source_suffix = {".rst": "restructuredtext", ".md": "markdown"}
exclude_patterns = ["_build"]

# API pages under api/generated are rebuilt on every run
autosummary_generate = True
autodoc_default_options = {"member-order": "bysource", "show-inheritance": True}
autodoc_typehints = "description"
autodoc_typehints_format = "short"

napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_preprocess_types = True

# PEP 695 aliases that autodoc cannot resolve on its own
autodoc_type_aliases = {
    "ArrayLike": "pysatl_reparam.types.ArrayLike",
    "NumericArray": "pysatl_reparam.types.NumericArray",
    "ComplexArray": "pysatl_reparam.types.ComplexArray",
    "ParametrizationName": "pysatl_reparam.types.ParametrizationName",
    "ReparametrizationName": "pysatl_reparam.types.ReparametrizationName",
}

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "numpy": ("https://numpy.org/doc/stable/", None),
    "scipy": ("https://docs.scipy.org/doc/scipy/", None),
}

# the cheat sheet writes transforms as $...$ and aligned $$...$$ blocks
myst_enable_extensions = ["amsmath", "colon_fence", "dollarmath"]
myst_heading_anchors = 3

html_theme = "sphinx_rtd_theme"

copybutton_prompt_text = r">>> |\.\.\. |\$ "
copybutton_prompt_is_regexp = True
