# Configuration file for the Sphinx documentation builder.
#
# For the full list of built-in configuration values, see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Project information -----------------------------------------------------

import os
import sys
import sphinx_rtd_dark_mode

# Project root on sys.path so autodoc can import sim/, ui/, events/ …
sys.path.insert(0, os.path.abspath("../.."))

project = 'Highway Rush'
copyright = '2026, Highway Rush Team'
author = 'Highway Rush Team'
release = '0.1'

# -- General configuration ---------------------------------------------------

extensions = [
    "sphinx.ext.autodoc",    # generate docs from docstrings
    "sphinx.ext.napoleon",   # parse Google/NumPy style docstrings
    "sphinx.ext.viewcode",   # add links to source code
    "sphinx_rtd_dark_mode"
]

templates_path = ['_templates']
exclude_patterns = []

# -- Options for HTML output -------------------------------------------------

html_theme = "sphinx_rtd_theme"
default_dark_mode = True
html_static_path = ['_static']

# -- Mock imports: the window and the HTTP server are optional for docs --
autodoc_mock_imports = ["pygame", "fastapi", "uvicorn", "pydantic"]
