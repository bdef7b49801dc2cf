# Configuration file for the Sphinx documentation builder.

import os
import sys

sys.path.insert(0, os.path.abspath(os.path.join('..', '..')))

from truthtab import __version__  # noqa: E402

# -- Project information -----------------------------------------------------

project = "truthtab"
copyright = "2025, truthtab developers"
author = "truthtab developers"
release = __version__

# General configuration
extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.viewcode',
]

templates_path = ['_templates']
exclude_patterns = []

# HTML output options
html_theme = 'sphinx_rtd_theme'  # ReadTheDocs theme
html_title = 'truthtab Documentation'
