# Configuration file for the Sphinx documentation builder.
#
# This file only contains a selection of the most common options. For a full
# list see the documentation:
# https://www.sphinx-doc.org/en/master/usage/configuration.html

# -- Path setup --------------------------------------------------------------

import os
import sys
sys.path.insert(0, os.path.abspath('..'))

import sphinx_rtd_theme  # noqa: F401


# -- Project information -----------------------------------------------------

project = 'typospell'
copyright = '2026, typospell authors'
author = 'typospell authors'


# -- General configuration ---------------------------------------------------

extensions = [
    'sphinx.ext.autodoc',
    'sphinx.ext.napoleon',
    'sphinx.ext.autodoc.typehints',
    'sphinx.ext.viewcode',
    'sphinx_rtd_theme',
]

autodoc_typehints = 'description'

autodoc_default_options = {
    'member-order': 'bysource'
}

templates_path = ['_templates']

exclude_patterns = ['_build', 'Thumbs.db', '.DS_Store']

add_module_names = False

# -- Options for HTML output -------------------------------------------------

html_theme = 'sphinx_rtd_theme'

modindex_common_prefix = [
    'typospell.hunspell.', 'typospell.hunspell.data.', 'typospell.hunspell.readers.', 'typospell.hunspell.algo.'
]
