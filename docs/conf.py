"""Sphinx build settings for the Activity Board API reference."""

from importlib.metadata import version as distribution_version
from pathlib import Path
import os
import sys

import django

ROOT = Path(__file__).resolve().parent.parent

# autodoc imports the apps, which need configured settings
sys.path.insert(0, str(ROOT))
os.environ.setdefault("DJANGO_SETTINGS_MODULE", "activity_board.settings")
django.setup()

project = "Activity Board"
author = "Activity Board maintainers"
release = distribution_version("activity-board")
version = ".".join(release.split(".")[:2])

extensions = [
    "sphinx.ext.autodoc",
    "sphinx.ext.intersphinx",
    "sphinx.ext.napoleon",
    "sphinx.ext.viewcode",
]

root_doc = "index"
exclude_patterns = ["_build"]

# Docstrings are NumPy style only
napoleon_google_docstring = False
napoleon_numpy_docstring = True
napoleon_use_rtype = False

autodoc_default_options = {
    "members": True,
    "member-order": "bysource",
    "show-inheritance": True,
}
autodoc_typehints = "description"

intersphinx_mapping = {
    "python": ("https://docs.python.org/3", None),
    "django": (
        "https://docs.djangoproject.com/en/stable/",
        "https://docs.djangoproject.com/en/stable/_objects/",
    ),
    "requests": ("https://requests.readthedocs.io/en/latest/", None),
}

html_theme = "sphinx_rtd_theme"
html_title = f"{project} {release}"
html_theme_options = {"navigation_depth": 3}
