"""Installed package version, read from the distribution metadata."""
from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

DIST_NAME = "noisetrace"

try:
    __version__ = version(DIST_NAME)
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0+unknown"


def get_version_string() -> str:
    return f"{DIST_NAME} {__version__}"
