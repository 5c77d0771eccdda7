"""Build-time fingerprinting of static assets."""

from importlib import metadata

DIST_NAME = "hashassets"

try:
    __version__ = metadata.version(DIST_NAME)
except metadata.PackageNotFoundError:  # source checkout without an install
    __version__ = "0.0.0"

__all__ = ["DIST_NAME", "__version__"]
