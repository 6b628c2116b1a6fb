"""Bare-string detection for Vue and HTML templates."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("i18nlint")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.1.0-dev"

__all__ = ["__version__"]
