"""Version information for the format_url package."""

from importlib import metadata as _md

try:
    __version__ = _md.version("format-url")
except _md.PackageNotFoundError:
    __version__ = "unknown"
