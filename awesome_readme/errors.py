"""Exception hierarchy raised by the README generation pipeline.

Each pipeline stage raises only its own category so the CLI can report a
failure without inspecting library-specific exception types.
"""

from __future__ import annotations


class ReadmeError(RuntimeError):
    """Base class for every failure surfaced by awesome_readme."""


class SourceLoadError(ReadmeError):
    """Raised when a file or URL cannot be read or written."""


class SourceParseError(ReadmeError):
    """Raised when a source document is not valid YAML."""


class CatalogError(SourceParseError):
    """Raised when parsed YAML cannot be shaped into catalog records."""


class RenderError(ReadmeError):
    """Raised when the template cannot be rendered with the supplied view."""


__all__ = [
    "CatalogError",
    "ReadmeError",
    "RenderError",
    "SourceLoadError",
    "SourceParseError",
]
