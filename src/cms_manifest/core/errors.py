"""Exceptions raised while building a manifest."""

from pathlib import Path


class ManifestError(Exception):
    """Base class for fatal manifest generation errors."""


class DirectoryReadError(ManifestError):
    """The import directory or its _media folder cannot be listed."""

    def __init__(self, path: Path, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read directory {path}: {reason}")


class SerializationError(ManifestError):
    """The manifest could not be encoded or written."""
