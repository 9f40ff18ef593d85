"""CMS Import Manifest Builder.

This package scans the _media folder of a Salesforce CMS import directory
and writes the content.json manifest describing the importable images or
documents.
"""

# Core library interface
from .pipeline import ManifestOptions, ManifestPipeline
from .scanner import check_file, scan_media_directory
from .serializer import build_document, write_manifest

# Core utilities
from .core import ContentItem, Manifest, derive_metadata, slugify, strip_extension
from .core import DirectoryReadError, ManifestError, SerializationError
from .core import validate_manifest, validate_manifest_with_error_details

# CLI interface
from .cli import generate_manifest, main

__version__ = "0.1.0"

__all__ = [
    # Primary library interface
    "ManifestPipeline",
    "ManifestOptions",
    "check_file",
    "scan_media_directory",
    "build_document",
    "write_manifest",
    # Core utilities
    "ContentItem",
    "Manifest",
    "derive_metadata",
    "slugify",
    "strip_extension",
    "validate_manifest",
    "validate_manifest_with_error_details",
    # Errors
    "DirectoryReadError",
    "ManifestError",
    "SerializationError",
    # CLI
    "generate_manifest",
    "main",
]
