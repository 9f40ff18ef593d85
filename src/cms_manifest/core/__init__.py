"""Core utilities for manifest generation.

This package contains schema validation, type definitions,
error types and filename metadata derivation shared by the
scanner, serializer and pipeline.
"""

from .errors import DirectoryReadError, ManifestError, SerializationError
from .metadata import derive_metadata, slugify, strip_extension
from .types import (
    CMS_DOCUMENT,
    CMS_IMAGE,
    IMPORT_TYPES,
    ContentBody,
    ContentItem,
    ContentMetadata,
    ContentSource,
    Manifest,
)
from .validator import validate_manifest, validate_manifest_with_error_details

__all__ = [
    "CMS_DOCUMENT",
    "CMS_IMAGE",
    "IMPORT_TYPES",
    "ContentBody",
    "ContentItem",
    "ContentMetadata",
    "ContentSource",
    "DirectoryReadError",
    "Manifest",
    "ManifestError",
    "SerializationError",
    "derive_metadata",
    "slugify",
    "strip_extension",
    "validate_manifest",
    "validate_manifest_with_error_details",
]
