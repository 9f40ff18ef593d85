"""Manifest serialization.

This module wraps content items in the manifest envelope and writes the
indented JSON document to a file or stream.
"""

import json
from pathlib import Path
from typing import TextIO

from .core.errors import SerializationError
from .core.types import ContentItem, Manifest

DEFAULT_MANIFEST_FILENAME = "content.json"

# Canonical indentation is three spaces; older tooling emitted tabs
SPACE_INDENT = "   "
TAB_INDENT = "\t"


def build_document(
    items: list[ContentItem], envelope: bool = True
) -> Manifest | list[ContentItem]:
    """Wrap content items in the manifest document.

    Args:
        items: Content items in output order
        envelope: Wrap in {"content": [...]}; when False return the bare list

    Returns:
        The document ready for serialization
    """
    if not envelope:
        return list(items)
    return Manifest(content=list(items))


def dumps(document: Manifest | list[ContentItem], indent: str = SPACE_INDENT) -> str:
    """Encode a manifest document as indented JSON.

    Raises:
        SerializationError: If the document can't be encoded
    """
    try:
        return json.dumps(document, indent=indent, ensure_ascii=False) + "\n"
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to encode manifest: {e}") from e


def encode_manifest(
    document: Manifest | list[ContentItem], indent: str = SPACE_INDENT
) -> bytes:
    """Encode a manifest document as UTF-8 JSON bytes.

    Filenames that are not valid UTF-8 reach us as lone surrogates
    (os.scandir uses surrogateescape) and can't be encoded.

    Raises:
        SerializationError: If the document can't be encoded
    """
    text = dumps(document, indent=indent)
    try:
        return text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise SerializationError(f"Failed to encode manifest as UTF-8: {e}") from e


def write_manifest(
    document: Manifest | list[ContentItem], path: Path, indent: str = SPACE_INDENT
) -> None:
    """Write a manifest document to disk as UTF-8.

    Args:
        document: Manifest document (enveloped or bare)
        path: Destination file
        indent: Indentation string

    Raises:
        SerializationError: If encoding or writing fails
    """
    # Encode before opening so a failed encode leaves any existing file intact
    data = encode_manifest(document, indent=indent)
    try:
        path.write_bytes(data)
    except OSError as e:
        raise SerializationError(f"Failed to write {path}: {e}") from e


def print_manifest(
    document: Manifest | list[ContentItem], stream: TextIO, indent: str = SPACE_INDENT
) -> None:
    """Write a manifest document to an open text stream."""
    text = encode_manifest(document, indent=indent).decode("utf-8")
    try:
        stream.write(text)
        stream.flush()
    except (OSError, UnicodeError) as e:
        raise SerializationError(f"Failed to write manifest to stream: {e}") from e
