"""Type definitions for CMS import manifests.

This module defines TypedDict classes that mirror the JSON schema structure
defined in schemas/content.schema.json.
"""

from typing import TypedDict

CMS_IMAGE = "cms_image"
CMS_DOCUMENT = "cms_document"

IMPORT_TYPES = (CMS_IMAGE, CMS_DOCUMENT)


class ContentSource(TypedDict):
    """Reference to the media file."""

    ref: str  # Original filename inside _media


class ContentBody(TypedDict):
    """Display fields of a content item."""

    title: str  # Filename without extension
    altText: str  # "alt text for <title>"
    source: ContentSource


class ContentItem(TypedDict):
    """Single entry of the manifest content array."""

    type: str  # cms_image or cms_document
    urlName: str  # Slug (or title when slugging is off)
    body: ContentBody


class ContentMetadata(TypedDict):
    """Fields derived from a single filename."""

    url_name: str
    title: str
    alt_text: str


class Manifest(TypedDict):
    """Complete manifest document (the enveloped form)."""

    content: list[ContentItem]
