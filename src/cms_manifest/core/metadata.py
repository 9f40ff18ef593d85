"""Metadata derivation from media filenames.

This module turns a filename into the title, alt text and URL name
used by a content item.
"""

import unicodedata

from .types import ContentMetadata

ALT_TEXT_PREFIX = "alt text for "


def strip_extension(filename: str) -> str:
    """Remove the last extension from a filename.

    Example:
        "archive.tar.gz" -> "archive.tar"

    Args:
        filename: Bare filename (no directory part)

    Returns:
        Filename without its trailing ".ext", or unchanged if it has no dot
    """
    stem, dot, _ = filename.rpartition(".")
    return stem if dot else filename


def _keep_slug_chars(text: str) -> str:
    """Drop everything except letters, decimal digits and spaces."""
    return "".join(
        ch
        for ch in text
        if ch == " " or ch.isdecimal() or unicodedata.category(ch).startswith("L")
    )


def slugify(title: str) -> str:
    """Turn a display title into a URL-safe name.

    Characters that are not letters, digits or spaces are dropped, the
    result is lower-cased and spaces become hyphens.

    Example:
        "My Photo #1" -> "my-photo-1"

    Args:
        title: Display title

    Returns:
        URL name for the title
    """
    lowered = _keep_slug_chars(title).lower()
    # Lower-casing can add combining marks (e.g. "İ" -> "i\u0307")
    return _keep_slug_chars(lowered).replace(" ", "-")


def derive_metadata(filename: str, slug: bool = True) -> ContentMetadata:
    """Derive the content item fields for a file.

    Args:
        filename: Bare filename of the media file
        slug: Slugify the URL name; when False the URL name is the title

    Returns:
        Dictionary with url_name, title and alt_text
    """
    title = strip_extension(filename)
    return ContentMetadata(
        url_name=slugify(title) if slug else title,
        title=title,
        alt_text=ALT_TEXT_PREFIX + title,
    )
