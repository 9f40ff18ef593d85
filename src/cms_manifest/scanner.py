"""Media directory scanning and file validation.

This module lists the _media folder of a CMS import directory, filters
out entries that cannot be imported and builds a content item for each
remaining file.
"""

import os
import sys
from pathlib import Path

from .core.errors import DirectoryReadError
from .core.metadata import derive_metadata
from .core.types import CMS_IMAGE, ContentBody, ContentItem, ContentSource

MEDIA_DIRNAME = "_media"

# Salesforce CMS rejects image files larger than 25MB
MAX_IMAGE_SIZE_BYTES = 25_000_000

SUPPORTED_IMAGE_EXTENSIONS = {"jpg", "jpeg", "png", "gif", "bmp"}


def is_image_type_supported(filename: str) -> bool:
    """Check whether a filename carries a supported image extension.

    Args:
        filename: Bare filename

    Returns:
        True for a stem ending in a non-space character followed by a
        supported extension (case-insensitive)
    """
    stem, dot, extension = filename.rpartition(".")
    if not dot or not stem or stem[-1].isspace():
        return False
    return extension.lower() in SUPPORTED_IMAGE_EXTENSIONS


def check_file(entry: os.DirEntry, import_type: str) -> tuple[bool, str | None]:
    """Decide whether a directory entry can be imported.

    Rules run in order and stop at the first failure: directories and
    hidden files are always rejected; for image imports, files over the
    size limit or with an unsupported extension are rejected too.

    Args:
        entry: Entry from os.scandir() of the media directory
        import_type: cms_image or cms_document

    Returns:
        Tuple of (accepted, reason). reason is None when accepted.

    Raises:
        OSError: If the entry can't be stat'ed for the size check
    """
    name = entry.name

    if entry.is_dir(follow_symlinks=False):
        return False, f"{name} is a directory, skipping"

    if name.startswith("."):
        return False, f"{name} is a hidden file, skipping"

    if import_type == CMS_IMAGE:
        size_bytes = entry.stat(follow_symlinks=False).st_size
        if size_bytes > MAX_IMAGE_SIZE_BYTES:
            return False, f"{name} is greater than 25MB, skipping"

        if not is_image_type_supported(name):
            return False, f"{name} is of a non-supported file type, skipping"

    return True, None


def build_content_item(filename: str, import_type: str, slug: bool = True) -> ContentItem:
    """Build the manifest entry for an accepted file.

    Args:
        filename: Bare filename inside the media directory
        import_type: cms_image or cms_document
        slug: Slugify the URL name

    Returns:
        Content item dictionary conforming to the schema
    """
    metadata = derive_metadata(filename, slug=slug)
    return ContentItem(
        type=import_type,
        urlName=metadata["url_name"],
        body=ContentBody(
            title=metadata["title"],
            altText=metadata["alt_text"],
            source=ContentSource(ref=filename),
        ),
    )


def list_media_entries(media_dir: Path) -> list[os.DirEntry]:
    """List the media directory once, ordered by filename.

    Raises:
        DirectoryReadError: If the directory is missing or unreadable
    """
    try:
        with os.scandir(media_dir) as it:
            entries = list(it)
    except OSError as e:
        raise DirectoryReadError(media_dir, e.strerror or str(e)) from e

    return sorted(entries, key=lambda entry: entry.name)


def scan_media_directory(
    import_dir: Path, import_type: str, slug: bool = True
) -> list[ContentItem]:
    """Scan <import_dir>/_media and collect importable content items.

    Rejected files are reported to stderr and skipped.

    Args:
        import_dir: CMS import directory holding the _media folder
        import_type: cms_image or cms_document
        slug: Slugify URL names (otherwise the title is used verbatim)

    Returns:
        Content items in filename order

    Raises:
        DirectoryReadError: If the import or media directory can't be listed,
            or an entry can't be stat'ed
    """
    if not import_dir.is_dir():
        raise DirectoryReadError(import_dir, "not an existing directory")

    items: list[ContentItem] = []

    media_dir = import_dir / MEDIA_DIRNAME

    for entry in list_media_entries(media_dir):
        try:
            accepted, reason = check_file(entry, import_type)
        except OSError as e:
            raise DirectoryReadError(
                media_dir, f"cannot stat {entry.name}: {e.strerror or e}"
            ) from e

        if not accepted:
            print(f"Warning: {reason}", file=sys.stderr)
            continue

        items.append(build_content_item(entry.name, import_type, slug=slug))

    return items
