"""Manifest generation pipeline.

This module ties the scanner, schema validation and serializer together
behind a single run() call, configured through ManifestOptions.
"""

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from .core.errors import ManifestError
from .core.types import IMPORT_TYPES, ContentItem, Manifest
from .core.validator import validate_manifest_with_error_details
from .scanner import MEDIA_DIRNAME, scan_media_directory
from .serializer import (
    DEFAULT_MANIFEST_FILENAME,
    SPACE_INDENT,
    build_document,
    print_manifest,
    write_manifest,
)


@dataclass
class ManifestOptions:
    """Output options that select between the manifest variants.

    Attributes:
        slugify: Slugify URL names; when False the title is used verbatim
        envelope: Wrap items in {"content": [...]}; when False emit a bare array
        indent: Indentation string (three spaces or a tab)
        output: Output filename, relative to the import directory unless
            absolute. None means content.json.
        to_stdout: Print the manifest instead of writing a file
    """

    slugify: bool = True
    envelope: bool = True
    indent: str = SPACE_INDENT
    output: str | None = None
    to_stdout: bool = False


class ManifestPipeline:
    """Builds and writes the content manifest for one import directory.

    Example:
        >>> pipeline = ManifestPipeline(Path('/imports/spring'), 'cms_image')
        >>> document = pipeline.run()
        >>> len(document['content'])
        12
    """

    def __init__(
        self,
        import_dir: Path,
        import_type: str,
        options: ManifestOptions | None = None,
    ):
        """Initialize the pipeline.

        Args:
            import_dir: CMS import directory holding the _media folder
            import_type: cms_image or cms_document
            options: Output options (defaults to the canonical variant)

        Raises:
            ValueError: If import_type is not a known import type
        """
        if import_type not in IMPORT_TYPES:
            raise ValueError(
                f"Unknown import type: '{import_type}'. "
                f"Expected one of: {', '.join(IMPORT_TYPES)}"
            )

        self.import_dir = import_dir
        self.import_type = import_type
        self.options = options or ManifestOptions()

    @property
    def output_path(self) -> Path:
        """Destination file for the manifest."""
        filename = self.options.output or DEFAULT_MANIFEST_FILENAME
        path = Path(filename)
        if path.is_absolute():
            return path
        return self.import_dir / path

    def collect_items(self) -> list[ContentItem]:
        """Scan the media directory and return the accepted items."""
        return scan_media_directory(
            self.import_dir, self.import_type, slug=self.options.slugify
        )

    def build_document(
        self, items: list[ContentItem] | None = None
    ) -> Manifest | list[ContentItem]:
        """Build the manifest document, scanning first if no items are given."""
        if items is None:
            items = self.collect_items()
        return build_document(items, envelope=self.options.envelope)

    def run(self, stream: TextIO | None = None) -> Manifest | list[ContentItem]:
        """Scan, validate and write the manifest.

        Args:
            stream: Stream used when options.to_stdout is set
                (defaults to sys.stdout)

        Returns:
            The document that was written

        Raises:
            DirectoryReadError: If the media directory can't be listed
            ManifestError: If the document fails schema validation
            SerializationError: If the document can't be written
        """
        print(
            f"Scanning directory: {self.import_dir / MEDIA_DIRNAME}", file=sys.stderr
        )
        items = self.collect_items()
        print(f"Found {len(items)} importable files", file=sys.stderr)

        document = self.build_document(items)

        print("Validating manifest against schema...", file=sys.stderr)
        is_valid, error_msg = validate_manifest_with_error_details(document)
        if not is_valid:
            raise ManifestError(f"Manifest validation failed:\n{error_msg}")

        if self.options.to_stdout:
            print_manifest(document, stream or sys.stdout, indent=self.options.indent)
        else:
            write_manifest(document, self.output_path, indent=self.options.indent)
            print(f"Wrote manifest to {self.output_path}", file=sys.stderr)

        return document
