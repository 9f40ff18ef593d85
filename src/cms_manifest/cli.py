"""Command-line interface for the CMS manifest builder.

This module provides the CLI entry point for generating content.json
manifests from a CMS import directory.
"""

import argparse
import sys
from pathlib import Path

from .core.errors import ManifestError
from .core.types import IMPORT_TYPES, ContentItem, Manifest
from .pipeline import ManifestOptions, ManifestPipeline
from .serializer import SPACE_INDENT, TAB_INDENT

INDENT_STYLES = {"spaces": SPACE_INDENT, "tab": TAB_INDENT}


def generate_manifest(
    import_dir: Path,
    import_type: str,
    options: ManifestOptions | None = None,
) -> Manifest | list[ContentItem]:
    """Generate and write the manifest for a CMS import directory.

    Args:
        import_dir: Directory containing the _media folder
        import_type: cms_image or cms_document
        options: Output options (defaults to the canonical variant)

    Returns:
        The manifest document that was written

    Raises:
        ValueError: If import_type is invalid
        ManifestError: If scanning, validation or writing fails
    """
    pipeline = ManifestPipeline(import_dir, import_type, options)
    return pipeline.run()


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the cms-manifest command."""
    parser = argparse.ArgumentParser(
        prog="cms-manifest",
        description="Generate a Salesforce CMS content.json manifest from a _media directory",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Images, written to /imports/spring/content.json
  cms-manifest /imports/spring cms_image

  # Documents, custom output file
  cms-manifest /imports/docs cms_document --output docs.json

  # Oldest output style: bare array, tab indent, titles as URL names, stdout
  cms-manifest /imports/spring cms_image --legacy > content.json
        """,
    )

    parser.add_argument(
        "import_dir", metavar="importDirectory", help="CMS import directory containing _media"
    )

    parser.add_argument(
        "import_type",
        metavar="importType",
        choices=IMPORT_TYPES,
        help="Import type: cms_image or cms_document",
    )

    target = parser.add_mutually_exclusive_group()
    target.add_argument(
        "--output", "-o", help="Output filename (default: content.json in the import directory)"
    )
    target.add_argument(
        "--stdout", action="store_true", help="Print the manifest instead of writing a file"
    )

    parser.add_argument(
        "--no-slug",
        action="store_true",
        help="Use the title verbatim as urlName instead of a slug",
    )

    parser.add_argument(
        "--no-envelope",
        action="store_true",
        help='Emit a bare JSON array instead of {"content": [...]}',
    )

    parser.add_argument(
        "--indent",
        choices=sorted(INDENT_STYLES),
        help="Indentation style (default: three spaces)",
    )

    parser.add_argument(
        "--legacy",
        action="store_true",
        help=(
            "Shorthand for --no-slug --no-envelope --indent tab --stdout; "
            "cannot be combined with other output options"
        ),
    )

    return parser


def options_from_args(args: argparse.Namespace) -> ManifestOptions:
    """Translate parsed arguments into ManifestOptions."""
    if args.legacy:
        return ManifestOptions(
            slugify=False,
            envelope=False,
            indent=TAB_INDENT,
            to_stdout=True,
        )

    return ManifestOptions(
        slugify=not args.no_slug,
        envelope=not args.no_envelope,
        indent=INDENT_STYLES[args.indent or "spaces"],
        output=args.output,
        to_stdout=args.stdout,
    )


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the cms-manifest command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.legacy:
        conflicting = [
            flag
            for flag, value in [
                ("--output", args.output),
                ("--stdout", args.stdout),
                ("--no-slug", args.no_slug),
                ("--no-envelope", args.no_envelope),
                ("--indent", args.indent),
            ]
            if value
        ]
        if conflicting:
            parser.error(f"--legacy cannot be combined with {', '.join(conflicting)}")

    import_dir = Path(args.import_dir)
    options = options_from_args(args)

    try:
        generate_manifest(import_dir, args.import_type, options)
    except ManifestError as e:
        # Covers DirectoryReadError and SerializationError
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        print(f"Error: Failed to generate manifest: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
