"""Tests for manifest serialization and schema validation."""

import io
import json
from pathlib import Path

import pytest

from cms_manifest.core.errors import SerializationError
from cms_manifest.core.validator import (
    validate_manifest,
    validate_manifest_with_error_details,
)
from cms_manifest.scanner import build_content_item
from cms_manifest.serializer import (
    TAB_INDENT,
    build_document,
    dumps,
    encode_manifest,
    print_manifest,
    write_manifest,
)
from jsonschema import ValidationError


@pytest.fixture
def items() -> list:
    return [
        build_content_item("a.png", "cms_image"),
        build_content_item("Café.jpg", "cms_image"),
    ]


class TestBuildDocument:
    """Test the document envelope."""

    def test_envelope(self, items: list) -> None:
        """Test that items are wrapped under "content"."""
        assert build_document(items) == {"content": items}

    def test_bare_array(self, items: list) -> None:
        """Test that the envelope can be turned off."""
        assert build_document(items, envelope=False) == items

    def test_empty_content_is_a_list(self) -> None:
        """Test that no items serializes as an empty array, not null."""
        assert json.loads(dumps(build_document([]))) == {"content": []}


class TestDumps:
    """Test JSON encoding."""

    def test_three_space_indent(self, items: list) -> None:
        """Test the canonical indentation."""
        text = dumps(build_document(items))

        assert text.startswith('{\n   "content": [\n      {\n         "type"')
        assert text.endswith("}\n")

    def test_tab_indent(self, items: list) -> None:
        """Test the legacy tab indentation."""
        text = dumps(build_document(items, envelope=False), indent=TAB_INDENT)

        assert text.startswith('[\n\t{\n\t\t"type"')

    def test_non_ascii_not_escaped(self, items: list) -> None:
        """Test that non-ASCII text is written as-is."""
        assert '"title": "Café"' in dumps(build_document(items))

    def test_unencodable_document(self) -> None:
        """Test that encoding failures raise SerializationError."""
        with pytest.raises(SerializationError, match="Failed to encode"):
            dumps({"content": [object()]})  # type: ignore[list-item]


class TestWriteManifest:
    """Test writing manifests to disk and streams."""

    def test_round_trip(self, tmp_path: Path, items: list) -> None:
        """Test that the written file reads back with every item."""
        path = tmp_path / "content.json"

        write_manifest(build_document(items), path)

        data = json.loads(path.read_text(encoding="utf-8"))
        assert len(data["content"]) == len(items)
        assert data["content"][1]["body"]["source"]["ref"] == "Café.jpg"

    def test_unwritable_path(self, tmp_path: Path, items: list) -> None:
        """Test that write failures raise SerializationError."""
        path = tmp_path / "missing" / "content.json"

        with pytest.raises(SerializationError, match="Failed to write"):
            write_manifest(build_document(items), path)

    def test_print_manifest(self, items: list) -> None:
        """Test writing to a text stream."""
        stream = io.StringIO()

        print_manifest(build_document(items), stream)

        assert json.loads(stream.getvalue())["content"] == items


class TestValidateManifest:
    """Test schema validation of built manifests."""

    def test_built_manifest_is_valid(self, items: list) -> None:
        """Test that enveloped and bare documents validate."""
        validate_manifest(build_document(items))
        validate_manifest(build_document(items, envelope=False))

    def test_rejects_unknown_content_type(self, items: list) -> None:
        """Test that an unknown type is rejected."""
        items[0]["type"] = "cms_video"

        with pytest.raises(ValidationError):
            validate_manifest(build_document(items))

    def test_error_details(self, items: list) -> None:
        """Test that error details name the failing path."""
        del items[1]["body"]["altText"]

        is_valid, error_msg = validate_manifest_with_error_details(build_document(items))

        assert not is_valid
        assert error_msg is not None
        assert error_msg.startswith("Validation error at content -> 1 -> body:")
        assert "altText" in error_msg

    def test_missing_envelope_key(self) -> None:
        """Test that a document without "content" is rejected."""
        is_valid, error_msg = validate_manifest_with_error_details({})  # type: ignore[arg-type]

        assert not is_valid
        assert error_msg == "Validation error at root: 'content' is a required property"


class TestUndecodableNames:
    """Test filenames that are not valid UTF-8 (surrogate-escaped by os.scandir)."""

    NAME = b"caf\xe9.txt".decode("utf-8", "surrogateescape")

    def test_encode_raises_serialization_error(self) -> None:
        """Test that encoding fails with SerializationError, not UnicodeEncodeError."""
        document = build_document([build_content_item(self.NAME, "cms_document")])

        with pytest.raises(SerializationError, match="as UTF-8"):
            encode_manifest(document)

    def test_existing_file_left_intact(self, tmp_path: Path) -> None:
        """Test that a failed encode does not truncate the target file."""
        path = tmp_path / "content.json"
        path.write_text('{"content": []}', encoding="utf-8")
        document = build_document([build_content_item(self.NAME, "cms_document")])

        with pytest.raises(SerializationError):
            write_manifest(document, path)

        assert path.read_text(encoding="utf-8") == '{"content": []}'

    def test_stream_left_untouched(self) -> None:
        """Test that nothing is written to the stream when encoding fails."""
        stream = io.StringIO()
        document = build_document([build_content_item(self.NAME, "cms_document")])

        with pytest.raises(SerializationError):
            print_manifest(document, stream)

        assert stream.getvalue() == ""
