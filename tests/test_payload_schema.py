"""Unit tests for payload decoding helpers."""

import json

import pytest
from shared.payload_schema import (
    PayloadValidationError,
    file_url,
    load_payload,
    require_collection,
    same_identifier,
)


class TestLoadPayload:
    """Tests for load_payload."""

    def test_mapping_is_returned_as_dict(self) -> None:
        """An already parsed mapping is accepted as is."""
        source = {"alertAction": "closeAll"}
        payload = load_payload(source)
        assert payload == source
        assert payload is not source

    def test_json_string_is_parsed(self) -> None:
        """A JSON string is decoded."""
        payload = load_payload(json.dumps({"timestamp": 5, "title": "PIN"}))
        assert payload == {"timestamp": 5, "title": "PIN"}

    def test_bytes_are_parsed(self) -> None:
        """UTF-8 bytes are decoded as JSON."""
        assert load_payload(b'{"apps": {}}') == {"apps": {}}

    def test_invalid_json_raises(self) -> None:
        """Unparseable text raises PayloadValidationError."""
        with pytest.raises(PayloadValidationError, match="not valid JSON"):
            load_payload("{alertAction: close")

    def test_error_is_chained(self) -> None:
        """The decode error is kept as the cause."""
        with pytest.raises(PayloadValidationError) as excinfo:
            load_payload("[")
        assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)

    def test_non_object_root_raises(self) -> None:
        """A JSON array root is rejected."""
        with pytest.raises(PayloadValidationError, match="JSON object"):
            load_payload("[1, 2, 3]")

    def test_unsupported_type_raises(self) -> None:
        """Numbers are neither strings nor mappings."""
        with pytest.raises(PayloadValidationError, match="int"):
            load_payload(42)  # type: ignore[arg-type]

    def test_validation_error_is_value_error(self) -> None:
        """Callers catching ValueError also see payload errors."""
        assert issubclass(PayloadValidationError, ValueError)


class TestFileUrl:
    """Tests for file_url."""

    def test_prefixes_absolute_path(self) -> None:
        """Absolute paths get the file scheme."""
        assert file_url("/icons/x.png") == "file:///icons/x.png"

    def test_prefix_is_unconditional(self) -> None:
        """Relative paths are prefixed too."""
        assert file_url("icons/x.png") == "file://icons/x.png"

    def test_missing_path(self) -> None:
        """A missing path yields the bare scheme."""
        assert file_url(None) == "file://"


class TestSameIdentifier:
    """Tests for same_identifier."""

    def test_equal_values_match(self) -> None:
        """Identical identifiers match."""
        assert same_identifier(1700000000, 1700000000)
        assert same_identifier("abc", "abc")

    def test_number_matches_string_form(self) -> None:
        """A numeric timestamp matches its string form."""
        assert same_identifier(5, "5")
        assert same_identifier("5", 5.0)

    def test_number_matches_numeric_spellings(self) -> None:
        """Any string that parses to the same number matches."""
        assert same_identifier(5, "5.0")
        assert same_identifier("05", 5)
        assert same_identifier(1000, "1e3")
        assert same_identifier(5, " 5 ")

    def test_two_strings_must_be_identical(self) -> None:
        """Strings are compared as text, not as numbers."""
        assert not same_identifier("5", "5.0")
        assert not same_identifier("05", "5")

    def test_non_numeric_string_does_not_match_number(self) -> None:
        """Text that is not a number never matches one."""
        assert not same_identifier(5, "five")
        assert not same_identifier("", 0)

    def test_different_values_do_not_match(self) -> None:
        """Different identifiers do not match."""
        assert not same_identifier(5, 6)
        assert not same_identifier("5", "6")

    def test_none_never_matches(self) -> None:
        """Missing identifiers never match, not even each other."""
        assert not same_identifier(None, None)
        assert not same_identifier(None, 1)

    def test_booleans_are_not_numbers(self) -> None:
        """True is not treated as the identifier 1."""
        assert not same_identifier(True, 1)


class TestRequireCollection:
    """Tests for require_collection."""

    def test_object_values_keep_key_order(self) -> None:
        """Object collections yield values in key order."""
        payload = {"apps": {"b": {"id": "b"}, "a": {"id": "a"}}}
        assert [d["id"] for d in require_collection(payload, "apps")] == ["b", "a"]

    def test_array_items(self) -> None:
        """Array collections yield their items."""
        payload = {"apps": [{"id": "x"}, {"id": "y"}]}
        assert [d["id"] for d in require_collection(payload, "apps")] == ["x", "y"]

    def test_missing_field_raises(self) -> None:
        """A snapshot without the collection is a schema error."""
        with pytest.raises(PayloadValidationError, match="apps is required"):
            require_collection({"returnValue": True}, "apps")

    def test_wrong_type_raises(self) -> None:
        """A scalar collection is a schema error."""
        with pytest.raises(PayloadValidationError, match="object or array"):
            require_collection({"packages": "none"}, "packages")

    def test_non_object_descriptor_raises(self) -> None:
        """Every descriptor must be an object."""
        with pytest.raises(PayloadValidationError, match="Every entry"):
            require_collection({"apps": {"a": "com.example"}}, "apps")
