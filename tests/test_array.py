"""
Unit tests for ArraySchema.

Test coverage:
- Count bounds on the stored elements
- Per-element validation on template clones ("element {i}: ..." tagging)
- Rejected elements at assignment and decode time
- Template isolation and clone independence
- JSON encode/decode and JSON-Schema output
"""

import pytest

from fluentschema import Array, DecodeError, EncodeError, ErrorKind, Int, String


class TestConstruction:
    """Tests for configuration errors."""

    def test_none_element_rejected(self):
        with pytest.raises(ValueError):
            Array(None)

    def test_negative_min_items(self):
        with pytest.raises(ValueError, match="minItems cannot be negative"):
            Array(Int()).min_items(-1)

    def test_negative_max_items(self):
        with pytest.raises(ValueError):
            Array(Int()).max_items(-1)


class TestCountBounds:
    """Tests for min_items/max_items."""

    def test_empty_set_below_min(self):
        result = Array(String()).min_items(1).set().validate()
        assert len(result) == 1
        detail = result.errors[0]
        assert detail.kind is ErrorKind.MIN_ITEMS
        assert detail.message == "minimum 1 items required"
        assert (detail.expected, detail.actual) == (1, 0)

    def test_above_max(self):
        detail = Array(Int()).max_items(2).set(1, 2, 3).validate().errors[0]
        assert detail.kind is ErrorKind.MAX_ITEMS
        assert detail.message == "maximum 2 items allowed"
        assert detail.actual == 3

    def test_min_reported_before_max(self):
        result = Array(Int()).max_items(0).min_items(2).set(1).validate()
        assert [d.kind for d in result] == [ErrorKind.MIN_ITEMS, ErrorKind.MAX_ITEMS]

    def test_unset_required(self):
        result = Array(Int()).min_items(1).validate()
        assert [d.kind for d in result] == [ErrorKind.REQUIRED]
        assert result.errors[0].message == "array is required"

    def test_unset_optional(self):
        assert not Array(Int()).optional().validate().has_errors()


class TestElements:
    """Tests for per-element validation."""

    def test_failing_elements_are_tagged_by_index(self):
        result = Array(Int().min(0)).set(-1, 5, -3).validate()
        assert [d.message for d in result] == ["element 0: must be at least 0", "element 2: must be at least 0"]
        assert result.errors[0].actual == -1

    def test_string_elements_tagged_by_index(self):
        result = Array(String().min(3)).set("hi", "hello", "a").validate()
        assert len(result) == 2
        assert [d.kind for d in result] == [ErrorKind.MIN_STRING_LENGTH, ErrorKind.MIN_STRING_LENGTH]
        assert [d.message for d in result] == [
            "element 0: must be at least 3 characters long",
            "element 2: must be at least 3 characters long",
        ]

    def test_rejected_element_is_dropped(self):
        schema = Array(Int()).set(1, "x", 3)
        assert schema.values() == ([1, 3], True)

        result = schema.validate()
        assert len(result) == 1
        assert result.errors[0].kind is ErrorKind.INVALID_ELEMENT_TYPE
        assert result.errors[0].message == "element 1: expected int value, got str"

    def test_count_bounds_use_stored_length(self):
        result = Array(Int()).min_items(3).set(1, "x").validate()
        assert [d.kind for d in result] == [ErrorKind.MIN_ITEMS, ErrorKind.INVALID_ELEMENT_TYPE]
        assert result.errors[0].actual == 1

    def test_new_assignment_clears_rejections(self):
        schema = Array(Int()).set("x")
        schema.set(1)
        assert not schema.validate().has_errors()

    def test_template_is_not_mutated(self):
        template = Int().min(0)
        Array(template).set(1, 2).validate()
        assert template.value() == (None, False)

    def test_nested_arrays(self):
        result = Array(Array(Int().min(0))).set([1, -1]).validate()
        assert [d.message for d in result] == ["element 0: element 1: must be at least 0"]

    def test_non_list_internal_value(self):
        outcome = Array(Int()).set_internal_value(3)
        assert outcome.is_err()
        assert outcome.unwrap_err().kind is ErrorKind.INVALID_TYPE


class TestCodec:
    """Tests for JSON encode/decode."""

    def test_encode(self):
        assert Array(Int()).set(1, 2).encode() == b"[1,2]"

    def test_encode_required_unset(self):
        with pytest.raises(EncodeError):
            Array(Int()).encode()

    def test_encode_optional_unset(self):
        assert Array(Int()).optional().encode() == b"null"

    def test_decode(self):
        schema = Array(String())
        schema.decode(b'["a", "bb"]')
        assert schema.values() == (["a", "bb"], True)

    def test_decode_non_array(self):
        with pytest.raises(DecodeError) as info:
            Array(Int()).decode(b'{"a": 1}')
        assert info.value.kind is ErrorKind.INVALID_FORMAT

    def test_decode_malformed(self):
        with pytest.raises(DecodeError) as info:
            Array(Int()).decode(b"[1,")
        assert info.value.kind is ErrorKind.INVALID_FORMAT

    def test_decode_bad_element(self):
        schema = Array(Int())
        with pytest.raises(DecodeError) as info:
            schema.decode(b'[1, "x", 3]')

        errors = info.value.result.errors
        assert [d.kind for d in errors] == [ErrorKind.INVALID_ELEMENT_TYPE]
        assert errors[0].message.startswith("element 1: ")
        assert schema.values() == ([1, 3], True)

    def test_decode_missing_element_value(self):
        with pytest.raises(DecodeError) as info:
            Array(Int().optional()).decode(b"[1, null]")
        detail = info.value.result.errors[0]
        assert detail.kind is ErrorKind.MISSING_ELEMENT_VALUE
        assert detail.message == "element 1: missing value"

    def test_decode_null(self):
        schema = Array(Int()).optional().set(1)
        schema.decode(b"null")
        assert schema.values() == (None, False)

        with pytest.raises(DecodeError) as info:
            Array(Int()).decode(b"null")
        assert info.value.kind is ErrorKind.REQUIRED

    def test_round_trip(self):
        source = Array(String().min(1)).set("a", "b")
        target = Array(String().min(1))
        target.decode(source.encode())
        assert target.values() == source.values()


class TestClone:
    """Tests for clone independence."""

    def test_clone_value_is_independent(self):
        original = Array(Int()).min_items(1).set(1)
        copy = original.clone()
        copy.set()
        assert not original.validate().has_errors()
        assert copy.validate().errors[0].kind is ErrorKind.MIN_ITEMS

    def test_clone_rules_do_not_leak_back(self):
        original = Array(Int()).set(1, 2)
        original.clone().max_items(0)
        assert not original.validate().has_errors()


class TestJSONSchema:
    """Tests for array compilation."""

    def test_to_json_schema(self):
        node = Array(String().min(1)).min_items(1).max_items(5).description("Tags").to_json_schema()
        assert node.to_dict() == {
            "description": "Tags",
            "type": "array",
            "items": {"type": "string", "minLength": 1},
            "minItems": 1,
            "maxItems": 5,
        }
