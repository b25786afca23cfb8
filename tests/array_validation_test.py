#!/usr/bin/env python3
"""
Tests for array-specific validation features.
"""
import pytest

from json_schema_validator import ErrorCode, JsonValidator, TooManyItems


class TestArrayValidation:
    """Tests for array schema keywords."""

    def setup_method(self):
        """Set up the test environment."""
        self.validator = JsonValidator()

    def test_item_counts(self):
        """Test minItems and maxItems."""
        schema = {"type": "array", "minItems": 1, "maxItems": 3}

        assert self.validator.validate([1], schema).valid
        assert self.validator.validate([1, 2, 3], schema).valid

        result = self.validator.validate([], schema)
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.TOO_FEW_ITEMS
        assert result.errors[0].min_items == 1
        assert not result.errors[0].contains

        result = self.validator.validate([1, 2, 3, 4], schema)
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.TOO_MANY_ITEMS
        assert result.errors[0].message == "Array has 4 items but maximum is 3"

    def test_items_schema(self):
        """Test that items applies to every element with indexed paths."""
        schema = {"type": "array", "items": {"type": "integer"}}

        assert self.validator.validate([1, 2, 3], schema).valid

        result = self.validator.validate([1, "a", 3, None], schema)
        assert [error.path for error in result.errors] == ["[1]", "[3]"]
        assert all(error.code == ErrorCode.TYPE_MISMATCH for error in result.errors)

    def test_nested_item_paths(self):
        """Test paths through objects and arrays."""
        schema = {
            "properties": {
                "items": {"items": {"type": "string"}}
            }
        }

        result = self.validator.validate({"items": ["a", 2]}, schema)
        assert len(result.errors) == 1
        assert result.errors[0].path == "items[1]"

        schema = {"items": {"properties": {"sku": {"type": "string"}}}}
        result = self.validator.validate([{"sku": "a"}, {"sku": 1}], schema)
        assert result.errors[0].path == "[1]/sku"

    def test_unique_items(self):
        """Test uniqueItems."""
        schema = {"uniqueItems": True}

        assert self.validator.validate([1, 2, 3], schema).valid
        assert self.validator.validate([1, True], schema).valid
        assert self.validator.validate([{"a": 1}, {"a": 2}], schema).valid

        # One error no matter how many duplicates
        result = self.validator.validate([1, 2, 1, 2], schema)
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.DUPLICATE_ITEMS

        assert not self.validator.validate([1, 1.0], schema).valid
        assert not self.validator.validate([{"a": [1]}, {"a": [1]}], schema).valid

        # uniqueItems: false does nothing
        assert self.validator.validate([1, 1], {"uniqueItems": False}).valid

    def test_unique_items_with_integers_beyond_float_range(self):
        """Test uniqueItems when an integer is too large for a float."""
        huge = 10 ** 400
        schema = {"uniqueItems": True}

        assert self.validator.validate([huge, 2.5], schema).valid
        assert self.validator.validate([2.5, huge, huge + 1], schema).valid

        result = self.validator.validate([huge, 2.5, huge], schema)
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.DUPLICATE_ITEMS

    def test_prefix_items(self):
        """Test tuple validation with prefixItems."""
        schema = {
            "prefixItems": [{"type": "string"}, {"type": "integer"}]
        }

        assert self.validator.validate(["a", 1], schema).valid
        # Shorter arrays and extra elements are allowed
        assert self.validator.validate(["a"], schema).valid
        assert self.validator.validate(["a", 1, None], schema).valid

        result = self.validator.validate([1, "a"], schema)
        assert [error.path for error in result.errors] == ["[0]", "[1]"]

    def test_prefix_items_with_items(self):
        """Test that items applies after the tuple prefix."""
        schema = {
            "prefixItems": [{"type": "string"}],
            "items": {"type": "integer"}
        }

        assert self.validator.validate(["a", 1, 2], schema).valid

        result = self.validator.validate(["a", 1, "b"], schema)
        assert len(result.errors) == 1
        assert result.errors[0].path == "[2]"

    def test_items_false_closes_tuple(self):
        """Test that items: false forbids elements past the prefix."""
        schema = {
            "prefixItems": [{"type": "string"}, {"type": "integer"}],
            "items": False
        }

        assert self.validator.validate(["a", 1], schema).valid

        result = self.validator.validate(["a", 1, 2, 3], schema)
        assert result.errors == [TooManyItems(path="", max_items=2, actual=4)]

        # Without prefixItems, no element is allowed
        result = self.validator.validate([1], {"items": False})
        assert result.errors == [TooManyItems(path="", max_items=0, actual=1)]
        assert self.validator.validate([], {"items": False}).valid

    def test_contains(self):
        """Test contains with the default minimum of one match."""
        schema = {"contains": {"type": "integer", "minimum": 5}}

        assert self.validator.validate([1, 6], schema).valid

        result = self.validator.validate([1, 2], schema)
        assert len(result.errors) == 1
        error = result.errors[0]
        assert error.code == ErrorCode.TOO_FEW_ITEMS
        assert error.contains
        assert error.min_items == 1
        assert error.actual == 0
        assert "matching items" in error.message

        # Errors from the non-matching elements are not reported
        assert result.errors[0].path == ""

    def test_min_and_max_contains(self):
        """Test minContains and maxContains."""
        schema = {"contains": {"type": "string"}, "minContains": 2, "maxContains": 3}

        assert self.validator.validate(["a", "b", 1], schema).valid

        result = self.validator.validate(["a", 1], schema)
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.TOO_FEW_ITEMS
        assert result.errors[0].min_items == 2

        result = self.validator.validate(["a", "b", "c", "d"], schema)
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.TOO_MANY_ITEMS
        assert result.errors[0].contains
        assert result.errors[0].actual == 4

    def test_min_contains_zero(self):
        """Test that minContains: 0 accepts arrays without matches."""
        schema = {"contains": {"type": "string"}, "minContains": 0}
        assert self.validator.validate([1, 2], schema).valid
        assert self.validator.validate([], schema).valid

    def test_tuples_are_arrays(self):
        """Test that Python tuples are validated as arrays."""
        schema = {"type": "array", "items": {"type": "integer"}, "maxItems": 2}
        assert self.validator.validate((1, 2), schema).valid
        assert not self.validator.validate((1, 2, 3), schema).valid

    def test_array_keywords_ignore_other_types(self):
        """Test that array keywords do not apply to non-arrays."""
        schema = {"minItems": 2, "items": {"type": "string"}}
        assert self.validator.validate({"a": 1}, schema).valid
        assert self.validator.validate("ab", schema).valid

    def test_malformed_prefix_items(self):
        """Test that a non-array prefixItems is reported."""
        result = self.validator.validate([1], {"prefixItems": {"type": "string"}})
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.INVALID_SCHEMA


if __name__ == "__main__":
    pytest.main(["-xvs", __file__])
