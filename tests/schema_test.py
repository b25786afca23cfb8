#!/usr/bin/env python3
"""
Tests for the typed Schema object.
"""
import pytest

from json_schema_validator import ErrorCode, JsonValidator, Schema
from json_schema_validator.schema import normalize_schema


class TestSchema:
    """Tests for Schema construction and conversion."""

    def test_to_dict_uses_keyword_names(self):
        """Test that attributes are emitted under their JSON Schema names."""
        schema = Schema(
            type="array",
            min_items=1,
            unique_items=True,
            prefix_items=[Schema.string()],
            items=False,
        )
        assert schema.to_dict() == {
            "type": "array",
            "prefixItems": [{"type": "string"}],
            "items": False,
            "minItems": 1,
            "uniqueItems": True,
        }

    def test_unset_attributes_are_omitted(self):
        """Test that an empty Schema is the empty schema."""
        assert Schema().to_dict() == {}

    def test_const_none_is_kept(self):
        """Test that const=None is distinguished from unset."""
        assert Schema(const=None).to_dict() == {"const": None}
        assert "const" not in Schema(type="null").to_dict()

    def test_default_none_is_kept(self):
        """Test that default=None is distinguished from unset."""
        assert Schema(default=None).to_dict() == {"default": None}
        assert "default" not in Schema.string().to_dict()

    def test_composition_keywords(self):
        """Test the renamed composition attributes."""
        schema = Schema(
            if_=Schema(properties={"kind": Schema(const="a")}),
            then=Schema(required=["a"]),
            else_=Schema(required=["b"]),
            not_=Schema.null(),
            any_of=[Schema.string(), {"type": "integer"}],
        )
        assert schema.to_dict() == {
            "anyOf": [{"type": "string"}, {"type": "integer"}],
            "not": {"type": "null"},
            "if": {"properties": {"kind": {"const": "a"}}},
            "then": {"required": ["a"]},
            "else": {"required": ["b"]},
        }

    def test_helpers(self):
        """Test the shape helpers."""
        assert Schema.integer(minimum=0).to_dict() == {"type": "integer", "minimum": 0}
        assert Schema.boolean().to_dict() == {"type": "boolean"}
        assert Schema.array(Schema.number()).to_dict() == {"type": "array", "items": {"type": "number"}}
        assert Schema.object(
            {"name": Schema.string(min_length=1)}, required=["name"], additional_properties=False
        ).to_dict() == {
            "type": "object",
            "properties": {"name": {"type": "string", "minLength": 1}},
            "required": ["name"],
            "additionalProperties": False,
        }

    def test_annotations(self):
        """Test that annotations are carried through."""
        schema = Schema.string(title="Name", description="Full name", default="n/a")
        assert schema.to_dict() == {
            "type": "string",
            "title": "Name",
            "description": "Full name",
            "default": "n/a",
        }


class TestNormalizeSchema:
    """Tests for schema normalisation at the API boundary."""

    def test_passthrough(self):
        """Test that mappings and booleans are used as given."""
        schema = {"type": "string"}
        assert normalize_schema(schema) is schema
        assert normalize_schema(True) is True
        assert normalize_schema(False) is False

    def test_schema_object(self):
        """Test that Schema objects become mappings."""
        assert normalize_schema(Schema.string()) == {"type": "string"}

    def test_unsupported_type(self):
        """Test that other types are programming errors."""
        with pytest.raises(TypeError):
            normalize_schema("string")
        with pytest.raises(TypeError):
            normalize_schema(None)


class TestValidateWithSchema:
    """Tests for validating against Schema objects."""

    def setup_method(self):
        """Set up the test environment."""
        self.validator = JsonValidator()

    def test_validate(self):
        """Test that a Schema validates like its mapping form."""
        schema = Schema.object(
            {"age": Schema.integer(minimum=0)},
            required=["age"],
        )

        assert self.validator.validate({"age": 3}, schema).valid

        result = self.validator.validate({"age": -3}, schema)
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.NUMBER_TOO_SMALL
        assert result.errors[0].path == "age"

    def test_const_none_only_accepts_null(self):
        """Test that a null constant built from a Schema is enforced."""
        schema = Schema(const=None)

        assert self.validator.validate(None, schema).valid

        result = self.validator.validate(5, schema)
        assert len(result.errors) == 1
        assert result.errors[0].code == ErrorCode.CONST_MISMATCH
        assert result.errors[0].expected == "null"

    def test_invalid_schema_type_raises(self):
        """Test that an unsupported schema raises TypeError."""
        with pytest.raises(TypeError):
            self.validator.validate({}, ["type", "object"])


if __name__ == "__main__":
    pytest.main(["-xvs", __file__])
