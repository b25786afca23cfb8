#!/usr/bin/env python3
"""
Integration tests for the JSON validator.
"""
import json
import logging
import threading

import pytest

from json_schema_validator import (
    ErrorCode,
    JsonValidator,
    ValidationFailed,
    ValidationResult,
    validate,
)


@pytest.fixture
def order_schema():
    """Create a realistic order schema for testing."""
    return {
        "title": "Order",
        "type": "object",
        "properties": {
            "id": {"type": "string", "format": "uuid"},
            "customer": {
                "type": "object",
                "properties": {
                    "name": {"type": "string", "minLength": 1},
                    "email": {"type": "string", "format": "email"}
                },
                "required": ["name", "email"],
                "additionalProperties": False
            },
            "items": {
                "type": "array",
                "minItems": 1,
                "items": {
                    "type": "object",
                    "properties": {
                        "sku": {"type": "string", "pattern": "^[A-Z]{3}-[0-9]{4}$"},
                        "quantity": {"type": "integer", "minimum": 1},
                        "price": {"type": "number", "exclusiveMinimum": 0, "multipleOf": 0.01}
                    },
                    "required": ["sku", "quantity", "price"]
                }
            },
            "status": {"enum": ["pending", "paid", "shipped"]},
            "tags": {"type": "array", "items": {"type": "string"}, "uniqueItems": True}
        },
        "required": ["id", "customer", "items", "status"],
        "if": {"properties": {"status": {"const": "shipped"}}, "required": ["status"]},
        "then": {"required": ["tracking"]}
    }


@pytest.fixture
def valid_order():
    """Create a valid order for testing."""
    return {
        "id": "123e4567-e89b-12d3-a456-426614174000",
        "customer": {"name": "Ada", "email": "ada@example.com"},
        "items": [
            {"sku": "ABC-1234", "quantity": 2, "price": 19.99},
            {"sku": "XYZ-0001", "quantity": 1, "price": 0.1}
        ],
        "status": "paid",
        "tags": ["gift", "priority"]
    }


def test_valid_document(order_schema, valid_order):
    """Test that a conforming document produces no errors."""
    result = JsonValidator().validate(valid_order, order_schema)
    assert result.valid
    assert result.errors == []
    assert bool(result)


def test_document_from_json_text(order_schema, valid_order):
    """Test validating json.loads output."""
    data = json.loads(json.dumps(valid_order))
    assert JsonValidator().validate(data, order_schema).valid


def test_invalid_document_reports_every_error(order_schema, valid_order):
    """Test that errors from every level are collected with their paths."""
    order = dict(valid_order)
    order["customer"] = {"name": "", "email": "nope", "phone": "555"}
    order["items"] = [
        {"sku": "ABC-1234", "quantity": 2, "price": 19.99},
        {"sku": "bad", "quantity": 0, "price": 1.005}
    ]
    order["status"] = "lost"
    order["tags"] = ["a", "a"]

    result = JsonValidator().validate(order, order_schema)
    assert not result.valid
    found = [(error.path, error.code) for error in result.errors]
    assert found == [
        ("customer/name", ErrorCode.STRING_TOO_SHORT),
        ("customer/email", ErrorCode.FORMAT_MISMATCH),
        ("customer", ErrorCode.ADDITIONAL_PROPERTY_NOT_ALLOWED),
        ("items[1]/sku", ErrorCode.PATTERN_MISMATCH),
        ("items[1]/quantity", ErrorCode.NUMBER_TOO_SMALL),
        ("items[1]/price", ErrorCode.NOT_MULTIPLE_OF),
        ("status", ErrorCode.NOT_IN_ENUM),
        ("tags", ErrorCode.DUPLICATE_ITEMS),
    ]


def test_conditional_requirement(order_schema, valid_order):
    """Test that shipped orders need a tracking number."""
    order = dict(valid_order, status="shipped")

    result = JsonValidator().validate(order, order_schema)
    assert [(error.path, error.code) for error in result.errors] == [
        ("", ErrorCode.REQUIRED_PROPERTY_MISSING),
    ]

    order["tracking"] = "1Z999"
    assert JsonValidator().validate(order, order_schema).valid


def test_error_strings(order_schema, valid_order):
    """Test the rendered error text."""
    order = dict(valid_order)
    del order["status"]

    result = JsonValidator().validate(order, order_schema)
    assert [str(error) for error in result.errors] == ["Missing required property 'status'"]

    order["status"] = "lost"
    result = JsonValidator().validate(order, order_schema)
    assert str(result.errors[0]) == 'status: Value must be one of: "pending", "paid", "shipped"'


class TestResultApi:
    """Tests for the result and exception API."""

    def test_check_raises(self):
        """Test that check raises with the error list."""
        validator = JsonValidator()
        with pytest.raises(ValidationFailed) as excinfo:
            validator.check({"a": 1}, {"required": ["b", "c"]})

        assert len(excinfo.value.errors) == 2
        assert "Validation failed with 2 errors" in str(excinfo.value)
        assert isinstance(excinfo.value, ValueError)

    def test_check_passes(self):
        """Test that check returns quietly for valid data."""
        assert JsonValidator().check("x", {"type": "string"}) is None

    def test_raise_for_errors(self):
        """Test raising from a result."""
        ValidationResult().raise_for_errors()

        result = JsonValidator().validate(1, {"type": "string"})
        with pytest.raises(ValidationFailed) as excinfo:
            result.raise_for_errors()
        assert str(excinfo.value) == "Validation failed: Expected type 'string' but got 'integer'"

    def test_iter_errors(self):
        """Test iterating over errors."""
        errors = list(JsonValidator().iter_errors([1, "a"], {"items": {"type": "integer"}}))
        assert [error.path for error in errors] == ["[1]"]

    def test_module_level_validate(self):
        """Test the shared-instance convenience function."""
        validate({"a": 1}, {"type": "object"})

        with pytest.raises(ValidationFailed) as excinfo:
            validate("x", {"type": "integer"})
        assert excinfo.value.errors[0].code == ErrorCode.TYPE_MISMATCH


class TestLogging:
    """Tests for log output."""

    def test_unknown_type_is_logged(self, caplog):
        """Test that unknown type names produce a warning."""
        with caplog.at_level(logging.WARNING, logger="json_schema_validator"):
            result = JsonValidator().validate(1, {"type": ["float", "integer"]})

        assert result.valid
        assert any("Unknown type 'float'" in record.message for record in caplog.records)

    def test_debug_summary(self, caplog):
        """Test the per-call debug summary."""
        with caplog.at_level(logging.DEBUG, logger="json_schema_validator"):
            JsonValidator().validate("x", {"type": "integer"})

        assert any("1 error(s)" in record.message for record in caplog.records)

    def test_combinator_outcomes_logged_only_at_debug(self, caplog):
        """Test that combinator outcomes are logged at DEBUG and not above."""
        schema = {"oneOf": [{"type": "string"}, {"type": "integer"}], "if": {"type": "integer"}}

        with caplog.at_level(logging.INFO, logger="json_schema_validator"):
            JsonValidator().validate(1, schema)
        assert not caplog.records

        with caplog.at_level(logging.DEBUG, logger="json_schema_validator"):
            JsonValidator().validate(1, schema)
        messages = [record.message for record in caplog.records]
        assert any("oneOf matched 1 of 2 branches" in message for message in messages)
        assert any("if matched" in message for message in messages)


def test_shared_validator_across_threads(order_schema, valid_order):
    """Test that one validator can serve concurrent calls."""
    validator = JsonValidator()
    invalid = dict(valid_order, status="lost")
    outcomes = []

    def worker(data, expected):
        for _ in range(50):
            outcomes.append(validator.validate(data, order_schema).valid == expected)

    threads = [
        threading.Thread(target=worker, args=(valid_order, True)),
        threading.Thread(target=worker, args=(invalid, False)),
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(outcomes) == 100
    assert all(outcomes)


if __name__ == "__main__":
    pytest.main(["-xvs", __file__])
