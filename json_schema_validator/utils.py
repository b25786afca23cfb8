"""
Utility classes and functions for the JSON Schema validator.
"""

import logging
import re
from functools import lru_cache
from typing import Any, FrozenSet, Mapping, Optional, Pattern, Union

logger = logging.getLogger("json_schema_validator")


class JsonPath:
    """
    Builds the location strings attached to validation errors.

    The root is the empty string. Object members are joined with ``/`` and
    array elements are appended as ``[index]``, e.g. ``orders[2]/sku``.
    """

    ROOT = ""

    @staticmethod
    def child(path: str, name: str) -> str:
        """
        Append an object member name to a path.

        Args:
            path: Parent path
            name: Property name

        Returns:
            The member's path
        """
        if not path:
            return name
        return f"{path}/{name}"

    @staticmethod
    def item(path: str, index: int) -> str:
        """
        Append an array index to a path.

        Args:
            path: Parent path
            index: Element index

        Returns:
            The element's path
        """
        return f"{path}[{index}]"


class SchemaKeywords:
    """Constants for JSON Schema keywords."""

    # Type keywords
    TYPE = "type"

    # Number keywords
    MINIMUM = "minimum"
    MAXIMUM = "maximum"
    EXCLUSIVE_MINIMUM = "exclusiveMinimum"
    EXCLUSIVE_MAXIMUM = "exclusiveMaximum"
    MULTIPLE_OF = "multipleOf"

    # String keywords
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    PATTERN = "pattern"
    FORMAT = "format"

    # Array keywords
    ITEMS = "items"
    PREFIX_ITEMS = "prefixItems"
    MIN_ITEMS = "minItems"
    MAX_ITEMS = "maxItems"
    UNIQUE_ITEMS = "uniqueItems"
    CONTAINS = "contains"
    MIN_CONTAINS = "minContains"
    MAX_CONTAINS = "maxContains"

    # Object keywords
    PROPERTIES = "properties"
    PATTERN_PROPERTIES = "patternProperties"
    ADDITIONAL_PROPERTIES = "additionalProperties"
    REQUIRED = "required"
    MIN_PROPERTIES = "minProperties"
    MAX_PROPERTIES = "maxProperties"

    # Schema composition
    ALL_OF = "allOf"
    ANY_OF = "anyOf"
    ONE_OF = "oneOf"
    NOT = "not"
    IF = "if"
    THEN = "then"
    ELSE = "else"

    # Miscellaneous
    ENUM = "enum"
    CONST = "const"

    # Annotations
    TITLE = "title"
    DESCRIPTION = "description"
    DEFAULT = "default"

    STRING_KEYWORDS: FrozenSet[str] = frozenset({MIN_LENGTH, MAX_LENGTH, PATTERN, FORMAT})
    NUMBER_KEYWORDS: FrozenSet[str] = frozenset({
        MINIMUM, MAXIMUM, EXCLUSIVE_MINIMUM, EXCLUSIVE_MAXIMUM, MULTIPLE_OF
    })
    ARRAY_KEYWORDS: FrozenSet[str] = frozenset({
        ITEMS, PREFIX_ITEMS, MIN_ITEMS, MAX_ITEMS, UNIQUE_ITEMS, CONTAINS
    })
    OBJECT_KEYWORDS: FrozenSet[str] = frozenset({
        PROPERTIES, REQUIRED, ADDITIONAL_PROPERTIES, PATTERN_PROPERTIES,
        MIN_PROPERTIES, MAX_PROPERTIES
    })
    COMBINATOR_KEYWORDS: FrozenSet[str] = frozenset({ALL_OF, ANY_OF, ONE_OF, NOT, IF})

    @staticmethod
    def get_implied_type(keyword: str) -> Optional[str]:
        """
        Get the type implied by a schema keyword.

        Args:
            keyword: Schema keyword

        Returns:
            Implied type, or None if the keyword doesn't imply a type
        """
        if keyword in SchemaKeywords.NUMBER_KEYWORDS:
            return "number"
        if keyword in SchemaKeywords.STRING_KEYWORDS:
            return "string"
        if keyword in SchemaKeywords.ARRAY_KEYWORDS:
            return "array"
        if keyword in SchemaKeywords.OBJECT_KEYWORDS:
            return "object"
        return None


class TypeChecker:
    """Utilities for mapping Python values onto JSON Schema types."""

    # JSON Schema type names, in the order used for error messages
    JSON_TYPES = ("null", "boolean", "integer", "number", "string", "array", "object")

    @staticmethod
    def json_type(value: Any) -> str:
        """
        Get the JSON Schema type for a Python value.

        Integral floats such as 1.0 report as "integer".

        Args:
            value: Python value

        Returns:
            JSON Schema type name, or "unknown" for non-JSON values
        """
        if value is None:
            return "null"
        elif isinstance(value, bool):
            return "boolean"
        elif isinstance(value, int):
            return "integer"
        elif isinstance(value, float):
            return "integer" if value.is_integer() else "number"
        elif isinstance(value, str):
            return "string"
        elif isinstance(value, (list, tuple)):
            return "array"
        elif isinstance(value, Mapping):
            return "object"
        else:
            return "unknown"

    @staticmethod
    def check_type(value: Any, expected_type: str) -> bool:
        """
        Check whether a value belongs to a JSON Schema type.

        Args:
            value: Python value
            expected_type: JSON Schema type name

        Returns:
            True if the value is a member of the type; unknown type names
            match nothing
        """
        actual = TypeChecker.json_type(value)
        if expected_type == "number":
            return actual in ("number", "integer")
        return actual == expected_type

    @staticmethod
    def is_integer(value: Any) -> bool:
        """Check for an integral JSON number (1 and 1.0, never True)."""
        return TypeChecker.json_type(value) == "integer"

    @staticmethod
    def extract_number(value: Any) -> Optional[Union[int, float]]:
        """
        Get the numeric value of a JSON number.

        Returns:
            The number, or None for booleans and non-numbers
        """
        if is_number(value):
            return value
        return None


@lru_cache(maxsize=512)
def compile_pattern(pattern: str) -> Optional[Pattern]:
    """
    Compile a schema regular expression, caching the result.

    Args:
        pattern: Regular expression source

    Returns:
        The compiled pattern, or None if the expression is invalid
    """
    try:
        return re.compile(pattern)
    except re.error as e:
        logger.warning(f"Invalid regex pattern '{pattern}': {e}")
        return None


def pattern_matches(pattern: str, value: str) -> Optional[bool]:
    """
    Search a string for a schema regular expression.

    Matching is unanchored: a match anywhere in the string counts.

    Returns:
        True or False, or None when the pattern does not compile
    """
    compiled = compile_pattern(pattern)
    if compiled is None:
        return None
    return compiled.search(value) is not None


def is_number(value: Any) -> bool:
    """Check for a JSON number, excluding booleans."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_non_negative_int(value: Any) -> bool:
    """Check for a keyword value usable as a count (3 and 3.0 both qualify)."""
    if not is_number(value) or value < 0:
        return False
    return isinstance(value, int) or float(value).is_integer()
