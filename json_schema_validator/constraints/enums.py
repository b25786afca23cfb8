"""
Enum constraint implementation and JSON value equality.
"""

import json
import math
from typing import Any, Mapping

from .base import Constraint, ValidationContext
from ..errors import NotInEnum
from ..utils import SchemaKeywords, TypeChecker, is_number

# Relative tolerance when comparing numbers for enum, const and uniqueItems
EQUALITY_EPSILON = 1e-9


def json_equal(left: Any, right: Any) -> bool:
    """
    Deep structural equality of two JSON values.

    Booleans never equal numbers, 1 equals 1.0, numbers compare with a small
    relative tolerance, arrays compare element-wise in order and objects
    compare by key set and member values.

    Args:
        left: First value
        right: Second value

    Returns:
        True if the values are equal as JSON
    """
    if is_number(left) and is_number(right):
        if isinstance(left, int) and isinstance(right, int):
            return left == right
        try:
            return math.isclose(left, right, rel_tol=EQUALITY_EPSILON, abs_tol=0.0)
        except OverflowError:
            # An int beyond float range can never equal a float
            return False

    left_type = TypeChecker.json_type(left)
    right_type = TypeChecker.json_type(right)
    if left_type != right_type:
        return False

    if left_type == "array":
        if len(left) != len(right):
            return False
        return all(json_equal(a, b) for a, b in zip(left, right))

    if left_type == "object":
        if len(left) != len(right):
            return False
        for key, member in left.items():
            if key not in right or not json_equal(member, right[key]):
                return False
        return True

    return left == right


def describe_value(value: Any) -> str:
    """Render a value as JSON text for error messages."""
    try:
        return json.dumps(value, sort_keys=True, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)


class EnumConstraint(Constraint):
    """
    Constraint that validates a value against an enumeration.
    """

    keywords = frozenset({SchemaKeywords.ENUM})

    def validate(self, value: Any, schema: Mapping[str, Any], context: ValidationContext) -> bool:
        """
        Validate a value against this enum constraint.

        Args:
            value: Value to validate
            schema: Schema holding the ``enum`` list
            context: Validation context

        Returns:
            True if validation succeeds, False otherwise
        """
        allowed = schema[SchemaKeywords.ENUM]
        if not isinstance(allowed, (list, tuple)):
            context.invalid_schema(f"'enum' must be an array, got {allowed!r}")
            return False

        if any(json_equal(candidate, value) for candidate in allowed):
            return True

        context.add_error(NotInEnum(
            path=context.path,
            allowed_values=tuple(describe_value(candidate) for candidate in allowed),
        ))
        return False

    def __str__(self) -> str:
        return "EnumConstraint()"
