"""
Const constraint implementation.
"""

from typing import Any, Mapping

from .base import Constraint, ValidationContext
from .enums import describe_value, json_equal
from ..errors import ConstMismatch
from ..utils import SchemaKeywords


class ConstConstraint(Constraint):
    """
    Constraint that validates a value against a constant.
    """

    keywords = frozenset({SchemaKeywords.CONST})

    def validate(self, value: Any, schema: Mapping[str, Any], context: ValidationContext) -> bool:
        """
        Validate a value against this const constraint.

        ``"const": null`` is a real constraint: only null matches it.

        Args:
            value: Value to validate
            schema: Schema holding the ``const`` value
            context: Validation context

        Returns:
            True if validation succeeds, False otherwise
        """
        expected = schema[SchemaKeywords.CONST]
        if json_equal(expected, value):
            return True

        context.add_error(ConstMismatch(
            path=context.path,
            expected=describe_value(expected),
            actual=describe_value(value),
        ))
        return False

    def __str__(self) -> str:
        return "ConstConstraint()"
