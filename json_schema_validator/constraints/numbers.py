"""
Number constraint implementation.
"""

import math
from fractions import Fraction
from typing import Any, Mapping, Union

from .base import TypeConstraint, ValidationContext
from ..errors import NotMultipleOf, NumberTooLarge, NumberTooSmall
from ..utils import SchemaKeywords

# Relative tolerance for multipleOf on floats: 0.3 is a multiple of 0.1
# even though 0.3 % 0.1 == 0.09999999999999998
MULTIPLE_OF_EPSILON = 1e-9


def is_multiple_of(value: Union[int, float], multiple_of: Union[int, float]) -> bool:
    """
    Check whether a number is a multiple of another, tolerating float error.

    Args:
        value: Number to check
        multiple_of: Positive divisor

    Returns:
        True if value / multiple_of is (within tolerance) a whole number
    """
    if isinstance(value, int) and isinstance(multiple_of, int):
        return value % multiple_of == 0

    try:
        quotient = value / multiple_of
    except OverflowError:
        # An int operand is too large for float division; divide exactly
        if any(isinstance(n, float) and not math.isfinite(n) for n in (value, multiple_of)):
            return False
        return (Fraction(value) / Fraction(multiple_of)).denominator == 1
    if not math.isfinite(quotient):
        return False
    return math.isclose(quotient, round(quotient), rel_tol=MULTIPLE_OF_EPSILON, abs_tol=MULTIPLE_OF_EPSILON)


class NumberConstraint(TypeConstraint):
    """
    Constraint for validating numeric values.

    Inclusive and exclusive bounds are independent keywords; when both are
    present each one is checked and reported on its own.
    """

    keywords = SchemaKeywords.NUMBER_KEYWORDS

    @property
    def json_type(self) -> str:
        return "number"

    def _validate_type_specific(self, value: Any, schema: Mapping[str, Any],
                                context: ValidationContext) -> None:
        """
        Validate number-specific constraints.

        Args:
            value: The number to validate (guaranteed to be a number)
            schema: Schema holding the keyword values
            context: Validation context
        """
        path = context.path

        # Check minimum
        minimum = self._read_number(schema, SchemaKeywords.MINIMUM, context)
        if minimum is not None and value < minimum:
            context.add_error(NumberTooSmall(path=path, minimum=minimum, actual=value, exclusive=False))

        # Check exclusiveMinimum
        exclusive_minimum = self._read_number(schema, SchemaKeywords.EXCLUSIVE_MINIMUM, context)
        if exclusive_minimum is not None and value <= exclusive_minimum:
            context.add_error(NumberTooSmall(path=path, minimum=exclusive_minimum, actual=value, exclusive=True))

        # Check maximum
        maximum = self._read_number(schema, SchemaKeywords.MAXIMUM, context)
        if maximum is not None and value > maximum:
            context.add_error(NumberTooLarge(path=path, maximum=maximum, actual=value, exclusive=False))

        # Check exclusiveMaximum
        exclusive_maximum = self._read_number(schema, SchemaKeywords.EXCLUSIVE_MAXIMUM, context)
        if exclusive_maximum is not None and value >= exclusive_maximum:
            context.add_error(NumberTooLarge(path=path, maximum=exclusive_maximum, actual=value, exclusive=True))

        # Check multipleOf
        multiple_of = self._read_number(schema, SchemaKeywords.MULTIPLE_OF, context)
        if multiple_of is not None:
            if multiple_of <= 0:
                context.invalid_schema(f"'multipleOf' must be greater than 0, got {multiple_of!r}")
            elif not is_multiple_of(value, multiple_of):
                context.add_error(NotMultipleOf(path=path, multiple_of=multiple_of, actual=value))

    def __str__(self) -> str:
        return "NumberConstraint()"
