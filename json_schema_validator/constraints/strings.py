"""
String constraint implementation.
"""

from typing import Any, Mapping

from .base import TypeConstraint, ValidationContext
from .formats import FormatChecker
from ..errors import FormatMismatch, PatternMismatch, StringTooLong, StringTooShort
from ..utils import SchemaKeywords, pattern_matches


class StringConstraint(TypeConstraint):
    """
    Constraint for validating string values.

    Lengths count Unicode code points, not bytes. Patterns are searched, not
    anchored, so ``"b"`` matches ``"abc"`` unless the pattern uses ``^``/``$``.
    """

    keywords = SchemaKeywords.STRING_KEYWORDS

    @property
    def json_type(self) -> str:
        return "string"

    def _validate_type_specific(self, value: Any, schema: Mapping[str, Any],
                                context: ValidationContext) -> None:
        """
        Validate string-specific constraints.

        Args:
            value: The string to validate (guaranteed to be a string)
            schema: Schema holding the keyword values
            context: Validation context
        """
        length = len(value)

        # Check minLength
        min_length = self._read_count(schema, SchemaKeywords.MIN_LENGTH, context)
        if min_length is not None and length < min_length:
            context.add_error(StringTooShort(
                path=context.path, min_length=min_length, actual_length=length
            ))

        # Check maxLength
        max_length = self._read_count(schema, SchemaKeywords.MAX_LENGTH, context)
        if max_length is not None and length > max_length:
            context.add_error(StringTooLong(
                path=context.path, max_length=max_length, actual_length=length
            ))

        # Check pattern
        if SchemaKeywords.PATTERN in schema:
            self._validate_pattern(value, schema[SchemaKeywords.PATTERN], context)

        # Check format
        if SchemaKeywords.FORMAT in schema and context.validate_formats:
            format_name = schema[SchemaKeywords.FORMAT]
            if not isinstance(format_name, str):
                context.invalid_schema(f"'format' must be a string, got {format_name!r}")
            elif not FormatChecker.check(value, format_name):
                context.add_error(FormatMismatch(path=context.path, format=format_name, value=value))

    def _validate_pattern(self, value: str, pattern: Any, context: ValidationContext) -> None:
        if not isinstance(pattern, str):
            context.invalid_schema(f"'pattern' must be a string, got {pattern!r}")
            return

        matched = pattern_matches(pattern, value)
        if matched is None and context.strict_patterns:
            context.invalid_schema(f"Invalid regex pattern '{pattern}'")
        elif not matched:
            # An uncompilable pattern matches nothing
            context.add_error(PatternMismatch(path=context.path, pattern=pattern))

    def __str__(self) -> str:
        return "StringConstraint()"
