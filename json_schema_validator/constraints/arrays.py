"""
Array constraint implementation.
"""

import logging
from typing import Any, Mapping, Sequence

from .base import TypeConstraint, ValidationContext
from .enums import json_equal
from ..errors import DuplicateItems, TooFewItems, TooManyItems
from ..utils import SchemaKeywords

logger = logging.getLogger("json_schema_validator")


def has_duplicates(items: Sequence[Any]) -> bool:
    """
    Check whether any two elements are equal as JSON values.

    Elements are compared pairwise with ``json_equal`` because JSON values
    (objects, arrays, 1 vs 1.0, True vs 1) do not hash consistently.
    """
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if json_equal(items[i], items[j]):
                return True
    return False


class ArrayConstraint(TypeConstraint):
    """
    Constraint for validating array values.
    """

    keywords = SchemaKeywords.ARRAY_KEYWORDS

    @property
    def json_type(self) -> str:
        return "array"

    def _validate_type_specific(self, value: Any, schema: Mapping[str, Any],
                                context: ValidationContext) -> None:
        """
        Validate array-specific constraints.

        Args:
            value: The array to validate (guaranteed to be a list or tuple)
            schema: Schema holding the keyword values
            context: Validation context
        """
        # Check minItems
        min_items = self._read_count(schema, SchemaKeywords.MIN_ITEMS, context)
        if min_items is not None and len(value) < min_items:
            context.add_error(TooFewItems(path=context.path, min_items=min_items, actual=len(value)))

        # Check maxItems
        max_items = self._read_count(schema, SchemaKeywords.MAX_ITEMS, context)
        if max_items is not None and len(value) > max_items:
            context.add_error(TooManyItems(path=context.path, max_items=max_items, actual=len(value)))

        # Check uniqueItems, reported once however many duplicates there are
        if schema.get(SchemaKeywords.UNIQUE_ITEMS) is True and has_duplicates(value):
            context.add_error(DuplicateItems(path=context.path))

        # Validate items
        if SchemaKeywords.PREFIX_ITEMS in schema:
            self._validate_tuple(value, schema, context)
        elif SchemaKeywords.ITEMS in schema:
            self._validate_rest(value, schema[SchemaKeywords.ITEMS], 0, context)

        # Check contains
        if SchemaKeywords.CONTAINS in schema:
            self._validate_contains(value, schema, context)

    def _validate_tuple(self, value: Sequence[Any], schema: Mapping[str, Any],
                        context: ValidationContext) -> None:
        prefix_items = schema[SchemaKeywords.PREFIX_ITEMS]
        if not isinstance(prefix_items, (list, tuple)):
            context.invalid_schema(f"'prefixItems' must be an array of schemas, got {prefix_items!r}")
            return

        for index, item_schema in enumerate(prefix_items[:len(value)]):
            context.item(index).validate(value[index], item_schema)

        if SchemaKeywords.ITEMS in schema:
            self._validate_rest(value, schema[SchemaKeywords.ITEMS], len(prefix_items), context)

    def _validate_rest(self, value: Sequence[Any], items_schema: Any, start: int,
                       context: ValidationContext) -> None:
        """Apply ``items`` to the elements from ``start`` onwards."""
        if items_schema is False:
            # No elements allowed past the tuple prefix
            if len(value) > start:
                context.add_error(TooManyItems(path=context.path, max_items=start, actual=len(value)))
            return

        for index in range(start, len(value)):
            context.item(index).validate(value[index], items_schema)

    def _validate_contains(self, value: Sequence[Any], schema: Mapping[str, Any],
                           context: ValidationContext) -> None:
        contains_schema = schema[SchemaKeywords.CONTAINS]
        match_count = sum(
            1 for index, item in enumerate(value)
            if context.item(index).probe().validate(item, contains_schema)
        )
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"contains matched {match_count} of {len(value)} items at '{context.path}'")

        min_contains = self._read_count(schema, SchemaKeywords.MIN_CONTAINS, context)
        if min_contains is None:
            min_contains = 1
        if match_count < min_contains:
            context.add_error(TooFewItems(
                path=context.path, min_items=min_contains, actual=match_count, contains=True
            ))

        max_contains = self._read_count(schema, SchemaKeywords.MAX_CONTAINS, context)
        if max_contains is not None and match_count > max_contains:
            context.add_error(TooManyItems(
                path=context.path, max_items=max_contains, actual=match_count, contains=True
            ))

    def __str__(self) -> str:
        return "ArrayConstraint()"
