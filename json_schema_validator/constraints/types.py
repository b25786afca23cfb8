"""
Type keyword implementation.
"""

import logging
from typing import Any, List, Mapping, Optional

from .base import Constraint, ValidationContext
from ..errors import TypeMismatch
from ..utils import SchemaKeywords, TypeChecker

logger = logging.getLogger("json_schema_validator")


class TypeMatchConstraint(Constraint):
    """
    Constraint that validates a value's type against one or more possible types.
    """

    keywords = frozenset({SchemaKeywords.TYPE})

    def validate(self, value: Any, schema: Mapping[str, Any], context: ValidationContext) -> bool:
        return self.match(value, schema[SchemaKeywords.TYPE], context) is not None

    def match(self, value: Any, type_value: Any, context: ValidationContext) -> Optional[str]:
        """
        Match a value against the ``type`` keyword.

        For a list of types the first listed type the value belongs to wins,
        and its type-specific keywords are the ones applied afterwards.

        Args:
            value: Value to validate
            type_value: The ``type`` keyword value (string or list of strings)
            context: Validation context

        Returns:
            The matched type name, or None after appending an error
        """
        types = self._read_types(type_value, context)
        if types is None:
            return None

        for type_name in types:
            if type_name not in TypeChecker.JSON_TYPES:
                logger.warning(f"Unknown type '{type_name}' in schema at '{context.path}'")
                continue
            if TypeChecker.check_type(value, type_name):
                return type_name

        context.add_error(TypeMismatch(
            path=context.path,
            expected=" or ".join(types),
            actual=TypeChecker.json_type(value),
        ))
        return None

    def _read_types(self, type_value: Any, context: ValidationContext) -> Optional[List[str]]:
        if isinstance(type_value, str):
            return [type_value]
        if isinstance(type_value, (list, tuple)) and type_value \
                and all(isinstance(t, str) for t in type_value):
            return list(type_value)
        context.invalid_schema(f"Invalid type value in schema: {type_value!r}")
        return None

    def __str__(self) -> str:
        return "TypeMatchConstraint()"
