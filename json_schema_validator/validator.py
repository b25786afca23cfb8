"""
Validator implementation: the recursive keyword dispatcher.
"""

import logging
from typing import Any, Dict, List, Mapping

from .constraints import (
    ArrayConstraint,
    CombinatorsConstraint,
    ConstConstraint,
    EnumConstraint,
    NumberConstraint,
    ObjectConstraint,
    StringConstraint,
    TypeConstraint,
    TypeMatchConstraint,
    ValidationContext,
)
from .errors import InvalidSchema, ValidationError
from .utils import JsonPath, SchemaKeywords

logger = logging.getLogger("json_schema_validator")

FALSE_SCHEMA_REASON = "Schema is false, all values are invalid"


class Validator:
    """
    Validates values against schema mappings.

    For every (value, schema) pair the keyword families are applied in a
    fixed order:

    1. boolean schemas (``true`` passes, ``false`` fails)
    2. composition keywords (allOf, anyOf, oneOf, not, if/then/else)
    3. ``enum``, then ``const``
    4. ``type``, followed by the keywords of the first matching type; without
       ``type`` every type-specific family whose keywords appear is applied
       to values of its own type

    All families run; a failure in one never hides the errors of another.
    The validator holds no per-call state, so one instance may be shared.
    """

    def __init__(self, verbose: bool = False, strict_patterns: bool = False,
                 validate_formats: bool = True):
        """
        Initialize a new validator.

        Args:
            verbose: Keep the per-branch errors of failed anyOf/oneOf
            strict_patterns: Report uncompilable regexes as InvalidSchema
            validate_formats: Check the ``format`` keyword
        """
        self.verbose = verbose
        self.strict_patterns = strict_patterns
        self.validate_formats = validate_formats

        self.combinators = CombinatorsConstraint()
        self.enum = EnumConstraint()
        self.const = ConstConstraint()
        self.type_match = TypeMatchConstraint()

        # Type name -> keyword family applied after a successful type match
        self.type_constraints: Dict[str, TypeConstraint] = {}
        for constraint in (StringConstraint(), NumberConstraint(), ObjectConstraint(), ArrayConstraint()):
            self.type_constraints[constraint.json_type] = constraint
        self.type_constraints["integer"] = self.type_constraints["number"]

    def validate(self, data: Any, schema: Any) -> List[ValidationError]:
        """
        Validate data against a schema.

        Args:
            data: The data to validate
            schema: Schema mapping or boolean schema

        Returns:
            Every error found, in discovery order; empty when the data is valid
        """
        context = ValidationContext(self, JsonPath.ROOT)
        self.validate_value(data, schema, context)

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Validation finished with {len(context.errors)} error(s)")
        return context.errors

    def validate_value(self, value: Any, schema: Any, context: ValidationContext) -> None:
        """
        Validate a value at the context's path, appending errors to the context.

        Args:
            value: Value to validate
            schema: Schema mapping or boolean schema
            context: Validation context
        """
        if schema is True:
            return
        if schema is False:
            context.add_error(InvalidSchema(path=context.path, reason=FALSE_SCHEMA_REASON))
            return
        if not isinstance(schema, Mapping):
            context.invalid_schema(f"Schema must be an object or a boolean, got {type(schema).__name__}")
            return

        if self.combinators.applies_to(schema):
            self.combinators.validate(value, schema, context)

        if SchemaKeywords.ENUM in schema:
            self.enum.validate(value, schema, context)
        if SchemaKeywords.CONST in schema:
            self.const.validate(value, schema, context)

        if SchemaKeywords.TYPE in schema:
            matched = self.type_match.match(value, schema[SchemaKeywords.TYPE], context)
            if matched is not None and matched in self.type_constraints:
                self.type_constraints[matched].validate(value, schema, context)
            return

        self._validate_inferred(value, schema, context)

    def _validate_inferred(self, value: Any, schema: Mapping[str, Any],
                           context: ValidationContext) -> None:
        """Apply the type-specific families implied by the keywords present."""
        applied = set()
        for keyword in schema:
            implied = SchemaKeywords.get_implied_type(keyword)
            if implied is None or implied in applied:
                continue
            applied.add(implied)
            # Values of another type pass through untouched
            self.type_constraints[implied].validate(value, schema, context)

    def __str__(self) -> str:
        return f"Validator(verbose={self.verbose}, strict_patterns={self.strict_patterns})"
