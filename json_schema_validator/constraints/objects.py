"""
Object constraint implementation.
"""

from typing import Any, Dict, List, Mapping, Optional, Pattern

from .base import TypeConstraint, ValidationContext
from ..errors import (
    AdditionalPropertyNotAllowed,
    RequiredPropertyMissing,
    TooFewProperties,
    TooManyProperties,
)
from ..utils import SchemaKeywords, compile_pattern


class ObjectConstraint(TypeConstraint):
    """
    Constraint for validating object values.
    """

    keywords = SchemaKeywords.OBJECT_KEYWORDS

    @property
    def json_type(self) -> str:
        return "object"

    def _validate_type_specific(self, value: Any, schema: Mapping[str, Any],
                                context: ValidationContext) -> None:
        """
        Validate object-specific constraints.

        A member can be checked by its ``properties`` schema and by every
        ``patternProperties`` schema whose regex it matches; only members
        covered by neither fall to ``additionalProperties``.

        Args:
            value: The object to validate (guaranteed to be a mapping)
            schema: Schema holding the keyword values
            context: Validation context
        """
        # Check required properties; presence is enough, null counts
        required = self._read_required(schema, context)
        for prop in required:
            if prop not in value:
                context.add_error(RequiredPropertyMissing(path=context.path, property=prop))

        # Validate specified properties
        properties = self._read_schema_map(schema, SchemaKeywords.PROPERTIES, context)
        for prop, prop_schema in properties.items():
            if prop in value:
                context.child(prop).validate(value[prop], prop_schema)

        pattern_properties = self._read_schema_map(schema, SchemaKeywords.PATTERN_PROPERTIES, context)
        compiled_patterns = self._compile_patterns(pattern_properties, context)

        # Check additional properties
        if SchemaKeywords.ADDITIONAL_PROPERTIES in schema:
            additional = schema[SchemaKeywords.ADDITIONAL_PROPERTIES]
            extra = [
                prop for prop in value
                if prop not in properties and not self._matches_any(prop, compiled_patterns)
            ]
            if additional is False:
                for prop in extra:
                    context.add_error(AdditionalPropertyNotAllowed(path=context.path, property=prop))
            elif isinstance(additional, Mapping):
                for prop in extra:
                    context.child(prop).validate(value[prop], additional)
            elif additional is not True:
                context.invalid_schema(
                    f"'additionalProperties' must be a boolean or a schema, got {additional!r}"
                )

        # Validate pattern properties
        for pattern, prop_schema in pattern_properties.items():
            compiled = compiled_patterns[pattern]
            if compiled is None:
                continue
            for prop in value:
                if compiled.search(prop):
                    context.child(prop).validate(value[prop], prop_schema)

        # Check minProperties
        min_properties = self._read_count(schema, SchemaKeywords.MIN_PROPERTIES, context)
        if min_properties is not None and len(value) < min_properties:
            context.add_error(TooFewProperties(
                path=context.path, min_properties=min_properties, actual=len(value)
            ))

        # Check maxProperties
        max_properties = self._read_count(schema, SchemaKeywords.MAX_PROPERTIES, context)
        if max_properties is not None and len(value) > max_properties:
            context.add_error(TooManyProperties(
                path=context.path, max_properties=max_properties, actual=len(value)
            ))

    def _read_required(self, schema: Mapping[str, Any], context: ValidationContext) -> List[str]:
        required = schema.get(SchemaKeywords.REQUIRED, [])
        if not isinstance(required, (list, tuple)) or not all(isinstance(p, str) for p in required):
            context.invalid_schema(f"'required' must be an array of strings, got {required!r}")
            return []
        return list(required)

    def _read_schema_map(self, schema: Mapping[str, Any], keyword: str,
                         context: ValidationContext) -> Mapping[str, Any]:
        schemas = schema.get(keyword, {})
        if not isinstance(schemas, Mapping):
            context.invalid_schema(f"'{keyword}' must be an object, got {schemas!r}")
            return {}
        return schemas

    def _compile_patterns(self, pattern_properties: Mapping[str, Any],
                          context: ValidationContext) -> Dict[str, Optional[Pattern]]:
        compiled_patterns = {}
        for pattern in pattern_properties:
            compiled = compile_pattern(pattern)
            if compiled is None and context.strict_patterns:
                context.invalid_schema(f"Invalid regex pattern '{pattern}' in 'patternProperties'")
            compiled_patterns[pattern] = compiled
        return compiled_patterns

    @staticmethod
    def _matches_any(prop: str, compiled_patterns: Mapping[str, Optional[Pattern]]) -> bool:
        return any(
            compiled is not None and compiled.search(prop)
            for compiled in compiled_patterns.values()
        )

    def __str__(self) -> str:
        return "ObjectConstraint()"
