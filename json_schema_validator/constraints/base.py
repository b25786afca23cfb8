"""
Base constraint classes for the JSON Schema validator.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, FrozenSet, List, Mapping, Optional

from ..errors import InvalidSchema, ValidationError
from ..utils import JsonPath, TypeChecker, is_non_negative_int, is_number

if TYPE_CHECKING:
    from ..validator import Validator


class ValidationContext:
    """
    Context for validation operations.

    A context pairs the path of the value being checked with the error list
    that checks append to. Paths are never mutated: descending into a child
    value creates a new context that shares the parent's error list, while
    ``probe`` creates one with a fresh list for checks whose errors must not
    leak into the parent (combinator branches, ``contains``).
    """

    def __init__(self,
                 validator: "Validator",
                 path: str = JsonPath.ROOT,
                 errors: Optional[List[ValidationError]] = None):
        """
        Initialize a new validation context.

        Args:
            validator: Orchestrator used for recursive validation
            path: Location of the current value
            errors: Error accumulator, a new list if omitted
        """
        self.validator = validator
        self.path = path
        self.errors: List[ValidationError] = [] if errors is None else errors

    @property
    def verbose(self) -> bool:
        return self.validator.verbose

    @property
    def strict_patterns(self) -> bool:
        return self.validator.strict_patterns

    @property
    def validate_formats(self) -> bool:
        return self.validator.validate_formats

    def add_error(self, error: ValidationError) -> None:
        """Append a validation error."""
        self.errors.append(error)

    def invalid_schema(self, reason: str) -> None:
        """Append an InvalidSchema error at the current path."""
        self.errors.append(InvalidSchema(path=self.path, reason=reason))

    def child(self, name: str) -> "ValidationContext":
        """Context for an object member, sharing this error list."""
        return ValidationContext(self.validator, JsonPath.child(self.path, name), self.errors)

    def item(self, index: int) -> "ValidationContext":
        """Context for an array element, sharing this error list."""
        return ValidationContext(self.validator, JsonPath.item(self.path, index), self.errors)

    def probe(self) -> "ValidationContext":
        """Context at the same path with an isolated error list."""
        return ValidationContext(self.validator, self.path)

    def validate(self, value: Any, schema: Any) -> bool:
        """
        Recursively validate a value against a sub-schema in this context.

        Returns:
            True if no errors were added
        """
        before = len(self.errors)
        self.validator.validate_value(value, schema, self)
        return len(self.errors) == before

    def __str__(self) -> str:
        """String representation of the validation context."""
        return f"ValidationContext(path={self.path!r}, errors={len(self.errors)})"


class Constraint(ABC):
    """
    Base class for all keyword-family constraints.

    Constraints are stateless: the keyword values are read from the schema
    on every call, so one instance serves every schema and every thread.
    """

    keywords: FrozenSet[str] = frozenset()

    def applies_to(self, schema: Mapping[str, Any]) -> bool:
        """Check whether the schema uses any keyword of this family."""
        return any(keyword in schema for keyword in self.keywords)

    @abstractmethod
    def validate(self, value: Any, schema: Mapping[str, Any], context: ValidationContext) -> bool:
        """
        Validate a value against this constraint.

        Args:
            value: Value to validate
            schema: Schema holding the keyword values
            context: Validation context

        Returns:
            True if validation succeeds, False otherwise
        """
        pass

    def _read_count(self, schema: Mapping[str, Any], keyword: str,
                    context: ValidationContext) -> Optional[int]:
        """
        Read a non-negative integer keyword.

        Returns:
            The value, or None when absent or malformed (malformed values are
            reported as InvalidSchema)
        """
        if keyword not in schema:
            return None
        raw = schema[keyword]
        if not is_non_negative_int(raw):
            context.invalid_schema(f"'{keyword}' must be a non-negative integer, got {raw!r}")
            return None
        return int(raw)

    def _read_number(self, schema: Mapping[str, Any], keyword: str,
                     context: ValidationContext) -> Optional[float]:
        """
        Read a numeric keyword.

        Returns:
            The value, or None when absent or malformed
        """
        if keyword not in schema:
            return None
        raw = schema[keyword]
        if not is_number(raw):
            context.invalid_schema(f"'{keyword}' must be a number, got {raw!r}")
            return None
        return raw

    def __str__(self) -> str:
        """String representation of the constraint."""
        return f"{self.__class__.__name__}"

    def __repr__(self) -> str:
        """Detailed representation of the constraint."""
        return self.__str__()


class TypeConstraint(Constraint, ABC):
    """
    Base class for type-specific constraints.

    Type constraints only apply to values of their JSON type; other values
    pass through untouched, since reporting a type mismatch is the job of
    the ``type`` keyword.
    """

    @property
    @abstractmethod
    def json_type(self) -> str:
        """
        Get the JSON Schema type for this constraint.

        Returns:
            JSON Schema type name
        """
        pass

    def validate(self, value: Any, schema: Mapping[str, Any], context: ValidationContext) -> bool:
        """
        Validate a value against this type constraint.

        Args:
            value: Value to validate
            schema: Schema holding the keyword values
            context: Validation context

        Returns:
            True if validation succeeds, False otherwise
        """
        if not TypeChecker.check_type(value, self.json_type):
            return True

        before = len(context.errors)
        self._validate_type_specific(value, schema, context)
        return len(context.errors) == before

    @abstractmethod
    def _validate_type_specific(self, value: Any, schema: Mapping[str, Any],
                                context: ValidationContext) -> None:
        """
        Validate type-specific constraints.

        This method is called after the type check has passed and appends
        every violation it finds; it never stops at the first one.

        Args:
            value: Value to validate (guaranteed to be of the correct type)
            schema: Schema holding the keyword values
            context: Validation context
        """
        pass
