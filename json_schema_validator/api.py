"""
Public API for the JSON Schema validator.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Iterator, List, Optional

from .errors import ValidationError
from .schema import SchemaLike, normalize_schema
from .validator import Validator

logger = logging.getLogger("json_schema_validator")


class ValidationFailed(ValueError):
    """
    Raised when data does not conform to a schema.

    Attributes:
        errors: Every error found, in discovery order
    """

    def __init__(self, errors: List[ValidationError]):
        self.errors = list(errors)
        super().__init__(self._format(self.errors))

    @staticmethod
    def _format(errors: List[ValidationError]) -> str:
        if len(errors) == 1:
            return f"Validation failed: {errors[0]}"
        lines = [f"Validation failed with {len(errors)} errors:"]
        lines.extend(f"  - {error}" for error in errors)
        return "\n".join(lines)


@dataclass
class ValidationResult:
    """
    Result of schema validation.

    Attributes:
        valid: Whether the validation was successful
        errors: List of validation errors (if any)
    """
    valid: bool = True
    errors: List[ValidationError] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.valid

    def raise_for_errors(self) -> None:
        """Raise ValidationFailed if the validation was not successful."""
        if not self.valid:
            raise ValidationFailed(self.errors)


class JsonValidator:
    """
    Main entrypoint class for JSON schema validation.

    This class provides a simple API for validating decoded JSON data
    (``json.loads`` output) against a JSON Schema. Instances are stateless
    between calls and may be shared across threads.
    """

    def __init__(self, verbose: bool = False, strict_patterns: bool = False,
                 validate_formats: bool = True):
        """
        Initialize a new JSON validator.

        Args:
            verbose: Keep per-branch details on anyOf/oneOf failures and log
                at DEBUG level. The level is set on the shared
                ``json_schema_validator`` logger, so it stays in effect for
                the whole process and for every validator created later;
                reset it with ``logging.getLogger("json_schema_validator").setLevel(...)``
            strict_patterns: Report invalid regular expressions as schema errors
                instead of treating them as non-matching
            validate_formats: Whether the ``format`` keyword is asserted
        """
        self.verbose = verbose
        self.validator = Validator(
            verbose=verbose,
            strict_patterns=strict_patterns,
            validate_formats=validate_formats,
        )

        if verbose:
            logger.setLevel(logging.DEBUG)

    def validate(self, data: Any, schema: SchemaLike) -> ValidationResult:
        """
        Validate data against a JSON schema.

        Args:
            data: The data to validate
            schema: The JSON schema to validate against

        Returns:
            ValidationResult containing validation status and any errors

        Raises:
            TypeError: If the schema is not a mapping, boolean or Schema
        """
        errors = self.validator.validate(data, normalize_schema(schema))
        return ValidationResult(valid=not errors, errors=errors)

    def check(self, data: Any, schema: SchemaLike) -> None:
        """
        Validate data and raise on failure.

        Raises:
            ValidationFailed: If the data does not conform to the schema
        """
        self.validate(data, schema).raise_for_errors()

    def iter_errors(self, data: Any, schema: SchemaLike) -> Iterator[ValidationError]:
        """Iterate over the validation errors of data against a schema."""
        return iter(self.validate(data, schema).errors)


_default_validator: Optional[JsonValidator] = None


def validate(data: Any, schema: SchemaLike) -> None:
    """
    Validate data with a shared default validator.

    Raises:
        ValidationFailed: If the data does not conform to the schema
    """
    global _default_validator
    if _default_validator is None:
        _default_validator = JsonValidator()
    _default_validator.check(data, schema)
