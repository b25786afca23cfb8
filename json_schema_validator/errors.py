"""
Validation error types for the JSON Schema validator.

Every violation is reported as an instance of one of the frozen dataclasses
below. They share a common base class, carry the path of the offending value
and expose an ``ErrorCode`` for programmatic inspection.
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import ClassVar, Tuple, Union

Number = Union[int, float]


class ErrorCode(Enum):
    """Enumeration of validation error codes."""
    TYPE_MISMATCH = auto()
    INVALID_SCHEMA = auto()
    STRING_TOO_SHORT = auto()
    STRING_TOO_LONG = auto()
    PATTERN_MISMATCH = auto()
    FORMAT_MISMATCH = auto()
    NUMBER_TOO_SMALL = auto()
    NUMBER_TOO_LARGE = auto()
    NOT_MULTIPLE_OF = auto()
    REQUIRED_PROPERTY_MISSING = auto()
    ADDITIONAL_PROPERTY_NOT_ALLOWED = auto()
    TOO_FEW_PROPERTIES = auto()
    TOO_MANY_PROPERTIES = auto()
    TOO_FEW_ITEMS = auto()
    TOO_MANY_ITEMS = auto()
    DUPLICATE_ITEMS = auto()
    NOT_IN_ENUM = auto()
    CONST_MISMATCH = auto()
    ALL_OF_FAILED = auto()
    ANY_OF_FAILED = auto()
    ONE_OF_FAILED = auto()
    NOT_FAILED = auto()


@dataclass(frozen=True)
class ValidationError:
    """
    Base class of all validation errors.

    Attributes:
        path: Location of the offending value ("" for the document root)
    """
    path: str

    code: ClassVar[ErrorCode]

    @property
    def message(self) -> str:
        """Human-readable description without the path prefix."""
        raise NotImplementedError

    def __str__(self) -> str:
        if not self.path:
            return self.message
        return f"{self.path}: {self.message}"


@dataclass(frozen=True)
class TypeMismatch(ValidationError):
    expected: str
    actual: str

    code: ClassVar[ErrorCode] = ErrorCode.TYPE_MISMATCH

    @property
    def message(self) -> str:
        return f"Expected type '{self.expected}' but got '{self.actual}'"


@dataclass(frozen=True)
class InvalidSchema(ValidationError):
    reason: str

    code: ClassVar[ErrorCode] = ErrorCode.INVALID_SCHEMA

    @property
    def message(self) -> str:
        return f"Invalid schema: {self.reason}"


@dataclass(frozen=True)
class StringTooShort(ValidationError):
    min_length: int
    actual_length: int

    code: ClassVar[ErrorCode] = ErrorCode.STRING_TOO_SHORT

    @property
    def message(self) -> str:
        return f"String length {self.actual_length} is less than minimum {self.min_length}"


@dataclass(frozen=True)
class StringTooLong(ValidationError):
    max_length: int
    actual_length: int

    code: ClassVar[ErrorCode] = ErrorCode.STRING_TOO_LONG

    @property
    def message(self) -> str:
        return f"String length {self.actual_length} is greater than maximum {self.max_length}"


@dataclass(frozen=True)
class PatternMismatch(ValidationError):
    pattern: str

    code: ClassVar[ErrorCode] = ErrorCode.PATTERN_MISMATCH

    @property
    def message(self) -> str:
        return f"String does not match pattern '{self.pattern}'"


@dataclass(frozen=True)
class FormatMismatch(ValidationError):
    format: str
    value: str

    code: ClassVar[ErrorCode] = ErrorCode.FORMAT_MISMATCH

    @property
    def message(self) -> str:
        return f"String does not match format '{self.format}'"


@dataclass(frozen=True)
class NumberTooSmall(ValidationError):
    minimum: Number
    actual: Number
    exclusive: bool = False

    code: ClassVar[ErrorCode] = ErrorCode.NUMBER_TOO_SMALL

    @property
    def message(self) -> str:
        op = ">" if self.exclusive else ">="
        return f"Value {self.actual} must be {op} {self.minimum}"


@dataclass(frozen=True)
class NumberTooLarge(ValidationError):
    maximum: Number
    actual: Number
    exclusive: bool = False

    code: ClassVar[ErrorCode] = ErrorCode.NUMBER_TOO_LARGE

    @property
    def message(self) -> str:
        op = "<" if self.exclusive else "<="
        return f"Value {self.actual} must be {op} {self.maximum}"


@dataclass(frozen=True)
class NotMultipleOf(ValidationError):
    multiple_of: Number
    actual: Number

    code: ClassVar[ErrorCode] = ErrorCode.NOT_MULTIPLE_OF

    @property
    def message(self) -> str:
        return f"Value {self.actual} is not a multiple of {self.multiple_of}"


@dataclass(frozen=True)
class RequiredPropertyMissing(ValidationError):
    property: str

    code: ClassVar[ErrorCode] = ErrorCode.REQUIRED_PROPERTY_MISSING

    @property
    def message(self) -> str:
        return f"Missing required property '{self.property}'"


@dataclass(frozen=True)
class AdditionalPropertyNotAllowed(ValidationError):
    property: str

    code: ClassVar[ErrorCode] = ErrorCode.ADDITIONAL_PROPERTY_NOT_ALLOWED

    @property
    def message(self) -> str:
        return f"Additional property '{self.property}' is not allowed"


@dataclass(frozen=True)
class TooFewProperties(ValidationError):
    min_properties: int
    actual: int

    code: ClassVar[ErrorCode] = ErrorCode.TOO_FEW_PROPERTIES

    @property
    def message(self) -> str:
        return f"Object has {self.actual} properties but minimum is {self.min_properties}"


@dataclass(frozen=True)
class TooManyProperties(ValidationError):
    max_properties: int
    actual: int

    code: ClassVar[ErrorCode] = ErrorCode.TOO_MANY_PROPERTIES

    @property
    def message(self) -> str:
        return f"Object has {self.actual} properties but maximum is {self.max_properties}"


@dataclass(frozen=True)
class TooFewItems(ValidationError):
    """
    Array is too short, or too few items matched ``contains``.

    ``contains`` is True when the count refers to ``minContains``.
    """
    min_items: int
    actual: int
    contains: bool = False

    code: ClassVar[ErrorCode] = ErrorCode.TOO_FEW_ITEMS

    @property
    def message(self) -> str:
        if self.contains:
            return f"Array has {self.actual} matching items but minimum is {self.min_items}"
        return f"Array has {self.actual} items but minimum is {self.min_items}"


@dataclass(frozen=True)
class TooManyItems(ValidationError):
    """
    Array is too long, or too many items matched ``contains``.

    ``contains`` is True when the count refers to ``maxContains``.
    """
    max_items: int
    actual: int
    contains: bool = False

    code: ClassVar[ErrorCode] = ErrorCode.TOO_MANY_ITEMS

    @property
    def message(self) -> str:
        if self.contains:
            return f"Array has {self.actual} matching items but maximum is {self.max_items}"
        return f"Array has {self.actual} items but maximum is {self.max_items}"


@dataclass(frozen=True)
class DuplicateItems(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.DUPLICATE_ITEMS

    @property
    def message(self) -> str:
        return "Array contains duplicate items"


@dataclass(frozen=True)
class NotInEnum(ValidationError):
    allowed_values: Tuple[str, ...]

    code: ClassVar[ErrorCode] = ErrorCode.NOT_IN_ENUM

    @property
    def message(self) -> str:
        return f"Value must be one of: {', '.join(self.allowed_values)}"


@dataclass(frozen=True)
class ConstMismatch(ValidationError):
    expected: str
    actual: str

    code: ClassVar[ErrorCode] = ErrorCode.CONST_MISMATCH

    @property
    def message(self) -> str:
        return f"Value must be {self.expected} but got {self.actual}"


@dataclass(frozen=True)
class AllOfFailed(ValidationError):
    errors: Tuple[ValidationError, ...]

    code: ClassVar[ErrorCode] = ErrorCode.ALL_OF_FAILED

    @property
    def message(self) -> str:
        return f"Failed allOf validation with {len(self.errors)} error(s)"


@dataclass(frozen=True)
class AnyOfFailed(ValidationError):
    """
    No sub-schema of ``anyOf`` matched.

    ``branch_errors`` holds the errors of every sub-schema, by index, when the
    validator runs verbose; otherwise it is empty.
    """
    branch_errors: Tuple[Tuple[ValidationError, ...], ...] = ()

    code: ClassVar[ErrorCode] = ErrorCode.ANY_OF_FAILED

    @property
    def message(self) -> str:
        return "Value does not match any schema in anyOf"


@dataclass(frozen=True)
class OneOfFailed(ValidationError):
    match_count: int
    branch_errors: Tuple[Tuple[ValidationError, ...], ...] = ()

    code: ClassVar[ErrorCode] = ErrorCode.ONE_OF_FAILED

    @property
    def message(self) -> str:
        if self.match_count == 0:
            return "Value does not match any schema in oneOf"
        return f"Value matches {self.match_count} schemas in oneOf but must match exactly one"


@dataclass(frozen=True)
class NotFailed(ValidationError):
    code: ClassVar[ErrorCode] = ErrorCode.NOT_FAILED

    @property
    def message(self) -> str:
        return "Value should not match the schema in 'not'"
