"""
JSON Schema Validator

This package validates decoded JSON data against JSON Schema documents,
reporting every violation with the path of the offending value.
"""

from .api import JsonValidator, ValidationFailed, ValidationResult, validate
from .constraints import FormatChecker
from .errors import (
    ErrorCode,
    ValidationError,
    TypeMismatch,
    InvalidSchema,
    StringTooShort,
    StringTooLong,
    PatternMismatch,
    FormatMismatch,
    NumberTooSmall,
    NumberTooLarge,
    NotMultipleOf,
    RequiredPropertyMissing,
    AdditionalPropertyNotAllowed,
    TooFewProperties,
    TooManyProperties,
    TooFewItems,
    TooManyItems,
    DuplicateItems,
    NotInEnum,
    ConstMismatch,
    AllOfFailed,
    AnyOfFailed,
    OneOfFailed,
    NotFailed,
)
from .schema import Schema
from .utils import TypeChecker
from .version import __version__

# Export public classes and functions
__all__ = [
    "JsonValidator",
    "ValidationResult",
    "ValidationFailed",
    "validate",
    "Schema",
    "FormatChecker",
    "TypeChecker",
    "ErrorCode",
    "ValidationError",
    "TypeMismatch",
    "InvalidSchema",
    "StringTooShort",
    "StringTooLong",
    "PatternMismatch",
    "FormatMismatch",
    "NumberTooSmall",
    "NumberTooLarge",
    "NotMultipleOf",
    "RequiredPropertyMissing",
    "AdditionalPropertyNotAllowed",
    "TooFewProperties",
    "TooManyProperties",
    "TooFewItems",
    "TooManyItems",
    "DuplicateItems",
    "NotInEnum",
    "ConstMismatch",
    "AllOfFailed",
    "AnyOfFailed",
    "OneOfFailed",
    "NotFailed",
]
