"""
Constraint package initialization.
"""

from .base import Constraint, TypeConstraint, ValidationContext
from .strings import StringConstraint
from .numbers import NumberConstraint
from .arrays import ArrayConstraint
from .objects import ObjectConstraint
from .logical import (
    AllOfConstraint,
    AnyOfConstraint,
    OneOfConstraint,
    NotConstraint,
    ConditionalConstraint
)
from .enums import EnumConstraint
from .consts import ConstConstraint
from .formats import FormatChecker
from .types import TypeMatchConstraint
from .combined import CombinedConstraint, CombinatorsConstraint

__all__ = [
    "Constraint",
    "TypeConstraint",
    "ValidationContext",
    "StringConstraint",
    "NumberConstraint",
    "ArrayConstraint",
    "ObjectConstraint",
    "AllOfConstraint",
    "AnyOfConstraint",
    "OneOfConstraint",
    "NotConstraint",
    "ConditionalConstraint",
    "EnumConstraint",
    "ConstConstraint",
    "FormatChecker",
    "TypeMatchConstraint",
    "CombinedConstraint",
    "CombinatorsConstraint"
]
