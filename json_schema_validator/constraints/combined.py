"""
Combined constraint implementation.
"""

from typing import Any, List, Mapping, Optional

from .base import Constraint, ValidationContext
from .logical import (
    AllOfConstraint,
    AnyOfConstraint,
    ConditionalConstraint,
    NotConstraint,
    OneOfConstraint,
)
from ..utils import SchemaKeywords


class CombinedConstraint(Constraint):
    """
    Constraint that combines multiple constraints.

    Every member constraint present in the schema runs, in order, even after
    an earlier one has failed, so that all violations are reported.
    """

    def __init__(self, constraints: List[Constraint]):
        """
        Initialize a new combined constraint.

        Args:
            constraints: List of constraints to combine
        """
        self.constraints = constraints
        self.keywords = frozenset().union(*(c.keywords for c in constraints))

    def validate(self, value: Any, schema: Mapping[str, Any], context: ValidationContext) -> bool:
        """
        Validate a value against all combined constraints.

        Args:
            value: Value to validate
            schema: Schema holding the keyword values
            context: Validation context

        Returns:
            True if all constraints pass, False otherwise
        """
        valid = True

        for constraint in self.constraints:
            if constraint.applies_to(schema) and not constraint.validate(value, schema, context):
                valid = False

        return valid

    def __str__(self) -> str:
        """String representation of the constraint."""
        return f"CombinedConstraint(constraints={len(self.constraints)})"

    def __repr__(self) -> str:
        """Detailed representation of the combined constraint."""
        return f"CombinedConstraint(constraints={[str(c) for c in self.constraints]})"


class CombinatorsConstraint(CombinedConstraint):
    """
    The composition keywords of one schema, applied as
    allOf, anyOf, oneOf, not, then if/then/else.
    """

    def __init__(self, constraints: Optional[List[Constraint]] = None):
        super().__init__(constraints or [
            AllOfConstraint(),
            AnyOfConstraint(),
            OneOfConstraint(),
            NotConstraint(),
            ConditionalConstraint(),
        ])

    def applies_to(self, schema: Mapping[str, Any]) -> bool:
        return any(keyword in schema for keyword in SchemaKeywords.COMBINATOR_KEYWORDS)
