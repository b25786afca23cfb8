"""
Logical constraint implementations.

Every branch is validated in an isolated context (``ValidationContext.probe``)
at the parent's path, so branch errors only reach the parent list when the
combinator decides they should.
"""

import logging
from typing import Any, List, Mapping, Optional, Sequence

from .base import Constraint, ValidationContext
from ..errors import AllOfFailed, AnyOfFailed, NotFailed, OneOfFailed
from ..utils import SchemaKeywords

logger = logging.getLogger("json_schema_validator")


class LogicalConstraint(Constraint):
    """Base class for combinators that take an array of sub-schemas."""

    keyword: str = ""

    @property
    def keywords(self):
        return frozenset({self.keyword})

    def _read_schemas(self, schema: Mapping[str, Any],
                      context: ValidationContext) -> Optional[Sequence[Any]]:
        schemas = schema[self.keyword]
        if not isinstance(schemas, (list, tuple)) or not schemas:
            context.invalid_schema(f"'{self.keyword}' must be a non-empty array of schemas, got {schemas!r}")
            return None
        return schemas


class AllOfConstraint(LogicalConstraint):
    """
    Constraint that requires a value to satisfy all sub-schemas.
    """

    keyword = SchemaKeywords.ALL_OF

    def validate(self, value: Any, schema: Mapping[str, Any], context: ValidationContext) -> bool:
        """
        Validate a value against every ``allOf`` sub-schema.

        The errors of all failing sub-schemas are wrapped, in sub-schema order,
        into one AllOfFailed at the parent path.

        Returns:
            True if validation succeeds, False otherwise
        """
        schemas = self._read_schemas(schema, context)
        if schemas is None:
            return False

        errors = []
        for sub_schema in schemas:
            sub_context = context.probe()
            sub_context.validate(value, sub_schema)
            errors.extend(sub_context.errors)

        if not errors:
            return True

        context.add_error(AllOfFailed(path=context.path, errors=tuple(errors)))
        return False


class AnyOfConstraint(LogicalConstraint):
    """
    Constraint that requires a value to satisfy at least one sub-schema.
    """

    keyword = SchemaKeywords.ANY_OF

    def validate(self, value: Any, schema: Mapping[str, Any], context: ValidationContext) -> bool:
        """
        Validate a value against ``anyOf``, stopping at the first match.

        Returns:
            True if validation succeeds, False otherwise
        """
        schemas = self._read_schemas(schema, context)
        if schemas is None:
            return False

        branch_errors = []
        for index, sub_schema in enumerate(schemas):
            sub_context = context.probe()
            if sub_context.validate(value, sub_schema):
                if logger.isEnabledFor(logging.DEBUG):
                    logger.debug(f"anyOf matched branch {index} at '{context.path}'")
                return True
            branch_errors.append(tuple(sub_context.errors))

        # Branch details are only kept when asked for
        context.add_error(AnyOfFailed(
            path=context.path,
            branch_errors=tuple(branch_errors) if context.verbose else (),
        ))
        return False


class OneOfConstraint(LogicalConstraint):
    """
    Constraint that requires a value to satisfy exactly one sub-schema.
    """

    keyword = SchemaKeywords.ONE_OF

    def validate(self, value: Any, schema: Mapping[str, Any], context: ValidationContext) -> bool:
        """
        Validate a value against ``oneOf``.

        Every sub-schema is evaluated; zero matches and several matches both
        fail with the match count.

        Returns:
            True if validation succeeds, False otherwise
        """
        schemas = self._read_schemas(schema, context)
        if schemas is None:
            return False

        match_count = 0
        branch_errors: List[tuple] = []
        for sub_schema in schemas:
            sub_context = context.probe()
            if sub_context.validate(value, sub_schema):
                match_count += 1
            branch_errors.append(tuple(sub_context.errors))

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"oneOf matched {match_count} of {len(schemas)} branches at '{context.path}'")
        if match_count == 1:
            return True

        context.add_error(OneOfFailed(
            path=context.path,
            match_count=match_count,
            branch_errors=tuple(branch_errors) if context.verbose else (),
        ))
        return False


class NotConstraint(Constraint):
    """
    Constraint that requires a value not to satisfy a sub-schema.
    """

    keywords = frozenset({SchemaKeywords.NOT})

    def validate(self, value: Any, schema: Mapping[str, Any], context: ValidationContext) -> bool:
        """
        Validate a value against ``not``.

        The wrapped schema's own errors are discarded; only its outcome counts.

        Returns:
            True if the wrapped schema fails, False otherwise
        """
        if not context.probe().validate(value, schema[SchemaKeywords.NOT]):
            return True

        context.add_error(NotFailed(path=context.path))
        return False


class ConditionalConstraint(Constraint):
    """
    Constraint implementing ``if``/``then``/``else``.
    """

    keywords = frozenset({SchemaKeywords.IF})

    def validate(self, value: Any, schema: Mapping[str, Any], context: ValidationContext) -> bool:
        """
        Apply ``then`` or ``else`` depending on whether ``if`` matches.

        ``if`` is only a probe and never reports errors itself. The errors of
        the chosen branch go straight into the parent list, unwrapped.

        Returns:
            True if validation succeeds, False otherwise
        """
        condition = context.probe().validate(value, schema[SchemaKeywords.IF])
        branch = SchemaKeywords.THEN if condition else SchemaKeywords.ELSE
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"if {'matched' if condition else 'did not match'} at '{context.path}'")

        if branch not in schema:
            return True
        return context.validate(value, schema[branch])
