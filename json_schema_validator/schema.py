"""
Typed schema construction.

``Schema`` lets callers build schemas as Python objects instead of nested
dicts. Validation always works on the plain mapping form produced by
``Schema.to_dict``.
"""

from dataclasses import dataclass, fields
from typing import Any, Dict, List, Mapping, Optional, Union

from .utils import SchemaKeywords

Number = Union[int, float]
SchemaLike = Union["Schema", Mapping[str, Any], bool]


class _Unset:
    """Marker for ``const`` and ``default`` being absent, since ``None`` is a valid value."""

    def __repr__(self) -> str:
        return "UNSET"


UNSET = _Unset()

# Attribute name -> keyword, for attributes whose names differ from the keyword
_KEYWORD_NAMES = {
    "additional_properties": SchemaKeywords.ADDITIONAL_PROPERTIES,
    "pattern_properties": SchemaKeywords.PATTERN_PROPERTIES,
    "min_properties": SchemaKeywords.MIN_PROPERTIES,
    "max_properties": SchemaKeywords.MAX_PROPERTIES,
    "prefix_items": SchemaKeywords.PREFIX_ITEMS,
    "min_items": SchemaKeywords.MIN_ITEMS,
    "max_items": SchemaKeywords.MAX_ITEMS,
    "unique_items": SchemaKeywords.UNIQUE_ITEMS,
    "min_contains": SchemaKeywords.MIN_CONTAINS,
    "max_contains": SchemaKeywords.MAX_CONTAINS,
    "min_length": SchemaKeywords.MIN_LENGTH,
    "max_length": SchemaKeywords.MAX_LENGTH,
    "exclusive_minimum": SchemaKeywords.EXCLUSIVE_MINIMUM,
    "exclusive_maximum": SchemaKeywords.EXCLUSIVE_MAXIMUM,
    "multiple_of": SchemaKeywords.MULTIPLE_OF,
    "all_of": SchemaKeywords.ALL_OF,
    "any_of": SchemaKeywords.ANY_OF,
    "one_of": SchemaKeywords.ONE_OF,
    "not_": SchemaKeywords.NOT,
    "if_": SchemaKeywords.IF,
    "else_": SchemaKeywords.ELSE,
}


@dataclass
class Schema:
    """
    A JSON Schema fragment with one attribute per supported keyword.

    Unset attributes are left out of ``to_dict``. Nested schemas may be
    ``Schema`` objects, plain mappings or booleans.

    Example:
        >>> Schema.object(properties={"name": Schema.string(min_length=1)},
        ...               required=["name"]).to_dict()
        {'type': 'object', 'properties': {'name': {'type': 'string', 'minLength': 1}}, 'required': ['name']}
    """
    type: Optional[Union[str, List[str]]] = None

    # Object keywords
    properties: Optional[Dict[str, SchemaLike]] = None
    required: Optional[List[str]] = None
    additional_properties: Optional[SchemaLike] = None
    pattern_properties: Optional[Dict[str, SchemaLike]] = None
    min_properties: Optional[int] = None
    max_properties: Optional[int] = None

    # Array keywords
    items: Optional[SchemaLike] = None
    prefix_items: Optional[List[SchemaLike]] = None
    min_items: Optional[int] = None
    max_items: Optional[int] = None
    unique_items: Optional[bool] = None
    contains: Optional[SchemaLike] = None
    min_contains: Optional[int] = None
    max_contains: Optional[int] = None

    # String keywords
    min_length: Optional[int] = None
    max_length: Optional[int] = None
    pattern: Optional[str] = None
    format: Optional[str] = None

    # Number keywords
    minimum: Optional[Number] = None
    maximum: Optional[Number] = None
    exclusive_minimum: Optional[Number] = None
    exclusive_maximum: Optional[Number] = None
    multiple_of: Optional[Number] = None

    enum: Optional[List[Any]] = None
    const: Any = UNSET

    # Composition
    all_of: Optional[List[SchemaLike]] = None
    any_of: Optional[List[SchemaLike]] = None
    one_of: Optional[List[SchemaLike]] = None
    not_: Optional[SchemaLike] = None
    if_: Optional[SchemaLike] = None
    then: Optional[SchemaLike] = None
    else_: Optional[SchemaLike] = None

    # Annotations
    title: Optional[str] = None
    description: Optional[str] = None
    default: Any = UNSET

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert to a plain JSON Schema mapping.

        Returns:
            Dictionary keyed by JSON Schema keyword names
        """
        result = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is UNSET or (value is None and f.default is None):
                continue
            result[_KEYWORD_NAMES.get(f.name, f.name)] = _to_plain(value)
        return result

    @classmethod
    def string(cls, **kwargs) -> "Schema":
        return cls(type="string", **kwargs)

    @classmethod
    def number(cls, **kwargs) -> "Schema":
        return cls(type="number", **kwargs)

    @classmethod
    def integer(cls, **kwargs) -> "Schema":
        return cls(type="integer", **kwargs)

    @classmethod
    def boolean(cls, **kwargs) -> "Schema":
        return cls(type="boolean", **kwargs)

    @classmethod
    def null(cls, **kwargs) -> "Schema":
        return cls(type="null", **kwargs)

    @classmethod
    def object(cls, properties: Optional[Dict[str, SchemaLike]] = None, **kwargs) -> "Schema":
        return cls(type="object", properties=properties, **kwargs)

    @classmethod
    def array(cls, items: Optional[SchemaLike] = None, **kwargs) -> "Schema":
        return cls(type="array", items=items, **kwargs)


def _to_plain(value: Any) -> Any:
    if isinstance(value, Schema):
        return value.to_dict()
    if isinstance(value, Mapping):
        return {key: _to_plain(member) for key, member in value.items()}
    if isinstance(value, (list, tuple)):
        return [_to_plain(member) for member in value]
    return value


def normalize_schema(schema: Any) -> Union[Mapping[str, Any], bool]:
    """
    Bring a caller-supplied schema into the form the validator works on.

    Args:
        schema: Mapping, boolean schema or ``Schema`` object

    Returns:
        The mapping or boolean to validate against

    Raises:
        TypeError: If the schema is of any other type
    """
    if isinstance(schema, bool) or isinstance(schema, Mapping):
        return schema
    if isinstance(schema, Schema):
        return schema.to_dict()
    raise TypeError(f"Schema must be a mapping, a boolean or a Schema, got {type(schema).__name__}")
