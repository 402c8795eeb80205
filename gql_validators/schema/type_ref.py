"""
Type reference classification - normalize GraphQL type strings.

GraphQL prints a field's type as a string such as `String`, `String!`,
`[String!]!` or `[Custom]`. This module reduces that string to a flat
TypeDescriptor (base type, list-ness, requiredness) and maps the base type onto
one of the validator primitives.

Scalar mapping:
    Int, Float          -> number
    Date, DateTime      -> Date
    ID                  -> string
    String, Boolean     -> string, boolean (any casing, also Number -> number)
    anything else       -> passed through, flagged as unknown (user type)

Usage:
    ```python
    from gql_validators.schema.type_ref import classify_type

    descriptor = classify_type("[Custom!]!")
    # TypeDescriptor(base_type='Custom', is_array=True, is_required=True,
    #                is_item_required=True, is_unknown_type=True)
    ```
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional


class ScalarType(str, Enum):
    """Validator primitives a GraphQL scalar can map to."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    DATE = "Date"


# Exact GraphQL names with a fixed mapping
_SCALAR_ALIASES: Dict[str, ScalarType] = {
    "Int": ScalarType.NUMBER,
    "Float": ScalarType.NUMBER,
    "Date": ScalarType.DATE,
    "DateTime": ScalarType.DATE,
    "ID": ScalarType.STRING,
}

# Primitive names matched case-insensitively
_PRIMITIVES: Dict[str, ScalarType] = {
    "string": ScalarType.STRING,
    "number": ScalarType.NUMBER,
    "boolean": ScalarType.BOOLEAN,
}

REQUIRED_MARKER = "!"


@dataclass(frozen=True)
class TypeDescriptor:
    """
    Flattened view of a GraphQL type reference.

    Attributes:
        base_type: Mapped primitive name ('string', 'number', 'boolean', 'Date')
            or the user type name when is_unknown_type is set
        is_array: Whether the reference is a list
        is_required: Whether the outer type is non-null
        is_item_required: Whether list elements are non-null ([T!])
        is_unknown_type: Whether base_type names a user-defined type (or is
            itself a list, see is_nested_array)
    """

    base_type: str
    is_array: bool = False
    is_required: bool = False
    is_item_required: bool = False
    is_unknown_type: bool = False

    @property
    def is_nested_array(self) -> bool:
        """Whether list elements are lists too ('[[Int]]'); base_type is then the element type."""
        return self.is_array and self.base_type.startswith("[")

    @property
    def scalar(self) -> Optional[ScalarType]:
        """The mapped primitive, or None for user-defined types."""
        if self.is_unknown_type:
            return None
        return ScalarType(self.base_type)


def classify_type(type_ref: Optional[str]) -> Optional[TypeDescriptor]:
    """
    Normalize a GraphQL type string into a TypeDescriptor.

    Args:
        type_ref: Printed GraphQL type, e.g. '[Foo!]!'

    Returns:
        TypeDescriptor, or None when type_ref is empty

    Example:
        ```python
        classify_type("Int!")
        # TypeDescriptor(base_type='number', is_required=True, ...)

        classify_type("[DateTime]")
        # TypeDescriptor(base_type='Date', is_array=True, ...)
        ```
    """
    if not type_ref:
        return None

    name = type_ref
    is_required = name.endswith(REQUIRED_MARKER)
    if is_required:
        name = name[:-1]

    is_array = name.startswith("[") and name.endswith("]")
    if is_array:
        name = name[1:-1]

    # Second marker belongs to the list element: [T!]
    is_item_required = name.endswith(REQUIRED_MARKER)
    if is_item_required:
        name = name[:-1]

    scalar = map_scalar(name)
    return TypeDescriptor(
        base_type=scalar.value if scalar else name,
        is_array=is_array,
        is_required=is_required,
        is_item_required=is_item_required,
        is_unknown_type=scalar is None,
    )


def map_scalar(name: str) -> Optional[ScalarType]:
    """
    Map a bare GraphQL type name to a validator primitive.

    Args:
        name: Type name without list brackets or '!' markers

    Returns:
        ScalarType, or None if the name is not a known scalar
    """
    if name in _SCALAR_ALIASES:
        return _SCALAR_ALIASES[name]
    return _PRIMITIVES.get(name.lower())
