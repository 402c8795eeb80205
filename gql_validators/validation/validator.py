"""
Compiled entity validators with detailed error reporting.

An Entity is what GQLCompiler.get_entity() hands back: one named GraphQL type
compiled into a jsonschema validator. Validating a value either returns the
value unchanged or raises ValidationError carrying every problem found.

Usage:
    ```python
    from gql_validators import GQLCompiler, ValidationError

    compiler = GQLCompiler("type Person { name: String! age: Int }")
    Person = compiler.get_entity("Person")

    Person.validate({"name": "Alice", "age": 30})   # returns the dict

    try:
        Person.validate({"age": 30})
    except ValidationError as e:
        print(e.message)  # "name is a required field"
    ```
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterator, List

from jsonschema.exceptions import ValidationError as SchemaError

from gql_validators.exceptions import ValidationError
from gql_validators.schema.types import EnumNode, UnionNode, ValidatorNode
from gql_validators.validation.error_formatter import format_error_message, format_path

logger = logging.getLogger(__name__)


class EntityKind(str, Enum):
    """Kind of GraphQL type an entity was compiled from."""

    OBJECT = "object"
    ONE_OF = "mixed-oneof"
    ENUM = "mixed-enum"


@dataclass
class FieldError:
    """
    Represents a single validation error.

    Attributes:
        path: Path to the error location (e.g. "orders[0].total"), '' for the root
        message: Human-readable error message
        validator: Keyword that failed (e.g. "required", "type", "date")
        actual: Value found at the error location
    """
    path: str
    message: str
    validator: str
    actual: Any


class Entity:
    """
    A compiled GraphQL type.

    Attributes:
        name: GraphQL type name
        node: Validator node the entity was compiled to
        kind: EntityKind derived from the node
        schema: Node rendered in the extended jsonschema dialect
    """

    def __init__(self, name: str, node: ValidatorNode, validator_cls: Any):
        self.name = name
        self.node = node
        self.schema: Dict[str, Any] = node.to_schema()
        self._validator = validator_cls(self.schema)

    @property
    def kind(self) -> EntityKind:
        if isinstance(self.node, UnionNode):
            return EntityKind.ONE_OF
        if isinstance(self.node, EnumNode):
            return EntityKind.ENUM
        return EntityKind.OBJECT

    def iter_errors(self, value: Any) -> Iterator[FieldError]:
        """
        Yield every error found in value, in discovery order.

        A field typed with a name the compiler never defined is reported as
        an `entity` error reading "No entity '<name>'".
        """
        for error in self._validator.iter_errors(value):
            yield _convert_schema_error(error)

    def validate(self, value: Any) -> Any:
        """
        Validate a value against this entity.

        Args:
            value: Candidate value (dicts for object types)

        Returns:
            The value, unchanged

        Raises:
            ValidationError: If the value does not conform
        """
        errors = list(self.iter_errors(value))
        if errors:
            logger.debug(f"{self.name} rejected value with {len(errors)} error(s)")
            raise ValidationError(errors[0].message, errors)
        return value

    def is_valid(self, value: Any) -> bool:
        """Quick validation - just returns True/False."""
        return next(self.iter_errors(value), None) is None

    def __repr__(self) -> str:
        return f"Entity(name={self.name!r}, kind={self.kind.value!r})"


def _convert_schema_error(error: SchemaError) -> FieldError:
    """
    Convert a jsonschema ValidationError to our FieldError.

    Args:
        error: jsonschema ValidationError

    Returns:
        FieldError: Our error representation
    """
    actual = error.instance
    # Requiredness errors are raised on the container; report the member
    if error.validator in ("required", "requiredItems") and error.relative_path:
        key = error.relative_path[-1]
        try:
            actual = error.instance[key]
        except (KeyError, IndexError, TypeError):
            actual = "MISSING"

    return FieldError(
        path=format_path(error.absolute_path),
        message=format_error_message(error),
        validator=str(error.validator),
        actual=actual,
    )


def format_validation_errors(errors: List[FieldError]) -> str:
    """
    Format validation errors as human-readable string.

    Args:
        errors: List of validation errors

    Returns:
        str: Formatted error message

    Example:
        ```python
        try:
            Person.validate({"age": "old"})
        except ValidationError as e:
            print(format_validation_errors(e.errors))
            # Validation failed with 2 error(s):
            #   1. At name: name is a required field
            #      Got: 'MISSING'
            #   2. At age: age must be a `number` type, but the final value was: `'old'`
            #      Got: 'old'
        ```
    """
    if not errors:
        return "No validation errors"

    lines = [f"Validation failed with {len(errors)} error(s):"]

    for i, error in enumerate(errors, 1):
        lines.append(f"\n  {i}. At {error.path or 'root'}: {error.message}")
        lines.append(f"     Got: {error.actual!r}")

    return "\n".join(lines)
