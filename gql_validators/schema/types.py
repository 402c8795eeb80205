"""
Validator node definitions for compiled GraphQL types.

This module defines the node hierarchy the compiler builds from a GraphQL
schema. A node tree is the intermediate form between the GraphQL type graph
and the jsonschema validators that check candidate values.

Type Hierarchy:
    ValidatorNode (abstract)
    ├── ScalarNode: string, number or boolean
    ├── DateNode: date objects or parseable date strings
    ├── ArrayNode: a list of some element node
    ├── EntityRefNode: a named entity, resolved lazily through the registry
    ├── ObjectNode: object/input/interface type with named fields
    ├── UnionNode: value must match at least one member entity
    └── EnumNode: value must be one of the declared enum values

Each node knows how to render itself two ways:
    - to_schema(): the extended jsonschema dialect understood by the validator
      class from gql_validators.validation.keywords
    - to_json_schema(): plain Draft 7 JSON Schema for export

In the extended dialect every node tolerates None. Requiredness is layered on
by the container: an object's `required` list or an array's `requiredItems`.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Collection, Dict, List, Optional

from gql_validators.schema.type_ref import ScalarType

# Custom keywords of the extended dialect
REQUIRED_ITEMS_KEYWORD = "requiredItems"
DATE_KEYWORD = "date"
ENTITY_KEYWORD = "entity"
UNION_KEYWORD = "oneOfEntities"
ENUM_KEYWORD = "enumOf"

DEFINITIONS_PREFIX = "#/definitions/"


def _nullable_type(json_type: str, nullable: bool) -> Any:
    return [json_type, "null"] if nullable else json_type


@dataclass
class ValidatorNode(ABC):
    """
    Abstract base class for all compiled nodes.
    """

    @abstractmethod
    def to_schema(self) -> Dict[str, Any]:
        """
        Render this node in the extended jsonschema dialect.

        Returns:
            Dict: Schema fragment for the bound validator class
        """
        pass

    @abstractmethod
    def to_json_schema(self, defined: Optional[Collection[str]] = None) -> Dict[str, Any]:
        """
        Render this node as portable Draft 7 JSON Schema.

        Args:
            defined: Names present in the document's definitions. References
                to any other name render as {} (no constraint). None assumes
                every reference is defined.

        Returns:
            Dict: Schema fragment; entity references become $ref pointers
                into '#/definitions/'
        """
        pass


@dataclass
class ScalarNode(ValidatorNode):
    """
    A string, number or boolean field.

    Attributes:
        scalar: Primitive this node checks (never ScalarType.DATE)
        nullable: Whether null is part of the field's domain
    """

    scalar: ScalarType = ScalarType.STRING
    nullable: bool = True

    def to_schema(self) -> Dict[str, Any]:
        return {"type": [self.scalar.value, "null"]}

    def to_json_schema(self, defined: Optional[Collection[str]] = None) -> Dict[str, Any]:
        return {"type": _nullable_type(self.scalar.value, self.nullable)}


@dataclass
class DateNode(ValidatorNode):
    """
    A Date/DateTime field.

    Accepts date and datetime objects, and strings that parse under one of the
    validator's configured date formats.
    """

    nullable: bool = True

    def to_schema(self) -> Dict[str, Any]:
        return {DATE_KEYWORD: True}

    def to_json_schema(self, defined: Optional[Collection[str]] = None) -> Dict[str, Any]:
        return {"type": _nullable_type("string", self.nullable), "format": "date-time"}


@dataclass
class ArrayNode(ValidatorNode):
    """
    A list field.

    Attributes:
        items: Node every element must match
        nullable: Whether the list itself may be null
        items_required: Whether null elements are rejected ([T!])
    """

    items: ValidatorNode = field(default_factory=ScalarNode)
    nullable: bool = True
    items_required: bool = False

    def to_schema(self) -> Dict[str, Any]:
        return {
            "type": ["array", "null"],
            REQUIRED_ITEMS_KEYWORD: self.items_required,
            "items": self.items.to_schema(),
        }

    def to_json_schema(self, defined: Optional[Collection[str]] = None) -> Dict[str, Any]:
        return {
            "type": _nullable_type("array", self.nullable),
            "items": self.items.to_json_schema(defined),
        }


@dataclass
class EntityRefNode(ValidatorNode):
    """
    Reference to another compiled entity by name.

    The name is looked up in the registry when a value is validated, not when
    the node is built. This is what lets a type refer to itself or to a type
    declared later in the schema.

    Attributes:
        name: Entity name in the registry
        nullable: Whether null is part of the field's domain
    """

    name: str = ""
    nullable: bool = True

    def to_schema(self) -> Dict[str, Any]:
        return {ENTITY_KEYWORD: self.name}

    def to_json_schema(self, defined: Optional[Collection[str]] = None) -> Dict[str, Any]:
        if defined is not None and self.name not in defined:
            return {}
        ref = {"$ref": f"{DEFINITIONS_PREFIX}{self.name}"}
        if self.nullable:
            return {"anyOf": [ref, {"type": "null"}]}
        return ref


@dataclass
class ObjectNode(ValidatorNode):
    """
    An object, input object or interface type.

    Attributes:
        name: GraphQL type name
        properties: Field name -> node, in declaration order
        required: Names of non-null fields, in declaration order
    """

    name: str = ""
    properties: Dict[str, ValidatorNode] = field(default_factory=dict)
    required: List[str] = field(default_factory=list)

    def to_schema(self) -> Dict[str, Any]:
        # `required` precedes `properties` so a null required field reports
        # its requiredness first
        return {
            "type": "object",
            "required": list(self.required),
            "properties": {k: v.to_schema() for k, v in self.properties.items()},
        }

    def to_json_schema(self, defined: Optional[Collection[str]] = None) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "object",
            "properties": {k: v.to_json_schema(defined) for k, v in self.properties.items()},
        }
        if self.required:
            schema["required"] = list(self.required)
        return schema


@dataclass
class UnionNode(ValidatorNode):
    """
    A union type: the value must match at least one member entity.

    Members are resolved when the union is compiled, so their nodes are held
    directly rather than by name.

    Attributes:
        name: GraphQL union name
        members: Member entity name -> member node, in declaration order
    """

    name: str = ""
    members: Dict[str, ValidatorNode] = field(default_factory=dict)

    def to_schema(self) -> Dict[str, Any]:
        return {UNION_KEYWORD: {k: v.to_schema() for k, v in self.members.items()}}

    def to_json_schema(self, defined: Optional[Collection[str]] = None) -> Dict[str, Any]:
        return {"anyOf": [{"$ref": f"{DEFINITIONS_PREFIX}{k}"} for k in self.members]}


@dataclass
class EnumNode(ValidatorNode):
    """
    An enum type.

    Attributes:
        name: GraphQL enum name
        values: Allowed value names in declaration order
    """

    name: str = ""
    values: List[str] = field(default_factory=list)

    def to_schema(self) -> Dict[str, Any]:
        return {ENUM_KEYWORD: {"name": self.name, "values": list(self.values)}}

    def to_json_schema(self, defined: Optional[Collection[str]] = None) -> Dict[str, Any]:
        return {"type": "string", "enum": list(self.values)}
