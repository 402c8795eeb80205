"""
GraphQL to validator compiler.

This is the core class that ties all components together:
    1. Load the schema source into a GraphQLSchema
    2. Split its type map into object, union and enum types
    3. Compile every object type field by field (honouring exclude rules)
    4. Compile unions against the already-compiled object types
    5. Compile enums
    6. Seal the registry and hand entities out by name

Usage:
    ```python
    from gql_validators import GQLCompiler

    compiler = GQLCompiler('''
        type Custom1 { type: String! foo: String! }
        type Custom2 { type: String! bar: String! }
        union Custom = Custom1 | Custom2
    ''', exclude=["Custom2.type"])

    Custom = compiler.get_entity("Custom")
    Custom.validate({"type": "1", "foo": "bar"})
    ```
"""

import logging
from typing import Any, Dict, Iterable, Mapping, Optional, Sequence, Tuple

from graphql import GraphQLEnumType, GraphQLUnionType

from gql_validators.registry import Registry
from gql_validators.schema.json_schema import compile_to_json_schema
from gql_validators.schema.parser import ObjectLikeType, SchemaSource, load_schema, partition_types
from gql_validators.schema.type_ref import ScalarType, TypeDescriptor, classify_type
from gql_validators.schema.types import (
    ArrayNode,
    DateNode,
    EntityRefNode,
    EnumNode,
    ObjectNode,
    ScalarNode,
    UnionNode,
    ValidatorNode,
)
from gql_validators.validation.dates import DEFAULT_DATE_FORMATS
from gql_validators.validation.keywords import build_validator_class
from gql_validators.validation.validator import Entity

logger = logging.getLogger(__name__)


def is_excluded(entity_name: str, field_name: str, exclude: Iterable[str]) -> bool:
    """
    Check a field against exclude rules.

    A rule is either a bare field name (excluded from every entity) or
    'Entity.field' (excluded from that entity only).
    """
    return field_name in exclude or f"{entity_name}.{field_name}" in exclude


def _element_node(descriptor: TypeDescriptor, nullable: bool) -> ValidatorNode:
    if descriptor.is_nested_array:
        return _array_node(classify_type(descriptor.base_type), nullable=nullable)
    if descriptor.is_unknown_type:
        return EntityRefNode(name=descriptor.base_type, nullable=nullable)
    if descriptor.scalar is ScalarType.DATE:
        return DateNode(nullable=nullable)
    return ScalarNode(scalar=descriptor.scalar, nullable=nullable)


def _array_node(descriptor: TypeDescriptor, nullable: bool) -> ArrayNode:
    return ArrayNode(
        items=_element_node(descriptor, nullable=not descriptor.is_item_required),
        nullable=nullable,
        items_required=descriptor.is_item_required,
    )


def compile_field(field_name: str, type_ref: str) -> Optional[Tuple[str, ValidatorNode, bool]]:
    """
    Convert a GraphQL field to a validator node.

    Args:
        field_name: Field name
        type_ref: Printed GraphQL type, e.g. '[Custom!]!'

    Returns:
        (field name, node, is_required), or None if type_ref is empty

    Example:
        ```python
        compile_field("tags", "[String!]")
        # ("tags", ArrayNode(items=ScalarNode(STRING, nullable=False),
        #                    nullable=True, items_required=True), False)

        compile_field("grid", "[[Int!]]!")
        # ("grid", ArrayNode(items=ArrayNode(items=ScalarNode(NUMBER, nullable=False), ...),
        #                    nullable=False), True)
        ```
    """
    descriptor = classify_type(type_ref)
    if descriptor is None:
        return None

    if descriptor.is_array:
        node: ValidatorNode = _array_node(descriptor, nullable=not descriptor.is_required)
    else:
        node = _element_node(descriptor, nullable=not descriptor.is_required)

    return field_name, node, descriptor.is_required


def compile_object(object_type: ObjectLikeType, exclude: Iterable[str] = ()) -> ObjectNode:
    """
    Compile an object, interface or input object type.

    Args:
        object_type: graphql-core type with a `fields` map
        exclude: Exclude rules

    Returns:
        ObjectNode: One property per non-excluded field
    """
    node = ObjectNode(name=object_type.name)

    for field_name, gql_field in object_type.fields.items():
        if is_excluded(object_type.name, field_name, exclude):
            logger.debug(f"Excluding field {object_type.name}.{field_name}")
            continue

        compiled = compile_field(field_name, str(gql_field.type))
        if compiled is None:
            continue

        name, field_node, is_required = compiled
        node.properties[name] = field_node
        if is_required:
            node.required.append(name)

    return node


def compile_union(union_type: GraphQLUnionType, registry: Registry) -> UnionNode:
    """
    Compile a union type against already-compiled member entities.

    Args:
        union_type: graphql-core union type
        registry: Registry holding the member object types

    Returns:
        UnionNode: Members in declaration order

    Raises:
        UnknownEntityError: If a member has not been compiled
    """
    members: Dict[str, ValidatorNode] = {}
    for member in union_type.types:
        members[member.name] = registry.get(member.name).node

    return UnionNode(name=union_type.name, members=members)


def compile_enum(enum_type: GraphQLEnumType) -> EnumNode:
    """Compile an enum type to its ordered list of value names."""
    return EnumNode(name=enum_type.name, values=list(enum_type.values))


class GQLCompiler:
    """
    Compiles a GraphQL schema into named validators.

    Attributes:
        schema: The GraphQLSchema that was compiled
        exclude: Exclude rules applied to object fields
        date_formats: Formats accepted for Date/DateTime strings
        registry: Compiled entities, sealed after construction
    """

    def __init__(
        self,
        schema: SchemaSource,
        exclude: Optional[Iterable[str]] = None,
        date_formats: Optional[Sequence[str]] = None,
    ):
        """
        Compile a schema.

        Args:
            schema: GraphQLSchema, SDL text, or path to an SDL file (strings
                starting with '/' or '.' are read as paths)
            exclude: Field exclude rules, 'field' or 'Entity.field'
            date_formats: Date string formats, defaults to DEFAULT_DATE_FORMATS
                (see gql_validators.validation.dates)

        Raises:
            GraphQLError: If the schema source is invalid
            UnknownEntityError: If a union member cannot be resolved
        """
        self.schema = load_schema(schema)
        self.exclude = frozenset(exclude or ())
        self.date_formats = tuple(date_formats or DEFAULT_DATE_FORMATS)
        self.registry = Registry()

        validator_cls = build_validator_class(self.registry, self.date_formats)
        types = partition_types(self.schema)

        # Objects first: unions resolve their members eagerly
        for object_type in types.objects:
            node = compile_object(object_type, self.exclude)
            self.registry.define(Entity(object_type.name, node, validator_cls))

        for union_type in types.unions:
            node = compile_union(union_type, self.registry)
            self.registry.define(Entity(union_type.name, node, validator_cls))

        for enum_type in types.enums:
            node = compile_enum(enum_type)
            self.registry.define(Entity(enum_type.name, node, validator_cls))

        self.registry.seal()

        logger.info(
            f"Compiled {len(self.registry)} entities: {len(types.objects)} object(s), "
            f"{len(types.unions)} union(s), {len(types.enums)} enum(s)"
        )

    def get_entity(self, name: str) -> Entity:
        """
        Get a compiled entity by name.

        Raises:
            UnknownEntityError: If the schema defines no such type
        """
        return self.registry.get(name)

    @property
    def entities(self) -> Mapping[str, Entity]:
        """Read-only mapping of every compiled entity."""
        return self.registry.as_mapping()

    def to_json_schema(self, root: Optional[str] = None) -> Dict[str, Any]:
        """
        Export the compiled entities as a Draft 7 JSON Schema document.

        Args:
            root: Optional entity the document should validate directly
        """
        return compile_to_json_schema(self.entities, root=root)
