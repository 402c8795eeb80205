"""
GraphQL schema loader - turns a schema source into classified named types.

This module is the entry point for reading GraphQL schemas. It handles:
    - Already-built GraphQLSchema objects
    - Inline SDL text
    - Paths to SDL files (pathlib.Path, or strings starting with '/' or '.')
    - Splitting the type map into object, union and enum types, leaving out
      built-in scalars, root operation types and introspection types

Usage:
    ```python
    from gql_validators.schema import load_schema, partition_types

    schema = load_schema('''
        type Cat { name: String! }
        type Dog { name: String! barks: Boolean }
        union Pet = Cat | Dog
        enum Size { SMALL, LARGE }
    ''')

    types = partition_types(schema)
    [t.name for t in types.objects]   # ['Cat', 'Dog']
    [t.name for t in types.unions]    # ['Pet']
    [t.name for t in types.enums]     # ['Size']
    ```
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from graphql import (
    GraphQLEnumType,
    GraphQLInputObjectType,
    GraphQLInterfaceType,
    GraphQLNamedType,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLUnionType,
    build_schema,
)

logger = logging.getLogger(__name__)

# Default GraphQL types to filter out (so we only compile custom types)
DEFAULT_TYPES = [
    "Query",
    "Mutation",
    "String",
    "Int",
    "Float",
    "DateTime",
    "Boolean",
]

INTROSPECTION_PREFIX = "__"

SchemaSource = Union[GraphQLSchema, Path, str]

# Types with a `fields` map compiled as object entities
ObjectLikeType = Union[GraphQLObjectType, GraphQLInterfaceType, GraphQLInputObjectType]


@dataclass
class SchemaTypes:
    """
    Named types of a schema, grouped by how they are compiled.

    Attributes:
        objects: Object, interface and input object types
        unions: Union types
        enums: Enum types
    """
    objects: List[ObjectLikeType] = field(default_factory=list)
    unions: List[GraphQLUnionType] = field(default_factory=list)
    enums: List[GraphQLEnumType] = field(default_factory=list)


def is_path_source(source: str) -> bool:
    """Whether a string source names a file rather than holding SDL text."""
    return source.startswith("/") or source.startswith(".")


def load_schema(source: SchemaSource) -> GraphQLSchema:
    """
    Build a GraphQLSchema from any supported source.

    Args:
        source: GraphQLSchema, SDL text, or path to an SDL file

    Returns:
        GraphQLSchema: The built schema

    Raises:
        GraphQLError: If the SDL does not parse or is not a valid schema
        OSError: If a schema file cannot be read
    """
    if isinstance(source, GraphQLSchema):
        return source

    if isinstance(source, Path):
        sdl = source.read_text()
        logger.debug(f"Read schema from {source}")
    elif is_path_source(source):
        sdl = Path(source).read_text()
        logger.debug(f"Read schema from {source}")
    else:
        sdl = source

    return build_schema(sdl)


def is_builtin_type(named_type: GraphQLNamedType) -> bool:
    """Whether a type is a default or introspection type that is never compiled."""
    return named_type.name in DEFAULT_TYPES or named_type.name.startswith(INTROSPECTION_PREFIX)


def partition_types(schema: GraphQLSchema) -> SchemaTypes:
    """
    Group a schema's custom named types for compilation.

    Types keep their type map order within each group. Scalars that are not
    filtered by name (ID, custom `scalar` declarations) are dropped here since
    they have nothing to compile.

    Args:
        schema: Built GraphQL schema

    Returns:
        SchemaTypes: Object-like, union and enum types
    """
    types = SchemaTypes()

    for named_type in schema.type_map.values():
        if is_builtin_type(named_type):
            continue

        if isinstance(named_type, (GraphQLObjectType, GraphQLInterfaceType, GraphQLInputObjectType)):
            types.objects.append(named_type)
        elif isinstance(named_type, GraphQLUnionType):
            types.unions.append(named_type)
        elif isinstance(named_type, GraphQLEnumType):
            types.enums.append(named_type)

    logger.debug(
        f"Partitioned schema: {len(types.objects)} object(s), "
        f"{len(types.unions)} union(s), {len(types.enums)} enum(s)"
    )
    return types
