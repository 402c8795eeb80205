"""
Schema loading and type mapping module.

This module handles conversion of GraphQL schemas into validator node trees and
the plain JSON Schema export of those trees.

Components:
    - parser: Load schema sources and group named types
    - type_ref: Classify printed type references ('[Foo!]!') and map scalars
    - types: Validator node definitions (ObjectNode, ArrayNode, UnionNode, etc.)
    - json_schema: Export compiled entities as Draft 7 JSON Schema

Example:
    ```python
    from gql_validators.schema import classify_type, load_schema, partition_types

    schema = load_schema("./schema.graphql")
    types = partition_types(schema)

    classify_type("[Int!]")
    # TypeDescriptor(base_type='number', is_array=True, is_item_required=True, ...)
    ```
"""

from gql_validators.schema.parser import DEFAULT_TYPES, load_schema, partition_types, is_builtin_type
from gql_validators.schema.type_ref import ScalarType, TypeDescriptor, classify_type, map_scalar

__all__ = [
    "DEFAULT_TYPES",
    "load_schema",
    "partition_types",
    "is_builtin_type",
    "ScalarType",
    "TypeDescriptor",
    "classify_type",
    "map_scalar",
]
