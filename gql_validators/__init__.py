"""
gql-validators: Runtime Validators Derived from GraphQL Schemas

gql-validators compiles a GraphQL schema into jsonschema-backed validators, one
per named type, so input validation stays in sync with the API schema without
being written twice.

Key Features:
    - Object, input and interface types become shape validators
    - Non-null fields are required, nullable fields accept None
    - Lists, including lists of user-defined types
    - Self-referential and mutually recursive types through lazy references
    - Unions accept a value matching any member type
    - Enums restrict values to their declared names
    - Date/DateTime accept date objects and common date string formats
    - Field exclusion, globally or per type
    - Export to plain Draft 7 JSON Schema

Quick Start:
    ```python
    from gql_validators import GQLCompiler, ValidationError

    compiler = GQLCompiler('''
        scalar DateTime
        type Person { name: String! born: DateTime friends: [Person!] }
    ''')
    Person = compiler.get_entity("Person")

    Person.validate({"name": "Ada", "born": "1815-12-10", "friends": []})

    try:
        Person.validate({"name": None})
    except ValidationError as e:
        print(e.message)  # "name is a required field"
    ```

Architecture:
    1. Schema Loader: GraphQLSchema / SDL text / SDL file -> named types
    2. Type Classifier: '[Foo!]!' -> base type, list-ness, requiredness
    3. Compiler: fields, objects, unions and enums -> validator nodes
    4. Registry: entity name -> compiled Entity, resolved lazily by references
    5. Keywords: jsonschema Draft 7 extended with the GraphQL-specific rules
"""

__version__ = "0.1.0"

from gql_validators.compiler import GQLCompiler  # noqa: F401
from gql_validators.exceptions import GQLValidatorsError, UnknownEntityError, ValidationError  # noqa: F401
from gql_validators.schema.parser import DEFAULT_TYPES  # noqa: F401
from gql_validators.validation.validator import Entity, EntityKind, FieldError  # noqa: F401

__all__ = [
    "GQLCompiler",
    "Entity",
    "EntityKind",
    "FieldError",
    "GQLValidatorsError",
    "UnknownEntityError",
    "ValidationError",
    "DEFAULT_TYPES",
]
