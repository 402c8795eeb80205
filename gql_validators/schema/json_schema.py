"""
JSON Schema exporter - render compiled entities as a Draft 7 document.

The validators returned by GQLCompiler use custom jsonschema keywords that only
the compiler's own validator class understands. This module writes the same
entities out as plain JSON Schema so other tools (and other languages) can
consume them:

    - every entity becomes an entry under "definitions"
    - entity references become {"$ref": "#/definitions/<Name>"}
    - unions become anyOf over their members
    - enums become {"type": "string", "enum": [...]}
    - dates become strings with "format": "date-time"
    - nullable fields add "null" to their type

Usage:
    ```python
    from gql_validators import GQLCompiler
    from gql_validators.schema.json_schema import dump_json_schema

    compiler = GQLCompiler("type Person { name: String! friends: [Person!] }")
    print(dump_json_schema(compiler.to_json_schema(root="Person")))
    ```

Limitations:
    - Date strings are only described, not checked: 'date-time' is narrower
      than the formats the live validator accepts
    - Union membership is anyOf, so a value matching several members is valid,
      same as the live validator
    - A reference to a name with no entity (a custom scalar such as JSON)
      renders as {} and accepts anything; the live validator rejects any
      non-null value there with "No entity '<name>'"
"""

import json
from typing import Any, Dict, Mapping, Optional

from gql_validators.exceptions import UnknownEntityError
from gql_validators.schema.types import DEFINITIONS_PREFIX
from gql_validators.validation.validator import Entity

JSON_SCHEMA_DRAFT7 = "http://json-schema.org/draft-07/schema#"


def compile_to_json_schema(
    entities: Mapping[str, Entity],
    root: Optional[str] = None,
) -> Dict[str, Any]:
    """
    Compile a set of entities into one Draft 7 JSON Schema document.

    Args:
        entities: Entity name -> Entity, usually GQLCompiler.entities
        root: Optional entity the document itself should validate

    Returns:
        Dict: JSON Schema document

    Raises:
        UnknownEntityError: If root is not one of the entities

    Example:
        ```python
        doc = compile_to_json_schema(compiler.entities, root="Person")
        # {"$schema": "...", "$ref": "#/definitions/Person",
        #  "definitions": {"Person": {"type": "object", ...}}}
        ```
    """
    document: Dict[str, Any] = {"$schema": JSON_SCHEMA_DRAFT7}

    if root is not None:
        if root not in entities:
            raise UnknownEntityError(root)
        document["$ref"] = f"{DEFINITIONS_PREFIX}{root}"

    document["definitions"] = {
        name: entity.node.to_json_schema(defined=entities) for name, entity in entities.items()
    }
    return document


def dump_json_schema(document: Dict[str, Any], indent: int = 2) -> str:
    """Serialize an exported document as JSON text."""
    return json.dumps(document, indent=indent)
