"""
CLI command implementations.

This module contains the business logic for each CLI command:
- entities: List compiled entities
- validate: Validate a JSON document against an entity
- export: Export compiled entities as JSON Schema
"""

import json
from pathlib import Path
from typing import Any, List, Optional

from rich.markup import escape

from gql_validators.compiler import GQLCompiler
from gql_validators.exceptions import ValidationError
from gql_validators.schema.json_schema import dump_json_schema

from .display import (
    console,
    print_entities,
    print_error,
    print_header,
    print_info,
    print_json,
    print_separator,
    print_success,
    print_validation_errors,
)


def load_compiler(
    schema_path: Path,
    exclude: Optional[List[str]] = None,
    date_formats: Optional[List[str]] = None,
) -> GQLCompiler:
    """
    Compile a GraphQL schema file.

    Args:
        schema_path: Path to the SDL file
        exclude: Field exclude rules
        date_formats: Date formats, defaults to DEFAULT_DATE_FORMATS

    Returns:
        GQLCompiler for the schema

    Raises:
        ValueError: If the file doesn't exist
    """
    if not schema_path.exists():
        raise ValueError(f"Schema file not found: {schema_path}")

    return GQLCompiler(
        schema_path,
        exclude=exclude,
        date_formats=date_formats,
    )


def load_json_file(json_path: Path) -> Any:
    """
    Load a JSON document.

    Raises:
        ValueError: If the file doesn't exist or isn't valid JSON
    """
    if not json_path.exists():
        raise ValueError(f"JSON file not found: {json_path}")

    try:
        with open(json_path) as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {json_path}: {e}")


def entities_command(schema_path: Path, exclude: Optional[List[str]]) -> None:
    """
    Execute the entities command.

    Args:
        schema_path: Path to GraphQL schema file
        exclude: Field exclude rules
    """
    print_header("gql-validators - Compiled Entities")

    compiler = load_compiler(schema_path, exclude)
    print_success(f"Compiled schema from: {schema_path}")

    print_entities(compiler.entities)


def validate_command(
    schema_path: Path,
    entity_name: str,
    json_path: Path,
    exclude: Optional[List[str]],
    date_formats: Optional[List[str]],
    show_input: bool,
) -> None:
    """
    Execute the validate command.

    Args:
        schema_path: Path to GraphQL schema file
        entity_name: Entity to validate against
        json_path: Path to JSON file to validate
        exclude: Field exclude rules
        date_formats: Accepted date formats
        show_input: Whether to display the input document

    Raises:
        SystemExit: With code 1 when the document is invalid
    """
    print_header("gql-validators - Validate JSON")

    compiler = load_compiler(schema_path, exclude, date_formats)
    print_success(f"Compiled schema from: {schema_path}")

    data = load_json_file(json_path)
    print_success(f"Loaded JSON from: {json_path}")

    if show_input:
        print_json(data, title="Input JSON")

    entity = compiler.get_entity(entity_name)

    print_separator()
    print_info(f"Validating against [bold]{entity_name}[/bold] ({entity.kind.value})...")

    console.print()
    try:
        entity.validate(data)
    except ValidationError as e:
        print_error(f"Validation failed: {escape(e.message)}")
        print_validation_errors(e.errors)
        raise SystemExit(1)

    print_success("Validation passed!")


def export_command(
    schema_path: Path,
    root: Optional[str],
    exclude: Optional[List[str]],
    output_path: Optional[Path],
) -> None:
    """
    Execute the export command.

    Args:
        schema_path: Path to GraphQL schema file
        root: Entity the exported document validates, if any
        exclude: Field exclude rules
        output_path: Where to write the document; printed when None
    """
    compiler = load_compiler(schema_path, exclude)
    text = dump_json_schema(compiler.to_json_schema(root=root))

    if output_path is None:
        console.print_json(text)
        return

    output_path.write_text(text + "\n")
    print_success(f"Wrote JSON Schema to: {output_path}")
