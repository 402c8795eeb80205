"""
Command-line interface module.

This module provides a rich terminal interface for gql-validators using Typer and Rich.

Commands:
    - entities: List the entities compiled from a schema
    - validate: Validate a JSON document against one entity
    - export: Write the compiled entities as Draft 7 JSON Schema

Example Usage:
    ```bash
    # What does the schema compile to?
    gql-validators entities --schema schema.graphql

    # Validate a payload, ignoring server-generated fields
    gql-validators validate \\
        --schema schema.graphql \\
        --entity CreateUserInput \\
        --json payload.json \\
        --exclude id \\
        --exclude User.createdAt

    # Export for other tooling
    gql-validators export --schema schema.graphql --entity User --output user.schema.json
    ```
"""

from .main import app

__all__ = ["app"]
