"""
Main CLI entry point using Typer.

This module defines the command-line interface for gql-validators using Typer.
It provides three commands: entities, validate, and export.
"""

import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich.logging import RichHandler
from rich.markup import escape
from typing_extensions import Annotated

from .commands import entities_command, export_command, validate_command
from .display import print_error


# Create Typer app
app = typer.Typer(
    name="gql-validators",
    help="gql-validators - Runtime validators compiled from GraphQL schemas",
    add_completion=False,
    rich_markup_mode="rich"
)

SchemaOption = Annotated[
    Path,
    typer.Option("--schema", "-s", help="Path to GraphQL schema file", exists=True, file_okay=True, dir_okay=False)
]
ExcludeOption = Annotated[
    Optional[List[str]],
    typer.Option("--exclude", "-x", help="Field to exclude: 'field' or 'Entity.field' (repeatable)")
]


@app.command("entities")
def entities(
    schema: SchemaOption,
    exclude: ExcludeOption = None,
) -> None:
    """
    List the entities compiled from a schema.

    Example:
        gql-validators entities --schema schema.graphql
    """
    try:
        entities_command(schema_path=schema, exclude=exclude)
    except Exception as e:
        print_error(f"Command failed: {escape(str(e))}")
        raise typer.Exit(code=1)


@app.command("validate")
def validate(
    schema: SchemaOption,
    entity: Annotated[
        str,
        typer.Option("--entity", "-e", help="Entity (GraphQL type) to validate against")
    ],
    json_file: Annotated[
        Path,
        typer.Option("--json", "-j", help="Path to JSON file to validate", exists=True, file_okay=True, dir_okay=False)
    ],
    exclude: ExcludeOption = None,
    date_format: Annotated[
        Optional[List[str]],
        typer.Option("--date-format", help="Accepted date format: iso8601, rfc2822 or a strptime pattern (repeatable)")
    ] = None,
    show_input: Annotated[
        bool,
        typer.Option("--show-input", help="Display the input JSON")
    ] = False,
) -> None:
    """
    Validate a JSON document against one entity.

    Example:
        gql-validators validate \\
            --schema schema.graphql \\
            --entity Person \\
            --json person.json
    """
    try:
        validate_command(
            schema_path=schema,
            entity_name=entity,
            json_path=json_file,
            exclude=exclude,
            date_formats=date_format,
            show_input=show_input
        )
    except SystemExit:
        raise typer.Exit(code=1)
    except Exception as e:
        print_error(f"Command failed: {escape(str(e))}")
        raise typer.Exit(code=1)


@app.command("export")
def export(
    schema: SchemaOption,
    entity: Annotated[
        Optional[str],
        typer.Option("--entity", "-e", help="Entity the exported document validates")
    ] = None,
    exclude: ExcludeOption = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Path to save the JSON Schema")
    ] = None,
) -> None:
    """
    Export compiled entities as Draft 7 JSON Schema.

    Example:
        gql-validators export --schema schema.graphql --entity Person -o person.json
    """
    try:
        export_command(schema_path=schema, root=entity, exclude=exclude, output_path=output)
    except Exception as e:
        print_error(f"Command failed: {escape(str(e))}")
        raise typer.Exit(code=1)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: Annotated[
        bool,
        typer.Option("--version", "-v", help="Show version and exit")
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log compilation details")
    ] = False,
) -> None:
    """
    gql-validators - Runtime validators compiled from GraphQL schemas.

    Keeps input validation in sync with the GraphQL schema it is derived from.
    """
    if version:
        from gql_validators import __version__
        typer.echo(f"gql-validators version {__version__}")
        raise typer.Exit()

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(rich_tracebacks=True)]
        )

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def cli() -> None:
    """CLI entry point for poetry script."""
    app()


if __name__ == "__main__":
    cli()
