"""
Rich terminal display utilities for CLI.

Provides formatted output using the Rich library for:
- Syntax-highlighted JSON
- Validation errors with paths
- Entity tables
- Success/failure indicators
"""

import json
from typing import Any, List, Mapping, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from gql_validators.schema.types import ObjectNode, UnionNode, EnumNode
from gql_validators.validation.validator import Entity, FieldError


console = Console()


def print_header(title: str) -> None:
    """Print a formatted header."""
    console.print()
    console.print(f"[bold cyan]{title}[/bold cyan]")
    console.print("=" * len(title))
    console.print()


def print_success(message: str) -> None:
    """Print a success message with checkmark."""
    console.print(f"[green]✓[/green] {message}")


def print_error(message: str) -> None:
    """Print an error message with X mark."""
    console.print(f"[red]✗[/red] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]ℹ[/blue] {message}")


def print_json(data: Any, title: Optional[str] = None) -> None:
    """
    Print JSON data with syntax highlighting.

    Args:
        data: JSON-serializable data or JSON string
        title: Optional title for the panel
    """
    if isinstance(data, str):
        json_str = data
    else:
        json_str = json.dumps(data, indent=2, default=str)

    syntax = Syntax(json_str, "json", theme="monokai", line_numbers=False)

    if title:
        panel = Panel(syntax, title=f"[bold]{title}[/bold]", border_style="cyan")
        console.print(panel)
    else:
        console.print(syntax)


def print_validation_errors(errors: List[FieldError]) -> None:
    """
    Print validation errors in a formatted list.

    Args:
        errors: Errors from a failed Entity.validate()
    """
    if not errors:
        return

    console.print()
    console.print("[bold red]Validation Errors:[/bold red]")
    for error in errors:
        location = error.path or "root"
        console.print(f"  [red]•[/red] [cyan]{escape(location)}[/cyan]: {escape(error.message)}")
    console.print()


def describe_entity(entity: Entity) -> str:
    """One-line summary of what an entity checks."""
    node = entity.node
    if isinstance(node, ObjectNode):
        return f"{len(node.properties)} field(s), {len(node.required)} required"
    if isinstance(node, UnionNode):
        return "one of " + ", ".join(node.members)
    if isinstance(node, EnumNode):
        return ", ".join(node.values)
    return ""


def print_entities(entities: Mapping[str, Entity]) -> None:
    """
    Print compiled entities in a table.

    Args:
        entities: Entity name -> Entity
    """
    table = Table(title="Compiled Entities", show_header=True, header_style="bold cyan")
    table.add_column("#", style="dim", width=4)
    table.add_column("Entity", style="cyan")
    table.add_column("Kind", justify="center")
    table.add_column("Details", style="white")

    for i, (name, entity) in enumerate(entities.items(), 1):
        table.add_row(str(i), name, entity.kind.value, describe_entity(entity))

    console.print()
    console.print(table)
    console.print()


def print_separator() -> None:
    """Print a visual separator line."""
    console.print("[dim]" + "─" * 70 + "[/dim]")
