"""Validate command for checking layout documents.

This module provides the `validate` command that checks a JSON layout
document for syntax and schema errors before it is analyzed.
"""

from pathlib import Path
from typing import Annotated

import typer

from backings.application.config import (
    ConfigError,
    LayoutDocument,
    config_to_doors,
    config_to_placements,
    config_to_walls,
    load_layout,
)


def validate_command(
    layout_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON layout document to validate"),
    ],
) -> None:
    """Validate a backing layout document.

    Checks the layout document for:
    - JSON syntax errors
    - Schema validation errors (missing fields, unknown keys, bad values)
    - Duplicate placement IDs

    Exit codes:
        0 - Layout is valid
        1 - Layout has errors (cannot be analyzed)

    Example:
        backings validate level-2.json
    """
    typer.echo(f"Validating {layout_file}...")
    typer.echo()

    try:
        document = load_layout(layout_file)
    except ConfigError as e:
        _display_load_error(e)
        raise typer.Exit(code=1)

    _display_summary(document)


def _display_load_error(error: ConfigError) -> None:
    """Display a layout loading error.

    Args:
        error: The ConfigError to display
    """
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "file_read_error":
        typer.echo(f"  Cannot read file: {error.path}", err=True)
        typer.echo(f"    {error.message}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path") or "(root)"
            message = detail.get("message", "Unknown error")
            value = detail.get("value")
            typer.echo(f"  {path}: {message}", err=True)
            if value is not None and not isinstance(value, (dict, list)):
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)

    typer.echo()
    typer.echo("Validation failed.", err=True)


def _display_summary(document: LayoutDocument) -> None:
    placements = config_to_placements(document)
    walls = config_to_walls(document)
    doors = config_to_doors(document)
    typer.echo(
        f"  {len(placements)} placement(s), {len(walls)} wall(s), {len(doors)} door(s)"
    )
    typer.echo()
    typer.echo("Validation passed. Layout is valid.")
