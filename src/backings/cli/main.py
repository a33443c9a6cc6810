"""Typer CLI for backing placement analysis."""

import json
from pathlib import Path
from typing import Annotated

import typer

from backings.application import AnalyzeLayoutCommand
from backings.application.config import (
    ConfigError,
    LayoutDocument,
    config_to_placements,
    config_to_walls,
    load_layout,
)
from backings.domain.services import WallSnapService
from backings.infrastructure import AnalysisFormatter
from backings.infrastructure.exporters import ExporterRegistry, ExportManager
from backings.infrastructure.formatters import placement_to_dict
from backings.cli.commands import validate_command


app = typer.Typer(
    name="backings",
    help="Analyze backing placements: clashes, optimizations and material schedules.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _load_or_exit(layout_file: Path) -> LayoutDocument:
    """Load a layout document, printing the error and exiting on failure."""
    try:
        return load_layout(layout_file)
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def analyze(
    layout_file: Annotated[Path, typer.Argument(help="Path to the JSON layout document")],
    snap: Annotated[bool, typer.Option("--snap", help="Snap placements to the nearest wall first")] = False,
    threshold: Annotated[
        float | None,
        typer.Option("--threshold", "-t", min=0, help="Grouping distance in inches (overrides the document)"),
    ] = None,
    output_format: Annotated[str, typer.Option("--format", "-f", help="Output format: text, json")] = "text",
) -> None:
    """Detect clashes, suggest optimizations and summarize materials."""
    if output_format not in ("text", "json"):
        typer.echo(f"Error: Unknown format '{output_format}'. Use text or json.", err=True)
        raise typer.Exit(code=1)

    document = _load_or_exit(layout_file)

    if threshold is not None:
        settings = document.settings.model_copy(update={"grouping_threshold": threshold})
        document = document.model_copy(update={"settings": settings})

    command = AnalyzeLayoutCommand.from_document(document)
    result = command.execute_document(document, snap=snap)

    formatter = AnalysisFormatter()
    if output_format == "json":
        typer.echo(json.dumps(formatter.to_dict(result), indent=2))
    else:
        typer.echo(formatter.format(result))


@app.command()
def schedule(
    layout_file: Annotated[Path, typer.Argument(help="Path to the JSON layout document")],
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Export format: csv, json, report, detailed-csv, takeoff"),
    ] = "csv",
    output: Annotated[Path | None, typer.Option("--output", "-o", help="Output file path")] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Directory for a dated export file"),
    ] = None,
) -> None:
    """Export the material schedule.

    Without --output or --output-dir the export is printed to stdout.
    """
    if output is not None and output_dir is not None:
        typer.echo("Error: Use either --output or --output-dir, not both.", err=True)
        raise typer.Exit(code=1)

    if not ExporterRegistry.is_registered(output_format):
        available = ", ".join(ExporterRegistry.available_formats())
        typer.echo(f"Error: Unknown format '{output_format}'.", err=True)
        typer.echo(f"Available formats: {available}", err=True)
        raise typer.Exit(code=1)

    document = _load_or_exit(layout_file)
    placements = config_to_placements(document)

    if output_dir is not None:
        path = ExportManager(output_dir).export_single(output_format, placements)
        typer.echo(f"Exported {output_format}: {path}")
        return

    exporter = ExporterRegistry.get(output_format)()
    if output is not None:
        exporter.export(placements, output)
        typer.echo(f"Exported {output_format}: {output}")
    else:
        typer.echo(exporter.export_string(placements))


@app.command()
def snap(
    layout_file: Annotated[Path, typer.Argument(help="Path to the JSON layout document")],
    offset: Annotated[
        float | None,
        typer.Option("--offset", help="Perpendicular offset from the wall (overrides the document)"),
    ] = None,
) -> None:
    """Snap every placement to its nearest wall and print them as JSON."""
    document = _load_or_exit(layout_file)
    snap_offset = document.settings.snap_offset if offset is None else offset

    snapped = WallSnapService().snap_all(
        config_to_placements(document), config_to_walls(document), snap_offset
    )
    typer.echo(json.dumps({"placements": [placement_to_dict(p) for p in snapped]}, indent=2))


if __name__ == "__main__":
    app()
