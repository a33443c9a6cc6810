"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from backings.domain.value_objects import BackingPlacement


logger = logging.getLogger(__name__)


def dated_filename(stem: str, extension: str, on: date | None = None) -> str:
    """Build an export filename such as ``material_schedule_2024-05-01.csv``.

    Args:
        stem: Base name of the artifact.
        extension: File extension without leading dot.
        on: Date to stamp; today if omitted.
    """
    stamp = (on or date.today()).isoformat()
    return f"{stem}_{stamp}.{extension}"


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert a list of backing placements to a specific format.

    Attributes:
        format_name: Registry name of the format (e.g., "csv", "json").
        file_extension: File extension without leading dot.
        file_stem: Base filename used by ExportManager.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]
    file_stem: ClassVar[str]

    @abstractmethod
    def export_string(self, placements: list[BackingPlacement]) -> str:
        """Export placements as a string.

        Args:
            placements: Placements to export.

        Returns:
            String representation of the exported data.
        """
        ...

    def export(self, placements: list[BackingPlacement], path: Path) -> None:
        """Export placements to a file.

        Args:
            placements: Placements to export.
            path: Path where the file will be saved.
        """
        ...


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves using the @ExporterRegistry.register decorator.

    Example:
        @ExporterRegistry.register("csv")
        class MaterialScheduleCsvExporter:
            format_name = "csv"
            file_extension = "csv"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator to register an exporter class.

        Args:
            format_name: The format name to register.

        Returns:
            Decorator function that registers the class.
        """

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            KeyError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            available = ", ".join(sorted(cls._exporters.keys()))
            raise KeyError(
                f"No exporter registered for format '{format_name}'. "
                f"Available formats: {available or 'none'}"
            )
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        """Sorted list of registered format names."""
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters


class ExportManager:
    """Writes exports for one or more formats into an output directory.

    Files are named ``<stem>_<ISO date>.<extension>``, e.g.
    ``material_schedule_2024-05-01.csv``.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize the export manager.

        Args:
            output_dir: Directory where exported files will be saved.
                        Will be created if it doesn't exist.
        """
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        placements: list[BackingPlacement],
        on: date | None = None,
    ) -> dict[str, Path]:
        """Export placements to multiple formats.

        Args:
            formats: Format names to export.
            placements: Placements to export.
            on: Date stamped into the filenames; today if omitted.

        Returns:
            Dictionary mapping format names to output file paths.

        Raises:
            KeyError: If any format is not registered.
            OSError: If file operations fail.
        """
        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}

        for format_name in formats:
            exporter = ExporterRegistry.get(format_name)()
            filename = dated_filename(exporter.file_stem, exporter.file_extension, on)
            filepath = self.output_dir / filename

            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(placements, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        placements: list[BackingPlacement],
        on: date | None = None,
    ) -> Path:
        """Export placements to a single format and return the file path."""
        return self.export_all([format_name], placements, on)[format_name]
