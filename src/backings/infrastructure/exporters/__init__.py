"""Exporter framework for backing placements.

This package provides:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Writes dated export files into a directory

Registered exporters:
- csv: Material schedule (one row per type and size)
- detailed-csv: One row per placement
- json: Material schedule rows and grand totals
- report: Plain-text backing summary report
- takeoff: Per-type take-off with board feet, waste and estimated cost

Usage:
    from backings.infrastructure.exporters import ExporterRegistry, ExportManager

    csv_exporter = ExporterRegistry.get("csv")()
    text = csv_exporter.export_string(placements)

    manager = ExportManager(output_dir=Path("./out"))
    files = manager.export_all(["csv", "report"], placements)
"""

from backings.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    dated_filename,
)

# Import exporters to trigger registration
from backings.infrastructure.exporters.detailed_csv import DetailedCsvExporter
from backings.infrastructure.exporters.report import BackingSummaryReport
from backings.infrastructure.exporters.schedule_csv import (
    SCHEDULE_HEADERS,
    MaterialScheduleCsvExporter,
    schedule_filename,
)
from backings.infrastructure.exporters.schedule_json import (
    MaterialScheduleJsonExporter,
)
from backings.infrastructure.exporters.takeoff import (
    MaterialTakeoffCsvExporter,
    takeoff_headers,
)

__all__ = [
    # Framework
    "Exporter",
    "ExporterRegistry",
    "ExportManager",
    "dated_filename",
    # Registered exporters
    "BackingSummaryReport",
    "DetailedCsvExporter",
    "MaterialScheduleCsvExporter",
    "MaterialScheduleJsonExporter",
    "MaterialTakeoffCsvExporter",
    "SCHEDULE_HEADERS",
    "schedule_filename",
    "takeoff_headers",
]
