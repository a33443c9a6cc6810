"""Infrastructure layer - exporters and output formatting."""

from backings.infrastructure.exporters import (
    BackingSummaryReport,
    DetailedCsvExporter,
    ExporterRegistry,
    ExportManager,
    MaterialScheduleCsvExporter,
    MaterialScheduleJsonExporter,
    schedule_filename,
)
from backings.infrastructure.formatters import AnalysisFormatter

__all__ = [
    "AnalysisFormatter",
    "BackingSummaryReport",
    "DetailedCsvExporter",
    "ExporterRegistry",
    "ExportManager",
    "MaterialScheduleCsvExporter",
    "MaterialScheduleJsonExporter",
    "schedule_filename",
]
