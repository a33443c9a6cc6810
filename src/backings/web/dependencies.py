"""FastAPI dependency injection for backing services."""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from backings.infrastructure.formatters import AnalysisFormatter
from backings.infrastructure.exporters import MaterialScheduleCsvExporter


@lru_cache(maxsize=1)
def get_analysis_formatter() -> AnalysisFormatter:
    """Get cached AnalysisFormatter instance."""
    return AnalysisFormatter()


def get_csv_exporter() -> MaterialScheduleCsvExporter:
    """Dependency for the material schedule CSV exporter."""
    return MaterialScheduleCsvExporter()


# Type aliases for cleaner endpoint signatures
AnalysisFormatterDep = Annotated[AnalysisFormatter, Depends(get_analysis_formatter)]
CsvExporterDep = Annotated[MaterialScheduleCsvExporter, Depends(get_csv_exporter)]
