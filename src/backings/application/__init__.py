"""Application layer - use cases and DTOs."""

from .commands import AnalyzeLayoutCommand
from .dtos import AnalysisOutput

__all__ = [
    "AnalysisOutput",
    "AnalyzeLayoutCommand",
]
