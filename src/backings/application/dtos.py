"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from backings.domain.value_objects import (
    BackingPlacement,
    BackingZone,
    Clash,
    ClashSeverity,
    MaterialSummary,
    MaterialTotals,
    OptimizationSuggestion,
)


@dataclass
class AnalysisOutput:
    """Result of analyzing a layout.

    Attributes:
        placements: Placements the analysis ran on (snapped copies if snapping
            was requested, otherwise the caller's placements).
        clashes: Detected conflicts.
        suggestions: Advisory optimizations.
        zones: Groups of combinable backings with their combined piece.
        schedule: Material schedule rows.
        totals: Grand totals of the schedule.
        material_waste: Square inches lost to standard sizing.
    """

    placements: list[BackingPlacement]
    clashes: list[Clash] = field(default_factory=list)
    suggestions: list[OptimizationSuggestion] = field(default_factory=list)
    zones: list[BackingZone] = field(default_factory=list)
    schedule: list[MaterialSummary] = field(default_factory=list)
    totals: MaterialTotals = field(default_factory=MaterialTotals)
    material_waste: float = 0.0

    @property
    def error_count(self) -> int:
        return sum(1 for c in self.clashes if c.severity == ClashSeverity.ERROR)

    @property
    def warning_count(self) -> int:
        return sum(1 for c in self.clashes if c.severity == ClashSeverity.WARNING)

    @property
    def has_errors(self) -> bool:
        """True if any clash has error severity."""
        return self.error_count > 0
