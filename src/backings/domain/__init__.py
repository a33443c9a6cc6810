"""Domain layer - backing placement geometry engine."""

from .services import (
    BackingOptimizer,
    ClashDetectionService,
    MaterialScheduleService,
    OptimizationSettings,
    WallSnapService,
)
from .value_objects import (
    BackingDimensions,
    BackingPlacement,
    BackingType,
    BackingZone,
    Clash,
    ClashSeverity,
    ClashSeverityPolicy,
    ClashType,
    DoorOpening,
    Location3D,
    MaterialSummary,
    MaterialTotals,
    OptimizationSuggestion,
    PlacementStatus,
    Point,
    Savings,
    StandardSize,
    SuggestionType,
    SwingDirection,
    WallSegment,
    WallType,
)

__all__ = [
    "BackingDimensions",
    "BackingOptimizer",
    "BackingPlacement",
    "BackingType",
    "BackingZone",
    "Clash",
    "ClashDetectionService",
    "ClashSeverity",
    "ClashSeverityPolicy",
    "ClashType",
    "DoorOpening",
    "Location3D",
    "MaterialScheduleService",
    "MaterialSummary",
    "MaterialTotals",
    "OptimizationSettings",
    "OptimizationSuggestion",
    "PlacementStatus",
    "Point",
    "Savings",
    "StandardSize",
    "SuggestionType",
    "SwingDirection",
    "WallSegment",
    "WallSnapService",
    "WallType",
]
