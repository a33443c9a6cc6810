"""Value objects for the backing domain.

This module provides immutable data types used throughout the backing
engine. All classes are re-exported from sub-modules for convenience.
"""

from __future__ import annotations

# Plane geometry
from ._geometry import (
    DoorOpening,
    Point,
    SwingDirection,
    WallSegment,
    WallType,
)

# Placements and material families
from ._placements import (
    LUMBER_TYPES,
    SHEET_TYPES,
    BackingDimensions,
    BackingPlacement,
    BackingType,
    Location3D,
    PlacementStatus,
)

# Derived analysis results
from ._analysis import (
    BackingZone,
    Clash,
    ClashSeverity,
    ClashSeverityPolicy,
    ClashType,
    MaterialSummary,
    MaterialTotals,
    OptimizationSuggestion,
    Savings,
    StandardSize,
    SuggestionType,
)

__all__ = [
    # Geometry
    "DoorOpening",
    "Point",
    "SwingDirection",
    "WallSegment",
    "WallType",
    # Placements
    "LUMBER_TYPES",
    "SHEET_TYPES",
    "BackingDimensions",
    "BackingPlacement",
    "BackingType",
    "Location3D",
    "PlacementStatus",
    # Analysis
    "BackingZone",
    "Clash",
    "ClashSeverity",
    "ClashSeverityPolicy",
    "ClashType",
    "MaterialSummary",
    "MaterialTotals",
    "OptimizationSuggestion",
    "Savings",
    "StandardSize",
    "SuggestionType",
]
