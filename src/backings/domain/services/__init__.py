"""Domain services for backing placement.

This package provides the backing-placement engine:
- Geometry kernel (vector primitives, clamped projection)
- Wall snapping
- Clash detection against other backings and door openings
- Grouping, combining and standard sizing of backings
- Material schedule aggregation
- Material take-off with board feet, waste and cost
"""

from . import geometry
from .clash import ClashDetectionService, Rect, rects_overlap
from .formatting import format_number, to_fixed
from .material_schedule import (
    DISPLAY_NAMES,
    MaterialScheduleService,
    display_name,
    is_lumber,
    is_sheet,
)
from .optimization import STANDARD_SIZES, BackingOptimizer, OptimizationSettings
from .takeoff import (
    MATERIAL_PROPERTIES,
    MaterialProperties,
    MaterialTakeoff,
    MaterialTakeoffService,
    material_properties,
)
from .wall_snap import WallSnapService

__all__ = [
    "DISPLAY_NAMES",
    "MATERIAL_PROPERTIES",
    "STANDARD_SIZES",
    "BackingOptimizer",
    "ClashDetectionService",
    "MaterialProperties",
    "MaterialScheduleService",
    "MaterialTakeoff",
    "MaterialTakeoffService",
    "OptimizationSettings",
    "Rect",
    "WallSnapService",
    "display_name",
    "format_number",
    "geometry",
    "is_lumber",
    "is_sheet",
    "material_properties",
    "rects_overlap",
    "to_fixed",
]
