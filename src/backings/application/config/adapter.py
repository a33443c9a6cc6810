"""Conversion of layout documents into domain objects."""

from __future__ import annotations

from backings.application.config.schema import (
    DoorConfig,
    EngineSettingsConfig,
    LayoutDocument,
    PlacementConfig,
    WallConfig,
)
from backings.domain.services import OptimizationSettings
from backings.domain.value_objects import (
    BackingDimensions,
    BackingPlacement,
    ClashSeverityPolicy,
    DoorOpening,
    Location3D,
    Point,
    WallSegment,
)


def placement_from_config(config: PlacementConfig) -> BackingPlacement:
    """Convert one placement model into a BackingPlacement."""
    return BackingPlacement(
        id=config.id,
        component_id=config.component_id,
        x=config.x,
        y=config.y,
        width=config.width,
        height=config.height,
        backing_type=config.backing_type,
        dimensions=BackingDimensions(
            width=config.dimensions.width,
            height=config.dimensions.height,
            thickness=config.dimensions.thickness,
        ),
        location=Location3D(
            x=config.location.x,
            y=config.location.y,
            z=config.location.z,
        ),
        orientation=config.orientation,
        status=config.status,
    )


def wall_from_config(config: WallConfig) -> WallSegment:
    return WallSegment(
        id=config.id,
        start=Point(config.start.x, config.start.y),
        end=Point(config.end.x, config.end.y),
        thickness=config.thickness,
        type=config.type,
    )


def door_from_config(config: DoorConfig) -> DoorOpening:
    return DoorOpening(
        id=config.id,
        position=Point(config.position.x, config.position.y),
        width=config.width,
        height=config.height,
        clearance_required=config.clearance_required,
        swing_direction=config.swing_direction,
    )


def config_to_placements(document: LayoutDocument) -> list[BackingPlacement]:
    """Convert document placements, preserving their order."""
    return [placement_from_config(p) for p in document.placements]


def config_to_walls(document: LayoutDocument) -> list[WallSegment]:
    return [wall_from_config(w) for w in document.walls]


def config_to_doors(document: LayoutDocument) -> list[DoorOpening]:
    return [door_from_config(d) for d in document.doors]


def config_to_optimization_settings(
    settings: EngineSettingsConfig,
) -> OptimizationSettings:
    """Map engine settings onto the optimizer's settings."""
    return OptimizationSettings(
        grouping_threshold=settings.grouping_threshold,
        standard_sizes=tuple(settings.standard_sizes),
        combine_material_rate=settings.combine_material_rate,
        combine_labor_minutes=settings.combine_labor_minutes,
        standardize_labor_minutes=settings.standardize_labor_minutes,
    )


def config_to_severity_policy(settings: EngineSettingsConfig) -> ClashSeverityPolicy:
    return ClashSeverityPolicy(
        backing_overlap=settings.severities.backing_overlap,
        door_swing=settings.severities.door_swing,
        door_clearance=settings.severities.door_clearance,
    )
