"""Application commands (use cases) for backing analysis."""

from __future__ import annotations

import logging

from backings.application.config import (
    LayoutDocument,
    config_to_doors,
    config_to_optimization_settings,
    config_to_placements,
    config_to_severity_policy,
    config_to_walls,
)
from backings.domain.services import (
    BackingOptimizer,
    ClashDetectionService,
    MaterialScheduleService,
    WallSnapService,
)
from backings.domain.value_objects import BackingPlacement, DoorOpening, WallSegment

from .dtos import AnalysisOutput

logger = logging.getLogger(__name__)


class AnalyzeLayoutCommand:
    """Command to run the full backing analysis over a layout.

    Pipeline: optional wall snapping, clash detection, optimization
    suggestions and combinable zones, then the material schedule.
    """

    def __init__(
        self,
        snap_service: WallSnapService | None = None,
        clash_service: ClashDetectionService | None = None,
        optimizer: BackingOptimizer | None = None,
        schedule_service: MaterialScheduleService | None = None,
    ) -> None:
        self.snap_service = snap_service or WallSnapService()
        self.clash_service = clash_service or ClashDetectionService()
        self.optimizer = optimizer or BackingOptimizer()
        self.schedule_service = schedule_service or MaterialScheduleService()

    @classmethod
    def from_document(cls, document: LayoutDocument) -> "AnalyzeLayoutCommand":
        """Create a command configured from a layout document's settings."""
        return cls(
            clash_service=ClashDetectionService(
                config_to_severity_policy(document.settings)
            ),
            optimizer=BackingOptimizer(
                config_to_optimization_settings(document.settings)
            ),
        )

    def execute(
        self,
        placements: list[BackingPlacement],
        walls: list[WallSegment] | None = None,
        doors: list[DoorOpening] | None = None,
        snap: bool = False,
        snap_offset: float = 0.0,
    ) -> AnalysisOutput:
        """Execute the analysis.

        Args:
            placements: Backings in caller order.
            walls: Detected walls, used only when snapping.
            doors: Detected doors for swing and clearance checks.
            snap: Snap every placement to its nearest wall first.
            snap_offset: Perpendicular offset used when snapping.

        Returns:
            AnalysisOutput with clashes, suggestions, zones and schedule.
        """
        walls = walls or []
        doors = doors or []

        if snap:
            placements = self.snap_service.snap_all(placements, walls, snap_offset)
            logger.debug(f"Snapped {len(placements)} placement(s) to {len(walls)} wall(s)")

        clashes = self.clash_service.detect_clashes(placements, doors)
        suggestions = self.optimizer.suggest_optimizations(placements)
        zones = self.optimizer.combine_nearby(placements)
        schedule = self.schedule_service.summarize(placements)
        totals = self.schedule_service.totals(schedule)
        waste = self.optimizer.material_waste(placements)

        logger.info(
            f"Analyzed {len(placements)} placement(s): {len(clashes)} clash(es), "
            f"{len(suggestions)} suggestion(s), {len(schedule)} schedule row(s)"
        )

        return AnalysisOutput(
            placements=list(placements),
            clashes=clashes,
            suggestions=suggestions,
            zones=zones,
            schedule=schedule,
            totals=totals,
            material_waste=waste,
        )

    def execute_document(
        self, document: LayoutDocument, snap: bool = False
    ) -> AnalysisOutput:
        """Execute the analysis on a validated layout document."""
        return self.execute(
            config_to_placements(document),
            walls=config_to_walls(document),
            doors=config_to_doors(document),
            snap=snap,
            snap_offset=document.settings.snap_offset,
        )
