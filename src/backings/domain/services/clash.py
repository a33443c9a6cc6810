"""Clash detection between backings and door openings.

This module provides the conflict predicates used when reviewing a layout:
- Overlap between two backing footprints
- Backings inside a door's swing arc
- Backings intruding on a door's required clearance zone

The predicates are pure and independent. ``ClashDetectionService.detect_clashes``
runs them over a whole layout and materializes ``Clash`` records.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from ..value_objects import (
    BackingPlacement,
    Clash,
    ClashSeverityPolicy,
    ClashType,
    DoorOpening,
)
from .geometry import distance

__all__ = [
    "ClashDetectionService",
    "Rect",
    "rects_overlap",
]

logger = logging.getLogger(__name__)

OVERLAP_RESOLUTION = "Resize or relocate one of the backings"
DOOR_SWING_RESOLUTION = "Move the backing outside the door swing"
DOOR_CLEARANCE_RESOLUTION = "Move the backing out of the door clearance zone"


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle given by its top-left corner and extents."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def of(cls, placement: BackingPlacement) -> "Rect":
        return cls(placement.x, placement.y, placement.width, placement.height)


def rects_overlap(a: Rect, b: Rect) -> bool:
    """Check whether two rectangles intersect.

    Rectangles overlap unless one ends strictly before the other starts on
    either axis, so rectangles that only touch along an edge do overlap.
    """
    return not (
        a.x + a.width < b.x
        or b.x + b.width < a.x
        or a.y + a.height < b.y
        or b.y + b.height < a.y
    )


class ClashDetectionService:
    """Detects conflicts between backings and between backings and doors.

    Attributes:
        severity_policy: Severity assigned to each clash type.
    """

    def __init__(self, severity_policy: ClashSeverityPolicy | None = None) -> None:
        """Initialize the clash detector.

        Args:
            severity_policy: Optional severity mapping. Defaults to errors for
                overlaps and swing conflicts, warnings for clearance conflicts.
        """
        self.severity_policy = severity_policy or ClashSeverityPolicy()

    def overlaps(self, b1: BackingPlacement, b2: BackingPlacement) -> bool:
        """Check if two backing footprints overlap. Symmetric in its arguments."""
        return rects_overlap(Rect.of(b1), Rect.of(b2))

    def door_swing_conflict(self, door: DoorOpening, backing: BackingPlacement) -> bool:
        """Check if a backing lies within a door's swing.

        The backing anchor must be closer to the door position than the door
        width, and within 90 degrees of the door's direction. The direction
        is the absolute angle of the door position from the drawing origin,
        not an angle in the door's own frame.

        Args:
            door: The door opening.
            backing: The backing to test.

        Returns:
            True if the backing is inside the swing arc.
        """
        swing_radius = door.width
        if distance(door.position, backing.anchor) >= swing_radius:
            return False
        return self._in_swing_arc(door, backing)

    def clearance_conflict(self, door: DoorOpening, backing: BackingPlacement) -> bool:
        """Check if a backing intrudes on a door's clearance zone.

        The zone is the door's box grown by ``clearance_required`` on every side.
        """
        c = door.clearance_required
        zone = Rect(
            x=door.position.x - c,
            y=door.position.y - c,
            width=door.width + c * 2,
            height=door.height + c * 2,
        )
        return rects_overlap(Rect.of(backing), zone)

    def detect_clashes(
        self,
        placements: list[BackingPlacement],
        doors: list[DoorOpening] | None = None,
    ) -> list[Clash]:
        """Run every check over a layout.

        Overlaps are reported for each pair ``i < j`` in input order, then
        door conflicts for each door in order against each placement in order.

        Args:
            placements: Backings to check.
            doors: Optional door openings to check against.

        Returns:
            List of Clash records. Empty if nothing conflicts.
        """
        clashes: list[Clash] = []

        for i in range(len(placements)):
            for j in range(i + 1, len(placements)):
                if self.overlaps(placements[i], placements[j]):
                    clashes.append(
                        self._make_clash(
                            f"clash-{i}-{j}",
                            ClashType.BACKING_OVERLAP,
                            (placements[i].id, placements[j].id),
                            OVERLAP_RESOLUTION,
                        )
                    )

        for door in doors or []:
            for backing in placements:
                if self.door_swing_conflict(door, backing):
                    clashes.append(
                        self._make_clash(
                            f"door-swing-{door.id}-{backing.id}",
                            ClashType.DOOR_SWING,
                            (door.id, backing.id),
                            DOOR_SWING_RESOLUTION,
                        )
                    )
                if self.clearance_conflict(door, backing):
                    clashes.append(
                        self._make_clash(
                            f"door-clearance-{door.id}-{backing.id}",
                            ClashType.DOOR_CLEARANCE,
                            (door.id, backing.id),
                            DOOR_CLEARANCE_RESOLUTION,
                        )
                    )

        logger.debug(
            f"Detected {len(clashes)} clash(es) across {len(placements)} "
            f"placement(s) and {len(doors or [])} door(s)"
        )
        return clashes

    def _make_clash(
        self,
        clash_id: str,
        clash_type: ClashType,
        items: tuple[str, ...],
        resolution: str,
    ) -> Clash:
        return Clash(
            id=clash_id,
            type=clash_type,
            severity=self.severity_policy.severity_for(clash_type),
            items=items,
            resolution=resolution,
        )

    @staticmethod
    def _in_swing_arc(door: DoorOpening, backing: BackingPlacement) -> bool:
        # Absolute angles; does not model doors rotated off the drawing axes
        door_angle = math.atan2(door.position.y, door.position.x)
        backing_angle = math.atan2(
            backing.y - door.position.y, backing.x - door.position.x
        )
        return abs(door_angle - backing_angle) <= math.pi / 2
