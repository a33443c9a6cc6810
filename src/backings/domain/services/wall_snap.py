"""Snapping of backing placements onto wall segments."""

from __future__ import annotations

import logging
from dataclasses import replace

from ..value_objects import BackingPlacement, Location3D, Point, WallSegment
from .geometry import (
    add,
    distance_to_segment,
    normalize,
    perpendicular,
    project_clamped,
    scale,
    subtract,
)

__all__ = ["WallSnapService"]

logger = logging.getLogger(__name__)


class WallSnapService:
    """Aligns backings to detected walls.

    A snapped placement sits on the closest point of the wall span, shifted
    along the wall's left-hand normal by a signed offset, and takes the
    wall's angle as its orientation.
    """

    def snap_point(self, point: Point, wall: WallSegment, offset: float = 0.0) -> Point:
        """Snap a single point onto a wall.

        Args:
            point: Point to snap.
            wall: Target wall.
            offset: Signed perpendicular distance from the wall centerline.

        Returns:
            The projected and clamped point, offset along the wall normal.
            For a zero-length wall this is the wall's start point.
        """
        direction = normalize(subtract(wall.end, wall.start))
        on_wall = project_clamped(point, wall.start, wall.end)
        return add(on_wall, scale(perpendicular(direction), offset))

    def snap_to_wall(
        self,
        placement: BackingPlacement,
        wall: WallSegment,
        offset: float = 0.0,
    ) -> BackingPlacement:
        """Return a copy of ``placement`` snapped onto ``wall``.

        Both the footprint anchor (x, y) and ``location.x``/``location.y``
        move to the snapped point. ``location.z`` is kept. The input
        placement is left untouched.

        Args:
            placement: Placement to snap.
            wall: Target wall.
            offset: Signed perpendicular distance from the wall centerline.

        Returns:
            New placement aligned to the wall.
        """
        snapped = self.snap_point(placement.anchor, wall, offset)
        logger.debug(
            f"Snapped {placement.id} to wall {wall.id}: "
            f"({placement.x}, {placement.y}) -> ({snapped.x}, {snapped.y})"
        )
        return replace(
            placement,
            x=snapped.x,
            y=snapped.y,
            location=Location3D(x=snapped.x, y=snapped.y, z=placement.location.z),
            orientation=wall.angle,
        )

    def find_nearest_wall(
        self, point: Point, walls: list[WallSegment]
    ) -> WallSegment | None:
        """Find the wall closest to a point.

        Ties go to the wall that appears first.

        Args:
            point: Reference point.
            walls: Candidate walls.

        Returns:
            The nearest wall, or None if ``walls`` is empty.
        """
        nearest: WallSegment | None = None
        min_distance = 0.0
        for wall in walls:
            d = distance_to_segment(point, wall.start, wall.end)
            if nearest is None or d < min_distance:
                nearest = wall
                min_distance = d
        return nearest

    def snap_to_nearest_wall(
        self,
        placement: BackingPlacement,
        walls: list[WallSegment],
        offset: float = 0.0,
    ) -> BackingPlacement:
        """Snap a placement onto whichever wall is closest to its anchor.

        Returns the placement unchanged when there are no walls.
        """
        wall = self.find_nearest_wall(placement.anchor, walls)
        if wall is None:
            return placement
        return self.snap_to_wall(placement, wall, offset)

    def snap_all(
        self,
        placements: list[BackingPlacement],
        walls: list[WallSegment],
        offset: float = 0.0,
    ) -> list[BackingPlacement]:
        """Snap every placement to its nearest wall, preserving order."""
        return [self.snap_to_nearest_wall(p, walls, offset) for p in placements]
