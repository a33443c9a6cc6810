"""Plane geometry value objects: points, walls and door openings."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum


class WallType(str, Enum):
    """Classification of a detected wall segment."""

    INTERIOR = "interior"
    EXTERIOR = "exterior"
    PARTITION = "partition"


class SwingDirection(str, Enum):
    """Direction a door leaf swings."""

    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True)
class Point:
    """2D point in drawing coordinates (inches).

    Drawing coordinates are unconstrained, so negative values are valid.
    """

    x: float
    y: float


@dataclass(frozen=True)
class WallSegment:
    """A straight wall between two points.

    Attributes:
        id: Identifier assigned by the upstream detection layer.
        start: Wall start point.
        end: Wall end point.
        thickness: Wall thickness in inches.
        type: Interior, exterior or partition wall.
    """

    id: str
    start: Point
    end: Point
    thickness: float = 0.0
    type: WallType = WallType.INTERIOR

    def __post_init__(self) -> None:
        if self.thickness < 0:
            raise ValueError("Wall thickness must be non-negative")

    @property
    def length(self) -> float:
        """Distance from start to end in inches."""
        return math.hypot(self.end.x - self.start.x, self.end.y - self.start.y)

    @property
    def angle(self) -> float:
        """Direction of the wall in degrees, measured from the +x axis."""
        return math.degrees(
            math.atan2(self.end.y - self.start.y, self.end.x - self.start.x)
        )


@dataclass(frozen=True)
class DoorOpening:
    """A door opening with the clear zone it requires.

    Attributes:
        id: Identifier assigned by the upstream detection layer.
        position: Reference corner of the opening.
        width: Opening width in inches, also used as the swing radius.
        height: Opening extent along the y axis in inches.
        clearance_required: Clear distance required on every side.
        swing_direction: Which way the leaf swings, if known.
    """

    id: str
    position: Point
    width: float
    height: float
    clearance_required: float = 0.0
    swing_direction: SwingDirection | None = None

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Door dimensions must be positive")
        if self.clearance_required < 0:
            raise ValueError("clearance_required must be non-negative")
