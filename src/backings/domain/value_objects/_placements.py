"""Backing placement value objects."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ._geometry import Point


class BackingType(str, Enum):
    """Backing materials that can be placed inside a wall."""

    LUMBER_2X4 = "2x4"
    LUMBER_2X6 = "2x6"
    LUMBER_2X8 = "2x8"
    LUMBER_2X10 = "2x10"
    PLYWOOD_3_4 = "3/4_plywood"
    STEEL_PLATE = "steel_plate"
    BLOCKING = "blocking"


class PlacementStatus(str, Enum):
    """Review state of a placement."""

    AI_GENERATED = "ai_generated"
    USER_MODIFIED = "user_modified"
    APPROVED = "approved"


# Material families decide whether a piece is tallied by length or by area
LUMBER_TYPES: frozenset[BackingType] = frozenset(
    {
        BackingType.LUMBER_2X4,
        BackingType.LUMBER_2X6,
        BackingType.LUMBER_2X8,
        BackingType.LUMBER_2X10,
        BackingType.BLOCKING,
    }
)
SHEET_TYPES: frozenset[BackingType] = frozenset(
    {BackingType.PLYWOOD_3_4, BackingType.STEEL_PLATE}
)


@dataclass(frozen=True)
class BackingDimensions:
    """Physical size of a backing piece in inches."""

    width: float
    height: float
    thickness: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0 or self.thickness <= 0:
            raise ValueError("All backing dimensions must be positive")

    @property
    def area(self) -> float:
        """Face area (width x height) in square inches."""
        return self.width * self.height


@dataclass(frozen=True)
class Location3D:
    """Drawing position of a backing; z is the height above finished floor."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class BackingPlacement:
    """A backing placed on a drawing.

    The placement rectangle (x, y, width, height) is the footprint used for
    geometric checks. ``dimensions`` carries the physical piece size and
    ``location.z`` its mounting height above finished floor (AFF).

    Placements are owned by the caller. Engine operations never modify a
    placement; they return a new one built with ``dataclasses.replace``.

    Attributes:
        id: Unique placement identifier.
        component_id: Identifier of the mounted component the backing supports.
        x: Left edge of the footprint.
        y: Top edge of the footprint.
        width: Footprint width in inches.
        height: Footprint height in inches.
        backing_type: Backing material.
        dimensions: Physical piece dimensions.
        location: Drawing position plus AFF height.
        orientation: Rotation in degrees.
        status: Review state.
    """

    id: str
    component_id: str
    x: float
    y: float
    width: float
    height: float
    backing_type: BackingType
    dimensions: BackingDimensions
    location: Location3D
    orientation: float = 0.0
    status: PlacementStatus = PlacementStatus.AI_GENERATED

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Placement width and height must be positive")

    @property
    def anchor(self) -> Point:
        """Anchor point (x, y) used for snapping and grouping."""
        return Point(self.x, self.y)

    @property
    def area(self) -> float:
        """Footprint area in square inches."""
        return self.width * self.height

    @property
    def right(self) -> float:
        """Right edge of the footprint."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Bottom edge of the footprint."""
        return self.y + self.height
