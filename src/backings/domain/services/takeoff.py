"""Material take-off with board feet, waste allowance and cost estimate."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..value_objects import BackingType

if TYPE_CHECKING:
    from ..value_objects import BackingPlacement

__all__ = [
    "BOARD_FOOT_TYPES",
    "MATERIAL_PROPERTIES",
    "MaterialProperties",
    "MaterialTakeoff",
    "MaterialTakeoffService",
    "material_properties",
]


@dataclass(frozen=True)
class MaterialProperties:
    """Purchasing data for one backing material.

    Attributes:
        nominal_size: Size as ordered, e.g. ``2x6``.
        actual_size: Dressed size as delivered.
        cost_per_linear_foot: Unit price in dollars.
    """

    nominal_size: str
    actual_size: str
    cost_per_linear_foot: float

    def __post_init__(self) -> None:
        if self.cost_per_linear_foot < 0:
            raise ValueError("Cost per linear foot must be non-negative")


MATERIAL_PROPERTIES: dict[BackingType, MaterialProperties] = {
    BackingType.LUMBER_2X4: MaterialProperties("2x4", '1.5" × 3.5"', 0.85),
    BackingType.LUMBER_2X6: MaterialProperties("2x6", '1.5" × 5.5"', 1.25),
    BackingType.LUMBER_2X8: MaterialProperties("2x8", '1.5" × 7.25"', 1.65),
    BackingType.LUMBER_2X10: MaterialProperties("2x10", '1.5" × 9.25"', 2.15),
    BackingType.PLYWOOD_3_4: MaterialProperties('3/4" PLY', '0.75" × 48" × 96"', 2.50),
    BackingType.STEEL_PLATE: MaterialProperties("STEEL", "Various", 12.00),
    BackingType.BLOCKING: MaterialProperties("BLOCKING", "Various", 1.00),
}

# Dimensional lumber is also tallied in board feet.
BOARD_FOOT_TYPES: frozenset[BackingType] = frozenset(
    {
        BackingType.LUMBER_2X4,
        BackingType.LUMBER_2X6,
        BackingType.LUMBER_2X8,
        BackingType.LUMBER_2X10,
    }
)


def material_properties(backing_type: BackingType | str) -> MaterialProperties:
    """Purchasing data for a backing type; unknown types price as 2x4."""
    try:
        return MATERIAL_PROPERTIES[BackingType(backing_type)]
    except (KeyError, ValueError):
        return MATERIAL_PROPERTIES[BackingType.LUMBER_2X4]


@dataclass(frozen=True)
class MaterialTakeoff:
    """Take-off line for every piece of one backing type."""

    type: BackingType
    properties: MaterialProperties
    pieces: int
    linear_feet: float
    board_feet: float
    waste_factor: float

    @property
    def waste_linear_feet(self) -> float:
        return self.linear_feet * self.waste_factor

    @property
    def total_linear_feet(self) -> float:
        return self.linear_feet * (1 + self.waste_factor)

    @property
    def total_board_feet(self) -> float:
        return self.board_feet * (1 + self.waste_factor)

    @property
    def estimated_cost(self) -> float:
        """Cost of the linear feet with waste at the unit price."""
        return self.total_linear_feet * self.properties.cost_per_linear_foot


@dataclass
class _TakeoffTally:
    pieces: int = 0
    linear_feet: float = 0.0
    board_feet: float = 0.0


class MaterialTakeoffService:
    """Tallies placements per backing type for ordering.

    Every piece adds its width / 12 in linear feet. Dimensional lumber also
    adds thickness x height x width / 1728 in board feet.
    """

    def __init__(self, waste_factor: float = 0.10) -> None:
        """Initialize with waste factor (default 10%)."""
        if waste_factor < 0:
            raise ValueError("Waste factor must be non-negative")
        self.waste_factor = waste_factor

    def calculate(self, placements: list[BackingPlacement]) -> list[MaterialTakeoff]:
        """Build one take-off line per backing type.

        Returns:
            Lines in order of the first placement of each type.
        """
        tallies: dict[BackingType, _TakeoffTally] = {}
        for placement in placements:
            dims = placement.dimensions
            tally = tallies.setdefault(placement.backing_type, _TakeoffTally())
            tally.pieces += 1
            tally.linear_feet += dims.width / 12
            if placement.backing_type in BOARD_FOOT_TYPES:
                tally.board_feet += dims.thickness * dims.height * dims.width / 1728

        return [
            MaterialTakeoff(
                type=backing_type,
                properties=material_properties(backing_type),
                pieces=tally.pieces,
                linear_feet=tally.linear_feet,
                board_feet=tally.board_feet,
                waste_factor=self.waste_factor,
            )
            for backing_type, tally in tallies.items()
        ]
