"""Material take-off for backing placements."""

from __future__ import annotations

from dataclasses import dataclass, field

from ..value_objects import (
    LUMBER_TYPES,
    SHEET_TYPES,
    BackingPlacement,
    BackingType,
    MaterialSummary,
    MaterialTotals,
)
from .formatting import format_number, to_fixed

__all__ = [
    "DISPLAY_NAMES",
    "MaterialScheduleService",
    "display_name",
    "is_lumber",
    "is_sheet",
]

DISPLAY_NAMES: dict[BackingType, str] = {
    BackingType.LUMBER_2X4: "2x4 Lumber",
    BackingType.LUMBER_2X6: "2x6 Lumber",
    BackingType.LUMBER_2X8: "2x8 Lumber",
    BackingType.LUMBER_2X10: "2x10 Lumber",
    BackingType.PLYWOOD_3_4: '3/4" Plywood',
    BackingType.STEEL_PLATE: "Steel Plate",
    BackingType.BLOCKING: "Blocking",
}


def display_name(backing_type: BackingType | str) -> str:
    """Human-readable material name, falling back to the raw type value."""
    try:
        return DISPLAY_NAMES[BackingType(backing_type)]
    except ValueError:
        return str(backing_type)


def is_lumber(backing_type: BackingType) -> bool:
    """Lumber is tallied in linear feet."""
    return backing_type in LUMBER_TYPES


def is_sheet(backing_type: BackingType) -> bool:
    """Sheet goods are tallied in square feet."""
    return backing_type in SHEET_TYPES


@dataclass
class _SummaryAccumulator:
    type: BackingType
    size: str
    count: int = 0
    total_length: float | None = None
    total_area: float | None = None
    locations: list[str] = field(default_factory=list)

    def freeze(self) -> MaterialSummary:
        return MaterialSummary(
            type=self.type,
            size=self.size,
            count=self.count,
            total_length=self.total_length,
            total_area=self.total_area,
            locations=tuple(self.locations),
        )


class MaterialScheduleService:
    """Aggregates placements into a material schedule.

    Placements sharing a backing type and exact dimension triple collapse
    into one MaterialSummary row. Lumber rows accumulate linear feet
    (width / 12 per piece); sheet rows accumulate square feet
    (width x height / 144 per piece).
    """

    def summarize(self, placements: list[BackingPlacement]) -> list[MaterialSummary]:
        """Build the schedule rows for a set of placements.

        Args:
            placements: Placements to aggregate.

        Returns:
            Rows sorted by backing type value, then by size string.
        """
        rows: dict[tuple[BackingType, str], _SummaryAccumulator] = {}

        for placement in placements:
            dims = placement.dimensions
            size = self.size_key(placement)
            key = (placement.backing_type, size)

            if key not in rows:
                rows[key] = _SummaryAccumulator(type=placement.backing_type, size=size)
            row = rows[key]

            row.count += 1
            row.locations.append(self.location_label(placement))

            if is_lumber(placement.backing_type):
                row.total_length = (row.total_length or 0.0) + dims.width / 12
            elif is_sheet(placement.backing_type):
                row.total_area = (row.total_area or 0.0) + (
                    dims.width * dims.height
                ) / 144

        return sorted(
            (row.freeze() for row in rows.values()),
            key=lambda s: (s.type.value, s.size),
        )

    def totals(self, summaries: list[MaterialSummary]) -> MaterialTotals:
        """Reduce schedule rows to grand totals."""
        return MaterialTotals(
            total_pieces=sum(s.count for s in summaries),
            total_lumber_feet=sum(
                s.total_length for s in summaries if s.total_length is not None
            ),
            total_sheet_area=sum(
                s.total_area for s in summaries if s.total_area is not None
            ),
        )

    @staticmethod
    def size_key(placement: BackingPlacement) -> str:
        """Size label such as ``6"x2"x1.5"``."""
        dims = placement.dimensions
        return (
            f'{format_number(dims.width)}"x'
            f'{format_number(dims.height)}"x'
            f'{format_number(dims.thickness)}"'
        )

    @staticmethod
    def location_label(placement: BackingPlacement) -> str:
        """Location label such as ``(12.0, 4.5) @ 36" AFF``."""
        loc = placement.location
        x, y = to_fixed(loc.x, 1), to_fixed(loc.y, 1)
        return f'({x}, {y}) @ {format_number(loc.z)}" AFF'
