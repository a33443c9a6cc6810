"""Backing optimization: grouping, combining and standard sizing.

Grouping is a greedy single-link pass, not a connected-components
clustering. Each unconsumed placement, in input order, becomes the
representative of a group and pulls in every other unconsumed placement
of the same backing type whose anchor lies strictly within the
threshold of the representative's anchor. Which placements merge therefore
depends on input order, and that dependence is part of the contract.
"""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from ..value_objects import (
    BackingDimensions,
    BackingPlacement,
    BackingZone,
    Location3D,
    OptimizationSuggestion,
    PlacementStatus,
    Savings,
    StandardSize,
    SuggestionType,
)
from .formatting import format_number
from .geometry import distance

__all__ = [
    "STANDARD_SIZES",
    "BackingOptimizer",
    "OptimizationSettings",
]

logger = logging.getLogger(__name__)

# Standard lumber/sheet cut sizes in inches, ascending
STANDARD_SIZES: tuple[float, ...] = (12, 16, 24, 32, 48, 64, 96)


@dataclass(frozen=True)
class OptimizationSettings:
    """Tunable constants of the optimization pass.

    Attributes:
        grouping_threshold: Anchor distance (inches) below which two backings
            of the same type are grouped.
        standard_sizes: Ascending ladder of standard dimensions.
        combine_material_rate: Fraction of a group's area saved by combining.
        combine_labor_minutes: Minutes saved per backing eliminated by combining.
        standardize_labor_minutes: Minutes saved by standardizing one backing.
    """

    grouping_threshold: float = 12.0
    standard_sizes: tuple[float, ...] = STANDARD_SIZES
    combine_material_rate: float = 0.1
    combine_labor_minutes: float = 15.0
    standardize_labor_minutes: float = 10.0

    def __post_init__(self) -> None:
        if self.grouping_threshold < 0:
            raise ValueError("grouping_threshold must be non-negative")
        if list(self.standard_sizes) != sorted(self.standard_sizes):
            raise ValueError("standard_sizes must be in ascending order")


class BackingOptimizer:
    """Finds combinable backings and non-standard sizes.

    Attributes:
        settings: Optimization constants.
    """

    def __init__(self, settings: OptimizationSettings | None = None) -> None:
        self.settings = settings or OptimizationSettings()

    def find_nearby_groups(
        self,
        placements: list[BackingPlacement],
        threshold: float | None = None,
    ) -> list[list[BackingPlacement]]:
        """Group nearby backings of the same type.

        Args:
            placements: Backings in caller order.
            threshold: Grouping distance; defaults to the configured threshold.

        Returns:
            Groups of two or more placements, in the order their
            representatives appear in the input.
        """
        if threshold is None:
            threshold = self.settings.grouping_threshold

        consumed = [False] * len(placements)
        groups: list[list[BackingPlacement]] = []

        for i, representative in enumerate(placements):
            if consumed[i]:
                continue
            consumed[i] = True
            group = [representative]

            for j, other in enumerate(placements):
                if consumed[j]:
                    continue
                if (
                    distance(representative.anchor, other.anchor) < threshold
                    and representative.backing_type == other.backing_type
                ):
                    group.append(other)
                    consumed[j] = True

            if len(group) > 1:
                groups.append(group)

        logger.debug(
            f"Found {len(groups)} group(s) among {len(placements)} placement(s) "
            f"at threshold {threshold}"
        )
        return groups

    def combine(
        self,
        group: list[BackingPlacement],
        placement_id: str | None = None,
    ) -> BackingPlacement:
        """Merge a group into one placement covering every member.

        Args:
            group: Placements to merge; the first member supplies the component,
                backing type and AFF height.
            placement_id: ID for the new placement; a UUID4 if omitted.

        Returns:
            New placement sized to the group's bounding box.

        Raises:
            ValueError: If the group is empty.
        """
        if not group:
            raise ValueError("Cannot combine an empty group of backings")

        first = group[0]
        min_x = min(b.x for b in group)
        min_y = min(b.y for b in group)
        max_x = max(b.x + b.width for b in group)
        max_y = max(b.y + b.height for b in group)
        width = max_x - min_x
        height = max_y - min_y

        return BackingPlacement(
            id=placement_id or str(uuid.uuid4()),
            component_id=first.component_id,
            x=min_x,
            y=min_y,
            width=width,
            height=height,
            backing_type=first.backing_type,
            dimensions=BackingDimensions(
                width=width,
                height=height,
                thickness=max(b.dimensions.thickness for b in group),
            ),
            location=Location3D(x=min_x, y=min_y, z=first.location.z),
            orientation=0.0,
            status=PlacementStatus.USER_MODIFIED,
        )

    def standard_size(self, placement: BackingPlacement) -> StandardSize:
        """Round a placement's footprint up to the standard size ladder.

        A dimension larger than every ladder value is kept as is.
        """
        return StandardSize(
            width=self._round_up(placement.width),
            height=self._round_up(placement.height),
        )

    def material_waste(self, placements: list[BackingPlacement]) -> float:
        """Total square inches lost by cutting every backing at standard size."""
        total = 0.0
        for placement in placements:
            standard = self.standard_size(placement)
            total += standard.area - placement.area
        return total

    def suggest_optimizations(
        self, placements: list[BackingPlacement]
    ) -> list[OptimizationSuggestion]:
        """Build combine and standardize suggestions.

        Combine suggestions come first, one per group, followed by one
        standardize suggestion per placement whose standard size differs from
        its actual size, in input order.
        """
        suggestions: list[OptimizationSuggestion] = []

        for group in self.find_nearby_groups(placements):
            suggestions.append(
                OptimizationSuggestion(
                    type=SuggestionType.COMBINE,
                    items=tuple(b.id for b in group),
                    description=f"Combine {len(group)} backings into single piece",
                    savings=self._combine_savings(group),
                )
            )

        for placement in placements:
            standard = self.standard_size(placement)
            if standard.width != placement.width or standard.height != placement.height:
                suggestions.append(
                    OptimizationSuggestion(
                        type=SuggestionType.STANDARDIZE,
                        items=(placement.id,),
                        description=(
                            f"Standardize to {format_number(standard.width)}\""
                            f"×{format_number(standard.height)}\""
                        ),
                        savings=Savings(
                            material=0.0,
                            labor=self.settings.standardize_labor_minutes,
                        ),
                    )
                )

        return suggestions

    def combine_nearby(self, placements: list[BackingPlacement]) -> list[BackingZone]:
        """Pair every qualifying group with the placement that would replace it."""
        zones: list[BackingZone] = []
        for index, group in enumerate(self.find_nearby_groups(placements)):
            zones.append(
                BackingZone(
                    id=f"zone-{index}",
                    items=tuple(b.id for b in group),
                    component_ids=tuple(b.component_id for b in group),
                    combined=self.combine(group),
                    savings=self._combine_savings(group),
                )
            )
        return zones

    def _combine_savings(self, group: list[BackingPlacement]) -> Savings:
        total_area = sum(b.width * b.height for b in group)
        return Savings(
            material=total_area * self.settings.combine_material_rate,
            labor=(len(group) - 1) * self.settings.combine_labor_minutes,
        )

    def _round_up(self, value: float) -> float:
        for size in self.settings.standard_sizes:
            if size >= value:
                return size
        return value
