"""Derived analysis results: clashes, suggestions and material summaries.

None of these are persisted by the engine. They are built from a set of
placements, handed to the caller and discarded.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from ._placements import BackingPlacement, BackingType


class ClashType(str, Enum):
    """Kinds of spatial conflict the clash detector reports."""

    BACKING_OVERLAP = "backing_overlap"
    DOOR_SWING = "door_swing"
    DOOR_CLEARANCE = "door_clearance"


class ClashSeverity(str, Enum):
    """How serious a clash is for review."""

    ERROR = "error"
    WARNING = "warning"


class SuggestionType(str, Enum):
    """Kinds of optimization suggestion."""

    COMBINE = "combine"
    STANDARDIZE = "standardize"


@dataclass(frozen=True)
class Clash:
    """A detected conflict between design elements.

    Attributes:
        id: Clash identifier, stable for a given input order.
        type: Kind of conflict.
        severity: Error or warning.
        items: IDs of the colliding entities.
        resolution: Optional hint for resolving the conflict.
    """

    id: str
    type: ClashType
    severity: ClashSeverity
    items: tuple[str, ...]
    resolution: str | None = None


@dataclass(frozen=True)
class ClashSeverityPolicy:
    """Severity assigned to each clash type when clash records are built."""

    backing_overlap: ClashSeverity = ClashSeverity.ERROR
    door_swing: ClashSeverity = ClashSeverity.ERROR
    door_clearance: ClashSeverity = ClashSeverity.WARNING

    def severity_for(self, clash_type: ClashType) -> ClashSeverity:
        """Look up the severity for a clash type."""
        return getattr(self, clash_type.value)


@dataclass(frozen=True)
class Savings:
    """Estimated savings of a suggestion.

    Attributes:
        material: Material saved in square inches.
        labor: Labor saved in minutes.
    """

    material: float = 0.0
    labor: float = 0.0


@dataclass(frozen=True)
class OptimizationSuggestion:
    """Advisory improvement. Applying it is a separate caller action."""

    type: SuggestionType
    items: tuple[str, ...]
    description: str
    savings: Savings


@dataclass(frozen=True)
class StandardSize:
    """Width and height rounded up to the standard size ladder."""

    width: float
    height: float

    @property
    def area(self) -> float:
        return self.width * self.height


@dataclass(frozen=True)
class BackingZone:
    """A group of nearby backings together with the piece that replaces them.

    Attributes:
        id: Zone identifier (``zone-<n>`` in group order).
        items: Placement IDs in the group.
        component_ids: Component IDs the group supports.
        combined: Single placement bounding every member.
        savings: Estimated savings of combining the group.
    """

    id: str
    items: tuple[str, ...]
    component_ids: tuple[str, ...]
    combined: BackingPlacement
    savings: Savings


@dataclass(frozen=True)
class MaterialSummary:
    """Aggregate of placements sharing a backing type and exact size.

    Attributes:
        type: Backing material.
        size: Size key such as ``6"x2"x1.5"``.
        count: Number of pieces.
        total_length: Linear feet, for lumber-family types only.
        total_area: Square feet, for sheet-family types only.
        locations: Human-readable location of each piece.
    """

    type: BackingType
    size: str
    count: int
    total_length: float | None = None
    total_area: float | None = None
    locations: tuple[str, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class MaterialTotals:
    """Grand totals across a material schedule."""

    total_pieces: int = 0
    total_lumber_feet: float = 0.0
    total_sheet_area: float = 0.0
