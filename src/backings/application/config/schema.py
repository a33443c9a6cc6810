"""Layout document schema.

A layout document is the JSON input of the CLI and REST API: the backings
placed on a drawing, the walls and doors detected on it, and optional
engine settings. Unknown keys are rejected everywhere.
"""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from backings.domain.value_objects import (
    BackingType,
    ClashSeverity,
    PlacementStatus,
    SwingDirection,
    WallType,
)

# Supported schema versions for layout documents
# Version 1.0: Placements, walls, doors and engine settings
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})


class PointConfig(BaseModel):
    """A point in drawing coordinates (inches)."""

    model_config = ConfigDict(extra="forbid")

    x: float
    y: float


class DimensionsConfig(BaseModel):
    """Physical backing dimensions in inches."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(..., gt=0, description="Piece width in inches")
    height: float = Field(..., gt=0, description="Piece height in inches")
    thickness: float = Field(..., gt=0, description="Piece thickness in inches")


class LocationConfig(BaseModel):
    """Drawing position plus height above finished floor."""

    model_config = ConfigDict(extra="forbid")

    x: float
    y: float
    z: float = Field(default=0.0, description="Height above finished floor (AFF)")


class PlacementConfig(BaseModel):
    """Configuration for one backing placement.

    Attributes:
        id: Unique placement identifier
        component_id: Component the backing supports
        x: Footprint left edge
        y: Footprint top edge
        width: Footprint width
        height: Footprint height
        backing_type: Backing material
        dimensions: Physical piece dimensions
        location: Drawing position and AFF height
        orientation: Rotation in degrees
        status: Review state
    """

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    component_id: str = ""
    x: float
    y: float
    width: float = Field(..., gt=0, description="Footprint width in inches")
    height: float = Field(..., gt=0, description="Footprint height in inches")
    backing_type: BackingType
    dimensions: DimensionsConfig
    location: LocationConfig
    orientation: float = 0.0
    status: PlacementStatus = PlacementStatus.AI_GENERATED


class WallConfig(BaseModel):
    """Configuration for a detected wall segment."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    start: PointConfig
    end: PointConfig
    thickness: float = Field(default=0.0, ge=0, description="Wall thickness in inches")
    type: WallType = WallType.INTERIOR


class DoorConfig(BaseModel):
    """Configuration for a detected door opening."""

    model_config = ConfigDict(extra="forbid")

    id: str = Field(..., min_length=1)
    position: PointConfig
    width: float = Field(..., gt=0, description="Opening width / swing radius")
    height: float = Field(..., gt=0, description="Opening extent along y")
    clearance_required: float = Field(default=0.0, ge=0)
    swing_direction: SwingDirection | None = None


class SeverityConfig(BaseModel):
    """Severity assigned to each clash type."""

    model_config = ConfigDict(extra="forbid")

    backing_overlap: ClashSeverity = ClashSeverity.ERROR
    door_swing: ClashSeverity = ClashSeverity.ERROR
    door_clearance: ClashSeverity = ClashSeverity.WARNING


class EngineSettingsConfig(BaseModel):
    """Tunable engine settings.

    Attributes:
        grouping_threshold: Distance below which same-type backings group
        snap_offset: Perpendicular offset applied when snapping to walls
        standard_sizes: Ascending standard size ladder
        combine_material_rate: Fraction of group area saved by combining
        combine_labor_minutes: Minutes saved per backing eliminated
        standardize_labor_minutes: Minutes saved per standardized backing
        severities: Clash severities by type
    """

    model_config = ConfigDict(extra="forbid")

    grouping_threshold: float = Field(default=12.0, ge=0)
    snap_offset: float = 0.0
    standard_sizes: list[float] = Field(
        default_factory=lambda: [12, 16, 24, 32, 48, 64, 96], min_length=1
    )
    combine_material_rate: float = Field(default=0.1, ge=0, le=1)
    combine_labor_minutes: float = Field(default=15.0, ge=0)
    standardize_labor_minutes: float = Field(default=10.0, ge=0)
    severities: SeverityConfig = Field(default_factory=SeverityConfig)

    @field_validator("standard_sizes")
    @classmethod
    def validate_standard_sizes(cls, v: list[float]) -> list[float]:
        """Ensure the ladder is positive and ascending."""
        if any(size <= 0 for size in v):
            raise ValueError("Standard sizes must be positive")
        if v != sorted(v):
            raise ValueError("Standard sizes must be in ascending order")
        return v


class LayoutDocument(BaseModel):
    """Root model of a layout document.

    Attributes:
        schema_version: Document format version
        placements: Backing placements in caller order
        walls: Detected wall segments
        doors: Detected door openings
        settings: Engine settings
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = "1.0"
    placements: list[PlacementConfig] = Field(default_factory=list)
    walls: list[WallConfig] = Field(default_factory=list)
    doors: list[DoorConfig] = Field(default_factory=list)
    settings: EngineSettingsConfig = Field(default_factory=EngineSettingsConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_version(cls, v: str) -> str:
        """Validate that the schema version is supported."""
        if v not in SUPPORTED_VERSIONS:
            supported = ", ".join(sorted(SUPPORTED_VERSIONS))
            raise ValueError(
                f"Unsupported schema version: {v}. Supported versions: {supported}"
            )
        return v

    @model_validator(mode="after")
    def validate_unique_ids(self) -> "LayoutDocument":
        """Reject duplicate placement IDs; clash and suggestion items refer to them."""
        seen: set[str] = set()
        for placement in self.placements:
            if placement.id in seen:
                raise ValueError(f"Duplicate placement id: {placement.id}")
            seen.add(placement.id)
        return self
