"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class SavingsSchema(BaseModel):
    """Estimated savings of a suggestion or zone."""

    material: float = Field(..., description="Material saved in square inches")
    labor: float = Field(..., description="Labor saved in minutes")


class PlacementSchema(BaseModel):
    """Backing placement as it appears in a layout document."""

    id: str
    component_id: str
    x: float
    y: float
    width: float
    height: float
    backing_type: str
    dimensions: dict[str, float]
    location: dict[str, float]
    orientation: float
    status: str


class ClashSchema(BaseModel):
    """Detected conflict between design elements."""

    id: str = Field(..., description="Clash identifier")
    type: str = Field(..., description="backing_overlap, door_swing or door_clearance")
    severity: str = Field(..., description="error or warning")
    items: list[str] = Field(..., description="IDs of the colliding entities")
    resolution: str | None = Field(default=None, description="Resolution hint")


class SuggestionSchema(BaseModel):
    """Advisory optimization."""

    type: str = Field(..., description="combine or standardize")
    items: list[str]
    description: str
    savings: SavingsSchema


class ZoneSchema(BaseModel):
    """Group of combinable backings and the piece that replaces them."""

    id: str
    items: list[str]
    component_ids: list[str]
    combined: PlacementSchema
    savings: SavingsSchema


class ScheduleRowSchema(BaseModel):
    """Material schedule row."""

    type: str
    material: str = Field(..., description="Display name of the backing type")
    size: str
    count: int
    total_length: float | None = Field(default=None, description="Linear feet (lumber)")
    total_area: float | None = Field(default=None, description="Square feet (sheet goods)")
    locations: list[str]


class TotalsSchema(BaseModel):
    """Grand totals across the schedule."""

    total_pieces: int
    total_lumber_feet: float
    total_sheet_area: float


class AnalysisResponseSchema(BaseModel):
    """Response for layout analysis."""

    placements: list[PlacementSchema]
    clashes: list[ClashSchema]
    suggestions: list[SuggestionSchema]
    zones: list[ZoneSchema]
    schedule: list[ScheduleRowSchema]
    totals: TotalsSchema
    material_waste: float = Field(..., description="Square inches lost to standard sizing")


class ValidationResultSchema(BaseModel):
    """Response for layout validation."""

    is_valid: bool = Field(..., description="Whether the layout document is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )


class ExportFormatsSchema(BaseModel):
    """Available export formats."""

    formats: list[str] = Field(..., description="List of available format names")


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error category")
    details: Any = Field(default=None, description="Additional error details")


LAYOUT_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    422: {"model": ErrorResponseSchema, "description": "Invalid layout document"},
}

FORMAT_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    **LAYOUT_ERROR_RESPONSES,
    400: {"model": ErrorResponseSchema, "description": "Unsupported export format"},
}
