"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class AnalyzeRequest(BaseModel):
    """Request for analyzing a layout document."""

    layout: dict[str, Any] = Field(..., description="Layout document JSON")
    snap: bool = Field(default=False, description="Snap placements to the nearest wall first")


class ScheduleRequest(BaseModel):
    """Request for exporting a material schedule."""

    layout: dict[str, Any] = Field(..., description="Layout document JSON")


class LayoutValidateRequest(BaseModel):
    """Request for validating a layout document."""

    layout: dict[str, Any] = Field(..., description="Layout document JSON")
