"""Pydantic schemas for the REST API."""

from backings.web.schemas.requests import (
    AnalyzeRequest,
    LayoutValidateRequest,
    ScheduleRequest,
)
from backings.web.schemas.responses import (
    AnalysisResponseSchema,
    ClashSchema,
    FORMAT_ERROR_RESPONSES,
    LAYOUT_ERROR_RESPONSES,
    ErrorResponseSchema,
    ExportFormatsSchema,
    PlacementSchema,
    SavingsSchema,
    ScheduleRowSchema,
    SuggestionSchema,
    TotalsSchema,
    ValidationResultSchema,
    ZoneSchema,
)

__all__ = [
    # Requests
    "AnalyzeRequest",
    "LayoutValidateRequest",
    "ScheduleRequest",
    # Responses
    "AnalysisResponseSchema",
    "ClashSchema",
    "ErrorResponseSchema",
    "FORMAT_ERROR_RESPONSES",
    "LAYOUT_ERROR_RESPONSES",
    "ExportFormatsSchema",
    "PlacementSchema",
    "SavingsSchema",
    "ScheduleRowSchema",
    "SuggestionSchema",
    "TotalsSchema",
    "ValidationResultSchema",
    "ZoneSchema",
]
