"""Layout analysis endpoints."""

from fastapi import APIRouter

from backings.application import AnalyzeLayoutCommand
from backings.application.config import load_layout_from_dict
from backings.web.dependencies import AnalysisFormatterDep
from backings.web.schemas.requests import AnalyzeRequest
from backings.web.schemas.responses import (
    LAYOUT_ERROR_RESPONSES,
    AnalysisResponseSchema,
)

router = APIRouter(prefix="/analyze", tags=["analyze"])


@router.post(
    "", response_model=AnalysisResponseSchema, responses=LAYOUT_ERROR_RESPONSES
)
async def analyze_layout(
    request: AnalyzeRequest,
    formatter: AnalysisFormatterDep,
) -> AnalysisResponseSchema:
    """Detect clashes, suggest optimizations and build the material schedule.

    Args:
        request: Request containing the layout document.
        formatter: Injected AnalysisFormatter.

    Returns:
        Clashes, suggestions, zones, schedule, totals and waste.

    Raises:
        ConfigError: If the layout document is invalid (handled as 422).
    """
    document = load_layout_from_dict(request.layout)
    command = AnalyzeLayoutCommand.from_document(document)
    output = command.execute_document(document, snap=request.snap)
    return AnalysisResponseSchema.model_validate(formatter.to_dict(output))
