"""Layout validation endpoints."""

from fastapi import APIRouter

from backings.application.config import ConfigError, load_layout_from_dict
from backings.web.schemas.requests import LayoutValidateRequest
from backings.web.schemas.responses import ValidationResultSchema

router = APIRouter(prefix="/validate", tags=["validate"])


@router.post("", response_model=ValidationResultSchema)
async def validate_layout(request: LayoutValidateRequest) -> ValidationResultSchema:
    """Validate a layout document without analyzing it.

    Invalid documents are reported in the body with status 200.
    """
    try:
        load_layout_from_dict(request.layout)
    except ConfigError as e:
        return ValidationResultSchema(
            is_valid=False,
            errors=[
                {"path": d.get("path") or "(root)", "message": d.get("message")}
                for d in e.details
            ],
        )

    return ValidationResultSchema(is_valid=True)
