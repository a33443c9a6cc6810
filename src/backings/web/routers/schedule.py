"""Material schedule export endpoints."""

from fastapi import APIRouter
from fastapi.responses import Response

from backings.application.config import config_to_placements, load_layout_from_dict
from backings.infrastructure.exporters import ExporterRegistry, schedule_filename
from backings.web.dependencies import CsvExporterDep
from backings.web.exceptions import UnsupportedFormatError
from backings.web.schemas.requests import ScheduleRequest
from backings.web.schemas.responses import (
    FORMAT_ERROR_RESPONSES,
    LAYOUT_ERROR_RESPONSES,
    ExportFormatsSchema,
)

router = APIRouter(prefix="/schedule", tags=["schedule"])

_MEDIA_TYPES = {
    "csv": "text/csv",
    "json": "application/json",
}


@router.get("/formats", response_model=ExportFormatsSchema)
async def list_export_formats() -> ExportFormatsSchema:
    """List all available export formats."""
    return ExportFormatsSchema(formats=ExporterRegistry.available_formats())


@router.post("/csv", responses=LAYOUT_ERROR_RESPONSES)
async def export_schedule_csv(
    request: ScheduleRequest,
    exporter: CsvExporterDep,
) -> Response:
    """Export the material schedule as a CSV attachment.

    The attachment is named ``material_schedule_<YYYY-MM-DD>.csv``.
    """
    document = load_layout_from_dict(request.layout)
    content = exporter.export_string(config_to_placements(document))
    filename = schedule_filename()

    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f"attachment; filename={filename}"},
    )


@router.post("/{format_name}", responses=FORMAT_ERROR_RESPONSES)
async def export_schedule(format_name: str, request: ScheduleRequest) -> Response:
    """Export placements to any registered format.

    Raises:
        UnsupportedFormatError: If format is not registered.
    """
    if not ExporterRegistry.is_registered(format_name):
        raise UnsupportedFormatError(format_name, ExporterRegistry.available_formats())

    document = load_layout_from_dict(request.layout)
    exporter = ExporterRegistry.get(format_name)()
    content = exporter.export_string(config_to_placements(document))

    return Response(
        content=content,
        media_type=_MEDIA_TYPES.get(exporter.file_extension, "text/plain"),
    )
