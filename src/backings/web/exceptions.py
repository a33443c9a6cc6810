"""Custom exceptions and error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from backings.application.config import ConfigError
from backings.web.schemas.responses import ErrorResponseSchema


class UnsupportedFormatError(Exception):
    """Raised when requested export format is not supported."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(
            f"Unsupported format: {format_name}. Available: {', '.join(available)}"
        )


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content=ErrorResponseSchema(
                error=exc.message,
                error_type=exc.error_type,
                details=[
                    {"path": d.get("path"), "message": d.get("message")}
                    for d in exc.details
                ],
            ).model_dump(),
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content=ErrorResponseSchema(
                error=str(exc),
                error_type="unsupported_format",
                details={"format": exc.format_name, "available": exc.available},
            ).model_dump(),
        )
