"""Loading of JSON layout documents into validated LayoutDocument models.

Every failure surfaces as a ConfigError whose error_type tells a missing
file from an unreadable one, broken JSON from a document that does not
fit the schema. Validation errors carry JSON paths such as
``placements[0].width``.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from backings.application.config.schema import LayoutDocument


class ConfigError(Exception):
    """Exception raised for layout document errors.

    Attributes:
        message: The primary error message
        error_type: Category of error (file_not_found, file_read_error,
            json_parse, validation)
        path: Path to the layout document (if applicable)
        details: Additional error details (line/column for JSON, validation errors, etc.)
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def _format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> _format_json_path(("placements", 0, "width"))
        'placements[0].width'
        >>> _format_json_path(("settings", "grouping_threshold"))
        'settings.grouping_threshold'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def _extract_validation_errors(
    error: PydanticValidationError,
) -> list[dict[str, Any]]:
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": _format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def _format_validation_error_message(details: list[dict[str, Any]]) -> str:
    lines = ["Layout validation failed:"]
    for detail in details:
        path = detail["path"] or "(root)"
        message = detail["message"]
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {path}: {message} (got: {value!r})")
        else:
            lines.append(f"  - {path}: {message}")
    return "\n".join(lines)


def _read_layout_text(path: Path) -> str:
    if not path.exists():
        raise ConfigError(
            message=f"Layout file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else str(e)
        raise ConfigError(
            message=f"Cannot read layout file {path}: {reason}",
            error_type="file_read_error",
            path=path,
        ) from e


def _parse_layout_json(content: str, path: Path) -> Any:
    try:
        return json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=(
                f"Layout file {path} is not valid JSON "
                f"at line {e.lineno}, column {e.colno}: {e.msg}"
            ),
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        ) from e


def _validate_layout(data: Any, path: Path | None = None) -> LayoutDocument:
    try:
        return LayoutDocument.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            path=path,
            details=details,
        ) from e


def load_layout(path: Path) -> LayoutDocument:
    """Load and validate a layout document from a JSON file.

    Raises:
        ConfigError: With error_type "file_not_found", "file_read_error"
            (unreadable file, directory or non-UTF-8 content), "json_parse"
            or "validation".
    """
    content = _read_layout_text(path)
    return _validate_layout(_parse_layout_json(content, path), path)


def load_layout_from_dict(data: dict[str, Any]) -> LayoutDocument:
    """Validate a layout document that arrived as a dictionary, e.g. an API body.

    Raises:
        ConfigError: With error_type "validation".
    """
    return _validate_layout(data)
