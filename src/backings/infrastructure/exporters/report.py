"""Plain-text backing summary report."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from backings.domain.services import to_fixed
from backings.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from backings.domain.value_objects import BackingPlacement


logger = logging.getLogger(__name__)


@ExporterRegistry.register("report")  # type: ignore[arg-type]
class BackingSummaryReport:
    """Summary of a placement set: counts by type and status, area, AFF.

    Attributes:
        generated_at: Timestamp printed in the footer; the current time
            when the report is rendered if not given.
    """

    format_name: ClassVar[str] = "report"
    file_extension: ClassVar[str] = "txt"
    file_stem: ClassVar[str] = "backing_report"

    def __init__(self, generated_at: datetime | None = None) -> None:
        self.generated_at = generated_at

    def export(self, placements: list[BackingPlacement], path: Path) -> None:
        path.write_text(self.export_string(placements), encoding="utf-8")
        logger.info(f"Exported backing summary report to {path}")

    def export_string(self, placements: list[BackingPlacement]) -> str:
        by_type: dict[str, int] = {}
        by_status: dict[str, int] = {}
        total_area = 0.0
        total_height = 0.0

        for placement in placements:
            type_key = placement.backing_type.value
            status_key = placement.status.value
            by_type[type_key] = by_type.get(type_key, 0) + 1
            by_status[status_key] = by_status.get(status_key, 0) + 1
            total_area += placement.dimensions.area
            total_height += placement.location.z

        average_height = total_height / len(placements) if placements else 0.0
        generated_at = self.generated_at or datetime.now()

        lines = [
            "BACKING SUMMARY REPORT",
            "======================",
            "",
            f"Total Backings: {len(placements)}",
            f"Total Area: {to_fixed(total_area, 2)} sq in",
            f"Average Height AFF: {to_fixed(average_height, 2)} in",
            "",
            "BY TYPE:",
        ]
        lines.extend(f"  {t}: {count}" for t, count in by_type.items())
        lines.append("")
        lines.append("BY STATUS:")
        lines.extend(f"  {s}: {count}" for s, count in by_status.items())
        lines.append("")
        lines.append(f"Generated: {generated_at.isoformat(sep=' ', timespec='seconds')}")

        return "\n".join(lines)
