"""Material schedule JSON export."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from backings.domain.services import MaterialScheduleService, display_name
from backings.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from backings.domain.value_objects import (
        BackingPlacement,
        MaterialSummary,
        MaterialTotals,
    )


logger = logging.getLogger(__name__)


@ExporterRegistry.register("json")  # type: ignore[arg-type]
class MaterialScheduleJsonExporter:
    """Material schedule rows and grand totals as JSON.

    Attributes:
        indent: JSON indentation level.
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    file_stem: ClassVar[str] = "material_schedule"

    def __init__(
        self,
        schedule_service: MaterialScheduleService | None = None,
        indent: int = 2,
    ) -> None:
        self.schedule_service = schedule_service or MaterialScheduleService()
        self.indent = indent

    def export(self, placements: list[BackingPlacement], path: Path) -> None:
        path.write_text(self.export_string(placements), encoding="utf-8")
        logger.info(f"Exported material schedule JSON to {path}")

    def export_string(self, placements: list[BackingPlacement]) -> str:
        summaries = self.schedule_service.summarize(placements)
        totals = self.schedule_service.totals(summaries)
        return json.dumps(self.to_dict(summaries, totals), indent=self.indent)

    @staticmethod
    def to_dict(
        summaries: list[MaterialSummary], totals: MaterialTotals
    ) -> dict[str, Any]:
        """Build the JSON-serializable schedule payload."""
        return {
            "rows": [
                {
                    "type": s.type.value,
                    "material": display_name(s.type),
                    "size": s.size,
                    "count": s.count,
                    "total_length": s.total_length,
                    "total_area": s.total_area,
                    "locations": list(s.locations),
                }
                for s in summaries
            ],
            "totals": {
                "total_pieces": totals.total_pieces,
                "total_lumber_feet": totals.total_lumber_feet,
                "total_sheet_area": totals.total_sheet_area,
            },
        }
