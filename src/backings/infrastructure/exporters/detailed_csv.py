"""Per-placement CSV export, one row for every backing."""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from backings.domain.services import format_number, to_fixed
from backings.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from backings.domain.value_objects import BackingPlacement


logger = logging.getLogger(__name__)

DETAIL_HEADERS: tuple[str, ...] = (
    "ID",
    "Component ID",
    "Type",
    "Width (in)",
    "Height (in)",
    "Thickness (in)",
    "X Position",
    "Y Position",
    "Height AFF (in)",
    "Orientation (deg)",
    "Status",
    "Area (sq in)",
)


@ExporterRegistry.register("detailed-csv")  # type: ignore[arg-type]
class DetailedCsvExporter:
    """Placement-level CSV listing with positions and physical dimensions."""

    format_name: ClassVar[str] = "detailed-csv"
    file_extension: ClassVar[str] = "csv"
    file_stem: ClassVar[str] = "backing_details"

    def export(self, placements: list[BackingPlacement], path: Path) -> None:
        path.write_text(self.export_string(placements), encoding="utf-8")
        logger.info(f"Exported placement details to {path}")

    def export_string(self, placements: list[BackingPlacement]) -> str:
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(DETAIL_HEADERS)

        for p in placements:
            dims = p.dimensions
            writer.writerow(
                [
                    p.id,
                    p.component_id,
                    p.backing_type.value,
                    format_number(dims.width),
                    format_number(dims.height),
                    format_number(dims.thickness),
                    to_fixed(p.location.x, 2),
                    to_fixed(p.location.y, 2),
                    format_number(p.location.z),
                    format_number(p.orientation),
                    p.status.value,
                    to_fixed(dims.area, 2),
                ]
            )

        return output.getvalue().removesuffix("\n")
