"""Material take-off CSV for ordering: board feet, waste and cost per type."""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from backings.domain.services import MaterialTakeoffService, to_fixed
from backings.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from backings.domain.services import MaterialTakeoff
    from backings.domain.value_objects import BackingPlacement


logger = logging.getLogger(__name__)


def takeoff_headers(waste_factor: float) -> tuple[str, ...]:
    """Column names; the waste column states the allowance in percent."""
    return (
        "Material Type",
        "Nominal Size",
        "Actual Dimensions",
        "Linear Feet",
        "Board Feet",
        "Pieces",
        f"Waste Factor ({waste_factor:.0%})",
        "Total Linear Feet",
        "Total Board Feet",
        "Estimated Cost",
    )


@ExporterRegistry.register("takeoff")  # type: ignore[arg-type]
class MaterialTakeoffCsvExporter:
    """Per-type take-off as CSV.

    Fields are quoted only when they contain a delimiter, quote or newline.
    Quantities have two decimals and cost is in dollars, e.g. ``$2.75``.
    """

    format_name: ClassVar[str] = "takeoff"
    file_extension: ClassVar[str] = "csv"
    file_stem: ClassVar[str] = "material_takeoff"

    def __init__(self, takeoff_service: MaterialTakeoffService | None = None) -> None:
        self.takeoff_service = takeoff_service or MaterialTakeoffService()

    def export(self, placements: list[BackingPlacement], path: Path) -> None:
        path.write_text(self.export_string(placements), encoding="utf-8")
        logger.info(f"Exported material take-off to {path}")

    def export_string(self, placements: list[BackingPlacement]) -> str:
        return self.format_csv(self.takeoff_service.calculate(placements))

    def format_csv(self, lines: list[MaterialTakeoff]) -> str:
        output = io.StringIO()
        writer = csv.writer(output, lineterminator="\n")
        writer.writerow(takeoff_headers(self.takeoff_service.waste_factor))

        for line in lines:
            writer.writerow(
                [
                    line.type.value,
                    line.properties.nominal_size,
                    line.properties.actual_size,
                    to_fixed(line.linear_feet, 2),
                    to_fixed(line.board_feet, 2),
                    str(line.pieces),
                    to_fixed(line.waste_linear_feet, 2),
                    to_fixed(line.total_linear_feet, 2),
                    to_fixed(line.total_board_feet, 2),
                    f"${to_fixed(line.estimated_cost, 2)}",
                ]
            )

        return output.getvalue().removesuffix("\n")
