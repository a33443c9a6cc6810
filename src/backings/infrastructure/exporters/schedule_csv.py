"""Material schedule CSV export.

Layout of the export::

    Material Type,Size,Count,Total Length (ft),Total Area (sq ft),Locations

followed by one row per schedule entry, for example the 2x6 Lumber row
for three 6 x 2 x 1.5 inch pieces with a total length of 1.5 ft.

- The header row is unquoted; every data field is double-quoted.
- Quotes inside a field, such as the inch marks of a size label, are
  doubled, so standard CSV readers parse it back.
- Totals have exactly one decimal place, rounded half up, or are empty
  when the row's material family does not use them.
- Rows are separated by ``\\n`` with no trailing newline.
"""

from __future__ import annotations

import csv
import io
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from backings.domain.services import MaterialScheduleService, display_name, to_fixed
from backings.infrastructure.exporters.base import ExporterRegistry, dated_filename

if TYPE_CHECKING:
    from datetime import date

    from backings.domain.value_objects import BackingPlacement, MaterialSummary


logger = logging.getLogger(__name__)

SCHEDULE_HEADERS: tuple[str, ...] = (
    "Material Type",
    "Size",
    "Count",
    "Total Length (ft)",
    "Total Area (sq ft)",
    "Locations",
)

SCHEDULE_FILE_STEM = "material_schedule"


def schedule_filename(on: date | None = None) -> str:
    """Filename of the schedule export, e.g. ``material_schedule_2024-05-01.csv``."""
    return dated_filename(SCHEDULE_FILE_STEM, "csv", on)


def _one_decimal(value: float | None) -> str:
    return "" if value is None else to_fixed(value, 1)


@ExporterRegistry.register("csv")  # type: ignore[arg-type]
class MaterialScheduleCsvExporter:
    """Material schedule as CSV, one row per MaterialSummary.

    Attributes:
        format_name: "csv"
        file_extension: "csv"
    """

    format_name: ClassVar[str] = "csv"
    file_extension: ClassVar[str] = "csv"
    file_stem: ClassVar[str] = SCHEDULE_FILE_STEM

    def __init__(self, schedule_service: MaterialScheduleService | None = None) -> None:
        self.schedule_service = schedule_service or MaterialScheduleService()

    def export(self, placements: list[BackingPlacement], path: Path) -> None:
        """Export the schedule to a CSV file."""
        path.write_text(self.export_string(placements), encoding="utf-8")
        logger.info(f"Exported material schedule to {path}")

    def export_string(self, placements: list[BackingPlacement]) -> str:
        """Aggregate placements and render the schedule as CSV text."""
        return self.format_csv(self.schedule_service.summarize(placements))

    def format_csv(self, summaries: list[MaterialSummary]) -> str:
        """Render already aggregated schedule rows.

        Args:
            summaries: Schedule rows in display order.

        Returns:
            CSV text with an unquoted header and fully quoted data rows.
        """
        output = io.StringIO()
        header_writer = csv.writer(output, lineterminator="\n")
        row_writer = csv.writer(output, quoting=csv.QUOTE_ALL, lineterminator="\n")

        header_writer.writerow(SCHEDULE_HEADERS)
        for summary in summaries:
            row_writer.writerow(
                [
                    display_name(summary.type),
                    summary.size,
                    str(summary.count),
                    _one_decimal(summary.total_length),
                    _one_decimal(summary.total_area),
                    "; ".join(summary.locations),
                ]
            )

        return output.getvalue().removesuffix("\n")
