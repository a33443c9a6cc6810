"""Output formatters for analysis results."""

from __future__ import annotations

from typing import Any

from backings.application.dtos import AnalysisOutput
from backings.domain.services import display_name, to_fixed
from backings.domain.value_objects import BackingPlacement, Clash, OptimizationSuggestion


def placement_to_dict(placement: BackingPlacement) -> dict[str, Any]:
    """Serialize a placement in the layout document shape."""
    return {
        "id": placement.id,
        "component_id": placement.component_id,
        "x": placement.x,
        "y": placement.y,
        "width": placement.width,
        "height": placement.height,
        "backing_type": placement.backing_type.value,
        "dimensions": {
            "width": placement.dimensions.width,
            "height": placement.dimensions.height,
            "thickness": placement.dimensions.thickness,
        },
        "location": {
            "x": placement.location.x,
            "y": placement.location.y,
            "z": placement.location.z,
        },
        "orientation": placement.orientation,
        "status": placement.status.value,
    }


def clash_to_dict(clash: Clash) -> dict[str, Any]:
    return {
        "id": clash.id,
        "type": clash.type.value,
        "severity": clash.severity.value,
        "items": list(clash.items),
        "resolution": clash.resolution,
    }


def suggestion_to_dict(suggestion: OptimizationSuggestion) -> dict[str, Any]:
    return {
        "type": suggestion.type.value,
        "items": list(suggestion.items),
        "description": suggestion.description,
        "savings": {
            "material": suggestion.savings.material,
            "labor": suggestion.savings.labor,
        },
    }


class AnalysisFormatter:
    """Formats AnalysisOutput for terminal display or JSON output."""

    def to_dict(self, output: AnalysisOutput) -> dict[str, Any]:
        """Convert an analysis result to a JSON-serializable dictionary."""
        return {
            "placements": [placement_to_dict(p) for p in output.placements],
            "clashes": [clash_to_dict(c) for c in output.clashes],
            "suggestions": [suggestion_to_dict(s) for s in output.suggestions],
            "zones": [
                {
                    "id": zone.id,
                    "items": list(zone.items),
                    "component_ids": list(zone.component_ids),
                    "combined": placement_to_dict(zone.combined),
                    "savings": {
                        "material": zone.savings.material,
                        "labor": zone.savings.labor,
                    },
                }
                for zone in output.zones
            ],
            "schedule": [
                {
                    "type": s.type.value,
                    "material": display_name(s.type),
                    "size": s.size,
                    "count": s.count,
                    "total_length": s.total_length,
                    "total_area": s.total_area,
                    "locations": list(s.locations),
                }
                for s in output.schedule
            ],
            "totals": {
                "total_pieces": output.totals.total_pieces,
                "total_lumber_feet": output.totals.total_lumber_feet,
                "total_sheet_area": output.totals.total_sheet_area,
            },
            "material_waste": output.material_waste,
        }

    def format(self, output: AnalysisOutput) -> str:
        """Format an analysis result as a text report."""
        lines = [
            "BACKING ANALYSIS",
            "=" * 70,
            f"Placements: {len(output.placements)}",
            f"Clashes: {len(output.clashes)} "
            f"({output.error_count} error(s), {output.warning_count} warning(s))",
            "",
        ]

        if output.clashes:
            lines.append("CLASHES")
            lines.append("-" * 70)
            for clash in output.clashes:
                marker = "[X]" if clash.severity.value == "error" else "[!]"
                lines.append(
                    f"{marker} {clash.id}: {clash.type.value} ({', '.join(clash.items)})"
                )
                if clash.resolution:
                    lines.append(f"      -> {clash.resolution}")
            lines.append("")

        if output.suggestions:
            lines.append("SUGGESTIONS")
            lines.append("-" * 70)
            for suggestion in output.suggestions:
                lines.append(
                    f"  {suggestion.type.value:<12} {suggestion.description} "
                    f"(saves {to_fixed(suggestion.savings.material, 1)} sq in, "
                    f"{suggestion.savings.labor:.0f} min)"
                )
            lines.append("")

        lines.append("MATERIAL SCHEDULE")
        lines.append("-" * 70)
        if not output.schedule:
            lines.append("  No backings.")
        for s in output.schedule:
            if s.total_length is not None:
                amount = f"{to_fixed(s.total_length, 1)} ft"
            elif s.total_area is not None:
                amount = f"{to_fixed(s.total_area, 1)} sq ft"
            else:
                amount = ""
            lines.append(
                f"  {display_name(s.type):<18} {s.size:<18} x{s.count:<4} {amount}"
            )
        lines.append("-" * 70)
        lines.append(
            f"  Total pieces: {output.totals.total_pieces}  "
            f"Lumber: {to_fixed(output.totals.total_lumber_feet, 1)} ft  "
            f"Sheet: {to_fixed(output.totals.total_sheet_area, 1)} sq ft"
        )
        lines.append(f"  Standard sizing waste: {to_fixed(output.material_waste, 1)} sq in")

        return "\n".join(lines)
