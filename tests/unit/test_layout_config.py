"""Unit tests for layout document loading, schema and adapters."""

import json
from pathlib import Path
from typing import Any

import pytest

from backings.application.config import (
    ConfigError,
    LayoutDocument,
    config_to_doors,
    config_to_optimization_settings,
    config_to_placements,
    config_to_severity_policy,
    config_to_walls,
    load_layout,
    load_layout_from_dict,
)
from backings.domain.value_objects import (
    BackingType,
    ClashSeverity,
    PlacementStatus,
    SwingDirection,
    WallType,
)


class TestLoadLayout:
    """Tests for load_layout() error handling."""

    def test_valid_file(self, layout_file: Path) -> None:
        document = load_layout(layout_file)
        assert isinstance(document, LayoutDocument)
        assert len(document.placements) == 3

    def test_file_not_found(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError) as exc_info:
            load_layout(tmp_path / "missing.json")

        assert exc_info.value.error_type == "file_not_found"
        assert "not found" in str(exc_info.value)

    def test_directory_is_a_read_error(self, tmp_path: Path) -> None:
        """A path that exists but cannot be read as a file."""
        with pytest.raises(ConfigError) as exc_info:
            load_layout(tmp_path)

        error = exc_info.value
        assert error.error_type == "file_read_error"
        assert error.path == tmp_path
        assert str(error).startswith(f"Cannot read layout file {tmp_path}")

    def test_non_utf8_content_is_a_read_error(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(b'{"name": "caf\xe9"}')

        with pytest.raises(ConfigError) as exc_info:
            load_layout(path)

        assert exc_info.value.error_type == "file_read_error"
        assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "broken.json"
        path.write_text('{"placements": [', encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_layout(path)

        error = exc_info.value
        assert error.error_type == "json_parse"
        assert error.details[0]["line"] == 1
        assert error.path == path

    def test_validation_error_paths(self, tmp_path: Path, make_placement_data) -> None:
        bad = make_placement_data("a")
        bad["width"] = -1
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"placements": [bad]}), encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_layout(path)

        error = exc_info.value
        assert error.error_type == "validation"
        assert str(error).startswith("Layout validation failed:")
        assert error.details[0]["path"] == "placements[0].width"


class TestLayoutSchema:
    """Tests for schema rules enforced by the pydantic models."""

    def test_defaults(self) -> None:
        document = load_layout_from_dict({})
        assert document.schema_version == "1.0"
        assert document.placements == []
        assert document.settings.grouping_threshold == 12.0
        assert document.settings.standard_sizes == [12, 16, 24, 32, 48, 64, 96]

    def test_unknown_key_rejected(self) -> None:
        with pytest.raises(ConfigError):
            load_layout_from_dict({"placements": [], "colour": "red"})

    def test_unsupported_version(self) -> None:
        with pytest.raises(ConfigError, match="Unsupported schema version"):
            load_layout_from_dict({"schema_version": "2.0"})

    def test_duplicate_placement_ids(self, make_placement_data) -> None:
        with pytest.raises(ConfigError, match="Duplicate placement id"):
            load_layout_from_dict(
                {"placements": [make_placement_data("a"), make_placement_data("a", x=50)]}
            )

    def test_unknown_backing_type(self, make_placement_data) -> None:
        with pytest.raises(ConfigError):
            load_layout_from_dict(
                {"placements": [make_placement_data("a", backing_type="2x12")]}
            )

    @pytest.mark.parametrize(
        "sizes", [[24, 12], [0, 12], []]
    )
    def test_bad_standard_sizes(self, sizes: list[float]) -> None:
        with pytest.raises(ConfigError):
            load_layout_from_dict({"settings": {"standard_sizes": sizes}})

    def test_negative_threshold_rejected(self) -> None:
        with pytest.raises(ConfigError):
            load_layout_from_dict({"settings": {"grouping_threshold": -1}})


class TestAdapters:
    """Tests for conversion of documents into domain objects."""

    def test_placements(self, layout_data: dict[str, Any]) -> None:
        placements = config_to_placements(load_layout_from_dict(layout_data))

        assert [p.id for p in placements] == ["b1", "b2", "b3"]
        plate = placements[2]
        assert plate.backing_type == BackingType.STEEL_PLATE
        assert plate.dimensions.thickness == 0.25
        assert plate.location.z == 48
        assert plate.status == PlacementStatus.AI_GENERATED

    def test_walls_and_doors(self, layout_data: dict[str, Any]) -> None:
        document = load_layout_from_dict(layout_data)
        walls = config_to_walls(document)
        doors = config_to_doors(document)

        assert walls[0].type == WallType.EXTERIOR
        assert walls[0].length == pytest.approx(240)
        assert doors[0].clearance_required == 6
        assert doors[0].swing_direction == SwingDirection.LEFT

    def test_settings(self) -> None:
        document = load_layout_from_dict(
            {
                "settings": {
                    "grouping_threshold": 8,
                    "standard_sizes": [16, 32],
                    "severities": {"door_clearance": "error"},
                }
            }
        )
        settings = config_to_optimization_settings(document.settings)
        policy = config_to_severity_policy(document.settings)

        assert settings.grouping_threshold == 8
        assert settings.standard_sizes == (16, 32)
        assert policy.door_clearance == ClashSeverity.ERROR
        assert policy.backing_overlap == ClashSeverity.ERROR
