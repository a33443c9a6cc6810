"""Pytest configuration and shared fixtures for backing tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "slow: tests that take a long time to run")


# =============================================================================
# Layout documents
# =============================================================================


def placement_data(
    placement_id: str,
    x: float = 0.0,
    y: float = 0.0,
    width: float = 6.0,
    height: float = 2.0,
    backing_type: str = "2x6",
    thickness: float = 1.5,
    z: float = 36.0,
    component_id: str = "tv-1",
) -> dict[str, Any]:
    """Build one placement entry of a layout document."""
    return {
        "id": placement_id,
        "component_id": component_id,
        "x": x,
        "y": y,
        "width": width,
        "height": height,
        "backing_type": backing_type,
        "dimensions": {"width": width, "height": height, "thickness": thickness},
        "location": {"x": x, "y": y, "z": z},
    }


@pytest.fixture
def layout_data() -> dict[str, Any]:
    """A small layout with a combinable pair, a stray plate, a wall and a door."""
    return {
        "schema_version": "1.0",
        "placements": [
            placement_data("b1", x=0, y=0),
            placement_data("b2", x=6, y=0),
            placement_data(
                "b3",
                x=100,
                y=100,
                width=10,
                height=10,
                backing_type="steel_plate",
                thickness=0.25,
                z=48,
                component_id="shelf-1",
            ),
        ],
        "walls": [
            {
                "id": "w1",
                "start": {"x": 0, "y": -10},
                "end": {"x": 240, "y": -10},
                "thickness": 6,
                "type": "exterior",
            }
        ],
        "doors": [
            {
                "id": "d1",
                "position": {"x": 200, "y": 200},
                "width": 36,
                "height": 80,
                "clearance_required": 6,
                "swing_direction": "left",
            }
        ],
    }


@pytest.fixture
def layout_file(tmp_path: Path, layout_data: dict[str, Any]) -> Path:
    """The layout_data fixture written to a JSON file."""
    path = tmp_path / "layout.json"
    path.write_text(json.dumps(layout_data), encoding="utf-8")
    return path


@pytest.fixture
def make_placement_data():
    """Factory for placement entries of a layout document."""
    return placement_data
