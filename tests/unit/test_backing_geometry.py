"""Unit tests for the 2D geometry kernel and plane value objects."""

import math

import pytest

from backings.domain.services import geometry
from backings.domain.value_objects import DoorOpening, Point, WallSegment, WallType


class TestVectorPrimitives:
    """Tests for add, subtract, scale, magnitude and perpendicular."""

    def test_add_and_subtract(self) -> None:
        a = Point(3, 4)
        b = Point(1, -2)
        assert geometry.add(a, b) == Point(4, 2)
        assert geometry.subtract(a, b) == Point(2, 6)

    def test_scale(self) -> None:
        assert geometry.scale(Point(1.5, -2), 2) == Point(3, -4)

    def test_magnitude(self) -> None:
        assert geometry.magnitude(Point(3, 4)) == pytest.approx(5.0)

    def test_perpendicular_is_left_normal(self) -> None:
        assert geometry.perpendicular(Point(1, 0)) == Point(0, 1)
        assert geometry.perpendicular(Point(0, 1)) == Point(-1, 0)

    def test_distance(self) -> None:
        assert geometry.distance(Point(0, 0), Point(6, 8)) == pytest.approx(10.0)

    def test_negative_coordinates_allowed(self) -> None:
        assert geometry.distance(Point(-3, -4), Point(0, 0)) == pytest.approx(5.0)


class TestNormalize:
    """Tests for normalize()."""

    def test_unit_length(self) -> None:
        n = geometry.normalize(Point(3, 4))
        assert n.x == pytest.approx(0.6)
        assert n.y == pytest.approx(0.8)

    def test_zero_vector_stays_zero(self) -> None:
        """Normalizing the zero vector yields the zero vector, not an error."""
        assert geometry.normalize(Point(0, 0)) == Point(0, 0)


class TestProjectClamped:
    """Tests for project_clamped()."""

    def test_projects_onto_span(self) -> None:
        p = geometry.project_clamped(Point(5, 7), Point(0, 0), Point(10, 0))
        assert p.x == pytest.approx(5.0)
        assert p.y == pytest.approx(0.0)

    def test_clamps_before_start(self) -> None:
        p = geometry.project_clamped(Point(-5, 3), Point(0, 0), Point(10, 0))
        assert p == Point(0, 0)

    def test_clamps_past_end(self) -> None:
        p = geometry.project_clamped(Point(25, -3), Point(0, 0), Point(10, 0))
        assert p.x == pytest.approx(10.0)
        assert p.y == pytest.approx(0.0)

    def test_zero_length_segment_returns_start(self) -> None:
        p = geometry.project_clamped(Point(5, 5), Point(2, 3), Point(2, 3))
        assert p == Point(2, 3)

    def test_diagonal_segment(self) -> None:
        p = geometry.project_clamped(Point(0, 10), Point(0, 0), Point(10, 10))
        assert p.x == pytest.approx(5.0)
        assert p.y == pytest.approx(5.0)

    def test_distance_to_segment(self) -> None:
        d = geometry.distance_to_segment(Point(5, 7), Point(0, 0), Point(10, 0))
        assert d == pytest.approx(7.0)


class TestAngles:
    """Tests for angle_degrees() and WallSegment.angle."""

    def test_horizontal(self) -> None:
        assert geometry.angle_degrees(Point(0, 0), Point(10, 0)) == pytest.approx(0.0)

    def test_vertical(self) -> None:
        assert geometry.angle_degrees(Point(0, 0), Point(0, 10)) == pytest.approx(90.0)

    def test_reverse_direction(self) -> None:
        assert geometry.angle_degrees(Point(10, 0), Point(0, 0)) == pytest.approx(180.0)

    def test_wall_angle_matches_kernel(self) -> None:
        wall = WallSegment(id="w", start=Point(0, 0), end=Point(5, 5))
        assert wall.angle == pytest.approx(45.0)


class TestWallSegment:
    """Tests for WallSegment value object."""

    def test_length(self) -> None:
        wall = WallSegment(id="w", start=Point(0, 0), end=Point(3, 4))
        assert wall.length == pytest.approx(5.0)

    def test_defaults(self) -> None:
        wall = WallSegment(id="w", start=Point(0, 0), end=Point(1, 0))
        assert wall.thickness == 0.0
        assert wall.type == WallType.INTERIOR

    def test_negative_thickness_rejected(self) -> None:
        with pytest.raises(ValueError, match="thickness"):
            WallSegment(id="w", start=Point(0, 0), end=Point(1, 0), thickness=-1)


class TestDoorOpening:
    """Tests for DoorOpening value object."""

    def test_valid_door(self) -> None:
        door = DoorOpening(id="d", position=Point(0, 0), width=36, height=80)
        assert door.clearance_required == 0.0
        assert door.swing_direction is None

    @pytest.mark.parametrize("width,height", [(0, 80), (36, 0), (-1, 80)])
    def test_non_positive_dimensions_rejected(self, width: float, height: float) -> None:
        with pytest.raises(ValueError):
            DoorOpening(id="d", position=Point(0, 0), width=width, height=height)

    def test_negative_clearance_rejected(self) -> None:
        with pytest.raises(ValueError, match="clearance"):
            DoorOpening(
                id="d", position=Point(0, 0), width=36, height=80, clearance_required=-2
            )

    def test_is_immutable(self) -> None:
        door = DoorOpening(id="d", position=Point(0, 0), width=36, height=80)
        with pytest.raises(AttributeError):
            door.width = 40  # type: ignore[misc]


def test_angle_in_radians_round_trip() -> None:
    """angle_degrees agrees with math.atan2 for an arbitrary vector."""
    expected = math.degrees(math.atan2(-3, -4))
    assert geometry.angle_degrees(Point(4, 3), Point(0, 0)) == pytest.approx(expected)
