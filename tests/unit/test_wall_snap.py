"""Unit tests for WallSnapService."""

import pytest

from backings.domain.services import WallSnapService
from backings.domain.value_objects import (
    BackingDimensions,
    BackingPlacement,
    BackingType,
    Location3D,
    Point,
    WallSegment,
)


def make_placement(
    placement_id: str = "b1",
    x: float = 0.0,
    y: float = 0.0,
    z: float = 36.0,
) -> BackingPlacement:
    """Create a 2x6 backing anchored at (x, y)."""
    return BackingPlacement(
        id=placement_id,
        component_id="tv-1",
        x=x,
        y=y,
        width=6,
        height=2,
        backing_type=BackingType.LUMBER_2X6,
        dimensions=BackingDimensions(width=6, height=2, thickness=1.5),
        location=Location3D(x=x, y=y, z=z),
    )


def make_wall(
    wall_id: str = "w1",
    start: tuple[float, float] = (0, 0),
    end: tuple[float, float] = (100, 0),
) -> WallSegment:
    return WallSegment(id=wall_id, start=Point(*start), end=Point(*end))


@pytest.fixture
def service() -> WallSnapService:
    return WallSnapService()


class TestSnapToWall:
    """Tests for snap_to_wall()."""

    def test_projects_onto_wall(self, service: WallSnapService) -> None:
        snapped = service.snap_to_wall(make_placement(x=40, y=15), make_wall())

        assert snapped.x == pytest.approx(40.0)
        assert snapped.y == pytest.approx(0.0)
        assert snapped.location.x == pytest.approx(40.0)
        assert snapped.location.y == pytest.approx(0.0)

    def test_keeps_aff_height(self, service: WallSnapService) -> None:
        snapped = service.snap_to_wall(make_placement(x=40, y=15, z=54), make_wall())
        assert snapped.location.z == 54

    def test_orientation_follows_wall_angle(self, service: WallSnapService) -> None:
        wall = make_wall(start=(0, 0), end=(0, 100))
        snapped = service.snap_to_wall(make_placement(x=10, y=50), wall)

        assert snapped.orientation == pytest.approx(90.0)
        assert snapped.x == pytest.approx(0.0)
        assert snapped.y == pytest.approx(50.0)

    def test_point_on_wall_unchanged_with_zero_offset(
        self, service: WallSnapService
    ) -> None:
        snapped = service.snap_to_wall(make_placement(x=25, y=0), make_wall())
        assert snapped.x == pytest.approx(25.0)
        assert snapped.y == pytest.approx(0.0)

    def test_offset_moves_along_left_normal(self, service: WallSnapService) -> None:
        """A wall running +x has its left normal pointing +y."""
        snapped = service.snap_to_wall(make_placement(x=40, y=15), make_wall(), offset=3)

        assert snapped.x == pytest.approx(40.0)
        assert snapped.y == pytest.approx(3.0)

    def test_negative_offset(self, service: WallSnapService) -> None:
        snapped = service.snap_to_wall(
            make_placement(x=40, y=15), make_wall(), offset=-2.5
        )
        assert snapped.y == pytest.approx(-2.5)

    def test_clamps_to_wall_end(self, service: WallSnapService) -> None:
        snapped = service.snap_to_wall(make_placement(x=150, y=20), make_wall())
        assert snapped.x == pytest.approx(100.0)
        assert snapped.y == pytest.approx(0.0)

    def test_zero_length_wall_snaps_to_start(self, service: WallSnapService) -> None:
        wall = make_wall(start=(5, 5), end=(5, 5))
        snapped = service.snap_to_wall(make_placement(x=40, y=15), wall, offset=4)

        assert snapped.x == 5
        assert snapped.y == 5

    def test_input_not_modified(self, service: WallSnapService) -> None:
        original = make_placement(x=40, y=15)
        service.snap_to_wall(original, make_wall())

        assert original.x == 40
        assert original.y == 15
        assert original.orientation == 0.0


class TestNearestWall:
    """Tests for find_nearest_wall() and snap_to_nearest_wall()."""

    def test_no_walls(self, service: WallSnapService) -> None:
        assert service.find_nearest_wall(Point(0, 0), []) is None

    def test_picks_closest(self, service: WallSnapService) -> None:
        near = make_wall("near", start=(0, 10), end=(100, 10))
        far = make_wall("far", start=(0, 50), end=(100, 50))
        assert service.find_nearest_wall(Point(20, 0), [far, near]) is near

    def test_ties_go_to_first_wall(self, service: WallSnapService) -> None:
        above = make_wall("above", start=(0, 10), end=(100, 10))
        below = make_wall("below", start=(0, -10), end=(100, -10))
        assert service.find_nearest_wall(Point(50, 0), [above, below]) is above

    def test_snap_to_nearest_without_walls_returns_input(
        self, service: WallSnapService
    ) -> None:
        placement = make_placement(x=3, y=4)
        assert service.snap_to_nearest_wall(placement, []) is placement

    def test_snap_all_preserves_order(self, service: WallSnapService) -> None:
        placements = [make_placement("a", x=10, y=5), make_placement("b", x=20, y=-5)]
        snapped = service.snap_all(placements, [make_wall()])

        assert [p.id for p in snapped] == ["a", "b"]
        assert all(p.y == pytest.approx(0.0) for p in snapped)
