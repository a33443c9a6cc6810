"""Unit tests for BackingOptimizer.

Tests grouping, combining, standard sizing, waste and suggestions.
"""

import pytest

from backings.domain.services import STANDARD_SIZES, BackingOptimizer, OptimizationSettings
from backings.domain.value_objects import (
    BackingDimensions,
    BackingPlacement,
    BackingType,
    Location3D,
    PlacementStatus,
    SuggestionType,
)


def make_backing(
    placement_id: str,
    x: float = 0.0,
    y: float = 0.0,
    width: float = 6.0,
    height: float = 2.0,
    backing_type: BackingType = BackingType.LUMBER_2X6,
    thickness: float = 1.5,
    z: float = 36.0,
    component_id: str = "tv-1",
) -> BackingPlacement:
    return BackingPlacement(
        id=placement_id,
        component_id=component_id,
        x=x,
        y=y,
        width=width,
        height=height,
        backing_type=backing_type,
        dimensions=BackingDimensions(width=width, height=height, thickness=thickness),
        location=Location3D(x=x, y=y, z=z),
    )


@pytest.fixture
def optimizer() -> BackingOptimizer:
    return BackingOptimizer()


class TestOptimizationSettings:
    """Tests for OptimizationSettings validation."""

    def test_defaults(self) -> None:
        settings = OptimizationSettings()
        assert settings.grouping_threshold == 12.0
        assert settings.standard_sizes == STANDARD_SIZES == (12, 16, 24, 32, 48, 64, 96)

    def test_negative_threshold_rejected(self) -> None:
        with pytest.raises(ValueError):
            OptimizationSettings(grouping_threshold=-1)

    def test_unsorted_ladder_rejected(self) -> None:
        with pytest.raises(ValueError):
            OptimizationSettings(standard_sizes=(24, 12))


class TestFindNearbyGroups:
    """Tests for greedy grouping."""

    def test_two_close_same_type_backings_group(
        self, optimizer: BackingOptimizer
    ) -> None:
        a = make_backing("a", 0, 0)
        b = make_backing("b", 6, 0)
        groups = optimizer.find_nearby_groups([a, b], 12)

        assert groups == [[a, b]]

    def test_singletons_discarded(self, optimizer: BackingOptimizer) -> None:
        a = make_backing("a", 0, 0)
        b = make_backing("b", 100, 0)
        assert optimizer.find_nearby_groups([a, b], 12) == []

    def test_different_types_never_group(self, optimizer: BackingOptimizer) -> None:
        a = make_backing("a", 0, 0)
        b = make_backing("b", 1, 0, backing_type=BackingType.LUMBER_2X4)
        assert optimizer.find_nearby_groups([a, b], 12) == []

    def test_threshold_is_strict(self, optimizer: BackingOptimizer) -> None:
        a = make_backing("a", 0, 0)
        b = make_backing("b", 12, 0)
        assert optimizer.find_nearby_groups([a, b], 12) == []

    def test_zero_threshold_never_merges(self, optimizer: BackingOptimizer) -> None:
        same_spot = [make_backing(f"b{i}", 0, 0) for i in range(3)]
        assert optimizer.find_nearby_groups(same_spot, 0) == []

    def test_distance_measured_from_representative(
        self, optimizer: BackingOptimizer
    ) -> None:
        """c is within 12 of b but not of a, so it is not chained in."""
        a = make_backing("a", 0, 0)
        b = make_backing("b", 10, 0)
        c = make_backing("c", 20, 0)
        groups = optimizer.find_nearby_groups([a, b, c], 12)

        assert [[p.id for p in g] for g in groups] == [["a", "b"]]

    def test_order_dependent(self, optimizer: BackingOptimizer) -> None:
        a = make_backing("a", 0, 0)
        b = make_backing("b", 10, 0)
        c = make_backing("c", 20, 0)
        groups = optimizer.find_nearby_groups([b, a, c], 12)

        assert [[p.id for p in g] for g in groups] == [["b", "a", "c"]]

    def test_uses_configured_threshold(self) -> None:
        optimizer = BackingOptimizer(OptimizationSettings(grouping_threshold=5))
        a = make_backing("a", 0, 0)
        b = make_backing("b", 6, 0)
        assert optimizer.find_nearby_groups([a, b]) == []

    def test_empty_input(self, optimizer: BackingOptimizer) -> None:
        assert optimizer.find_nearby_groups([]) == []


class TestCombine:
    """Tests for combine()."""

    def test_bounding_box(self, optimizer: BackingOptimizer) -> None:
        a = make_backing("a", 0, 0, width=6, height=2)
        b = make_backing("b", 6, 1, width=6, height=4, thickness=3.0, z=48)
        combined = optimizer.combine([a, b], placement_id="combined")

        assert combined.id == "combined"
        assert (combined.x, combined.y) == (0, 0)
        assert combined.width == 12
        assert combined.height == 5
        assert combined.dimensions.width == 12
        assert combined.dimensions.height == 5
        assert combined.dimensions.thickness == 3.0

    def test_first_member_supplies_metadata(self, optimizer: BackingOptimizer) -> None:
        a = make_backing("a", 0, 0, z=36, component_id="first")
        b = make_backing("b", 6, 0, z=60, component_id="second")
        combined = optimizer.combine([a, b])

        assert combined.component_id == "first"
        assert combined.backing_type == BackingType.LUMBER_2X6
        assert combined.location.z == 36
        assert combined.orientation == 0.0
        assert combined.status == PlacementStatus.USER_MODIFIED

    def test_covers_every_member(self, optimizer: BackingOptimizer) -> None:
        group = [
            make_backing("a", -3, 4, width=5, height=7),
            make_backing("b", 10, -2, width=2, height=3),
            make_backing("c", 1, 1, width=20, height=1),
        ]
        combined = optimizer.combine(group)

        for member in group:
            assert combined.x <= member.x
            assert combined.y <= member.y
            assert combined.x + combined.width >= member.x + member.width
            assert combined.y + combined.height >= member.y + member.height

    def test_generates_unique_ids(self, optimizer: BackingOptimizer) -> None:
        group = [make_backing("a"), make_backing("b", 1, 0)]
        assert optimizer.combine(group).id != optimizer.combine(group).id

    def test_empty_group_rejected(self, optimizer: BackingOptimizer) -> None:
        with pytest.raises(ValueError, match="empty"):
            optimizer.combine([])


class TestStandardSize:
    """Tests for standard_size() and material_waste()."""

    @pytest.mark.parametrize(
        "value,expected",
        [(6, 12), (12, 12), (12.5, 16), (30, 32), (96, 96), (100, 100)],
    )
    def test_round_up(self, optimizer: BackingOptimizer, value: float, expected: float) -> None:
        size = optimizer.standard_size(make_backing("a", width=value, height=value))
        assert size.width == expected
        assert size.height == expected

    def test_never_smaller_than_original(self, optimizer: BackingOptimizer) -> None:
        for value in (0.5, 11.9, 47, 63.2, 95, 120):
            size = optimizer.standard_size(make_backing("a", width=value, height=2))
            assert size.width >= value
            assert size.height >= 2

    def test_waste(self, optimizer: BackingOptimizer) -> None:
        placements = [make_backing("a", width=6, height=2), make_backing("b", width=12, height=12)]
        assert optimizer.material_waste(placements) == pytest.approx(144 - 12)

    def test_waste_is_non_negative(self, optimizer: BackingOptimizer) -> None:
        placements = [make_backing("a", width=150, height=100)]
        assert optimizer.material_waste(placements) == 0
        assert optimizer.material_waste([]) == 0


class TestSuggestions:
    """Tests for suggest_optimizations() and combine_nearby()."""

    def test_combine_then_standardize(self, optimizer: BackingOptimizer) -> None:
        a = make_backing("a", 0, 0)
        b = make_backing("b", 6, 0)
        suggestions = optimizer.suggest_optimizations([a, b])

        assert [s.type for s in suggestions] == [
            SuggestionType.COMBINE,
            SuggestionType.STANDARDIZE,
            SuggestionType.STANDARDIZE,
        ]
        combine = suggestions[0]
        assert combine.items == ("a", "b")
        assert combine.description == "Combine 2 backings into single piece"
        assert combine.savings.material == pytest.approx(2.4)
        assert combine.savings.labor == 15

    def test_standardize_description(self, optimizer: BackingOptimizer) -> None:
        suggestions = optimizer.suggest_optimizations([make_backing("a", width=30, height=14.5)])

        assert len(suggestions) == 1
        assert suggestions[0].description == 'Standardize to 32"×16"'
        assert suggestions[0].items == ("a",)
        assert suggestions[0].savings.material == 0
        assert suggestions[0].savings.labor == 10

    def test_standard_sized_backing_has_no_suggestion(
        self, optimizer: BackingOptimizer
    ) -> None:
        assert optimizer.suggest_optimizations([make_backing("a", width=24, height=12)]) == []

    def test_combine_labor_scales_with_group(self, optimizer: BackingOptimizer) -> None:
        group = [make_backing(f"b{i}", i, 0, width=12, height=12) for i in range(4)]
        suggestions = optimizer.suggest_optimizations(group)

        assert len(suggestions) == 1
        assert suggestions[0].savings.labor == 45
        assert suggestions[0].savings.material == pytest.approx(4 * 144 * 0.1)

    def test_combine_nearby_zones(self, optimizer: BackingOptimizer) -> None:
        placements = [
            make_backing("a", 0, 0, component_id="tv"),
            make_backing("b", 6, 0, component_id="shelf"),
            make_backing("c", 200, 0),
        ]
        zones = optimizer.combine_nearby(placements)

        assert len(zones) == 1
        zone = zones[0]
        assert zone.id == "zone-0"
        assert zone.items == ("a", "b")
        assert zone.component_ids == ("tv", "shelf")
        assert zone.combined.width == 12
        assert zone.savings.labor == 15
