"""Tests for the building data model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from firecode.models import (
    BuildingProfile,
    ComponentUse,
    FloorKind,
    Floor,
    OccupancyFeatures,
    ParkingInfo,
)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def profile() -> BuildingProfile:
    """Five-storey building with two basements and one windowless floor."""
    return BuildingProfile(
        use_code="15",
        total_floor_area=2300,
        ground_floors=5,
        basement_floors=2,
        total_capacity=180,
        floors=(
            Floor(level=2, kind=FloorKind.BASEMENT, floor_area=150, occupant_capacity=5),
            Floor(level=1, kind=FloorKind.BASEMENT, floor_area=250, occupant_capacity=15),
            Floor(level=1, floor_area=400, occupant_capacity=40),
            Floor(level=2, floor_area=400, occupant_capacity=30, is_windowless=True),
            Floor(level=3, floor_area=400, occupant_capacity=30),
            Floor(level=4, floor_area=350, occupant_capacity=30),
            Floor(level=5, floor_area=350, occupant_capacity=30),
        ),
    )


# ---------------------------------------------------------------------------
# Floor
# ---------------------------------------------------------------------------


class TestFloor:
    def test_defaults(self) -> None:
        floor = Floor(level=1)
        assert floor.is_ground
        assert not floor.is_basement
        assert floor.area == 0
        assert floor.capacity == 0
        assert floor.component_uses == ()

    def test_labels(self) -> None:
        assert Floor(level=3).label == "3F"
        assert Floor(level=1, kind=FloorKind.BASEMENT).label == "B1"

    def test_kind_from_string(self) -> None:
        assert Floor(level=1, kind="basement").is_basement

    def test_frozen(self) -> None:
        floor = Floor(level=1, floor_area=100)
        with pytest.raises(ValidationError):
            floor.floor_area = 200

    def test_invalid_level_rejected(self) -> None:
        with pytest.raises(ValidationError):
            Floor(level="first")

    def test_component_uses_accept_dicts(self) -> None:
        floor = Floor(level=1, component_uses=[{"use_code": "04", "floor_area": 100}])
        assert floor.component_uses == (ComponentUse(use_code="04", floor_area=100),)


# ---------------------------------------------------------------------------
# BuildingProfile derived values
# ---------------------------------------------------------------------------


class TestBuildingProfile:
    def test_empty_profile_coalesces_to_zero(self) -> None:
        empty = BuildingProfile()
        assert empty.use_code is None
        assert empty.total_area == 0
        assert empty.capacity == 0
        assert empty.basement_area == 0
        assert empty.first_two_floors_area() == 0

    def test_basement_area(self, profile: BuildingProfile) -> None:
        assert profile.basement_area == 400

    def test_windowless_area(self, profile: BuildingProfile) -> None:
        assert profile.windowless_area == 400

    def test_basement_or_windowless(self, profile: BuildingProfile) -> None:
        assert profile.basement_or_windowless_area == 800
        assert profile.basement_or_windowless_capacity == 50
        assert profile.has_basement_or_windowless_floors

    def test_upper_floor_area(self, profile: BuildingProfile) -> None:
        assert profile.upper_floor_area(4) == 700
        assert profile.upper_floor_area(3) == 1100

    def test_storeys_above_ground(self, profile: BuildingProfile) -> None:
        assert profile.storeys_above_ground == 5

    def test_ground_floor_lookup(self, profile: BuildingProfile) -> None:
        floor = profile.ground_floor(1)
        assert floor is not None
        assert floor.is_ground
        assert floor.area == 400
        assert profile.ground_floor(9) is None

    def test_first_two_floors_area(self, profile: BuildingProfile) -> None:
        assert profile.first_two_floors_area() == 800

    def test_first_floor_only_for_single_storey(self) -> None:
        single = BuildingProfile(
            ground_floors=1,
            floors=(Floor(level=1, floor_area=300), Floor(level=2, floor_area=999)),
        )
        assert single.first_two_floors_area() == 300

    def test_frozen(self, profile: BuildingProfile) -> None:
        with pytest.raises(ValidationError):
            profile.use_code = "14"


class TestDesignatedCombustibles:
    def test_none_stored(self) -> None:
        assert not BuildingProfile().stores_designated_combustibles_over(1)

    def test_threshold_is_inclusive(self) -> None:
        profile = BuildingProfile(features=OccupancyFeatures(designated_combustibles_multiple=750))
        assert profile.stores_designated_combustibles_over(750)
        assert profile.stores_designated_combustibles_over(500)
        assert not profile.stores_designated_combustibles_over(1000)


class TestFeatures:
    def test_parking_default(self) -> None:
        assert OccupancyFeatures().parking == ParkingInfo()
        assert not OccupancyFeatures().parking.exists

    def test_nested_dict_input(self) -> None:
        features = OccupancyFeatures(parking={"exists": True, "rooftop_area": 300})
        assert features.parking.exists
        assert features.parking.rooftop_area == 300
