"""Tests for composite-use decomposition."""

from __future__ import annotations

from collections import defaultdict

import pytest

from firecode.articles.article11 import ARTICLE_11
from firecode.articles.article12 import ARTICLE_12, check_item3
from firecode.articles.article25 import ARTICLE_25
from firecode.config import DEEMING_SUFFIX
from firecode.judgement.decomposer import (
    accumulate_component_uses,
    component_use_area,
    decompose,
    synthesize_sub_profile,
)
from firecode.judgement.evaluator import evaluate_module, main_context
from firecode.judgement.rules import RuleContext
from firecode.models import (
    BuildingProfile,
    ComponentUse,
    FireResistance,
    Floor,
    FloorKind,
    OccupancyFeatures,
    StructureType,
)
from firecode.uses import TableUseCatalog


def _floor(level: int, *uses: tuple, kind: FloorKind = FloorKind.GROUND, windowless: bool = False) -> Floor:
    components = tuple(ComponentUse(use_code=u[0], floor_area=u[1], occupant_capacity=u[2] if len(u) > 2 else None) for u in uses)
    area = sum((u[1] or 0) for u in uses if (u[1] or 0) > 0)
    return Floor(level=level, kind=kind, floor_area=area, is_windowless=windowless, component_uses=components)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def catalog() -> TableUseCatalog:
    return TableUseCatalog()


@pytest.fixture
def composite() -> BuildingProfile:
    """Composite building with shops, restaurants, offices and a hotel."""
    return BuildingProfile(
        use_code="16_i",
        total_floor_area=1770,
        ground_floors=4,
        basement_floors=1,
        structure_type=StructureType.B,
        fire_resistance=FireResistance.FIRE_RESISTANT,
        has_special_combustible_structure=True,
        features=OccupancyFeatures(designated_combustibles_multiple=800, has_lodging=True),
        floors=(
            _floor(1, ("04", 200), ("03_ro", 100), kind=FloorKind.BASEMENT),
            _floor(1, ("04", 300), ("15", 250)),
            _floor(2, ("15", 250), (None, 100), ("04", 0), ("04", -5), ("", 40), windowless=True),
            _floor(4, ("05_i", 120, 20)),
        ),
    )


def _reference_areas(profile: BuildingProfile) -> dict[str, float]:
    areas: dict[str, float] = defaultdict(float)
    for floor in profile.floors:
        for cu in floor.component_uses:
            if cu.use_code and cu.floor_area and cu.floor_area > 0:
                areas[cu.use_code] += cu.floor_area
    return dict(areas)


# ---------------------------------------------------------------------------
# Accumulation
# ---------------------------------------------------------------------------


class TestAccumulate:
    def test_conservation(self, composite: BuildingProfile) -> None:
        totals = accumulate_component_uses(composite.floors)
        assert {code: t.total_area for code, t in totals.items()} == _reference_areas(composite)

    def test_first_appearance_order(self, composite: BuildingProfile) -> None:
        assert list(accumulate_component_uses(composite.floors)) == ["04", "03_ro", "15", "05_i"]

    def test_floor_breakdown(self, composite: BuildingProfile) -> None:
        totals = accumulate_component_uses(composite.floors)
        assert totals["04"].total_area == 500
        assert totals["04"].basement_area == 200
        assert totals["15"].windowless_area == 250
        assert totals["05_i"].upper_floor_area == 120
        assert totals["05_i"].occupant_capacity == 20

    def test_malformed_entries_skipped(self) -> None:
        floors = (
            _floor(1, (None, 100), ("", 50), ("04", 0), ("04", -10), ("04", None), ("12_i", 0, 30)),
        )
        assert accumulate_component_uses(floors) == {}

    def test_capacity_without_area_dropped(self, catalog: TableUseCatalog) -> None:
        floors = (
            _floor(2, ("06_ro_1", None, 40)),
            _floor(3, ("06_ro_1", 80, 5), ("06_ro_1", 0, 30)),
        )
        totals = accumulate_component_uses(floors)
        assert totals["06_ro_1"].occupant_capacity == 5
        assert [f.level for f in totals["06_ro_1"].floors] == [3]

        profile = BuildingProfile(use_code="16_ro", floors=floors)
        assert decompose(ARTICLE_25, profile, catalog) == []

    def test_one_slice_per_floor(self, composite: BuildingProfile) -> None:
        slices = accumulate_component_uses(composite.floors)["04"].floors
        assert [(f.kind, f.level, f.area) for f in slices] == [
            (FloorKind.BASEMENT, 1, 200),
            (FloorKind.GROUND, 1, 300),
        ]

    def test_component_use_area(self, composite: BuildingProfile) -> None:
        assert component_use_area(composite.floors, ["04", "03"]) == 600
        assert component_use_area(composite.floors, ["04", "03"], basement_only=True) == 300
        assert component_use_area(composite.floors, ["99"]) == 0


# ---------------------------------------------------------------------------
# Sub-profile synthesis
# ---------------------------------------------------------------------------


class TestSynthesize:
    def test_sub_profile(self, composite: BuildingProfile) -> None:
        totals = accumulate_component_uses(composite.floors)["04"]
        sub = synthesize_sub_profile(composite, "04", totals)
        assert sub.use_code == "04"
        assert sub.total_area == 500
        assert sub.basement_area == 200

    def test_structure_shared(self, composite: BuildingProfile) -> None:
        totals = accumulate_component_uses(composite.floors)["15"]
        sub = synthesize_sub_profile(composite, "15", totals)
        assert sub.structure_type == StructureType.B
        assert sub.fire_resistance == FireResistance.FIRE_RESISTANT
        assert sub.has_special_combustible_structure
        assert sub.ground_floors == 4

    def test_features_reset(self, composite: BuildingProfile) -> None:
        totals = accumulate_component_uses(composite.floors)["05_i"]
        sub = synthesize_sub_profile(composite, "05_i", totals)
        assert sub.features == OccupancyFeatures()
        assert not sub.stores_designated_combustibles_over(1)

    def test_slices_carry_no_component_uses(self, composite: BuildingProfile) -> None:
        for code, totals in accumulate_component_uses(composite.floors).items():
            sub = synthesize_sub_profile(composite, code, totals)
            assert accumulate_component_uses(sub.floors) == {}

    def test_source_profile_untouched(self, composite: BuildingProfile) -> None:
        before = composite.model_dump()
        totals = accumulate_component_uses(composite.floors)["04"]
        synthesize_sub_profile(composite, "04", totals)
        assert composite.model_dump() == before


# ---------------------------------------------------------------------------
# Decomposed evaluation
# ---------------------------------------------------------------------------


def _assembly_composite(*floors: Floor) -> BuildingProfile:
    return BuildingProfile(use_code="16_i", total_floor_area=2000, ground_floors=len(floors), floors=floors)


class TestDecompose:
    def test_areas_summed_across_floors(self, catalog: TableUseCatalog) -> None:
        profile = _assembly_composite(_floor(1, ("01_i", 300)), _floor(2, ("01_i", 250)))
        result = evaluate_module(ARTICLE_11, profile, catalog)
        assert result.required is True
        assert result.basis == f"Art. 11 para. 1 item 1{DEEMING_SUFFIX}"
        assert result.message.startswith('For the "(1)i Theatre')

    def test_per_floor_area_alone_does_not_trigger(self, catalog: TableUseCatalog) -> None:
        profile = _assembly_composite(_floor(1, ("01_i", 300)), _floor(2, ("01_i", 150)))
        assert evaluate_module(ARTICLE_11, profile, catalog).required is False

    def test_distinct_uses_not_combined(self, catalog: TableUseCatalog) -> None:
        profile = _assembly_composite(_floor(1, ("01_i", 300), ("01_ro", 250)))
        assert evaluate_module(ARTICLE_11, profile, catalog).required is False

    def test_each_component_use_collected(self, catalog: TableUseCatalog) -> None:
        profile = _assembly_composite(
            _floor(1, ("01_i", 500), ("04", 700)),
        )
        result = evaluate_module(ARTICLE_11, profile, catalog)
        assert result.required is True
        assert result.message.count("- For the") == 2
        assert result.basis.count(DEEMING_SUFFIX) == 2

    def test_negative_sub_results_dropped(self, composite: BuildingProfile, catalog: TableUseCatalog) -> None:
        results = decompose(ARTICLE_11, composite, catalog)
        assert all(r.is_positive for r in results)

    def test_nested_composite_not_decomposed(self, catalog: TableUseCatalog) -> None:
        profile = _assembly_composite(_floor(1, ("16_ro", 800)))
        results = decompose(ARTICLE_11, profile, catalog)
        assert results == []

    def test_whole_building_rule_disabled_on_sub_evaluation(self, catalog: TableUseCatalog) -> None:
        profile = BuildingProfile(use_code="04", ground_floors=11, total_floor_area=100)
        ctx = main_context(profile, catalog)
        assert check_item3(ctx) is not None
        sub_ctx = RuleContext(profile=profile, use_display="(4)", is_sub_evaluation=True)
        assert check_item3(sub_ctx) is None

    def test_decompose_skips_whole_building_rules(self, catalog: TableUseCatalog) -> None:
        profile = BuildingProfile(
            use_code="16_i",
            ground_floors=11,
            floors=(_floor(1, ("04", 100)),),
        )
        assert decompose(ARTICLE_12, profile, catalog) == []

    def test_non_decomposing_module_ignores_components(self, catalog: TableUseCatalog) -> None:
        profile = _assembly_composite(_floor(1, ("16_2", 2000)))
        assert evaluate_module(ARTICLE_12, profile, catalog).required is False
