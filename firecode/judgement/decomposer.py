"""Composite-use decomposition (the Art. 9 deeming provision).

A composite-use building is judged once as a whole and then once per
component use, as if each component use were its own building.  Component
areas are summed across floors per use code before any threshold is
compared, and each sub-profile keeps one floor slice per floor the use
occupies, so floor-based rules (basement area, windowless area, per-floor
capacity) work on sub-profiles unchanged.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from firecode.config import DEEMING_SUFFIX
from firecode.judgement.multiplier import area_multiplier
from firecode.judgement.result import JudgementResult
from firecode.judgement.rules import ArticleRuleModule, RuleContext
from firecode.models.building import BuildingProfile, Floor, OccupancyFeatures
from firecode.uses.catalog import UseCatalog
from firecode.uses.codes import code_matches

logger = logging.getLogger(__name__)

# Ground floors at this level and above count as upper floors
UPPER_FLOOR_LEVEL = 4


@dataclass
class ComponentUseTotals:
    """Running totals for one component use code across all floors."""

    total_area: float = 0
    basement_area: float = 0
    windowless_area: float = 0
    upper_floor_area: float = 0
    occupant_capacity: int = 0
    floors: list[Floor] = field(default_factory=list)
    """One slice per floor the use occupies."""


def accumulate_component_uses(floors: tuple[Floor, ...] | list[Floor]) -> dict[str, ComponentUseTotals]:
    """Group component uses by use code, summing their areas across floors.

    Entries without a use code or without a positive floor area are skipped;
    an occupant capacity given on such an entry is dropped with it.
    The result preserves the order in which use codes first appear.
    """
    totals: dict[str, ComponentUseTotals] = {}
    for floor in floors:
        for cu in floor.component_uses:
            if not cu.use_code:
                continue
            if not cu.floor_area or cu.floor_area <= 0:
                continue

            entry = totals.setdefault(cu.use_code, ComponentUseTotals())
            area = cu.floor_area
            capacity = cu.occupant_capacity or 0
            entry.total_area += area
            entry.occupant_capacity += capacity
            if floor.is_basement:
                entry.basement_area += area
            if floor.is_windowless:
                entry.windowless_area += area
            if floor.is_ground and floor.level >= UPPER_FLOOR_LEVEL:
                entry.upper_floor_area += area
            entry.floors.append(
                Floor(
                    level=floor.level,
                    kind=floor.kind,
                    floor_area=area,
                    occupant_capacity=capacity,
                    is_windowless=floor.is_windowless,
                )
            )
    return totals


def synthesize_sub_profile(
    profile: BuildingProfile,
    use_code: str,
    totals: ComponentUseTotals,
) -> BuildingProfile:
    """Build the profile of one component use of *profile*.

    Structural attributes and floor counts are physically shared and carried
    over.  Occupancy features cannot be attributed to a tenant and are reset.
    """
    return profile.model_copy(
        update={
            "use_code": use_code,
            "total_floor_area": totals.total_area,
            "total_capacity": totals.occupant_capacity,
            "floors": tuple(totals.floors),
            "features": OccupancyFeatures(),
        }
    )


def decompose(
    module: ArticleRuleModule,
    profile: BuildingProfile,
    catalog: UseCatalog,
) -> list[JudgementResult]:
    """Judge every component use of a composite building with *module*.

    Returns every positive sub-result, each message prefixed with the name
    of the component use it concerns.  Component uses are not decomposed
    further even when their own code is composite.
    """
    multiplier = area_multiplier(profile.structure_type, profile.finish_type)
    results: list[JudgementResult] = []

    for use_code, totals in accumulate_component_uses(profile.floors).items():
        sub_profile = synthesize_sub_profile(profile, use_code, totals)
        display = catalog.display_name_for(use_code)
        ctx = RuleContext(
            profile=sub_profile,
            use_display=display,
            area_multiplier=multiplier,
            is_sub_evaluation=True,
            citation_suffix=DEEMING_SUFFIX,
        )
        for result in module.judge(ctx):
            if not result.is_positive:
                continue
            results.append(
                result.model_copy(
                    update={
                        "message": f'For the "{display}" part of the composite-use building: {result.message}'
                    }
                )
            )

    logger.debug(
        "Art. %s: %d positive sub-results from composite use %s",
        module.article.value,
        len(results),
        profile.use_code,
    )
    return results


def component_use_area(
    floors: tuple[Floor, ...] | list[Floor],
    prefixes: tuple[str, ...] | list[str],
    *,
    basement_only: bool = False,
) -> float:
    """Sum the component-use area of codes matching *prefixes*.

    Used by whole-building rules that depend on how much of a composite
    building is given over to particular uses.
    """
    total = 0.0
    for use_code, totals in accumulate_component_uses(floors).items():
        if code_matches(use_code, prefixes):
            total += totals.basement_area if basement_only else totals.total_area
    return total
