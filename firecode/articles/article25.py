"""Art. 25: evacuation equipment.

Judged floor by floor, skipping the 11th storey and above.  Whether a floor
needs evacuation equipment also depends on the uses below it, the number of
direct staircases and the structure of the 2nd floor, none of which the
profile captures, so every outcome is a warning.
"""

from __future__ import annotations

from collections.abc import Callable

from firecode.judgement.result import JudgementResult, warning
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext
from firecode.models.building import Floor

ITEM3_USES = ("01", "02", "03", "04", "07", "08", "09", "10", "11")
ITEM4_USES = ("12", "15")
# Uses for which item 5 already applies from the 2nd floor
ITEM5_FROM_2ND_USES = ("02", "03")

MAX_LEVEL = 11

FloorCheck = Callable[[RuleContext, Floor], JudgementResult | None]


def _from_level(floor: Floor, level: int) -> bool:
    return floor.is_basement or floor.level >= level


def _tiered(
    ctx: RuleContext,
    floor: Floor,
    item: int,
    description: str,
    high: int,
    high_note: str,
    low: int,
    low_note: str,
) -> JudgementResult | None:
    capacity = floor.capacity
    if capacity >= high:
        note = high_note
        limit = high
    elif capacity >= low:
        note = low_note
        limit = low
    else:
        return None
    return warning(
        f"[Review] Floor {floor.label} of {description} has an occupant capacity of {limit} or "
        f"more. {note}",
        ctx.cite(f"Art. 25 para. 1 item {item}"),
    )


def check_item1(ctx: RuleContext, floor: Floor) -> JudgementResult | None:
    if not ctx.matches(["06"]) or not _from_level(floor, 2):
        return None
    return _tiered(
        ctx, floor, 1, "an item (6) occupancy",
        20, "Evacuation equipment is required even without specified uses on the floors below.",
        10, "Evacuation equipment is required if the floors below contain specified uses.",
    )


def check_item2(ctx: RuleContext, floor: Floor) -> JudgementResult | None:
    if not ctx.matches(["05"]) or not _from_level(floor, 2):
        return None
    return _tiered(
        ctx, floor, 2, "an item (5) occupancy",
        30, "Evacuation equipment is required even without specified uses on the floors below.",
        10, "Evacuation equipment is required if the floors below contain specified uses.",
    )


def check_item3(ctx: RuleContext, floor: Floor) -> JudgementResult | None:
    if ctx.matches(ITEM3_USES) and _from_level(floor, 2) and floor.capacity >= 50:
        return warning(
            f"[Review] Floor {floor.label} has an occupant capacity of 50 or more. Evacuation "
            "equipment is required unless the 2nd floor is of fire-resistant construction.",
            ctx.cite("Art. 25 para. 1 item 3"),
        )
    return None


def check_item4(ctx: RuleContext, floor: Floor) -> JudgementResult | None:
    if not ctx.matches(ITEM4_USES) or not _from_level(floor, 3):
        return None
    return _tiered(
        ctx, floor, 4, "an item (12) or (15) occupancy",
        150, "Evacuation equipment is required even if the floor is not windowless.",
        100, "Evacuation equipment is required if the floor is windowless.",
    )


def check_item5(ctx: RuleContext, floor: Floor) -> JudgementResult | None:
    if not floor.is_ground or floor.capacity < 10:
        return None
    first_level = 2 if ctx.matches(ITEM5_FROM_2ND_USES) else 3
    if floor.level >= first_level:
        return warning(
            f"[Review] Floor {floor.label} has an occupant capacity of 10 or more. Evacuation "
            "equipment is required if there is at most one direct staircase to the ground.",
            ctx.cite("Art. 25 para. 1 item 5"),
        )
    return None


FLOOR_CHECKS: tuple[FloorCheck, ...] = (check_item1, check_item2, check_item3, check_item4, check_item5)


def check_floors(ctx: RuleContext) -> JudgementResult | None:
    """Return the first applicable item on the first applicable floor."""
    for floor in ctx.profile.floors:
        if floor.level >= MAX_LEVEL:
            continue
        for check in FLOOR_CHECKS:
            result = check(ctx, floor)
            if result is not None:
                return result
    return None


ARTICLE_25 = ArticleRuleModule(
    article=ArticleId.ART_25,
    equipment="Evacuation equipment",
    rules=(check_floors,),
    decomposes=True,
    not_required_message="The building meets none of the conditions for evacuation equipment.",
)
