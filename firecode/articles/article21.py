"""Art. 21: automatic fire alarm equipment.

Items 1 to 15 are checked in statutory order; the first applicable item wins.
"""

from __future__ import annotations

from firecode.judgement.result import JudgementResult, required, warning
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext
from firecode.models.building import Floor

ITEM1_I_USES = ("02_ni", "05_i", "06_i_1", "06_i_2", "06_i_3", "06_ro", "13_ro", "17")
ITEM3_I_USES = ("01", "02_i", "02_ro", "02_ha", "03", "04", "06_i_4", "06_ni", "16_i", "16_2")
ITEM4_USES = ("05_ro", "07", "08", "09_ro", "10", "12", "13_i", "14")
ITEM6_USES = ("11", "15")
ITEM7_USES = ("01", "02", "03", "04", "05_i", "06", "09_i", "16_i")
ITEM10_USES = ("02_i", "02_ro", "02_ha", "03")

_REQUIRED = "automatic fire alarm equipment is required"


def _floor_reason(floor: Floor) -> str:
    if floor.is_windowless:
        return "windowless"
    if floor.is_basement:
        return "basement"
    return "3rd floor or above"


def check_item1(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(ITEM1_I_USES):
        return required(
            f"Use ({ctx.use_display}) falls under item 1, so {_REQUIRED}.",
            ctx.cite("Art. 21 para. 1 item 1(i)"),
        )
    if ctx.matches(["06_ha"]) and ctx.profile.features.has_lodging:
        return required(
            f"Use ({ctx.use_display}) with lodging facilities, so {_REQUIRED}.",
            ctx.cite("Art. 21 para. 1 item 1(ro)"),
        )
    return None


def check_item2(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(["09_i"]) and ctx.total_area >= 200:
        return required(
            f"Use ({ctx.use_display}) with a total floor area of 200 m2 or more, so {_REQUIRED}.",
            ctx.cite("Art. 21 para. 1 item 2"),
        )
    return None


def check_item3(ctx: RuleContext) -> JudgementResult | None:
    if ctx.total_area < 300:
        return None
    if ctx.matches(ITEM3_I_USES):
        return required(
            f"Use ({ctx.use_display}) with a total floor area of 300 m2 or more, so {_REQUIRED}.",
            ctx.cite("Art. 21 para. 1 item 3(i)"),
        )
    if ctx.matches(["06_ha"]) and not ctx.profile.features.has_lodging:
        return required(
            f"Use ({ctx.use_display}) without lodging facilities and a total floor area of "
            f"300 m2 or more, so {_REQUIRED}.",
            ctx.cite("Art. 21 para. 1 item 3(ro)"),
        )
    return None


def check_item4(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(ITEM4_USES) and ctx.total_area >= 500:
        return required(
            f"Use ({ctx.use_display}) with a total floor area of 500 m2 or more, so {_REQUIRED}.",
            ctx.cite("Art. 21 para. 1 item 4"),
        )
    return None


def check_item5(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(["16_3"]) and ctx.total_area >= 500:
        return warning(
            "[Review] Item (16-3) building with a total floor area of 500 m2 or more. Alarms are "
            "required if the parts used for items (1)-(4), (5)i, (6) or (9)i total 300 m2 or more.",
            ctx.cite("Art. 21 para. 1 item 5"),
        )
    return None


def check_item6(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(ITEM6_USES) and ctx.total_area >= 1000:
        return required(
            f"Use ({ctx.use_display}) with a total floor area of 1000 m2 or more, so {_REQUIRED}.",
            ctx.cite("Art. 21 para. 1 item 6"),
        )
    return None


def check_item7(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(ITEM7_USES) and ctx.profile.features.is_specified_one_staircase:
        return required(
            f"The building is a specified one-staircase building, so {_REQUIRED}.",
            ctx.cite("Art. 21 para. 1 item 7"),
        )
    return None


def check_item8(ctx: RuleContext) -> JudgementResult | None:
    if ctx.profile.stores_designated_combustibles_over(500):
        return required(
            "Designated combustibles of 500 times the standard quantity or more are stored or "
            f"handled, so {_REQUIRED}.",
            ctx.cite("Art. 21 para. 1 item 8"),
        )
    return None


def check_item9(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(["16_2"]):
        return warning(
            "[Review] In an underground arcade, alarms are required in the parts used for items "
            "(2)ni, (5)i, (6)i(1)-(3), (6)ro and (6)ha with lodging.",
            ctx.cite("Art. 21 para. 1 item 9"),
        )
    return None


def check_item10(ctx: RuleContext) -> JudgementResult | None:
    floor = next(
        (f for f in ctx.profile.floors if f.area >= 100 and (f.is_basement or f.is_windowless)),
        None,
    )
    if floor is None:
        return None
    if ctx.matches(ITEM10_USES):
        return required(
            f"Floor {floor.label} ({_floor_reason(floor)}) has a floor area of 100 m2 or more, "
            f"so {_REQUIRED}.",
            ctx.cite("Art. 21 para. 1 item 10"),
        )
    if ctx.matches(["16_i"]):
        return warning(
            "[Review] Alarms are required if the basement or windowless parts used for items "
            "(2) or (3) total 100 m2 or more.",
            ctx.cite("Art. 21 para. 1 item 10"),
        )
    return None


def check_item11(ctx: RuleContext) -> JudgementResult | None:
    for floor in ctx.profile.floors:
        if floor.area < 300:
            continue
        if floor.is_basement or floor.is_windowless or (floor.is_ground and floor.level >= 3):
            return required(
                f"Floor {floor.label} ({_floor_reason(floor)}) has a floor area of 300 m2 or "
                f"more, so {_REQUIRED}.",
                ctx.cite("Art. 21 para. 1 item 11"),
            )
    return None


def check_item12(ctx: RuleContext) -> JudgementResult | None:
    features = ctx.profile.features
    if not features.has_road_part:
        return None
    if (features.road_part_rooftop_area or 0) >= 600 or (features.road_part_other_area or 0) >= 400:
        return required(
            f"The road part reaches the area thresholds, so {_REQUIRED}.",
            ctx.cite("Art. 21 para. 1 item 12"),
        )
    return None


def check_item13(ctx: RuleContext) -> JudgementResult | None:
    parking = ctx.profile.features.parking
    if not parking.exists or parking.can_all_vehicles_exit_simultaneously:
        return None
    # Only basement and 2nd-floor-and-above parking counts here
    if (parking.basement_or_upper_area or 0) >= 200:
        return required(
            "Basement or upper-floor parking of 200 m2 or more from which vehicles cannot all "
            f"leave at once, so {_REQUIRED}.",
            ctx.cite("Art. 21 para. 1 item 13"),
        )
    return None


def check_item14(ctx: RuleContext) -> JudgementResult | None:
    if any(f.is_ground and f.level >= 11 for f in ctx.profile.floors):
        return required(
            f"The building has floors at the 11th storey or above, so {_REQUIRED}.",
            ctx.cite("Art. 21 para. 1 item 14"),
        )
    return None


def check_item15(ctx: RuleContext) -> JudgementResult | None:
    if ctx.profile.features.has_telecom_room_over_500:
        return required(
            f"A telecommunication equipment room of 500 m2 or more, so {_REQUIRED}.",
            ctx.cite("Art. 21 para. 1 item 15"),
        )
    return None


ARTICLE_21 = ArticleRuleModule(
    article=ArticleId.ART_21,
    equipment="Automatic fire alarm equipment",
    rules=(
        check_item1,
        check_item2,
        check_item3,
        check_item4,
        check_item5,
        check_item6,
        check_item7,
        check_item8,
        check_item9,
        check_item10,
        check_item11,
        check_item12,
        check_item13,
        check_item14,
        check_item15,
    ),
    not_required_message="The building meets none of the conditions for automatic fire alarm equipment.",
)
