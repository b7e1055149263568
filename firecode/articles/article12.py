"""Art. 12: sprinkler equipment."""

from __future__ import annotations

from firecode.judgement.result import JudgementResult, required, warning
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext
from firecode.models.building import StageLocation
from firecode.uses.codes import SPECIFIED_USES

HIGH_RISE_USES = SPECIFIED_USES + ("16_i",)
AREA_3000_USES = ("04", "06_i_1", "06_i_2", "06_i_3")
AREA_6000_USES = ("01", "02", "03", "05_i", "06", "09_i")

_EQUIPMENT = "sprinkler equipment is required"


def check_item3(ctx: RuleContext) -> JudgementResult | None:
    if ctx.is_sub_evaluation:
        return None
    if ctx.profile.ground_floors >= 11 and ctx.matches(HIGH_RISE_USES):
        return required(
            f"The building has 11 or more storeys above ground and its use ({ctx.use_display}) "
            f"falls under item 3, so {_EQUIPMENT}.",
            ctx.cite("Art. 12 para. 1 item 3"),
        )
    return None


def check_item12(ctx: RuleContext) -> JudgementResult | None:
    if any(f.is_ground and f.level >= 11 for f in ctx.profile.floors):
        return required(
            f"The building has floors at the 11th storey or above, so {_EQUIPMENT} on those floors.",
            ctx.cite("Art. 12 para. 1 item 12"),
        )
    return None


def check_item1(ctx: RuleContext) -> JudgementResult | None:
    profile = ctx.profile
    if profile.has_fire_suppressing_structure:
        return None
    features = profile.features
    reason = f"Use ({ctx.use_display}) without a fire-spread suppressing structure"

    if ctx.matches(["06_i_1", "06_i_2"]):
        if ctx.matches(["06_i_2"]) and not features.has_beds:
            return None
        return required(f"{reason}, so {_EQUIPMENT}.", ctx.cite("Art. 12 para. 1 item 1(i)"))

    if ctx.matches(["06_ro_1", "06_ro_3"]):
        return required(f"{reason}, so {_EQUIPMENT}.", ctx.cite("Art. 12 para. 1 item 1(ro)"))

    if ctx.matches(["06_ro_2", "06_ro_4", "06_ro_5"]):
        if features.is_care_dependent_occupancy:
            return required(
                f"{reason} mainly houses persons who cannot evacuate without assistance, so {_EQUIPMENT}.",
                ctx.cite("Art. 12 para. 1 item 1(ha)"),
            )
        if ctx.total_area >= 275:
            return required(
                f"{reason} has a total floor area of 275 m2 or more, so {_EQUIPMENT}.",
                ctx.cite("Art. 12 para. 1 item 1(ha)"),
            )
    return None


def check_item2(ctx: RuleContext) -> JudgementResult | None:
    features = ctx.profile.features
    if not (ctx.matches(["01"]) and features.has_stage_area):
        return None
    stage_area = features.stage_area or 0
    if features.stage_location == StageLocation.RESTRICTED and stage_area >= 300:
        return required(
            "A stage on a basement, windowless or 4th-or-higher floor has an area of 300 m2 or more, "
            f"so {_EQUIPMENT}.",
            ctx.cite("Art. 12 para. 1 item 2"),
        )
    if features.stage_location == StageLocation.OTHER and stage_area >= 500:
        return required(
            f"The stage area is 500 m2 or more, so {_EQUIPMENT}.",
            ctx.cite("Art. 12 para. 1 item 2"),
        )
    return None


def check_item4(ctx: RuleContext) -> JudgementResult | None:
    profile = ctx.profile
    has_basement = any(f.is_basement for f in profile.floors)
    storeys = profile.ground_floors + (1 if has_basement else 0)
    if storeys <= 1:
        return None
    if ctx.matches(AREA_3000_USES) and ctx.total_area >= 3000:
        return required(
            f"A multi-storey building with use ({ctx.use_display}) has a total floor area of "
            f"3000 m2 or more, so {_EQUIPMENT}.",
            ctx.cite("Art. 12 para. 1 item 4"),
        )
    if ctx.matches(AREA_6000_USES) and not ctx.matches(AREA_3000_USES) and ctx.total_area >= 6000:
        return required(
            f"A multi-storey building has a total floor area of 6000 m2 or more, so {_EQUIPMENT}.",
            ctx.cite("Art. 12 para. 1 item 4"),
        )
    return None


def check_item5(ctx: RuleContext) -> JudgementResult | None:
    features = ctx.profile.features
    if not (ctx.matches(["14"]) and features.is_rack_warehouse):
        return None
    # Ceiling height must exceed 10 m
    if (features.ceiling_height or 0) > 10 and ctx.total_area >= 700:
        return required(
            "A rack warehouse with a ceiling higher than 10 m and a total floor area of 700 m2 or "
            f"more, so {_EQUIPMENT}.",
            ctx.cite("Art. 12 para. 1 item 5"),
        )
    return None


def check_item8(ctx: RuleContext) -> JudgementResult | None:
    if ctx.is_sub_evaluation:
        return None
    if ctx.profile.stores_designated_combustibles_over(1000):
        return required(
            "Designated combustibles of 1000 times the standard quantity or more are stored or "
            f"handled, so {_EQUIPMENT}.",
            ctx.cite("Art. 12 para. 1 item 8"),
        )
    return None


def check_item6(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(["16_2"]) and ctx.total_area >= 1000:
        return required(
            f"Use ({ctx.use_display}) is item (16-2) with a total floor area of 1000 m2 or more, "
            f"so {_EQUIPMENT}.",
            ctx.cite("Art. 12 para. 1 item 6"),
        )
    return None


def check_item7(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(["16_3"]) and ctx.total_area >= 1000:
        return warning(
            "[Review] Item (16-3) building with a total floor area of 1000 m2 or more. Sprinklers "
            "are required if the parts used for items (1)-(4), (5)i, (6) or (9)i total 500 m2 or more.",
            ctx.cite("Art. 12 para. 1 item 7"),
        )
    return None


def check_item10(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(["16_i"]) and ctx.total_area >= 3000:
        return warning(
            "[Review] Item (16)i composite building. If the parts used for items (1)-(4), (5)i, "
            "(6) or (9)i total 3000 m2 or more, sprinklers are required on the floors containing them.",
            ctx.cite("Art. 12 para. 1 item 10"),
        )
    return None


def check_item11(ctx: RuleContext) -> JudgementResult | None:
    if not ctx.matches(HIGH_RISE_USES):
        return None
    if any(
        f.is_basement or f.is_windowless or (f.is_ground and 4 <= f.level <= 10)
        for f in ctx.profile.floors
    ):
        return warning(
            "[Review] The building has basement, windowless or 4th to 10th floors. Depending on "
            "their floor areas and the building use, sprinklers may be required.",
            ctx.cite("Art. 12 para. 1 item 11"),
        )
    return None


ARTICLE_12 = ArticleRuleModule(
    article=ArticleId.ART_12,
    equipment="Sprinkler equipment",
    rules=(
        check_item3,
        check_item12,
        check_item1,
        check_item2,
        check_item4,
        check_item5,
        check_item8,
        check_item6,
        check_item7,
        check_item10,
        check_item11,
    ),
    not_required_message="Sprinkler equipment is not required.",
)
