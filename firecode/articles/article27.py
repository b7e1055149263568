"""Art. 27: fire-fighting water supply."""

from __future__ import annotations

from firecode.judgement.result import JudgementResult, not_required, required, warning
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext
from firecode.models.building import FireResistance

HEIGHT_LIMIT = 31
HIGH_RISE_AREA = 25000
SITE_AREA = 20000

THRESHOLDS = {
    FireResistance.FIRE_RESISTANT: 15000,
    FireResistance.QUASI_FIRE_RESISTANT: 10000,
    FireResistance.OTHER: 5000,
}


def check_item2(ctx: RuleContext) -> JudgementResult | None:
    height = ctx.profile.building_height or 0
    if height > HEIGHT_LIMIT and ctx.total_area >= HIGH_RISE_AREA:
        return required(
            f"The building is higher than {HEIGHT_LIMIT} m with a total floor area of "
            f"{HIGH_RISE_AREA:,} m2 or more, so fire-fighting water is required.",
            ctx.cite("Art. 27 item 2"),
        )
    return None


def check_excluded_use(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(["16"]):
        return not_required(f"Use ({ctx.use_display}) is outside the scope of Art. 27 item 1.")
    return None


def check_site_area(ctx: RuleContext) -> JudgementResult | None:
    if (ctx.profile.site_area or 0) < SITE_AREA:
        return not_required(
            f"The site area is under {SITE_AREA:,} m2, so Art. 27 item 1 does not apply."
        )
    return None


def check_item1(ctx: RuleContext) -> JudgementResult | None:
    resistance = ctx.profile.fire_resistance
    basis = ctx.cite("Art. 27 item 1")
    if resistance is None:
        return warning("[Review] Select the fire-resistance grade of the building.", basis)
    area = ctx.profile.first_two_floors_area()
    if area == 0:
        return warning("[Review] The 1st or 2nd floor area has not been entered.", basis)
    threshold = THRESHOLDS[resistance]
    if area >= threshold:
        return required(
            f"The site area is {SITE_AREA:,} m2 or more and the 1st and 2nd floor area is "
            f"{area:.2f} m2, at or above the {threshold:,} m2 threshold for this construction, "
            "so fire-fighting water is required.",
            basis,
        )
    return None


ARTICLE_27 = ArticleRuleModule(
    article=ArticleId.ART_27,
    equipment="Fire-fighting water",
    rules=(check_item2, check_excluded_use, check_site_area, check_item1),
    not_required_message="Fire-fighting water is not required.",
)
