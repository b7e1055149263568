"""Art. 19: outdoor fire hydrant equipment."""

from __future__ import annotations

from firecode.judgement.result import JudgementResult, not_required, required, warning
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext
from firecode.models.building import FireResistance

EXCLUDED_USES = ("16", "16_2", "16_3")

# Floor-area thresholds for the 1st and 2nd floors, by fire-resistance grade
THRESHOLDS = {
    FireResistance.FIRE_RESISTANT: 9000,
    FireResistance.QUASI_FIRE_RESISTANT: 6000,
    FireResistance.OTHER: 3000,
}


def check_excluded_use(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(EXCLUDED_USES):
        return not_required(
            f"Use ({ctx.use_display}) is outside the scope of outdoor fire hydrant equipment "
            "(Art. 19 para. 1)."
        )
    return None


def check_multiple_buildings(ctx: RuleContext) -> JudgementResult | None:
    if ctx.profile.features.has_multiple_buildings_on_site:
        return warning(
            "[Review] With several buildings on the same site, their floor areas may have to be "
            "combined depending on their separation and construction.",
            ctx.cite("Art. 19 para. 2"),
        )
    return None


def check_fire_resistance_missing(ctx: RuleContext) -> JudgementResult | None:
    if ctx.profile.fire_resistance is None:
        return warning(
            "[Review] Select the fire-resistance grade of the building.",
            ctx.cite("Art. 19 para. 1"),
        )
    return None


def check_item1(ctx: RuleContext) -> JudgementResult | None:
    area = ctx.profile.first_two_floors_area()
    if area == 0:
        return warning(
            "[Review] The 1st or 2nd floor area has not been entered.",
            ctx.cite("Art. 19 para. 1"),
        )
    resistance = ctx.profile.fire_resistance
    threshold = THRESHOLDS[resistance]
    if area >= threshold:
        return required(
            f"The 1st and 2nd floor area is {area:.2f} m2, at or above the {threshold} m2 "
            f"threshold for {resistance.value.replace('_', '-')} construction, so outdoor fire "
            "hydrants are required.",
            ctx.cite("Art. 19 para. 1"),
        )
    return None


ARTICLE_19 = ArticleRuleModule(
    article=ArticleId.ART_19,
    equipment="Outdoor fire hydrant equipment",
    rules=(
        check_excluded_use,
        check_multiple_buildings,
        check_fire_resistance_missing,
        check_item1,
    ),
    not_required_message="Outdoor fire hydrant equipment is not required.",
)
