"""Art. 21-2: gas leak fire alarm equipment.

Items 2 and 5 depend on the component-use breakdown of the whole building and
are judged independently of the first-match chain.  Only item 4 is applied
to the component uses of a composite building.
"""

from __future__ import annotations

from firecode.judgement.decomposer import component_use_area
from firecode.judgement.result import JudgementResult, not_required, required, warning
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext
from firecode.uses.codes import SPECIFIED_USES

SPECIFIC_AREA = 500


def check_item1(ctx: RuleContext) -> JudgementResult | None:
    if ctx.is_sub_evaluation:
        return None
    if ctx.matches(["16_2"]) and ctx.total_area >= 1000:
        return required(
            f"Use ({ctx.use_display}) with a total floor area of 1000 m2 or more, so gas leak "
            "fire alarm equipment is required.",
            ctx.cite("Art. 21-2 para. 1 item 1"),
        )
    return None


def check_item3(ctx: RuleContext) -> JudgementResult | None:
    if ctx.is_sub_evaluation:
        return None
    features = ctx.profile.features
    if features.has_hot_spring_facility and not features.is_hot_spring_facility_confirmed:
        return warning(
            "[Review] The building has hot-spring extraction equipment without confirmation "
            "under the Hot Springs Act; alarms may be required depending on occupant capacity.",
            ctx.cite("Art. 21-2 para. 1 item 3"),
        )
    return None


def check_item4(ctx: RuleContext) -> JudgementResult | None:
    # Item 3 takes precedence where hot-spring equipment exists
    if ctx.profile.features.has_hot_spring_facility:
        return None
    if ctx.matches(SPECIFIED_USES) and ctx.profile.basement_area >= 1000:
        return required(
            f"Use ({ctx.use_display}) with a basement floor area of 1000 m2 or more, so gas leak "
            "fire alarm equipment is required.",
            ctx.cite("Art. 21-2 para. 1 item 4"),
        )
    return None


def _specific_use_result(
    ctx: RuleContext,
    specific_area: float,
    description: str,
    basis: str,
) -> JudgementResult:
    if specific_area >= SPECIFIC_AREA:
        return required(
            f"{description}, and the parts used for specified uses total {specific_area:.0f} m2 "
            f"(>= {SPECIFIC_AREA} m2), so gas leak fire alarm equipment is required.",
            basis,
        )
    if specific_area == 0:
        return warning(
            f"[Review] {description}. Alarms are required if the parts used for specified uses "
            f"total {SPECIFIC_AREA} m2 or more. Enter the component-use areas.",
            basis,
        )
    return not_required(
        f"{description}, but the parts used for specified uses total only "
        f"{specific_area:.0f} m2 (< {SPECIFIC_AREA} m2), so gas leak fire alarm equipment is "
        f"not required ({basis})."
    )


def check_item2(ctx: RuleContext) -> JudgementResult | None:
    if ctx.is_sub_evaluation:
        return None
    if not ctx.matches(["16_3"]) or ctx.total_area < 1000:
        return None
    return _specific_use_result(
        ctx,
        component_use_area(ctx.profile.floors, SPECIFIED_USES),
        "Item (16-3) building with a total floor area of 1000 m2 or more",
        ctx.cite("Art. 21-2 para. 1 item 2"),
    )


def check_item5(ctx: RuleContext) -> JudgementResult | None:
    if ctx.is_sub_evaluation:
        return None
    profile = ctx.profile
    if not ctx.matches(["16_i"]) or profile.basement_area < 1000:
        return None
    if profile.features.has_hot_spring_facility:
        return None
    return _specific_use_result(
        ctx,
        component_use_area(profile.floors, SPECIFIED_USES, basement_only=True),
        "Item (16)i building with a basement floor area of 1000 m2 or more",
        ctx.cite("Art. 21-2 para. 1 item 5"),
    )


ARTICLE_21_2 = ArticleRuleModule(
    article=ArticleId.ART_21_2,
    equipment="Gas leak fire alarm equipment",
    rules=(check_item1, check_item3, check_item4),
    independent_rules=(check_item2, check_item5),
    decomposes=True,
    not_required_message="The building meets none of the conditions for gas leak fire alarm equipment.",
)
