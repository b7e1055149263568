"""Art. 22: earth leakage fire alarms.

Applies only to buildings whose walls, floors or ceilings are lath-and-plaster
or similar special combustible structures.
"""

from __future__ import annotations

from firecode.judgement.decomposer import component_use_area
from firecode.judgement.result import JudgementResult, not_required, required, warning
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext

ITEM3_USES = ("01", "02", "03", "04", "06", "12", "16_2")
ITEM4_USES = ("07", "08", "10", "11")
ITEM5_USES = ("14", "15")
ITEM6_SPECIFIC_USES = ("01", "02", "03", "04", "05_i", "06", "09_i", "12")
ITEM7_USES = ("01", "02", "03", "04", "05", "06", "15", "16")

CURRENT_LIMIT = 50

_PREFIX = "Special combustible structure"


def check_structure(ctx: RuleContext) -> JudgementResult | None:
    if not ctx.profile.has_special_combustible_structure:
        return not_required(
            "The building is not a special combustible structure, so earth leakage fire alarms "
            "are not required."
        )
    return None


def _area_rule(ctx: RuleContext, prefixes, threshold: float, basis: str) -> JudgementResult | None:
    if ctx.matches(prefixes) and ctx.total_area >= threshold:
        return required(
            f"{_PREFIX} with use ({ctx.use_display}) and a total floor area of {threshold} m2 or "
            "more, so earth leakage fire alarms are required.",
            ctx.cite(basis),
        )
    return None


def check_item1(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(["17"]):
        return required(
            f"{_PREFIX} with use ({ctx.use_display}), so earth leakage fire alarms are required.",
            ctx.cite("Art. 22 para. 1 item 1"),
        )
    return None


def check_item2(ctx: RuleContext) -> JudgementResult | None:
    return _area_rule(ctx, ("05", "09"), 150, "Art. 22 para. 1 item 2")


def check_item3(ctx: RuleContext) -> JudgementResult | None:
    return _area_rule(ctx, ITEM3_USES, 300, "Art. 22 para. 1 item 3")


def check_item4(ctx: RuleContext) -> JudgementResult | None:
    return _area_rule(ctx, ITEM4_USES, 500, "Art. 22 para. 1 item 4")


def check_item5(ctx: RuleContext) -> JudgementResult | None:
    return _area_rule(ctx, ITEM5_USES, 1000, "Art. 22 para. 1 item 5")


def check_item7(ctx: RuleContext) -> JudgementResult | None:
    # Contracted current is metered for the whole building
    if ctx.is_sub_evaluation:
        return None
    current = ctx.profile.features.contracted_current_capacity or 0
    if ctx.matches(ITEM7_USES) and current > CURRENT_LIMIT:
        return required(
            f"{_PREFIX} with use ({ctx.use_display}) and a contracted current exceeding "
            f"{CURRENT_LIMIT} A, so earth leakage fire alarms are required.",
            ctx.cite("Art. 22 para. 1 item 7"),
        )
    return None


def check_item6(ctx: RuleContext) -> JudgementResult | None:
    if ctx.is_sub_evaluation or not ctx.profile.has_special_combustible_structure:
        return None
    if not ctx.matches(["16_i"]) or ctx.total_area < 500:
        return None
    specific_area = component_use_area(ctx.profile.floors, ITEM6_SPECIFIC_USES)
    basis = ctx.cite("Art. 22 para. 1 item 6")
    description = f"{_PREFIX} of item (16)i with a total floor area of 500 m2 or more"
    if specific_area >= 300:
        return required(
            f"{description}, and the parts used for specified uses total {specific_area:.0f} m2 "
            "(>= 300 m2), so earth leakage fire alarms are required.",
            basis,
        )
    if specific_area == 0:
        return warning(
            f"[Review] {description}. Alarms are required if the parts used for specified uses "
            "total 300 m2 or more. Enter the component-use areas.",
            basis,
        )
    return not_required(
        f"{description}, but the parts used for specified uses total only {specific_area:.0f} m2 "
        f"(< 300 m2), so earth leakage fire alarms are not required ({basis})."
    )


ARTICLE_22 = ArticleRuleModule(
    article=ArticleId.ART_22,
    equipment="Earth leakage fire alarms",
    rules=(
        check_structure,
        check_item1,
        check_item2,
        check_item3,
        check_item4,
        check_item5,
        check_item7,
    ),
    independent_rules=(check_item6,),
    decomposes=True,
    not_required_message="The building meets none of the conditions for earth leakage fire alarms.",
)
