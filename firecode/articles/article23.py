"""Art. 23: fire alarm equipment reporting to the fire department."""

from __future__ import annotations

from firecode.judgement.result import JudgementResult, required, warning
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext

ITEM1_USES = ("06_i_1", "06_i_2", "06_i_3", "06_ro", "16_2", "16_3")
ITEM2_USES = ("01", "02", "04", "05_i", "06_i_4", "06_ha", "06_ni", "12", "17")
ITEM3_USES = ("03", "05_ro", "07", "08", "09", "10", "11", "13", "14", "15")

# High-risk uses where a telephone cannot substitute for the equipment
NON_ALTERNATIVE_USES = ("06_i_1", "06_i_2", "06_i_3", "06_ro", "05_i", "06_i_4", "06_ha")


def _result(ctx: RuleContext, basis: str, area_threshold: int | None) -> JudgementResult:
    if ctx.matches(NON_ALTERNATIVE_USES):
        return required(
            f"Use ({ctx.use_display}) falls under Art. 23, so fire alarm equipment reporting to "
            "the fire department is required.",
            basis,
        )
    reason = f"Use ({ctx.use_display}) falls under Art. 23"
    if area_threshold is not None:
        reason += f" with a total floor area of {area_threshold} m2 or more"
    return warning(
        f"{reason}, so the equipment is required, but a telephone that can always reach the "
        "fire department may exempt it.",
        f"{basis}, same Art. para. 3",
    )


def check_item1(ctx: RuleContext) -> JudgementResult | None:
    if ctx.is_sub_evaluation:
        return None
    if ctx.matches(ITEM1_USES):
        return _result(ctx, ctx.cite("Art. 23 para. 1 item 1"), None)
    return None


def check_item2(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(ITEM2_USES) and ctx.total_area >= 500:
        return _result(ctx, ctx.cite("Art. 23 para. 1 item 2"), 500)
    return None


def check_item3(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(ITEM3_USES) and ctx.total_area >= 1000:
        return _result(ctx, ctx.cite("Art. 23 para. 1 item 3"), 1000)
    return None


ARTICLE_23 = ArticleRuleModule(
    article=ArticleId.ART_23,
    equipment="Fire alarm equipment reporting to the fire department",
    rules=(check_item1, check_item2, check_item3),
    decomposes=True,
    not_required_message=(
        "The building meets none of the conditions for fire alarm equipment reporting to the "
        "fire department."
    ),
)
