"""Art. 28-2: connected sprinkling equipment."""

from __future__ import annotations

from firecode.judgement.result import JudgementResult, not_required, required
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext

TARGET_USES = (
    "01", "02", "03", "04", "05", "06", "07", "08", "09",
    "10", "11", "12", "13", "14", "15", "16_2", "17",
)

AREA_THRESHOLD = 700


def check_target_use(ctx: RuleContext) -> JudgementResult | None:
    if not ctx.matches(TARGET_USES):
        return not_required(
            f"Use ({ctx.use_display}) is outside the scope of connected sprinkling equipment."
        )
    return None


def check_underground_arcade(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(["16_2"]) and ctx.total_area >= AREA_THRESHOLD:
        return required(
            f"Use ({ctx.use_display}) with a total floor area of {ctx.total_area:g} m2 "
            f"(>= {AREA_THRESHOLD} m2), so connected sprinkling equipment is required.",
            ctx.cite("Art. 28-2"),
        )
    return None


def check_basement_area(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(["16_2"]):
        return None
    area = ctx.profile.basement_area
    if area >= AREA_THRESHOLD:
        return required(
            f"Use ({ctx.use_display}) with a basement floor area of {area:g} m2 "
            f"(>= {AREA_THRESHOLD} m2), so connected sprinkling equipment is required.",
            ctx.cite("Art. 28-2"),
        )
    return None


ARTICLE_28_2 = ArticleRuleModule(
    article=ArticleId.ART_28_2,
    equipment="Connected sprinkling equipment",
    rules=(check_target_use, check_underground_arcade, check_basement_area),
    not_required_message="Connected sprinkling equipment is not required.",
)
