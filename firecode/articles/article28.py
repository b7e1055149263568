"""Art. 28: smoke control equipment.

Only item 3 is applied to the component uses of a composite building.
"""

from __future__ import annotations

from firecode.judgement.result import JudgementResult, required, warning
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext

ITEM3_USES = ("02", "04", "10", "13")


def check_item1(ctx: RuleContext) -> JudgementResult | None:
    if ctx.is_sub_evaluation:
        return None
    if ctx.matches(["16_2"]) and ctx.total_area >= 1000:
        return required(
            "Item (16-2) building with a total floor area of 1,000 m2 or more, so smoke control "
            "equipment is required.",
            ctx.cite("Art. 28 item 1"),
        )
    return None


def check_item2(ctx: RuleContext) -> JudgementResult | None:
    if ctx.is_sub_evaluation:
        return None
    features = ctx.profile.features
    if not (ctx.matches(["01"]) and features.has_stage_area):
        return None
    stage_area = features.stage_area or 0
    if stage_area >= 500:
        return required(
            f"The stage of use ({ctx.use_display}) has a floor area of 500 m2 or more, so smoke "
            "control equipment is required.",
            ctx.cite("Art. 28 item 2"),
        )
    if stage_area == 0:
        return warning(
            "[Review] The stage area has not been entered; smoke control equipment may be required.",
            ctx.cite("Art. 28 item 2"),
        )
    return None


def check_item3(ctx: RuleContext) -> JudgementResult | None:
    if not ctx.matches(ITEM3_USES):
        return None
    profile = ctx.profile
    area = profile.basement_or_windowless_area
    if area >= 1000:
        return required(
            f"The basement or windowless floors of use ({ctx.use_display}) have a floor area of "
            "1,000 m2 or more, so smoke control equipment is required.",
            ctx.cite("Art. 28 item 3"),
        )
    if area == 0 and profile.has_basement_or_windowless_floors:
        return warning(
            "[Review] The basement or windowless floor area has not been entered; smoke control "
            "equipment may be required.",
            ctx.cite("Art. 28 item 3"),
        )
    return None


ARTICLE_28 = ArticleRuleModule(
    article=ArticleId.ART_28,
    equipment="Smoke control equipment",
    rules=(check_item1, check_item2, check_item3),
    decomposes=True,
    not_required_message="Smoke control equipment is not required.",
)
