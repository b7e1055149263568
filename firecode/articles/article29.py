"""Art. 29: standpipes for fire brigade use."""

from __future__ import annotations

from firecode.judgement.result import JudgementResult, required
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext


def check_item1(ctx: RuleContext) -> JudgementResult | None:
    storeys = ctx.profile.storeys_above_ground
    if storeys >= 7:
        return required(
            f"The building has {storeys} storeys above ground (7 or more), so standpipes are required.",
            ctx.cite("Art. 29 item 1"),
        )
    return None


def check_item2(ctx: RuleContext) -> JudgementResult | None:
    storeys = ctx.profile.storeys_above_ground
    if storeys >= 5 and ctx.total_area >= 6000:
        return required(
            f"The building has {storeys} storeys above ground (5 or more) and a total floor area "
            f"of {ctx.total_area:g} m2 (6,000 m2 or more), so standpipes are required.",
            ctx.cite("Art. 29 item 2"),
        )
    return None


def check_item3(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(["16_2"]) and ctx.total_area >= 1000:
        return required(
            f"Use ({ctx.use_display}) with a total floor area of 1,000 m2 or more, so standpipes "
            "are required.",
            ctx.cite("Art. 29 item 3"),
        )
    return None


def check_item4(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(["18"]):
        return required(
            f"Use ({ctx.use_display}) requires standpipes.",
            ctx.cite("Art. 29 item 4"),
        )
    return None


def check_item5(ctx: RuleContext) -> JudgementResult | None:
    if ctx.profile.features.has_road_part:
        return required(
            "The building has a part used as a road, so standpipes are required.",
            ctx.cite("Art. 29 item 5"),
        )
    return None


ARTICLE_29 = ArticleRuleModule(
    article=ArticleId.ART_29,
    equipment="Standpipes",
    rules=(check_item1, check_item2, check_item3, check_item4, check_item5),
    not_required_message="Standpipes are not required.",
)
