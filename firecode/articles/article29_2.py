"""Art. 29-2: emergency power outlet equipment."""

from __future__ import annotations

from firecode.judgement.result import JudgementResult, required
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext


def check_item1(ctx: RuleContext) -> JudgementResult | None:
    storeys = ctx.profile.storeys_above_ground
    if storeys >= 11:
        return required(
            f"The building has {storeys} storeys above ground (11 or more), so emergency power "
            "outlets are required.",
            ctx.cite("Art. 29-2 item 1"),
        )
    return None


def check_item2(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(["16_2"]) and ctx.total_area >= 1000:
        return required(
            f"Use ({ctx.use_display}) with a total floor area of 1,000 m2 or more, so emergency "
            "power outlets are required.",
            ctx.cite("Art. 29-2 item 2"),
        )
    return None


ARTICLE_29_2 = ArticleRuleModule(
    article=ArticleId.ART_29_2,
    equipment="Emergency power outlet equipment",
    rules=(check_item1, check_item2),
    not_required_message="Emergency power outlet equipment is not required.",
)
