"""Art. 29-3: radio communication support equipment."""

from __future__ import annotations

from firecode.judgement.result import JudgementResult, required
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext


def check_underground_arcade(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(["16_2"]) and ctx.total_area >= 1000:
        return required(
            f"Use ({ctx.use_display}) with a total floor area of 1,000 m2 or more, so radio "
            "communication support equipment is required.",
            ctx.cite("Art. 29-3"),
        )
    return None


ARTICLE_29_3 = ArticleRuleModule(
    article=ArticleId.ART_29_3,
    equipment="Radio communication support equipment",
    rules=(check_underground_arcade,),
    not_required_message="Radio communication support equipment is not required.",
)
