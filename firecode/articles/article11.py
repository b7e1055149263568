"""Art. 11: indoor fire hydrant equipment.

Area thresholds are scaled by the structure / finish area multiplier.  The
deeming provision applies: each component use of a composite building is
judged on its own areas.
"""

from __future__ import annotations

from firecode.judgement.result import JudgementResult, required
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext

GROUP_2_USES = ("02", "03", "04", "05", "06", "07", "08", "09", "10", "12", "14")
GROUP_3_USES = ("11", "15")

# Uses also covered by Art. 12 para. 1 item 1: the scaled threshold is capped
CAPPED_USES = ("06_i_1", "06_i_2", "06_ro")
CAPPED_AREA = 1000

UPPER_FLOOR_LEVEL = 4


def _area_required(ctx: RuleContext, description: str, threshold: float, basis: str) -> JudgementResult:
    return required(
        f"Use ({ctx.use_display}) falls under {description} and the total floor area is "
        f"{ctx.total_area:.2f} m2 (>= {threshold:g} m2), so indoor fire hydrants are required."
        f"{ctx.area_multiplier.description}",
        basis,
    )


def check_item1(ctx: RuleContext) -> JudgementResult | None:
    threshold = ctx.area_multiplier.scale(500)
    if ctx.matches(["01"]) and ctx.total_area >= threshold:
        return _area_required(ctx, "item (1)", threshold, ctx.cite("Art. 11 para. 1 item 1"))
    return None


def check_item2(ctx: RuleContext) -> JudgementResult | None:
    if not ctx.matches(GROUP_2_USES):
        return None
    threshold = ctx.area_multiplier.scale(700)
    basis = ctx.cite("Art. 11 para. 1 item 2")
    if ctx.matches(CAPPED_USES):
        threshold = min(threshold, CAPPED_AREA)
        basis += " (Art. 12 para. 1 item 1 use: lesser of the scaled area and 1000 m2)"
    if ctx.total_area >= threshold:
        return _area_required(ctx, "items (2) to (10), (12) or (14)", threshold, basis)
    return None


def check_item3(ctx: RuleContext) -> JudgementResult | None:
    threshold = ctx.area_multiplier.scale(1000)
    if ctx.matches(GROUP_3_USES) and ctx.total_area >= threshold:
        return _area_required(ctx, "item (11) or (15)", threshold, ctx.cite("Art. 11 para. 1 item 3"))
    return None


def check_item4(ctx: RuleContext) -> JudgementResult | None:
    threshold = ctx.area_multiplier.scale(150)
    if ctx.matches(["16_2"]) and ctx.total_area >= threshold:
        return _area_required(ctx, "item (16-2)", threshold, ctx.cite("Art. 11 para. 1 item 4"))
    return None


def check_item5(ctx: RuleContext) -> JudgementResult | None:
    # Stored quantities are known for the whole building only
    if ctx.is_sub_evaluation:
        return None
    if ctx.profile.stores_designated_combustibles_over(750):
        return required(
            "Designated combustibles of 750 times the standard quantity or more are stored or "
            "handled, so indoor fire hydrants are required.",
            ctx.cite("Art. 11 para. 1 item 5"),
        )
    return None


def _floor_threshold(ctx: RuleContext) -> float:
    if ctx.matches(["01"]):
        return ctx.area_multiplier.scale(100)
    if ctx.matches(GROUP_2_USES):
        return ctx.area_multiplier.scale(150)
    if ctx.matches(GROUP_3_USES):
        return ctx.area_multiplier.scale(200)
    return 0


def check_item6(ctx: RuleContext) -> JudgementResult | None:
    threshold = _floor_threshold(ctx)
    if threshold <= 0:
        return None
    profile = ctx.profile
    candidates = (
        ("basement", profile.basement_area),
        ("windowless floor", profile.windowless_area),
        ("4th floor and above", profile.upper_floor_area(UPPER_FLOOR_LEVEL)),
    )
    for name, area in candidates:
        if area > 0 and area >= threshold:
            return required(
                f"The {name} floor area is {area:.2f} m2 (>= {threshold:g} m2), so indoor fire "
                f"hydrants are required.{ctx.area_multiplier.description}",
                ctx.cite("Art. 11 para. 1 item 6"),
            )
    return None


ARTICLE_11 = ArticleRuleModule(
    article=ArticleId.ART_11,
    equipment="Indoor fire hydrant equipment",
    rules=(check_item1, check_item2, check_item3, check_item4, check_item5, check_item6),
    decomposes=True,
    not_required_message="Indoor fire hydrant equipment is not required.",
)
