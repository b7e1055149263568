"""Art. 24: emergency alarm tools and equipment.

Paragraph 3 (bells or sirens with broadcasting) is checked first, then
paragraph 2 (bells, sirens or broadcasting), then paragraph 1 (alarm tools).
"""

from __future__ import annotations

from firecode.judgement.result import JudgementResult, required
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext
from firecode.uses.codes import SPECIFIED_USES

PARA3_ITEM1_USES = ("16_2", "16_3")
PARA3_GROUP_A = SPECIFIED_USES
PARA3_GROUP_B = ("05_ro", "07", "08")
PARA2_ITEM1_USES = ("05_i", "06_i", "09_i")
PARA2_ITEM2_USES = (
    "01", "02", "03", "04", "05", "06", "07", "08", "09",
    "10", "11", "12", "13", "14", "15", "16", "17",
)
PARA1_USES = ("04", "06_ro", "06_ha", "06_ni", "09_ro", "12")

BROADCAST = (
    "emergency bells with broadcasting equipment, or automatic sirens with broadcasting "
    "equipment, are required"
)
ALARM = "emergency bells, automatic sirens or broadcasting equipment are required"
EXEMPT_BY_AUTOMATIC_ALARM = " Exempt where automatic fire alarm equipment is installed."
EXEMPT_BY_ANY_ALARM = " Exempt where automatic fire alarm or emergency alarm equipment is installed."


def check_para3_item1(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(PARA3_ITEM1_USES):
        return required(
            f"Use ({ctx.use_display}) is an underground arcade or quasi-underground arcade, "
            f"so {BROADCAST}.",
            ctx.cite("Art. 24 para. 3 item 1"),
        )
    return None


def check_para3_item2(ctx: RuleContext) -> JudgementResult | None:
    profile = ctx.profile
    if profile.ground_floors >= 11 or profile.basement_floors >= 3:
        return required(
            "The building has 11 or more storeys above ground or 3 or more basement storeys, "
            f"so {BROADCAST}.",
            ctx.cite("Art. 24 para. 3 item 2"),
        )
    return None


def check_para3_item3(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(["16_i"]) and ctx.profile.capacity >= 500:
        return required(
            f"Item (16)i building with an occupant capacity of 500 or more, so {BROADCAST}.",
            ctx.cite("Art. 24 para. 3 item 3"),
        )
    return None


def check_para3_item4(ctx: RuleContext) -> JudgementResult | None:
    capacity = ctx.profile.capacity
    if ctx.matches(PARA3_GROUP_A) and capacity >= 300:
        limit = 300
    elif ctx.matches(PARA3_GROUP_B) and capacity >= 800:
        limit = 800
    else:
        return None
    return required(
        f"Use ({ctx.use_display}) with an occupant capacity of {limit} or more, so {BROADCAST}.",
        ctx.cite("Art. 24 para. 3 item 4"),
    )


def check_para2_item1(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(PARA2_ITEM1_USES) and ctx.profile.capacity >= 20:
        return required(
            f"Use ({ctx.use_display}) with an occupant capacity of 20 or more, so {ALARM}."
            f"{EXEMPT_BY_AUTOMATIC_ALARM}",
            ctx.cite("Art. 24 para. 2 item 1"),
        )
    return None


def check_para2_item2(ctx: RuleContext) -> JudgementResult | None:
    if not ctx.matches(PARA2_ITEM2_USES) or ctx.matches(PARA2_ITEM1_USES):
        return None
    profile = ctx.profile
    if profile.capacity >= 50 or profile.basement_or_windowless_capacity >= 20:
        return required(
            "The occupant capacity is 50 or more, or 20 or more on basement or windowless "
            f"floors, so {ALARM}.{EXEMPT_BY_AUTOMATIC_ALARM}",
            ctx.cite("Art. 24 para. 2 item 2"),
        )
    return None


def check_para1(ctx: RuleContext) -> JudgementResult | None:
    capacity = ctx.profile.capacity
    if ctx.matches(PARA1_USES) and 20 <= capacity < 50:
        return required(
            f"Use ({ctx.use_display}) with an occupant capacity from 20 to under 50, so "
            f"emergency alarm tools are required.{EXEMPT_BY_ANY_ALARM}",
            ctx.cite("Art. 24 para. 1"),
        )
    return None


ARTICLE_24 = ArticleRuleModule(
    article=ArticleId.ART_24,
    equipment="Emergency alarm tools and equipment",
    rules=(
        check_para3_item1,
        check_para3_item2,
        check_para3_item3,
        check_para3_item4,
        check_para2_item1,
        check_para2_item2,
        check_para1,
    ),
    not_required_message="Emergency alarm tools and equipment are not required.",
)
