"""Art. 10: fire extinguishers and simple extinguishing tools."""

from __future__ import annotations

from firecode.judgement.result import JudgementResult, required
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext

# Item 1(i): required regardless of area
ITEM1_USES = ("01_i", "02", "06_i_1", "06_i_2", "06_i_3", "06_ro", "16_2", "17", "20")
# Item 2(i): 150 m2 and above
ITEM2_USES = ("01_ro", "04", "05", "06_i_4", "06_ha", "06_ni", "09", "12", "13", "14")
# Item 3: 300 m2 and above
ITEM3_USES = ("07", "08", "10", "11", "15")


def check_item1(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(ITEM1_USES):
        return required(
            f"Use ({ctx.use_display}) requires fire extinguishers.",
            ctx.cite("Art. 10 para. 1 item 1(i)"),
        )
    if ctx.matches(["03"]) and ctx.profile.features.uses_fire_equipment:
        return required(
            "Item (3) occupancy with fire-using equipment requires fire extinguishers.",
            ctx.cite("Art. 10 para. 1 item 1(ro)"),
        )
    return None


def check_item2(ctx: RuleContext) -> JudgementResult | None:
    if ctx.total_area < 150:
        return None
    if ctx.matches(ITEM2_USES):
        return required(
            f"Total floor area of 150 m2 or more with use ({ctx.use_display}) requires fire extinguishers.",
            ctx.cite("Art. 10 para. 1 item 2(i)"),
        )
    if ctx.matches(["03"]) and not ctx.profile.features.uses_fire_equipment:
        return required(
            "Item (3) occupancy without fire-using equipment and a total floor area of "
            "150 m2 or more requires fire extinguishers.",
            ctx.cite("Art. 10 para. 1 item 2(ro)"),
        )
    return None


def check_item3(ctx: RuleContext) -> JudgementResult | None:
    if ctx.total_area >= 300 and ctx.matches(ITEM3_USES):
        return required(
            f"Total floor area of 300 m2 or more with use ({ctx.use_display}) requires fire extinguishers.",
            ctx.cite("Art. 10 para. 1 item 3"),
        )
    return None


def check_item4(ctx: RuleContext) -> JudgementResult | None:
    features = ctx.profile.features
    minor = features.stores_minor_hazardous_materials
    combustibles = ctx.profile.stores_designated_combustibles_over(1)
    if not (minor or combustibles):
        return None
    stored = " and ".join(
        name
        for name, present in (
            ("minor quantities of hazardous materials", minor),
            ("designated combustibles", combustibles),
        )
        if present
    )
    return required(
        f"Storage or handling of {stored} requires fire extinguishers.",
        ctx.cite("Art. 10 para. 1 item 4"),
    )


def check_item5(ctx: RuleContext) -> JudgementResult | None:
    floors = [
        f
        for f in ctx.profile.floors
        if f.area >= 50 and (f.is_basement or f.is_windowless or (f.is_ground and f.level >= 3))
    ]
    if not floors:
        return None
    names = ", ".join(f.label for f in floors)
    return required(
        f"Floors of 50 m2 or more that are basements, windowless or 3rd floor and above ({names}) "
        "require fire extinguishers.",
        ctx.cite("Art. 10 para. 1 item 5"),
    )


ARTICLE_10 = ArticleRuleModule(
    article=ArticleId.ART_10,
    equipment="Fire extinguishers",
    rules=(check_item1, check_item2, check_item3, check_item4, check_item5),
    not_required_message="Fire extinguishers are not required.",
)
