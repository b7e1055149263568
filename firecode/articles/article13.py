"""Art. 13: water-spray, foam, inert gas, halogenated and powder systems.

Where a feature is present but its area was not entered, the rule degrades to
a warning; where the area was entered and falls short, the rule is
authoritatively not required.
"""

from __future__ import annotations

from firecode.judgement.result import JudgementResult, not_required, required, warning
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext

ALL_SYSTEMS = "water-spray, foam, inert gas, halogenated or powder extinguishing equipment"
NO_WATER_SYSTEMS = "inert gas, halogenated or powder extinguishing equipment"


def check_item1(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(["13_ro"]):
        return required(
            "Aircraft hangars (item (13)ro) require foam or powder extinguishing equipment.",
            ctx.cite("Art. 13 para. 1 item 1"),
        )
    return None


def check_item2(ctx: RuleContext) -> JudgementResult | None:
    if ctx.profile.features.has_helicopter_landing_zone:
        return required(
            "A rooftop heliport requires foam or powder extinguishing equipment.",
            ctx.cite("Art. 13 para. 1 item 2"),
        )
    return None


def check_item3(ctx: RuleContext) -> JudgementResult | None:
    features = ctx.profile.features
    if not features.has_road_part:
        return None
    basis = ctx.cite("Art. 13 para. 1 item 3")
    if features.road_part_rooftop_area is None and features.road_part_other_area is None:
        return warning(
            "[Review] Road parts of 600 m2 or more on the rooftop, or 400 m2 or more elsewhere, "
            f"require water-spray, foam, inert gas or powder equipment. Enter the road part areas.",
            basis,
        )
    if (features.road_part_rooftop_area or 0) >= 600 or (features.road_part_other_area or 0) >= 400:
        return required(
            "The road part is 600 m2 or more on the rooftop or 400 m2 or more elsewhere, so "
            "water-spray, foam, inert gas or powder equipment is required.",
            basis,
        )
    return not_required("The road part is below the area thresholds of Art. 13 para. 1 item 3.")


def check_item4(ctx: RuleContext) -> JudgementResult | None:
    features = ctx.profile.features
    if not features.has_car_repair_area:
        return None
    basis = ctx.cite("Art. 13 para. 1 item 4")
    upper = features.car_repair_area_basement_or_upper
    first = features.car_repair_area_first_floor
    if upper is None and first is None:
        return warning(
            "[Review] Car repair areas of 200 m2 or more in the basement or on the 2nd floor and "
            "above, or 500 m2 or more on the 1st floor, require foam, inert gas, halogenated or "
            "powder equipment. Enter the car repair areas.",
            basis,
        )
    if (upper or 0) >= 200 or (first or 0) >= 500:
        return required(
            "The car repair area is 200 m2 or more in the basement or upper floors, or 500 m2 or "
            "more on the 1st floor, so foam, inert gas, halogenated or powder equipment is required.",
            basis,
        )
    return not_required("The car repair area is below the area thresholds of Art. 13 para. 1 item 4.")


def check_item5_parking(ctx: RuleContext) -> JudgementResult | None:
    parking = ctx.profile.features.parking
    if not parking.exists:
        return None
    basis = ctx.cite("Art. 13 para. 1 item 5(i)")
    # Floors from which every vehicle can leave at once are exempt
    if not parking.can_all_vehicles_exit_simultaneously and (
        (parking.rooftop_area or 0) >= 300
        or (parking.basement_or_upper_area or 0) >= 200
        or (parking.first_floor_area or 0) >= 500
    ):
        return required(
            f"The parking areas meet the floor and area conditions, so {ALL_SYSTEMS} is required.",
            basis,
        )
    return warning(
        f"[Review] Parking areas may require {ALL_SYSTEMS} depending on their floor, structure "
        "and area.",
        basis,
    )


def check_item5_mechanical(ctx: RuleContext) -> JudgementResult | None:
    parking = ctx.profile.features.parking
    if not parking.mechanical_present:
        return None
    basis = ctx.cite("Art. 13 para. 1 item 5(ro)")
    if (parking.mechanical_capacity or 0) >= 10:
        return required(
            f"Mechanical parking for 10 or more vehicles requires {ALL_SYSTEMS}.",
            basis,
        )
    return warning(
        f"[Review] Mechanical parking for 10 or more vehicles requires {ALL_SYSTEMS}.",
        basis,
    )


def check_item6(ctx: RuleContext) -> JudgementResult | None:
    if ctx.profile.features.has_electrical_equipment_over_200:
        return required(
            "Generator, transformer or similar electrical equipment areas of 200 m2 or more "
            f"require {NO_WATER_SYSTEMS}.",
            ctx.cite("Art. 13 para. 1 item 6"),
        )
    return None


def check_item7(ctx: RuleContext) -> JudgementResult | None:
    if ctx.profile.features.has_high_fire_usage_area_over_200:
        return required(
            "Forges, boiler rooms, drying rooms or similar areas of 200 m2 or more require "
            f"{NO_WATER_SYSTEMS}.",
            ctx.cite("Art. 13 para. 1 item 7"),
        )
    return None


def check_item8(ctx: RuleContext) -> JudgementResult | None:
    if ctx.profile.features.has_telecom_room_over_500:
        return warning(
            f"[Review] Telecommunication equipment rooms of 500 m2 or more require {NO_WATER_SYSTEMS}.",
            ctx.cite("Art. 13 para. 1 item 8"),
        )
    return None


def check_item9(ctx: RuleContext) -> JudgementResult | None:
    if ctx.profile.stores_designated_combustibles_over(1000):
        return warning(
            "[Review] Designated combustibles of 1000 times the standard quantity or more require "
            f"{ALL_SYSTEMS} depending on the combustible type. Sprinkler equipment may exempt this.",
            ctx.cite("Art. 13 para. 1 item 9, para. 2"),
        )
    return None


ARTICLE_13 = ArticleRuleModule(
    article=ArticleId.ART_13,
    equipment="Water-spray extinguishing equipment and similar systems",
    rules=(
        check_item1,
        check_item2,
        check_item3,
        check_item4,
        check_item5_parking,
        check_item5_mechanical,
        check_item6,
        check_item7,
        check_item8,
        check_item9,
    ),
    not_required_message="Water-spray extinguishing equipment and similar systems are not required.",
)
