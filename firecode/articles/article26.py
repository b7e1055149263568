"""Art. 26: guide lights and guide signs.

Three provisions overlap here: exit and corridor guide lights (items 1 and 2),
auditorium guide lights (item 3) and guide signs (item 4).  Guide signs are
only reported when no guide light is required.
"""

from __future__ import annotations

from firecode.judgement.result import JudgementResult, required, warning
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext

FULL_APPLICATION_USES = (
    "01", "02", "03", "04", "05_i", "06", "09", "16_i", "16_2", "16_3",
)
PARTIAL_APPLICATION_USES = (
    "05_ro", "07", "08", "10", "11", "12", "13", "14", "15", "16_ro",
)
AUDITORIUM_REVIEW_USES = ("16_i", "16_2")
SIGN_USES = (
    "01", "02", "03", "04", "05", "06", "07", "08",
    "09", "10", "11", "12", "13", "14", "15", "16",
)

EXEMPTION = " Exempt where evacuation is recognised as easy under the ministerial ordinance."

LIGHTS_BASIS = "Art. 26 para. 1 items 1, 2"
AUDITORIUM_BASIS = "Art. 26 para. 1 item 3"
SIGNS_BASIS = "Art. 26 para. 1 item 4"


def exit_and_corridor_message(ctx: RuleContext) -> str | None:
    """Message for exit and corridor guide lights, or None if not required."""
    if ctx.matches(FULL_APPLICATION_USES):
        return f"Buildings of this use require guide lights.{EXEMPTION}"
    if not ctx.matches(PARTIAL_APPLICATION_USES):
        return None

    profile = ctx.profile
    parts = [f.label for f in profile.floors if f.is_basement]
    parts += [f"{f.label} (windowless)" for f in profile.floors if f.is_windowless]
    if profile.ground_floors >= 11:
        parts.append("the 11th floor and above")
    if not parts:
        return None
    names = ", ".join(dict.fromkeys(parts))
    return f"Buildings of this use require guide lights on {names}.{EXEMPTION}"


def check_auditorium_review(ctx: RuleContext) -> JudgementResult | None:
    if not ctx.matches(AUDITORIUM_REVIEW_USES):
        return None
    message = (
        "[Review] Any part of the building used as a theatre, cinema, hall or similar "
        f"requires auditorium guide lights.{EXEMPTION}"
    )
    bases = [ctx.cite(AUDITORIUM_BASIS)]
    lights = exit_and_corridor_message(ctx)
    if lights is not None:
        message = f"{lights} {message}"
        bases.insert(0, ctx.cite(LIGHTS_BASIS))
    return warning(message, ", ".join(bases))


def check_guide_lights(ctx: RuleContext) -> JudgementResult | None:
    lights = exit_and_corridor_message(ctx)
    if lights is None:
        return None
    bases = [ctx.cite(LIGHTS_BASIS)]
    if ctx.matches(["01"]):
        lights += " Auditorium guide lights are also required."
        bases.append(ctx.cite(AUDITORIUM_BASIS))
    return required(lights, ", ".join(bases))


def check_guide_signs(ctx: RuleContext) -> JudgementResult | None:
    if ctx.matches(SIGN_USES):
        return required(
            "Guide lights are not required, but the use requires guide signs.",
            ctx.cite(SIGNS_BASIS),
        )
    return None


ARTICLE_26 = ArticleRuleModule(
    article=ArticleId.ART_26,
    equipment="Guide lights and guide signs",
    rules=(check_auditorium_review, check_guide_lights, check_guide_signs),
    not_required_message="Neither guide lights nor guide signs are required.",
)
