"""RuleContext and the generic ArticleRuleModule.

Every article is an ordered list of guarded rules.  A rule reads only its
:class:`RuleContext` and returns ``None`` when its guard does not hold::

    def check_item1(ctx: RuleContext) -> JudgementResult | None:
        if ctx.matches(["01"]) and ctx.total_area >= 500:
            return required("...", ctx.cite("Art. 11 para. 1 item 1"))
        return None

    ARTICLE_11 = ArticleRuleModule(
        article=ArticleId.ART_11,
        equipment="Indoor fire hydrant equipment",
        rules=(check_item1, ...),
        decomposes=True,
    )
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from enum import Enum

from firecode.judgement.multiplier import AreaMultiplier
from firecode.judgement.result import JudgementResult, not_required
from firecode.models.building import BuildingProfile
from firecode.uses.codes import code_matches

logger = logging.getLogger(__name__)


class ArticleId(str, Enum):
    """Articles of the Enforcement Order covered by the engine."""

    ART_10 = "10"
    ART_11 = "11"
    ART_12 = "12"
    ART_13 = "13"
    ART_19 = "19"
    ART_21 = "21"
    ART_21_2 = "21-2"
    ART_22 = "22"
    ART_23 = "23"
    ART_24 = "24"
    ART_25 = "25"
    ART_26 = "26"
    ART_27 = "27"
    ART_28 = "28"
    ART_28_2 = "28-2"
    ART_29 = "29"
    ART_29_2 = "29-2"
    ART_29_3 = "29-3"


@dataclass(frozen=True)
class RuleContext:
    """Everything a rule may read."""

    profile: BuildingProfile
    use_display: str
    area_multiplier: AreaMultiplier = field(default_factory=AreaMultiplier)
    is_sub_evaluation: bool = False
    citation_suffix: str = ""

    @property
    def use_code(self) -> str:
        return self.profile.use_code or ""

    @property
    def total_area(self) -> float:
        return self.profile.total_area

    def matches(self, prefixes: Iterable[str]) -> bool:
        return code_matches(self.profile.use_code, prefixes)

    def cite(self, basis: str) -> str:
        """Attach the citation suffix (deeming marker on sub-evaluations)."""
        return f"{basis}{self.citation_suffix}"


Rule = Callable[[RuleContext], JudgementResult | None]


@dataclass(frozen=True)
class ArticleRuleModule:
    """One statutory article as an ordered list of guarded rules.

    Parameters
    ----------
    article:
        Article identifier.
    equipment:
        Name of the equipment the article mandates.
    rules:
        Evaluated top to bottom; the first non-None result wins.
    independent_rules:
        Each evaluated regardless of the others; every non-None result is
        collected alongside the first-match result.
    decomposes:
        Whether the composite-use deeming provision applies, i.e. the
        module is re-run per tenant use of a composite building.
    """

    article: ArticleId
    equipment: str
    rules: tuple[Rule, ...]
    independent_rules: tuple[Rule, ...] = ()
    decomposes: bool = False
    not_required_message: str = ""

    def first_match(self, ctx: RuleContext) -> JudgementResult | None:
        for rule in self.rules:
            result = rule(ctx)
            if result is not None:
                logger.debug(
                    "Art. %s: %s matched (required=%s)",
                    self.article.value,
                    getattr(rule, "__name__", rule),
                    result.required,
                )
                return result
        return None

    def judge(self, ctx: RuleContext) -> list[JudgementResult]:
        """Return the first-match result plus any independent results."""
        results: list[JudgementResult] = []
        first = self.first_match(ctx)
        if first is not None:
            results.append(first)
        for rule in self.independent_rules:
            result = rule(ctx)
            if result is not None:
                results.append(result)
        return results

    def not_required(self) -> JudgementResult:
        message = self.not_required_message or f"{self.equipment} is not required."
        return not_required(message)
