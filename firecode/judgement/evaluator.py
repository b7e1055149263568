"""Evaluation pipeline for a single article module."""

from __future__ import annotations

import logging

from firecode.judgement.aggregator import aggregate
from firecode.judgement.decomposer import decompose
from firecode.judgement.multiplier import area_multiplier
from firecode.judgement.result import JudgementResult, selection_required
from firecode.judgement.rules import ArticleRuleModule, RuleContext
from firecode.models.building import BuildingProfile
from firecode.uses.catalog import UseCatalog
from firecode.uses.codes import is_composite

logger = logging.getLogger(__name__)


def main_context(profile: BuildingProfile, catalog: UseCatalog) -> RuleContext:
    """Build the whole-building rule context for *profile*."""
    return RuleContext(
        profile=profile,
        use_display=catalog.display_name_for(profile.use_code),
        area_multiplier=area_multiplier(profile.structure_type, profile.finish_type),
    )


def evaluate_module(
    module: ArticleRuleModule,
    profile: BuildingProfile,
    catalog: UseCatalog,
) -> JudgementResult:
    """Judge *profile* against *module*.

    Without a use code the result is "selection required".  Otherwise the
    whole building is judged, composite buildings are additionally judged
    per component use when the module allows it, and everything is merged.
    """
    if not profile.use_code:
        return selection_required()

    results = module.judge(main_context(profile, catalog))

    if module.decomposes and is_composite(profile.use_code):
        results.extend(decompose(module, profile, catalog))

    final = aggregate(results, fallback=module.not_required())
    logger.debug("Art. %s for %s -> required=%s", module.article.value, profile.use_code, final.required)
    return final
