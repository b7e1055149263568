"""JudgementEngine: main entry point for equipment determinations.

Usage::

    from firecode import JudgementEngine, BuildingProfile

    engine = JudgementEngine()
    result = engine.evaluate("11", profile)
    results = engine.evaluate_all(profile)
"""

from __future__ import annotations

import logging

from firecode.articles.registry import ArticleRegistry
from firecode.config import Settings, load_settings
from firecode.judgement.evaluator import evaluate_module
from firecode.judgement.result import JudgementResult
from firecode.judgement.rules import ArticleId, ArticleRuleModule
from firecode.models.building import BuildingProfile
from firecode.uses.catalog import TableUseCatalog, UseCatalog

logger = logging.getLogger(__name__)


class JudgementEngine:
    """Judge building profiles against the registered article modules.

    Evaluation is pure: the engine holds no per-building state, so one
    instance may be shared across threads.

    Parameters
    ----------
    catalog:
        Use-display lookup for messages.  Defaults to :class:`TableUseCatalog`.
    registry:
        Article modules to evaluate.  Defaults to every built-in article.
    settings:
        Runtime settings.  Defaults to :func:`load_settings`.
    """

    def __init__(
        self,
        catalog: UseCatalog | None = None,
        registry: ArticleRegistry | None = None,
        settings: Settings | None = None,
    ) -> None:
        self.settings = settings or load_settings()
        self.catalog = catalog or TableUseCatalog()
        if registry is None:
            registry = ArticleRegistry()
            registry.auto_discover()
        self.registry = registry

    def evaluate(self, article: ArticleId | str, profile: BuildingProfile) -> JudgementResult:
        """Judge *profile* against one article.

        Raises
        ------
        UnknownArticleError
            If *article* has no registered module.
        """
        module = self.registry.get(article)
        return evaluate_module(module, profile, self.catalog)

    def articles(self) -> list[ArticleRuleModule]:
        """Registered modules, restricted to the enabled articles when configured."""
        modules = self.registry.list_articles()
        enabled = self.settings.enabled_articles
        if not enabled:
            return modules
        return [m for m in modules if m.article.value in enabled]

    def evaluate_all(self, profile: BuildingProfile) -> dict[ArticleId, JudgementResult]:
        """Judge *profile* against every enabled article, in statutory order."""
        results = {
            module.article: evaluate_module(module, profile, self.catalog)
            for module in self.articles()
        }
        logger.debug(
            "Evaluated %d articles for use %s: %d positive",
            len(results),
            profile.use_code,
            sum(1 for r in results.values() if r.is_positive),
        )
        return results


_default_engine: JudgementEngine | None = None


def evaluate(article: ArticleId | str, profile: BuildingProfile) -> JudgementResult:
    """Judge *profile* against *article* with a shared default engine."""
    global _default_engine
    if _default_engine is None:
        _default_engine = JudgementEngine()
    return _default_engine.evaluate(article, profile)
