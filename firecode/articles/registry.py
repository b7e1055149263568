"""ArticleRegistry: register, discover and look up article rule modules."""

from __future__ import annotations

import logging

from firecode.judgement.rules import ArticleId, ArticleRuleModule

logger = logging.getLogger(__name__)


class UnknownArticleError(LookupError):
    """Raised when an article id has no registered rule module."""


class ArticleRegistry:
    """Central registry of article rule modules, kept in statutory order."""

    def __init__(self) -> None:
        self._modules: dict[ArticleId, ArticleRuleModule] = {}

    def register(self, module: ArticleRuleModule) -> None:
        """Add a module, replacing any module registered for the same article."""
        self._modules[module.article] = module
        logger.info("Registered article: %s (%s)", module.article.value, module.equipment)

    def auto_discover(self) -> None:
        """Load all built-in article modules."""
        from firecode.articles.article10 import ARTICLE_10
        from firecode.articles.article11 import ARTICLE_11
        from firecode.articles.article12 import ARTICLE_12
        from firecode.articles.article13 import ARTICLE_13
        from firecode.articles.article19 import ARTICLE_19
        from firecode.articles.article21 import ARTICLE_21
        from firecode.articles.article21_2 import ARTICLE_21_2
        from firecode.articles.article22 import ARTICLE_22
        from firecode.articles.article23 import ARTICLE_23
        from firecode.articles.article24 import ARTICLE_24
        from firecode.articles.article25 import ARTICLE_25
        from firecode.articles.article26 import ARTICLE_26
        from firecode.articles.article27 import ARTICLE_27
        from firecode.articles.article28 import ARTICLE_28
        from firecode.articles.article28_2 import ARTICLE_28_2
        from firecode.articles.article29 import ARTICLE_29
        from firecode.articles.article29_2 import ARTICLE_29_2
        from firecode.articles.article29_3 import ARTICLE_29_3

        for module in [
            ARTICLE_10,
            ARTICLE_11,
            ARTICLE_12,
            ARTICLE_13,
            ARTICLE_19,
            ARTICLE_21,
            ARTICLE_21_2,
            ARTICLE_22,
            ARTICLE_23,
            ARTICLE_24,
            ARTICLE_25,
            ARTICLE_26,
            ARTICLE_27,
            ARTICLE_28,
            ARTICLE_28_2,
            ARTICLE_29,
            ARTICLE_29_2,
            ARTICLE_29_3,
        ]:
            self.register(module)

    def get(self, article: ArticleId | str) -> ArticleRuleModule:
        """Return the module for *article*.

        Raises
        ------
        UnknownArticleError
            If *article* is not a known article id or has no module.
        """
        try:
            key = ArticleId(article)
        except ValueError:
            raise UnknownArticleError(f"Unknown article: {article!r}") from None
        module = self._modules.get(key)
        if module is None:
            raise UnknownArticleError(f"No rule module registered for article {key.value}")
        return module

    def list_articles(self) -> list[ArticleRuleModule]:
        """Return all registered modules in registration order."""
        return list(self._modules.values())

    def __contains__(self, article: object) -> bool:
        try:
            return ArticleId(article) in self._modules
        except ValueError:
            return False
