"""Article rule modules of the Enforcement Order and their registry."""

from firecode.articles.registry import ArticleRegistry, UnknownArticleError

__all__ = ["ArticleRegistry", "UnknownArticleError"]
