"""Rule evaluation engine: rule modules, decomposition and aggregation."""

from firecode.judgement.aggregator import aggregate
from firecode.judgement.evaluator import evaluate_module
from firecode.judgement.result import JudgementResult
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext

__all__ = [
    "ArticleId",
    "ArticleRuleModule",
    "JudgementResult",
    "RuleContext",
    "aggregate",
    "evaluate_module",
]
