"""firecode: fire-safety equipment determination under the Fire Service Act Enforcement Order."""

__version__ = "1.0.0"

from firecode.articles.registry import ArticleRegistry, UnknownArticleError
from firecode.config import Settings, configure_logging, load_settings
from firecode.engine import JudgementEngine, evaluate
from firecode.judgement.aggregator import aggregate
from firecode.judgement.result import JudgementResult
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext
from firecode.models.building import (
    BuildingProfile,
    ComponentUse,
    FinishType,
    FireResistance,
    Floor,
    FloorKind,
    OccupancyFeatures,
    ParkingInfo,
    StageLocation,
    StructureType,
)
from firecode.report import ArticleDetermination, DeterminationReport
from firecode.uses.catalog import TableUseCatalog, UseCatalog
from firecode.uses.codes import code_matches, is_composite

__all__ = [
    "__version__",
    # Engine
    "ArticleRegistry",
    "JudgementEngine",
    "UnknownArticleError",
    "evaluate",
    # Rule evaluation
    "ArticleId",
    "ArticleRuleModule",
    "JudgementResult",
    "RuleContext",
    "aggregate",
    # Building model
    "BuildingProfile",
    "ComponentUse",
    "FinishType",
    "FireResistance",
    "Floor",
    "FloorKind",
    "OccupancyFeatures",
    "ParkingInfo",
    "StageLocation",
    "StructureType",
    # Use codes
    "TableUseCatalog",
    "UseCatalog",
    "code_matches",
    "is_composite",
    # Reporting and configuration
    "ArticleDetermination",
    "DeterminationReport",
    "Settings",
    "configure_logging",
    "load_settings",
]
