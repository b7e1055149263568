"""Tests for the article registry and the judgement engine."""

from __future__ import annotations

import logging

import pytest

import firecode.engine as engine_module
from firecode import evaluate
from firecode.articles import ArticleRegistry, UnknownArticleError
from firecode.articles.article11 import ARTICLE_11
from firecode.config import SELECTION_REQUIRED_MESSAGE, Settings
from firecode.engine import JudgementEngine
from firecode.judgement.result import JudgementResult, required
from firecode.judgement.rules import ArticleId, ArticleRuleModule, RuleContext
from firecode.models import BuildingProfile
from firecode.uses.catalog import UseCatalog


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def engine() -> JudgementEngine:
    return JudgementEngine(settings=Settings())


@pytest.fixture
def registry() -> ArticleRegistry:
    reg = ArticleRegistry()
    reg.auto_discover()
    return reg


@pytest.fixture
def hall() -> BuildingProfile:
    return BuildingProfile(use_code="01_i", total_floor_area=600, total_capacity=350)


class FixedCatalog(UseCatalog):
    def display_name_for(self, code: str | None) -> str:
        return f"<{code}>"


def _always(ctx: RuleContext) -> JudgementResult:
    return required(f"Always for {ctx.use_display}.", "Custom basis")


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


class TestArticleRegistry:
    def test_auto_discover_registers_every_article(self, registry: ArticleRegistry) -> None:
        articles = [m.article for m in registry.list_articles()]
        assert articles == list(ArticleId)

    def test_get_by_string_and_enum(self, registry: ArticleRegistry) -> None:
        assert registry.get("11") is ARTICLE_11
        assert registry.get(ArticleId.ART_11) is ARTICLE_11

    def test_get_unknown_article(self, registry: ArticleRegistry) -> None:
        with pytest.raises(UnknownArticleError, match="Unknown article"):
            registry.get("30")

    def test_get_unregistered_article(self) -> None:
        with pytest.raises(UnknownArticleError, match="No rule module"):
            ArticleRegistry().get("10")

    def test_unknown_article_is_lookup_error(self) -> None:
        assert issubclass(UnknownArticleError, LookupError)

    def test_contains(self, registry: ArticleRegistry) -> None:
        assert "21-2" in registry
        assert ArticleId.ART_29_3 in registry
        assert "21_2" not in registry
        assert "10" not in ArticleRegistry()

    def test_register_replaces(self, registry: ArticleRegistry) -> None:
        custom = ArticleRuleModule(article=ArticleId.ART_10, equipment="Custom", rules=(_always,))
        registry.register(custom)
        assert registry.get("10") is custom
        assert len(registry.list_articles()) == len(ArticleId)

    def test_register_logs(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.INFO, logger="firecode"):
            ArticleRegistry().register(ARTICLE_11)
        assert "Registered article: 11" in caplog.text


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------


class TestJudgementEngine:
    def test_evaluate(self, engine: JudgementEngine, hall: BuildingProfile) -> None:
        result = engine.evaluate("11", hall)
        assert result.required is True
        assert result.basis == "Art. 11 para. 1 item 1"

    def test_evaluate_accepts_enum(self, engine: JudgementEngine, hall: BuildingProfile) -> None:
        assert engine.evaluate(ArticleId.ART_11, hall) == engine.evaluate("11", hall)

    def test_evaluate_unknown_article(self, engine: JudgementEngine, hall: BuildingProfile) -> None:
        with pytest.raises(UnknownArticleError):
            engine.evaluate("99", hall)

    def test_evaluate_all_in_statutory_order(self, engine: JudgementEngine, hall: BuildingProfile) -> None:
        results = engine.evaluate_all(hall)
        assert list(results) == list(ArticleId)

    def test_evaluate_all_matches_evaluate(self, engine: JudgementEngine, hall: BuildingProfile) -> None:
        for article, result in engine.evaluate_all(hall).items():
            assert result == engine.evaluate(article, hall)

    def test_evaluate_all_without_use_code(self, engine: JudgementEngine) -> None:
        results = engine.evaluate_all(BuildingProfile(total_floor_area=5000))
        assert all(r.message == SELECTION_REQUIRED_MESSAGE for r in results.values())

    def test_enabled_articles(self, hall: BuildingProfile) -> None:
        engine = JudgementEngine(settings=Settings(enabled_articles=["21", "11"]))
        assert list(engine.evaluate_all(hall)) == [ArticleId.ART_11, ArticleId.ART_21]

    def test_enabled_articles_do_not_restrict_evaluate(self, hall: BuildingProfile) -> None:
        engine = JudgementEngine(settings=Settings(enabled_articles=["21"]))
        assert engine.evaluate("24", hall).required is True

    def test_custom_catalog(self, hall: BuildingProfile) -> None:
        engine = JudgementEngine(catalog=FixedCatalog(), settings=Settings())
        assert "<01_i>" in engine.evaluate("10", hall).message

    def test_custom_registry(self, hall: BuildingProfile) -> None:
        registry = ArticleRegistry()
        registry.register(ArticleRuleModule(article=ArticleId.ART_29_3, equipment="Custom", rules=(_always,)))
        engine = JudgementEngine(registry=registry, settings=Settings())

        results = engine.evaluate_all(hall)
        assert list(results) == [ArticleId.ART_29_3]
        assert results[ArticleId.ART_29_3].basis == "Custom basis"
        with pytest.raises(UnknownArticleError):
            engine.evaluate("10", hall)

    def test_settings_loaded_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("FIRECODE_CONFIG", raising=False)
        monkeypatch.setenv("FIRECODE_ARTICLES", "29")
        engine = JudgementEngine()
        assert [m.article for m in engine.articles()] == [ArticleId.ART_29]

    def test_caller_log_level_preserved(self, monkeypatch: pytest.MonkeyPatch) -> None:
        pkg_logger = logging.getLogger("firecode")
        monkeypatch.setattr(pkg_logger, "level", logging.DEBUG)
        JudgementEngine(settings=Settings(log_level="ERROR"))
        assert pkg_logger.level == logging.DEBUG

    def test_unknown_log_level_does_not_raise(
        self, monkeypatch: pytest.MonkeyPatch, hall: BuildingProfile
    ) -> None:
        monkeypatch.delenv("FIRECODE_CONFIG", raising=False)
        monkeypatch.delenv("FIRECODE_ARTICLES", raising=False)
        monkeypatch.setenv("FIRECODE_LOG_LEVEL", "verbose")
        engine = JudgementEngine()
        assert engine.settings.log_level == "WARNING"
        assert engine.evaluate("11", hall).required is True


class TestModuleEvaluate:
    def test_default_engine_created_once(
        self, monkeypatch: pytest.MonkeyPatch, hall: BuildingProfile
    ) -> None:
        monkeypatch.delenv("FIRECODE_ARTICLES", raising=False)
        monkeypatch.delenv("FIRECODE_CONFIG", raising=False)
        monkeypatch.setattr(engine_module, "_default_engine", None)

        result = evaluate("11", hall)
        first = engine_module._default_engine
        assert result.required is True
        assert first is not None

        evaluate("10", hall)
        assert engine_module._default_engine is first
