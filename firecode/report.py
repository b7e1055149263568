"""DeterminationReport model and Markdown report generation."""

from __future__ import annotations

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from firecode.engine import JudgementEngine
from firecode.judgement.result import JudgementResult
from firecode.judgement.rules import ArticleId
from firecode.models.building import BuildingProfile


class ArticleDetermination(BaseModel):
    """The determination for one article, with the equipment it concerns."""

    article: ArticleId
    equipment: str
    result: JudgementResult


class DeterminationReport(BaseModel):
    """Equipment determinations for one building."""

    use_code: str | None = None
    use_display: str = ""
    determinations: list[ArticleDetermination] = Field(default_factory=list)

    generated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    """Timestamp of the evaluation."""

    @classmethod
    def from_engine(cls, engine: JudgementEngine, profile: BuildingProfile) -> DeterminationReport:
        """Evaluate *profile* with *engine* and collect the results."""
        equipment = {m.article: m.equipment for m in engine.articles()}
        results = engine.evaluate_all(profile)
        return cls(
            use_code=profile.use_code,
            use_display=engine.catalog.display_name_for(profile.use_code),
            determinations=[
                ArticleDetermination(article=article, equipment=equipment[article], result=result)
                for article, result in results.items()
            ],
        )

    @property
    def required(self) -> list[ArticleDetermination]:
        return [d for d in self.determinations if d.result.required is True]

    @property
    def warnings(self) -> list[ArticleDetermination]:
        return [d for d in self.determinations if d.result.is_warning]

    def to_markdown(self) -> str:
        """Render the report as a Markdown document."""
        lines: list[str] = []

        lines.append(f"# Equipment Determination: {self.use_display or 'Unknown'}")
        lines.append("")
        lines.append(f"**Use code:** `{self.use_code or '-'}`")
        lines.append(f"**Generated:** {self.generated_at.strftime('%Y-%m-%d %H:%M UTC')}")
        lines.append("")

        not_required = len(self.determinations) - len(self.required) - len(self.warnings)
        lines.append(
            f"**Results:** {len(self.required)} required, {len(self.warnings)} to review, "
            f"{not_required} not required"
        )
        lines.append("")

        if self.determinations:
            lines.append("## Determinations")
            lines.append("")
            lines.append("| Status | Article | Equipment | Basis |")
            lines.append("|--------|---------|-----------|-------|")
            for d in self.determinations:
                basis = _cell(d.result.basis)
                lines.append(
                    f"| {_status_label(d.result)} | Art. {d.article.value} | {d.equipment} | {basis} |"
                )
            lines.append("")

        positives = [d for d in self.determinations if d.result.is_positive]
        if positives:
            lines.append("## Details")
            lines.append("")
            for d in positives:
                lines.append(f"### Art. {d.article.value}: {d.equipment}")
                lines.append("")
                lines.append(d.result.message)
                lines.append("")
                lines.append(f"*Basis:* {_cell(d.result.basis)}")
                lines.append("")

        return "\n".join(lines)


def _cell(text: str) -> str:
    """Flatten *text* for a single Markdown table cell."""
    return text.replace("\n", " ").replace("|", "\\|")


def _status_label(result: JudgementResult) -> str:
    if result.required is True:
        return "REQUIRED"
    if result.is_warning:
        return "REVIEW"
    return "NOT REQUIRED"
