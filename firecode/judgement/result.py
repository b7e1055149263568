"""JudgementResult: the determination for one article."""

from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict

from firecode.config import NOT_APPLICABLE_BASIS, SELECTION_REQUIRED_MESSAGE

WARNING = "warning"

Required = bool | Literal["warning"]


class JudgementResult(BaseModel):
    """Outcome of judging one article against one building profile."""

    model_config = ConfigDict(frozen=True)

    required: Required
    """True (mandatory), ``"warning"`` (may apply, manual review) or False."""

    message: str
    basis: str = NOT_APPLICABLE_BASIS
    """Statutory citation; the neutral placeholder when not required."""

    @property
    def is_positive(self) -> bool:
        """True for mandatory and warning outcomes."""
        return self.required is not False

    @property
    def is_warning(self) -> bool:
        return self.required == WARNING


def required(message: str, basis: str) -> JudgementResult:
    return JudgementResult(required=True, message=message, basis=basis)


def warning(message: str, basis: str) -> JudgementResult:
    return JudgementResult(required=WARNING, message=message, basis=basis)


def not_required(message: str) -> JudgementResult:
    """A not-required outcome; its basis is always the neutral placeholder."""
    return JudgementResult(required=False, message=message, basis=NOT_APPLICABLE_BASIS)


def selection_required() -> JudgementResult:
    """Result returned by every article when no use code is selected."""
    return not_required(SELECTION_REQUIRED_MESSAGE)
