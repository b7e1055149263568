"""Merge main-building and component-use results into one determination."""

from __future__ import annotations

from collections.abc import Sequence

from firecode.config import BASIS_SEPARATOR, MESSAGE_BULLET
from firecode.judgement.result import WARNING, JudgementResult, not_required

_GENERIC_NOT_REQUIRED = "Installation is not required."


def aggregate(
    results: Sequence[JudgementResult],
    *,
    fallback: JudgementResult | None = None,
) -> JudgementResult:
    """Combine *results* into a single determination.

    Explicit not-required results are set aside; the first is returned only
    when nothing positive remains.  Several positive results merge into a
    bulleted message and a de-duplicated citation list.

    Parameters
    ----------
    results:
        Main-building results followed by component-use results.
    fallback:
        Returned when there is neither a positive nor an explicit
        not-required result.
    """
    positives: list[JudgementResult] = []
    explicit_false: JudgementResult | None = None
    for result in results:
        if result.is_positive:
            positives.append(result)
        elif explicit_false is None:
            explicit_false = result

    if not positives:
        if explicit_false is not None:
            return explicit_false
        return fallback if fallback is not None else not_required(_GENERIC_NOT_REQUIRED)

    if len(positives) == 1:
        return positives[0]

    merged_required = True if any(r.required is True for r in positives) else WARNING
    message = "\n".join(f"{MESSAGE_BULLET}{r.message}" for r in positives)
    bases = list(dict.fromkeys(r.basis for r in positives))

    return JudgementResult(
        required=merged_required,
        message=message,
        basis=BASIS_SEPARATOR.join(bases),
    )
