"""Small numeric helpers shared by the score services and the dashboard."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

from assessment_app.constants.assessment_constants import (
    GRADE_THRESHOLDS,
    HIGH_TIER_THRESHOLD,
    LOWEST_GRADE,
    MAX_SCORE,
    MEDIUM_TIER_THRESHOLD,
    SCORE_DECIMALS,
)


def round_score(value: float, decimals: int = SCORE_DECIMALS) -> float:
    """Round half away from zero, so 3.25 becomes 3.3 rather than 3.2."""
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def mean(values: Iterable[float]) -> float | None:
    """Arithmetic mean, or ``None`` for an empty iterable."""
    items = list(values)
    if not items:
        return None
    return sum(items) / len(items)


def score_tier(score: float) -> str:
    if score >= HIGH_TIER_THRESHOLD:
        return "high"
    if score >= MEDIUM_TIER_THRESHOLD:
        return "medium"
    return "low"


def score_grade(score: float) -> str:
    for threshold, grade in GRADE_THRESHOLDS:
        if score >= threshold:
            return grade
    return LOWEST_GRADE


def score_percentage(score: float, max_score: float = MAX_SCORE) -> float:
    if max_score <= 0:
        return 0.0
    return max(0.0, min(100.0, score / max_score * 100))
