"""Equity score aggregation and the thresholds callers label scores with."""

from collections import Counter
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, Iterable, Optional

from ..domain.models import (
    EquityScoreResult,
    ParticipantStatus,
    Status,
    StatusBreakdown,
)

STATUS_WEIGHTS: Dict[Status, Decimal] = {
    Status.green: Decimal("1.0"),
    Status.orange: Decimal("0.6"),
    Status.red: Decimal("0.2"),
    Status.critical: Decimal("0.0"),
}

# (minimum score, label), checked top-down.
QUALITY_LABELS = ((80, "Excellent"), (50, "Good"), (30, "Fair"))
QUALITY_FLOOR = "Poor"
SEVERITY_TIERS = ((71, "favorable"), (41, "caution"))
SEVERITY_FLOOR = "unfavorable"


def score_statuses(statuses: Iterable[ParticipantStatus]) -> EquityScoreResult:
    """Fold participant statuses into a 0-100 score and a count breakdown.

    ``score`` is ``round(100 * sum(weights) / count)`` with halves rounded
    up. With no statuses there is nobody to be fair to, so ``score`` is
    ``None`` rather than zero.
    """
    counts = Counter(Status(item.status) for item in statuses)
    breakdown = StatusBreakdown(
        green=counts[Status.green],
        orange=counts[Status.orange],
        red=counts[Status.red],
        critical=counts[Status.critical],
    )
    if breakdown.total == 0:
        return EquityScoreResult(score=None, breakdown=breakdown)

    points = sum(STATUS_WEIGHTS[status] * n for status, n in counts.items())
    raw = Decimal(100) * points / breakdown.total
    score = int(raw.quantize(Decimal(1), rounding=ROUND_HALF_UP))
    return EquityScoreResult(score=score, breakdown=breakdown)


def _label(score: Optional[int], table, floor: str) -> Optional[str]:
    if score is None:
        return None
    for minimum, label in table:
        if score >= minimum:
            return label
    return floor


def quality_label(score: Optional[int]) -> Optional[str]:
    """Excellent / Good / Fair / Poor; ``None`` for an absent score."""
    return _label(score, QUALITY_LABELS, QUALITY_FLOOR)


def severity_tier(score: Optional[int]) -> Optional[str]:
    """favorable / caution / unfavorable; ``None`` for an absent score."""
    return _label(score, SEVERITY_TIERS, SEVERITY_FLOOR)


def compare_scores(score_a: Optional[int], score_b: Optional[int]) -> int:
    """1 if A is better, -1 if B is better, 0 if equal. Absent ranks lowest."""
    a = -1 if score_a is None else score_a
    b = -1 if score_b is None else score_b
    return (a > b) - (a < b)
