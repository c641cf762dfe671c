"""Approach effectiveness score.

Score = base by status (accepted 100 .. rejected -10) + response-speed bonus
when both sent_at and replied_at are present. Never negative.
"""

from __future__ import annotations

from typing import Iterable

from approach_engine.services.optimization.constants import (
    RESPONSE_SPEED_BONUSES,
    STATUS_BASE_SCORES,
)
from approach_engine.services.optimization.time_utils import calendar_days_between
from approach_engine.services.optimization.types import ApproachEvent


def compute_response_speed_bonus(response_days: int) -> int:
    """Return the bonus for replying within response_days of sending."""
    for max_days, bonus in RESPONSE_SPEED_BONUSES:
        if response_days <= max_days:
            return bonus
    return 0


def score_approach_effectiveness(approach: ApproachEvent) -> int:
    """Score a single approach outcome (0 or more).

    Args:
        approach: Event to score. Only status, sent_at and replied_at are read.

    Returns:
        max(0, status base + response-speed bonus), e.g. accepted with a
        same-day reply → 120.
    """
    score = STATUS_BASE_SCORES.get(approach.status.value, 0)

    if approach.replied_at and approach.sent_at:
        response_days = calendar_days_between(approach.sent_at, approach.replied_at)
        score += compute_response_speed_bonus(response_days)

    return max(0, score)


def score_approaches(approaches: Iterable[ApproachEvent]) -> list[tuple[str, int]]:
    """Score each approach; returns (approach id, score) pairs in input order."""
    return [(a.id, score_approach_effectiveness(a)) for a in approaches]
