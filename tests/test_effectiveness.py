"""Approach effectiveness score tests."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from approach_engine.services.optimization.effectiveness import (
    compute_response_speed_bonus,
    score_approach_effectiveness,
    score_approaches,
)
from tests.factories import make_approach

SENT = datetime(2026, 3, 2, 9, 0, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("status", "expected"),
    [("accepted", 100), ("replied", 50), ("opened", 20), ("sent", 5), ("rejected", 0)],
)
def test_base_score_by_status(status: str, expected: int) -> None:
    """No reply timestamp → base score only; rejected floors at 0."""
    assert score_approach_effectiveness(make_approach(status=status, sent_at=SENT)) == expected


@pytest.mark.parametrize(
    ("days", "bonus"),
    [(0, 20), (1, 20), (2, 10), (3, 10), (5, 5), (7, 5), (8, 0), (30, 0)],
)
def test_response_speed_bonus(days: int, bonus: int) -> None:
    assert compute_response_speed_bonus(days) == bonus


def test_fast_reply_adds_bonus() -> None:
    """Replied the next day → 50 + 20."""
    approach = make_approach(
        status="replied", sent_at=SENT, replied_at=SENT + timedelta(days=1, hours=3)
    )
    assert score_approach_effectiveness(approach) == 70


def test_slow_reply_no_bonus() -> None:
    approach = make_approach(
        status="accepted", sent_at=SENT, replied_at=SENT + timedelta(days=10)
    )
    assert score_approach_effectiveness(approach) == 100


def test_reply_uses_calendar_days() -> None:
    """23:00 → 01:00 two days later counts as 2 days (+10)."""
    approach = make_approach(
        status="replied",
        sent_at="2026-03-02T23:00:00Z",
        replied_at="2026-03-04T01:00:00Z",
    )
    assert score_approach_effectiveness(approach) == 60


@pytest.mark.parametrize("reply_days", [0, 2, 5, 10])
def test_status_ordering_for_identical_timing(reply_days: int) -> None:
    """accepted > replied > opened > sent > rejected, never negative."""
    replied_at = SENT + timedelta(days=reply_days)
    scores = [
        score_approach_effectiveness(
            make_approach(status=status, sent_at=SENT, replied_at=replied_at)
        )
        for status in ("accepted", "replied", "opened", "sent", "rejected")
    ]
    assert scores == sorted(scores, reverse=True)
    assert len(set(scores)) == 5
    assert min(scores) >= 0


def test_score_approaches_keeps_input_order() -> None:
    first = make_approach(status="accepted", sent_at=SENT)
    second = make_approach(status="sent", sent_at=SENT)
    assert score_approaches([first, second]) == [(first.id, 100), (second.id, 5)]
