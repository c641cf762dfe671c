"""Optimal send time from pre-aggregated period statistics.

Each period falls into a (day_of_week, hour) bucket. Per bucket we keep an
equal-weight running mean of open rate (opened/sent) and reply rate
(replied/opened); a period with 2 sends counts as much as one with 200.
Bucket score = 0.4 * open + 0.6 * reply. The best bucket is then moved into
business hours and off weekends.
"""

from __future__ import annotations

import logging
from typing import Iterable

from approach_engine.services.optimization.constants import (
    BUSINESS_HOUR_END,
    BUSINESS_HOUR_START,
    DEFAULT_SEND_DAY_OF_WEEK,
    DEFAULT_SEND_HOUR,
    FRIDAY,
    MONDAY,
    SATURDAY,
    SUNDAY,
    TIMING_OPEN_RATE_WEIGHT,
    TIMING_REPLY_RATE_WEIGHT,
)
from approach_engine.services.optimization.messages import day_name, format_message
from approach_engine.services.optimization.time_utils import (
    day_of_week,
    hour_of_day,
    parse_timestamp,
    to_utc,
)
from approach_engine.services.optimization.types import OptimalSendTime, PeriodStat

logger = logging.getLogger(__name__)


def _safe_rate(numerator: int, denominator: int) -> float:
    return numerator / denominator if denominator > 0 else 0.0


def _canonical_key(period: PeriodStat) -> tuple:
    return (
        to_utc(parse_timestamp(period.date)),
        period.sent,
        period.opened,
        period.replied,
        period.accepted,
    )


def aggregate_time_buckets(
    period_stats: Iterable[PeriodStat],
) -> dict[tuple[int, int], dict[str, float]]:
    """Fold periods into {(day_of_week, hour): {open_rate, reply_rate, count}}.

    Periods are folded in a canonical order so the running means do not depend
    on input order.
    """
    buckets: dict[tuple[int, int], dict[str, float]] = {}
    for period in sorted(period_stats, key=_canonical_key):
        key = (day_of_week(period.date), hour_of_day(period.date))
        open_rate = _safe_rate(period.opened, period.sent)
        reply_rate = _safe_rate(period.replied, period.opened)

        existing = buckets.get(key, {"open_rate": 0.0, "reply_rate": 0.0, "count": 0})
        n = existing["count"]
        buckets[key] = {
            "open_rate": (existing["open_rate"] * n + open_rate) / (n + 1),
            "reply_rate": (existing["reply_rate"] * n + reply_rate) / (n + 1),
            "count": n + 1,
        }
    return buckets


def score_time_bucket(open_rate: float, reply_rate: float) -> float:
    return open_rate * TIMING_OPEN_RATE_WEIGHT + reply_rate * TIMING_REPLY_RATE_WEIGHT


def adjust_to_business_hours(hour: int, dow: int) -> tuple[int, int]:
    """Move hour into business hours and the day off the weekend."""
    if hour < BUSINESS_HOUR_START or hour > BUSINESS_HOUR_END:
        hour = DEFAULT_SEND_HOUR
    if dow == SUNDAY:
        dow = MONDAY
    elif dow == SATURDAY:
        dow = FRIDAY
    return hour, dow


def compute_optimal_send_time(
    period_stats: Iterable[PeriodStat] | None,
    *,
    locale: str | None = None,
) -> OptimalSendTime:
    """Pick the best weekday and hour to send from historical period stats.

    Args:
        period_stats: Aggregated buckets. None or empty → defaults.
        locale: Recommendation locale.

    Returns:
        OptimalSendTime with hour in [9, 18] and day_of_week in [1, 5]. Defaults
        to Tuesday 10:00 when no bucket has a positive score. open_rate and
        reply_rate are pooled over all periods, both relative to sent.
    """
    periods = list(period_stats or [])
    best_hour = DEFAULT_SEND_HOUR
    best_dow = DEFAULT_SEND_DAY_OF_WEEK
    max_score = 0.0

    buckets = aggregate_time_buckets(periods)
    # Lowest (day, hour) wins ties
    for (dow, hour), stats in sorted(buckets.items()):
        score = score_time_bucket(stats["open_rate"], stats["reply_rate"])
        if score > max_score:
            max_score = score
            best_hour = hour
            best_dow = dow

    best_hour, best_dow = adjust_to_business_hours(best_hour, best_dow)
    logger.debug(
        "Optimal send time: dow=%d hour=%d (score=%.3f, buckets=%d)",
        best_dow,
        best_hour,
        max_score,
        len(buckets),
    )

    total_sent = sum(p.sent for p in periods)
    total_opened = sum(p.opened for p in periods)
    total_replied = sum(p.replied for p in periods)

    return OptimalSendTime(
        hour=best_hour,
        day_of_week=best_dow,
        open_rate=_safe_rate(total_opened, total_sent),
        reply_rate=_safe_rate(total_replied, total_sent),
        recommendation=format_message(
            "optimal_send_time",
            locale,
            day=day_name(best_dow, locale),
            hour=best_hour,
        ),
    )
