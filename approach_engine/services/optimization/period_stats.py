"""Roll raw approach events into PeriodStat buckets and summary totals."""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, Literal, Union

from approach_engine.services.optimization.time_utils import parse_timestamp
from approach_engine.services.optimization.types import (
    ApproachEvent,
    ApproachStatus,
    ApproachSummary,
    CompanyStat,
    PeriodStat,
    TargetType,
)

Granularity = Literal["hour", "day"]

_OPENED_STATUSES = frozenset(
    {ApproachStatus.OPENED, ApproachStatus.REPLIED, ApproachStatus.ACCEPTED}
)
_REPLIED_STATUSES = frozenset({ApproachStatus.REPLIED, ApproachStatus.ACCEPTED})


def was_opened(approach: ApproachEvent) -> bool:
    return bool(approach.opened_at) or approach.status in _OPENED_STATUSES


def was_replied(approach: ApproachEvent) -> bool:
    return bool(approach.replied_at) or approach.status in _REPLIED_STATUSES


def _bucket_start(approach: ApproachEvent, granularity: Granularity) -> Union[date, datetime]:
    # Wall clock as supplied, same reading as hour_of_day / day_of_week
    sent_at = parse_timestamp(approach.sent_at).replace(tzinfo=None)
    if granularity == "day":
        return sent_at.date()
    return sent_at.replace(minute=0, second=0, microsecond=0)


def _tally(row: list[int], approach: ApproachEvent) -> None:
    row[0] += 1
    row[1] += int(was_opened(approach))
    row[2] += int(was_replied(approach))
    row[3] += int(approach.status == ApproachStatus.ACCEPTED)


def build_period_stats(
    approaches: Iterable[ApproachEvent],
    *,
    granularity: Granularity = "hour",
) -> list[PeriodStat]:
    """Aggregate approaches into period buckets keyed on sent_at.

    Hourly buckets keep the send hour, which the timing analysis needs; daily
    buckets all land on midnight. Offsets are dropped, so a naive 10:45 and
    10:15+00:00 share the 10:00 bucket. Rows come back in time order.
    """
    if granularity not in ("hour", "day"):
        raise ValueError(f"Unsupported granularity: {granularity!r}")

    counts: dict[Union[date, datetime], list[int]] = {}
    for approach in approaches:
        _tally(counts.setdefault(_bucket_start(approach, granularity), [0, 0, 0, 0]), approach)

    return [
        PeriodStat(
            date=key.isoformat(), sent=row[0], opened=row[1], replied=row[2], accepted=row[3]
        )
        for key, row in sorted(counts.items())
    ]


def build_company_stats(approaches: Iterable[ApproachEvent]) -> list[CompanyStat]:
    """Per-company funnel counts over company-targeted approaches, by company id."""
    counts: dict[str, list[int]] = {}
    for approach in approaches:
        if approach.target_type != TargetType.COMPANY:
            continue
        _tally(counts.setdefault(approach.target_id, [0, 0, 0, 0]), approach)

    return [
        CompanyStat(
            company_id=company_id, sent=row[0], opened=row[1], replied=row[2], accepted=row[3]
        )
        for company_id, row in sorted(counts.items())
    ]


def summarize_approaches(approaches: Iterable[ApproachEvent]) -> ApproachSummary:
    """Return totals and open/reply/accept rates relative to total sent."""
    row = [0, 0, 0, 0]
    for approach in approaches:
        _tally(row, approach)
    total, opened, replied, accepted = row

    def rate(n: int) -> float:
        return n / total if total > 0 else 0.0

    return ApproachSummary(
        total_sent=total,
        total_opened=opened,
        total_replied=replied,
        total_accepted=accepted,
        open_rate=rate(opened),
        reply_rate=rate(replied),
        accept_rate=rate(accepted),
    )
