"""Cooldown guard: duplicate-approach and freelancer limit checks.

Both checks look up the latest approach (max sent_at) for a target in the
supplied history and compare the calendar-day gap to a window. History is
scanned once and never mutated.
"""

from __future__ import annotations

from typing import Callable, Iterable, Optional

from approach_engine.services.optimization.constants import (
    DEFAULT_FREELANCE_LIMIT_DAYS,
    DEFAULT_MIN_INTERVAL_DAYS,
    DEFAULT_RECENT_DAYS,
)
from approach_engine.services.optimization.messages import format_message
from approach_engine.services.optimization.time_utils import (
    TimestampLike,
    calendar_days_between,
    parse_timestamp,
    resolve_as_of,
    to_utc,
)
from approach_engine.services.optimization.types import (
    ApproachEvent,
    DuplicateCheck,
    FreelanceLimitCheck,
    TargetType,
)


def find_latest_approach(
    history: Iterable[ApproachEvent],
    predicate: Callable[[ApproachEvent], bool],
) -> Optional[ApproachEvent]:
    """Return the matching approach with the latest sent_at, or None.

    On equal sent_at the first match in history wins.
    """
    latest: Optional[ApproachEvent] = None
    latest_at = None
    for approach in history:
        if not predicate(approach):
            continue
        sent_at = to_utc(parse_timestamp(approach.sent_at))
        if latest_at is None or sent_at > latest_at:
            latest = approach
            latest_at = sent_at
    return latest


def _targets(target_id: str, target_type: TargetType) -> Callable[[ApproachEvent], bool]:
    target_type = TargetType(target_type)

    def predicate(approach: ApproachEvent) -> bool:
        return approach.target_type == target_type and approach.target_id == target_id

    return predicate


def _proposes_engineer(engineer_id: str) -> Callable[[ApproachEvent], bool]:
    def predicate(approach: ApproachEvent) -> bool:
        if engineer_id in approach.engineer_ids:
            return True
        return (
            approach.target_type == TargetType.FREELANCER
            and approach.target_id == engineer_id
        )

    return predicate


def _duplicate_check_for(
    latest: Optional[ApproachEvent],
    min_interval_days: int,
    as_of: TimestampLike | None,
    locale: str | None,
) -> DuplicateCheck:
    if latest is None:
        return DuplicateCheck(
            is_duplicate=False,
            message=format_message("no_history", locale),
        )

    last_sent = parse_timestamp(latest.sent_at)
    days = calendar_days_between(last_sent, resolve_as_of(as_of))
    if days < min_interval_days:
        return DuplicateCheck(
            is_duplicate=True,
            last_approach_date=last_sent,
            days_since_last_approach=days,
            message=format_message(
                "duplicate", locale, days=days, interval=min_interval_days
            ),
        )
    return DuplicateCheck(
        is_duplicate=False,
        last_approach_date=last_sent,
        days_since_last_approach=days,
        message=format_message("not_duplicate", locale, days=days),
    )


def check_duplicate(
    target_id: str,
    target_type: TargetType | str,
    history: Iterable[ApproachEvent],
    min_interval_days: int = DEFAULT_MIN_INTERVAL_DAYS,
    *,
    as_of: TimestampLike | None = None,
    locale: str | None = None,
) -> DuplicateCheck:
    """Check whether approaching a company or freelancer now would be a duplicate.

    Args:
        target_id: Company or freelancer id.
        target_type: "company" or "freelancer".
        history: Prior approaches (any targets).
        min_interval_days: Required gap; fewer elapsed days → duplicate.
        as_of: Reference "now". Default: current UTC time.
        locale: Message locale.

    Returns:
        DuplicateCheck; is_duplicate=False when there is no prior approach.
    """
    latest = find_latest_approach(history, _targets(target_id, target_type))
    return _duplicate_check_for(latest, min_interval_days, as_of, locale)


def check_engineer_recency(
    engineer_id: str,
    history: Iterable[ApproachEvent],
    recent_days: int = DEFAULT_RECENT_DAYS,
    *,
    as_of: TimestampLike | None = None,
    locale: str | None = None,
) -> DuplicateCheck:
    """Duplicate check keyed on an engineer proposed in (or targeted by) approaches."""
    latest = find_latest_approach(history, _proposes_engineer(engineer_id))
    return _duplicate_check_for(latest, recent_days, as_of, locale)


def check_freelance_limit(
    freelancer_id: str,
    history: Iterable[ApproachEvent],
    limit_days: int = DEFAULT_FREELANCE_LIMIT_DAYS,
    *,
    as_of: TimestampLike | None = None,
    locale: str | None = None,
) -> FreelanceLimitCheck:
    """Fixed-window limiter for freelancer approaches.

    Approaching is allowed when there is no prior freelancer approach or when
    at least limit_days have elapsed (exactly limit_days permits).
    """
    latest = find_latest_approach(
        history, _targets(freelancer_id, TargetType.FREELANCER)
    )
    if latest is None:
        return FreelanceLimitCheck(
            can_approach=True,
            message=format_message("freelance_available", locale),
        )

    last_sent = parse_timestamp(latest.sent_at)
    days = calendar_days_between(last_sent, resolve_as_of(as_of))
    if days < limit_days:
        remaining = limit_days - days
        return FreelanceLimitCheck(
            can_approach=False,
            last_approach_date=last_sent,
            days_since_last_approach=days,
            days_until_next_approach=remaining,
            message=format_message(
                "freelance_blocked", locale, days=days, remaining=remaining
            ),
        )
    return FreelanceLimitCheck(
        can_approach=True,
        last_approach_date=last_sent,
        days_since_last_approach=days,
        message=format_message("freelance_allowed", locale, days=days),
    )
