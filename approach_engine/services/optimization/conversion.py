"""Conversion analysis by template, send hour and weekday.

Conversion rate = accepted / total, 0 when a segment is empty. Segments are
folded into fresh dicts per call. Recommendations are only produced for
segments with enough samples.
"""

from __future__ import annotations

from typing import Callable, Iterable

from approach_engine.services.optimization.constants import (
    LOW_CONVERSION_THRESHOLD,
    MIN_DAY_OF_WEEK_SAMPLE_SIZE,
    MIN_TEMPLATE_SAMPLE_SIZE,
    MIN_TIME_SLOT_SAMPLE_SIZE,
)
from approach_engine.services.optimization.messages import (
    as_percent,
    day_name,
    format_message,
)
from approach_engine.services.optimization.time_utils import day_of_week, hour_of_day
from approach_engine.services.optimization.types import (
    ApproachEvent,
    ApproachStatus,
    ConversionAnalysis,
    DayOfWeekConversion,
    EmailTemplate,
    TemplateConversion,
    TimeSlotConversion,
)


def conversion_rate(accepted: int, total: int) -> float:
    return accepted / total if total > 0 else 0.0


def _is_accepted(approach: ApproachEvent) -> bool:
    return approach.status == ApproachStatus.ACCEPTED


def _bucket_counts(
    approaches: list[ApproachEvent],
    key_fn: Callable[[ApproachEvent], int],
) -> dict[int, tuple[int, int]]:
    """Return {key: (accepted, total)} sorted by key."""
    counts: dict[int, tuple[int, int]] = {}
    for approach in approaches:
        key = key_fn(approach)
        accepted, total = counts.get(key, (0, 0))
        counts[key] = (accepted + int(_is_accepted(approach)), total + 1)
    return dict(sorted(counts.items()))


def _by_template(
    approaches: list[ApproachEvent], templates: Iterable[EmailTemplate]
) -> list[TemplateConversion]:
    rows = []
    for template in templates:
        matching = [a for a in approaches if a.template_id == template.id]
        accepted = sum(1 for a in matching if _is_accepted(a))
        rows.append(
            TemplateConversion(
                template_id=template.id,
                template_name=template.name,
                conversion_rate=conversion_rate(accepted, len(matching)),
                sample_size=len(matching),
            )
        )
    return sorted(rows, key=lambda r: r.conversion_rate, reverse=True)


def _by_time_slot(approaches: list[ApproachEvent]) -> list[TimeSlotConversion]:
    rows = [
        TimeSlotConversion(
            hour=hour,
            conversion_rate=conversion_rate(accepted, total),
            sample_size=total,
        )
        for hour, (accepted, total) in _bucket_counts(
            approaches, lambda a: hour_of_day(a.sent_at)
        ).items()
    ]
    return sorted(rows, key=lambda r: r.conversion_rate, reverse=True)


def _by_day_of_week(approaches: list[ApproachEvent]) -> list[DayOfWeekConversion]:
    rows = [
        DayOfWeekConversion(
            day_of_week=dow,
            conversion_rate=conversion_rate(accepted, total),
            sample_size=total,
        )
        for dow, (accepted, total) in _bucket_counts(
            approaches, lambda a: day_of_week(a.sent_at)
        ).items()
    ]
    return sorted(rows, key=lambda r: r.conversion_rate, reverse=True)


def build_recommendations(
    analysis: ConversionAnalysis,
    total: int,
    locale: str | None = None,
) -> list[str]:
    """Build recommendation strings for the top segments of an analysis."""
    recommendations: list[str] = []

    if analysis.by_template and analysis.by_template[0].sample_size >= MIN_TEMPLATE_SAMPLE_SIZE:
        top = analysis.by_template[0]
        recommendations.append(
            format_message(
                "top_template",
                locale,
                name=top.template_name,
                percent=as_percent(top.conversion_rate),
            )
        )

    if analysis.by_time_slot and analysis.by_time_slot[0].sample_size >= MIN_TIME_SLOT_SAMPLE_SIZE:
        top_slot = analysis.by_time_slot[0]
        recommendations.append(
            format_message(
                "top_hour",
                locale,
                hour=top_slot.hour,
                percent=as_percent(top_slot.conversion_rate),
            )
        )

    if (
        analysis.by_day_of_week
        and analysis.by_day_of_week[0].sample_size >= MIN_DAY_OF_WEEK_SAMPLE_SIZE
    ):
        top_day = analysis.by_day_of_week[0]
        recommendations.append(
            format_message(
                "top_day",
                locale,
                day=day_name(top_day.day_of_week, locale),
                percent=as_percent(top_day.conversion_rate),
            )
        )

    # No approaches means no data, not poor performance
    if total > 0 and analysis.overall_conversion_rate < LOW_CONVERSION_THRESHOLD:
        recommendations.append(format_message("low_conversion", locale))

    return recommendations


def analyze_conversion_rate(
    approaches: Iterable[ApproachEvent],
    templates: Iterable[EmailTemplate],
    *,
    locale: str | None = None,
) -> ConversionAnalysis:
    """Segment approaches and compute conversion rates plus recommendations.

    Args:
        approaches: Historical approaches.
        templates: Templates to report on (one row each, even with no samples).
        locale: Recommendation locale.

    Returns:
        ConversionAnalysis; every breakdown sorted by conversion rate descending.
    """
    approach_list = list(approaches)
    total = len(approach_list)
    accepted = sum(1 for a in approach_list if _is_accepted(a))

    analysis = ConversionAnalysis(
        overall_conversion_rate=conversion_rate(accepted, total),
        by_template=_by_template(approach_list, templates) if approach_list else [],
        by_time_slot=_by_time_slot(approach_list),
        by_day_of_week=_by_day_of_week(approach_list),
    )
    analysis.recommendations = build_recommendations(analysis, total, locale)
    return analysis
