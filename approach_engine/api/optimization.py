"""Approach optimization API routes.

Thin wrappers over approach_engine.services.optimization. Interval and locale
defaults come from settings when the request omits them.
"""

from __future__ import annotations

from fastapi import APIRouter

from approach_engine.config import get_settings
from approach_engine.schemas.optimization import (
    ApproachSummaryRead,
    CompanyStatRead,
    ConversionAnalysisRead,
    ConversionAnalysisRequest,
    DuplicateCheckRead,
    DuplicateCheckRequest,
    EffectivenessRequest,
    EffectivenessResponse,
    EffectivenessScoreRead,
    EngineerSelectionRead,
    FreelanceLimitRead,
    FreelanceLimitRequest,
    OptimalSendTimeRead,
    OptimalSendTimeRequest,
    PeriodStatRead,
    PeriodStatsRequest,
    PeriodStatsResponse,
    SelectTargetsRequest,
    SelectTargetsResponse,
)
from approach_engine.services.optimization import (
    analyze_conversion_rate,
    build_company_stats,
    build_period_stats,
    check_duplicate,
    check_freelance_limit,
    compute_optimal_send_time,
    score_approaches,
    select_target_engineers,
    summarize_approaches,
)

router = APIRouter()


def _locale(requested: str | None) -> str:
    return requested or get_settings().recommendation_locale


@router.post("/optimal-send-time", response_model=OptimalSendTimeRead)
def api_optimal_send_time(body: OptimalSendTimeRequest) -> OptimalSendTimeRead:
    """Best weekday and hour to send, from pre-aggregated period stats."""
    result = compute_optimal_send_time(
        [p.to_domain() for p in body.period_stats],
        locale=_locale(body.locale),
    )
    return OptimalSendTimeRead.model_validate(result)


@router.post("/select-targets", response_model=SelectTargetsResponse)
def api_select_targets(body: SelectTargetsRequest) -> SelectTargetsResponse:
    """Rank candidate engineers against selection criteria.

    When criteria.recent_days is omitted, RECENT_APPROACH_DAYS applies.
    """
    criteria = body.criteria.to_domain()
    if criteria.exclude_recently_approached and criteria.recent_days is None:
        criteria = body.criteria.model_copy(
            update={"recent_days": get_settings().recent_approach_days}
        ).to_domain()

    selections = select_target_engineers(
        [c.to_domain() for c in body.candidates],
        criteria,
        [a.to_domain() for a in body.approach_history],
        as_of=body.as_of,
        locale=_locale(body.locale),
    )
    return SelectTargetsResponse(
        selections=[EngineerSelectionRead.model_validate(s) for s in selections]
    )


@router.post("/duplicate-check", response_model=DuplicateCheckRead)
def api_duplicate_check(body: DuplicateCheckRequest) -> DuplicateCheckRead:
    """Check whether a company/freelancer was approached within the interval."""
    min_interval = (
        body.min_interval_days
        if body.min_interval_days is not None
        else get_settings().duplicate_min_interval_days
    )
    result = check_duplicate(
        body.target_id,
        body.target_type,
        [a.to_domain() for a in body.history],
        min_interval,
        as_of=body.as_of,
        locale=_locale(body.locale),
    )
    return DuplicateCheckRead.model_validate(result)


@router.post("/freelance-limit", response_model=FreelanceLimitRead)
def api_freelance_limit(body: FreelanceLimitRequest) -> FreelanceLimitRead:
    """Check the fixed-window limit for approaching a freelancer."""
    limit_days = (
        body.limit_days if body.limit_days is not None else get_settings().freelance_limit_days
    )
    result = check_freelance_limit(
        body.freelancer_id,
        [a.to_domain() for a in body.history],
        limit_days,
        as_of=body.as_of,
        locale=_locale(body.locale),
    )
    return FreelanceLimitRead.model_validate(result)


@router.post("/conversion-analysis", response_model=ConversionAnalysisRead)
def api_conversion_analysis(body: ConversionAnalysisRequest) -> ConversionAnalysisRead:
    """Conversion rates by template, hour and weekday, with recommendations."""
    analysis = analyze_conversion_rate(
        [a.to_domain() for a in body.approaches],
        [t.to_domain() for t in body.templates],
        locale=_locale(body.locale),
    )
    return ConversionAnalysisRead.model_validate(analysis)


@router.post("/effectiveness", response_model=EffectivenessResponse)
def api_effectiveness(body: EffectivenessRequest) -> EffectivenessResponse:
    scores = score_approaches(a.to_domain() for a in body.approaches)
    return EffectivenessResponse(
        scores=[
            EffectivenessScoreRead(approach_id=approach_id, score=score)
            for approach_id, score in scores
        ]
    )


@router.post("/period-stats", response_model=PeriodStatsResponse)
def api_period_stats(body: PeriodStatsRequest) -> PeriodStatsResponse:
    """Roll raw approaches into period buckets, per-company counts and summary totals."""
    approaches = [a.to_domain() for a in body.approaches]
    periods = build_period_stats(approaches, granularity=body.granularity)
    return PeriodStatsResponse(
        period_stats=[PeriodStatRead.model_validate(p) for p in periods],
        by_company=[CompanyStatRead.model_validate(c) for c in build_company_stats(approaches)],
        summary=ApproachSummaryRead.model_validate(summarize_approaches(approaches)),
    )
