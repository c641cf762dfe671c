"""Approach optimization: timing, targeting, cooldown and conversion analysis."""

from approach_engine.services.optimization.candidate_scorer import (
    compute_skill_match,
    score_candidate,
    select_target_engineers,
)
from approach_engine.services.optimization.conversion import analyze_conversion_rate
from approach_engine.services.optimization.cooldown import (
    check_duplicate,
    check_engineer_recency,
    check_freelance_limit,
    find_latest_approach,
)
from approach_engine.services.optimization.effectiveness import (
    score_approach_effectiveness,
    score_approaches,
)
from approach_engine.services.optimization.period_stats import (
    build_company_stats,
    build_period_stats,
    summarize_approaches,
)
from approach_engine.services.optimization.timing import compute_optimal_send_time

__all__ = [
    "analyze_conversion_rate",
    "build_company_stats",
    "build_period_stats",
    "check_duplicate",
    "check_engineer_recency",
    "check_freelance_limit",
    "compute_optimal_send_time",
    "compute_skill_match",
    "find_latest_approach",
    "score_approach_effectiveness",
    "score_approaches",
    "score_candidate",
    "select_target_engineers",
    "summarize_approaches",
]
