"""Candidate engineer selection for approaches.

Additive score per candidate:
- skill match: matched fraction of criteria skills × 40
- experience at or above criteria: +20
- status in criteria statuses: +30
- recency (optional): +10 with no approach inside the window, -50 otherwise

Candidates scoring 50 or more are recommended.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from approach_engine.services.optimization.constants import (
    DEFAULT_RECENT_DAYS,
    EXPERIENCE_BONUS,
    NO_RECENT_APPROACH_BONUS,
    RECENT_APPROACH_PENALTY,
    RECOMMENDED_SCORE_THRESHOLD,
    SKILL_MATCH_WEIGHT,
    STATUS_BONUS,
)
from approach_engine.services.optimization.cooldown import check_engineer_recency
from approach_engine.services.optimization.messages import as_percent, format_message
from approach_engine.services.optimization.time_utils import (
    TimestampLike,
    resolve_as_of,
)
from approach_engine.services.optimization.types import (
    ApproachEvent,
    CandidateEngineer,
    EngineerSelection,
    SelectionCriteria,
)

logger = logging.getLogger(__name__)


def compute_skill_match(
    required_skills: Iterable[str], candidate_skills: Optional[Iterable[str]]
) -> float:
    """Return the fraction of required skills found in candidate skills.

    A required skill matches when it is a case-insensitive substring of any
    candidate skill ("react" matches "React Native"). Missing candidate skills
    count as no matches.
    """
    required = list(required_skills)
    if not required:
        return 0.0
    owned = [s.lower() for s in (candidate_skills or [])]
    matched = sum(1 for skill in required if any(skill.lower() in o for o in owned))
    return matched / len(required)


def score_candidate(
    candidate: CandidateEngineer,
    criteria: SelectionCriteria,
    approach_history: list[ApproachEvent],
    *,
    as_of: TimestampLike | None = None,
    locale: str | None = None,
) -> EngineerSelection:
    """Score one candidate against criteria."""
    score = 0.0
    reasons: list[str] = []

    if criteria.skills:
        skill_score = compute_skill_match(criteria.skills, candidate.skills)
        score += skill_score * SKILL_MATCH_WEIGHT
        if skill_score > 0:
            reasons.append(
                format_message("skill_match", locale, percent=as_percent(skill_score))
            )

    if criteria.experience and candidate.experience_years:
        if candidate.experience_years >= criteria.experience:
            score += EXPERIENCE_BONUS
            reasons.append(
                format_message("experience", locale, years=candidate.experience_years)
            )

    if criteria.status and candidate.current_status in criteria.status:
        score += STATUS_BONUS
        reasons.append(format_message("status", locale, status=candidate.current_status))

    if criteria.exclude_recently_approached:
        recent_days = criteria.recent_days or DEFAULT_RECENT_DAYS
        recency = check_engineer_recency(
            candidate.id, approach_history, recent_days, as_of=as_of, locale=locale
        )
        if recency.is_duplicate:
            score -= RECENT_APPROACH_PENALTY
            reasons.append(
                format_message(
                    "recently_approached",
                    locale,
                    days=max(0, recency.days_since_last_approach or 0),
                )
            )
        else:
            score += NO_RECENT_APPROACH_BONUS
            reasons.append(format_message("no_recent_approach", locale))

    return EngineerSelection(
        candidate_id=candidate.id,
        name=candidate.name,
        score=score,
        reasons=reasons,
        is_recommended=score >= RECOMMENDED_SCORE_THRESHOLD,
    )


def select_target_engineers(
    candidates: Iterable[CandidateEngineer],
    criteria: SelectionCriteria,
    approach_history: Iterable[ApproachEvent],
    *,
    as_of: TimestampLike | None = None,
    locale: str | None = None,
) -> list[EngineerSelection]:
    """Rank candidates for an approach.

    Args:
        candidates: Engineers to evaluate.
        criteria: Selection criteria.
        approach_history: Prior approaches, used only for the recency rule.
        as_of: Reference "now" for recency. Default: current UTC time.
        locale: Reason-string locale.

    Returns:
        Selections sorted by score descending; equal scores keep input order.
    """
    history = list(approach_history)
    reference = resolve_as_of(as_of)
    selections = [
        score_candidate(c, criteria, history, as_of=reference, locale=locale)
        for c in candidates
    ]
    selections.sort(key=lambda s: s.score, reverse=True)
    logger.debug(
        "Scored %d candidates, %d recommended",
        len(selections),
        sum(1 for s in selections if s.is_recommended),
    )
    return selections
