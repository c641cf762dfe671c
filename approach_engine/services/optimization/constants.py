"""Approach optimization constants, weights and thresholds.

All tunable numbers used by the optimization engines live here. No magic
numbers inside the engines.
"""

from __future__ import annotations

# ── Timing (optimal send time) ──────────────────────────────────────────

TIMING_OPEN_RATE_WEIGHT: float = 0.4
TIMING_REPLY_RATE_WEIGHT: float = 0.6  # replies matter more than opens

DEFAULT_SEND_HOUR: int = 10
DEFAULT_SEND_DAY_OF_WEEK: int = 2  # Tuesday (0=Sunday)

BUSINESS_HOUR_START: int = 9
BUSINESS_HOUR_END: int = 18

SUNDAY: int = 0
MONDAY: int = 1
FRIDAY: int = 5
SATURDAY: int = 6

# ── Candidate scoring ───────────────────────────────────────────────────

SKILL_MATCH_WEIGHT: float = 40.0
EXPERIENCE_BONUS: int = 20
STATUS_BONUS: int = 30
NO_RECENT_APPROACH_BONUS: int = 10
RECENT_APPROACH_PENALTY: int = 50
RECOMMENDED_SCORE_THRESHOLD: float = 50.0

DEFAULT_RECENT_DAYS: int = 90

# ── Cooldown windows ────────────────────────────────────────────────────

DEFAULT_MIN_INTERVAL_DAYS: int = 30
DEFAULT_FREELANCE_LIMIT_DAYS: int = 90

# ── Conversion analysis ─────────────────────────────────────────────────

MIN_TEMPLATE_SAMPLE_SIZE: int = 10
MIN_TIME_SLOT_SAMPLE_SIZE: int = 5
MIN_DAY_OF_WEEK_SAMPLE_SIZE: int = 5
LOW_CONVERSION_THRESHOLD: float = 0.1

# ── Effectiveness ───────────────────────────────────────────────────────

STATUS_BASE_SCORES: dict[str, int] = {
    "accepted": 100,
    "replied": 50,
    "opened": 20,
    "sent": 5,
    "rejected": -10,
}

# (max response days, bonus), checked in order
RESPONSE_SPEED_BONUSES: list[tuple[int, int]] = [
    (1, 20),
    (3, 10),
    (7, 5),
]
