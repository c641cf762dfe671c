"""Value objects consumed and produced by the optimization engines.

Inputs are read-only snapshots supplied by the caller; outputs exist only
inside a single call's return value.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Optional

from approach_engine.services.optimization.time_utils import TimestampLike


class ApproachStatus(str, Enum):
    """Status of an approach. Sequence validity is not enforced here."""

    SENT = "sent"
    OPENED = "opened"
    REPLIED = "replied"
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class TargetType(str, Enum):
    COMPANY = "company"
    FREELANCER = "freelancer"


# ── Inputs ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ApproachEvent:
    """One outreach attempt.

    engineer_ids lists the engineers proposed in the approach (may be empty).
    Timestamps may be datetimes or ISO-8601 strings and are parsed on use.
    """

    id: str
    target_type: TargetType
    target_id: str
    template_id: Optional[str]
    status: ApproachStatus
    sent_at: TimestampLike
    opened_at: Optional[TimestampLike] = None
    replied_at: Optional[TimestampLike] = None
    engineer_ids: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "target_type", TargetType(self.target_type))
        object.__setattr__(self, "status", ApproachStatus(self.status))
        object.__setattr__(self, "engineer_ids", tuple(self.engineer_ids or ()))


@dataclass(frozen=True)
class EmailTemplate:
    id: str
    name: str


@dataclass(frozen=True)
class CandidateEngineer:
    id: str
    name: str
    skills: Optional[list[str]] = None
    experience_years: Optional[float] = None
    current_status: Optional[str] = None


@dataclass(frozen=True)
class SelectionCriteria:
    """Caller-supplied criteria for candidate selection."""

    skills: Optional[list[str]] = None
    experience: Optional[float] = None
    status: Optional[list[str]] = None
    exclude_recently_approached: bool = False
    recent_days: Optional[int] = None


@dataclass(frozen=True)
class PeriodStat:
    """One aggregation bucket (typically a day or an hour)."""

    date: TimestampLike
    sent: int = 0
    opened: int = 0
    replied: int = 0
    accepted: int = 0


# ── Outputs ─────────────────────────────────────────────────────────────


@dataclass
class OptimalSendTime:
    hour: int
    day_of_week: int
    open_rate: float
    reply_rate: float
    recommendation: str


@dataclass
class EngineerSelection:
    candidate_id: str
    name: str
    score: float
    reasons: list[str] = field(default_factory=list)
    is_recommended: bool = False


@dataclass
class DuplicateCheck:
    """Result of a duplicate-approach (cooldown) check."""

    is_duplicate: bool
    message: str
    last_approach_date: Optional[datetime] = None
    days_since_last_approach: Optional[int] = None


@dataclass
class FreelanceLimitCheck:
    """Result of the fixed-window freelancer limit check."""

    can_approach: bool
    message: str
    last_approach_date: Optional[datetime] = None
    days_since_last_approach: Optional[int] = None
    days_until_next_approach: Optional[int] = None


@dataclass
class TemplateConversion:
    template_id: str
    template_name: str
    conversion_rate: float
    sample_size: int


@dataclass
class TimeSlotConversion:
    hour: int
    conversion_rate: float
    sample_size: int


@dataclass
class DayOfWeekConversion:
    day_of_week: int
    conversion_rate: float
    sample_size: int


@dataclass
class ConversionAnalysis:
    overall_conversion_rate: float
    by_template: list[TemplateConversion] = field(default_factory=list)
    by_time_slot: list[TimeSlotConversion] = field(default_factory=list)
    by_day_of_week: list[DayOfWeekConversion] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)


@dataclass
class ApproachSummary:
    """Totals and rates over a set of approaches (rates relative to total_sent)."""

    total_sent: int
    total_opened: int
    total_replied: int
    total_accepted: int
    open_rate: float
    reply_rate: float
    accept_rate: float


@dataclass
class CompanyStat:
    """Funnel counts for one company target."""

    company_id: str
    sent: int = 0
    opened: int = 0
    replied: int = 0
    accepted: int = 0
