"""Request and response schemas for /api/optimization."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from approach_engine.schemas.approach import (
    ApproachEventIn,
    CandidateEngineerIn,
    EmailTemplateIn,
    PeriodStatIn,
    SelectionCriteriaIn,
    TargetTypeLiteral,
)

# ── Requests ────────────────────────────────────────────────────────────


class OptimalSendTimeRequest(BaseModel):
    period_stats: list[PeriodStatIn] = Field(default_factory=list)
    locale: str | None = None


class SelectTargetsRequest(BaseModel):
    candidates: list[CandidateEngineerIn]
    criteria: SelectionCriteriaIn = Field(default_factory=SelectionCriteriaIn)
    approach_history: list[ApproachEventIn] = Field(default_factory=list)
    as_of: datetime | None = None
    locale: str | None = None


class DuplicateCheckRequest(BaseModel):
    target_id: str
    target_type: TargetTypeLiteral
    history: list[ApproachEventIn] = Field(default_factory=list)
    min_interval_days: int | None = Field(None, ge=0, description="Default: DUPLICATE_MIN_INTERVAL_DAYS.")
    as_of: datetime | None = None
    locale: str | None = None


class FreelanceLimitRequest(BaseModel):
    freelancer_id: str
    history: list[ApproachEventIn] = Field(default_factory=list)
    limit_days: int | None = Field(None, ge=0, description="Default: FREELANCE_LIMIT_DAYS.")
    as_of: datetime | None = None
    locale: str | None = None


class ConversionAnalysisRequest(BaseModel):
    approaches: list[ApproachEventIn] = Field(default_factory=list)
    templates: list[EmailTemplateIn] = Field(default_factory=list)
    locale: str | None = None


class EffectivenessRequest(BaseModel):
    approaches: list[ApproachEventIn] = Field(default_factory=list)


class PeriodStatsRequest(BaseModel):
    approaches: list[ApproachEventIn] = Field(default_factory=list)
    granularity: Literal["hour", "day"] = "hour"


# ── Responses ───────────────────────────────────────────────────────────


class OptimalSendTimeRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    hour: int
    day_of_week: int
    open_rate: float
    reply_rate: float
    recommendation: str


class EngineerSelectionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    candidate_id: str
    name: str
    score: float
    reasons: list[str]
    is_recommended: bool


class SelectTargetsResponse(BaseModel):
    selections: list[EngineerSelectionRead]


class DuplicateCheckRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    is_duplicate: bool
    message: str
    last_approach_date: datetime | None = None
    days_since_last_approach: int | None = None


class FreelanceLimitRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    can_approach: bool
    message: str
    last_approach_date: datetime | None = None
    days_since_last_approach: int | None = None
    days_until_next_approach: int | None = None


class TemplateConversionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    template_id: str
    template_name: str
    conversion_rate: float
    sample_size: int


class TimeSlotConversionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    hour: int
    conversion_rate: float
    sample_size: int


class DayOfWeekConversionRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    day_of_week: int
    conversion_rate: float
    sample_size: int


class ConversionAnalysisRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    overall_conversion_rate: float
    by_template: list[TemplateConversionRead]
    by_time_slot: list[TimeSlotConversionRead]
    by_day_of_week: list[DayOfWeekConversionRead]
    recommendations: list[str]


class EffectivenessScoreRead(BaseModel):
    approach_id: str
    score: int


class EffectivenessResponse(BaseModel):
    scores: list[EffectivenessScoreRead]


class PeriodStatRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    date: str
    sent: int
    opened: int
    replied: int
    accepted: int


class ApproachSummaryRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_sent: int
    total_opened: int
    total_replied: int
    total_accepted: int
    open_rate: float
    reply_rate: float
    accept_rate: float


class CompanyStatRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    company_id: str
    sent: int
    opened: int
    replied: int
    accepted: int


class PeriodStatsResponse(BaseModel):
    period_stats: list[PeriodStatRead]
    by_company: list[CompanyStatRead]
    summary: ApproachSummaryRead
