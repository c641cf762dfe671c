"""Input schemas for approach optimization requests."""

from __future__ import annotations

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field

from approach_engine.services.optimization.types import (
    ApproachEvent,
    CandidateEngineer,
    EmailTemplate,
    PeriodStat,
    SelectionCriteria,
)

ApproachStatusLiteral = Literal["sent", "opened", "replied", "accepted", "rejected"]
TargetTypeLiteral = Literal["company", "freelancer"]


class ApproachEventIn(BaseModel):
    """Single approach event from the history snapshot."""

    id: str
    target_type: TargetTypeLiteral
    target_id: str
    template_id: str | None = None
    status: ApproachStatusLiteral
    sent_at: datetime
    opened_at: datetime | None = None
    replied_at: datetime | None = None
    engineer_ids: list[str] = Field(default_factory=list)

    def to_domain(self) -> ApproachEvent:
        return ApproachEvent(
            id=self.id,
            target_type=self.target_type,
            target_id=self.target_id,
            template_id=self.template_id,
            status=self.status,
            sent_at=self.sent_at,
            opened_at=self.opened_at,
            replied_at=self.replied_at,
            engineer_ids=tuple(self.engineer_ids),
        )


class EmailTemplateIn(BaseModel):
    id: str
    name: str

    def to_domain(self) -> EmailTemplate:
        return EmailTemplate(id=self.id, name=self.name)


class CandidateEngineerIn(BaseModel):
    id: str
    name: str
    skills: list[str] | None = None
    experience_years: float | None = None
    current_status: str | None = None

    def to_domain(self) -> CandidateEngineer:
        return CandidateEngineer(
            id=self.id,
            name=self.name,
            skills=list(self.skills) if self.skills is not None else None,
            experience_years=self.experience_years,
            current_status=self.current_status,
        )


class SelectionCriteriaIn(BaseModel):
    skills: list[str] | None = None
    experience: float | None = None
    status: list[str] | None = None
    exclude_recently_approached: bool = False
    recent_days: int | None = Field(None, ge=1)

    def to_domain(self) -> SelectionCriteria:
        return SelectionCriteria(
            skills=self.skills,
            experience=self.experience,
            status=self.status,
            exclude_recently_approached=self.exclude_recently_approached,
            recent_days=self.recent_days,
        )


class PeriodStatIn(BaseModel):
    """Pre-aggregated bucket. date is an ISO date or datetime string."""

    date: str
    sent: int = Field(0, ge=0)
    opened: int = Field(0, ge=0)
    replied: int = Field(0, ge=0)
    accepted: int = Field(0, ge=0)

    def to_domain(self) -> PeriodStat:
        return PeriodStat(
            date=self.date,
            sent=self.sent,
            opened=self.opened,
            replied=self.replied,
            accepted=self.accepted,
        )
