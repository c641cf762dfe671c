"""Pydantic schemas for request/response validation."""

from approach_engine.schemas.approach import (
    ApproachEventIn,
    CandidateEngineerIn,
    EmailTemplateIn,
    PeriodStatIn,
    SelectionCriteriaIn,
)
from approach_engine.schemas.optimization import (
    ConversionAnalysisRead,
    ConversionAnalysisRequest,
    DuplicateCheckRead,
    DuplicateCheckRequest,
    EffectivenessRequest,
    EffectivenessResponse,
    FreelanceLimitRead,
    FreelanceLimitRequest,
    OptimalSendTimeRead,
    OptimalSendTimeRequest,
    PeriodStatsRequest,
    PeriodStatsResponse,
    SelectTargetsRequest,
    SelectTargetsResponse,
)

__all__ = [
    "ApproachEventIn",
    "CandidateEngineerIn",
    "ConversionAnalysisRead",
    "ConversionAnalysisRequest",
    "DuplicateCheckRead",
    "DuplicateCheckRequest",
    "EffectivenessRequest",
    "EffectivenessResponse",
    "EmailTemplateIn",
    "FreelanceLimitRead",
    "FreelanceLimitRequest",
    "OptimalSendTimeRead",
    "OptimalSendTimeRequest",
    "PeriodStatIn",
    "PeriodStatsRequest",
    "PeriodStatsResponse",
    "SelectTargetsRequest",
    "SelectTargetsResponse",
    "SelectionCriteriaIn",
]
