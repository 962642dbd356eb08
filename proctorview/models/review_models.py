"""
Review Data Models — What the dashboard renders for a candidate list.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from proctorview.models.filter_models import FilterCategory
from proctorview.models.violation_models import Candidate, SeverityLevel, ViolationSummary


SEVERITY_BADGE_LABELS: dict[SeverityLevel, str] = {
    SeverityLevel.NONE: "No Violations",
    SeverityLevel.LOW: "Low Severity",
    SeverityLevel.MEDIUM: "Medium Severity",
    SeverityLevel.HIGH: "High Severity",
}


class CandidateRow(BaseModel):
    """One table row: the candidate plus everything derived from its violations."""

    candidate: Candidate
    derived_severity: SeverityLevel
    violation_count: int = Field(..., ge=0, description="Number of raw violation records")
    summaries: list[ViolationSummary] = Field(default_factory=list)
    severity_label: str = Field(default="", description="Severity badge text")


class BucketStat(BaseModel):
    """How many candidates fall into one violation bucket."""

    category: FilterCategory
    key: str
    label: str
    count: int = Field(..., ge=0)
    percentage: float = Field(..., ge=0.0, le=100.0)
    severity: SeverityLevel
