"""
API Request/Response Models — HTTP contract schemas.

These are the public-facing Pydantic models used by FastAPI endpoints.
Candidates always arrive in the request body; the service stores none of them.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from proctorview.models.filter_models import ActiveLabel, FilterCategory, FilterCriteria
from proctorview.models.review_models import BucketStat, CandidateRow
from proctorview.models.violation_models import Candidate, ViolationRecord, ViolationSummary


class FilterRequest(BaseModel):
    """Request body for POST /candidates/filter."""

    candidates: list[Candidate] = Field(default_factory=list)
    criteria: FilterCriteria = Field(default_factory=FilterCriteria)
    search: str = Field(default="", description="Name/email substring, case-insensitive")


class FilterResponse(BaseModel):
    total: int = Field(..., description="Candidates submitted")
    matched: int = Field(..., description="Candidates left after search and criteria")
    active_filters: int = Field(..., description="Number of active criteria flags")
    rows: list[CandidateRow] = Field(default_factory=list)


class StatsRequest(BaseModel):
    candidates: list[Candidate] = Field(default_factory=list)


class StatsResponse(BaseModel):
    total: int
    stats: dict[FilterCategory, list[BucketStat]] = Field(default_factory=dict)


class SummaryRequest(BaseModel):
    violations: list[ViolationRecord] = Field(default_factory=list)


class SummaryResponse(BaseModel):
    summaries: list[ViolationSummary] = Field(default_factory=list)


class SetFlagRequest(BaseModel):
    """Request body for POST /criteria/flag."""

    criteria: FilterCriteria = Field(default_factory=FilterCriteria)
    category: str
    key: str
    value: bool


class SetCategoryRequest(BaseModel):
    """Request body for POST /criteria/category (the category-level switch)."""

    criteria: FilterCriteria = Field(default_factory=FilterCriteria)
    category: str
    value: bool


class CriteriaRequest(BaseModel):
    criteria: FilterCriteria = Field(default_factory=FilterCriteria)


class CriteriaResponse(BaseModel):
    """A criteria value with everything the filter popover displays about it."""

    criteria: FilterCriteria
    active_count: int
    active_categories: dict[FilterCategory, bool] = Field(default_factory=dict)
    labels: list[ActiveLabel] = Field(default_factory=list)


class SavePresetRequest(BaseModel):
    name: str = Field(..., description="Preset display name")
    criteria: FilterCriteria = Field(default_factory=FilterCriteria)
