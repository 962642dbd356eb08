"""
ProctorView — candidate list endpoints.

POST /candidates/filter   → search AND criteria, rows with violation summaries
POST /candidates/stats    → per-bucket candidate counts
POST /violations/summary  → summaries for one violation list
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException

from proctorview.api.dependencies import get_filter_matcher
from proctorview.config import settings
from proctorview.core.aggregator import summarize_violations
from proctorview.core.criteria import count_active
from proctorview.core.matcher import FilterMatcher
from proctorview.core.pipeline import build_candidate_rows, filter_candidates
from proctorview.core.stats import compute_violation_stats
from proctorview.models.api_models import (
    FilterRequest,
    FilterResponse,
    StatsRequest,
    StatsResponse,
    SummaryRequest,
    SummaryResponse,
)

logger = logging.getLogger("proctorview.api.candidates")
router = APIRouter()


@router.post("/candidates/filter", response_model=FilterResponse)
async def filter_candidate_list(
    req: FilterRequest,
    matcher: FilterMatcher = Depends(get_filter_matcher),
):
    """Filter the submitted candidates by search term and criteria."""
    if len(req.search) > settings.max_search_term_length:
        raise HTTPException(
            status_code=400,
            detail=f"Search term exceeds maximum length of {settings.max_search_term_length} characters",
        )

    matched = filter_candidates(req.candidates, req.criteria, req.search, matcher=matcher)
    active = count_active(req.criteria)
    logger.info(
        f"Filter request: {len(matched)}/{len(req.candidates)} candidates, "
        f"{active} active filters"
    )
    return FilterResponse(
        total=len(req.candidates),
        matched=len(matched),
        active_filters=active,
        rows=build_candidate_rows(matched),
    )


@router.post("/candidates/stats", response_model=StatsResponse)
async def candidate_stats(
    req: StatsRequest,
    matcher: FilterMatcher = Depends(get_filter_matcher),
):
    """Violation statistics across the submitted candidates."""
    return StatsResponse(
        total=len(req.candidates),
        stats=compute_violation_stats(req.candidates, matcher=matcher),
    )


@router.post("/violations/summary", response_model=SummaryResponse)
async def violation_summary(req: SummaryRequest):
    """Group one candidate's violations by type."""
    return SummaryResponse(summaries=summarize_violations(req.violations))
