"""
ProctorView — filter criteria endpoints.

The client holds the criteria value and sends it with every request; each
endpoint answers with the new value plus what the filter popover shows for it.
"""

from __future__ import annotations

from fastapi import APIRouter

from proctorview.core import criteria as crit
from proctorview.models.api_models import (
    CriteriaRequest,
    CriteriaResponse,
    SetCategoryRequest,
    SetFlagRequest,
)
from proctorview.models.filter_models import FilterCategory, FilterCriteria

router = APIRouter(prefix="/criteria")


def describe_criteria(criteria: FilterCriteria) -> CriteriaResponse:
    return CriteriaResponse(
        criteria=criteria,
        active_count=crit.count_active(criteria),
        active_categories={
            cat: crit.is_category_active(criteria, cat) for cat in FilterCategory
        },
        labels=crit.to_active_labels(criteria),
    )


@router.get("/default", response_model=CriteriaResponse)
async def default_criteria():
    return describe_criteria(crit.default())


@router.post("/flag", response_model=CriteriaResponse)
async def set_flag(req: SetFlagRequest):
    """Toggle a single flag. Unknown category/key → 400."""
    return describe_criteria(crit.set_flag(req.criteria, req.category, req.key, req.value))


@router.post("/category", response_model=CriteriaResponse)
async def set_category(req: SetCategoryRequest):
    """Switch every flag of a category on or off."""
    return describe_criteria(crit.set_category_all(req.criteria, req.category, req.value))


@router.post("/labels", response_model=CriteriaResponse)
async def describe(req: CriteriaRequest):
    return describe_criteria(req.criteria)
