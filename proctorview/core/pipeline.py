"""
Review Pipeline — Composes search, criteria filtering and aggregation.

    candidates ──search(term)──► filter(criteria) ──► rows (summaries per candidate)

Both filters are pure and order-preserving, so the result is their
intersection in input order.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from proctorview.core.aggregator import summarize_violations
from proctorview.core.matcher import FilterMatcher
from proctorview.core.search import search
from proctorview.models.filter_models import FilterCriteria
from proctorview.models.review_models import SEVERITY_BADGE_LABELS, CandidateRow
from proctorview.models.violation_models import Candidate

logger = logging.getLogger("proctorview.core.pipeline")


def filter_candidates(
    candidates: Iterable[Candidate],
    criteria: FilterCriteria,
    search_term: str | None = "",
    matcher: FilterMatcher | None = None,
) -> list[Candidate]:
    """Candidates matching both the search term and the criteria, in input order."""
    matcher = matcher or FilterMatcher()
    candidates = list(candidates)
    found = search(candidates, search_term)
    result = matcher.filter(found, criteria)
    logger.debug(
        f"Filtered {len(candidates)} candidates: {len(found)} after search, "
        f"{len(result)} after criteria"
    )
    return result


def build_candidate_row(candidate: Candidate) -> CandidateRow:
    severity = candidate.derived_severity
    return CandidateRow(
        candidate=candidate,
        derived_severity=severity,
        violation_count=len(candidate.violations),
        summaries=summarize_violations(candidate.violations),
        severity_label=SEVERITY_BADGE_LABELS[severity],
    )


def build_candidate_rows(candidates: Iterable[Candidate]) -> list[CandidateRow]:
    return [build_candidate_row(c) for c in candidates]
