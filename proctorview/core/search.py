"""
Search Index — Case-insensitive substring search over candidate name and email.
"""

from __future__ import annotations

from collections.abc import Iterable

from proctorview.models.violation_models import Candidate


def matches_term(candidate: Candidate, term: str) -> bool:
    if not term.strip():
        return True
    needle = term.casefold()
    return needle in candidate.name.casefold() or needle in candidate.email.casefold()


def search(candidates: Iterable[Candidate], term: str | None) -> list[Candidate]:
    """
    Candidates whose name or email contains term, in input order.

    An empty or whitespace-only term keeps every candidate. Otherwise the term
    is matched as typed, surrounding whitespace included.
    """
    if term is None or not term.strip():
        return list(candidates)
    return [c for c in candidates if matches_term(c, term)]
