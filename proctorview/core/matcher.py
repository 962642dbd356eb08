"""
Filter Matcher — Decides whether a candidate satisfies a FilterCriteria.

Semantics:
    - an inactive category imposes no constraint
    - an active category holds if ANY of its active flags holds (OR within)
    - a candidate matches if EVERY active category holds (AND across)

Raw incidents do not map 1:1 onto flags, so each category has a classifier
that turns a candidate into the set of flag keys it satisfies. Matching is then
a non-empty intersection test per active category.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Callable

from proctorview.config import settings
from proctorview.core.criteria import active_keys
from proctorview.models.filter_models import FilterCategory, FilterCriteria
from proctorview.models.violation_models import (
    Candidate,
    SeverityLevel,
    ViolationRecord,
    ViolationType,
)

logger = logging.getLogger("proctorview.core.matcher")


@dataclass(frozen=True)
class BucketThresholds:
    """Boundaries of the window-duration and image-count buckets."""

    window_short_seconds: int = 10
    window_long_seconds: int = 60
    image_mid: int = 3
    image_high: int = 5

    @classmethod
    def from_settings(cls) -> BucketThresholds:
        return cls(
            window_short_seconds=settings.window_short_seconds,
            window_long_seconds=settings.window_long_seconds,
            image_mid=settings.image_mid_threshold,
            image_high=settings.image_high_threshold,
        )


_DURATION_RE = re.compile(
    r"(\d+(?:\.\d+)?)\s*(hours?|hrs?|h|minutes?|mins?|m|seconds?|secs?|s)(?![a-z])",
    re.IGNORECASE,
)
_UNIT_SECONDS = {"h": 3600, "m": 60, "s": 1}
_INTEGER_RE = re.compile(r"\d+")
_EARLY_RE = re.compile(r"\bearly\b", re.IGNORECASE)
_LATE_RE = re.compile(r"\blate\b", re.IGNORECASE)

# Bucket a window violation lands in when its details carry no duration
_WINDOW_SEVERITY_FALLBACK = {
    SeverityLevel.LOW: "upTo10sec",
    SeverityLevel.MEDIUM: "upTo1min",
    SeverityLevel.HIGH: "above1min",
}


def parse_duration_seconds(text: str | None) -> float | None:
    """
    Parse a duration such as '5 seconds', '2 minutes', '1 min 30 s' or '90s'.

    Returns:
        Total seconds, or None if the text holds no duration.
    """
    if not text:
        return None
    matches = list(_DURATION_RE.finditer(text))
    if not matches:
        return None
    return sum(float(m.group(1)) * _UNIT_SECONDS[m.group(2)[0].lower()] for m in matches)


def window_bucket(record: ViolationRecord, thresholds: BucketThresholds) -> str:
    seconds = parse_duration_seconds(record.details)
    if seconds is None:
        return _WINDOW_SEVERITY_FALLBACK[record.severity]
    if seconds <= thresholds.window_short_seconds:
        return "upTo10sec"
    if seconds <= thresholds.window_long_seconds:
        return "upTo1min"
    return "above1min"


def image_bucket(record: ViolationRecord, thresholds: BucketThresholds) -> str:
    found = _INTEGER_RE.search(record.details or "")
    consecutive = int(found.group()) if found else record.count
    if consecutive >= thresholds.image_high:
        return "above5"
    if consecutive >= thresholds.image_mid:
        return "between3and5"
    return "between0and2"


def time_markers(record: ViolationRecord) -> set[str]:
    text = record.details or ""
    markers = set()
    if _EARLY_RE.search(text):
        markers.add("early")
    if _LATE_RE.search(text):
        markers.add("late")
    return markers


def _of_type(candidate: Candidate, vtype: ViolationType) -> Iterable[ViolationRecord]:
    return (v for v in candidate.violations if v.type is vtype)


def _window_keys(candidate: Candidate, thresholds: BucketThresholds) -> set[str]:
    return {window_bucket(v, thresholds) for v in _of_type(candidate, ViolationType.WINDOW)}


def _image_keys(candidate: Candidate, thresholds: BucketThresholds) -> set[str]:
    return {image_bucket(v, thresholds) for v in _of_type(candidate, ViolationType.IMAGE)}


def _device_keys(candidate: Candidate, thresholds: BucketThresholds) -> set[str]:
    devices = {ViolationType.HEADPHONES, ViolationType.CELLPHONE}
    return {v.type.value for v in candidate.violations if v.type in devices}


def _time_keys(candidate: Candidate, thresholds: BucketThresholds) -> set[str]:
    keys: set[str] = set()
    for v in _of_type(candidate, ViolationType.TIME):
        keys |= time_markers(v)
    return keys


def _severity_keys(candidate: Candidate, thresholds: BucketThresholds) -> set[str]:
    return {candidate.derived_severity.value}


# Type for a category classifier: candidate -> flag keys it satisfies
CategoryClassifierFn = Callable[[Candidate, BucketThresholds], set[str]]

CATEGORY_CLASSIFIERS: dict[FilterCategory, CategoryClassifierFn] = {
    FilterCategory.WINDOW: _window_keys,
    FilterCategory.IMAGE: _image_keys,
    FilterCategory.DEVICE: _device_keys,
    FilterCategory.TIME: _time_keys,
    FilterCategory.SEVERITY: _severity_keys,
}


class FilterMatcher:
    """
    Stateless criteria evaluator.

    Holds only the bucket thresholds; the same instance can be shared freely.
    """

    def __init__(self, thresholds: BucketThresholds | None = None) -> None:
        self.thresholds = thresholds or BucketThresholds.from_settings()

    def satisfied_keys(self, candidate: Candidate, category: FilterCategory) -> set[str]:
        """Flag keys of one category that hold for the candidate."""
        return CATEGORY_CLASSIFIERS[category](candidate, self.thresholds)

    def matches(self, candidate: Candidate, criteria: FilterCriteria) -> bool:
        for category in FilterCategory:
            wanted = active_keys(criteria, category)
            if not wanted:
                continue
            if self.satisfied_keys(candidate, category).isdisjoint(wanted):
                return False
        return True

    def filter(
        self, candidates: Iterable[Candidate], criteria: FilterCriteria
    ) -> list[Candidate]:
        """Candidates matching criteria, in input order."""
        candidates = list(candidates)
        result = [c for c in candidates if self.matches(c, criteria)]
        logger.debug(f"Criteria kept {len(result)} of {len(candidates)} candidates")
        return result


def matches(candidate: Candidate, criteria: FilterCriteria) -> bool:
    return FilterMatcher().matches(candidate, criteria)


def filter_by_criteria(
    candidates: Iterable[Candidate], criteria: FilterCriteria
) -> list[Candidate]:
    return FilterMatcher().filter(candidates, criteria)
