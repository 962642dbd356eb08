"""
Violation Statistics — How many candidates fall into each violation bucket.

count      = candidates with at least one violation in the bucket
percentage = count / total candidates × 100, one decimal (0 for no candidates)

The severity attached to each bucket is a fixed display level, independent of
the severities recorded on the incidents themselves.
"""

from __future__ import annotations

from collections.abc import Iterable

from proctorview.core.matcher import FilterMatcher
from proctorview.models.filter_models import FLAG_FIELDS, FLAG_LABELS, FilterCategory
from proctorview.models.review_models import BucketStat
from proctorview.models.violation_models import Candidate, SeverityLevel

STAT_CATEGORIES = (
    FilterCategory.WINDOW,
    FilterCategory.IMAGE,
    FilterCategory.DEVICE,
    FilterCategory.TIME,
)

BUCKET_SEVERITY: dict[tuple[FilterCategory, str], SeverityLevel] = {
    (FilterCategory.WINDOW, "above1min"): SeverityLevel.HIGH,
    (FilterCategory.WINDOW, "upTo1min"): SeverityLevel.MEDIUM,
    (FilterCategory.WINDOW, "upTo10sec"): SeverityLevel.LOW,
    (FilterCategory.IMAGE, "above5"): SeverityLevel.HIGH,
    (FilterCategory.IMAGE, "between3and5"): SeverityLevel.MEDIUM,
    (FilterCategory.IMAGE, "between0and2"): SeverityLevel.LOW,
    (FilterCategory.DEVICE, "headphones"): SeverityLevel.MEDIUM,
    (FilterCategory.DEVICE, "cellphone"): SeverityLevel.HIGH,
    (FilterCategory.TIME, "early"): SeverityLevel.MEDIUM,
    (FilterCategory.TIME, "late"): SeverityLevel.LOW,
}


def compute_violation_stats(
    candidates: Iterable[Candidate],
    matcher: FilterMatcher | None = None,
) -> dict[FilterCategory, list[BucketStat]]:
    matcher = matcher or FilterMatcher()
    candidates = list(candidates)
    total = len(candidates)

    counts: dict[tuple[FilterCategory, str], int] = {
        (cat, key): 0 for cat in STAT_CATEGORIES for key in FLAG_FIELDS[cat]
    }
    for candidate in candidates:
        for cat in STAT_CATEGORIES:
            for key in matcher.satisfied_keys(candidate, cat):
                counts[(cat, key)] += 1

    stats: dict[FilterCategory, list[BucketStat]] = {}
    for cat in STAT_CATEGORIES:
        stats[cat] = [
            BucketStat(
                category=cat,
                key=key,
                label=FLAG_LABELS[(cat, key)],
                count=counts[(cat, key)],
                percentage=round(counts[(cat, key)] / total * 100, 1) if total else 0.0,
                severity=BUCKET_SEVERITY[(cat, key)],
            )
            for key in FLAG_FIELDS[cat]
        ]
    return stats
