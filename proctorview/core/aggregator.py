"""
Violation Aggregator — Collapses raw violation records into per-type summaries.

Single pass over the records:
    total_count      = Σ record.count
    highest_severity = max(record.severity)   (none < low < medium < high)
    details          = record.details in encounter order

Summaries come out in the order each type was first seen, so rendering is
stable for the same input.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from proctorview.models.violation_models import (
    SeverityLevel,
    ViolationRecord,
    ViolationSummary,
    ViolationType,
    max_severity,
)

logger = logging.getLogger("proctorview.core.aggregator")


class _Bucket:
    __slots__ = ("total_count", "highest_severity", "details")

    def __init__(self) -> None:
        self.total_count = 0
        self.highest_severity = SeverityLevel.NONE
        self.details: list[str] = []


def summarize_violations(violations: Iterable[ViolationRecord]) -> list[ViolationSummary]:
    """
    Group violation records by type.

    Args:
        violations: A candidate's violation records, in recorded order.

    Returns:
        One ViolationSummary per distinct type, in first-seen order.
        Empty input gives an empty list.
    """
    buckets: dict[ViolationType, _Bucket] = {}

    for record in violations:
        vtype = ViolationType.coerce(record.type)
        bucket = buckets.get(vtype)
        if bucket is None:
            bucket = buckets[vtype] = _Bucket()

        bucket.total_count += record.count
        bucket.highest_severity = max_severity(bucket.highest_severity, record.severity)
        if record.details:
            bucket.details.append(record.details)

    summaries = [
        ViolationSummary(
            type=vtype,
            total_count=bucket.total_count,
            highest_severity=bucket.highest_severity,
            details=tuple(bucket.details),
        )
        for vtype, bucket in buckets.items()
    ]
    logger.debug(f"Summarized violations into {len(summaries)} groups")
    return summaries
