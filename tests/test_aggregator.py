"""
Tests for Violation Aggregator — grouping, severity ranking and detail order.
"""

import pytest
from pydantic import ValidationError

from proctorview.core.aggregator import summarize_violations
from proctorview.models.violation_models import (
    SeverityLevel,
    ViolationRecord,
    ViolationType,
)


def _v(vtype, severity, count=1, details=None):
    return ViolationRecord(type=vtype, count=count, severity=severity, details=details)


def test_empty_input_gives_no_summaries():
    assert summarize_violations([]) == []


def test_same_type_collapses_to_highest_severity():
    summaries = summarize_violations([_v("image", "medium"), _v("image", "low")])
    assert len(summaries) == 1
    s = summaries[0]
    assert s.type is ViolationType.IMAGE
    assert s.total_count == 2
    assert s.highest_severity is SeverityLevel.MEDIUM


def test_counts_are_summed_not_records():
    summaries = summarize_violations([_v("window", "low", count=3), _v("window", "high", count=2)])
    assert summaries[0].total_count == 5
    assert summaries[0].highest_severity is SeverityLevel.HIGH


def test_first_seen_type_order(by_id):
    summaries = summarize_violations(by_id[3].violations)
    assert [s.type.value for s in summaries] == [
        "window", "image", "time", "headphones", "cellphone",
    ]


def test_interleaved_types_keep_first_seen_order():
    summaries = summarize_violations([
        _v("time", "low"),
        _v("window", "low"),
        _v("time", "medium"),
    ])
    assert [s.type for s in summaries] == [ViolationType.TIME, ViolationType.WINDOW]
    assert summaries[0].total_count == 2


def test_details_kept_in_encounter_order():
    summaries = summarize_violations([
        _v("window", "low", details="5 seconds"),
        _v("window", "medium"),
        _v("window", "high", details="3 minutes"),
    ])
    assert summaries[0].details == ("5 seconds", "3 minutes")


def test_unknown_types_fold_into_other():
    summaries = summarize_violations([
        _v("screen-share", "low"),
        _v("other", "medium"),
        _v("Second Person", "high", details="two faces"),
    ])
    assert len(summaries) == 1
    assert summaries[0].type is ViolationType.OTHER
    assert summaries[0].total_count == 3
    assert summaries[0].highest_severity is SeverityLevel.HIGH
    assert summaries[0].details == ("two faces",)


def test_summary_title():
    single = summarize_violations([_v("window", "low")])[0]
    many = summarize_violations([_v("image", "low", count=2), _v("image", "low")])[0]
    assert single.title == "Window Violation"
    assert many.title == "Image Violations (3)"


def test_record_rejects_non_positive_count():
    with pytest.raises(ValidationError):
        _v("window", "low", count=0)


def test_record_rejects_none_severity():
    with pytest.raises(ValidationError):
        _v("window", "none")


def test_derived_severity(by_id):
    assert by_id[3].derived_severity is SeverityLevel.HIGH
    assert by_id[1].derived_severity is SeverityLevel.MEDIUM
    assert by_id[5].derived_severity is SeverityLevel.LOW
    assert by_id[6].derived_severity is SeverityLevel.NONE
