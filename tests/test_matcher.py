"""
Tests for Filter Matcher — bucket classification and OR-within / AND-across semantics.
"""

import pytest

from proctorview.core.criteria import default, set_flag
from proctorview.core.matcher import (
    BucketThresholds,
    FilterMatcher,
    filter_by_criteria,
    image_bucket,
    matches,
    parse_duration_seconds,
    time_markers,
    window_bucket,
)
from proctorview.models.violation_models import Candidate, ViolationRecord

DEFAULTS = BucketThresholds()


def _criteria(*flags):
    c = default()
    for category, key in flags:
        c = set_flag(c, category, key, True)
    return c


def _ids(candidates):
    return [c.id for c in candidates]


@pytest.mark.parametrize(
    "text,seconds",
    [
        ("5 seconds", 5),
        ("2 minutes", 120),
        ("1 min 30 s", 90),
        ("90s", 90),
        ("1m30s", 90),
        ("1h30m", 5400),
        ("1 hour", 3600),
        ("0.5 minutes", 30),
        ("Early finisher", None),
        ("3 violations", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_duration(text, seconds):
    assert parse_duration_seconds(text) == seconds


@pytest.mark.parametrize(
    "details,bucket",
    [
        ("8 seconds", "upTo10sec"),
        ("10 seconds", "upTo10sec"),
        ("11 seconds", "upTo1min"),
        ("60 seconds", "upTo1min"),
        ("61 seconds", "above1min"),
        ("5 minutes", "above1min"),
        ("1m30s", "above1min"),
    ],
)
def test_window_bucket_by_duration(details, bucket):
    record = ViolationRecord(type="window", severity="low", details=details)
    assert window_bucket(record, DEFAULTS) == bucket


@pytest.mark.parametrize(
    "severity,bucket",
    [("low", "upTo10sec"), ("medium", "upTo1min"), ("high", "above1min")],
)
def test_window_bucket_falls_back_to_severity(severity, bucket):
    record = ViolationRecord(type="window", severity=severity)
    assert window_bucket(record, DEFAULTS) == bucket


@pytest.mark.parametrize(
    "details,count,bucket",
    [
        ("1 violation", 1, "between0and2"),
        ("2 violations", 1, "between0and2"),
        ("3 violations", 1, "between3and5"),
        ("4 violations", 1, "between3and5"),
        ("5+ consecutive", 1, "above5"),
        (None, 4, "between3and5"),
        (None, 7, "above5"),
    ],
)
def test_image_bucket(details, count, bucket):
    record = ViolationRecord(type="image", severity="medium", count=count, details=details)
    assert image_bucket(record, DEFAULTS) == bucket


def test_time_markers():
    def markers(text):
        return time_markers(ViolationRecord(type="time", severity="low", details=text))

    assert markers("Early finisher") == {"early"}
    assert markers("Very early") == {"early"}
    assert markers("Late submission") == {"late"}
    assert markers("Completed normally") == set()


def test_no_active_flags_matches_everyone(candidates):
    assert _ids(filter_by_criteria(candidates, default())) == [1, 2, 3, 4, 5, 6]


def test_severity_high_only(by_id):
    c = _criteria(("severity", "high"))
    assert matches(by_id[3], c) is True
    assert matches(by_id[1], c) is False


def test_severity_none_matches_empty_violations(candidates):
    c = _criteria(("severity", "none"))
    assert _ids(filter_by_criteria(candidates, c)) == [6]


def test_or_within_category(candidates):
    c = _criteria(("severity", "high"), ("severity", "low"))
    assert _ids(filter_by_criteria(candidates, c)) == [3, 4, 5]


def test_and_across_categories(candidates):
    c = _criteria(("device", "headphones"), ("window", "above1min"))
    assert _ids(filter_by_criteria(candidates, c)) == [1, 3]


def test_device_flags(candidates):
    assert _ids(filter_by_criteria(candidates, _criteria(("device", "cellphone")))) == [3, 4]
    both = _criteria(("device", "headphones"), ("device", "cellphone"))
    assert _ids(filter_by_criteria(candidates, both)) == [1, 3, 4]


def test_window_and_image_buckets(candidates):
    assert _ids(filter_by_criteria(candidates, _criteria(("window", "upTo10sec")))) == [2, 5]
    assert _ids(filter_by_criteria(candidates, _criteria(("window", "upTo1min")))) == []
    assert _ids(filter_by_criteria(candidates, _criteria(("image", "between3and5")))) == [1, 2, 3]
    assert _ids(filter_by_criteria(candidates, _criteria(("image", "between0and2")))) == [5]


def test_time_flags(candidates):
    assert _ids(filter_by_criteria(candidates, _criteria(("time", "early")))) == [2, 3]
    assert _ids(filter_by_criteria(candidates, _criteria(("time", "late")))) == []


def test_candidate_without_category_violation_fails_active_category(by_id):
    # Malavika has no window violations at all
    c = _criteria(("window", "above1min"), ("window", "upTo1min"), ("window", "upTo10sec"))
    assert matches(by_id[4], c) is False


def test_custom_thresholds_move_buckets(by_id):
    matcher = FilterMatcher(BucketThresholds(window_short_seconds=5))
    c = _criteria(("window", "upTo1min"))
    # Akanksha's 8 second absence is past a 5 second short bucket
    assert matcher.matches(by_id[5], c) is True
    assert matcher.matches(by_id[2], c) is False


def test_filter_preserves_input_order(candidates):
    c = _criteria(("severity", "medium"), ("severity", "high"))
    reversed_ids = _ids(filter_by_criteria(list(reversed(candidates)), c))
    assert reversed_ids == [4, 3, 2, 1]


def test_unknown_type_only_counts_for_severity():
    candidate = Candidate(
        id="x",
        name="Test Taker",
        email="t@example.com",
        violations=[{"type": "second-monitor", "severity": "high"}],
    )
    assert matches(candidate, _criteria(("severity", "high"))) is True
    assert matches(candidate, _criteria(("window", "above1min"))) is False
