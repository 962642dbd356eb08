"""
Test fixtures shared across all ProctorView tests.
"""

import pytest

from proctorview.models.violation_models import Candidate


CANDIDATE_DATA = [
    {
        "id": 1,
        "name": "Jansy Alexander",
        "email": "stamilvelue@guidehouse.com",
        "violations": [
            {"type": "window", "count": 1, "severity": "medium", "details": "2 minutes"},
            {"type": "image", "count": 1, "severity": "medium", "details": "4 violations"},
            {"type": "headphones", "count": 1, "severity": "medium"},
        ],
    },
    {
        "id": 2,
        "name": "Sairam Tamilvelu",
        "email": "stamilvelue@guidehouse.com",
        "violations": [
            {"type": "window", "count": 1, "severity": "low", "details": "5 seconds"},
            {"type": "image", "count": 1, "severity": "medium", "details": "3 violations"},
            {"type": "time", "count": 1, "severity": "low", "details": "Early finisher"},
        ],
    },
    {
        "id": 3,
        "name": "Eby M Mathai",
        "email": "emathai@guidehouse.com",
        "violations": [
            {"type": "window", "count": 1, "severity": "high", "details": "5 minutes"},
            {"type": "image", "count": 1, "severity": "medium", "details": "3 violations"},
            {"type": "time", "count": 1, "severity": "high", "details": "Very early"},
            {"type": "headphones", "count": 1, "severity": "medium"},
            {"type": "cellphone", "count": 1, "severity": "high"},
        ],
    },
    {
        "id": 4,
        "name": "Malavika B",
        "email": "karatmalavika@gmail.com",
        "violations": [
            {"type": "cellphone", "count": 1, "severity": "high"},
            {"type": "headphones", "count": 1, "severity": "medium"},
        ],
    },
    {
        "id": 5,
        "name": "Akanksha Shah",
        "email": "akanksha@guidehouse.com",
        "violations": [
            {"type": "window", "count": 1, "severity": "low", "details": "8 seconds"},
            {"type": "image", "count": 1, "severity": "low", "details": "1 violation"},
        ],
    },
    {
        "id": 6,
        "name": "Rohan Iyer",
        "email": "rohan.iyer@example.org",
        "violations": [],
    },
]


@pytest.fixture
def candidate_data():
    """Raw candidate dicts, as the dashboard would post them."""
    return [dict(c) for c in CANDIDATE_DATA]


@pytest.fixture
def candidates():
    """Sample candidates: two high, two medium, one low and one clean attempt."""
    return [Candidate(**c) for c in CANDIDATE_DATA]


@pytest.fixture
def by_id(candidates):
    return {c.id: c for c in candidates}
