"""
Violation Data Models — Proctoring incidents, candidates and display summaries.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, computed_field, field_validator

logger = logging.getLogger("proctorview.models.violation")


class ViolationType(str, Enum):
    WINDOW = "window"
    IMAGE = "image"
    HEADPHONES = "headphones"
    CELLPHONE = "cellphone"
    TIME = "time"
    OTHER = "other"

    @classmethod
    def coerce(cls, value: Any) -> ViolationType:
        """Resolve a raw type value, folding anything unrecognized into OTHER."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            logger.debug(f"Unrecognized violation type {value!r}, folding into 'other'")
            return cls.OTHER


class SeverityLevel(str, Enum):
    NONE = "none"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


SEVERITY_RANK: dict[SeverityLevel, int] = {
    SeverityLevel.NONE: 0,
    SeverityLevel.LOW: 1,
    SeverityLevel.MEDIUM: 2,
    SeverityLevel.HIGH: 3,
}


def max_severity(a: SeverityLevel, b: SeverityLevel) -> SeverityLevel:
    """Return the higher of two severities by the none < low < medium < high order."""
    return a if SEVERITY_RANK[a] >= SEVERITY_RANK[b] else b


class ViolationRecord(BaseModel):
    """A single proctoring incident reported by the exam engine."""

    type: ViolationType
    count: int = Field(default=1, gt=0, description="Number of occurrences in this record")
    severity: SeverityLevel
    details: str | None = Field(
        default=None, description="Free text, e.g. '2 minutes' or 'Early finisher'"
    )

    model_config = {"frozen": True}

    @field_validator("type", mode="before")
    @classmethod
    def _fold_unknown_type(cls, value: Any) -> ViolationType:
        return ViolationType.coerce(value)

    @field_validator("severity")
    @classmethod
    def _reject_none_severity(cls, value: SeverityLevel) -> SeverityLevel:
        if value is SeverityLevel.NONE:
            raise ValueError("a recorded violation cannot have severity 'none'")
        return value


class Candidate(BaseModel):
    """An exam candidate with the violations recorded during the attempt."""

    id: int | str
    name: str
    email: str
    violations: tuple[ViolationRecord, ...] = ()

    model_config = {"frozen": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def derived_severity(self) -> SeverityLevel:
        level = SeverityLevel.NONE
        for v in self.violations:
            level = max_severity(level, v.severity)
        return level


class ViolationSummary(BaseModel):
    """All violations of one type collapsed into a single display group."""

    type: ViolationType
    total_count: int = 0
    highest_severity: SeverityLevel = SeverityLevel.NONE
    details: tuple[str, ...] = ()

    model_config = {"frozen": True}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def title(self) -> str:
        """Tooltip heading, e.g. 'Window Violation' or 'Image Violations (3)'."""
        base = f"{self.type.value.capitalize()} Violation"
        if self.total_count > 1:
            return f"{base}s ({self.total_count})"
        return base
