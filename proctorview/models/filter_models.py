"""
Filter Data Models — Criteria flags, active-filter labels and presets.

Flag keys are the identifiers the dashboard uses (e.g. 'above1min'); Python
field names are their snake_case equivalents and the keys are carried as
aliases, so JSON in and out always uses the dashboard keys.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class FilterCategory(str, Enum):
    WINDOW = "window"
    IMAGE = "image"
    DEVICE = "device"
    TIME = "time"
    SEVERITY = "severity"


_FLAG_CONFIG = {"frozen": True, "populate_by_name": True}


class WindowFlags(BaseModel):
    above_1min: bool = Field(default=False, alias="above1min")
    up_to_1min: bool = Field(default=False, alias="upTo1min")
    up_to_10sec: bool = Field(default=False, alias="upTo10sec")

    model_config = _FLAG_CONFIG


class ImageFlags(BaseModel):
    above_5: bool = Field(default=False, alias="above5")
    between_3_and_5: bool = Field(default=False, alias="between3and5")
    between_0_and_2: bool = Field(default=False, alias="between0and2")

    model_config = _FLAG_CONFIG


class DeviceFlags(BaseModel):
    headphones: bool = False
    cellphone: bool = False

    model_config = _FLAG_CONFIG


class TimeFlags(BaseModel):
    early: bool = False
    late: bool = False

    model_config = _FLAG_CONFIG


class SeverityFlags(BaseModel):
    high: bool = False
    medium: bool = False
    low: bool = False
    none: bool = False

    model_config = _FLAG_CONFIG


class FilterCriteria(BaseModel):
    """Immutable filter selection. Every flag defaults to False."""

    window: WindowFlags = Field(default_factory=WindowFlags)
    image: ImageFlags = Field(default_factory=ImageFlags)
    device: DeviceFlags = Field(default_factory=DeviceFlags)
    time: TimeFlags = Field(default_factory=TimeFlags)
    severity: SeverityFlags = Field(default_factory=SeverityFlags)

    model_config = {"frozen": True}


# Dashboard key -> Python field name, per category, in display order
FLAG_FIELDS: dict[FilterCategory, dict[str, str]] = {
    FilterCategory(category): {
        (info.alias or name): name
        for name, info in FilterCriteria.model_fields[category].annotation.model_fields.items()
    }
    for category in FilterCriteria.model_fields
}

FLAG_LABELS: dict[tuple[FilterCategory, str], str] = {
    (FilterCategory.WINDOW, "above1min"): "Above 1 minute",
    (FilterCategory.WINDOW, "upTo1min"): "Up to 1 minute",
    (FilterCategory.WINDOW, "upTo10sec"): "Up to 10 seconds",
    (FilterCategory.IMAGE, "above5"): "5+ consecutive",
    (FilterCategory.IMAGE, "between3and5"): "3 to 5 consecutive",
    (FilterCategory.IMAGE, "between0and2"): "0 to 2 consecutive",
    (FilterCategory.DEVICE, "headphones"): "Headphones detected",
    (FilterCategory.DEVICE, "cellphone"): "Cellphone detected",
    (FilterCategory.TIME, "early"): "Early finishers",
    (FilterCategory.TIME, "late"): "Late finishers",
    (FilterCategory.SEVERITY, "high"): "High severity",
    (FilterCategory.SEVERITY, "medium"): "Medium severity",
    (FilterCategory.SEVERITY, "low"): "Low severity",
    (FilterCategory.SEVERITY, "none"): "No violations",
}


class ActiveLabel(BaseModel):
    """A rendered filter chip. (category, key) identifies it; label is display only."""

    category: FilterCategory
    key: str
    label: str

    model_config = {"frozen": True}


class FilterPreset(BaseModel):
    """A named, reusable criteria bundle."""

    id: str = Field(..., description="Unique preset identifier")
    name: str = Field(..., min_length=1, description="Display name, unique among presets")
    criteria: FilterCriteria
    builtin: bool = Field(default=False, description="True for presets fixed at startup")

    model_config = {"frozen": True}
