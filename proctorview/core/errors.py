"""
Review engine errors. Translated to HTTP responses in proctorview.main.
"""

from __future__ import annotations


class InvalidFilterKey(ValueError):
    """Unknown filter category or flag key."""

    def __init__(self, category: str, key: str | None = None) -> None:
        self.category = category
        self.key = key
        if key is None:
            message = f"Unknown filter category: {category!r}"
        else:
            message = f"Unknown filter key {key!r} in category {category!r}"
        super().__init__(message)


class PresetValidationError(ValueError):
    """Preset name is blank or already taken, or a built-in preset was targeted."""


class PresetNotFound(LookupError):
    def __init__(self, preset_id: str) -> None:
        self.preset_id = preset_id
        super().__init__(f"Unknown preset: {preset_id!r}")
