"""
FastAPI Dependencies — Shared singletons injected via Depends().
"""

from __future__ import annotations

from functools import lru_cache

from proctorview.core.matcher import FilterMatcher
from proctorview.core.presets import PresetRegistry


@lru_cache
def get_preset_registry() -> PresetRegistry:
    """Session-scoped preset registry. Lives in memory; lost on restart."""
    return PresetRegistry()


@lru_cache
def get_filter_matcher() -> FilterMatcher:
    """Shared matcher built from the configured bucket thresholds."""
    return FilterMatcher()
