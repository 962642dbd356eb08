"""
Preset Registry — Named, reusable filter criteria bundles.

Built-in presets are fixed at construction and can never be removed or
overwritten. User presets live for the lifetime of the registry, up to a
configured cap, and are not persisted anywhere.
"""

from __future__ import annotations

import logging
import uuid

from proctorview.config import settings
from proctorview.core.errors import PresetNotFound, PresetValidationError
from proctorview.models.filter_models import (
    DeviceFlags,
    FilterCriteria,
    FilterPreset,
    SeverityFlags,
    WindowFlags,
)

logger = logging.getLogger("proctorview.core.presets")


BUILTIN_PRESETS: tuple[FilterPreset, ...] = (
    FilterPreset(
        id="high-risk",
        name="High risk",
        criteria=FilterCriteria(severity=SeverityFlags(high=True)),
        builtin=True,
    ),
    FilterPreset(
        id="suspicious-objects",
        name="Suspicious objects",
        criteria=FilterCriteria(device=DeviceFlags(headphones=True, cellphone=True)),
        builtin=True,
    ),
    FilterPreset(
        id="extended-absence",
        name="Extended absence",
        criteria=FilterCriteria(window=WindowFlags(above_1min=True)),
        builtin=True,
    ),
    FilterPreset(
        id="clean",
        name="Clean attempts",
        criteria=FilterCriteria(severity=SeverityFlags(none=True)),
        builtin=True,
    ),
)


def apply(preset: FilterPreset) -> FilterCriteria:
    """The preset's criteria. Replaces whatever criteria the caller held; never merges."""
    return preset.criteria


def _name_key(name: str) -> str:
    return name.strip().casefold()


class PresetRegistry:
    """Built-in presets followed by user-saved presets in save order."""

    def __init__(
        self,
        builtins: tuple[FilterPreset, ...] | None = None,
        max_saved: int | None = None,
    ) -> None:
        if builtins is None:
            builtins = BUILTIN_PRESETS if settings.builtin_presets_enabled else ()
        self._builtins = tuple(builtins)
        self.max_saved = max_saved if max_saved is not None else settings.max_saved_presets
        self._saved: list[FilterPreset] = []

    def list_presets(self) -> list[FilterPreset]:
        return [*self._builtins, *self._saved]

    def get(self, preset_id: str) -> FilterPreset:
        for preset in self.list_presets():
            if preset.id == preset_id:
                return preset
        raise PresetNotFound(preset_id)

    def apply_preset(self, preset_id: str) -> FilterCriteria:
        return apply(self.get(preset_id))

    def save(self, name: str, criteria: FilterCriteria) -> FilterPreset:
        """
        Save criteria under a new name.

        Raises:
            PresetValidationError: if name is blank, already used by any preset
                (compared trimmed and case-insensitively), or the registry already
                holds max_saved user presets.
        """
        if name is None or not name.strip():
            raise PresetValidationError("Preset name must not be blank")

        key = _name_key(name)
        if any(_name_key(p.name) == key for p in self.list_presets()):
            raise PresetValidationError(f"A preset named {name.strip()!r} already exists")

        if len(self._saved) >= self.max_saved:
            raise PresetValidationError(
                f"Cannot save more than {self.max_saved} presets; delete one first"
            )

        preset = FilterPreset(id=str(uuid.uuid4()), name=name.strip(), criteria=criteria)
        self._saved.append(preset)
        logger.info(f"Saved preset '{preset.name}' ({preset.id})")
        return preset

    def delete(self, preset_id: str) -> FilterPreset:
        """Remove a user-saved preset. Built-in presets cannot be removed."""
        preset = self.get(preset_id)
        if preset.builtin:
            raise PresetValidationError(f"Built-in preset {preset.name!r} cannot be removed")
        self._saved = [p for p in self._saved if p.id != preset_id]
        logger.info(f"Deleted preset '{preset.name}' ({preset.id})")
        return preset
