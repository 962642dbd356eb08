"""
ProctorView — filter preset endpoints.

GET    /presets                → built-in then saved presets
GET    /presets/{id}/criteria  → the preset's criteria (replaces, never merges)
POST   /presets                → save criteria under a new name
DELETE /presets/{id}           → remove a saved preset
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from proctorview.api.dependencies import get_preset_registry
from proctorview.core.presets import PresetRegistry
from proctorview.models.api_models import SavePresetRequest
from proctorview.models.filter_models import FilterCriteria, FilterPreset

router = APIRouter(prefix="/presets")


@router.get("", response_model=list[FilterPreset])
async def list_presets(registry: PresetRegistry = Depends(get_preset_registry)):
    return registry.list_presets()


@router.get("/{preset_id}/criteria", response_model=FilterCriteria)
async def apply_preset(preset_id: str, registry: PresetRegistry = Depends(get_preset_registry)):
    return registry.apply_preset(preset_id)


@router.post("", response_model=FilterPreset, status_code=201)
async def save_preset(
    req: SavePresetRequest,
    registry: PresetRegistry = Depends(get_preset_registry),
):
    """Save a preset. Blank or duplicate names → 422."""
    return registry.save(req.name, req.criteria)


@router.delete("/{preset_id}", response_model=FilterPreset)
async def delete_preset(preset_id: str, registry: PresetRegistry = Depends(get_preset_registry)):
    return registry.delete(preset_id)
