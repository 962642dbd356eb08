"""
Health Check Route — GET /health
"""

from __future__ import annotations

from fastapi import APIRouter

from proctorview.config import settings

router = APIRouter()


@router.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": settings.app_name,
        "version": "1.0.0",
    }
