# File: backend/app/api/v1/health.py
# Version: v0.2.0
"""
Healthcheck router: liveness plus service name/version.
"""
from __future__ import annotations
from fastapi import APIRouter

from backend.app.core.config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
def health() -> dict[str, str]:
    """Return a minimal health payload."""
    return {"status": "ok", "service": settings.APP_NAME, "version": settings.APP_VERSION}
