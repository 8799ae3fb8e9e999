# File: backend/app/api/v1/api.py
# Version: v0.8.0
"""
v1 API aggregator.

Routers included under /api:
- health
- sequence (stateless analysis)
- analysis (saved analyses, owner-scoped)
"""
from __future__ import annotations

from fastapi import APIRouter

from . import health as health_router
from . import sequence as sequence_router
from . import analysis as analysis_router

# All v1 JSON APIs live under /api via api_router
api_router = APIRouter()
api_router.include_router(health_router.router)
api_router.include_router(sequence_router.router)
api_router.include_router(analysis_router.router)
