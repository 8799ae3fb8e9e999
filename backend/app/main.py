# File: backend/app/main.py
# Version: v0.4.0
"""
FastAPI app entry.

- Keeps all route assembly in backend/app/api/v1/api.py.
- Mounts /api/* via `api_router`.
- SQLite schema auto-heal on startup is guarded by settings.SCHEMA_AUTOHEAL.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api.v1.api import api_router
from backend.app.core.config import settings
from backend.app.db.session import engine
from backend.app.db.maintenance import ensure_schema_sqlite

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title=f"{settings.APP_NAME} API",
    version=settings.APP_VERSION,
    openapi_url=f"{settings.API_PREFIX}/openapi.json",
    docs_url=f"{settings.API_PREFIX}/docs",
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/healthz")
def healthz():
    return {"status": "ok"}


# APIs under /api
app.include_router(api_router, prefix=settings.API_PREFIX)


@app.on_event("startup")
def _startup_autoheal() -> None:
    # Only try auto-heal if enabled AND using SQLite
    if engine.url.get_backend_name() == "sqlite" and settings.SCHEMA_AUTOHEAL:
        actions = ensure_schema_sqlite(engine)
        logger.info("[schema-autoheal] %s", ", ".join(actions))
