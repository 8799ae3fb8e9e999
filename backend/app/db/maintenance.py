# File: backend/app/db/maintenance.py
# Version: v0.3.0
"""
SQLite schema maintenance helpers (dev-only, non-destructive).

- ensure_schema_sqlite(engine): creates only tables that are missing.
- Imports `backend.app.db.models` so User and SavedAnalysis are registered on
  Base.metadata before it is inspected.

Usage:
  Keep SCHEMA_AUTOHEAL=true (default) with a SQLite DB_URL. On app startup,
  ensure_schema_sqlite(engine) creates any missing tables.

Notes:
  * Safe to run multiple times; it never drops or alters existing tables.
  * Use Alembic migrations for staging/production changes.
"""
from __future__ import annotations

from typing import List

from sqlalchemy import inspect
from sqlalchemy.engine import Engine

import backend.app.db.models  # noqa: F401  (registers tables)
from backend.app.db.base import Base


def ensure_schema_sqlite(engine: Engine) -> List[str]:
    """
    Create any missing tables declared on Base.metadata.

    Returns a list of human-readable action strings (e.g., "created table users").
    """
    inspector = inspect(engine)
    existing = set(inspector.get_table_names())

    actions: List[str] = []
    # sorted_tables respects FK order (users before saved_analyses)
    for table in Base.metadata.sorted_tables:
        if table.name in existing:
            continue
        table.create(bind=engine, checkfirst=True)
        actions.append(f"created table {table.name}")

    if not actions:
        actions.append("all tables present")

    return actions
