# File: backend/tests/conftest.py
# Version: v0.2.0
"""
Test bootstrap:
- ensure project root is on sys.path so 'backend.*' imports work;
- point DB_URL at a throwaway SQLite file before any app module is imported;
- create the schema once and empty the tables before each test.
"""
import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[2]  # repo root (../.. from this file)
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

_TMP_DIR = tempfile.mkdtemp(prefix="biotool-tests-")
os.environ["DB_URL"] = f"sqlite:///{Path(_TMP_DIR) / 'test.db'}"


@pytest.fixture(autouse=True)
def clean_db():
    from backend.app.db.base import Base
    from backend.app.db.maintenance import ensure_schema_sqlite
    from backend.app.db.session import engine

    ensure_schema_sqlite(engine)
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())
    yield


@pytest.fixture
def db():
    from backend.app.db.session import SessionLocal

    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()
