# File: backend/app/db/session.py
# Version: v0.2.0
"""
SQLAlchemy engine and session factory.

- Uses SQLite by default (file path from settings.DB_URL or `sqlite:///backend/app/data/biotool.db`)
- Provides `get_db()` FastAPI dependency to manage session lifecycle.
- Creates the parent directory if using SQLite file URLs.

Sync sessions only; each request writes at most one row.
"""
from __future__ import annotations

from pathlib import Path
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session

from backend.app.core.config import settings

DB_URL = settings.DB_URL
connect_args: dict = {}
if DB_URL.startswith("sqlite"):
    # FastAPI may open and close the session on different worker threads
    connect_args["check_same_thread"] = False
if DB_URL.startswith("sqlite:///") and DB_URL != "sqlite:///:memory:":
    db_path = DB_URL.replace("sqlite:///", "", 1)
    db_dir = Path(db_path).resolve().parent
    db_dir.mkdir(parents=True, exist_ok=True)

engine = create_engine(DB_URL, future=True, connect_args=connect_args)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)

def get_db() -> Generator[Session, None, None]:
    """Yield a database session and guarantee closing it after use."""
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
