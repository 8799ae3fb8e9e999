# File: backend/app/db/models.py
# Version: v0.4.0
"""
ORM models for BioTool.

Tables:
- User: record owner, identified by a unique username.
- SavedAnalysis: a persisted subset of one sequence analysis, owned by a User.
                 Rows are written once and never updated.
"""
from __future__ import annotations

import uuid
from datetime import datetime
from typing import List

from sqlalchemy import String, Integer, DateTime, Float, Text, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from backend.app.db.base import Base

DEFAULT_STATUS = "Completed"


def new_archive_id() -> str:
    """User-facing id: 'ARC-' + 8 upper-case hex chars from a fresh UUID4."""
    return "ARC-" + str(uuid.uuid4()).upper()[:8]


class User(Base):
    """Owner of saved analyses."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(String(120), nullable=False, unique=True, index=True)
    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)

    analyses: Mapped[List["SavedAnalysis"]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )


class SavedAnalysis(Base):
    """Persisted analysis result.

    Stores the upper-cased input sequence alongside the scalar results and the
    RNA/protein strings (sentinels included) exactly as returned to the client.
    """
    __tablename__ = "saved_analyses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    archive_id: Mapped[str] = mapped_column(String(12), nullable=False, unique=True, default=new_archive_id)
    status: Mapped[str] = mapped_column(String(32), nullable=False, default=DEFAULT_STATUS)

    original_sequence: Mapped[str] = mapped_column(Text, nullable=False)
    sequence_type: Mapped[str] = mapped_column(String(16), nullable=False)
    sequence_length: Mapped[int] = mapped_column(Integer, nullable=False)
    gc_content: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)
    rna_transcript: Mapped[str] = mapped_column(Text, nullable=False)
    protein_sequence: Mapped[str] = mapped_column(Text, nullable=False)

    created_at: Mapped[datetime] = mapped_column(DateTime, default=datetime.utcnow, nullable=False)

    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    user: Mapped[User] = relationship(back_populates="analyses")
