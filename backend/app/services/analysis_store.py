# File: backend/app/services/analysis_store.py
# Version: v0.2.0
"""
SavedAnalysis persistence helpers (service layer).

Routers call these instead of touching SQLAlchemy directly. Ownership checks
live here; the router only maps `DeleteOutcome` to an HTTP status.
"""
from __future__ import annotations

import logging
from enum import Enum as PyEnum
from typing import List

from sqlalchemy import select
from sqlalchemy.orm import Session

from backend.app.core.sequence.analyzer import ascii_upper
from backend.app.core.sequence.models import SequenceAnalysis
from backend.app.db.models import SavedAnalysis, User

logger = logging.getLogger(__name__)


class DeleteOutcome(str, PyEnum):
    DELETED = "deleted"
    NOT_FOUND = "not_found"
    FORBIDDEN = "forbidden"


def save_analysis(
    db: Session,
    *,
    owner: User,
    sequence: str,
    analysis: SequenceAnalysis,
) -> SavedAnalysis:
    """Persist the stored subset of `analysis` for `owner`."""
    row = SavedAnalysis(
        original_sequence=ascii_upper(sequence),
        sequence_type=analysis.sequence_type.value,
        sequence_length=analysis.length,
        gc_content=analysis.gc_content,
        rna_transcript=analysis.rna_transcript,
        protein_sequence=analysis.protein_sequence,
        user_id=owner.id,
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info("saved analysis id=%d archive_id=%s owner=%d", row.id, row.archive_id, owner.id)
    return row


def list_analyses_for_owner(db: Session, *, owner_id: int) -> List[SavedAnalysis]:
    """Return the owner's analyses, newest first."""
    stmt = (
        select(SavedAnalysis)
        .where(SavedAnalysis.user_id == owner_id)
        .order_by(SavedAnalysis.created_at.desc(), SavedAnalysis.id.desc())
    )
    return list(db.execute(stmt).scalars())


def delete_analysis_for_owner(db: Session, *, analysis_id: int, owner_id: int) -> DeleteOutcome:
    """Delete an analysis only if it belongs to `owner_id`."""
    row = db.get(SavedAnalysis, analysis_id)
    if row is None:
        return DeleteOutcome.NOT_FOUND
    if row.user_id != owner_id:
        logger.warning("denied delete of analysis id=%d: owner=%d caller=%d", analysis_id, row.user_id, owner_id)
        return DeleteOutcome.FORBIDDEN
    db.delete(row)
    db.commit()
    logger.info("deleted analysis id=%d owner=%d", analysis_id, owner_id)
    return DeleteOutcome.DELETED
