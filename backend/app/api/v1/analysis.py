# File: backend/app/api/v1/analysis.py
# Version: v0.2.0
"""
Saved analysis APIs (owner-scoped via the user header).

Endpoints
---------
POST   /analysis/save        Analyze a sequence and store the result for the caller
GET    /analysis/history     List the caller's saved analyses (newest first)
DELETE /analysis/{id}        Delete one of the caller's analyses (403 if not theirs)
"""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from backend.app.core.sequence.analyzer import analyze
from backend.app.db.models import User
from backend.app.db.session import get_db
from backend.app.schemas.analysis import AnalysisRequest, SavedAnalysisRecord
from backend.app.services.analysis_store import (
    DeleteOutcome,
    delete_analysis_for_owner,
    list_analyses_for_owner,
    save_analysis,
)

from .deps import current_user, require_sequence

router = APIRouter(prefix="/analysis", tags=["analysis"])


@router.post("/save", response_model=SavedAnalysisRecord)
def save(
    payload: AnalysisRequest,
    user: User = Depends(current_user),
    db: Session = Depends(get_db),
):
    sequence = require_sequence(payload)
    row = save_analysis(db, owner=user, sequence=sequence, analysis=analyze(sequence))
    return SavedAnalysisRecord.from_row(row)


@router.get("/history", response_model=List[SavedAnalysisRecord])
def history(
    response: Response,
    user: User = Depends(current_user),
    db: Session = Depends(get_db),
):
    response.headers["Cache-Control"] = "no-store"
    return [SavedAnalysisRecord.from_row(r) for r in list_analyses_for_owner(db, owner_id=user.id)]


@router.delete("/{analysis_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete(
    analysis_id: int,
    user: User = Depends(current_user),
    db: Session = Depends(get_db),
):
    outcome = delete_analysis_for_owner(db, analysis_id=analysis_id, owner_id=user.id)
    if outcome is DeleteOutcome.NOT_FOUND:
        raise HTTPException(status_code=404, detail="Analysis not found")
    if outcome is DeleteOutcome.FORBIDDEN:
        raise HTTPException(status_code=403, detail="You do not have permission to delete this analysis.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
