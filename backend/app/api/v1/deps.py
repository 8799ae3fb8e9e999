# File: backend/app/api/v1/deps.py
# Version: v0.1.0
"""
Shared dependencies and request guards for v1 routers.

- `current_user`: resolves the owner named by the `settings.USER_HEADER`
  header (default `X-User`). There is no password or token check; the header
  only scopes saved analyses to an owner.
- `require_sequence`: rejects absent/empty/whitespace-only input with a 400
  before the analysis engine is invoked.
"""

from __future__ import annotations

from typing import Optional

from fastapi import Depends, Header, HTTPException, status
from sqlalchemy.orm import Session

from backend.app.core.config import settings
from backend.app.core.sequence.analyzer import is_blank
from backend.app.db.models import User
from backend.app.db.session import get_db
from backend.app.schemas.analysis import AnalysisRequest
from backend.app.services.user_store import get_or_create_user


def current_user(
    username: Optional[str] = Header(None, alias=settings.USER_HEADER),
    db: Session = Depends(get_db),
) -> User:
    if username is None or not username.strip():
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Missing user header.")
    return get_or_create_user(db, username.strip())


def require_sequence(payload: AnalysisRequest) -> str:
    """Return the raw sequence, or raise 400 if it is effectively empty."""
    if payload.sequence is None or is_blank(payload.sequence):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Sequence must not be empty.")
    return payload.sequence
