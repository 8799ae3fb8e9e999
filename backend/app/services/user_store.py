# File: backend/app/services/user_store.py
# Version: v0.1.0
"""Owner lookup helpers (service layer)."""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from backend.app.db.models import User

logger = logging.getLogger(__name__)


def get_user_by_username(db: Session, username: str) -> Optional[User]:
    return db.execute(select(User).where(User.username == username)).scalar_one_or_none()


def get_or_create_user(db: Session, username: str) -> User:
    """Return the User with this username, creating it on first sight."""
    user = get_user_by_username(db, username)
    if user is not None:
        return user
    user = User(username=username)
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # concurrent request created it first
        db.rollback()
        return db.execute(select(User).where(User.username == username)).scalar_one()
    db.refresh(user)
    logger.info("created user id=%d username=%s", user.id, username)
    return user
