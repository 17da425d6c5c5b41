"""
Shared lookup of an active session on behalf of a user.

A session is only visible to its owner; sessions older than the configured
time-to-live are treated as abandoned, deleted, and reported as missing.
"""

import logging
from datetime import datetime, timedelta
from typing import Optional

from application.exceptions import SessionNotFoundError
from application.ports import WorkoutSessionRepository
from domain.models import WorkoutSession

logger = logging.getLogger(__name__)


def load_active_session(
    session_repo: WorkoutSessionRepository,
    user_id: str,
    session_id: str,
    *,
    now: datetime,
    ttl: Optional[timedelta],
) -> WorkoutSession:
    """
    Load a session owned by ``user_id``.

    Raises:
        SessionNotFoundError: missing, owned by someone else, or expired
    """
    session = session_repo.get(session_id)
    if session is None or session.user_id != user_id:
        raise SessionNotFoundError("Session not found")

    if ttl is not None and session.is_expired(now, ttl):
        logger.info(f"Session {session_id} expired (started {session.started_at}), deleting")
        session_repo.delete(session_id)
        raise SessionNotFoundError("Session expired")

    return session
