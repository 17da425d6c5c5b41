"""
Key-value backed WorkoutSessionRepository.

Key layout: ``workout_session:{sessionId}`` where sessionId is
``{userId}_{epochMillis}``, so a user's sessions share the prefix
``workout_session:{userId}_``.
"""
import logging
from typing import List, Optional

from application.ports import KeyValueStore
from domain.converters import session_from_record
from domain.models import WorkoutSession

logger = logging.getLogger(__name__)

SESSION_PREFIX = "workout_session:"


def session_key(session_id: str) -> str:
    return f"{SESSION_PREFIX}{session_id}"


class KVWorkoutSessionRepository:
    """WorkoutSessionRepository over a KeyValueStore."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self, session_id: str) -> Optional[WorkoutSession]:
        raw = self._store.get(session_key(session_id))
        if raw is None:
            return None
        return session_from_record(raw, session_id=session_id)

    def save(self, session: WorkoutSession) -> None:
        self._store.set(session_key(session.session_id), session.to_record())

    def delete(self, session_id: str) -> None:
        self._store.delete(session_key(session_id))

    def list_sessions(self, user_id: Optional[str] = None) -> List[WorkoutSession]:
        prefix = f"{SESSION_PREFIX}{user_id}_" if user_id else SESSION_PREFIX
        sessions = []
        for key, raw in self._store.get_items_by_prefix(prefix):
            session = session_from_record(raw, session_id=key[len(SESSION_PREFIX):])
            if session is None:
                continue
            if user_id and session.user_id != user_id:
                continue
            sessions.append(session)
        return sessions
