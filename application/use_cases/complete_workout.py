"""
CompleteWorkout Use Case (completion aggregator).

Converts an active session into an immutable history entry:

- totalWorkoutSeconds = completedAt - session.startedAt (server clock),
  rounded to whole seconds, never negative
- totalRestSeconds = sum of restTakenSeconds over the persisted logs

The entry is written under a per-completion unique key, then the session is
deleted. Deleting is best-effort: if it fails the entry is already durable,
the failure is logged, and the leftover session is collected by the expiry
sweep.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional

from application.exceptions import StorageError
from application.ports import WorkoutHistoryRepository, WorkoutSessionRepository
from application.use_cases.session_access import load_active_session
from domain.models import WorkoutHistoryEntry
from domain.services import elapsed_seconds, total_rest_seconds
from domain.timestamps import to_iso, utc_now

logger = logging.getLogger(__name__)


@dataclass
class CompleteWorkoutResult:
    """Summary returned to the client right after completion."""

    completed_at: str
    total_workout_seconds: int
    total_rest_seconds: int
    entry: WorkoutHistoryEntry


class CompleteWorkoutUseCase:
    """
    Use case for completing a workout session.

    No check is made that every planned exercise was logged: whatever is
    logged at completion time is what the history entry contains.
    """

    def __init__(
        self,
        session_repo: WorkoutSessionRepository,
        history_repo: WorkoutHistoryRepository,
        *,
        session_ttl: Optional[timedelta] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._session_repo = session_repo
        self._history_repo = history_repo
        self._session_ttl = session_ttl
        self._clock = clock

    def execute(self, user_id: str, session_id: str) -> CompleteWorkoutResult:
        now = self._clock()
        session = load_active_session(
            self._session_repo, user_id, session_id, now=now, ttl=self._session_ttl
        )

        completed_at = to_iso(now)
        entry = WorkoutHistoryEntry(
            **session.model_dump(),
            completed_at=completed_at,
            total_workout_seconds=elapsed_seconds(session.started_at, completed_at),
            total_rest_seconds=total_rest_seconds(session.completed_exercises),
        )
        key = self._history_repo.append(entry)

        try:
            self._session_repo.delete(session_id)
        except StorageError as e:
            logger.error(f"History written to {key} but session {session_id} not deleted: {e}")

        logger.info(
            f"Workout completed for user {user_id}: {entry.workout_day}, "
            f"{len(entry.completed_exercises)}/{len(entry.exercises)} exercises, "
            f"{entry.total_workout_seconds}s total, {entry.total_rest_seconds}s rest"
        )
        return CompleteWorkoutResult(
            completed_at=completed_at,
            total_workout_seconds=entry.total_workout_seconds,
            total_rest_seconds=entry.total_rest_seconds,
            entry=entry,
        )
