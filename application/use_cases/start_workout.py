"""
StartWorkout Use Case.

Creates a new active session holding a snapshot of the day's exercises.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from application.exceptions import StorageError, ValidationError
from application.ports import WorkoutSessionRepository
from application.use_cases.expire_sessions import ExpireAbandonedSessionsUseCase
from domain.models import Exercise, WorkoutSession
from domain.timestamps import epoch_millis, to_iso, utc_now

logger = logging.getLogger(__name__)


@dataclass
class StartWorkoutResult:
    """Result of starting a workout."""

    session_id: str
    started_at: str


class StartWorkoutUseCase:
    """
    Use case for starting a workout session.

    The session ID is derived from the user and the start instant
    ("{userId}_{epochMillis}"). The server start time recorded here is the
    authoritative start for the completion totals.

    Before creating the new session, the user's own expired sessions are
    swept; a failing sweep is logged and does not block the start.
    """

    def __init__(
        self,
        session_repo: WorkoutSessionRepository,
        *,
        session_ttl: Optional[timedelta] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._session_repo = session_repo
        self._session_ttl = session_ttl
        self._clock = clock

    def execute(
        self,
        user_id: str,
        workout_day: str,
        exercises: List[Exercise],
    ) -> StartWorkoutResult:
        if not workout_day or not workout_day.strip():
            raise ValidationError("workoutDay is required")

        if self._session_ttl is not None:
            try:
                ExpireAbandonedSessionsUseCase(
                    self._session_repo, self._session_ttl, self._clock
                ).execute(user_id)
            except StorageError as e:
                logger.warning(f"Expired session sweep failed for {user_id}: {e}")

        now = self._clock()
        session = WorkoutSession(
            session_id=f"{user_id}_{epoch_millis(now)}",
            user_id=user_id,
            workout_day=workout_day,
            exercises=list(exercises),
            started_at=to_iso(now),
            completed_exercises=[],
        )
        self._session_repo.save(session)

        logger.info(
            f"Workout started for user {user_id}: {workout_day} "
            f"({len(exercises)} exercises, session {session.session_id})"
        )
        return StartWorkoutResult(session_id=session.session_id, started_at=session.started_at)
