"""
LogExercise Use Case (exercise log recorder).

Turns a finished exercise attempt into a persisted log line:

1. Append the ExerciseLog to the session's completedExercises
2. Append the weight to the per-exercise weight series

The two writes are not transactional. The session write is authoritative;
if the weight-series write fails afterwards the log stays, the inconsistency
is logged and the StorageError propagates. There is no compensating rollback.
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Any, Callable, List, Optional

from application.exceptions import SessionConflictError, StorageError, ValidationError
from application.ports import ExerciseWeightRepository, WorkoutSessionRepository
from application.use_cases.session_access import load_active_session
from domain.models import ExerciseLog, WeightHistoryPoint
from domain.services import coerce_rest_seconds, coerce_weight
from domain.timestamps import to_iso, utc_now

logger = logging.getLogger(__name__)


@dataclass
class LogExerciseResult:
    """Result of logging one exercise."""

    log: ExerciseLog
    completed_count: int
    planned_count: int


class LogExerciseUseCase:
    """
    Use case for recording a completed exercise against an active session.

    Validation:
    - exerciseName must match a planned exercise that has not been logged yet
    - setsData must have exactly the planned number of sets, each >= 0
    - weight is coerced to a non-negative number (0 if unparsable)
    - restTakenSeconds is coerced to a non-negative int (0 if unparsable)

    Concurrent writers to the same session resolve as last-write-wins; a log
    arriving when every planned exercise already has one is rejected.
    """

    def __init__(
        self,
        session_repo: WorkoutSessionRepository,
        weight_repo: ExerciseWeightRepository,
        *,
        session_ttl: Optional[timedelta] = None,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._session_repo = session_repo
        self._weight_repo = weight_repo
        self._session_ttl = session_ttl
        self._clock = clock

    def execute(
        self,
        user_id: str,
        session_id: str,
        exercise_name: str,
        sets_data: List[int],
        weight: Any = 0,
        rest_taken_seconds: Any = 0,
    ) -> LogExerciseResult:
        now = self._clock()
        session = load_active_session(
            self._session_repo, user_id, session_id, now=now, ttl=self._session_ttl
        )

        if session.is_full:
            raise SessionConflictError("All planned exercises have already been logged")

        planned = session.next_planned(exercise_name)
        if planned is None:
            raise ValidationError(
                f"Exercise '{exercise_name}' is not pending in this workout"
            )

        if len(sets_data) != planned.sets:
            raise ValidationError(
                f"Expected {planned.sets} sets for {exercise_name}, got {len(sets_data)}"
            )
        if any(reps < 0 for reps in sets_data):
            raise ValidationError("Reps must not be negative")

        now_iso = to_iso(now)
        log = ExerciseLog(
            exercise_name=exercise_name,
            sets_data=list(sets_data),
            weight=coerce_weight(weight),
            rest_taken_seconds=coerce_rest_seconds(rest_taken_seconds),
            completed_at=now_iso,
        )
        session.completed_exercises.append(log)
        self._session_repo.save(session)

        try:
            self._weight_repo.append(
                user_id,
                exercise_name,
                WeightHistoryPoint(weight=log.weight, date=now_iso),
            )
        except StorageError as e:
            logger.error(
                f"Exercise {exercise_name} logged to session {session_id} "
                f"but weight history write failed: {e}"
            )
            raise

        logger.info(
            f"Logged {exercise_name} for session {session_id}: "
            f"{log.sets_data} @ {log.weight}, rest {log.rest_taken_seconds}s"
        )
        return LogExerciseResult(
            log=log,
            completed_count=len(session.completed_exercises),
            planned_count=len(session.exercises),
        )
