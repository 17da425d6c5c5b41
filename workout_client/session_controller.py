"""
Active workout session controller.

Owns the lifecycle of one workout from start to completion or abandonment.
All session and rest state lives on a single ``SessionState`` held by the
controller instance; nothing is kept at module level.

States::

    NOT_STARTED -> IN_PROGRESS -> COMPLETED
         |              |
         v              v
       FAILED       ABANDONED

There is no transition out of COMPLETED. Network and storage failures never
raise from the async operations: they set ``state.error`` to a generic
message and leave the state as it was, so the user can retry.
"""

import enum
import logging
import time
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from domain.models import Exercise
from domain.services import coerce_weight
from domain.timestamps import round_half_up, to_iso
from workout_client.api_client import (
    AuthenticationError,
    WorkoutApiClient,
    WorkoutClientError,
)
from workout_client.rest_timer import RestTimer

logger = logging.getLogger(__name__)

START_FAILED = "Failed to start workout session"
LOG_FAILED = "Failed to log exercise"
COMPLETE_FAILED = "Failed to complete workout"


class SessionStatus(str, enum.Enum):
    NOT_STARTED = "not_started"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    FAILED = "failed"
    ABANDONED = "abandoned"


@dataclass
class ExerciseDraft:
    """Reps and weight being entered for an exercise, not yet logged."""

    reps: list[int]
    weight: Any = 0


@dataclass
class WorkoutCompletionSummary:
    """What the summary screen shows right after completing."""

    workout_day: str
    completed_at: str
    total_workout_seconds: int
    total_rest_seconds: int
    completed_exercises: int
    planned_exercises: int
    exercises: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class SessionState:
    workout_day: str
    exercises: list[Exercise]
    status: SessionStatus = SessionStatus.NOT_STARTED
    session_id: Optional[str] = None
    client_started_at: Optional[float] = None
    server_started_at: Optional[str] = None
    focus_index: Optional[int] = None
    completed: set[int] = field(default_factory=set)
    drafts: dict[int, ExerciseDraft] = field(default_factory=dict)
    logs: list[dict[str, Any]] = field(default_factory=list)
    summary: Optional[WorkoutCompletionSummary] = None
    error: Optional[str] = None
    requires_sign_in: bool = False


class ActiveWorkoutController:
    """
    Drives one active workout against the API.

    Usage:
        controller = ActiveWorkoutController(api, "Monday", exercises)
        await controller.start_session()
        controller.select_exercise(0)
        controller.record_set(0, reps=[10, 9, 8], weight=50)
        controller.start_rest(0)
        ...
        await controller.finalize_exercise(0)
        summary = await controller.complete_workout()
    """

    def __init__(
        self,
        api: WorkoutApiClient,
        workout_day: str,
        exercises: list[Exercise],
        *,
        timer: Optional[RestTimer] = None,
        clock: Callable[[], float] = time.time,
        on_unauthorized: Optional[Callable[[], None]] = None,
    ):
        self._api = api
        self._clock = clock
        self._on_unauthorized = on_unauthorized
        self.timer = timer if timer is not None else RestTimer(clock=clock)
        self.state = SessionState(workout_day=workout_day, exercises=list(exercises))

    @property
    def resting(self) -> bool:
        return self.timer.is_running

    @property
    def all_completed(self) -> bool:
        return len(self.state.completed) == len(self.state.exercises)

    def _exercise(self, index: int) -> Exercise:
        if not 0 <= index < len(self.state.exercises):
            raise IndexError(
                f"Exercise index {index} out of range (0-{len(self.state.exercises) - 1})"
            )
        return self.state.exercises[index]

    def _require_in_progress(self) -> None:
        if self.state.status is not SessionStatus.IN_PROGRESS:
            raise RuntimeError(f"Workout is {self.state.status.value}, not in progress")

    def _fail(self, error: WorkoutClientError, message: str) -> None:
        self.state.error = message
        if isinstance(error, AuthenticationError):
            self.state.requires_sign_in = True
            if self._on_unauthorized is not None:
                self._on_unauthorized()
        logger.warning(f"{message}: {error}")

    async def start_session(self) -> bool:
        """
        Create the server-side session.

        The client start instant is recorded before the request so the
        displayed elapsed time is not skewed by network delay. A failure
        moves the controller to FAILED; there is no retry.
        """
        if self.state.status is not SessionStatus.NOT_STARTED:
            raise RuntimeError(f"Workout is {self.state.status.value}, cannot start")

        self.state.client_started_at = self._clock()
        try:
            started = await self._api.start_workout(self.state.workout_day, self.state.exercises)
        except WorkoutClientError as e:
            self.state.status = SessionStatus.FAILED
            self._fail(e, START_FAILED)
            return False

        self.state.session_id = started.session_id
        self.state.server_started_at = started.started_at
        self.state.status = SessionStatus.IN_PROGRESS
        self.state.error = None
        logger.info(f"Workout session {started.session_id} started ({self.state.workout_day})")
        return True

    def select_exercise(self, index: int) -> Exercise:
        """Focus an exercise and reset its draft. Invalid indexes raise IndexError."""
        exercise = self._exercise(index)
        self._require_in_progress()
        self.state.focus_index = index
        self.state.drafts.pop(index, None)
        return exercise

    def record_set(
        self,
        index: int,
        reps: Optional[list[int]] = None,
        weight: Any = None,
    ) -> ExerciseDraft:
        """
        Update the draft for an exercise.

        The first call creates a draft with one entry per planned set, each
        prefilled with the midpoint of the rep range.

        Raises:
            ValueError: reps of the wrong length or with negative values
        """
        exercise = self._exercise(index)
        self._require_in_progress()

        if reps is not None:
            if len(reps) != exercise.sets:
                raise ValueError(f"Expected {exercise.sets} sets, got {len(reps)}")
            if any(r < 0 for r in reps):
                raise ValueError("Reps must not be negative")

        draft = self.state.drafts.get(index)
        if draft is None:
            draft = ExerciseDraft(reps=[exercise.default_reps] * exercise.sets)
            self.state.drafts[index] = draft

        if reps is not None:
            draft.reps = list(reps)
        if weight is not None:
            draft.weight = weight
        return draft

    def start_rest(self, index: int) -> None:
        """Start the rest countdown for an exercise using its planned rest time."""
        exercise = self._exercise(index)
        self._require_in_progress()
        self.timer.start(index, exercise.rest_time)

    def skip_rest(self) -> int:
        return self.timer.skip()

    async def finalize_exercise(self, index: int) -> bool:
        """
        Log an exercise with its draft and the rest accumulated for it.

        A running rest countdown for this exercise is finalized first. On
        failure the exercise stays unmarked and can be finalized again.
        """
        exercise = self._exercise(index)
        self._require_in_progress()
        if index in self.state.completed:
            return True

        if self.timer.is_running and self.timer.exercise_index == index:
            self.timer.finalize()

        draft = self.state.drafts.get(index) or ExerciseDraft(
            reps=[exercise.default_reps] * exercise.sets
        )
        weight = coerce_weight(draft.weight)
        rest = self.timer.rest_for(index)

        try:
            await self._api.log_exercise(
                self.state.session_id,
                exercise.name,
                draft.reps,
                weight,
                rest,
            )
        except WorkoutClientError as e:
            self._fail(e, LOG_FAILED)
            return False

        self.state.completed.add(index)
        self.state.logs.append({
            "exerciseName": exercise.name,
            "setsData": list(draft.reps),
            "weight": weight,
            "restTakenSeconds": rest,
        })
        self.timer.clear_exercise(index)
        self.state.drafts.pop(index, None)
        if self.state.focus_index == index:
            self.state.focus_index = None
        self.state.error = None
        return True

    async def complete_workout(self) -> Optional[WorkoutCompletionSummary]:
        """
        Complete the workout with whatever has been logged so far.

        Any open rest countdown is finalized before the request. Server
        totals are preferred; client totals and the client clock fill in
        fields the server omits. The summary carries the logged exercises
        so it can be shown without re-fetching history.
        """
        self._require_in_progress()
        self.timer.finalize()

        try:
            totals = await self._api.complete_workout(self.state.session_id)
        except WorkoutClientError as e:
            self._fail(e, COMPLETE_FAILED)
            return None

        now = self._clock()
        client_workout_seconds = max(
            0, round_half_up(now - (self.state.client_started_at or now))
        )
        summary = WorkoutCompletionSummary(
            workout_day=self.state.workout_day,
            completed_at=totals.completed_at
            or to_iso(datetime.fromtimestamp(now, timezone.utc)),
            total_workout_seconds=(
                totals.total_workout_seconds
                if totals.total_workout_seconds is not None
                else client_workout_seconds
            ),
            total_rest_seconds=(
                totals.total_rest_seconds
                if totals.total_rest_seconds is not None
                else self.timer.total_rest_seconds
            ),
            completed_exercises=len(self.state.completed),
            planned_exercises=len(self.state.exercises),
            exercises=list(self.state.logs),
        )
        self.state.summary = summary
        self.state.status = SessionStatus.COMPLETED
        self.state.focus_index = None
        self.state.error = None
        logger.info(
            f"Workout session {self.state.session_id} completed: "
            f"{summary.total_workout_seconds}s total, {summary.total_rest_seconds}s rest"
        )
        return summary

    def abandon(self) -> None:
        """
        Back out of the workout.

        The server-side session is left in place; it expires on its own.
        """
        if self.state.status is SessionStatus.COMPLETED:
            raise RuntimeError("Workout is completed, cannot abandon")
        self.timer.finalize()
        self.state.status = SessionStatus.ABANDONED
        self.state.focus_index = None
        logger.info(f"Workout session {self.state.session_id} abandoned")
