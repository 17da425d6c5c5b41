"""
Workouts router for the active-session lifecycle.

This router contains endpoints for:
- /start-workout - Create a session from a day's exercises
- /log-exercise - Record one finished exercise (reps, weight, rest)
- /complete-workout - Turn the session into a history entry

Business rules live in the use cases; this module only translates HTTP
requests and results. Storage failures answer 500 with a per-operation
message; the underlying error is logged by the store.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import (
    get_complete_workout_use_case,
    get_current_user,
    get_log_exercise_use_case,
    get_start_workout_use_case,
)
from api.schemas import (
    CompleteWorkoutRequest,
    CompleteWorkoutResponse,
    LogExerciseRequest,
    LogExerciseResponse,
    StartWorkoutRequest,
    StartWorkoutResponse,
)
from application.exceptions import StorageError
from application.use_cases import (
    CompleteWorkoutUseCase,
    LogExerciseUseCase,
    StartWorkoutUseCase,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Workouts"],
)


@router.post("/start-workout", response_model=StartWorkoutResponse)
def start_workout_endpoint(
    request: StartWorkoutRequest,
    user_id: str = Depends(get_current_user),
    use_case: StartWorkoutUseCase = Depends(get_start_workout_use_case),
):
    """
    Start a workout session.

    The exercises sent here are snapshotted into the session; later plan
    edits do not affect it.
    """
    try:
        result = use_case.execute(user_id, request.workout_day, request.exercises)
    except StorageError as e:
        raise HTTPException(status_code=500, detail="Failed to start workout") from e

    return StartWorkoutResponse(session_id=result.session_id, started_at=result.started_at)


@router.post("/log-exercise", response_model=LogExerciseResponse)
def log_exercise_endpoint(
    request: LogExerciseRequest,
    user_id: str = Depends(get_current_user),
    use_case: LogExerciseUseCase = Depends(get_log_exercise_use_case),
):
    """
    Log a finished exercise against an active session.

    Returns 400 for an exercise that is not pending or a wrong number of
    sets, 404 for a missing/foreign/expired session and 409 when every
    planned exercise is already logged.
    """
    try:
        result = use_case.execute(
            user_id,
            request.session_id,
            request.exercise_name,
            request.sets_data,
            weight=request.weight,
            rest_taken_seconds=request.rest_taken_seconds,
        )
    except StorageError as e:
        raise HTTPException(status_code=500, detail="Failed to log exercise") from e

    return LogExerciseResponse(
        log=result.log,
        completed_count=result.completed_count,
        planned_count=result.planned_count,
    )


@router.post("/complete-workout", response_model=CompleteWorkoutResponse)
def complete_workout_endpoint(
    request: CompleteWorkoutRequest,
    user_id: str = Depends(get_current_user),
    use_case: CompleteWorkoutUseCase = Depends(get_complete_workout_use_case),
):
    """
    Complete a workout session.

    Totals are computed from server timestamps and the persisted logs.
    """
    try:
        result = use_case.execute(user_id, request.session_id)
    except StorageError as e:
        raise HTTPException(status_code=500, detail="Failed to complete workout") from e

    return CompleteWorkoutResponse(
        completed_at=result.completed_at,
        total_rest_seconds=result.total_rest_seconds,
        total_workout_seconds=result.total_workout_seconds,
    )
