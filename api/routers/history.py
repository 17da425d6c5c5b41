"""
History router for completed workouts.

This router contains endpoints for:
- /workout-history - All history entries, newest first
- /streak - Consecutive days (ending today) with a completed workout
- /week-progress - Plan days completed this week and today
- /exercise-weights/{exercise_name} - Weight series for one exercise
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import (
    get_current_user,
    get_exercise_weights_use_case,
    get_streak_use_case,
    get_week_progress_use_case,
    get_workout_history_use_case,
)
from api.schemas import (
    ExerciseWeightsResponse,
    StreakResponse,
    WeekProgressResponse,
    WorkoutHistoryResponse,
)
from application.exceptions import StorageError
from application.use_cases import (
    GetExerciseWeightsUseCase,
    GetStreakUseCase,
    GetWeekProgressUseCase,
    GetWorkoutHistoryUseCase,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["History"],
)


@router.get("/workout-history", response_model=WorkoutHistoryResponse)
def get_workout_history_endpoint(
    user_id: str = Depends(get_current_user),
    use_case: GetWorkoutHistoryUseCase = Depends(get_workout_history_use_case),
):
    try:
        history = use_case.execute(user_id)
    except StorageError as e:
        raise HTTPException(status_code=500, detail="Failed to get workout history") from e

    logger.info(f"Workout history retrieved for user {user_id}: {len(history)} entries")
    return WorkoutHistoryResponse(history=history)


@router.get("/streak", response_model=StreakResponse)
def get_streak_endpoint(
    user_id: str = Depends(get_current_user),
    use_case: GetStreakUseCase = Depends(get_streak_use_case),
):
    try:
        streak = use_case.execute(user_id)
    except StorageError as e:
        raise HTTPException(status_code=500, detail="Failed to get streak") from e

    return StreakResponse(streak=streak)


@router.get("/week-progress", response_model=WeekProgressResponse)
def get_week_progress_endpoint(
    user_id: str = Depends(get_current_user),
    use_case: GetWeekProgressUseCase = Depends(get_week_progress_use_case),
):
    """Weeks start on Monday; days are UTC calendar days."""
    try:
        progress = use_case.execute(user_id)
    except StorageError as e:
        raise HTTPException(status_code=500, detail="Failed to get week progress") from e

    return WeekProgressResponse(
        today_workout_day=progress.today_workout_day,
        completed_days_this_week=progress.completed_days_this_week,
        completed_days_today=progress.completed_days_today,
    )


@router.get("/exercise-weights/{exercise_name:path}", response_model=ExerciseWeightsResponse)
def get_exercise_weights_endpoint(
    exercise_name: str,
    user_id: str = Depends(get_current_user),
    use_case: GetExerciseWeightsUseCase = Depends(get_exercise_weights_use_case),
):
    """Exercise names may contain spaces or slashes; send them URL-encoded."""
    try:
        points = use_case.execute(user_id, exercise_name)
    except StorageError as e:
        raise HTTPException(status_code=500, detail="Failed to get exercise weights") from e

    return ExerciseWeightsResponse(weight_history=points)
