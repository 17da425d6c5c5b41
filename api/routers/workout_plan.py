"""
Workout plan router.

This router contains endpoints for:
- GET /workout-plan - The user's weekly plan (null if none saved)
- POST /workout-plan - Replace the weekly plan
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import (
    get_current_user,
    get_save_workout_plan_use_case,
    get_workout_plan_use_case,
)
from api.schemas import (
    SaveWorkoutPlanRequest,
    SaveWorkoutPlanResponse,
    WorkoutPlanResponse,
)
from application.exceptions import StorageError
from application.use_cases import GetWorkoutPlanUseCase, SaveWorkoutPlanUseCase

logger = logging.getLogger(__name__)

router = APIRouter(
    tags=["Workout Plan"],
)


@router.post("/workout-plan", response_model=SaveWorkoutPlanResponse)
def save_workout_plan_endpoint(
    request: SaveWorkoutPlanRequest,
    user_id: str = Depends(get_current_user),
    use_case: SaveWorkoutPlanUseCase = Depends(get_save_workout_plan_use_case),
):
    try:
        record = use_case.execute(user_id, request.workout_plan)
    except StorageError as e:
        raise HTTPException(status_code=500, detail="Failed to save workout plan") from e

    return SaveWorkoutPlanResponse(days=len(record.workout_plan))


@router.get("/workout-plan", response_model=WorkoutPlanResponse)
def get_workout_plan_endpoint(
    user_id: str = Depends(get_current_user),
    use_case: GetWorkoutPlanUseCase = Depends(get_workout_plan_use_case),
):
    try:
        record = use_case.execute(user_id)
    except StorageError as e:
        raise HTTPException(status_code=500, detail="Failed to get workout plan") from e

    logger.info(f"Workout plan retrieved for user {user_id}, plan exists: {record is not None}")
    return WorkoutPlanResponse(workout_plan=record.workout_plan if record else None)
