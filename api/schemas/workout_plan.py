"""
Request/response models for the workout plan endpoints.
"""

from typing import Any, List, Optional

from pydantic import Field

from domain.models import CamelModel, WorkoutDay


class SaveWorkoutPlanRequest(CamelModel):
    # Validated by the use case so rule violations answer 400, not 422
    workout_plan: List[Any] = Field(..., description="Ordered list of workout days")


class SaveWorkoutPlanResponse(CamelModel):
    success: bool = True
    days: int


class WorkoutPlanResponse(CamelModel):
    workout_plan: Optional[List[WorkoutDay]] = None
