"""
Request/response models for the active-session endpoints.

Field names are camelCase on the wire and snake_case in Python.
"""

from typing import Any, List

from pydantic import Field

from domain.models import CamelModel, Exercise, ExerciseLog


class StartWorkoutRequest(CamelModel):
    workout_day: str = Field(..., description="Plan day being trained, e.g. 'Monday'")
    exercises: List[Exercise] = Field(default_factory=list)


class StartWorkoutResponse(CamelModel):
    session_id: str
    started_at: str


class LogExerciseRequest(CamelModel):
    session_id: str
    exercise_name: str
    sets_data: List[int] = Field(..., description="Reps per set, one entry per planned set")
    # Coerced by the use case; any JSON value is accepted and unparsable ones become 0.
    weight: Any = 0
    rest_taken_seconds: Any = 0


class LogExerciseResponse(CamelModel):
    success: bool = True
    log: ExerciseLog
    completed_count: int
    planned_count: int


class CompleteWorkoutRequest(CamelModel):
    session_id: str


class CompleteWorkoutResponse(CamelModel):
    success: bool = True
    completed_at: str
    total_rest_seconds: int
    total_workout_seconds: int

