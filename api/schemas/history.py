"""
Response models for the completed-workout read endpoints.
"""

from typing import List

from pydantic import Field

from domain.models import CamelModel, WeightHistoryPoint, WorkoutHistoryEntry


class WorkoutHistoryResponse(CamelModel):
    history: List[WorkoutHistoryEntry] = Field(default_factory=list)


class StreakResponse(CamelModel):
    streak: int = 0


class WeekProgressResponse(CamelModel):
    today_workout_day: str
    completed_days_this_week: List[str] = Field(default_factory=list)
    completed_days_today: List[str] = Field(default_factory=list)


class ExerciseWeightsResponse(CamelModel):
    weight_history: List[WeightHistoryPoint] = Field(default_factory=list)
