"""
Workout plan value objects: Exercise, WorkoutDay and the stored plan record.
"""

from typing import List

from pydantic import Field, field_validator, model_validator

from domain.models.base import SCHEMA_VERSION, CamelModel
from domain.timestamps import round_half_up


class Exercise(CamelModel):
    """
    A planned exercise within a workout day.

    Examples:
        >>> bench = Exercise(name="Bench Press", sets=3, min_reps=8, max_reps=12, rest_time=90)
        >>> bench.default_reps
        10
    """

    name: str = Field(..., min_length=1, description="Exercise name")
    sets: int = Field(..., gt=0, description="Number of sets")
    min_reps: int = Field(..., ge=0, description="Lower bound of the rep range")
    max_reps: int = Field(..., ge=0, description="Upper bound of the rep range")
    rest_time: int = Field(..., gt=0, description="Rest between sets in seconds")

    @field_validator("name")
    @classmethod
    def strip_name(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Exercise name is required")
        return v

    @model_validator(mode="after")
    def check_rep_range(self) -> "Exercise":
        if self.min_reps > self.max_reps:
            raise ValueError(
                f"minReps ({self.min_reps}) must not exceed maxReps ({self.max_reps})"
            )
        return self

    @property
    def default_reps(self) -> int:
        """Midpoint of the rep range, used to prefill each set."""
        return round_half_up((self.min_reps + self.max_reps) / 2)


class WorkoutDay(CamelModel):
    """A named training day and its ordered exercises."""

    day: str = Field(..., min_length=1, description="Day name, e.g. 'Monday'")
    exercises: List[Exercise] = Field(default_factory=list)


class WorkoutPlanRecord(CamelModel):
    """Stored weekly plan for one user."""

    workout_plan: List[WorkoutDay] = Field(default_factory=list)
    user_id: str
    created_at: str
    schema_version: int = SCHEMA_VERSION

    @field_validator("workout_plan")
    @classmethod
    def unique_days(cls, v: List[WorkoutDay]) -> List[WorkoutDay]:
        seen = set()
        for workout_day in v:
            if workout_day.day in seen:
                raise ValueError(f"Duplicate workout day: {workout_day.day}")
            seen.add(workout_day.day)
        return v
