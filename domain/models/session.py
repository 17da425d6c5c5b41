"""
Active workout session and its exercise logs.

A WorkoutSession is created when a workout starts, grows by one ExerciseLog
per finished exercise, and is deleted once it is turned into a history entry.
"""

from datetime import datetime, timedelta
from typing import List, Optional

from pydantic import Field

from domain.models.base import SCHEMA_VERSION, CamelModel
from domain.models.plan import Exercise
from domain.timestamps import parse_iso


class ExerciseLog(CamelModel):
    """Performance captured for one finished exercise. Immutable once appended."""

    exercise_name: str
    sets_data: List[int] = Field(default_factory=list, description="Reps per set")
    weight: float = Field(default=0, ge=0)
    rest_taken_seconds: int = Field(default=0, ge=0)
    completed_at: str


class WorkoutSession(CamelModel):
    """One in-progress attempt at a workout day."""

    session_id: str
    user_id: str
    workout_day: str
    exercises: List[Exercise] = Field(default_factory=list)
    started_at: str
    completed_exercises: List[ExerciseLog] = Field(default_factory=list)
    schema_version: int = SCHEMA_VERSION

    @property
    def is_full(self) -> bool:
        """True once every planned exercise has a log."""
        return len(self.completed_exercises) >= len(self.exercises)

    def next_planned(self, exercise_name: str) -> Optional[Exercise]:
        """
        Planned exercise that a new log named ``exercise_name`` would fill.

        Handles plans listing the same exercise more than once: the n-th log
        of a name matches the n-th planned occurrence of that name.
        """
        logged = sum(
            1 for log in self.completed_exercises if log.exercise_name == exercise_name
        )
        planned = [ex for ex in self.exercises if ex.name == exercise_name]
        if logged < len(planned):
            return planned[logged]
        return None

    def is_expired(self, now: datetime, ttl: timedelta) -> bool:
        started = parse_iso(self.started_at)
        if started is None:
            return False
        return now - started > ttl
