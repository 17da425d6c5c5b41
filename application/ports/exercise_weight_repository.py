"""
Exercise Weight Repository Interface (Port).

Each logged exercise appends its weight to a per-user, per-exercise series
used for trend charts.
"""
from typing import List, Protocol

from domain.models import WeightHistoryPoint


class ExerciseWeightRepository(Protocol):
    """Abstract interface for per-exercise weight series."""

    def append(self, user_id: str, exercise_name: str, point: WeightHistoryPoint) -> None:
        """Append a point to the series for ``exercise_name``."""
        ...

    def get_history(self, user_id: str, exercise_name: str) -> List[WeightHistoryPoint]:
        """
        Get the weight series for an exercise.

        Returns:
            Points in insertion order; empty if the exercise was never logged
        """
        ...
