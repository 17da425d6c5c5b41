"""
Workout Plan Repository Interface (Port).
"""
from typing import Optional, Protocol

from domain.models import WorkoutPlanRecord


class WorkoutPlanRepository(Protocol):
    """Abstract interface for the user's weekly workout plan."""

    def get(self, user_id: str) -> Optional[WorkoutPlanRecord]:
        """Get the user's plan, or None if none was saved."""
        ...

    def save(self, record: WorkoutPlanRecord) -> None:
        """Overwrite the user's plan."""
        ...
