"""
Workout history entry: an immutable record of one completed session.
"""

from domain.models.session import WorkoutSession


class WorkoutHistoryEntry(WorkoutSession):
    """Finished session plus completion totals. Append-only."""

    completed_at: str
    total_workout_seconds: int = 0
    total_rest_seconds: int = 0

    @property
    def completed_date(self) -> str:
        """Calendar date (UTC) of completion, as YYYY-MM-DD."""
        return self.completed_at.split("T")[0]
