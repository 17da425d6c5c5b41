"""
Workout History Repository Interface (Port).

History entries are append-only: one per completed session, never mutated.
"""
from typing import List, Protocol

from domain.models import WorkoutHistoryEntry


class WorkoutHistoryRepository(Protocol):
    """Abstract interface for completed-workout history."""

    def append(self, entry: WorkoutHistoryEntry) -> str:
        """
        Store a history entry under a per-completion unique key.

        Returns:
            The key the entry was written under
        """
        ...

    def list_for_user(self, user_id: str) -> List[WorkoutHistoryEntry]:
        """
        List a user's history entries.

        Returns:
            Entries sorted newest first by completedAt
        """
        ...
