"""
Workout Session Repository Interface (Port).

Active sessions are ephemeral: created on workout start, appended to by each
exercise log, deleted on completion or expiry.
"""
from typing import List, Optional, Protocol

from domain.models import WorkoutSession


class WorkoutSessionRepository(Protocol):
    """Abstract interface for active workout session persistence."""

    def get(self, session_id: str) -> Optional[WorkoutSession]:
        """
        Get a session by ID.

        Args:
            session_id: Session ID ("{userId}_{epochMillis}")

        Returns:
            The session, or None if it does not exist
        """
        ...

    def save(self, session: WorkoutSession) -> None:
        """Create or overwrite a session (last write wins)."""
        ...

    def delete(self, session_id: str) -> None:
        """Delete a session; missing sessions are ignored."""
        ...

    def list_sessions(self, user_id: Optional[str] = None) -> List[WorkoutSession]:
        """
        List stored sessions.

        Args:
            user_id: Restrict to one user's sessions; None lists every session

        Returns:
            Readable sessions (unreadable records are skipped)
        """
        ...
