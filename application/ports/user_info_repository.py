"""
User Info Repository Interface (Port).

Body metrics are stored twice: an append-only log of snapshots (individually
correctable) and a "latest" cache entry for fast profile reads.
"""
from typing import Any, Dict, List, Optional, Protocol

from domain.models import LatestProfile, UserInfoHistoryEntry


class UserInfoRepository(Protocol):
    """Abstract interface for body-metrics persistence."""

    def get_latest(self, user_id: str) -> Optional[Dict[str, Any]]:
        """
        Get the cached latest profile as stored.

        Returned raw because legacy profiles predate validation; callers
        parse it when they need typed values.
        """
        ...

    def set_latest(self, user_id: str, profile: LatestProfile) -> None:
        """Overwrite the cached latest profile."""
        ...

    def list_history(self, user_id: str) -> List[UserInfoHistoryEntry]:
        """
        List readable history entries.

        Returns:
            Entries sorted newest first by recordedAt
        """
        ...

    def get_entry(self, user_id: str, entry_id: str) -> Optional[UserInfoHistoryEntry]:
        """Get one history entry, or None if missing or unreadable."""
        ...

    def save_entry(self, user_id: str, entry: UserInfoHistoryEntry) -> None:
        """Create or overwrite a history entry."""
        ...
