"""
ExpireAbandonedSessions Use Case.

Sessions that are never completed (user backed out, closed the tab) would
otherwise stay in the store forever. Any session older than the configured
time-to-live is considered abandoned and deleted.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Callable, List, Optional

from application.ports import WorkoutSessionRepository
from domain.timestamps import utc_now

logger = logging.getLogger(__name__)


@dataclass
class ExpireSessionsResult:
    """Result of an expiry sweep."""

    scanned: int = 0
    expired_session_ids: List[str] = field(default_factory=list)
    dry_run: bool = False


class ExpireAbandonedSessionsUseCase:
    """
    Delete sessions older than ``ttl``.

    Usage:
        >>> use_case = ExpireAbandonedSessionsUseCase(session_repo, ttl=timedelta(hours=24))
        >>> result = use_case.execute(user_id="user-123")
    """

    def __init__(
        self,
        session_repo: WorkoutSessionRepository,
        ttl: timedelta,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._session_repo = session_repo
        self._ttl = ttl
        self._clock = clock

    def execute(
        self,
        user_id: Optional[str] = None,
        *,
        dry_run: bool = False,
    ) -> ExpireSessionsResult:
        """
        Sweep expired sessions.

        Args:
            user_id: Only sweep this user's sessions; None sweeps everyone
            dry_run: Report what would be deleted without deleting
        """
        now = self._clock()
        sessions = self._session_repo.list_sessions(user_id)
        result = ExpireSessionsResult(scanned=len(sessions), dry_run=dry_run)

        for session in sessions:
            if not session.is_expired(now, self._ttl):
                continue
            result.expired_session_ids.append(session.session_id)
            if not dry_run:
                self._session_repo.delete(session.session_id)

        if result.expired_session_ids:
            logger.info(
                f"{'Would expire' if dry_run else 'Expired'} "
                f"{len(result.expired_session_ids)} of {result.scanned} sessions"
            )
        return result
