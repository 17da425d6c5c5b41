"""
Body-metrics use cases: record, read, list and correct snapshots.

Snapshots live in an append-only, individually correctable history plus a
"latest" cache entry. Users who saved their profile before the history
existed only have the cache entry; ``ensure_user_info_history`` migrates it
into a first history row the first time the history is needed.
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional

from application.exceptions import HistoryEntryNotFoundError, ValidationError
from application.ports import UserInfoRepository
from domain.converters import legacy_profile_to_history_entry
from domain.models import (
    InvalidUserInfoError,
    LatestProfile,
    UserInfoHistoryEntry,
    UserInfoSnapshot,
    parse_user_info_payload,
)
from domain.timestamps import epoch_millis, to_iso, utc_now

logger = logging.getLogger(__name__)


def new_entry_id(now: datetime) -> str:
    """History entry ID: "{epochMillis}_{8 hex chars}"."""
    return f"{epoch_millis(now)}_{uuid.uuid4().hex[:8]}"


def legacy_entry_id(now: datetime) -> str:
    return f"legacy_{epoch_millis(now)}"


def ensure_user_info_history(
    repo: UserInfoRepository,
    user_id: str,
    now: datetime,
) -> List[UserInfoHistoryEntry]:
    """
    Return the user's history newest first, migrating a legacy profile if needed.

    When no readable history rows exist but a valid latest profile does, it is
    written as a single ``legacy_{ms}`` entry recorded at the profile's own
    updatedAt. An invalid legacy profile migrates to nothing.
    """
    history = repo.list_history(user_id)
    if history:
        return history

    latest = repo.get_latest(user_id)
    if not latest:
        return []

    entry = legacy_profile_to_history_entry(latest, legacy_entry_id(now), to_iso(now))
    if entry is None:
        return []

    repo.save_entry(user_id, entry)
    logger.info(f"Migrated legacy profile for user {user_id} into history entry {entry.entry_id}")
    return [entry]


def _parse(payload: Dict[str, Any]) -> UserInfoSnapshot:
    try:
        return parse_user_info_payload(payload)
    except InvalidUserInfoError as e:
        raise ValidationError(str(e)) from e


@dataclass
class SaveUserInfoResult:
    entry: UserInfoHistoryEntry
    profile: LatestProfile


class SaveUserInfoUseCase:
    """
    Record a new snapshot.

    The history row is written first, then the latest cache; if the cache
    write fails the next read of an empty cache rebuilds it from history.
    """

    def __init__(
        self,
        repo: UserInfoRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repo = repo
        self._clock = clock

    def execute(self, user_id: str, payload: Dict[str, Any]) -> SaveUserInfoResult:
        snapshot = _parse(payload)
        now = self._clock()
        ensure_user_info_history(self._repo, user_id, now)

        now_iso = to_iso(now)
        entry = UserInfoHistoryEntry(
            entry_id=new_entry_id(now),
            recorded_at=now_iso,
            updated_at=now_iso,
            **snapshot.model_dump(),
        )
        self._repo.save_entry(user_id, entry)
        profile = LatestProfile.from_entry(entry)
        self._repo.set_latest(user_id, profile)

        logger.info(f"User info saved for user {user_id} (entry {entry.entry_id})")
        return SaveUserInfoResult(entry=entry, profile=profile)


class GetUserInfoUseCase:
    """
    Read the latest profile.

    Served from the cache entry as stored; when the cache is empty it is
    rebuilt from the newest history entry.
    """

    def __init__(
        self,
        repo: UserInfoRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repo = repo
        self._clock = clock

    def execute(self, user_id: str) -> Optional[Dict[str, Any]]:
        profile = self._repo.get_latest(user_id)
        if profile:
            return profile

        history = ensure_user_info_history(self._repo, user_id, self._clock())
        if not history:
            return None

        latest = LatestProfile.from_entry(history[0])
        self._repo.set_latest(user_id, latest)
        logger.info(f"Rebuilt latest profile for user {user_id} from history")
        return latest.to_record()


class ListUserInfoHistoryUseCase:
    def __init__(
        self,
        repo: UserInfoRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repo = repo
        self._clock = clock

    def execute(self, user_id: str) -> List[UserInfoHistoryEntry]:
        return ensure_user_info_history(self._repo, user_id, self._clock())


class CorrectUserInfoEntryUseCase:
    """
    Fix the values of an existing history entry.

    entryId and recordedAt are preserved, updatedAt is bumped, and no new
    history row is created. The latest cache is then refreshed from whichever
    entry is newest by recordedAt.
    """

    def __init__(
        self,
        repo: UserInfoRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._repo = repo
        self._clock = clock

    def execute(
        self,
        user_id: str,
        entry_id: str,
        payload: Dict[str, Any],
    ) -> UserInfoHistoryEntry:
        existing = self._repo.get_entry(user_id, entry_id)
        if existing is None:
            raise HistoryEntryNotFoundError("History entry not found")

        snapshot = _parse(payload)
        now = self._clock()
        updated = existing.model_copy(
            update={**snapshot.model_dump(), "updated_at": to_iso(now)}
        )
        self._repo.save_entry(user_id, updated)

        history = ensure_user_info_history(self._repo, user_id, now)
        newest = history[0] if history else updated
        self._repo.set_latest(user_id, LatestProfile.from_entry(newest))

        logger.info(f"User info history entry {entry_id} corrected for user {user_id}")
        return updated
