"""
Key-value backed UserInfoRepository.

Key layout:
- latest profile: ``user_info_{userId}``
- history entry:  ``user_info_history:{userId}:{entryId}``
"""
from typing import Any, Dict, List, Optional

from application.ports import KeyValueStore
from domain.converters import user_info_entry_from_record
from domain.models import LatestProfile, UserInfoHistoryEntry
from domain.timestamps import parse_iso


def latest_key(user_id: str) -> str:
    return f"user_info_{user_id}"


def history_prefix(user_id: str) -> str:
    return f"user_info_history:{user_id}:"


def entry_key(user_id: str, entry_id: str) -> str:
    return f"{history_prefix(user_id)}{entry_id}"


def sort_newest_first(entries: List[UserInfoHistoryEntry]) -> List[UserInfoHistoryEntry]:
    def recorded(entry: UserInfoHistoryEntry) -> float:
        parsed = parse_iso(entry.recorded_at)
        return parsed.timestamp() if parsed else 0.0

    return sorted(entries, key=recorded, reverse=True)


class KVUserInfoRepository:
    """UserInfoRepository over a KeyValueStore."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def get_latest(self, user_id: str) -> Optional[Dict[str, Any]]:
        return self._store.get(latest_key(user_id))

    def set_latest(self, user_id: str, profile: LatestProfile) -> None:
        self._store.set(latest_key(user_id), profile.to_record())

    def list_history(self, user_id: str) -> List[UserInfoHistoryEntry]:
        entries = [
            entry
            for entry in (
                user_info_entry_from_record(raw)
                for raw in self._store.get_by_prefix(history_prefix(user_id))
            )
            if entry is not None
        ]
        return sort_newest_first(entries)

    def get_entry(self, user_id: str, entry_id: str) -> Optional[UserInfoHistoryEntry]:
        return user_info_entry_from_record(self._store.get(entry_key(user_id, entry_id)))

    def save_entry(self, user_id: str, entry: UserInfoHistoryEntry) -> None:
        self._store.set(entry_key(user_id, entry.entry_id), entry.to_record())
