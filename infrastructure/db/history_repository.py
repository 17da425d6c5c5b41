"""
Key-value backed WorkoutHistoryRepository.

Key layout::

    workout_history:{userId}:{workoutDay}:{YYYY-MM-DD}:{completedAt}

with ":" replaced by "_" inside workoutDay and completedAt. Including the
full completion timestamp keeps two completions of the same day distinct.
"""
import logging
from typing import List

from application.ports import KeyValueStore
from domain.converters import history_entry_from_record
from domain.models import WorkoutHistoryEntry
from domain.timestamps import parse_iso

logger = logging.getLogger(__name__)

HISTORY_PREFIX = "workout_history:"


def history_prefix(user_id: str) -> str:
    return f"{HISTORY_PREFIX}{user_id}:"


def history_key(user_id: str, workout_day: str, completed_at: str) -> str:
    """Build the unique storage key for one completion."""
    day_key = str(workout_day or "unknown").replace(":", "_")
    date_key = completed_at.split("T")[0]
    completed_at_key = completed_at.replace(":", "_")
    return f"{history_prefix(user_id)}{day_key}:{date_key}:{completed_at_key}"


def _completed_timestamp(entry: WorkoutHistoryEntry) -> float:
    parsed = parse_iso(entry.completed_at)
    return parsed.timestamp() if parsed else 0.0


class KVWorkoutHistoryRepository:
    """WorkoutHistoryRepository over a KeyValueStore."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def append(self, entry: WorkoutHistoryEntry) -> str:
        key = history_key(entry.user_id, entry.workout_day, entry.completed_at)
        self._store.set(key, entry.to_record())
        return key

    def list_for_user(self, user_id: str) -> List[WorkoutHistoryEntry]:
        entries = [
            entry
            for entry in (
                history_entry_from_record(raw)
                for raw in self._store.get_by_prefix(history_prefix(user_id))
            )
            if entry is not None
        ]
        entries.sort(key=_completed_timestamp, reverse=True)
        return entries
