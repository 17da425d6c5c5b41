"""
Key-value backed ExerciseWeightRepository.

Key layout: ``exercise_weights:{userId}:{exerciseName}`` holding
``{"history": [{"weight": ..., "date": ...}, ...], "schemaVersion": 1}``.
Appending is read-modify-write and therefore last-write-wins under
concurrent logs of the same exercise.
"""
from typing import List

from application.ports import KeyValueStore
from domain.converters import weight_history_from_record
from domain.models import WeightHistoryPoint


def weights_key(user_id: str, exercise_name: str) -> str:
    return f"exercise_weights:{user_id}:{exercise_name}"


class KVExerciseWeightRepository:
    """ExerciseWeightRepository over a KeyValueStore."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def append(self, user_id: str, exercise_name: str, point: WeightHistoryPoint) -> None:
        key = weights_key(user_id, exercise_name)
        series = weight_history_from_record(self._store.get(key))
        series.history.append(point)
        self._store.set(key, series.to_record())

    def get_history(self, user_id: str, exercise_name: str) -> List[WeightHistoryPoint]:
        return weight_history_from_record(
            self._store.get(weights_key(user_id, exercise_name))
        ).history
