"""
Key-value backed WorkoutPlanRepository.

Key layout: ``workout_plan:{userId}``.
"""
from typing import Optional

from application.ports import KeyValueStore
from domain.converters import plan_from_record
from domain.models import WorkoutPlanRecord


def plan_key(user_id: str) -> str:
    return f"workout_plan:{user_id}"


class KVWorkoutPlanRepository:
    """WorkoutPlanRepository over a KeyValueStore."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def get(self, user_id: str) -> Optional[WorkoutPlanRecord]:
        return plan_from_record(self._store.get(plan_key(user_id)))

    def save(self, record: WorkoutPlanRecord) -> None:
        self._store.set(plan_key(record.user_id), record.to_record())
