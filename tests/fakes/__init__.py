"""
Fake Implementations for Testing.

This package provides in-memory fakes for fast, isolated testing. No
database or external dependencies required.

Features:
- FakeKeyValueStore implements the KeyValueStore port, so the real
  repositories run against it unchanged
- FailingKeyValueStore injects StorageError for chosen operations/keys
- FakeClock drives use cases and the rest timer deterministically
- Factory functions for common test data

Usage:
    from tests.fakes import FakeKeyValueStore, make_exercises

    store = FakeKeyValueStore()
    repo = KVWorkoutSessionRepository(store)
"""
from typing import Any, Dict, List, Optional

from domain.models import Exercise, WorkoutSession

from tests.fakes.clock import FakeClock
from tests.fakes.key_value_store import FailingKeyValueStore, FakeKeyValueStore


TEST_USER_ID = "user-123"
OTHER_USER_ID = "user-999"


def make_exercise(
    name: str = "Bench Press",
    sets: int = 3,
    min_reps: int = 8,
    max_reps: int = 12,
    rest_time: int = 90,
) -> Exercise:
    return Exercise(
        name=name,
        sets=sets,
        min_reps=min_reps,
        max_reps=max_reps,
        rest_time=rest_time,
    )


def make_exercises() -> List[Exercise]:
    """Two three-set exercises, the standard "Monday" fixture."""
    return [
        make_exercise("Bench Press", rest_time=90),
        make_exercise("Squat", min_reps=5, max_reps=8, rest_time=120),
    ]


def make_session(
    user_id: str = TEST_USER_ID,
    started_at: str = "2026-03-02T09:00:00.000Z",
    workout_day: str = "Monday",
    exercises: Optional[List[Exercise]] = None,
    completed_exercises: Optional[List[Dict[str, Any]]] = None,
    session_id: Optional[str] = None,
) -> WorkoutSession:
    return WorkoutSession(
        session_id=session_id or f"{user_id}_1772442000000",
        user_id=user_id,
        workout_day=workout_day,
        exercises=exercises if exercises is not None else make_exercises(),
        started_at=started_at,
        completed_exercises=completed_exercises or [],
    )


def make_history_record(
    completed_at: str,
    workout_day: str = "Monday",
    user_id: str = TEST_USER_ID,
    **overrides: Any,
) -> Dict[str, Any]:
    """Raw stored history record (current schema)."""
    record = {
        "sessionId": f"{user_id}_0",
        "userId": user_id,
        "workoutDay": workout_day,
        "exercises": [],
        "startedAt": completed_at,
        "completedExercises": [],
        "completedAt": completed_at,
        "totalWorkoutSeconds": 0,
        "totalRestSeconds": 0,
        "schemaVersion": 1,
    }
    record.update(overrides)
    return record


__all__ = [
    "FakeKeyValueStore",
    "FailingKeyValueStore",
    "FakeClock",
    "TEST_USER_ID",
    "OTHER_USER_ID",
    "make_exercise",
    "make_exercises",
    "make_session",
    "make_history_record",
]
