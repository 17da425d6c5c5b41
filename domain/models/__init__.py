"""
Domain models for the Workout Tracker API.

These models represent the core business concepts:
- WorkoutDay / Exercise: the user's weekly plan
- WorkoutSession / ExerciseLog: one in-progress workout
- WorkoutHistoryEntry: an immutable record of a completed workout
- WeightHistoryPoint: per-exercise weight trend
- UserInfoSnapshot / UserInfoHistoryEntry / LatestProfile: body metrics

All persisted models serialize with camelCase keys via ``to_record()`` and
carry a ``schemaVersion`` tag.

Usage:
    >>> from domain.models import Exercise, WorkoutDay

    >>> day = WorkoutDay(
    ...     day="Monday",
    ...     exercises=[Exercise(name="Squat", sets=3, min_reps=8, max_reps=12, rest_time=90)],
    ... )
    >>> day.to_record()["exercises"][0]["restTime"]
    90
"""

from domain.models.base import SCHEMA_VERSION, CamelModel
from domain.models.history import WorkoutHistoryEntry
from domain.models.plan import Exercise, WorkoutDay, WorkoutPlanRecord
from domain.models.session import ExerciseLog, WorkoutSession
from domain.models.user_info import (
    InvalidUserInfoError,
    LatestProfile,
    UserInfoHistoryEntry,
    UserInfoSnapshot,
    parse_user_info_payload,
)
from domain.models.weights import WeightHistory, WeightHistoryPoint

__all__ = [
    "SCHEMA_VERSION",
    "CamelModel",
    "Exercise",
    "WorkoutDay",
    "WorkoutPlanRecord",
    "ExerciseLog",
    "WorkoutSession",
    "WorkoutHistoryEntry",
    "WeightHistory",
    "WeightHistoryPoint",
    "InvalidUserInfoError",
    "LatestProfile",
    "UserInfoHistoryEntry",
    "UserInfoSnapshot",
    "parse_user_info_payload",
]
