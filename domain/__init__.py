"""
Domain layer for the Workout Tracker API.

This package contains pure domain models and services that are independent of
infrastructure concerns (key-value store, HTTP API, identity provider).
"""

from domain.models import (
    Exercise,
    ExerciseLog,
    LatestProfile,
    UserInfoHistoryEntry,
    UserInfoSnapshot,
    WeightHistoryPoint,
    WorkoutDay,
    WorkoutHistoryEntry,
    WorkoutPlanRecord,
    WorkoutSession,
)

__all__ = [
    "Exercise",
    "ExerciseLog",
    "LatestProfile",
    "UserInfoHistoryEntry",
    "UserInfoSnapshot",
    "WeightHistoryPoint",
    "WorkoutDay",
    "WorkoutHistoryEntry",
    "WorkoutPlanRecord",
    "WorkoutSession",
]
