"""
Infrastructure Layer for the Workout Tracker API.

This package contains concrete implementations of repository interfaces:
- db/: Supabase key-value store and the repositories built on it
"""

# Re-export database repositories for convenient access
from infrastructure.db import (
    SupabaseKeyValueStore,
    KVWorkoutSessionRepository,
    KVWorkoutHistoryRepository,
    KVExerciseWeightRepository,
    KVUserInfoRepository,
    KVWorkoutPlanRepository,
)

__all__ = [
    "SupabaseKeyValueStore",
    "KVWorkoutSessionRepository",
    "KVWorkoutHistoryRepository",
    "KVExerciseWeightRepository",
    "KVUserInfoRepository",
    "KVWorkoutPlanRepository",
]
