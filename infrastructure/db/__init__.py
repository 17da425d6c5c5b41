"""
Infrastructure Database Layer.

This package provides key-value backed implementations of the repository
interfaces defined in application.ports, plus the Supabase implementation of
the KeyValueStore port they are built on.

Usage:
    from supabase import create_client
    from infrastructure.db import (
        SupabaseKeyValueStore,
        KVWorkoutSessionRepository,
        KVWorkoutHistoryRepository,
    )

    # Create Supabase client
    client = create_client(SUPABASE_URL, SUPABASE_KEY)

    # Instantiate repositories over the shared store
    store = SupabaseKeyValueStore(client, table="kv_store")
    session_repo = KVWorkoutSessionRepository(store)
    history_repo = KVWorkoutHistoryRepository(store)
"""

from infrastructure.db.kv_store import SupabaseKeyValueStore
from infrastructure.db.session_repository import KVWorkoutSessionRepository
from infrastructure.db.history_repository import KVWorkoutHistoryRepository
from infrastructure.db.exercise_weight_repository import KVExerciseWeightRepository
from infrastructure.db.user_info_repository import KVUserInfoRepository
from infrastructure.db.workout_plan_repository import KVWorkoutPlanRepository

__all__ = [
    "SupabaseKeyValueStore",
    "KVWorkoutSessionRepository",
    "KVWorkoutHistoryRepository",
    "KVExerciseWeightRepository",
    "KVUserInfoRepository",
    "KVWorkoutPlanRepository",
]
