"""
Repository Interfaces (Ports) for the Workout Tracker API.

This package defines abstract interfaces that decouple domain logic from
infrastructure (the hosted key-value store). Implementations are provided
in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the application needs)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutSessionRepository

    class StartWorkoutUseCase:
        def __init__(self, session_repo: WorkoutSessionRepository):
            self._session_repo = session_repo
"""

# Storage primitive
from application.ports.key_value_store import KeyValueStore

# Workout lifecycle
from application.ports.workout_session_repository import WorkoutSessionRepository
from application.ports.workout_history_repository import WorkoutHistoryRepository
from application.ports.exercise_weight_repository import ExerciseWeightRepository

# Plan and profile
from application.ports.workout_plan_repository import WorkoutPlanRepository
from application.ports.user_info_repository import UserInfoRepository

__all__ = [
    "KeyValueStore",
    "WorkoutSessionRepository",
    "WorkoutHistoryRepository",
    "ExerciseWeightRepository",
    "WorkoutPlanRepository",
    "UserInfoRepository",
]
