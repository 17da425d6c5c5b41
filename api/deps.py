"""
FastAPI Dependency Providers for the Workout Tracker API.

This module provides FastAPI dependency injection functions that return
interface types (Protocols) rather than concrete implementations. This
enables clean separation of concerns and easy testing with in-memory fakes.

Architecture:
- Settings and Supabase client are cached per-process (lru_cache)
- The key-value store and repositories are created per-request
- Use case providers wire repositories, the session TTL and the clock
- Auth providers wrap backend.auth

Usage in routers:
    from api.deps import get_current_user, get_start_workout_use_case

    @router.post("/start-workout")
    def start_workout(
        user_id: str = Depends(get_current_user),
        use_case: StartWorkoutUseCase = Depends(get_start_workout_use_case),
    ):
        ...

Testing:
    # Swap the storage backend for every repository at once
    app.dependency_overrides[get_kv_store] = lambda: FakeKeyValueStore()
    app.dependency_overrides[get_current_user] = lambda: "user-123"
"""

from functools import lru_cache
from typing import Optional

from fastapi import Depends, Header, HTTPException
from supabase import Client, create_client

# Protocol types (interfaces)
from application.ports import (
    ExerciseWeightRepository,
    KeyValueStore,
    UserInfoRepository,
    WorkoutHistoryRepository,
    WorkoutPlanRepository,
    WorkoutSessionRepository,
)

# Concrete implementations
from infrastructure import (
    KVExerciseWeightRepository,
    KVUserInfoRepository,
    KVWorkoutHistoryRepository,
    KVWorkoutPlanRepository,
    KVWorkoutSessionRepository,
    SupabaseKeyValueStore,
)

from application.use_cases import (
    CompleteWorkoutUseCase,
    CorrectUserInfoEntryUseCase,
    GetExerciseWeightsUseCase,
    GetStreakUseCase,
    GetUserInfoUseCase,
    GetWeekProgressUseCase,
    GetWorkoutHistoryUseCase,
    GetWorkoutPlanUseCase,
    ListUserInfoHistoryUseCase,
    LogExerciseUseCase,
    SaveUserInfoUseCase,
    SaveWorkoutPlanUseCase,
    StartWorkoutUseCase,
)
from backend.auth import AuthenticatedUser, authenticate
from backend.settings import Settings, get_settings as _get_settings


# =============================================================================
# Settings Provider
# =============================================================================


def get_settings() -> Settings:
    """
    Get application settings.

    Returns cached Settings instance from backend.settings.
    Use this as a FastAPI dependency for settings access.

    Returns:
        Settings: Application settings instance
    """
    return _get_settings()


# =============================================================================
# Supabase Client Provider
# =============================================================================


@lru_cache
def get_supabase_client() -> Optional[Client]:
    """
    Get Supabase client instance (cached).

    Creates a Supabase client using credentials from settings.
    Returns None if credentials are not configured.

    Returns:
        Client: Supabase client instance, or None if not configured
    """
    settings = _get_settings()

    if not settings.supabase_url or not settings.supabase_key:
        return None

    return create_client(settings.supabase_url, settings.supabase_key)


def get_supabase_client_required() -> Client:
    """
    Get Supabase client instance, raising if not configured.

    Raises:
        HTTPException: 503 if Supabase is not configured
    """
    client = get_supabase_client()
    if client is None:
        raise HTTPException(
            status_code=503,
            detail="Database not available. Supabase credentials not configured.",
        )
    return client


# =============================================================================
# Storage and Repository Providers
# =============================================================================


def get_kv_store(
    client: Client = Depends(get_supabase_client_required),
    settings: Settings = Depends(get_settings),
) -> KeyValueStore:
    """
    Get the KeyValueStore every repository is built on.

    Override this single provider to run the whole API against a fake store.
    """
    return SupabaseKeyValueStore(client, table=settings.kv_table)


def get_session_repo(store: KeyValueStore = Depends(get_kv_store)) -> WorkoutSessionRepository:
    return KVWorkoutSessionRepository(store)


def get_history_repo(store: KeyValueStore = Depends(get_kv_store)) -> WorkoutHistoryRepository:
    return KVWorkoutHistoryRepository(store)


def get_weight_repo(store: KeyValueStore = Depends(get_kv_store)) -> ExerciseWeightRepository:
    return KVExerciseWeightRepository(store)


def get_user_info_repo(store: KeyValueStore = Depends(get_kv_store)) -> UserInfoRepository:
    return KVUserInfoRepository(store)


def get_plan_repo(store: KeyValueStore = Depends(get_kv_store)) -> WorkoutPlanRepository:
    return KVWorkoutPlanRepository(store)


# =============================================================================
# Use Case Providers
# =============================================================================


def get_start_workout_use_case(
    session_repo: WorkoutSessionRepository = Depends(get_session_repo),
    settings: Settings = Depends(get_settings),
) -> StartWorkoutUseCase:
    return StartWorkoutUseCase(session_repo, session_ttl=settings.session_ttl)


def get_log_exercise_use_case(
    session_repo: WorkoutSessionRepository = Depends(get_session_repo),
    weight_repo: ExerciseWeightRepository = Depends(get_weight_repo),
    settings: Settings = Depends(get_settings),
) -> LogExerciseUseCase:
    return LogExerciseUseCase(session_repo, weight_repo, session_ttl=settings.session_ttl)


def get_complete_workout_use_case(
    session_repo: WorkoutSessionRepository = Depends(get_session_repo),
    history_repo: WorkoutHistoryRepository = Depends(get_history_repo),
    settings: Settings = Depends(get_settings),
) -> CompleteWorkoutUseCase:
    return CompleteWorkoutUseCase(session_repo, history_repo, session_ttl=settings.session_ttl)


def get_workout_history_use_case(
    history_repo: WorkoutHistoryRepository = Depends(get_history_repo),
) -> GetWorkoutHistoryUseCase:
    return GetWorkoutHistoryUseCase(history_repo)


def get_streak_use_case(
    history_repo: WorkoutHistoryRepository = Depends(get_history_repo),
) -> GetStreakUseCase:
    return GetStreakUseCase(history_repo)


def get_week_progress_use_case(
    history_repo: WorkoutHistoryRepository = Depends(get_history_repo),
) -> GetWeekProgressUseCase:
    return GetWeekProgressUseCase(history_repo)


def get_exercise_weights_use_case(
    weight_repo: ExerciseWeightRepository = Depends(get_weight_repo),
) -> GetExerciseWeightsUseCase:
    return GetExerciseWeightsUseCase(weight_repo)


def get_save_user_info_use_case(
    repo: UserInfoRepository = Depends(get_user_info_repo),
) -> SaveUserInfoUseCase:
    return SaveUserInfoUseCase(repo)


def get_user_info_use_case(
    repo: UserInfoRepository = Depends(get_user_info_repo),
) -> GetUserInfoUseCase:
    return GetUserInfoUseCase(repo)


def get_user_info_history_use_case(
    repo: UserInfoRepository = Depends(get_user_info_repo),
) -> ListUserInfoHistoryUseCase:
    return ListUserInfoHistoryUseCase(repo)


def get_correct_user_info_use_case(
    repo: UserInfoRepository = Depends(get_user_info_repo),
) -> CorrectUserInfoEntryUseCase:
    return CorrectUserInfoEntryUseCase(repo)


def get_save_workout_plan_use_case(
    plan_repo: WorkoutPlanRepository = Depends(get_plan_repo),
) -> SaveWorkoutPlanUseCase:
    return SaveWorkoutPlanUseCase(plan_repo)


def get_workout_plan_use_case(
    plan_repo: WorkoutPlanRepository = Depends(get_plan_repo),
) -> GetWorkoutPlanUseCase:
    return GetWorkoutPlanUseCase(plan_repo)


# =============================================================================
# Authentication Providers
# =============================================================================


def get_authenticated_user(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> AuthenticatedUser:
    """
    Resolve the caller from the ``Authorization: Bearer <token>`` header.

    The Supabase client is only needed (and only created) when no JWT secret
    is configured for local verification.

    Raises:
        HTTPException: 401 if authentication fails
    """
    client = None if settings.supabase_jwt_secret else get_supabase_client()
    return authenticate(authorization, settings.supabase_jwt_secret, client)


def get_current_user(
    user: AuthenticatedUser = Depends(get_authenticated_user),
) -> str:
    """
    Get the current authenticated user ID.

    Returns:
        str: Supabase user ID (JWT ``sub``)
    """
    return user.user_id


# =============================================================================
# Exports
# =============================================================================

__all__ = [
    # Settings
    "get_settings",
    # Database
    "get_supabase_client",
    "get_supabase_client_required",
    "get_kv_store",
    # Repositories
    "get_session_repo",
    "get_history_repo",
    "get_weight_repo",
    "get_user_info_repo",
    "get_plan_repo",
    # Use cases
    "get_start_workout_use_case",
    "get_log_exercise_use_case",
    "get_complete_workout_use_case",
    "get_workout_history_use_case",
    "get_streak_use_case",
    "get_week_progress_use_case",
    "get_exercise_weights_use_case",
    "get_save_user_info_use_case",
    "get_user_info_use_case",
    "get_user_info_history_use_case",
    "get_correct_user_info_use_case",
    "get_save_workout_plan_use_case",
    "get_workout_plan_use_case",
    # Authentication
    "get_authenticated_user",
    "get_current_user",
]
