"""
Application Use Cases for the Workout Tracker API.

This package contains application-level use cases that orchestrate domain logic
and coordinate between ports/adapters. Use cases are the entry points for
business operations and contain the application's workflow logic.

Architecture follows Clean Architecture / Hexagonal pattern:
- Use cases orchestrate domain objects and repository ports
- Dependencies (repositories, clock) are injected via constructors for testability
- Use cases return domain models or result dataclasses, not API responses

Usage:
    from application.use_cases import (
        StartWorkoutUseCase,
        LogExerciseUseCase,
        CompleteWorkoutUseCase,
    )

    use_case = StartWorkoutUseCase(session_repo, session_ttl=timedelta(hours=24))
    result = use_case.execute(user_id, "Monday", exercises)
"""

from application.use_cases.complete_workout import (
    CompleteWorkoutResult,
    CompleteWorkoutUseCase,
)
from application.use_cases.expire_sessions import (
    ExpireAbandonedSessionsUseCase,
    ExpireSessionsResult,
)
from application.use_cases.log_exercise import LogExerciseResult, LogExerciseUseCase
from application.use_cases.session_access import load_active_session
from application.use_cases.start_workout import StartWorkoutResult, StartWorkoutUseCase
from application.use_cases.user_info import (
    CorrectUserInfoEntryUseCase,
    GetUserInfoUseCase,
    ListUserInfoHistoryUseCase,
    SaveUserInfoResult,
    SaveUserInfoUseCase,
    ensure_user_info_history,
)
from application.use_cases.workout_history import (
    GetExerciseWeightsUseCase,
    GetStreakUseCase,
    GetWeekProgressUseCase,
    GetWorkoutHistoryUseCase,
)
from application.use_cases.workout_plan import (
    GetWorkoutPlanUseCase,
    SaveWorkoutPlanUseCase,
)

__all__ = [
    # Session lifecycle
    "StartWorkoutUseCase",
    "StartWorkoutResult",
    "LogExerciseUseCase",
    "LogExerciseResult",
    "CompleteWorkoutUseCase",
    "CompleteWorkoutResult",
    "ExpireAbandonedSessionsUseCase",
    "ExpireSessionsResult",
    "load_active_session",
    # History
    "GetWorkoutHistoryUseCase",
    "GetStreakUseCase",
    "GetWeekProgressUseCase",
    "GetExerciseWeightsUseCase",
    # User info
    "SaveUserInfoUseCase",
    "SaveUserInfoResult",
    "GetUserInfoUseCase",
    "ListUserInfoHistoryUseCase",
    "CorrectUserInfoEntryUseCase",
    "ensure_user_info_history",
    # Plan
    "SaveWorkoutPlanUseCase",
    "GetWorkoutPlanUseCase",
]
