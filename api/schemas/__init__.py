"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- workouts: Active session lifecycle (start, log, complete)
- history: Completed workouts, streak, week progress, weight series
- user_info: Body metrics snapshots
- workout_plan: Weekly plan
"""

from api.schemas.history import (
    ExerciseWeightsResponse,
    StreakResponse,
    WeekProgressResponse,
    WorkoutHistoryResponse,
)
from api.schemas.user_info import (
    UserInfoEntryResponse,
    UserInfoHistoryResponse,
    UserInfoResponse,
)
from api.schemas.workout_plan import (
    SaveWorkoutPlanRequest,
    SaveWorkoutPlanResponse,
    WorkoutPlanResponse,
)
from api.schemas.workouts import (
    CompleteWorkoutRequest,
    CompleteWorkoutResponse,
    LogExerciseRequest,
    LogExerciseResponse,
    StartWorkoutRequest,
    StartWorkoutResponse,
)

__all__ = [
    "StartWorkoutRequest",
    "StartWorkoutResponse",
    "LogExerciseRequest",
    "LogExerciseResponse",
    "CompleteWorkoutRequest",
    "CompleteWorkoutResponse",
    "WorkoutHistoryResponse",
    "StreakResponse",
    "WeekProgressResponse",
    "ExerciseWeightsResponse",
    "UserInfoResponse",
    "UserInfoEntryResponse",
    "UserInfoHistoryResponse",
    "SaveWorkoutPlanRequest",
    "SaveWorkoutPlanResponse",
    "WorkoutPlanResponse",
]
