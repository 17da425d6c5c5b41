"""
Router package for the Workout Tracker API.

This package contains all API routers organized by domain:
- health: Liveness and token check endpoints
- workouts: Active session lifecycle (start, log exercise, complete)
- history: Completed workouts, streak, week progress, weight series
- user_info: Body metrics snapshots and corrections
- workout_plan: Weekly plan
"""

from api.routers.health import router as health_router
from api.routers.workouts import router as workouts_router
from api.routers.history import router as history_router
from api.routers.user_info import router as user_info_router
from api.routers.workout_plan import router as workout_plan_router

__all__ = [
    "health_router",
    "workouts_router",
    "history_router",
    "user_info_router",
    "workout_plan_router",
]
