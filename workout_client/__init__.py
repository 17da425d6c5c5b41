"""
Client-side engine for one active workout.

- api_client: async httpx client for the Workout Tracker API
- rest_timer: countdown with wall-clock rest accounting
- session_controller: state machine driving start, log and complete
- notifications: best-effort "rest complete" notifiers
"""

from workout_client.api_client import (
    ApiUnavailableError,
    AuthenticationError,
    CompletionTotals,
    StartedSession,
    WorkoutApiClient,
    WorkoutApiError,
    WorkoutClientError,
)
from workout_client.notifications import CallbackNotifier, LoggingNotifier, Notifier
from workout_client.rest_timer import RestTimer
from workout_client.session_controller import (
    ActiveWorkoutController,
    ExerciseDraft,
    SessionState,
    SessionStatus,
    WorkoutCompletionSummary,
)

__all__ = [
    "WorkoutApiClient",
    "WorkoutClientError",
    "WorkoutApiError",
    "AuthenticationError",
    "ApiUnavailableError",
    "StartedSession",
    "CompletionTotals",
    "Notifier",
    "LoggingNotifier",
    "CallbackNotifier",
    "RestTimer",
    "ActiveWorkoutController",
    "SessionState",
    "SessionStatus",
    "ExerciseDraft",
    "WorkoutCompletionSummary",
]
