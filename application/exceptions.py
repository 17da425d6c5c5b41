"""
Application-layer exceptions.

These exceptions are used across application and infrastructure layers and
are translated to ``{"error": message}`` HTTP responses by the app factory.
"""


class WorkoutTrackerError(Exception):
    """Base class for errors surfaced to API callers."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(WorkoutTrackerError):
    """Request data failed a business rule (bad numbers, wrong set count)."""

    status_code = 400


class SessionNotFoundError(WorkoutTrackerError):
    """The workout session does not exist, expired, or belongs to another user."""

    status_code = 404


class HistoryEntryNotFoundError(WorkoutTrackerError):
    """The requested body-metrics history entry does not exist."""

    status_code = 404


class SessionConflictError(WorkoutTrackerError):
    """The session already holds a log for every planned exercise."""

    status_code = 409


class StorageError(WorkoutTrackerError):
    """The key-value store failed or is unreachable."""

    status_code = 500
