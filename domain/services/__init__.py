"""
Pure domain services: coercion, aggregation and streak/week analytics.
"""

from domain.services.workout_stats import (
    DAYS_OF_WEEK,
    WeekProgress,
    coerce_rest_seconds,
    coerce_weight,
    compute_streak,
    compute_week_progress,
    elapsed_seconds,
    total_rest_seconds,
)

__all__ = [
    "DAYS_OF_WEEK",
    "WeekProgress",
    "coerce_rest_seconds",
    "coerce_weight",
    "compute_streak",
    "compute_week_progress",
    "elapsed_seconds",
    "total_rest_seconds",
]
