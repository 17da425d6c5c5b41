"""
Read-side use cases over completed workouts.

History entries are listed newest first; streak and week progress are
derived from their completion timestamps using the UTC calendar.
"""

import logging
from datetime import datetime
from typing import Callable, List

from application.exceptions import ValidationError
from application.ports import ExerciseWeightRepository, WorkoutHistoryRepository
from domain.models import WeightHistoryPoint, WorkoutHistoryEntry
from domain.services import WeekProgress, compute_streak, compute_week_progress
from domain.timestamps import utc_now

logger = logging.getLogger(__name__)


class GetWorkoutHistoryUseCase:
    def __init__(self, history_repo: WorkoutHistoryRepository) -> None:
        self._history_repo = history_repo

    def execute(self, user_id: str) -> List[WorkoutHistoryEntry]:
        return self._history_repo.list_for_user(user_id)


class GetStreakUseCase:
    """
    Count consecutive days, ending today, with at least one completed workout.

    Multiple workouts on the same day count once.
    """

    def __init__(
        self,
        history_repo: WorkoutHistoryRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._history_repo = history_repo
        self._clock = clock

    def execute(self, user_id: str) -> int:
        entries = self._history_repo.list_for_user(user_id)
        streak = compute_streak(
            (entry.completed_at for entry in entries),
            self._clock().date(),
        )
        logger.debug(f"Streak for {user_id}: {streak} ({len(entries)} entries)")
        return streak


class GetWeekProgressUseCase:
    """Which plan days were completed this week (Monday start) and today."""

    def __init__(
        self,
        history_repo: WorkoutHistoryRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._history_repo = history_repo
        self._clock = clock

    def execute(self, user_id: str) -> WeekProgress:
        return compute_week_progress(
            self._history_repo.list_for_user(user_id),
            self._clock(),
        )


class GetExerciseWeightsUseCase:
    def __init__(self, weight_repo: ExerciseWeightRepository) -> None:
        self._weight_repo = weight_repo

    def execute(self, user_id: str, exercise_name: str) -> List[WeightHistoryPoint]:
        if not exercise_name or not exercise_name.strip():
            raise ValidationError("Exercise name is required")
        return self._weight_repo.get_history(user_id, exercise_name)
