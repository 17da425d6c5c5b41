"""
Workout plan use cases.

A user has at most one plan; saving overwrites it.
"""

import logging
from datetime import datetime
from typing import Any, Callable, List, Optional

from pydantic import ValidationError as PydanticValidationError

from application.exceptions import ValidationError
from application.ports import WorkoutPlanRepository
from domain.models import WorkoutPlanRecord
from domain.timestamps import to_iso, utc_now

logger = logging.getLogger(__name__)


def _first_error_message(error: PydanticValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    message = str(first.get("msg", "Invalid workout plan"))
    message = message.removeprefix("Value error, ")
    return f"{location}: {message}" if location else message


class SaveWorkoutPlanUseCase:
    """
    Validate and store the weekly plan.

    Requires at least one day, unique day names, and exercises that satisfy
    the Exercise constraints (sets > 0, minReps <= maxReps, restTime > 0).
    """

    def __init__(
        self,
        plan_repo: WorkoutPlanRepository,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self._plan_repo = plan_repo
        self._clock = clock

    def execute(self, user_id: str, workout_plan: List[Any]) -> WorkoutPlanRecord:
        if not workout_plan:
            raise ValidationError("workoutPlan must contain at least one day")

        try:
            record = WorkoutPlanRecord.model_validate({
                "workoutPlan": workout_plan,
                "userId": user_id,
                "createdAt": to_iso(self._clock()),
            })
        except PydanticValidationError as e:
            raise ValidationError(_first_error_message(e)) from e

        self._plan_repo.save(record)
        logger.info(f"Workout plan saved for user {user_id}: {len(record.workout_plan)} days")
        return record


class GetWorkoutPlanUseCase:
    def __init__(self, plan_repo: WorkoutPlanRepository) -> None:
        self._plan_repo = plan_repo

    def execute(self, user_id: str) -> Optional[WorkoutPlanRecord]:
        return self._plan_repo.get(user_id)
