"""
Rest timer for an active workout.

One countdown at a time, tied to the exercise being rested for. The
per-second countdown is only for display: the rest actually recorded is
the wall-clock time between ``start`` and ``finalize``, so slow ticks or a
suspended event loop never undercount rest.
"""

import asyncio
import logging
import time
from typing import Callable, Optional

from domain.timestamps import round_half_up
from workout_client.notifications import (
    REST_COMPLETE_BODY,
    REST_COMPLETE_TITLE,
    LoggingNotifier,
    Notifier,
)

logger = logging.getLogger(__name__)


class RestTimer:
    """
    Countdown plus rest accounting.

    Accumulates two figures from each finalized rest period:
    - ``total_rest_seconds`` across the whole workout
    - per-exercise rest, read with ``rest_for`` and cleared with
      ``clear_exercise`` once that exercise has been logged

    Usage:
        >>> timer = RestTimer()
        >>> timer.start(exercise_index=0, duration_seconds=90)
        >>> elapsed = timer.skip()
    """

    def __init__(
        self,
        notifier: Optional[Notifier] = None,
        clock: Callable[[], float] = time.time,
    ):
        self._notifier = notifier if notifier is not None else LoggingNotifier()
        self._clock = clock
        self._started_at: Optional[float] = None
        self.exercise_index: Optional[int] = None
        self.duration_seconds = 0
        self.remaining_seconds = 0
        self.total_rest_seconds = 0
        self._per_exercise: dict[int, int] = {}

    @property
    def is_running(self) -> bool:
        return self._started_at is not None

    def rest_for(self, exercise_index: int) -> int:
        """Rest accumulated for an exercise since it was last cleared."""
        return self._per_exercise.get(exercise_index, 0)

    def clear_exercise(self, exercise_index: int) -> None:
        self._per_exercise.pop(exercise_index, None)

    def start(self, exercise_index: int, duration_seconds: int) -> None:
        """
        Start a countdown for ``exercise_index``.

        A countdown that is still running is finalized first, so its rest
        is never lost.
        """
        if self.is_running:
            self.finalize()
        self.exercise_index = exercise_index
        self.duration_seconds = max(0, int(duration_seconds))
        self.remaining_seconds = self.duration_seconds
        self._started_at = self._clock()
        logger.debug(f"Rest started for exercise {exercise_index}: {self.duration_seconds}s")

    def tick(self) -> int:
        """
        Advance the visible countdown by one second.

        At zero the rest is finalized and a notification is sent.

        Returns:
            Seconds remaining (0 when not running)
        """
        if not self.is_running:
            return 0
        self.remaining_seconds = max(self.remaining_seconds - 1, 0)
        if self.remaining_seconds == 0:
            self.finalize()
            self._notify()
        return self.remaining_seconds

    def finalize(self) -> int:
        """
        Record the rest taken since ``start``.

        elapsed = wall-clock seconds since start, rounded half-up, floored
        at 0. Calling it again without a new ``start`` records nothing.

        Returns:
            Seconds recorded by this call
        """
        if self._started_at is None:
            return 0

        elapsed = max(0, round_half_up(self._clock() - self._started_at))
        self._started_at = None
        self.remaining_seconds = 0

        self.total_rest_seconds += elapsed
        if self.exercise_index is not None:
            self._per_exercise[self.exercise_index] = self.rest_for(self.exercise_index) + elapsed
        logger.debug(f"Rest finalized for exercise {self.exercise_index}: {elapsed}s")
        return elapsed

    def skip(self) -> int:
        """End the rest early. Same accounting as ``finalize``, no notification."""
        return self.finalize()

    async def run(self, interval: float = 1.0) -> None:
        """Drive ``tick`` every ``interval`` seconds until the countdown ends."""
        while self.is_running:
            await asyncio.sleep(interval)
            if self.is_running:
                self.tick()

    def _notify(self) -> None:
        try:
            self._notifier.notify(REST_COMPLETE_TITLE, REST_COMPLETE_BODY)
        except Exception as e:
            logger.warning(f"Rest notification failed: {e}")
