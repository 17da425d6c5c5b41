"""
Workout statistics: input coercion, completion totals, streaks and weekly
progress.

All functions are pure; callers pass in "now"/"today" so results are
deterministic under test.
"""

import math
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone, tzinfo
from typing import Any, Iterable, List, Optional

from domain.timestamps import parse_iso, round_half_up

DAYS_OF_WEEK = [
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
]


def _finite_or_zero(value: Any) -> float:
    if isinstance(value, bool) or value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    return number if math.isfinite(number) else 0.0


def coerce_weight(value: Any) -> float:
    """Weight as a non-negative float; unparsable or negative input becomes 0."""
    return max(0.0, _finite_or_zero(value))


def coerce_rest_seconds(value: Any) -> int:
    """Rest seconds as a non-negative int; unparsable or negative input becomes 0."""
    return max(0, round_half_up(_finite_or_zero(value)))


def elapsed_seconds(started_at: Optional[str], ended_at: str) -> int:
    """
    Whole seconds between two ISO timestamps, rounded half-up, floored at 0.

    Returns 0 when ``started_at`` is missing or unparsable.
    """
    start = parse_iso(started_at)
    end = parse_iso(ended_at)
    if start is None or end is None:
        return 0
    return max(0, round_half_up((end - start).total_seconds()))


def total_rest_seconds(logs: Iterable[Any]) -> int:
    """Sum of rest taken across exercise logs (models or raw dicts)."""
    total = 0
    for log in logs:
        if isinstance(log, dict):
            value = log.get("restTakenSeconds", log.get("rest_taken_seconds"))
        else:
            value = getattr(log, "rest_taken_seconds", 0)
        total += coerce_rest_seconds(value)
    return total


def compute_streak(completed_ats: Iterable[str], today: date) -> int:
    """
    Count consecutive calendar days, ending today, with at least one workout.

    A day without a workout ends the run; if nothing was completed today the
    streak is 0.

    Args:
        completed_ats: ISO completion timestamps; the date part is used as-is
        today: The calendar date considered "today"
    """
    dates = {value.split("T")[0] for value in completed_ats if value}
    streak = 0
    expected = today
    while expected.isoformat() in dates:
        streak += 1
        expected -= timedelta(days=1)
    return streak


@dataclass
class WeekProgress:
    """Which plan days were completed this week (Monday-based) and today."""

    today_workout_day: str
    completed_days_this_week: List[str] = field(default_factory=list)
    completed_days_today: List[str] = field(default_factory=list)


def compute_week_progress(
    entries: Iterable[Any],
    now: datetime,
    tz: tzinfo = timezone.utc,
) -> WeekProgress:
    """
    Summarize history entries for the current week.

    Args:
        entries: Objects with ``completed_at`` and ``workout_day`` attributes
        now: Current instant
        tz: Timezone whose calendar defines "today" and the week boundaries
    """
    local_now = now.astimezone(tz)
    today = local_now.date()
    week_start = datetime.combine(
        today - timedelta(days=today.weekday()), datetime.min.time(), tzinfo=tz
    )
    week_end = week_start + timedelta(days=7)

    this_week = set()
    completed_today = set()
    for entry in entries:
        completed = parse_iso(getattr(entry, "completed_at", None))
        workout_day = getattr(entry, "workout_day", None)
        if completed is None or not workout_day:
            continue
        if week_start <= completed < week_end:
            this_week.add(workout_day)
        if completed.astimezone(tz).date() == today:
            completed_today.add(workout_day)

    return WeekProgress(
        today_workout_day=DAYS_OF_WEEK[today.weekday()],
        completed_days_this_week=sorted(this_week),
        completed_days_today=sorted(completed_today),
    )
