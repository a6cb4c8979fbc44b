"""Weekly schedule allocation from the athlete's preferred training days.

The earliest preferred day gets the long ride (40% of weekly hours),
then threshold (25%), strength (20%) and recovery (15%). Any further
preferred days and all other weekdays are rest days.
"""

from __future__ import annotations

import logging
from typing import Iterable

from training_engine.math.rounding import round_half_up
from training_engine.models.enums import SCHEDULE_SLOTS, Weekday
from training_engine.models.program import RestDay, Workout

logger = logging.getLogger(__name__)


def normalize_training_days(days: Iterable[int]) -> list[Weekday]:
    """Sorted, de-duplicated weekdays; values outside 1-7 are dropped."""
    valid: set[Weekday] = set()
    for day in days:
        try:
            valid.add(Weekday(int(day)))
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid training day %r", day)
    return sorted(valid)


def build_weekly_schedule(
    preferred_days: Iterable[int], weekly_hours: float
) -> dict[Weekday, Workout | RestDay]:
    """Allocate workouts to preferred days.

    Args:
        preferred_days: Weekday numbers (1 = Monday ... 7 = Sunday).
        weekly_hours: Training hours available per week.

    Returns:
        Mapping for all seven weekdays, Monday first.
    """
    schedule: dict[Weekday, Workout | RestDay] = {day: RestDay() for day in Weekday}

    for day, (workout_type, name, share, intensity_factor) in zip(
        normalize_training_days(preferred_days), SCHEDULE_SLOTS
    ):
        minutes = weekly_hours * share * 60
        schedule[day] = Workout(
            name=name,
            type=workout_type,
            duration_min=round_half_up(minutes),
            tss=round_half_up(minutes * intensity_factor),
        )
    return schedule
