"""Activity records and the rolling 7-day windows built from them."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime


@dataclass(frozen=True)
class Activity:
    """A single recorded ride, as delivered by the activity feed.

    Optional measurements are None when the device did not record them;
    the engine treats missing values as zero.
    """

    date: datetime
    duration_seconds: float = 0.0
    distance_km: float | None = None
    average_speed_kmh: float | None = None
    heart_rate_avg: float | None = None
    intensity: float | None = None  # 0-10 perceived effort
    elevation_gain_m: float | None = None


@dataclass(frozen=True)
class ActivityWindow:
    """Aggregates for one rolling 7-day window."""

    activity_count: int = 0
    mean_heart_rate: float = 0.0
    volume_minutes: float = 0.0
    intense_sessions: int = 0
    active_dates: frozenset[date] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return self.activity_count == 0


@dataclass(frozen=True)
class WindowedActivities:
    """Current (last 7 days) and prior (7-14 days ago) windows at ``now``."""

    now: datetime
    current: ActivityWindow
    previous: ActivityWindow
