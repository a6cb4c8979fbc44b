"""Training load calculations: rolling windows, volume ACWR, EWMA, monotony.

The dashboard compares the last 7 days against the 7 days before them.
The EWMA ratio and monotony are reported alongside for context only.

References:
    - Gabbett (2016): ACWR injury risk thresholds
    - Williams et al. (2017): EWMA-based ACWR
    - Foster (1998): Monotony and strain
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta, timezone
from typing import Iterable

import numpy as np
import pandas as pd

from training_engine.math.rounding import round_half_up
from training_engine.models.activity import Activity, ActivityWindow, WindowedActivities
from training_engine.models.enums import (
    EWMA_ACUTE_SPAN,
    EWMA_CHRONIC_SPAN,
    INTENSE_SESSION_THRESHOLD,
    RECOVERY_SCORES,
    WINDOW_DAYS,
    AssessmentStatus,
    SignalType,
)

logger = logging.getLogger(__name__)

_COLUMNS = ["date", "duration_seconds", "heart_rate", "intensity"]


def to_naive_utc(value: datetime) -> datetime:
    """Convert offset-aware timestamps to naive UTC; naive ones are taken as UTC."""
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def activities_frame(activities: Iterable[Activity]) -> pd.DataFrame:
    """Build a DataFrame of the fields the load model uses.

    Records without a usable timestamp are skipped and logged. Missing
    duration, heart rate and intensity count as zero.
    """
    rows = []
    for index, activity in enumerate(activities):
        if not isinstance(activity.date, datetime):
            logger.warning(
                "Skipping activity %d: unusable date %r", index, activity.date
            )
            continue
        rows.append(
            {
                "date": to_naive_utc(activity.date),
                "duration_seconds": float(activity.duration_seconds or 0.0),
                "heart_rate": float(activity.heart_rate_avg or 0.0),
                "intensity": float(activity.intensity or 0.0),
            }
        )
    frame = pd.DataFrame(rows, columns=_COLUMNS)
    frame["date"] = pd.to_datetime(frame["date"])
    return frame


def aggregate_windows(activities: Iterable[Activity], now: datetime) -> WindowedActivities:
    """Split activities into the current and previous 7-day windows.

    Offset-aware timestamps (activities or ``now``) are compared in UTC.

    current:  date >= now - 7d
    previous: now - 14d <= date < now - 7d

    Args:
        activities: Activity records (any order).
        now: Reference instant; never read from the clock.

    Returns:
        WindowedActivities with zero-filled windows when nothing matches.
    """
    now = to_naive_utc(now)
    frame = activities_frame(activities)
    current_start = now - timedelta(days=WINDOW_DAYS)
    previous_start = now - timedelta(days=2 * WINDOW_DAYS)

    current = frame[frame["date"] >= current_start]
    previous = frame[(frame["date"] >= previous_start) & (frame["date"] < current_start)]

    return WindowedActivities(
        now=now,
        current=_window_stats(current),
        previous=_window_stats(previous),
    )


def _window_stats(frame: pd.DataFrame) -> ActivityWindow:
    if frame.empty:
        return ActivityWindow()
    return ActivityWindow(
        activity_count=len(frame),
        mean_heart_rate=float(frame["heart_rate"].mean()),
        volume_minutes=float(frame["duration_seconds"].sum()) / 60.0,
        intense_sessions=int((frame["intensity"] > INTENSE_SESSION_THRESHOLD).sum()),
        active_dates=frozenset(frame["date"].dt.date),
    )


def calculate_acwr_volume(current_volume: float, previous_volume: float) -> float:
    """Week-over-week volume ratio; 1.0 when the previous week had no volume."""
    if previous_volume > 0:
        return current_volume / previous_volume
    return 1.0


def volume_trend_pct(current_volume: float, previous_volume: float) -> int:
    """Percentage change in weekly volume; 0 when the previous week had no volume."""
    if previous_volume > 0:
        return round_half_up((current_volume - previous_volume) / previous_volume * 100)
    return 0


def count_rest_days(window: ActivityWindow, now: datetime) -> int:
    """Calendar days among the last 7 (today included) without any activity."""
    today = to_naive_utc(now).date()
    last_seven = [today - timedelta(days=offset) for offset in range(WINDOW_DAYS)]
    return sum(1 for day in last_seven if day not in window.active_dates)


def daily_minutes(
    activities: Iterable[Activity], now: datetime, days: int = EWMA_CHRONIC_SPAN
) -> tuple[float, ...]:
    """Daily training minutes for the ``days`` calendar days ending today.

    Returns:
        Tuple of daily totals, oldest first, zero-filled.
    """
    frame = activities_frame(activities)
    today = pd.Timestamp(to_naive_utc(now).date())
    index = pd.date_range(end=today, periods=days, freq="D")
    if frame.empty:
        return tuple(0.0 for _ in range(days))
    per_day = frame.groupby(frame["date"].dt.normalize())["duration_seconds"].sum() / 60.0
    return tuple(float(v) for v in per_day.reindex(index, fill_value=0.0))


def calculate_ewma(values: list[float] | tuple[float, ...], span: int) -> float:
    """Most recent value of an exponentially weighted moving average."""
    if not values:
        return 0.0
    series = pd.Series(values, dtype=np.float64)
    ewma = series.ewm(span=span, adjust=False).mean()
    return float(ewma.iloc[-1])


def calculate_ewma_acwr(daily_loads: list[float] | tuple[float, ...]) -> float:
    """EWMA Acute:Chronic Workload Ratio (7-day acute / 28-day chronic).

    Returns 0.0 when there are fewer than 7 days of data or the chronic
    load is negligible.

    Reference:
        Williams et al. (2017). J Sci Med Sport 20(5):493-497.
    """
    if len(daily_loads) < EWMA_ACUTE_SPAN:
        return 0.0

    acute = calculate_ewma(daily_loads, span=EWMA_ACUTE_SPAN)
    chronic = calculate_ewma(daily_loads, span=EWMA_CHRONIC_SPAN)

    if chronic < 1e-6:
        return 0.0
    return acute / chronic


def calculate_monotony(daily_loads: list[float] | tuple[float, ...]) -> float:
    """Training monotony over the most recent 7 days (mean / std).

    Reference:
        Foster (1998). Med Sci Sports Exerc 30(7):1164-1168.
    """
    if len(daily_loads) < 7:
        return 0.0
    recent = np.array(daily_loads[-7:], dtype=np.float64)
    std = float(np.std(recent, ddof=0))
    if std < 1e-6:
        return 0.0
    return float(np.mean(recent)) / std


def status_from_signals(signal_types: Iterable[SignalType]) -> AssessmentStatus:
    """Worst signal wins; INFO signals never raise the status."""
    types = set(signal_types)
    if SignalType.CRITICAL in types:
        return AssessmentStatus.CRITICAL
    if SignalType.WARNING in types:
        return AssessmentStatus.WARNING
    return AssessmentStatus.OPTIMAL


def recovery_score(status: AssessmentStatus) -> int:
    """Discrete recovery score: 40 critical, 65 warning, 85 optimal."""
    return RECOVERY_SCORES[status]
