"""Performance projection: weekly progression series, forecasts, levels, benchmarks.

The progression curve is ``baseline * (1 + gain * progress^0.8)`` where
``gain`` grows with the look-back window (3% + 0.5% per month, capped at
8%). Optional jitter of +/-1% of baseline is drawn from an injected
numpy Generator so results stay reproducible.
"""

from __future__ import annotations

import math
from datetime import datetime, timedelta
from typing import Sequence

import numpy as np

from training_engine.math.rounding import round_to
from training_engine.models.enums import (
    BENCHMARK_CATEGORIES,
    BENCHMARK_VALUES,
    KEY_EVENT_MIN_STEP_PCT,
    KEY_EVENT_THRESHOLD_FRACTION,
    MAX_KEY_EVENTS,
    METRIC_BASELINES,
    MONTHLY_PROJECTION_GAIN,
    PERFORMANCE_LEVEL_LABELS,
    PERFORMANCE_SCALES,
    PROGRESSION_EXPONENT,
    PROGRESSION_JITTER_PCT,
    PROJECTION_HORIZONS_DAYS,
    PerformanceMetric,
    TimeRange,
)
from training_engine.models.projection import (
    Benchmark,
    FutureProjection,
    KeyEvent,
    PerformanceLevel,
    ProgressionPoint,
)

_EVENT_DESCRIPTIONS: dict[PerformanceMetric, tuple[str, str, str]] = {
    PerformanceMetric.FTP: (
        "Threshold power improvement",
        "Significant FTP progression",
        "Jump in sustained power",
    ),
    PerformanceMetric.VO2MAX: (
        "Aerobic capacity progression",
        "Notable VO2max improvement",
        "Jump in maximal oxygen uptake",
    ),
    PerformanceMetric.POWER_WEIGHT: (
        "Power-to-weight improvement",
        "Significant watts-per-kilo progression",
        "Jump in climbing performance",
    ),
    PerformanceMetric.THRESHOLD_HR: (
        "Threshold heart rate adaptation",
        "Improved cardiac efficiency",
        "Positive cardiovascular adaptation",
    ),
    PerformanceMetric.ENDURANCE: (
        "Endurance capacity progression",
        "Notable stamina improvement",
        "Jump in ability to sustain effort",
    ),
}


def improvement_fraction(range_days: int) -> float:
    """Total expected improvement over the window (3-8%)."""
    return min(3 + (range_days / 30) * 0.5, 8) / 100


def generate_progression(
    metric: PerformanceMetric,
    time_range: TimeRange,
    now: datetime,
    rng: np.random.Generator | None = None,
) -> tuple[ProgressionPoint, ...]:
    """Build one point per week from ``now - range`` towards ``now``.

    Args:
        metric: Which fitness metric to model.
        time_range: Look-back window.
        now: Reference instant.
        rng: Source of jitter. None disables jitter entirely.

    Returns:
        Chronologically ordered progression points.
    """
    range_days = int(time_range)
    baseline = METRIC_BASELINES[metric]
    weeks = math.ceil(range_days / 7)
    start = now - timedelta(days=range_days)

    progress = (np.arange(weeks) / weeks) ** PROGRESSION_EXPONENT
    values = baseline + baseline * improvement_fraction(range_days) * progress
    if rng is not None:
        values = values + baseline * rng.uniform(
            -PROGRESSION_JITTER_PCT, PROGRESSION_JITTER_PCT, size=weeks
        )

    return tuple(
        ProgressionPoint(date=start + timedelta(weeks=week), value=float(value))
        for week, value in enumerate(values)
    )


def project_future(last_value: float) -> tuple[FutureProjection, ...]:
    """Extrapolate +1% per 30 days at 30/60/90 days ahead."""
    return tuple(
        FutureProjection(
            days_ahead=days,
            value=last_value * (1 + (days / 30) * MONTHLY_PROJECTION_GAIN),
        )
        for days in PROJECTION_HORIZONS_DAYS
    )


def classify_performance_level(value: float, metric: PerformanceMetric) -> PerformanceLevel:
    """Highest bucket whose lower bound ``value`` reaches (bucket 0 otherwise)."""
    scale = PERFORMANCE_SCALES[metric]
    level_index = 0
    for index, bound in enumerate(scale):
        if value >= bound:
            level_index = index
        else:
            break
    return PerformanceLevel(
        label=PERFORMANCE_LEVEL_LABELS[level_index],
        index=level_index,
        max=len(scale) - 1,
    )


def describe_event(metric: PerformanceMetric, improvement_pct: float) -> str:
    """Pick a description by jump size so repeated calls agree."""
    options = _EVENT_DESCRIPTIONS[metric]
    if improvement_pct > 4:
        text = options[2]
    elif improvement_pct > 3:
        text = options[1]
    else:
        text = options[0]
    return f"{text} (+{improvement_pct:.1f}%)"


def detect_key_events(
    progression: Sequence[ProgressionPoint], metric: PerformanceMetric
) -> tuple[KeyEvent, ...]:
    """Flag week-over-week jumps above 2% that clear 15% of the series range.

    Pure function of the series: feeding a projection's progression back
    in yields the same events.

    Returns:
        At most three events, earliest first.
    """
    if len(progression) < 2:
        return ()

    values = np.array([p.value for p in progression], dtype=np.float64)
    low, high = float(values.min()), float(values.max())
    threshold = low + (high - low) * KEY_EVENT_THRESHOLD_FRACTION

    events: list[KeyEvent] = []
    for prev, current in zip(progression, progression[1:]):
        if current.value > threshold and current.value > prev.value and prev.value != 0:
            step_pct = (current.value - prev.value) / prev.value * 100
            if step_pct > KEY_EVENT_MIN_STEP_PCT:
                events.append(
                    KeyEvent(
                        date=current.date,
                        value=current.value,
                        improvement_pct=step_pct,
                        description=describe_event(metric, step_pct),
                    )
                )
                if len(events) == MAX_KEY_EVENTS:
                    break
    return tuple(events)


def build_benchmarks(metric: PerformanceMetric, current: float) -> tuple[Benchmark, ...]:
    """Compare the current value with reference riders in each category."""
    return tuple(
        Benchmark(
            category=category,
            value=reference,
            difference_pct=round_to((current - reference) / reference * 100, 1),
        )
        for category, reference in zip(BENCHMARK_CATEGORIES, BENCHMARK_VALUES[metric])
    )
