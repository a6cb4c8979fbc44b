"""Performance projection models — trend series, forecasts and benchmarks."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime

from training_engine.models.enums import PerformanceMetric, TimeRange


@dataclass(frozen=True)
class ProgressionPoint:
    date: datetime
    value: float


@dataclass(frozen=True)
class FutureProjection:
    days_ahead: int
    value: float


@dataclass(frozen=True)
class PerformanceLevel:
    label: str
    index: int
    max: int


@dataclass(frozen=True)
class KeyEvent:
    """A week-over-week jump large enough to highlight on the trend chart."""

    date: datetime
    value: float
    improvement_pct: float
    description: str


@dataclass(frozen=True)
class Benchmark:
    category: str
    value: float
    difference_pct: float


@dataclass(frozen=True)
class PerformanceProjection:
    metric: PerformanceMetric
    current: float
    progression: tuple[ProgressionPoint, ...] = field(default_factory=tuple)
    future_projections: tuple[FutureProjection, ...] = field(default_factory=tuple)
    performance_level: PerformanceLevel | None = None
    key_events: tuple[KeyEvent, ...] = field(default_factory=tuple)
    benchmarks: tuple[Benchmark, ...] = field(default_factory=tuple)
    time_range: TimeRange = TimeRange.THREE_MONTHS
    activity_count: int = 0

    @property
    def metric_id(self) -> str:
        return self.metric.value
