"""Training program models: workouts, phases and the weekly schedule."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from training_engine.models.enums import (
    CapabilityLevel,
    ClimbDifficulty,
    PhaseType,
    Technicality,
    Weekday,
    WorkoutType,
    ZoneType,
)


@dataclass(frozen=True)
class ZoneRange:
    """Target power zone span, e.g. Z1-Z2 or a single zone."""

    low: ZoneType
    high: ZoneType | None = None

    @property
    def upper(self) -> ZoneType:
        return self.high if self.high is not None else self.low

    @property
    def label(self) -> str:
        if self.high is None or self.high == self.low:
            return self.low.name
        return f"{self.low.name}-{self.high.name}"


@dataclass(frozen=True)
class Interval:
    """A block within a workout.

    Watt targets are filled in by the power target assigner once the
    athlete's FTP is known.
    """

    name: str
    duration_min: float
    zone: ZoneRange
    details: str = ""
    power_low_w: int | None = None
    power_high_w: int | None = None


@dataclass(frozen=True)
class Workout:
    name: str
    type: WorkoutType
    duration_min: int
    tss: int
    intervals: tuple[Interval, ...] = field(default_factory=tuple)
    description: str = ""


@dataclass(frozen=True)
class RestDay:
    name: str = "Rest"

    @property
    def type(self) -> WorkoutType:
        return WorkoutType.REST

    @property
    def duration_min(self) -> int:
        return 0

    @property
    def tss(self) -> int:
        return 0


@dataclass(frozen=True)
class Phase:
    phase_type: PhaseType
    name: str
    duration_weeks: int
    focus: tuple[str, ...]
    weekly_tss: int
    key_workouts: tuple[Workout, ...] = field(default_factory=tuple)
    description: str = ""


@dataclass(frozen=True)
class RequiredCapabilities:
    threshold: CapabilityLevel
    vo2max: CapabilityLevel
    endurance: CapabilityLevel
    strength: CapabilityLevel
    technique: Technicality


@dataclass(frozen=True)
class ClimbCharacteristics:
    total_distance_km: float
    total_elevation_m: float
    max_gradient_pct: float
    avg_gradient_pct: float
    difficulty: ClimbDifficulty
    estimated_minutes: int
    section_count: int = 0


@dataclass(frozen=True)
class TrainingProgram:
    """A climb-specific program; ``phases`` sum to ``duration_weeks``."""

    id: str
    name: str
    duration_weeks: int
    target_date: date
    climb_characteristics: ClimbCharacteristics
    required_capabilities: RequiredCapabilities
    phases: tuple[Phase, ...]
    weekly_schedule: dict[Weekday, Workout | RestDay]
    climb_name: str = ""
    weekly_hours: float = 0.0
    description: str = ""


@dataclass(frozen=True)
class ProgramSummary:
    total_hours: float
    total_tss: int
    workouts_count: int
    key_workouts_count: int
