"""Overtraining assessment — output of the load signal detector."""

from __future__ import annotations

from dataclasses import dataclass, field

from training_engine.models.enums import (
    AssessmentStatus,
    RecommendationPriority,
    SignalType,
)


@dataclass(frozen=True)
class Signal:
    """A single overtraining warning shown in the risk banner."""

    type: SignalType
    title: str
    description: str
    rule_id: str = ""


@dataclass(frozen=True)
class Recommendation:
    title: str
    description: str
    priority: RecommendationPriority
    rule_id: str = ""


@dataclass(frozen=True)
class NutritionAssessment:
    """Nutrition targets derived from weekly training volume.

    Calorie and protein figures are per day; ``training_volume_minutes``
    is per week.
    """

    training_volume_minutes: float
    estimated_daily_calories: float
    calorie_deficit: float
    protein_factor: float
    recommended_protein_g: int
    current_protein_g: int
    protein_deficit: bool
    recommended_hydration_l: float
    current_carbs_pct: float
    recommended_carbs_pct: int
    carbs_ratio_low: bool
    recommended_carbs_g: int
    pre_workout_nutrition: bool
    hydration_concern: bool
    weight_kg: float


@dataclass(frozen=True)
class LoadMetrics:
    acwr: float
    rest_days: int
    intense_sessions: int
    volume_trend_pct: int
    nutrition: NutritionAssessment | None = None
    current_volume_min: float = 0.0
    previous_volume_min: float = 0.0
    current_avg_hr: float = 0.0
    previous_avg_hr: float = 0.0
    ewma_acwr: float = 0.0
    monotony: float = 0.0


@dataclass(frozen=True)
class OvertrainingAssessment:
    """Computed fresh on every call; nothing here is persisted."""

    status: AssessmentStatus
    signals: tuple[Signal, ...] = field(default_factory=tuple)
    recommendations: tuple[Recommendation, ...] = field(default_factory=tuple)
    metrics: LoadMetrics | None = None
    recovery_score: int = 85
    insufficient_data: bool = False

    @property
    def critical_signals(self) -> tuple[Signal, ...]:
        return tuple(s for s in self.signals if s.type == SignalType.CRITICAL)
