"""Athlete inputs — read-only snapshots taken for a single engine call."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from training_engine.models.enums import ExperienceLevel, LimitingFactor, Weekday


@dataclass(frozen=True)
class UserCapabilities:
    """Declared capabilities and preferences of an athlete.

    The dashboard form mutates its own copy; the engine only ever sees
    this frozen snapshot.
    """

    ftp_watts: float
    weight_kg: float
    experience_level: ExperienceLevel = ExperienceLevel.INTERMEDIATE
    weekly_hours: float = 8.0
    preferred_training_days: frozenset[Weekday] = field(
        default_factory=lambda: frozenset(
            {Weekday.MONDAY, Weekday.WEDNESDAY, Weekday.FRIDAY, Weekday.SATURDAY}
        )
    )
    race_date: date | None = None
    strength_training: bool = False
    limiting_factors: frozenset[LimitingFactor] = field(default_factory=frozenset)

    @property
    def ftp_per_kg(self) -> float:
        """FTP normalised by body weight; 0.0 when weight is not positive."""
        if self.weight_kg <= 0:
            return 0.0
        return self.ftp_watts / self.weight_kg


@dataclass(frozen=True)
class Macronutrients:
    """Share of daily calories per macronutrient, in percent."""

    carbs_pct: float
    protein_pct: float
    fat_pct: float


@dataclass(frozen=True)
class NutritionProfile:
    weight_kg: float | None = None
    daily_calories: float | None = None
    macronutrients: Macronutrients | None = None
