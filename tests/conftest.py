"""Shared test fixtures: reference instant, activity builders, athletes and climbs."""

from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Callable

import pytest

from training_engine.models.activity import Activity
from training_engine.models.athlete import Macronutrients, NutritionProfile, UserCapabilities
from training_engine.models.climb import ClimbDescriptor, ClimbSection
from training_engine.models.enums import (
    ClimbDifficulty,
    ExperienceLevel,
    Technicality,
    Weekday,
)

NOW = datetime(2024, 5, 15, 12, 0)


@pytest.fixture
def now() -> datetime:
    """Wednesday 15 May 2024, noon. Every test passes this explicitly."""
    return NOW


@pytest.fixture
def make_activity() -> Callable[..., Activity]:
    """Factory: ``make_activity(days_ago, minutes, intensity=5, heart_rate=140)``."""

    def _make(
        days_ago: float,
        minutes: float,
        intensity: float | None = 5,
        heart_rate: float | None = 140,
    ) -> Activity:
        return Activity(
            date=NOW - timedelta(days=days_ago),
            duration_seconds=minutes * 60,
            distance_km=minutes / 2,
            average_speed_kmh=30.0,
            heart_rate_avg=heart_rate,
            intensity=intensity,
            elevation_gain_m=minutes * 5,
        )

    return _make


@pytest.fixture
def overreached_week() -> list[Activity]:
    """10 hard rides in the last 7 days (500 min, intensity 8, HR 160), none before."""
    return [
        Activity(
            date=NOW - timedelta(hours=15 * i),
            duration_seconds=50 * 60,
            heart_rate_avg=160,
            intensity=8,
        )
        for i in range(10)
    ]


@pytest.fixture
def steady_fortnight(make_activity: Callable[..., Activity]) -> list[Activity]:
    """Two identical weeks: 3 rides of 60/90/120 min, rest days in between."""
    week = [(0.5, 60), (2.5, 90), (4.5, 120)]
    current = [make_activity(d, m) for d, m in week]
    previous = [make_activity(d + 7, m) for d, m in week]
    return current + previous


@pytest.fixture
def advanced_climber() -> UserCapabilities:
    """300 W at 75 kg (4.0 W/kg), advanced, 10 h/week, strength training."""
    return UserCapabilities(
        ftp_watts=300,
        weight_kg=75,
        experience_level=ExperienceLevel.ADVANCED,
        weekly_hours=10,
        preferred_training_days=frozenset(
            {Weekday.SATURDAY, Weekday.TUESDAY, Weekday.THURSDAY, Weekday.SUNDAY}
        ),
        race_date=date(2024, 7, 24),  # 10 weeks after NOW
        strength_training=True,
    )


@pytest.fixture
def hard_climb() -> ClimbDescriptor:
    return ClimbDescriptor(
        distance_km=13.8,
        elevation_m=1120,
        avg_gradient_pct=8.1,
        max_gradient_pct=13.0,
        difficulty=ClimbDifficulty.HARD,
        technicality=Technicality.MEDIUM,
        sections=(
            ClimbSection(4.0, 10.5, "Lower ramps"),
            ClimbSection(6.0, 7.5, "Hairpins"),
            ClimbSection(3.8, 6.8, "Summit"),
        ),
        name="Alpe d'Huez",
        climb_id="alpe-dhuez",
    )


@pytest.fixture
def full_nutrition() -> NutritionProfile:
    """70 kg, 2500 kcal/day, low carbs (45%) and low protein (15%)."""
    return NutritionProfile(
        weight_kg=70,
        daily_calories=2500,
        macronutrients=Macronutrients(carbs_pct=45, protein_pct=15, fat_pct=40),
    )
