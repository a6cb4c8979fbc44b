"""Fixtures with realistic dashboard JSON records."""

from __future__ import annotations

import pytest


@pytest.fixture
def raw_activity() -> dict:
    """An activity as stored by the dashboard's ride log."""
    return {
        "date": "2024-05-14T07:30:00Z",
        "durationSeconds": 5400,
        "distanceKm": 48.2,
        "averageSpeedKmh": 32.1,
        "heartRateAvg": 148,
        "intensity": 6,
        "elevationGainM": 820,
    }


@pytest.fixture
def raw_capabilities() -> dict:
    """The capabilities form as submitted from the program wizard."""
    return {
        "ftpWatts": 280,
        "weightKg": 70,
        "experienceLevel": "advanced",
        "weeklyHours": 9,
        "preferredTrainingDays": [2, 4, 6, 7],
        "raceDateISO": "2024-07-24",
        "strengthTraining": True,
        "limitingFactors": ["endurance", "mental"],
    }


@pytest.fixture
def raw_climb() -> dict:
    return {
        "id": "col-du-galibier",
        "name": "Col du Galibier",
        "distanceKm": 18.1,
        "elevationM": 1245,
        "avgGradientPct": 6.9,
        "maxGradientPct": 12.1,
        "difficulty": "EXTREME",
        "technicality": "low",
        "sections": [
            {"distanceKm": 8.0, "gradientPct": 5.5, "label": "Valloire"},
            {"distanceKm": 10.1, "gradientPct": 8.0, "label": "Summit"},
        ],
    }
