"""Fixtures for signal rule tests."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

import pytest

from training_engine.math.nutrition import analyze_nutrition
from training_engine.models.activity import ActivityWindow, WindowedActivities
from training_engine.models.athlete import NutritionProfile
from training_engine.rules.base import RuleContext


@pytest.fixture
def make_context(now: datetime) -> Callable[..., RuleContext]:
    """Factory for a RuleContext with sensible non-firing defaults."""

    def _make(
        acwr: float = 1.0,
        intense_sessions: int = 0,
        rest_days: int = 3,
        nutrition: NutritionProfile | None = None,
        volume_minutes: float = 300.0,
    ) -> RuleContext:
        windows = WindowedActivities(
            now=now,
            current=ActivityWindow(
                activity_count=4,
                volume_minutes=volume_minutes,
                intense_sessions=intense_sessions,
            ),
            previous=ActivityWindow(activity_count=4, volume_minutes=volume_minutes / acwr),
        )
        return RuleContext(
            windows=windows,
            acwr_volume=acwr,
            rest_days=rest_days,
            nutrition=(
                analyze_nutrition(nutrition, volume_minutes) if nutrition is not None else None
            ),
        )

    return _make
