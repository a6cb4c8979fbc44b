"""Tests for climb capability matching and ascent time estimation."""

from __future__ import annotations

import logging

import pytest

from training_engine.math.capability import (
    difficulty_label,
    difficulty_tier_score,
    estimate_ascent_minutes,
    match_climb,
    weekly_hours_bonus,
)
from training_engine.models.athlete import UserCapabilities
from training_engine.models.climb import ClimbDescriptor
from training_engine.models.enums import ClimbDifficulty, ExperienceLevel, LimitingFactor


class TestTierScore:
    @pytest.mark.parametrize(
        "ftp_per_kg,points",
        [(4.0, 30), (3.5, 30), (3.2, 25), (3.0, 25), (2.7, 15), (2.0, 5)],
    )
    def test_hard_climb_tiers(self, ftp_per_kg: float, points: int) -> None:
        assert difficulty_tier_score(ftp_per_kg, ClimbDifficulty.HARD) == points

    def test_thresholds_rise_with_difficulty(self) -> None:
        scores = [difficulty_tier_score(3.2, d) for d in ClimbDifficulty]
        assert scores == sorted(scores, reverse=True)

    def test_easy_climb_floor(self) -> None:
        assert difficulty_tier_score(1.0, ClimbDifficulty.EASY) == 15

    def test_extreme_climb_top_tier(self) -> None:
        assert difficulty_tier_score(4.0, ClimbDifficulty.EXTREME) == 30
        assert difficulty_tier_score(3.9, ClimbDifficulty.EXTREME) == 25


class TestBonuses:
    @pytest.mark.parametrize(
        "hours,bonus", [(15, 20), (12, 20), (11.9, 15), (8, 15), (5, 10), (4.9, 5), (0, 5)]
    )
    def test_weekly_hours(self, hours: float, bonus: int) -> None:
        assert weekly_hours_bonus(hours) == bonus

    @pytest.mark.parametrize(
        "score,label",
        [
            (100, "accessible"),
            (80, "accessible"),
            (79, "moderate"),
            (60, "moderate"),
            (59, "challenging"),
            (40, "challenging"),
            (39, "very hard"),
            (0, "very hard"),
        ],
    )
    def test_labels(self, score: int, label: str) -> None:
        assert difficulty_label(score) == label


class TestAscentTime:
    def test_reference_pace(self) -> None:
        assert estimate_ascent_minutes(1000, 3.0) == 60

    def test_scales_with_w_per_kg(self) -> None:
        assert estimate_ascent_minutes(1500, 2.0) == 135

    def test_zero_w_per_kg_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING):
            assert estimate_ascent_minutes(1000, 0.0) == 60
        assert "Non-positive W/kg" in caplog.text


class TestMatchClimb:
    def test_advanced_climber_on_hard_climb(
        self, advanced_climber: UserCapabilities, hard_climb: ClimbDescriptor
    ) -> None:
        match = match_climb(advanced_climber, hard_climb)

        assert match.ftp_per_kg == pytest.approx(4.0)
        assert match.tier_score == 30
        assert match.experience_bonus == 20
        assert match.hours_bonus == 15
        assert match.strength_bonus == 10
        assert match.match_score == 75
        assert match.difficulty_label == "moderate"
        # 1120 m of ascent at 45 min per 1000 m
        assert match.estimated_minutes == 50

    def test_mid_tier_climber(self, hard_climb: ClimbDescriptor) -> None:
        caps = UserCapabilities(
            ftp_watts=240,
            weight_kg=75,  # 3.2 W/kg
            experience_level=ExperienceLevel.ADVANCED,
            weekly_hours=10,
            strength_training=True,
        )
        match = match_climb(caps, hard_climb)
        assert match.tier_score == 25
        assert match.match_score == 70
        assert match.difficulty_label == "moderate"

    def test_limiting_factors_penalise(
        self, advanced_climber: UserCapabilities, hard_climb: ClimbDescriptor
    ) -> None:
        caps = UserCapabilities(
            ftp_watts=advanced_climber.ftp_watts,
            weight_kg=advanced_climber.weight_kg,
            experience_level=advanced_climber.experience_level,
            weekly_hours=advanced_climber.weekly_hours,
            strength_training=True,
            limiting_factors=frozenset({LimitingFactor.ENDURANCE, LimitingFactor.MENTAL}),
        )
        match = match_climb(caps, hard_climb)
        assert match.limiting_penalty == 10
        assert match.match_score == 65

    def test_score_clamped_at_zero(self) -> None:
        caps = UserCapabilities(
            ftp_watts=100,
            weight_kg=90,
            experience_level=ExperienceLevel.BEGINNER,
            weekly_hours=0,
            limiting_factors=frozenset(LimitingFactor),
        )
        climb = ClimbDescriptor(
            distance_km=20, elevation_m=2000, avg_gradient_pct=10, max_gradient_pct=18,
            difficulty=ClimbDifficulty.EXTREME,
        )
        match = match_climb(caps, climb)
        assert match.match_score == 0
        assert match.difficulty_label == "very hard"

    @pytest.mark.parametrize("difficulty", list(ClimbDifficulty))
    @pytest.mark.parametrize("level", list(ExperienceLevel))
    def test_score_always_in_range(
        self, difficulty: ClimbDifficulty, level: ExperienceLevel
    ) -> None:
        for ftp, hours, strength, factors in [
            (450, 20, True, frozenset()),
            (80, 0, False, frozenset(LimitingFactor)),
            (250, 8, True, frozenset({LimitingFactor.RECOVERY})),
        ]:
            caps = UserCapabilities(
                ftp_watts=ftp,
                weight_kg=70,
                experience_level=level,
                weekly_hours=hours,
                strength_training=strength,
                limiting_factors=factors,
            )
            climb = ClimbDescriptor(
                distance_km=10, elevation_m=800, avg_gradient_pct=8, max_gradient_pct=12,
                difficulty=difficulty,
            )
            assert 0 <= match_climb(caps, climb).match_score <= 100

    def test_zero_weight_falls_back(self, hard_climb: ClimbDescriptor) -> None:
        caps = UserCapabilities(ftp_watts=250, weight_kg=0)
        match = match_climb(caps, hard_climb)
        assert match.ftp_per_kg == 0.0
        # 1120 m of ascent at the 60 min reference pace
        assert match.estimated_minutes == 67
