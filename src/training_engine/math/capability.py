"""Climb capability matching: readiness score and estimated ascent time.

The score adds a W/kg tier (0-30, thresholds rising with climb
difficulty), experience, weekly hours and strength-training bonuses,
then subtracts 5 points per declared limiting factor. The total is
clamped to [0, 100].
"""

from __future__ import annotations

import logging

from training_engine.math.rounding import round_half_up
from training_engine.models.athlete import UserCapabilities
from training_engine.models.climb import ClimbDescriptor, ClimbMatch
from training_engine.models.enums import (
    ASCENT_MINUTES_PER_1000M,
    ASCENT_REFERENCE_W_PER_KG,
    DIFFICULTY_TIERS,
    EXPERIENCE_BONUS,
    LIMITING_FACTOR_PENALTY,
    MATCH_LABEL_FLOOR,
    MATCH_LABELS,
    STRENGTH_TRAINING_BONUS,
    WEEKLY_HOURS_BONUS,
    WEEKLY_HOURS_FLOOR_BONUS,
    ClimbDifficulty,
)

logger = logging.getLogger(__name__)


def difficulty_tier_score(ftp_per_kg: float, difficulty: ClimbDifficulty) -> int:
    tiers, floor = DIFFICULTY_TIERS[difficulty]
    for min_w_per_kg, points in tiers:
        if ftp_per_kg >= min_w_per_kg:
            return points
    return floor


def weekly_hours_bonus(weekly_hours: float) -> int:
    for min_hours, points in WEEKLY_HOURS_BONUS:
        if weekly_hours >= min_hours:
            return points
    return WEEKLY_HOURS_FLOOR_BONUS


def difficulty_label(match_score: int) -> str:
    for min_score, label in MATCH_LABELS:
        if match_score >= min_score:
            return label
    return MATCH_LABEL_FLOOR


def estimate_ascent_minutes(elevation_m: float, ftp_per_kg: float) -> int:
    """Minutes to climb ``elevation_m``: 60 min per 1000 m at 3 W/kg, scaled.

    A non-positive W/kg is malformed input; the reference pace is used
    instead of propagating inf/nan.
    """
    time_factor = float(ASCENT_MINUTES_PER_1000M)
    if ftp_per_kg > 0:
        time_factor = ASCENT_MINUTES_PER_1000M * (ASCENT_REFERENCE_W_PER_KG / ftp_per_kg)
    else:
        logger.warning(
            "Non-positive W/kg (%.2f); using reference ascent pace", ftp_per_kg
        )
    return round_half_up((elevation_m / 1000) * time_factor)


def match_climb(capabilities: UserCapabilities, climb: ClimbDescriptor) -> ClimbMatch:
    """Score an athlete's readiness for a climb.

    Args:
        capabilities: Athlete snapshot.
        climb: Target climb.

    Returns:
        ClimbMatch with the clamped score, its label, the score
        breakdown and the estimated ascent time.
    """
    ftp_per_kg = capabilities.ftp_per_kg

    tier = difficulty_tier_score(ftp_per_kg, climb.difficulty)
    experience = EXPERIENCE_BONUS[capabilities.experience_level]
    hours = weekly_hours_bonus(capabilities.weekly_hours)
    strength = STRENGTH_TRAINING_BONUS if capabilities.strength_training else 0
    penalty = LIMITING_FACTOR_PENALTY * len(capabilities.limiting_factors)

    score = max(0, min(100, tier + experience + hours + strength - penalty))

    return ClimbMatch(
        match_score=score,
        difficulty_label=difficulty_label(score),
        ftp_per_kg=ftp_per_kg,
        estimated_minutes=estimate_ascent_minutes(climb.elevation_m, ftp_per_kg),
        tier_score=tier,
        experience_bonus=experience,
        hours_bonus=hours,
        strength_bonus=strength,
        limiting_penalty=penalty,
    )
