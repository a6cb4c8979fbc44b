"""Nutrition cross-analysis: daily targets derived from weekly training volume.

Breakpoints (300 / 400 / 600 min per week) are fixed so the dashboard's
warnings stay stable across releases.

Reference:
    Thomas, Erdman & Burke (2016). Nutrition and athletic performance.
    Med Sci Sports Exerc 48(3):543-568.
"""

from __future__ import annotations

from training_engine.math.rounding import round_half_up
from training_engine.models.assessment import NutritionAssessment
from training_engine.models.athlete import NutritionProfile
from training_engine.models.enums import (
    BASE_DAILY_CALORIES,
    BASE_HYDRATION_L,
    CALORIES_PER_TRAINING_MINUTE,
    CARBS_LOW_MARGIN_PCT,
    CARBS_TARGET_PCT,
    DEFAULT_WEIGHT_KG,
    HIGH_VOLUME_MIN,
    HYDRATION_L_PER_DAILY_HOUR,
    MODERATE_VOLUME_MIN,
    PRE_WORKOUT_VOLUME_MIN,
    PROTEIN_DEFICIT_RATIO,
    PROTEIN_FACTORS_G_PER_KG,
)


def _volume_tier(training_volume_minutes: float) -> int:
    """0 = high (>600), 1 = moderate (>300), 2 = low."""
    if training_volume_minutes > HIGH_VOLUME_MIN:
        return 0
    if training_volume_minutes > MODERATE_VOLUME_MIN:
        return 1
    return 2


def estimate_daily_calories(training_volume_minutes: float) -> float:
    return BASE_DAILY_CALORIES + training_volume_minutes * CALORIES_PER_TRAINING_MINUTE / 7


def recommended_hydration_l(training_volume_minutes: float) -> float:
    """Daily water target: 2 L plus 0.5 L per average daily training hour."""
    return BASE_HYDRATION_L + (training_volume_minutes / 60 / 7) * HYDRATION_L_PER_DAILY_HOUR


def analyze_nutrition(
    profile: NutritionProfile, training_volume_minutes: float
) -> NutritionAssessment:
    """Cross-reference a nutrition profile with the current training volume.

    Args:
        profile: Declared weight, daily calories and macro split. Any
            field may be missing.
        training_volume_minutes: Training minutes over the last 7 days.

    Returns:
        NutritionAssessment. Without ``daily_calories`` the calorie
        deficit is 0 and current protein is 0 (no deficit flagged);
        without macros the carbohydrate check is skipped.
    """
    tier = _volume_tier(training_volume_minutes)
    weight = profile.weight_kg or DEFAULT_WEIGHT_KG
    macros = profile.macronutrients
    daily_calories = profile.daily_calories

    estimated = estimate_daily_calories(training_volume_minutes)
    calorie_deficit = estimated - daily_calories if daily_calories else 0.0

    protein_factor = PROTEIN_FACTORS_G_PER_KG[tier]
    recommended_protein = round_half_up(protein_factor * weight)
    current_protein = (
        round_half_up(macros.protein_pct / 100 * daily_calories / 4)
        if macros is not None and daily_calories
        else 0
    )
    protein_deficit = bool(current_protein) and current_protein < recommended_protein * PROTEIN_DEFICIT_RATIO

    current_carbs_pct = macros.carbs_pct if macros is not None else 0.0
    recommended_carbs_pct = CARBS_TARGET_PCT[tier]
    carbs_ratio_low = bool(current_carbs_pct) and current_carbs_pct < recommended_carbs_pct - CARBS_LOW_MARGIN_PCT

    return NutritionAssessment(
        training_volume_minutes=training_volume_minutes,
        estimated_daily_calories=estimated,
        calorie_deficit=calorie_deficit,
        protein_factor=protein_factor,
        recommended_protein_g=recommended_protein,
        current_protein_g=current_protein,
        protein_deficit=protein_deficit,
        recommended_hydration_l=recommended_hydration_l(training_volume_minutes),
        current_carbs_pct=current_carbs_pct,
        recommended_carbs_pct=recommended_carbs_pct,
        carbs_ratio_low=carbs_ratio_low,
        recommended_carbs_g=round_half_up(recommended_carbs_pct / 100 * estimated / 4),
        pre_workout_nutrition=training_volume_minutes > PRE_WORKOUT_VOLUME_MIN,
        hydration_concern=training_volume_minutes > MODERATE_VOLUME_MIN,
        weight_kg=weight,
    )
