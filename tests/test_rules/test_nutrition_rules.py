"""Tests for the nutrition rules built on the cross-analysis."""

from __future__ import annotations

from training_engine.models.athlete import Macronutrients, NutritionProfile
from training_engine.models.enums import RecommendationPriority, RulePriority, SignalType
from training_engine.rules.nutrition.calorie_balance import CalorieBalanceRule
from training_engine.rules.nutrition.carbohydrates import CarbohydrateRatioRule
from training_engine.rules.nutrition.hydration import HydrationRule
from training_engine.rules.nutrition.pre_workout import PreWorkoutFuelRule
from training_engine.rules.nutrition.protein import ProteinDeficitRule


def _profile(daily_calories: float | None, protein_pct: float = 20, carbs_pct: float = 60):
    return NutritionProfile(
        weight_kg=70,
        daily_calories=daily_calories,
        macronutrients=Macronutrients(
            carbs_pct=carbs_pct, protein_pct=protein_pct, fat_pct=100 - carbs_pct - protein_pct
        ),
    )


class TestApplicability:
    def test_nutrition_rules_need_a_profile(self, make_context) -> None:
        context = make_context()
        for rule in (
            ProteinDeficitRule(),
            CalorieBalanceRule(),
            CarbohydrateRatioRule(),
            PreWorkoutFuelRule(),
            HydrationRule(),
        ):
            assert rule.priority == RulePriority.NUTRITION
            assert rule.requires_nutrition
            assert not rule.is_applicable(context)

    def test_order_within_tier(self) -> None:
        rules = [
            HydrationRule(),
            PreWorkoutFuelRule(),
            CarbohydrateRatioRule(),
            CalorieBalanceRule(),
            ProteinDeficitRule(),
        ]
        ordered = sorted(rules, key=lambda r: r.sort_key)
        assert [r.rule_id for r in ordered] == [
            "protein_deficit",
            "calorie_balance",
            "carbohydrate_ratio",
            "pre_workout_fuel",
            "hydration",
        ]


class TestProteinDeficitRule:
    def test_low_protein_warns(self, make_context, full_nutrition) -> None:
        finding = ProteinDeficitRule().evaluate(
            make_context(nutrition=full_nutrition, volume_minutes=700)
        )
        assert finding is not None
        assert finding.signal.type == SignalType.WARNING
        assert "94g" in finding.signal.description
        assert finding.recommendation.priority == RecommendationPriority.HIGH
        assert "140g" in finding.recommendation.description
        assert "2.0g/kg" in finding.recommendation.description

    def test_adequate_protein_quiet(self, make_context) -> None:
        context = make_context(nutrition=_profile(3000, protein_pct=20), volume_minutes=400)
        assert ProteinDeficitRule().evaluate(context) is None


class TestCalorieBalanceRule:
    def test_large_deficit_signals_and_advises_high(self, make_context) -> None:
        # 700 min/week -> 3000 kcal estimated; 2400 eaten -> 600 deficit
        finding = CalorieBalanceRule().evaluate(
            make_context(nutrition=_profile(2400), volume_minutes=700)
        )
        assert finding.signal is not None
        assert finding.signal.type == SignalType.WARNING
        assert finding.recommendation.priority == RecommendationPriority.HIGH

    def test_moderate_deficit_advice_only(self, make_context) -> None:
        # 3000 estimated, 2600 eaten -> 400 deficit
        finding = CalorieBalanceRule().evaluate(
            make_context(nutrition=_profile(2600), volume_minutes=700)
        )
        assert finding.signal is None
        assert finding.recommendation.priority == RecommendationPriority.MEDIUM

    def test_exactly_500_is_not_a_signal(self, make_context, full_nutrition) -> None:
        finding = CalorieBalanceRule().evaluate(
            make_context(nutrition=full_nutrition, volume_minutes=700)
        )
        assert finding.signal is None
        assert finding.recommendation.priority == RecommendationPriority.MEDIUM

    def test_small_deficit_quiet(self, make_context) -> None:
        context = make_context(nutrition=_profile(2800), volume_minutes=700)
        assert CalorieBalanceRule().evaluate(context) is None

    def test_missing_daily_calories_quiet(self, make_context) -> None:
        context = make_context(nutrition=_profile(None), volume_minutes=1200)
        assert CalorieBalanceRule().evaluate(context) is None


class TestCarbohydrateRatioRule:
    def test_low_carbs_advised(self, make_context, full_nutrition) -> None:
        finding = CarbohydrateRatioRule().evaluate(
            make_context(nutrition=full_nutrition, volume_minutes=700)
        )
        assert finding.signal is None
        assert finding.recommendation.priority == RecommendationPriority.MEDIUM
        assert "65%" in finding.recommendation.description

    def test_adequate_carbs_quiet(self, make_context) -> None:
        context = make_context(nutrition=_profile(3000, carbs_pct=60), volume_minutes=700)
        assert CarbohydrateRatioRule().evaluate(context) is None


class TestPreWorkoutFuelRule:
    def test_high_volume_advised(self, make_context) -> None:
        finding = PreWorkoutFuelRule().evaluate(
            make_context(nutrition=_profile(3000), volume_minutes=450)
        )
        assert finding.signal is None
        assert finding.recommendation.title == "Pre-ride snack"

    def test_low_volume_quiet(self, make_context) -> None:
        context = make_context(nutrition=_profile(3000), volume_minutes=400)
        assert PreWorkoutFuelRule().evaluate(context) is None


class TestHydrationRule:
    def test_info_signal(self, make_context) -> None:
        finding = HydrationRule().evaluate(
            make_context(nutrition=_profile(3000), volume_minutes=420)
        )
        assert finding.signal.type == SignalType.INFO
        assert "2.5L" in finding.signal.description
        assert finding.recommendation is None

    def test_low_volume_quiet(self, make_context) -> None:
        context = make_context(nutrition=_profile(3000), volume_minutes=300)
        assert HydrationRule().evaluate(context) is None
