"""Carbohydrate rule: share of calories more than 10 points under target."""

from __future__ import annotations

from training_engine.models.assessment import Recommendation
from training_engine.models.enums import RecommendationPriority, RulePriority
from training_engine.rules.base import RuleContext, RuleFinding, SignalRule


class CarbohydrateRatioRule(SignalRule):
    rule_id = "carbohydrate_ratio"
    priority = RulePriority.NUTRITION
    order = 2
    requires_nutrition = True

    def evaluate(self, context: RuleContext) -> RuleFinding | None:
        nutrition = context.nutrition
        if nutrition is None or not nutrition.carbs_ratio_low:
            return None

        return RuleFinding(
            recommendation=Recommendation(
                title="Optimise carbohydrates",
                description=(
                    f"Raise carbohydrates to {nutrition.recommended_carbs_pct}% of total "
                    f"calories (about {nutrition.recommended_carbs_g}g) to keep glycogen "
                    "stores topped up."
                ),
                priority=RecommendationPriority.MEDIUM,
                rule_id=self.rule_id,
            ),
        )
