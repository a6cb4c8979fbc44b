"""Pre-ride fuelling advice for weeks above 400 training minutes."""

from __future__ import annotations

from training_engine.models.assessment import Recommendation
from training_engine.models.enums import RecommendationPriority, RulePriority
from training_engine.rules.base import RuleContext, RuleFinding, SignalRule


class PreWorkoutFuelRule(SignalRule):
    rule_id = "pre_workout_fuel"
    priority = RulePriority.NUTRITION
    order = 3
    requires_nutrition = True

    def evaluate(self, context: RuleContext) -> RuleFinding | None:
        nutrition = context.nutrition
        if nutrition is None or not nutrition.pre_workout_nutrition:
            return None

        return RuleFinding(
            recommendation=Recommendation(
                title="Pre-ride snack",
                description=(
                    "Eat a carbohydrate-rich snack (40-60g) 1-2 hours before "
                    "riding to get the most out of each session."
                ),
                priority=RecommendationPriority.MEDIUM,
                rule_id=self.rule_id,
            ),
        )
