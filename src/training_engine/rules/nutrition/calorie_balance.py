"""Calorie balance rule.

Deficit > 300 kcal/day → advice (HIGH above 500, MEDIUM otherwise).
Deficit > 500 kcal/day → additionally a WARNING signal.
"""

from __future__ import annotations

from training_engine.models.assessment import Recommendation, Signal
from training_engine.models.enums import (
    CALORIE_DEFICIT_ADVICE_KCAL,
    CALORIE_DEFICIT_SIGNAL_KCAL,
    RecommendationPriority,
    RulePriority,
    SignalType,
)
from training_engine.rules.base import RuleContext, RuleFinding, SignalRule


class CalorieBalanceRule(SignalRule):
    rule_id = "calorie_balance"
    priority = RulePriority.NUTRITION
    order = 1
    requires_nutrition = True

    def evaluate(self, context: RuleContext) -> RuleFinding | None:
        nutrition = context.nutrition
        if nutrition is None:
            return None
        deficit = nutrition.calorie_deficit
        if deficit <= CALORIE_DEFICIT_ADVICE_KCAL:
            return None

        severe = deficit > CALORIE_DEFICIT_SIGNAL_KCAL
        signal = None
        if severe:
            signal = Signal(
                type=SignalType.WARNING,
                title="Large calorie deficit",
                description=(
                    f"Deficit of {deficit:.0f} kcal/day for your current training load. "
                    "This can compromise recovery."
                ),
                rule_id=self.rule_id,
            )

        return RuleFinding(
            signal=signal,
            recommendation=Recommendation(
                title="Adjust calorie intake",
                description=(
                    f"Eat {deficit:.0f} kcal more on training days to keep your "
                    "energy up and recover better."
                ),
                priority=RecommendationPriority.HIGH if severe else RecommendationPriority.MEDIUM,
                rule_id=self.rule_id,
            ),
        )
