"""Hydration rule: INFO signal above 300 training minutes per week."""

from __future__ import annotations

from training_engine.models.assessment import Signal
from training_engine.models.enums import RulePriority, SignalType
from training_engine.rules.base import RuleContext, RuleFinding, SignalRule


class HydrationRule(SignalRule):
    rule_id = "hydration"
    priority = RulePriority.NUTRITION
    order = 4
    requires_nutrition = True

    def evaluate(self, context: RuleContext) -> RuleFinding | None:
        nutrition = context.nutrition
        if nutrition is None or not nutrition.hydration_concern:
            return None

        return RuleFinding(
            signal=Signal(
                type=SignalType.INFO,
                title="Watch your hydration",
                description=(
                    "At your current training volume, drink at least "
                    f"{nutrition.recommended_hydration_l:.1f}L of water per day"
                ),
                rule_id=self.rule_id,
            ),
        )
