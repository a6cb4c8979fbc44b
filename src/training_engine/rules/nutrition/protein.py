"""Protein rule: intake below 80% of the volume-adjusted target."""

from __future__ import annotations

from training_engine.models.assessment import Recommendation, Signal
from training_engine.models.enums import RecommendationPriority, RulePriority, SignalType
from training_engine.rules.base import RuleContext, RuleFinding, SignalRule


class ProteinDeficitRule(SignalRule):
    rule_id = "protein_deficit"
    priority = RulePriority.NUTRITION
    order = 0
    requires_nutrition = True

    def evaluate(self, context: RuleContext) -> RuleFinding | None:
        nutrition = context.nutrition
        if nutrition is None or not nutrition.protein_deficit:
            return None

        per_kg = nutrition.recommended_protein_g / nutrition.weight_kg
        return RuleFinding(
            signal=Signal(
                type=SignalType.WARNING,
                title="Low protein intake",
                description=(
                    f"Your daily protein intake of {nutrition.current_protein_g}g is below "
                    f"the {nutrition.recommended_protein_g}g recommended for your training load"
                ),
                rule_id=self.rule_id,
            ),
            recommendation=Recommendation(
                title="Increase protein",
                description=(
                    f"Aim for {nutrition.recommended_protein_g}g of protein per day "
                    f"({per_kg:.1f}g/kg) to support muscle recovery."
                ),
                priority=RecommendationPriority.HIGH,
                rule_id=self.rule_id,
            ),
        )
