"""Rest day rule: fewer than 2 activity-free days in the last 7 calendar days."""

from __future__ import annotations

from training_engine.models.assessment import Recommendation, Signal
from training_engine.models.enums import (
    MIN_REST_DAYS,
    RecommendationPriority,
    RulePriority,
    SignalType,
)
from training_engine.rules.base import RuleContext, RuleFinding, SignalRule


class RestDaysRule(SignalRule):
    rule_id = "rest_days"
    priority = RulePriority.RECOVERY

    def evaluate(self, context: RuleContext) -> RuleFinding | None:
        if context.rest_days >= MIN_REST_DAYS:
            return None

        return RuleFinding(
            signal=Signal(
                type=SignalType.WARNING,
                title="Insufficient recovery",
                description=f"Fewer than {MIN_REST_DAYS} full rest days this week",
                rule_id=self.rule_id,
            ),
            recommendation=Recommendation(
                title="Schedule rest days",
                description=f"Plan at least {MIN_REST_DAYS} days off the bike each week.",
                priority=RecommendationPriority.MEDIUM,
                rule_id=self.rule_id,
            ),
        )
