"""Intense session rule: more than 3 sessions above intensity 7 in 7 days."""

from __future__ import annotations

from training_engine.models.assessment import Recommendation, Signal
from training_engine.models.enums import (
    MAX_INTENSE_SESSIONS,
    RecommendationPriority,
    RulePriority,
    SignalType,
)
from training_engine.rules.base import RuleContext, RuleFinding, SignalRule


class IntenseSessionsRule(SignalRule):
    rule_id = "intense_sessions"
    priority = RulePriority.INTENSITY

    def evaluate(self, context: RuleContext) -> RuleFinding | None:
        count = context.windows.current.intense_sessions
        if count <= MAX_INTENSE_SESSIONS:
            return None

        return RuleFinding(
            signal=Signal(
                type=SignalType.CRITICAL,
                title="Too many intense sessions",
                description=f"{count} intense sessions in 7 days without enough recovery",
                rule_id=self.rule_id,
            ),
            recommendation=Recommendation(
                title="Swap intense sessions for endurance rides",
                description=(
                    f"Limit hard sessions to {MAX_INTENSE_SESSIONS} per week; "
                    "replace the rest with zone 2 endurance riding."
                ),
                priority=RecommendationPriority.HIGH,
                rule_id=self.rule_id,
            ),
        )
