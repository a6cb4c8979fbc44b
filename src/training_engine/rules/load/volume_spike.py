"""Volume spike rule: week-over-week training time ratio.

Reference:
    Gabbett (2016). The training-injury prevention paradox: should athletes
    be training smarter and harder? Br J Sports Med 50(5):273-280.

Thresholds:
    ratio > 1.5       → CRITICAL: sudden volume increase
    1.3 < ratio ≤ 1.5 → WARNING: high training volume
"""

from __future__ import annotations

from training_engine.models.assessment import Recommendation, Signal
from training_engine.models.enums import (
    ACWR_CRITICAL_THRESHOLD,
    ACWR_WARNING_THRESHOLD,
    RecommendationPriority,
    RulePriority,
    SignalType,
)
from training_engine.rules.base import RuleContext, RuleFinding, SignalRule


class VolumeSpikeRule(SignalRule):
    """Flags sudden increases of training time against the previous week."""

    rule_id = "volume_spike"
    priority = RulePriority.VOLUME

    def evaluate(self, context: RuleContext) -> RuleFinding | None:
        acwr = context.acwr_volume
        increase = f"{(acwr - 1) * 100:.0f}%"

        if acwr > ACWR_CRITICAL_THRESHOLD:
            return RuleFinding(
                signal=Signal(
                    type=SignalType.CRITICAL,
                    title="Sudden volume increase",
                    description=f"Training time up {increase} on the previous week",
                    rule_id=self.rule_id,
                ),
                recommendation=Recommendation(
                    title="Reduce training volume",
                    description=(
                        "Cut next week's training time by 20-30% and keep "
                        "rides at endurance intensity until the load settles."
                    ),
                    priority=RecommendationPriority.HIGH,
                    rule_id=self.rule_id,
                ),
            )

        if acwr > ACWR_WARNING_THRESHOLD:
            return RuleFinding(
                signal=Signal(
                    type=SignalType.WARNING,
                    title="High training volume",
                    description=f"Training time up {increase} on the previous week",
                    rule_id=self.rule_id,
                ),
                recommendation=Recommendation(
                    title="Hold volume steady",
                    description="Keep next week's training time at this week's level.",
                    priority=RecommendationPriority.MEDIUM,
                    rule_id=self.rule_id,
                ),
            )

        return None
