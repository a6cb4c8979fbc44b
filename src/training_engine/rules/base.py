"""Abstract base class for overtraining signal rules."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

from training_engine.models.activity import WindowedActivities
from training_engine.models.assessment import NutritionAssessment, Recommendation, Signal
from training_engine.models.enums import RulePriority


@dataclass(frozen=True)
class RuleContext:
    """Everything a signal rule may inspect for one assessment."""

    windows: WindowedActivities
    acwr_volume: float
    rest_days: int
    nutrition: NutritionAssessment | None = None


@dataclass(frozen=True)
class RuleFinding:
    """What a rule contributes: a banner signal, advice, or both."""

    signal: Signal | None = None
    recommendation: Recommendation | None = None


class SignalRule(ABC):
    """Base class for all overtraining signal rules.

    Rules are discovered automatically by the SignalRuleRegistry and
    evaluated in ``(priority, order)`` order, which fixes the order of
    signals and recommendations in the assessment.

    Subclasses must define:
        rule_id: unique identifier (e.g. "volume_spike")
        priority: RulePriority tier
        order: position within the tier
        requires_nutrition: skip the rule when no nutrition data is present
        evaluate(): the rule's decision logic
    """

    rule_id: str
    priority: RulePriority
    order: int = 0
    requires_nutrition: bool = False

    def is_applicable(self, context: RuleContext) -> bool:
        return not self.requires_nutrition or context.nutrition is not None

    @property
    def sort_key(self) -> tuple[int, int]:
        return (int(self.priority), self.order)

    @abstractmethod
    def evaluate(self, context: RuleContext) -> RuleFinding | None:
        """Return a RuleFinding when the rule fires, None otherwise."""
        ...
