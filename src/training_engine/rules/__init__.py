"""Overtraining signal rules, discovered by SignalRuleRegistry."""
