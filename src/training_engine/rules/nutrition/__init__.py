"""Nutrition rules cross-referencing intake with training volume."""
