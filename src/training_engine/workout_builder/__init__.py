"""Workout builder — key workout catalogue, power targets and weekly schedule."""

from training_engine.workout_builder.key_workouts import build_key_workouts
from training_engine.workout_builder.power_targets import assign_power_targets
from training_engine.workout_builder.weekly_schedule import build_weekly_schedule

__all__ = ["assign_power_targets", "build_key_workouts", "build_weekly_schedule"]
