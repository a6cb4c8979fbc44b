"""Tests for the key workout catalogue."""

from __future__ import annotations

import pytest

from training_engine.models.climb import ClimbDescriptor
from training_engine.models.enums import PhaseType, WorkoutType, ZoneType
from training_engine.workout_builder.key_workouts import PHASE_TEMPLATES, build_key_workouts


class TestPhaseTemplates:
    def test_every_phase_has_a_template(self) -> None:
        assert set(PHASE_TEMPLATES) == set(PhaseType)

    @pytest.mark.parametrize("phase", list(PhaseType))
    def test_one_or_two_key_workouts(self, phase: PhaseType) -> None:
        assert 1 <= len(PHASE_TEMPLATES[phase].key_workouts) <= 2

    @pytest.mark.parametrize("phase", list(PhaseType))
    def test_interval_durations_add_up(self, phase: PhaseType) -> None:
        for template in PHASE_TEMPLATES[phase].key_workouts:
            assert sum(i.duration_min for i in template.intervals) == template.duration_min


class TestBuildKeyWorkouts:
    def test_base_phase(self, hard_climb: ClimbDescriptor) -> None:
        workouts = build_key_workouts(PhaseType.BASE, hard_climb)
        assert [w.type for w in workouts] == [WorkoutType.ENDURANCE, WorkoutType.STRENGTH]
        assert workouts[0].name == "Progressive long ride"
        assert workouts[0].tss == 150

    def test_climb_name_and_gradient_substituted(self, hard_climb: ClimbDescriptor) -> None:
        simulation = build_key_workouts(PhaseType.SPECIFIC, hard_climb)[1]
        assert simulation.description == "Simulate the hardest sections of Alpe d'Huez."
        assert simulation.intervals[1].details == "Simulate the 13% ramp"

    def test_fractional_gradient(self) -> None:
        climb = ClimbDescriptor(
            distance_km=10, elevation_m=800, avg_gradient_pct=8, max_gradient_pct=11.5,
            name="Col du Test",
        )
        simulation = build_key_workouts(PhaseType.SPECIFIC, climb)[1]
        assert simulation.intervals[1].details == "Simulate the 11.5% ramp"

    def test_taper_reconnaissance(self, hard_climb: ClimbDescriptor) -> None:
        recon = build_key_workouts(PhaseType.TAPER, hard_climb)[1]
        assert recon.type == WorkoutType.SPECIFIC
        assert "Alpe d'Huez" in recon.description

    def test_zone_labels(self, hard_climb: ClimbDescriptor) -> None:
        threshold = build_key_workouts(PhaseType.SPECIFIC, hard_climb)[0]
        assert [i.zone.label for i in threshold.intervals] == ["Z1-Z2", "Z4", "Z1"]
        assert threshold.intervals[1].zone.upper == ZoneType.Z4

    def test_templates_without_targets(self, hard_climb: ClimbDescriptor) -> None:
        for workout in build_key_workouts(PhaseType.BASE, hard_climb):
            assert all(i.power_low_w is None for i in workout.intervals)
