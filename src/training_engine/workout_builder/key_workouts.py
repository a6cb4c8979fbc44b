"""Key workout templates — the static catalogue of sessions per phase.

Templates are fixed tables; only the climb name and its maximum
gradient are substituted when a program is built.
"""

from __future__ import annotations

from dataclasses import dataclass

from training_engine.models.climb import ClimbDescriptor
from training_engine.models.enums import PhaseType, WorkoutType, ZoneType
from training_engine.models.program import Interval, Workout, ZoneRange

_Z1 = ZoneRange(ZoneType.Z1)
_Z1_Z2 = ZoneRange(ZoneType.Z1, ZoneType.Z2)
_Z2_Z3 = ZoneRange(ZoneType.Z2, ZoneType.Z3)
_Z3 = ZoneRange(ZoneType.Z3)
_Z3_Z4 = ZoneRange(ZoneType.Z3, ZoneType.Z4)
_Z4 = ZoneRange(ZoneType.Z4)
_Z4_Z5 = ZoneRange(ZoneType.Z4, ZoneType.Z5)


@dataclass(frozen=True)
class IntervalTemplate:
    name: str
    duration_min: float
    zone: ZoneRange
    details: str = ""  # may reference {climb} and {max_gradient}


@dataclass(frozen=True)
class WorkoutTemplate:
    name: str
    type: WorkoutType
    duration_min: int
    tss: int
    intervals: tuple[IntervalTemplate, ...]
    description: str = ""  # may reference {climb}


@dataclass(frozen=True)
class PhaseTemplate:
    name: str
    focus: tuple[str, ...]
    description: str
    key_workouts: tuple[WorkoutTemplate, ...]


PHASE_TEMPLATES: dict[PhaseType, PhaseTemplate] = {
    PhaseType.BASE: PhaseTemplate(
        name="Base phase",
        focus=("Endurance", "Strength"),
        description="Build aerobic endurance and climbing-specific strength.",
        key_workouts=(
            WorkoutTemplate(
                name="Progressive long ride",
                type=WorkoutType.ENDURANCE,
                duration_min=180,
                tss=150,
                description="Long ride with a gradual rise in intensity.",
                intervals=(
                    IntervalTemplate("Warm-up", 20, _Z1_Z2),
                    IntervalTemplate("Main block", 140, _Z2_Z3),
                    IntervalTemplate("Cool-down", 20, _Z1),
                ),
            ),
            WorkoutTemplate(
                name="Hill strength repeats",
                type=WorkoutType.STRENGTH,
                duration_min=90,
                tss=100,
                description="Low-cadence strength intervals on a climb.",
                intervals=(
                    IntervalTemplate("Warm-up", 15, _Z1_Z2),
                    IntervalTemplate(
                        "Intervals", 60, _Z3_Z4, "6x5min Z3-Z4 at 50-60rpm / 5min recovery"
                    ),
                    IntervalTemplate("Cool-down", 15, _Z1),
                ),
            ),
        ),
    ),
    PhaseType.SPECIFIC: PhaseTemplate(
        name="Specific phase",
        focus=("Threshold", "Simulation"),
        description="Hold high intensity for the duration of the climb.",
        key_workouts=(
            WorkoutTemplate(
                name="Threshold intervals",
                type=WorkoutType.THRESHOLD,
                duration_min=90,
                tss=120,
                description="Raise power at lactate threshold.",
                intervals=(
                    IntervalTemplate("Warm-up", 15, _Z1_Z2),
                    IntervalTemplate("Intervals", 60, _Z4, "3x15min Z4 / 5min recovery"),
                    IntervalTemplate("Cool-down", 15, _Z1),
                ),
            ),
            WorkoutTemplate(
                name="Section simulation",
                type=WorkoutType.SPECIFIC,
                duration_min=120,
                tss=140,
                description="Simulate the hardest sections of {climb}.",
                intervals=(
                    IntervalTemplate("Warm-up", 20, _Z1_Z2),
                    IntervalTemplate("Section 1", 15, _Z4, "Simulate the {max_gradient}% ramp"),
                    IntervalTemplate("Recovery", 10, _Z1_Z2),
                    IntervalTemplate("Section 2", 20, _Z3, "Long section at moderate gradient"),
                    IntervalTemplate("Recovery", 10, _Z1_Z2),
                    IntervalTemplate("Section 3", 15, _Z4, "Final section with acceleration"),
                    IntervalTemplate("Cool-down", 30, _Z1_Z2),
                ),
            ),
        ),
    ),
    PhaseType.TAPER: PhaseTemplate(
        name="Taper phase",
        focus=("Sharpening", "Recovery"),
        description="Cut volume and keep intensity to arrive fresh.",
        key_workouts=(
            WorkoutTemplate(
                name="Intensity openers",
                type=WorkoutType.SHARPENING,
                duration_min=60,
                tss=70,
                description="Short, sharp efforts to hold form.",
                intervals=(
                    IntervalTemplate("Warm-up", 15, _Z1_Z2),
                    IntervalTemplate("Intervals", 30, _Z4_Z5, "6x2min Z5 / 3min recovery"),
                    IntervalTemplate("Cool-down", 15, _Z1),
                ),
            ),
            WorkoutTemplate(
                name="Final reconnaissance",
                type=WorkoutType.SPECIFIC,
                duration_min=120,
                tss=100,
                description="Ride {climb} at moderate intensity.",
                intervals=(
                    IntervalTemplate("Warm-up", 15, _Z1_Z2),
                    IntervalTemplate("Climb", 75, _Z2_Z3, "Reconnaissance at 70-80% of target effort"),
                    IntervalTemplate("Descent and ride home", 30, _Z1),
                ),
            ),
        ),
    ),
}


def _format_gradient(value: float) -> str:
    return f"{value:g}"


def build_key_workouts(phase: PhaseType, climb: ClimbDescriptor) -> tuple[Workout, ...]:
    """Instantiate a phase's key workouts for a specific climb."""
    substitutions = {
        "climb": climb.name,
        "max_gradient": _format_gradient(climb.max_gradient_pct),
    }
    return tuple(
        Workout(
            name=template.name,
            type=template.type,
            duration_min=template.duration_min,
            tss=template.tss,
            description=template.description.format(**substitutions),
            intervals=tuple(
                Interval(
                    name=interval.name,
                    duration_min=interval.duration_min,
                    zone=interval.zone,
                    details=interval.details.format(**substitutions),
                )
                for interval in template.intervals
            ),
        )
        for template in PHASE_TEMPLATES[phase].key_workouts
    )
