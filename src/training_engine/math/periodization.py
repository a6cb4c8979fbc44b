"""Periodization math for climb-specific programs.

Splits the weeks before the target date into BASE (40%), SPECIFIC (40%)
and TAPER (20%, at least one week). Any rounding drift goes to BASE so
the phases always add up to the program length.

References:
    Issurin (2010), New horizons for the methodology and physiology of
        training periodization.
    Mujika & Padilla (2003), Scientific bases for precompetition tapering.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta

from training_engine.math.rounding import round_half_up
from training_engine.models.climb import ClimbDescriptor
from training_engine.models.enums import (
    ENDURANCE_HIGH_DISTANCE_KM,
    MAX_PROGRAM_WEEKS,
    MAX_WEEKLY_SESSIONS,
    MIN_PROGRAM_WEEKS,
    MIN_TAPER_WEEKS,
    MIN_WEEKLY_SESSIONS,
    PHASE_SPLIT,
    PHASE_TSS,
    STRENGTH_HIGH_AVG_GRADIENT,
    THRESHOLD_HIGH_AVG_GRADIENT,
    VO2MAX_HIGH_MAX_GRADIENT,
    CapabilityLevel,
    PhaseType,
)
from training_engine.models.program import ProgramSummary, RequiredCapabilities, TrainingProgram

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PhaseSpec:
    """Specification for a single phase within the program."""

    phase: PhaseType
    duration_weeks: int


def compute_program_weeks(target_date: date, now: datetime) -> int:
    """Weeks until the target date, rounded up and capped at 12.

    A target date at or before ``now`` yields the 1-week minimum.
    """
    target = datetime.combine(target_date, time.min)
    if now.tzinfo is not None:
        target = target.replace(tzinfo=now.tzinfo)
    weeks = math.ceil((target - now) / timedelta(weeks=1))
    if weeks < MIN_PROGRAM_WEEKS:
        logger.warning(
            "Target date %s is not after %s; using a %d-week program",
            target_date.isoformat(),
            now.isoformat(),
            MIN_PROGRAM_WEEKS,
        )
        weeks = MIN_PROGRAM_WEEKS
    return min(MAX_PROGRAM_WEEKS, weeks)


def split_phase_weeks(total_weeks: int) -> dict[PhaseType, int]:
    """Split program weeks 40/40/20 with a one-week taper floor.

    Example: 10 weeks -> BASE 4, SPECIFIC 4, TAPER 2.

    Raises:
        ValueError: If total_weeks < MIN_PROGRAM_WEEKS.
    """
    if total_weeks < MIN_PROGRAM_WEEKS:
        raise ValueError(
            f"Program must be at least {MIN_PROGRAM_WEEKS} week, got {total_weeks}"
        )

    specific = round_half_up(total_weeks * PHASE_SPLIT[PhaseType.SPECIFIC])
    taper = max(MIN_TAPER_WEEKS, round_half_up(total_weeks * PHASE_SPLIT[PhaseType.TAPER]))
    # Short programs: taper first, then specific, base absorbs the rest
    specific = min(specific, total_weeks - taper)
    base = total_weeks - specific - taper

    return {
        PhaseType.BASE: base,
        PhaseType.SPECIFIC: specific,
        PhaseType.TAPER: taper,
    }


def allocate_phases(total_weeks: int) -> list[PhaseSpec]:
    """Phases in chronological order, skipping any with zero weeks."""
    return [
        PhaseSpec(phase=phase_type, duration_weeks=duration)
        for phase_type, duration in split_phase_weeks(total_weeks).items()
        if duration > 0
    ]


def weekly_tss_target(phase: PhaseType, ftp_watts: float) -> int:
    """BASE 300 + FTP/3, SPECIFIC 350 + FTP/3, TAPER 200 + FTP/4."""
    offset, divisor = PHASE_TSS[phase]
    return offset + round_half_up(ftp_watts / divisor)


def required_capabilities(climb: ClimbDescriptor) -> RequiredCapabilities:
    """Capability levels a climb demands, from its gradient and length."""

    def level(is_high: bool) -> CapabilityLevel:
        return CapabilityLevel.HIGH if is_high else CapabilityLevel.MEDIUM

    return RequiredCapabilities(
        threshold=level(climb.avg_gradient_pct > THRESHOLD_HIGH_AVG_GRADIENT),
        vo2max=level(climb.max_gradient_pct > VO2MAX_HIGH_MAX_GRADIENT),
        endurance=level(climb.distance_km > ENDURANCE_HIGH_DISTANCE_KM),
        strength=level(climb.avg_gradient_pct > STRENGTH_HIGH_AVG_GRADIENT),
        technique=climb.technicality,
    )


def sessions_per_week(weekly_hours: float) -> int:
    """Roughly one session per two hours, between 3 and 5."""
    return max(MIN_WEEKLY_SESSIONS, min(MAX_WEEKLY_SESSIONS, round_half_up(weekly_hours / 2)))


def summarize_program(program: TrainingProgram) -> ProgramSummary:
    """Totals shown on the program review screen."""
    sessions = sessions_per_week(program.weekly_hours)
    return ProgramSummary(
        total_hours=sum(p.duration_weeks * program.weekly_hours for p in program.phases),
        total_tss=sum(p.duration_weeks * p.weekly_tss for p in program.phases),
        workouts_count=sum(p.duration_weeks * sessions for p in program.phases),
        key_workouts_count=sum(len(p.key_workouts) for p in program.phases),
    )
