"""TrainingEngine — the facade the dashboard calls for every analytics view."""

from __future__ import annotations

import logging
import re
from datetime import datetime, timedelta
from typing import Iterable

import numpy as np

from training_engine.math.capability import match_climb
from training_engine.math.nutrition import analyze_nutrition
from training_engine.math.periodization import (
    allocate_phases,
    compute_program_weeks,
    required_capabilities,
    summarize_program,
    weekly_tss_target,
)
from training_engine.math.progression import (
    build_benchmarks,
    classify_performance_level,
    detect_key_events,
    generate_progression,
    project_future,
)
from training_engine.math.training_load import (
    aggregate_windows,
    calculate_acwr_volume,
    calculate_ewma_acwr,
    calculate_monotony,
    count_rest_days,
    daily_minutes,
    recovery_score,
    status_from_signals,
    to_naive_utc,
    volume_trend_pct,
)
from training_engine.models.activity import Activity
from training_engine.models.assessment import (
    LoadMetrics,
    OvertrainingAssessment,
    Recommendation,
    Signal,
)
from training_engine.models.athlete import NutritionProfile, UserCapabilities
from training_engine.models.climb import ClimbDescriptor, ClimbMatch
from training_engine.models.enums import (
    AssessmentStatus,
    PerformanceMetric,
    SignalType,
    TimeRange,
)
from training_engine.models.program import (
    ClimbCharacteristics,
    Phase,
    ProgramSummary,
    TrainingProgram,
)
from training_engine.models.projection import PerformanceProjection
from training_engine.registry import SignalRuleRegistry
from training_engine.rules.base import RuleContext
from training_engine.workout_builder import (
    assign_power_targets,
    build_key_workouts,
    build_weekly_schedule,
)
from training_engine.workout_builder.key_workouts import PHASE_TEMPLATES

logger = logging.getLogger(__name__)

_INSUFFICIENT_DATA = Signal(
    type=SignalType.INFO,
    title="Insufficient data",
    description="No activities recorded in the last two weeks; log some rides to get an assessment.",
)


def _slug(text: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", text.lower()).strip("-") or "climb"


class TrainingEngine:
    """Runs overtraining detection, projections, climb matching and planning.

    Every call is a pure transform of its arguments; ``now`` is always
    passed in. The engine holds only its signal-rule registry and the
    jitter seed.

    Usage:
        engine = TrainingEngine()
        assessment = engine.assess_overtraining(activities, now)
        program = engine.generate_program(capabilities, climb, now)
    """

    def __init__(
        self,
        seed: int | None = None,
        registry: SignalRuleRegistry | None = None,
    ) -> None:
        self.seed = seed
        self.registry = registry or SignalRuleRegistry()

        # Auto-discover rules if using default registry
        if registry is None:
            self.registry.discover_rules()

    # ------------------------------------------------------------------
    # Overtraining
    # ------------------------------------------------------------------

    def assess_overtraining(
        self,
        activities: Iterable[Activity],
        now: datetime,
        nutrition: NutritionProfile | None = None,
    ) -> OvertrainingAssessment:
        """Compare the last 7 days with the 7 before and raise load signals.

        Args:
            activities: Activity history; only the last 14 days matter
                for the signals, the last 28 for the EWMA context metrics.
            now: Reference instant; offset-aware values are compared in UTC.
            nutrition: Optional nutrition profile to cross-reference.

        Returns:
            OvertrainingAssessment. With no activities in either window the
            status is OPTIMAL and the only signal is "Insufficient data".
        """
        now = to_naive_utc(now)
        activities = list(activities)
        windows = aggregate_windows(activities, now)

        if windows.current.is_empty and windows.previous.is_empty:
            logger.debug("No activities in the last 14 days; returning neutral assessment")
            return OvertrainingAssessment(
                status=AssessmentStatus.OPTIMAL,
                signals=(_INSUFFICIENT_DATA,),
                recovery_score=recovery_score(AssessmentStatus.OPTIMAL),
                insufficient_data=True,
            )

        current_volume = windows.current.volume_minutes
        previous_volume = windows.previous.volume_minutes
        acwr = calculate_acwr_volume(current_volume, previous_volume)
        rest_days = count_rest_days(windows.current, now)
        nutrition_assessment = (
            analyze_nutrition(nutrition, current_volume) if nutrition is not None else None
        )

        context = RuleContext(
            windows=windows,
            acwr_volume=acwr,
            rest_days=rest_days,
            nutrition=nutrition_assessment,
        )

        signals: list[Signal] = []
        recommendations: list[Recommendation] = []
        for rule in self.registry.get_all_rules():
            if not rule.is_applicable(context):
                continue
            finding = rule.evaluate(context)
            if finding is None:
                continue
            if finding.signal is not None:
                signals.append(finding.signal)
            if finding.recommendation is not None:
                recommendations.append(finding.recommendation)

        status = status_from_signals(s.type for s in signals)
        daily = daily_minutes(activities, now)

        metrics = LoadMetrics(
            acwr=acwr,
            rest_days=rest_days,
            intense_sessions=windows.current.intense_sessions,
            volume_trend_pct=volume_trend_pct(current_volume, previous_volume),
            nutrition=nutrition_assessment,
            current_volume_min=current_volume,
            previous_volume_min=previous_volume,
            current_avg_hr=windows.current.mean_heart_rate,
            previous_avg_hr=windows.previous.mean_heart_rate,
            ewma_acwr=calculate_ewma_acwr(daily),
            monotony=calculate_monotony(daily),
        )

        logger.debug(
            "Assessment: status=%s acwr=%.2f signals=%d recommendations=%d",
            status.name,
            acwr,
            len(signals),
            len(recommendations),
        )
        return OvertrainingAssessment(
            status=status,
            signals=tuple(signals),
            recommendations=tuple(recommendations),
            metrics=metrics,
            recovery_score=recovery_score(status),
        )

    # ------------------------------------------------------------------
    # Performance projection
    # ------------------------------------------------------------------

    def project_performance(
        self,
        metric: PerformanceMetric,
        activities: Iterable[Activity],
        time_range: TimeRange,
        now: datetime,
    ) -> PerformanceProjection:
        """Progression series, forecasts, level, key events and benchmarks.

        The series is modelled from the metric's baseline; activities only
        contribute the count of rides inside the window.
        """
        now = to_naive_utc(now)
        window_start = now - timedelta(days=int(time_range))
        activity_count = sum(
            1
            for a in activities
            if isinstance(a.date, datetime)
            and window_start <= to_naive_utc(a.date) <= now
        )

        rng = np.random.default_rng(self.seed) if self.seed is not None else None
        progression = generate_progression(metric, time_range, now, rng=rng)
        current = progression[-1].value

        logger.debug(
            "Projection: metric=%s range=%dd points=%d",
            metric.value,
            int(time_range),
            len(progression),
        )
        return PerformanceProjection(
            metric=metric,
            current=current,
            progression=progression,
            future_projections=project_future(current),
            performance_level=classify_performance_level(current, metric),
            key_events=detect_key_events(progression, metric),
            benchmarks=build_benchmarks(metric, current),
            time_range=time_range,
            activity_count=activity_count,
        )

    # ------------------------------------------------------------------
    # Climb matching and program generation
    # ------------------------------------------------------------------

    def match_climb(
        self, capabilities: UserCapabilities, climb: ClimbDescriptor
    ) -> ClimbMatch:
        return match_climb(capabilities, climb)

    def generate_program(
        self,
        capabilities: UserCapabilities,
        climb: ClimbDescriptor,
        now: datetime,
    ) -> TrainingProgram:
        """Build a climb-specific program ending on the athlete's race date.

        Raises:
            ValueError: If ``capabilities.race_date`` is not set.
        """
        if capabilities.race_date is None:
            raise ValueError("A race date is required to generate a program")

        total_weeks = compute_program_weeks(capabilities.race_date, now)
        match = self.match_climb(capabilities, climb)

        phases: list[Phase] = []
        for spec in allocate_phases(total_weeks):
            template = PHASE_TEMPLATES[spec.phase]
            key_workouts = tuple(
                assign_power_targets(workout, capabilities.ftp_watts)
                for workout in build_key_workouts(spec.phase, climb)
            )
            phases.append(
                Phase(
                    phase_type=spec.phase,
                    name=template.name,
                    duration_weeks=spec.duration_weeks,
                    focus=template.focus,
                    weekly_tss=weekly_tss_target(spec.phase, capabilities.ftp_watts),
                    key_workouts=key_workouts,
                    description=template.description,
                )
            )

        characteristics = ClimbCharacteristics(
            total_distance_km=climb.distance_km,
            total_elevation_m=climb.elevation_m,
            max_gradient_pct=climb.max_gradient_pct,
            avg_gradient_pct=climb.avg_gradient_pct,
            difficulty=climb.difficulty,
            estimated_minutes=match.estimated_minutes,
            section_count=len(climb.sections),
        )

        program_id = f"{_slug(climb.climb_id or climb.name)}-{now.strftime('%Y%m%d%H%M%S')}"
        logger.debug(
            "Program %s: %d weeks, %d phases, match score %d",
            program_id,
            total_weeks,
            len(phases),
            match.match_score,
        )
        return TrainingProgram(
            id=program_id,
            name=f"{climb.name} preparation",
            duration_weeks=total_weeks,
            target_date=capabilities.race_date,
            climb_characteristics=characteristics,
            required_capabilities=required_capabilities(climb),
            phases=tuple(phases),
            weekly_schedule=build_weekly_schedule(
                capabilities.preferred_training_days, capabilities.weekly_hours
            ),
            climb_name=climb.name,
            weekly_hours=capabilities.weekly_hours,
            description=(
                f"{total_weeks}-week program to prepare {climb.name} "
                f"({climb.distance_km:g} km at {climb.avg_gradient_pct:g}%)."
            ),
        )

    def summarize(self, program: TrainingProgram) -> ProgramSummary:
        return summarize_program(program)
