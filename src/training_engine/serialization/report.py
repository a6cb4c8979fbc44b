"""Dashboard report serialization for engine results.

Converts assessments, projections, programs and program summaries into
JSON-ready dicts using the camelCase keys the dashboard widgets read.
Enums render as lowercase names; dates and datetimes as ISO strings.
Fields without data (e.g. nutrition when no profile was given) are
omitted rather than zeroed.

All functions are pure (no I/O).
"""

from __future__ import annotations

import json
from datetime import date
from enum import Enum

from training_engine.models.assessment import (
    LoadMetrics,
    NutritionAssessment,
    OvertrainingAssessment,
    Recommendation,
    Signal,
)
from training_engine.models.climb import ClimbMatch
from training_engine.models.program import (
    Interval,
    Phase,
    ProgramSummary,
    RestDay,
    TrainingProgram,
    Workout,
)
from training_engine.models.projection import PerformanceProjection

ReportObject = (
    OvertrainingAssessment | PerformanceProjection | TrainingProgram | ProgramSummary | ClimbMatch
)


def to_report_dict(obj: ReportObject) -> dict:
    """Convert an engine result to a JSON-ready dict.

    Raises:
        TypeError: If ``obj`` is not a supported result type.
    """
    if isinstance(obj, OvertrainingAssessment):
        return _assessment(obj)
    if isinstance(obj, PerformanceProjection):
        return _projection(obj)
    if isinstance(obj, TrainingProgram):
        return _program(obj)
    if isinstance(obj, ProgramSummary):
        return _summary(obj)
    if isinstance(obj, ClimbMatch):
        return _climb_match(obj)
    raise TypeError(f"Cannot serialize {type(obj).__name__} to a report")


def to_report_json(obj: ReportObject, indent: int = 2) -> str:
    """Convert an engine result to a JSON string."""
    return json.dumps(to_report_dict(obj), indent=indent)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _enum(value: Enum) -> str:
    return value.name.lower()


def _iso(value: date) -> str:
    return value.isoformat()


def _assessment(assessment: OvertrainingAssessment) -> dict:
    result = {
        "status": _enum(assessment.status),
        "signals": [_signal(s) for s in assessment.signals],
        "recommendations": [_recommendation(r) for r in assessment.recommendations],
        "recoveryScore": assessment.recovery_score,
        "insufficientData": assessment.insufficient_data,
    }
    if assessment.metrics is not None:
        result["metrics"] = _metrics(assessment.metrics)
    return result


def _signal(signal: Signal) -> dict:
    return {
        "type": _enum(signal.type),
        "title": signal.title,
        "description": signal.description,
    }


def _recommendation(recommendation: Recommendation) -> dict:
    return {
        "title": recommendation.title,
        "description": recommendation.description,
        "priority": _enum(recommendation.priority),
    }


def _metrics(metrics: LoadMetrics) -> dict:
    result = {
        "acwr": metrics.acwr,
        "restDays": metrics.rest_days,
        "intenseSessions": metrics.intense_sessions,
        "volumeTrendPct": metrics.volume_trend_pct,
        "currentVolumeMin": metrics.current_volume_min,
        "previousVolumeMin": metrics.previous_volume_min,
        "currentAvgHr": metrics.current_avg_hr,
        "previousAvgHr": metrics.previous_avg_hr,
        "ewmaAcwr": metrics.ewma_acwr,
        "monotony": metrics.monotony,
    }
    if metrics.nutrition is not None:
        result["nutrition"] = _nutrition(metrics.nutrition)
    return result


def _nutrition(nutrition: NutritionAssessment) -> dict:
    return {
        "trainingVolumeMinutes": nutrition.training_volume_minutes,
        "estimatedDailyCalories": nutrition.estimated_daily_calories,
        "calorieDeficit": nutrition.calorie_deficit,
        "proteinFactor": nutrition.protein_factor,
        "recommendedProtein": nutrition.recommended_protein_g,
        "currentProtein": nutrition.current_protein_g,
        "proteinDeficit": nutrition.protein_deficit,
        "recommendedHydrationL": nutrition.recommended_hydration_l,
        "currentCarbsPct": nutrition.current_carbs_pct,
        "recommendedCarbsPct": nutrition.recommended_carbs_pct,
        "carbsRatioLow": nutrition.carbs_ratio_low,
        "recommendedCarbsGrams": nutrition.recommended_carbs_g,
        "preWorkoutNutrition": nutrition.pre_workout_nutrition,
        "hydrationConcern": nutrition.hydration_concern,
    }


def _projection(projection: PerformanceProjection) -> dict:
    result = {
        "metricId": projection.metric_id,
        "timeRangeDays": int(projection.time_range),
        "current": projection.current,
        "progression": [
            {"date": _iso(p.date), "value": p.value} for p in projection.progression
        ],
        "futureProjections": [
            {"daysAhead": f.days_ahead, "value": f.value}
            for f in projection.future_projections
        ],
        "keyEvents": [
            {
                "date": _iso(e.date),
                "value": e.value,
                "improvementPct": e.improvement_pct,
                "description": e.description,
            }
            for e in projection.key_events
        ],
        "benchmarks": [
            {"category": b.category, "value": b.value, "differencePct": b.difference_pct}
            for b in projection.benchmarks
        ],
        "activityCount": projection.activity_count,
    }
    level = projection.performance_level
    if level is not None:
        result["performanceLevel"] = {
            "label": level.label,
            "index": level.index,
            "max": level.max,
        }
    return result


def _program(program: TrainingProgram) -> dict:
    climb = program.climb_characteristics
    caps = program.required_capabilities
    return {
        "id": program.id,
        "name": program.name,
        "description": program.description,
        "climbName": program.climb_name,
        "durationWeeks": program.duration_weeks,
        "targetDate": _iso(program.target_date),
        "weeklyHours": program.weekly_hours,
        "climbCharacteristics": {
            "totalDistanceKm": climb.total_distance_km,
            "totalElevationM": climb.total_elevation_m,
            "maxGradientPct": climb.max_gradient_pct,
            "avgGradientPct": climb.avg_gradient_pct,
            "difficulty": _enum(climb.difficulty),
            "estimatedMinutes": climb.estimated_minutes,
            "sectionCount": climb.section_count,
        },
        "requiredCapabilities": {
            "threshold": _enum(caps.threshold),
            "vo2max": _enum(caps.vo2max),
            "endurance": _enum(caps.endurance),
            "strength": _enum(caps.strength),
            "technique": _enum(caps.technique),
        },
        "phases": [_phase(p) for p in program.phases],
        "weeklySchedule": {
            _enum(day): _schedule_entry(entry)
            for day, entry in program.weekly_schedule.items()
        },
    }


def _phase(phase: Phase) -> dict:
    return {
        "type": _enum(phase.phase_type),
        "name": phase.name,
        "description": phase.description,
        "durationWeeks": phase.duration_weeks,
        "focus": list(phase.focus),
        "weeklyTSS": phase.weekly_tss,
        "keyWorkouts": [_workout(w) for w in phase.key_workouts],
    }


def _schedule_entry(entry: Workout | RestDay) -> dict:
    if isinstance(entry, RestDay):
        return {"name": entry.name, "type": _enum(entry.type), "durationMin": 0, "tss": 0}
    return _workout(entry)


def _workout(workout: Workout) -> dict:
    result = {
        "name": workout.name,
        "type": _enum(workout.type),
        "durationMin": workout.duration_min,
        "tss": workout.tss,
        "intervals": [_interval(i) for i in workout.intervals],
    }
    if workout.description:
        result["description"] = workout.description
    return result


def _interval(interval: Interval) -> dict:
    result = {
        "name": interval.name,
        "durationMin": interval.duration_min,
        "zone": interval.zone.label,
    }
    if interval.details:
        result["details"] = interval.details
    if interval.power_low_w is not None:
        result["powerLowW"] = interval.power_low_w
        result["powerHighW"] = interval.power_high_w
    return result


def _summary(summary: ProgramSummary) -> dict:
    return {
        "totalHours": summary.total_hours,
        "totalTSS": summary.total_tss,
        "workoutsCount": summary.workouts_count,
        "keyWorkoutsCount": summary.key_workouts_count,
    }


def _climb_match(match: ClimbMatch) -> dict:
    return {
        "matchScore": match.match_score,
        "difficultyLabel": match.difficulty_label,
        "ftpPerKg": match.ftp_per_kg,
        "estimatedMinutes": match.estimated_minutes,
        "breakdown": {
            "tier": match.tier_score,
            "experience": match.experience_bonus,
            "weeklyHours": match.hours_bonus,
            "strength": match.strength_bonus,
            "limitingFactors": -match.limiting_penalty,
        },
    }
