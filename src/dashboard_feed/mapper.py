"""Pure functions mapping raw dashboard JSON records to engine models.

No I/O — takes the dicts the dashboard stores (camelCase keys) and
returns frozen ``training_engine`` models. Timestamps with a UTC offset
are converted to naive UTC so they compare with the engine's ``now``.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Any, Iterable, Optional

from dashboard_feed.exceptions import MalformedRecordError
from training_engine.math.training_load import to_naive_utc
from training_engine.models import (
    Activity,
    ClimbDescriptor,
    ClimbDifficulty,
    ClimbSection,
    ExperienceLevel,
    LimitingFactor,
    Macronutrients,
    NutritionProfile,
    PerformanceMetric,
    Technicality,
    TimeRange,
    UserCapabilities,
)
from training_engine.workout_builder.weekly_schedule import normalize_training_days

logger = logging.getLogger(__name__)

_TIME_RANGES = {
    "1m": TimeRange.ONE_MONTH,
    "3m": TimeRange.THREE_MONTHS,
    "6m": TimeRange.SIX_MONTHS,
    "1y": TimeRange.ONE_YEAR,
}


def parse_timestamp(value: Any) -> datetime:
    """Parse an ISO-8601 string (``Z`` suffix allowed) or pass a datetime through.

    Raises:
        ValueError: If the value is not a usable timestamp.
    """
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str) and value:
        text = value[:-1] + "+00:00" if value.endswith("Z") else value
        parsed = datetime.fromisoformat(text)
    else:
        raise ValueError(f"Not a timestamp: {value!r}")

    return to_naive_utc(parsed)


def parse_metric(value: str) -> PerformanceMetric:
    """Map a metric id such as ``"ftp"`` to PerformanceMetric.

    Raises:
        ValueError: If the metric id is unknown.
    """
    return PerformanceMetric(value)


def parse_time_range(value: str) -> TimeRange:
    """Map a range selector (``"1m"``, ``"3m"``, ``"6m"``, ``"1y"``) to TimeRange."""
    try:
        return _TIME_RANGES[value]
    except KeyError:
        raise ValueError(
            f"Unknown time range {value!r}; expected one of {sorted(_TIME_RANGES)}"
        ) from None


# ---------------------------------------------------------------------------
# Activities
# ---------------------------------------------------------------------------


def map_activity(raw: dict[str, Any], record_index: int | None = None) -> Activity:
    """Map one activity record.

    Raises:
        MalformedRecordError: If the date is missing or unparseable, or a
            numeric field holds a non-numeric value.
    """
    if not isinstance(raw, dict):
        raise MalformedRecordError("record", record_index, "not an object")
    try:
        when = parse_timestamp(raw.get("date"))
    except ValueError as exc:
        raise MalformedRecordError("date", record_index, str(exc)) from exc

    return Activity(
        date=when,
        duration_seconds=_optional_float(raw, "durationSeconds", record_index) or 0.0,
        distance_km=_optional_float(raw, "distanceKm", record_index),
        average_speed_kmh=_optional_float(raw, "averageSpeedKmh", record_index),
        heart_rate_avg=_optional_float(raw, "heartRateAvg", record_index),
        intensity=_optional_float(raw, "intensity", record_index),
        elevation_gain_m=_optional_float(raw, "elevationGainM", record_index),
    )


def map_activities(raws: Iterable[dict[str, Any]]) -> list[Activity]:
    """Map an activity feed, skipping (and logging) malformed records."""
    activities: list[Activity] = []
    for index, raw in enumerate(raws):
        try:
            activities.append(map_activity(raw, index))
        except MalformedRecordError as exc:
            logger.warning("Skipping activity: %s", exc)
    return activities


# ---------------------------------------------------------------------------
# Athlete and nutrition
# ---------------------------------------------------------------------------


def map_capabilities(raw: dict[str, Any]) -> UserCapabilities:
    """Map the capabilities form.

    Raises:
        MalformedRecordError: If FTP or weight is missing, or an enum
            value is not recognised.
    """
    ftp = _optional_float(raw, "ftpWatts")
    weight = _optional_float(raw, "weightKg")
    if ftp is None:
        raise MalformedRecordError("ftpWatts", reason="required")
    if weight is None:
        raise MalformedRecordError("weightKg", reason="required")

    defaults = UserCapabilities(ftp_watts=ftp, weight_kg=weight)
    weekly_hours = _optional_float(raw, "weeklyHours")
    days = raw.get("preferredTrainingDays")

    return UserCapabilities(
        ftp_watts=ftp,
        weight_kg=weight,
        experience_level=_enum_by_name(
            ExperienceLevel, raw.get("experienceLevel"), "experienceLevel"
        ) or defaults.experience_level,
        weekly_hours=weekly_hours if weekly_hours is not None else defaults.weekly_hours,
        preferred_training_days=(
            frozenset(normalize_training_days(days))
            if days is not None
            else defaults.preferred_training_days
        ),
        race_date=_optional_date(raw.get("raceDateISO") or raw.get("raceDate"), "raceDateISO"),
        strength_training=bool(raw.get("strengthTraining", False)),
        limiting_factors=frozenset(
            _limiting_factor(value) for value in raw.get("limitingFactors") or ()
        ),
    )


def map_nutrition_profile(raw: dict[str, Any]) -> NutritionProfile:
    """Map a nutrition profile; every field is optional."""
    macros_raw = raw.get("macronutrients")
    macros: Optional[Macronutrients] = None
    if isinstance(macros_raw, dict):
        macros = Macronutrients(
            carbs_pct=_optional_float(macros_raw, "carbsPct") or 0.0,
            protein_pct=_optional_float(macros_raw, "proteinPct") or 0.0,
            fat_pct=_optional_float(macros_raw, "fatPct") or 0.0,
        )
    return NutritionProfile(
        weight_kg=_optional_float(raw, "weightKg"),
        daily_calories=_optional_float(raw, "dailyCalories"),
        macronutrients=macros,
    )


# ---------------------------------------------------------------------------
# Climbs
# ---------------------------------------------------------------------------


def map_climb(raw: dict[str, Any]) -> ClimbDescriptor:
    """Map a climb (col) descriptor.

    Raises:
        MalformedRecordError: If a required dimension is missing.
    """
    values: dict[str, float] = {}
    for key in ("distanceKm", "elevationM", "avgGradientPct", "maxGradientPct"):
        value = _optional_float(raw, key)
        if value is None:
            raise MalformedRecordError(key, reason="required")
        values[key] = value

    sections = tuple(
        ClimbSection(
            distance_km=_optional_float(section, "distanceKm", index) or 0.0,
            gradient_pct=_optional_float(section, "gradientPct", index) or 0.0,
            label=str(section.get("label", "")),
        )
        for index, section in enumerate(raw.get("sections") or ())
        if isinstance(section, dict)
    )

    return ClimbDescriptor(
        distance_km=values["distanceKm"],
        elevation_m=values["elevationM"],
        avg_gradient_pct=values["avgGradientPct"],
        max_gradient_pct=values["maxGradientPct"],
        difficulty=_enum_by_name(ClimbDifficulty, raw.get("difficulty"), "difficulty")
        or ClimbDifficulty.MEDIUM,
        technicality=_enum_by_name(Technicality, raw.get("technicality"), "technicality")
        or Technicality.LOW,
        sections=sections,
        name=str(raw.get("name") or "the climb"),
        climb_id=str(raw.get("id") or ""),
    )


# ---------------------------------------------------------------------------
# Internal extractors
# ---------------------------------------------------------------------------


def _optional_float(
    raw: dict[str, Any], key: str, record_index: int | None = None
) -> Optional[float]:
    value = raw.get(key)
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        raise MalformedRecordError(key, record_index, "boolean is not a number")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise MalformedRecordError(key, record_index, f"not a number: {value!r}") from exc


def _optional_date(value: Any, field: str) -> Optional[date]:
    if value is None or value == "":
        return None
    if isinstance(value, date) and not isinstance(value, datetime):
        return value
    try:
        return parse_timestamp(value).date()
    except ValueError as exc:
        raise MalformedRecordError(field, reason=str(exc)) from exc


def _enum_by_name(enum_cls, value: Any, field: str):
    """Look up an enum member by its case-insensitive name; None when absent."""
    if value is None or value == "":
        return None
    try:
        return enum_cls[str(value).upper()]
    except KeyError:
        raise MalformedRecordError(field, reason=f"unknown value {value!r}") from None


def _limiting_factor(value: Any) -> LimitingFactor:
    try:
        return LimitingFactor(str(value).lower())
    except ValueError:
        raise MalformedRecordError("limitingFactors", reason=f"unknown value {value!r}") from None

