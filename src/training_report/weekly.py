"""Weekly training report — runs the engine over dashboard JSON exports.

Usage:
    python -m training_report.weekly --activities activities.json
    python -m training_report.weekly --activities activities.json \\
        --nutrition nutrition.json --profile profile.json --climb climb.json \\
        --metric ftp --range 3m --now 2024-05-01T08:00:00 --output report.json
"""

from __future__ import annotations

import argparse
import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from dashboard_feed import (
    FeedError,
    map_activities,
    map_capabilities,
    map_climb,
    map_nutrition_profile,
    parse_metric,
    parse_time_range,
    parse_timestamp,
)
from training_engine.engine import TrainingEngine
from training_engine.serialization import to_report_dict

from training_report.config import LOG_LEVEL, OUTPUT_PATH, REPORT_SEED

logger = logging.getLogger(__name__)


def _load_json(path: Path) -> Any:
    """Load a JSON document from disk."""
    with open(path) as f:
        return json.load(f)


def _utc_now() -> datetime:
    """Current instant as naive UTC, the form the feed mapper gives activity dates."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def _activity_records(document: Any) -> list:
    if isinstance(document, dict):
        document = document.get("activities", [])
    if not isinstance(document, list):
        raise FeedError("Activity export must be a list or an object with 'activities'")
    return document


def build_report(
    engine: TrainingEngine,
    now: datetime,
    activities_doc: Any,
    nutrition_doc: dict | None = None,
    profile_doc: dict | None = None,
    climb_doc: dict | None = None,
    metric: str | None = None,
    time_range: str = "3m",
) -> dict:
    """Run every engine view whose inputs are present.

    Raises:
        FeedError: If a profile, climb or nutrition document is malformed.
        ValueError: If the metric or time range is unknown, or the profile
            has no race date while a climb is given.
    """
    activities = map_activities(_activity_records(activities_doc))
    logger.info("Loaded %d activities", len(activities))

    nutrition = map_nutrition_profile(nutrition_doc) if nutrition_doc is not None else None
    assessment = engine.assess_overtraining(activities, now, nutrition=nutrition)
    logger.info(
        "Assessment: %s (recovery score %d)",
        assessment.status.name,
        assessment.recovery_score,
    )
    report: dict[str, Any] = {"assessment": to_report_dict(assessment)}

    if metric is not None:
        projection = engine.project_performance(
            parse_metric(metric), activities, parse_time_range(time_range), now
        )
        report["projection"] = to_report_dict(projection)
        logger.info("Projected %s over %s", metric, time_range)

    if profile_doc is not None and climb_doc is not None:
        capabilities = map_capabilities(profile_doc)
        climb = map_climb(climb_doc)
        program = engine.generate_program(capabilities, climb, now)
        report["climbMatch"] = to_report_dict(engine.match_climb(capabilities, climb))
        report["program"] = to_report_dict(program)
        report["programSummary"] = to_report_dict(engine.summarize(program))
        logger.info("Generated %d-week program %s", program.duration_weeks, program.id)

    return report


def run(args: argparse.Namespace) -> int:
    """Execute one report run. Returns the process exit code."""
    try:
        activities_doc = _load_json(args.activities)
        nutrition_doc = _load_json(args.nutrition) if args.nutrition else None
        profile_doc = _load_json(args.profile) if args.profile else None
        climb_doc = _load_json(args.climb) if args.climb else None
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read input: %s", exc)
        return 1

    engine = TrainingEngine(seed=args.seed)

    try:
        now = parse_timestamp(args.now) if args.now else _utc_now()
        report = build_report(
            engine,
            now,
            activities_doc,
            nutrition_doc=nutrition_doc,
            profile_doc=profile_doc,
            climb_doc=climb_doc,
            metric=args.metric,
            time_range=args.range,
        )
    except (FeedError, ValueError) as exc:
        logger.error("Invalid input: %s", exc)
        return 1

    try:
        with open(args.output, "w") as f:
            json.dump(report, f, indent=2)
    except OSError as exc:
        logger.error("Failed to write report to %s: %s", args.output, exc)
        return 1

    logger.info("Report written to %s", args.output)
    return 0


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Weekly climb training report")
    parser.add_argument("--activities", type=Path, required=True, help="Activity export (JSON)")
    parser.add_argument("--nutrition", type=Path, help="Nutrition profile (JSON)")
    parser.add_argument("--profile", type=Path, help="Athlete capabilities (JSON)")
    parser.add_argument("--climb", type=Path, help="Target climb descriptor (JSON)")
    parser.add_argument("--metric", help="Metric to project (ftp, vo2max, power_weight, ...)")
    parser.add_argument("--range", default="3m", help="Projection range: 1m, 3m, 6m or 1y")
    parser.add_argument(
        "--now", help="Reference instant (ISO-8601); defaults to the current UTC time"
    )
    parser.add_argument("--seed", type=int, default=REPORT_SEED, help="Projection jitter seed")
    parser.add_argument("--output", type=Path, default=OUTPUT_PATH, help="Report path")
    parser.add_argument("--log-level", default=LOG_LEVEL, help="Logging level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return run(args)


if __name__ == "__main__":
    raise SystemExit(main())
