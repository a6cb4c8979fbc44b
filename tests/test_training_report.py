"""Tests for the weekly report runner."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from training_report.weekly import _utc_now, main, parse_args


def _write(path: Path, document) -> Path:
    path.write_text(json.dumps(document))
    return path


@pytest.fixture
def activities_file(tmp_path: Path) -> Path:
    rides = [
        {"date": f"2024-05-{day:02d}T07:00:00Z", "durationSeconds": 3600, "intensity": 5}
        for day in (2, 4, 6, 9, 11, 13)
    ]
    return _write(tmp_path / "activities.json", rides)


class TestParseArgs:
    def test_defaults(self) -> None:
        args = parse_args(["--activities", "a.json"])
        assert args.activities == Path("a.json")
        assert args.range == "3m"
        assert args.metric is None
        assert args.nutrition is None

    def test_activities_required(self) -> None:
        with pytest.raises(SystemExit):
            parse_args([])


class TestMain:
    def test_writes_report(self, tmp_path: Path, activities_file: Path) -> None:
        output = tmp_path / "report.json"
        code = main(
            [
                "--activities", str(activities_file),
                "--now", "2024-05-15T12:00:00",
                "--metric", "ftp",
                "--range", "1m",
                "--output", str(output),
            ]
        )

        assert code == 0
        report = json.loads(output.read_text())
        assert report["assessment"]["status"] == "optimal"
        assert report["assessment"]["metrics"]["restDays"] == 4
        assert report["projection"]["timeRangeDays"] == 30
        assert "program" not in report

    def test_program_section(self, tmp_path: Path, activities_file: Path) -> None:
        profile = _write(
            tmp_path / "profile.json",
            {"ftpWatts": 300, "weightKg": 75, "raceDateISO": "2024-07-24"},
        )
        climb = _write(
            tmp_path / "climb.json",
            {"distanceKm": 13.8, "elevationM": 1120, "avgGradientPct": 8.1, "maxGradientPct": 13},
        )
        output = tmp_path / "report.json"
        code = main(
            [
                "--activities", str(activities_file),
                "--profile", str(profile),
                "--climb", str(climb),
                "--now", "2024-05-15T12:00:00",
                "--output", str(output),
            ]
        )

        assert code == 0
        report = json.loads(output.read_text())
        assert report["program"]["durationWeeks"] == 10
        assert report["programSummary"]["totalHours"] == 80.0

    def test_missing_input_file(self, tmp_path: Path) -> None:
        code = main(
            ["--activities", str(tmp_path / "nope.json"), "--output", str(tmp_path / "r.json")]
        )
        assert code == 1

    def test_invalid_json(self, tmp_path: Path) -> None:
        broken = tmp_path / "activities.json"
        broken.write_text("{not json")
        assert main(["--activities", str(broken), "--output", str(tmp_path / "r.json")]) == 1

    def test_invalid_now(self, tmp_path: Path, activities_file: Path) -> None:
        code = main(
            [
                "--activities", str(activities_file),
                "--now", "last tuesday",
                "--output", str(tmp_path / "r.json"),
            ]
        )
        assert code == 1

    def test_unknown_metric(self, tmp_path: Path, activities_file: Path) -> None:
        code = main(
            [
                "--activities", str(activities_file),
                "--now", "2024-05-15T12:00:00",
                "--metric", "watts",
                "--output", str(tmp_path / "r.json"),
            ]
        )
        assert code == 1

    def test_program_without_race_date(self, tmp_path: Path, activities_file: Path) -> None:
        profile = _write(tmp_path / "profile.json", {"ftpWatts": 300, "weightKg": 75})
        climb = _write(
            tmp_path / "climb.json",
            {"distanceKm": 10, "elevationM": 700, "avgGradientPct": 7, "maxGradientPct": 10},
        )
        code = main(
            [
                "--activities", str(activities_file),
                "--profile", str(profile),
                "--climb", str(climb),
                "--now", "2024-05-15T12:00:00",
                "--output", str(tmp_path / "r.json"),
            ]
        )
        assert code == 1

    def test_activity_export_must_be_a_list(self, tmp_path: Path) -> None:
        source = _write(tmp_path / "activities.json", {"activities": "none"})
        code = main(
            [
                "--activities", str(source),
                "--now", "2024-05-15T12:00:00",
                "--output", str(tmp_path / "r.json"),
            ]
        )
        assert code == 1


class TestDefaultNow:
    def test_utc_now_is_naive_utc(self) -> None:
        value = _utc_now()
        reference = datetime.now(timezone.utc).replace(tzinfo=None)
        assert value.tzinfo is None
        assert abs(reference - value) < timedelta(seconds=5)

    def test_recent_utc_ride_lands_in_current_week(self, tmp_path: Path) -> None:
        # Just inside the 7-day window when measured in UTC
        ride_at = datetime.now(timezone.utc) - timedelta(days=7) + timedelta(minutes=30)
        source = _write(
            tmp_path / "activities.json",
            [{"date": ride_at.strftime("%Y-%m-%dT%H:%M:%SZ"), "durationSeconds": 3600}],
        )
        output = tmp_path / "report.json"

        assert main(["--activities", str(source), "--output", str(output)]) == 0
        metrics = json.loads(output.read_text())["assessment"]["metrics"]
        assert metrics["currentVolumeMin"] == 60.0
        assert metrics["previousVolumeMin"] == 0.0
