"""Power target assigner — watt bounds per interval from the athlete's FTP.

Reference:
    Coggan & Allen (2010). Training and Racing with a Power Meter.
"""

from __future__ import annotations

import dataclasses

from training_engine.math.zones import PowerZone, calculate_power_zones
from training_engine.models.enums import ZoneType
from training_engine.models.program import Interval, Workout, ZoneRange


def power_bounds(zone: ZoneRange, zones: dict[ZoneType, PowerZone]) -> tuple[int, int | None]:
    """Lower bound of the low zone and upper bound of the high zone."""
    return zones[zone.low].lower, zones[zone.upper].upper


def assign_power_targets(workout: Workout, ftp_watts: float) -> Workout:
    """Return a copy of ``workout`` with watt targets on every interval.

    A non-positive FTP leaves the workout untouched.
    """
    if ftp_watts <= 0:
        return workout

    zones = {z.zone: z for z in calculate_power_zones(ftp_watts)}
    intervals: list[Interval] = []
    for interval in workout.intervals:
        low, high = power_bounds(interval.zone, zones)
        intervals.append(
            dataclasses.replace(interval, power_low_w=low, power_high_w=high)
        )
    return dataclasses.replace(workout, intervals=tuple(intervals))
