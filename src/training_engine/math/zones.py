"""Power zone calculations and FTP estimation from field tests.

Zone model: Coggan 7-zone power system anchored on FTP.
Reference: Coggan & Allen (2010), Training and Racing with a Power Meter.
"""

from __future__ import annotations

from dataclasses import dataclass

from training_engine.math.rounding import round_half_up
from training_engine.models.enums import (
    FTP_PROTOCOL_FACTORS,
    POWER_ZONE_UPPER_PCT_FTP,
    FTPTestProtocol,
    ZoneType,
)


@dataclass(frozen=True)
class PowerZone:
    """A single power zone in watts; ``upper`` is None for the open top zone."""

    zone: ZoneType
    lower: int
    upper: int | None


def calculate_power_zones(ftp_watts: float) -> list[PowerZone]:
    """Calculate the seven Coggan power zones for an FTP.

    Boundaries (% FTP): Z1 <=55, Z2 56-75, Z3 76-90, Z4 91-105,
    Z5 106-120, Z6 121-150, Z7 >150.

    Args:
        ftp_watts: Functional threshold power.

    Returns:
        List of PowerZone, Z1 first. Each lower bound sits one watt
        above the previous upper bound.
    """
    zones: list[PowerZone] = []
    previous_upper = -1
    for zone_type, upper_pct in POWER_ZONE_UPPER_PCT_FTP.items():
        lower = 0 if zone_type == ZoneType.Z1 else previous_upper + 1
        upper = round_half_up(ftp_watts * upper_pct) if upper_pct is not None else None
        zones.append(PowerZone(zone=zone_type, lower=lower, upper=upper))
        if upper is not None:
            previous_upper = upper
    return zones


def estimate_ftp(power_watts: float, protocol: FTPTestProtocol) -> int:
    """Estimate FTP from a field test's average (or peak, for ramp) power.

    20-min test: 95%. 60-min test: 100%. Ramp test: 75% of peak minute.
    """
    if power_watts <= 0:
        return 0
    return round_half_up(power_watts * FTP_PROTOCOL_FACTORS[protocol])
