"""Rounding helpers.

Dashboard figures round halves up (2.5 -> 3, -2.5 -> -2); Python's
built-in ``round`` rounds halves to even, which shifts phase splits and
TSS targets on exact halves.
"""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def round_to(value: float, digits: int) -> float:
    """Round half up to a fixed number of decimal digits."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor
