"""Environment-variable-based configuration for the report runner."""

from __future__ import annotations

import os
from pathlib import Path


def _optional_int(value: str | None) -> int | None:
    if value is None or value.strip() == "":
        return None
    return int(value)


REPORT_SEED: int | None = _optional_int(os.environ.get("TRAINING_REPORT_SEED"))
LOG_LEVEL: str = os.environ.get("TRAINING_REPORT_LOG_LEVEL", "INFO").upper()
OUTPUT_PATH: Path = Path(os.environ.get("TRAINING_REPORT_OUTPUT", "report.json"))
