"""Custom exception hierarchy for the dashboard feed mapper."""

from __future__ import annotations


class FeedError(Exception):
    """Base exception for all dashboard_feed errors."""


class MalformedRecordError(FeedError):
    """A raw record is missing a required field or holds an unusable value."""

    def __init__(self, field: str, record_index: int | None = None, reason: str = "") -> None:
        where = f" in record {record_index}" if record_index is not None else ""
        detail = f": {reason}" if reason else ""
        super().__init__(f"Malformed field '{field}'{where}{detail}")
        self.field = field
        self.record_index = record_index
