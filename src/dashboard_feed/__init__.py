"""Dashboard feed — maps stored dashboard JSON into training engine models."""

from dashboard_feed.exceptions import FeedError, MalformedRecordError
from dashboard_feed.mapper import (
    map_activities,
    map_activity,
    map_capabilities,
    map_climb,
    map_nutrition_profile,
    parse_metric,
    parse_time_range,
    parse_timestamp,
)

__all__ = [
    "FeedError",
    "MalformedRecordError",
    "map_activities",
    "map_activity",
    "map_capabilities",
    "map_climb",
    "map_nutrition_profile",
    "parse_metric",
    "parse_time_range",
    "parse_timestamp",
]
