"""Datetime parsing for order event timestamps."""

from datetime import datetime


def parse_event_time(raw: str) -> datetime:
    """Parse an ISO-8601 style timestamp ('2015-02-28 07:58:14', '...T...Z').

    Raises ValueError on anything else.
    """
    value = raw.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    return datetime.fromisoformat(value)
