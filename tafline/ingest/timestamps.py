"""Timestamp parsing for forecast feed records."""

from datetime import UTC, datetime


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """Parse an ISO timestamp, handling various formats.

    Naive values are taken as UTC. Returns None for anything unparseable.
    """
    if isinstance(value, datetime):
        dt = value
    else:
        try:
            dt = datetime.fromisoformat(value)
        except (ValueError, TypeError):
            return None
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt
