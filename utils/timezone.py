"""UTC for storage, local time only for display."""

from datetime import datetime, timezone
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError


def now_utc() -> datetime:
    """
    Current time in UTC.

    Every stored timestamp comes from here, never from the client.
    """
    return datetime.now(timezone.utc)


def to_local(dt: datetime, tz_name: str) -> datetime:
    """
    Convert an aware datetime to a named timezone for display.

    Args:
        dt: Timezone-aware datetime
        tz_name: IANA timezone name (e.g., "Europe/Istanbul")

    Raises:
        ValueError: If datetime is naive or timezone name is invalid
    """
    if dt.tzinfo is None:
        raise ValueError(
            "Cannot convert naive datetime. Datetime must be timezone-aware."
        )

    try:
        local_tz = ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        raise ValueError(f"Unknown timezone: {tz_name}")

    return dt.astimezone(local_tz)


def format_entry_date(dt: datetime, tz_name: str) -> str:
    """Human date label for a diary entry, e.g. '19 October 2026, 14:05'."""
    local = to_local(dt, tz_name)
    return f"{local.day} {local:%B %Y}, {local:%H:%M}"
