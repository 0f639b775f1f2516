from datetime import datetime
from typing import Any

import pytz


def parse_timestamp(value: Any) -> datetime | None:
    """Parse an AviationStack ISO-8601 timestamp; naive values are taken as UTC."""
    if not isinstance(value, str) or not value:
        return None
    try:
        dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None
    if dt.tzinfo is None:
        dt = pytz.utc.localize(dt)
    return dt


def format_local_timestamp(value: Any, tz: str = "UTC") -> str:
    """
    Render a timestamp in ``tz`` as e.g. "3/15/2024, 2:30:00 PM".
    Unparseable input is returned as-is.
    """
    dt = parse_timestamp(value)
    if dt is None:
        return str(value)
    local = dt.astimezone(pytz.timezone(tz))
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{local.month}/{local.day}/{local.year}, {hour}:{local.minute:02d}:{local.second:02d} {meridiem}"
