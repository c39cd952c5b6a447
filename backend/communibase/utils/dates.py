"""Date helpers for values stored in Communibase records."""
from datetime import datetime, timezone as dt_timezone
from typing import Any, Optional
from zoneinfo import ZoneInfo

from communibase.exceptions import InvalidDateError


def to_local_datetime(value: Any, timezone: str) -> Optional[datetime]:
    """
    Convert a stored Communibase date to an aware datetime in ``timezone``.

    Args:
        value: ISO-8601 string, a datetime (as returned by pymongo) or None
        timezone: IANA zone name to convert to

    Returns:
        Aware datetime, or None when no date is set

    Raises:
        InvalidDateError: the value is set but cannot be parsed
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
        except ValueError:
            raise InvalidDateError(f"Invalid date found: {value}") from None
    else:
        raise InvalidDateError(f"Invalid date found: {value!r}")

    # pymongo hands back naive datetimes in UTC
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=dt_timezone.utc)

    return parsed.astimezone(ZoneInfo(timezone))
