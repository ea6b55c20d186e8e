# app/utils/timezone.py
"""
Conversion between caretaker-local wall-clock times and the canonical UTC
instants stored in the database.

Local -> UTC happens once when a request is parsed, UTC -> string once when
a response is serialized. Durations and comparisons always use instants.
"""

from datetime import date, datetime, time, timezone
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from config.settings import DEFAULT_TIMEZONE
from app.utils.errors import InvalidDateError, InvalidRangeError

DateLike = Union[str, datetime, date]


def get_zone(zone: Union[str, ZoneInfo, None] = None) -> ZoneInfo:
    if isinstance(zone, ZoneInfo):
        return zone
    name = zone or DEFAULT_TIMEZONE
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        raise InvalidDateError(f"Unknown timezone: {name}")


def parse_datetime(value: str) -> datetime:
    text = value.strip()
    # fromisoformat on older interpreters does not take the Z suffix
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        raise InvalidDateError(f"Invalid date: {value!r}")


def to_canonical(local_input: DateLike, zone: Union[str, ZoneInfo, None] = None) -> datetime:
    """
    Return the UTC instant for ``local_input``.

    Naive values are wall-clock times in ``zone``; aware values already name
    an instant and are only converted. A bare date means local midnight.
    """
    if local_input is None or local_input == "":
        raise InvalidDateError("Date is required")

    if isinstance(local_input, str):
        value = parse_datetime(local_input)
    elif isinstance(local_input, datetime):
        value = local_input
    elif isinstance(local_input, date):
        value = datetime.combine(local_input, time.min)
    else:
        raise InvalidDateError(f"Invalid date: {local_input!r}")

    if value.tzinfo is None:
        value = value.replace(tzinfo=get_zone(zone))
    return value.astimezone(timezone.utc)


def to_display(instant: datetime, target_zone: Union[str, ZoneInfo, None] = None) -> datetime:
    """Wall-clock representation of a stored instant in ``target_zone``."""
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(get_zone(target_zone))


def format_for_response(instant: Optional[datetime]) -> Optional[str]:
    if instant is None:
        return None
    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    text = instant.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return text.replace("+00:00", "Z")


def duration_minutes(start: datetime, end: datetime) -> int:
    start_utc = to_canonical(start)
    end_utc = to_canonical(end)
    if end_utc < start_utc:
        raise InvalidRangeError("End time must not be before start time")
    return int((end_utc - start_utc).total_seconds() // 60)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)
