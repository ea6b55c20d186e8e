from typing import Optional
from zoneinfo import ZoneInfo

from fastapi import Header

from app.utils.timezone import get_zone


def get_timezone(x_timezone: Optional[str] = Header(None)) -> ZoneInfo:
    """Caller's IANA zone, used for naive inputs and day windows."""
    return get_zone(x_timezone)
