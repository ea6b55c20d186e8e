# app/utils/timeline.py

import math
from datetime import datetime, timedelta
from typing import Optional, Sequence, Tuple

from app.schemas.activity_schema import ActivityKind
from app.schemas.report_schema import TimelinePage
from app.utils.errors import ValidationError
from app.utils.timezone import utc_now


def effective_timestamp(activity, now: Optional[datetime] = None) -> datetime:
    """End of a completed sleep, otherwise the event's own time."""
    if activity.kind == ActivityKind.SLEEP:
        return activity.end_time or activity.start_time or now or utc_now()
    if activity.kind == ActivityKind.MILESTONE:
        return activity.date or now or utc_now()
    return activity.time or now or utc_now()


def filter_activities(activities: Sequence, kind: Optional[ActivityKind] = None) -> list:
    if kind is None:
        return list(activities)
    return [a for a in activities if a.kind == kind]


def sort_newest_first(activities: Sequence, now: Optional[datetime] = None) -> list:
    # sorted() is stable, so equal timestamps keep their input order
    now = now or utc_now()
    return sorted(activities, key=lambda a: effective_timestamp(a, now), reverse=True)


def page(activities: Sequence, kind: Optional[ActivityKind], page_index: int, page_size: int,
         now: Optional[datetime] = None) -> TimelinePage:
    if page_size < 1:
        raise ValidationError("Page size must be at least 1")
    page_index = max(1, page_index)

    filtered = sort_newest_first(filter_activities(activities, kind), now)
    total_pages = math.ceil(len(filtered) / page_size)

    start = (page_index - 1) * page_size
    return TimelinePage(
        items=filtered[start:start + page_size],
        page=page_index,
        page_size=page_size,
        total_pages=total_pages,
        total_items=len(filtered),
    )


def quick_range(days: int, now: Optional[datetime] = None) -> Tuple[datetime, datetime]:
    """The last ``days`` days up to now, e.g. the "last 7 days" shortcut."""
    if days < 1:
        raise ValidationError("Days must be at least 1")
    end = now or utc_now()
    try:
        return end - timedelta(days=days), end
    except OverflowError:
        raise ValidationError("Days is out of range")
