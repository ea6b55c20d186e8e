from datetime import date
from typing import Optional
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from config.database import get_db
from app.dependencies.auth import get_family_id
from app.dependencies.timezone import get_timezone
from app.schemas.activity_schema import ActivityKind
from app.schemas.base_schema import ApiResponse
from app.schemas.report_schema import DailyStats, TimelinePage
from app.utils.crud import date_range, get_baby_or_404, persisting
from app.utils.report_generator import generate_daily_summary, load_activities
from app.utils.timeline import page, quick_range
from app.utils.timezone import utc_now

router = APIRouter(tags=["activities"])

DEFAULT_TIMELINE_DAYS = 7


@router.get("/timeline", response_model=ApiResponse[TimelinePage])
def get_timeline(
    baby_id: int = Query(..., alias="babyId"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    days: Optional[int] = Query(None),
    kind: Optional[ActivityKind] = Query(None, alias="filter"),
    page_index: int = Query(1, alias="page"),
    page_size: int = Query(20, alias="pageSize"),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    """
    Every event of a baby in a date range, newest first, filtered by kind
    and paginated. ``days`` is the "last N days" shortcut and wins over
    explicit dates; with neither, the last week is shown.
    """
    get_baby_or_404(db, baby_id, family_id)

    now = utc_now()
    if days is not None:
        window = quick_range(days, now)
    else:
        window = date_range(start_date, end_date, zone) or quick_range(DEFAULT_TIMELINE_DAYS, now)

    with persisting(db, "Failed to fetch activities"):
        activities = load_activities(db, baby_id, window[0], window[1], family_id)
    return ApiResponse(data=page(activities, kind, page_index, page_size, now))


@router.get("/daily-stats", response_model=ApiResponse[DailyStats])
def get_daily_stats(
    baby_id: int = Query(..., alias="babyId"),
    day: Optional[date] = Query(None, alias="date"),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    """Aggregated statistics for one local calendar day (today by default)."""
    get_baby_or_404(db, baby_id, family_id)

    now = utc_now()
    day = day or now.astimezone(zone).date()

    with persisting(db, "Failed to compute daily stats"):
        stats = generate_daily_summary(db, baby_id, day, zone, family_id, now)
    return ApiResponse(data=stats)
