from typing import List, Optional, Union
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.models.feed_log_model import FeedLog
from app.schemas.base_schema import ApiResponse
from app.schemas.feed_log_schema import FeedLogCreate, FeedLogUpdate, FeedLogResponse
from config.database import get_db
from app.dependencies.auth import SessionContext, get_current_session, get_family_id
from app.dependencies.timezone import get_timezone
from app.utils.crud import (
    apply_changes,
    date_range,
    get_active_or_404,
    get_baby_or_404,
    persisting,
    reject_cleared,
    require_id,
    scoped,
    soft_delete,
)
from app.utils.errors import ValidationError

router = APIRouter(prefix="/feed-log", tags=["feed logs"])

DATE_FIELDS = ("time",)

# Unit used when the client does not send one
DEFAULT_UNITS = {"BOTTLE": "OZ", "SOLIDS": "G", "BREAST": "MIN"}


def check_feed(feed: FeedLog) -> FeedLog:
    if feed.type != "BREAST" and (feed.side or feed.feed_duration):
        raise ValidationError("Side and feed duration only apply to breast feeds")
    if feed.type != "SOLIDS" and feed.food:
        raise ValidationError("Food only applies to solids")
    if not feed.unit_abbr:
        feed.unit_abbr = DEFAULT_UNITS[feed.type]
    return feed


@router.post("", status_code=201, response_model=ApiResponse[FeedLogResponse])
def create_feed_log(
    data: FeedLogCreate,
    db: Session = Depends(get_db),
    context: SessionContext = Depends(get_current_session),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    get_baby_or_404(db, data.baby_id, family_id)
    feed = FeedLog(family_id=family_id, caretaker_id=context.caretaker.id)
    check_feed(apply_changes(feed, data.model_dump(), DATE_FIELDS, zone))

    with persisting(db, "Failed to create feed log"):
        db.add(feed)
        db.commit()
        db.refresh(feed)
    return ApiResponse(data=FeedLogResponse.model_validate(feed))


@router.get("", response_model=ApiResponse[Union[FeedLogResponse, List[FeedLogResponse]]])
def get_feed_logs(
    id: Optional[int] = Query(None),
    baby_id: Optional[int] = Query(None, alias="babyId"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    if id is not None:
        feed = get_active_or_404(db, FeedLog, id, family_id, "Feed log")
        return ApiResponse(data=FeedLogResponse.model_validate(feed))

    query = scoped(db.query(FeedLog), FeedLog, family_id)
    if baby_id is not None:
        query = query.filter(FeedLog.baby_id == baby_id)
    window = date_range(start_date, end_date, zone)
    if window:
        query = query.filter(FeedLog.time.between(*window))

    with persisting(db, "Failed to fetch feed logs"):
        logs = query.order_by(FeedLog.time.desc()).all()
    return ApiResponse(data=[FeedLogResponse.model_validate(f) for f in logs])


@router.put("", response_model=ApiResponse[FeedLogResponse])
def update_feed_log(
    data: FeedLogUpdate,
    id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    feed = get_active_or_404(db, FeedLog, require_id(id, "Feed log"), family_id, "Feed log")
    changes = data.model_dump(exclude_unset=True)
    reject_cleared(changes, ("time", "type"))
    # a new type without a unit takes that type's default unit
    if changes.get("type") is not None and changes["type"].value != feed.type and not changes.get("unit_abbr"):
        changes["unit_abbr"] = None

    with persisting(db, "Failed to update feed log"):
        check_feed(apply_changes(feed, changes, DATE_FIELDS, zone))
        db.commit()
        db.refresh(feed)
    return ApiResponse(data=FeedLogResponse.model_validate(feed))


@router.delete("", response_model=ApiResponse)
def delete_feed_log(
    id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
):
    feed = get_active_or_404(db, FeedLog, require_id(id, "Feed log"), family_id, "Feed log")
    soft_delete(db, feed, "Failed to delete feed log")
    return ApiResponse()
