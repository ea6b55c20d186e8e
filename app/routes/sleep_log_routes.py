import logging
from typing import List, Optional, Union
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Query
from sqlalchemy import func
from sqlalchemy.orm import Session

from app.models.sleep_log_model import SleepLog
from app.schemas.base_schema import ApiResponse
from app.schemas.sleep_log_schema import SleepLogCreate, SleepLogUpdate, SleepLogResponse
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
from app.utils.timezone import duration_minutes

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sleep-log", tags=["sleep logs"])

DATE_FIELDS = ("start_time", "end_time")


def ensure_no_open_sleep(db: Session, baby_id: int, exclude_id: Optional[int] = None):
    query = db.query(SleepLog).filter(
        SleepLog.baby_id == baby_id,
        SleepLog.end_time.is_(None),
        SleepLog.deleted_at.is_(None),
    )
    if exclude_id is not None:
        query = query.filter(SleepLog.id != exclude_id)
    if query.first() is not None:
        raise ValidationError("Baby already has an ongoing sleep session")


def finalize_sleep(sleep: SleepLog) -> SleepLog:
    """Keep duration in step with end_time; quality only once ended."""
    if sleep.end_time is None:
        if sleep.quality is not None:
            raise ValidationError("Sleep quality can only be set once the sleep has ended")
        sleep.duration = None
    else:
        sleep.duration = duration_minutes(sleep.start_time, sleep.end_time)
    return sleep


@router.post("", status_code=201, response_model=ApiResponse[SleepLogResponse])
def create_sleep_log(
    data: SleepLogCreate,
    db: Session = Depends(get_db),
    context: SessionContext = Depends(get_current_session),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    get_baby_or_404(db, data.baby_id, family_id)
    if data.end_time is None:
        ensure_no_open_sleep(db, data.baby_id)

    sleep = SleepLog(family_id=family_id, caretaker_id=context.caretaker.id)
    finalize_sleep(apply_changes(sleep, data.model_dump(), DATE_FIELDS, zone))

    with persisting(db, "Failed to create sleep log"):
        db.add(sleep)
        db.commit()
        db.refresh(sleep)

    logger.info("sleep log %s created for baby %s", sleep.id, sleep.baby_id)
    return ApiResponse(data=SleepLogResponse.model_validate(sleep))


@router.get("", response_model=ApiResponse[Union[SleepLogResponse, List[SleepLogResponse]]])
def get_sleep_logs(
    id: Optional[int] = Query(None),
    baby_id: Optional[int] = Query(None, alias="babyId"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    if id is not None:
        sleep = get_active_or_404(db, SleepLog, id, family_id, "Sleep log")
        return ApiResponse(data=SleepLogResponse.model_validate(sleep))

    query = scoped(db.query(SleepLog), SleepLog, family_id)
    if baby_id is not None:
        query = query.filter(SleepLog.baby_id == baby_id)
    window = date_range(start_date, end_date, zone)
    if window:
        query = query.filter(SleepLog.start_time.between(*window))

    with persisting(db, "Failed to fetch sleep logs"):
        # newest first by effective timestamp: end of a completed sleep, else its start
        logs = query.order_by(func.coalesce(SleepLog.end_time, SleepLog.start_time).desc()).all()
    return ApiResponse(data=[SleepLogResponse.model_validate(s) for s in logs])


@router.put("", response_model=ApiResponse[SleepLogResponse])
def update_sleep_log(
    data: SleepLogUpdate,
    id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    sleep = get_active_or_404(db, SleepLog, require_id(id, "Sleep log"), family_id, "Sleep log")
    changes = data.model_dump(exclude_unset=True)

    reject_cleared(changes, ("start_time", "type"))
    # explicitly clearing end_time reopens the session
    if "end_time" in changes and changes["end_time"] is None and sleep.end_time is not None:
        ensure_no_open_sleep(db, sleep.baby_id, exclude_id=sleep.id)

    # concurrent updates of the same session are last-write-wins
    with persisting(db, "Failed to update sleep log"):
        finalize_sleep(apply_changes(sleep, changes, DATE_FIELDS, zone))
        db.commit()
        db.refresh(sleep)
    return ApiResponse(data=SleepLogResponse.model_validate(sleep))


@router.delete("", response_model=ApiResponse)
def delete_sleep_log(
    id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
):
    sleep = get_active_or_404(db, SleepLog, require_id(id, "Sleep log"), family_id, "Sleep log")
    soft_delete(db, sleep, "Failed to delete sleep log")
    return ApiResponse()
