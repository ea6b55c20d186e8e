from typing import List, Optional, Union
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.models.diaper_log_model import DiaperLog
from app.schemas.base_schema import ApiResponse
from app.schemas.diaper_log_schema import DiaperLogCreate, DiaperLogUpdate, DiaperLogResponse
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

router = APIRouter(prefix="/diaper-log", tags=["diaper logs"])

DATE_FIELDS = ("time",)


def clear_wet_details(diaper: DiaperLog) -> DiaperLog:
    # condition and color describe stool only
    if diaper.type == "WET":
        diaper.condition = None
        diaper.color = None
    return diaper


@router.post("", status_code=201, response_model=ApiResponse[DiaperLogResponse])
def create_diaper_log(
    data: DiaperLogCreate,
    db: Session = Depends(get_db),
    context: SessionContext = Depends(get_current_session),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    get_baby_or_404(db, data.baby_id, family_id)
    diaper = DiaperLog(family_id=family_id, caretaker_id=context.caretaker.id)
    clear_wet_details(apply_changes(diaper, data.model_dump(), DATE_FIELDS, zone))

    with persisting(db, "Failed to create diaper log"):
        db.add(diaper)
        db.commit()
        db.refresh(diaper)
    return ApiResponse(data=DiaperLogResponse.model_validate(diaper))


@router.get("", response_model=ApiResponse[Union[DiaperLogResponse, List[DiaperLogResponse]]])
def get_diaper_logs(
    id: Optional[int] = Query(None),
    baby_id: Optional[int] = Query(None, alias="babyId"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    if id is not None:
        diaper = get_active_or_404(db, DiaperLog, id, family_id, "Diaper log")
        return ApiResponse(data=DiaperLogResponse.model_validate(diaper))

    query = scoped(db.query(DiaperLog), DiaperLog, family_id)
    if baby_id is not None:
        query = query.filter(DiaperLog.baby_id == baby_id)
    window = date_range(start_date, end_date, zone)
    if window:
        query = query.filter(DiaperLog.time.between(*window))

    with persisting(db, "Failed to fetch diaper logs"):
        logs = query.order_by(DiaperLog.time.desc()).all()
    return ApiResponse(data=[DiaperLogResponse.model_validate(d) for d in logs])


@router.put("", response_model=ApiResponse[DiaperLogResponse])
def update_diaper_log(
    data: DiaperLogUpdate,
    id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    diaper = get_active_or_404(db, DiaperLog, require_id(id, "Diaper log"), family_id, "Diaper log")
    changes = data.model_dump(exclude_unset=True)
    reject_cleared(changes, ("time", "type"))

    with persisting(db, "Failed to update diaper log"):
        clear_wet_details(apply_changes(diaper, changes, DATE_FIELDS, zone))
        db.commit()
        db.refresh(diaper)
    return ApiResponse(data=DiaperLogResponse.model_validate(diaper))


@router.delete("", response_model=ApiResponse)
def delete_diaper_log(
    id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
):
    diaper = get_active_or_404(db, DiaperLog, require_id(id, "Diaper log"), family_id, "Diaper log")
    soft_delete(db, diaper, "Failed to delete diaper log")
    return ApiResponse()
