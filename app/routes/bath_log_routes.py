from typing import List, Optional, Union
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.models.bath_log_model import BathLog
from app.schemas.base_schema import ApiResponse
from app.schemas.bath_log_schema import BathLogCreate, BathLogUpdate, BathLogResponse
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

router = APIRouter(prefix="/bath-log", tags=["bath logs"])


@router.post("", status_code=201, response_model=ApiResponse[BathLogResponse])
def create_bath_log(
    data: BathLogCreate,
    db: Session = Depends(get_db),
    context: SessionContext = Depends(get_current_session),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    get_baby_or_404(db, data.baby_id, family_id)
    bath = apply_changes(
        BathLog(family_id=family_id, caretaker_id=context.caretaker.id),
        data.model_dump(),
        ("time",),
        zone,
    )

    with persisting(db, "Failed to create bath log"):
        db.add(bath)
        db.commit()
        db.refresh(bath)
    return ApiResponse(data=BathLogResponse.model_validate(bath))


@router.get("", response_model=ApiResponse[Union[BathLogResponse, List[BathLogResponse]]])
def get_bath_logs(
    id: Optional[int] = Query(None),
    baby_id: Optional[int] = Query(None, alias="babyId"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    if id is not None:
        bath = get_active_or_404(db, BathLog, id, family_id, "Bath log")
        return ApiResponse(data=BathLogResponse.model_validate(bath))

    query = scoped(db.query(BathLog), BathLog, family_id)
    if baby_id is not None:
        query = query.filter(BathLog.baby_id == baby_id)
    window = date_range(start_date, end_date, zone)
    if window:
        query = query.filter(BathLog.time.between(*window))

    with persisting(db, "Failed to fetch bath logs"):
        baths = query.order_by(BathLog.time.desc()).all()
    return ApiResponse(data=[BathLogResponse.model_validate(b) for b in baths])


@router.put("", response_model=ApiResponse[BathLogResponse])
def update_bath_log(
    data: BathLogUpdate,
    id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    bath = get_active_or_404(db, BathLog, require_id(id, "Bath log"), family_id, "Bath log")
    changes = reject_cleared(data.model_dump(exclude_unset=True), ("time", "soap_used", "shampoo_used"))

    with persisting(db, "Failed to update bath log"):
        apply_changes(bath, changes, ("time",), zone)
        db.commit()
        db.refresh(bath)
    return ApiResponse(data=BathLogResponse.model_validate(bath))


@router.delete("", response_model=ApiResponse)
def delete_bath_log(
    id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
):
    bath = get_active_or_404(db, BathLog, require_id(id, "Bath log"), family_id, "Bath log")
    soft_delete(db, bath, "Failed to delete bath log")
    return ApiResponse()
