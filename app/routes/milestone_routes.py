from typing import List, Optional, Union
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.models.milestone_model import Milestone
from app.schemas.base_schema import ApiResponse
from app.schemas.milestone_schema import MilestoneCreate, MilestoneUpdate, MilestoneResponse
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

router = APIRouter(prefix="/milestone", tags=["milestones"])


@router.post("", status_code=201, response_model=ApiResponse[MilestoneResponse])
def create_milestone(
    data: MilestoneCreate,
    db: Session = Depends(get_db),
    context: SessionContext = Depends(get_current_session),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    get_baby_or_404(db, data.baby_id, family_id)
    milestone = apply_changes(
        Milestone(family_id=family_id, caretaker_id=context.caretaker.id),
        data.model_dump(),
        ("date",),
        zone,
    )

    with persisting(db, "Failed to create milestone"):
        db.add(milestone)
        db.commit()
        db.refresh(milestone)
    return ApiResponse(data=MilestoneResponse.model_validate(milestone))


@router.get("", response_model=ApiResponse[Union[MilestoneResponse, List[MilestoneResponse]]])
def get_milestones(
    id: Optional[int] = Query(None),
    baby_id: Optional[int] = Query(None, alias="babyId"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    if id is not None:
        milestone = get_active_or_404(db, Milestone, id, family_id, "Milestone")
        return ApiResponse(data=MilestoneResponse.model_validate(milestone))

    query = scoped(db.query(Milestone), Milestone, family_id)
    if baby_id is not None:
        query = query.filter(Milestone.baby_id == baby_id)
    window = date_range(start_date, end_date, zone)
    if window:
        query = query.filter(Milestone.date.between(*window))

    with persisting(db, "Failed to fetch milestones"):
        milestones = query.order_by(Milestone.date.desc()).all()
    return ApiResponse(data=[MilestoneResponse.model_validate(m) for m in milestones])


@router.put("", response_model=ApiResponse[MilestoneResponse])
def update_milestone(
    data: MilestoneUpdate,
    id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    milestone = get_active_or_404(db, Milestone, require_id(id, "Milestone"), family_id, "Milestone")
    changes = reject_cleared(data.model_dump(exclude_unset=True), ("date", "title", "category"))

    with persisting(db, "Failed to update milestone"):
        apply_changes(milestone, changes, ("date",), zone)
        db.commit()
        db.refresh(milestone)
    return ApiResponse(data=MilestoneResponse.model_validate(milestone))


@router.delete("", response_model=ApiResponse)
def delete_milestone(
    id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
):
    milestone = get_active_or_404(db, Milestone, require_id(id, "Milestone"), family_id, "Milestone")
    soft_delete(db, milestone, "Failed to delete milestone")
    return ApiResponse()
