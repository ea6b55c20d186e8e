from typing import List, Optional, Union
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.models.baby_model import Baby
from app.schemas.base_schema import ApiResponse
from app.schemas.baby_schema import BabyCreate, BabyUpdate, BabyResponse
from config.database import get_db
from app.dependencies.auth import get_family_id
from app.dependencies.timezone import get_timezone
from app.utils.crud import apply_changes, get_active_or_404, persisting, reject_cleared, require_id, scoped, soft_delete

router = APIRouter(prefix="/baby", tags=["babies"])

DATE_FIELDS = ("birth_date",)


# POST: register a new baby in the caller's family
@router.post("", status_code=201, response_model=ApiResponse[BabyResponse])
def create_baby(
    baby: BabyCreate,
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    with persisting(db, "Failed to create baby"):
        new_baby = apply_changes(Baby(family_id=family_id), baby.model_dump(), DATE_FIELDS, zone)
        db.add(new_baby)
        db.commit()
        db.refresh(new_baby)

    return ApiResponse(data=BabyResponse.model_validate(new_baby))

# GET: one baby by id, or every active baby of the family
@router.get("", response_model=ApiResponse[Union[BabyResponse, List[BabyResponse]]])
def get_babies(
    id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
):
    if id is not None:
        baby = get_active_or_404(db, Baby, id, family_id, "Baby")
        return ApiResponse(data=BabyResponse.model_validate(baby))

    with persisting(db, "Failed to fetch babies"):
        babies = scoped(db.query(Baby), Baby, family_id).order_by(Baby.created_at.desc()).all()
    return ApiResponse(data=[BabyResponse.model_validate(b) for b in babies])

# PUT: partial update, omitted fields keep their value
@router.put("", response_model=ApiResponse[BabyResponse])
def update_baby(
    baby_data: BabyUpdate,
    id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    baby = get_active_or_404(db, Baby, require_id(id, "Baby"), family_id, "Baby")
    changes = reject_cleared(baby_data.model_dump(exclude_unset=True), ("first_name", "birth_date", "inactive"))

    with persisting(db, "Failed to update baby"):
        apply_changes(baby, changes, DATE_FIELDS, zone)
        db.commit()
        db.refresh(baby)
    return ApiResponse(data=BabyResponse.model_validate(baby))

# DELETE: soft delete
@router.delete("", response_model=ApiResponse)
def delete_baby(
    id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
):
    baby = get_active_or_404(db, Baby, require_id(id, "Baby"), family_id, "Baby")
    soft_delete(db, baby, "Failed to delete baby")
    return ApiResponse()
