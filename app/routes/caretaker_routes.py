from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.models.auth_models import Caretaker
from app.schemas.base_schema import ApiResponse
from app.schemas.caretaker_schema import CaretakerCreate, CaretakerResponse
from config.database import get_db
from app.dependencies.auth import SessionContext, get_family_id, require_admin
from app.utils.crud import get_active_or_404, persisting, require_id, scoped, soft_delete
from app.utils.errors import ValidationError
from app.utils.security import hash_pin

router = APIRouter(prefix="/caretaker", tags=["caretakers"])


# GET: caretakers of the caller's family
@router.get("", response_model=ApiResponse[List[CaretakerResponse]])
def list_caretakers(
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
):
    with persisting(db, "Failed to fetch caretakers"):
        caretakers = scoped(db.query(Caretaker), Caretaker, family_id).order_by(Caretaker.name).all()
    return ApiResponse(data=[CaretakerResponse.model_validate(c) for c in caretakers])

# POST: admins add caretakers to their family
@router.post("", status_code=201, response_model=ApiResponse[CaretakerResponse])
def create_caretaker(
    data: CaretakerCreate,
    db: Session = Depends(get_db),
    context: SessionContext = Depends(require_admin),
):
    existing = db.query(Caretaker).filter_by(family_id=context.family_id, login_id=data.login_id).first()
    if existing:
        raise ValidationError("Login ID already in use")

    caretaker = Caretaker(
        family_id=context.family_id,
        login_id=data.login_id,
        name=data.name,
        type=data.type,
        role=data.role.value,
        security_pin=hash_pin(data.pin),
    )
    with persisting(db, "Failed to create caretaker"):
        db.add(caretaker)
        db.commit()
        db.refresh(caretaker)
    return ApiResponse(data=CaretakerResponse.model_validate(caretaker))

# DELETE: soft delete, never the caller themself
@router.delete("", response_model=ApiResponse)
def delete_caretaker(
    id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    context: SessionContext = Depends(require_admin),
):
    caretaker = get_active_or_404(db, Caretaker, require_id(id, "Caretaker"), context.family_id, "Caretaker")
    if caretaker.id == context.caretaker.id:
        raise ValidationError("You cannot remove yourself")
    soft_delete(db, caretaker, "Failed to delete caretaker")
    return ApiResponse()
