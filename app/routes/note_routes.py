from typing import List, Optional, Union
from zoneinfo import ZoneInfo

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.models.note_model import Note
from app.schemas.base_schema import ApiResponse
from app.schemas.note_schema import NoteCreate, NoteUpdate, NoteResponse
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

router = APIRouter(prefix="/note", tags=["notes"])


@router.post("", status_code=201, response_model=ApiResponse[NoteResponse])
def create_note(
    data: NoteCreate,
    db: Session = Depends(get_db),
    context: SessionContext = Depends(get_current_session),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    get_baby_or_404(db, data.baby_id, family_id)
    note = apply_changes(
        Note(family_id=family_id, caretaker_id=context.caretaker.id),
        data.model_dump(),
        ("time",),
        zone,
    )

    with persisting(db, "Failed to create note"):
        db.add(note)
        db.commit()
        db.refresh(note)
    return ApiResponse(data=NoteResponse.model_validate(note))


@router.get("", response_model=ApiResponse[Union[NoteResponse, List[NoteResponse]]])
def get_notes(
    id: Optional[int] = Query(None),
    baby_id: Optional[int] = Query(None, alias="babyId"),
    start_date: Optional[str] = Query(None, alias="startDate"),
    end_date: Optional[str] = Query(None, alias="endDate"),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    if id is not None:
        note = get_active_or_404(db, Note, id, family_id, "Note")
        return ApiResponse(data=NoteResponse.model_validate(note))

    query = scoped(db.query(Note), Note, family_id)
    if baby_id is not None:
        query = query.filter(Note.baby_id == baby_id)
    window = date_range(start_date, end_date, zone)
    if window:
        query = query.filter(Note.time.between(*window))

    with persisting(db, "Failed to fetch notes"):
        notes = query.order_by(Note.time.desc()).all()
    return ApiResponse(data=[NoteResponse.model_validate(n) for n in notes])


@router.put("", response_model=ApiResponse[NoteResponse])
def update_note(
    data: NoteUpdate,
    id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
    zone: ZoneInfo = Depends(get_timezone),
):
    note = get_active_or_404(db, Note, require_id(id, "Note"), family_id, "Note")
    changes = reject_cleared(data.model_dump(exclude_unset=True), ("time", "content"))

    with persisting(db, "Failed to update note"):
        apply_changes(note, changes, ("time",), zone)
        db.commit()
        db.refresh(note)
    return ApiResponse(data=NoteResponse.model_validate(note))


@router.delete("", response_model=ApiResponse)
def delete_note(
    id: Optional[int] = Query(None),
    db: Session = Depends(get_db),
    family_id: int = Depends(get_family_id),
):
    note = get_active_or_404(db, Note, require_id(id, "Note"), family_id, "Note")
    soft_delete(db, note, "Failed to delete note")
    return ApiResponse()
