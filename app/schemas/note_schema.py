# app/schemas/note_schema.py

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.schemas.base_schema import ActivityResponseBase, CamelModel, UtcDatetime


class NoteCreate(CamelModel):
    baby_id: int
    time: datetime
    content: str = Field(..., min_length=1)
    category: Optional[str] = None

class NoteUpdate(CamelModel):
    time: Optional[datetime] = None
    content: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = None

class NoteResponse(ActivityResponseBase):
    time: UtcDatetime
    content: str
    category: Optional[str] = None
