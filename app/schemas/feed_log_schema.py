# app/schemas/feed_log_schema.py

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from app.schemas.base_schema import ActivityResponseBase, CamelModel, UtcDatetime


class FeedType(str, Enum):
    BREAST = "BREAST"
    BOTTLE = "BOTTLE"
    SOLIDS = "SOLIDS"


class BreastSide(str, Enum):
    LEFT = "LEFT"
    RIGHT = "RIGHT"


class FeedLogCreate(CamelModel):
    baby_id: int
    time: datetime
    type: FeedType
    amount: Optional[float] = Field(None, ge=0)
    unit_abbr: Optional[str] = None
    side: Optional[BreastSide] = None
    feed_duration: Optional[int] = Field(None, ge=0)
    food: Optional[str] = None

class FeedLogUpdate(CamelModel):
    time: Optional[datetime] = None
    type: Optional[FeedType] = None
    amount: Optional[float] = Field(None, ge=0)
    unit_abbr: Optional[str] = None
    side: Optional[BreastSide] = None
    feed_duration: Optional[int] = Field(None, ge=0)
    food: Optional[str] = None

class FeedLogResponse(ActivityResponseBase):
    time: UtcDatetime
    type: str
    amount: Optional[float] = None
    unit_abbr: Optional[str] = None
    side: Optional[str] = None
    feed_duration: Optional[int] = None
    food: Optional[str] = None
