# app/schemas/diaper_log_schema.py

from datetime import datetime
from enum import Enum
from typing import Optional

from app.schemas.base_schema import ActivityResponseBase, CamelModel, UtcDatetime


class DiaperType(str, Enum):
    WET = "WET"
    DIRTY = "DIRTY"
    BOTH = "BOTH"


class DiaperCondition(str, Enum):
    NORMAL = "NORMAL"
    LOOSE = "LOOSE"
    FIRM = "FIRM"
    OTHER = "OTHER"


class DiaperColor(str, Enum):
    YELLOW = "YELLOW"
    BROWN = "BROWN"
    GREEN = "GREEN"
    OTHER = "OTHER"


class DiaperLogCreate(CamelModel):
    baby_id: int
    time: datetime
    type: DiaperType
    condition: Optional[DiaperCondition] = None
    color: Optional[DiaperColor] = None

class DiaperLogUpdate(CamelModel):
    time: Optional[datetime] = None
    type: Optional[DiaperType] = None
    condition: Optional[DiaperCondition] = None
    color: Optional[DiaperColor] = None

class DiaperLogResponse(ActivityResponseBase):
    time: UtcDatetime
    type: str
    condition: Optional[str] = None
    color: Optional[str] = None
