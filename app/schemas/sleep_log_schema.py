# app/schemas/sleep_log_schema.py

from datetime import datetime
from enum import Enum
from typing import Optional

from app.schemas.base_schema import ActivityResponseBase, CamelModel, UtcDatetime


class SleepType(str, Enum):
    NAP = "NAP"
    NIGHT_SLEEP = "NIGHT_SLEEP"


class SleepQuality(str, Enum):
    POOR = "POOR"
    FAIR = "FAIR"
    GOOD = "GOOD"
    EXCELLENT = "EXCELLENT"


class SleepLogCreate(CamelModel):
    baby_id: int
    start_time: datetime
    end_time: Optional[datetime] = None
    type: SleepType
    location: Optional[str] = None
    quality: Optional[SleepQuality] = None

class SleepLogUpdate(CamelModel):
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    type: Optional[SleepType] = None
    location: Optional[str] = None
    quality: Optional[SleepQuality] = None

class SleepLogResponse(ActivityResponseBase):
    start_time: UtcDatetime
    end_time: Optional[UtcDatetime] = None
    duration: Optional[int] = None
    type: str
    location: Optional[str] = None
    quality: Optional[str] = None
