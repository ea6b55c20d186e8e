from datetime import datetime
from enum import Enum
from typing import Optional

from app.schemas.base_schema import CamelModel, UtcDatetime


class Gender(str, Enum):
    MALE = "MALE"
    FEMALE = "FEMALE"


class BabyCreate(CamelModel):
    first_name: str
    last_name: Optional[str] = None
    birth_date: datetime
    gender: Optional[Gender] = None
    inactive: bool = False

class BabyUpdate(CamelModel):
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    birth_date: Optional[datetime] = None
    gender: Optional[Gender] = None
    inactive: Optional[bool] = None

class BabyResponse(CamelModel):
    id: int
    family_id: Optional[int] = None
    first_name: str
    last_name: Optional[str] = None
    birth_date: UtcDatetime
    gender: Optional[str] = None
    inactive: bool = False
    created_at: Optional[UtcDatetime] = None
    updated_at: Optional[UtcDatetime] = None
    deleted_at: Optional[UtcDatetime] = None
