# app/schemas/bath_log_schema.py

from datetime import datetime
from typing import Optional

from app.schemas.base_schema import ActivityResponseBase, CamelModel, UtcDatetime


class BathLogCreate(CamelModel):
    baby_id: int
    time: datetime
    soap_used: bool = False
    shampoo_used: bool = False
    notes: Optional[str] = None

class BathLogUpdate(CamelModel):
    time: Optional[datetime] = None
    soap_used: Optional[bool] = None
    shampoo_used: Optional[bool] = None
    notes: Optional[str] = None

class BathLogResponse(ActivityResponseBase):
    time: UtcDatetime
    soap_used: bool = False
    shampoo_used: bool = False
    notes: Optional[str] = None
