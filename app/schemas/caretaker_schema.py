from enum import Enum
from typing import Optional

from pydantic import Field

from app.schemas.base_schema import CamelModel, UtcDatetime


class CaretakerRole(str, Enum):
    ADMIN = "ADMIN"
    USER = "USER"


class CaretakerCreate(CamelModel):
    login_id: str = Field(..., min_length=2, max_length=32)
    name: str = Field(..., min_length=1)
    type: Optional[str] = None
    role: CaretakerRole = CaretakerRole.USER
    pin: str = Field(..., min_length=4, max_length=10)

class CaretakerResponse(CamelModel):
    id: int
    family_id: int
    login_id: str
    name: str
    type: Optional[str] = None
    role: str
    created_at: Optional[UtcDatetime] = None
