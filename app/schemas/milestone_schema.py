# app/schemas/milestone_schema.py

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from app.schemas.base_schema import ActivityResponseBase, CamelModel, UtcDatetime


class MilestoneCategory(str, Enum):
    MOTOR = "MOTOR"
    COGNITIVE = "COGNITIVE"
    SOCIAL = "SOCIAL"
    LANGUAGE = "LANGUAGE"
    CUSTOM = "CUSTOM"


class MilestoneCreate(CamelModel):
    baby_id: int
    date: datetime
    title: str = Field(..., min_length=1)
    description: Optional[str] = None
    category: MilestoneCategory = MilestoneCategory.CUSTOM

class MilestoneUpdate(CamelModel):
    date: Optional[datetime] = None
    title: Optional[str] = Field(None, min_length=1)
    description: Optional[str] = None
    category: Optional[MilestoneCategory] = None

class MilestoneResponse(ActivityResponseBase):
    date: UtcDatetime
    title: str
    description: Optional[str] = None
    category: str
