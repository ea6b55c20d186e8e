# app/models/milestone_model.py
from sqlalchemy import Column, String, Text

from config.database import Base
from app.models.types import ActivityMixin, UTCDateTime


class Milestone(Base, ActivityMixin):
    __tablename__ = "milestones"

    date = Column(UTCDateTime, nullable=False, index=True)
    title = Column(String, nullable=False)
    description = Column(Text, nullable=True)
    category = Column(String(10), nullable=False, default="CUSTOM")
