# app/models/diaper_log_model.py
from sqlalchemy import Column, String

from config.database import Base
from app.models.types import ActivityMixin, UTCDateTime


class DiaperLog(Base, ActivityMixin):
    __tablename__ = "diaper_logs"

    time = Column(UTCDateTime, nullable=False, index=True)
    type = Column(String(5), nullable=False)
    condition = Column(String(10), nullable=True)
    color = Column(String(10), nullable=True)
