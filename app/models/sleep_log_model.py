# app/models/sleep_log_model.py
from sqlalchemy import Column, Integer, String

from config.database import Base
from app.models.types import ActivityMixin, UTCDateTime


class SleepLog(Base, ActivityMixin):
    __tablename__ = "sleep_logs"

    start_time = Column(UTCDateTime, nullable=False, index=True)
    end_time = Column(UTCDateTime, nullable=True)
    duration = Column(Integer, nullable=True)  # minutes, set iff end_time is set
    type = Column(String(20), nullable=False)
    location = Column(String, nullable=True)
    quality = Column(String(10), nullable=True)
