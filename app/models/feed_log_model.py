# app/models/feed_log_model.py
from sqlalchemy import Column, Float, Integer, String

from config.database import Base
from app.models.types import ActivityMixin, UTCDateTime


class FeedLog(Base, ActivityMixin):
    __tablename__ = "feed_logs"

    time = Column(UTCDateTime, nullable=False, index=True)
    type = Column(String(10), nullable=False)
    amount = Column(Float, nullable=True)
    unit_abbr = Column(String(10), nullable=True)
    side = Column(String(5), nullable=True)
    feed_duration = Column(Integer, nullable=True)  # seconds
    food = Column(String, nullable=True)
