# app/models/bath_log_model.py
from sqlalchemy import Boolean, Column, Text

from config.database import Base
from app.models.types import ActivityMixin, UTCDateTime


class BathLog(Base, ActivityMixin):
    __tablename__ = "bath_logs"

    time = Column(UTCDateTime, nullable=False, index=True)
    soap_used = Column(Boolean, default=False, nullable=False)
    shampoo_used = Column(Boolean, default=False, nullable=False)
    notes = Column(Text, nullable=True)
