# app/models/note_model.py
from sqlalchemy import Column, String, Text

from config.database import Base
from app.models.types import ActivityMixin, UTCDateTime


class Note(Base, ActivityMixin):
    __tablename__ = "notes"

    time = Column(UTCDateTime, nullable=False, index=True)
    content = Column(Text, nullable=False)
    category = Column(String, nullable=True)
