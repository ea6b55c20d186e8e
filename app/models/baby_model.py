from sqlalchemy import Boolean, Column, Integer, String, ForeignKey
from sqlalchemy.orm import relationship

from config.database import Base
from app.models.types import AuditMixin, UTCDateTime


class Baby(Base, AuditMixin):
    __tablename__ = "babies"

    id = Column(Integer, primary_key=True, index=True)
    family_id = Column(Integer, ForeignKey("families.id"), nullable=True, index=True)
    first_name = Column(String, nullable=False)
    last_name = Column(String, nullable=True)
    birth_date = Column(UTCDateTime, nullable=False)
    gender = Column(String(6), nullable=True)  # MALE / FEMALE
    inactive = Column(Boolean, default=False, nullable=False)

    family = relationship("Family", back_populates="babies")
