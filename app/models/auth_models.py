from sqlalchemy import Column, Integer, String, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship

from config.database import Base
from app.models.types import AuditMixin, UTCDateTime


class Family(Base, AuditMixin):
    __tablename__ = "families"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)

    caretakers = relationship("Caretaker", back_populates="family")
    babies = relationship("Baby", back_populates="family")


class Caretaker(Base, AuditMixin):
    __tablename__ = "caretakers"
    __table_args__ = (UniqueConstraint("family_id", "login_id", name="uq_caretaker_login"),)

    id = Column(Integer, primary_key=True, index=True)
    family_id = Column(Integer, ForeignKey("families.id"), nullable=False, index=True)
    login_id = Column(String(32), nullable=False)
    name = Column(String, nullable=False)
    type = Column(String, nullable=True)  # "Parent", "Nanny", ...
    role = Column(String(10), default="USER", nullable=False)
    security_pin = Column(String, nullable=False)  # passlib hash

    family = relationship("Family", back_populates="caretakers")
    sessions = relationship("AuthSession", back_populates="caretaker")


class AuthSession(Base):
    __tablename__ = "auth_sessions"

    id = Column(String(64), primary_key=True)  # JWT jti
    caretaker_id = Column(Integer, ForeignKey("caretakers.id"), nullable=False, index=True)
    issued_at = Column(UTCDateTime, nullable=False)
    expires_at = Column(UTCDateTime, nullable=False)
    revoked_at = Column(UTCDateTime, nullable=True)

    caretaker = relationship("Caretaker", back_populates="sessions", lazy="joined")
