# app/models/types.py
from datetime import timezone

from sqlalchemy import Column, DateTime, ForeignKey, Integer, func
from sqlalchemy.orm import declared_attr, relationship
from sqlalchemy.types import TypeDecorator


class UTCDateTime(TypeDecorator):
    """Stores naive UTC and always hands back aware UTC datetimes."""

    impl = DateTime
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value
        return value.astimezone(timezone.utc).replace(tzinfo=None)

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class AuditMixin:
    created_at = Column(UTCDateTime, server_default=func.now(), nullable=False)
    updated_at = Column(UTCDateTime, server_default=func.now(), onupdate=func.now(), nullable=False)
    deleted_at = Column(UTCDateTime, nullable=True, index=True)


class ActivityMixin(AuditMixin):
    """Columns shared by every logged baby event."""

    id = Column(Integer, primary_key=True, index=True)

    @declared_attr
    def baby_id(cls):
        return Column(Integer, ForeignKey("babies.id"), nullable=False, index=True)

    @declared_attr
    def family_id(cls):
        return Column(Integer, ForeignKey("families.id"), nullable=True, index=True)

    @declared_attr
    def caretaker_id(cls):
        return Column(Integer, ForeignKey("caretakers.id"), nullable=True)

    @declared_attr
    def caretaker(cls):
        return relationship("Caretaker", lazy="joined")

    @property
    def caretaker_name(self):
        return self.caretaker.name if self.caretaker else None
