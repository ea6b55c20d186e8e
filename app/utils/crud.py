# app/utils/crud.py
"""Small helpers shared by the per-resource route modules."""

import logging
from contextlib import contextmanager
from enum import Enum
from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models.baby_model import Baby
from app.utils.errors import InternalError, NotFoundError, ValidationError
from app.utils.timezone import to_canonical, utc_now

logger = logging.getLogger(__name__)


@contextmanager
def persisting(db: Session, failure_message: str):
    """
    Run a unit of work; storage faults are logged, rolled back and
    re-raised as InternalError carrying only ``failure_message``.
    """
    try:
        yield
    except SQLAlchemyError:
        db.rollback()
        logger.exception(failure_message)
        raise InternalError(failure_message)


def require_id(record_id: Optional[int], label: str) -> int:
    if record_id is None:
        raise ValidationError(f"{label} ID is required")
    return record_id


def scoped(query, model, family_id: Optional[int]):
    query = query.filter(model.deleted_at.is_(None))
    if family_id is not None:
        query = query.filter(model.family_id == family_id)
    return query


def get_active_or_404(db: Session, model, record_id: int, family_id: Optional[int], label: str):
    record = scoped(db.query(model), model, family_id).filter(model.id == record_id).first()
    if record is None:
        raise NotFoundError(f"{label} not found")
    return record


def get_baby_or_404(db: Session, baby_id: int, family_id: Optional[int]) -> Baby:
    return get_active_or_404(db, Baby, baby_id, family_id, "Baby")


def date_range(start_date: Optional[str], end_date: Optional[str], zone):
    """Both bounds or neither; parsed through the timezone normalizer."""
    if not start_date or not end_date:
        return None
    start = to_canonical(start_date, zone)
    end = to_canonical(end_date, zone)
    if end < start:
        raise ValidationError("endDate must not be before startDate")
    return start, end


def apply_changes(record, changes: dict, date_fields=(), zone=None):
    for field, value in changes.items():
        if field in date_fields and value is not None:
            value = to_canonical(value, zone)
        if isinstance(value, Enum):
            value = value.value
        setattr(record, field, value)
    return record


def soft_delete(db: Session, record, failure_message: str):
    with persisting(db, failure_message):
        record.deleted_at = utc_now()
        db.commit()


def reject_cleared(changes: dict, fields) -> dict:
    """Required columns may be omitted from a partial update, never nulled."""
    for field in fields:
        if field in changes and changes[field] is None:
            raise ValidationError(f"{field} cannot be cleared")
    return changes
