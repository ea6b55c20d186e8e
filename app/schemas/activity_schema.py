# app/schemas/activity_schema.py
"""
Tagged union over every kind of logged event.

Each member is the resource's response schema plus a literal ``kind``
discriminant, so the aggregator and the timeline never have to guess an
event's kind from the fields it happens to carry.
"""

from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import Field

from app.models import BathLog, DiaperLog, FeedLog, Milestone, Note, SleepLog
from app.schemas.bath_log_schema import BathLogResponse
from app.schemas.diaper_log_schema import DiaperLogResponse
from app.schemas.feed_log_schema import FeedLogResponse
from app.schemas.milestone_schema import MilestoneResponse
from app.schemas.note_schema import NoteResponse
from app.schemas.sleep_log_schema import SleepLogResponse


class ActivityKind(str, Enum):
    SLEEP = "sleep"
    FEED = "feed"
    DIAPER = "diaper"
    NOTE = "note"
    BATH = "bath"
    MILESTONE = "milestone"


class SleepActivity(SleepLogResponse):
    kind: Literal["sleep"] = "sleep"


class FeedActivity(FeedLogResponse):
    kind: Literal["feed"] = "feed"


class DiaperActivity(DiaperLogResponse):
    kind: Literal["diaper"] = "diaper"


class NoteActivity(NoteResponse):
    kind: Literal["note"] = "note"


class BathActivity(BathLogResponse):
    kind: Literal["bath"] = "bath"


class MilestoneActivity(MilestoneResponse):
    kind: Literal["milestone"] = "milestone"


Activity = Annotated[
    Union[SleepActivity, FeedActivity, DiaperActivity, NoteActivity, BathActivity, MilestoneActivity],
    Field(discriminator="kind"),
]

# ORM model -> union member
ACTIVITY_SCHEMAS = {
    SleepLog: SleepActivity,
    FeedLog: FeedActivity,
    DiaperLog: DiaperActivity,
    Note: NoteActivity,
    BathLog: BathActivity,
    Milestone: MilestoneActivity,
}


def to_activity(row):
    schema = ACTIVITY_SCHEMAS.get(type(row))
    if schema is None:
        raise TypeError(f"Not an activity row: {type(row).__name__}")
    return schema.model_validate(row)
