# app/utils/report_generator.py

from datetime import date, datetime, time, timedelta, timezone
from typing import Dict, Iterable, Optional

from sqlalchemy import or_
from sqlalchemy.orm import Session

from app.models import BathLog, DiaperLog, FeedLog, Milestone, Note, SleepLog
from app.schemas.activity_schema import ActivityKind, to_activity
from app.schemas.report_schema import DailyStats
from app.utils.timezone import get_zone, utc_now

FULL_DAY_MINUTES = 24 * 60


def day_window(day: date, zone=None):
    """
    Local midnight of ``day`` and of the day after, as UTC instants.
    The window is half-open, so it covers 00:00:00.000 through 23:59:59.999
    and a sleep ending at midnight contributes its full last minute.
    """
    tz = get_zone(zone)
    start_local = datetime.combine(day, time.min, tzinfo=tz)
    end_local = datetime.combine(day + timedelta(days=1), time.min, tzinfo=tz)
    return start_local.astimezone(timezone.utc), end_local.astimezone(timezone.utc)


def format_minutes(minutes: int) -> str:
    return f"{minutes // 60}h {minutes % 60}m"


def format_amounts(buckets: Dict[str, float]) -> str:
    if not buckets:
        return "None"
    return ", ".join(f"{amount:g} {unit.lower()}" for unit, amount in buckets.items())


def elapsed_minutes_of_day(day: date, zone=None, now: Optional[datetime] = None) -> int:
    tz = get_zone(zone)
    now = now or utc_now()
    today = now.astimezone(tz).date()

    if day > today:
        return 0
    if day < today:
        return FULL_DAY_MINUTES
    start_of_day, _ = day_window(day, tz)
    elapsed = now - start_of_day
    return max(0, min(FULL_DAY_MINUTES, int(elapsed.total_seconds() // 60)))


def compute_daily_stats(activities: Iterable, day: date, zone=None, now: Optional[datetime] = None) -> DailyStats:
    tz = get_zone(zone)
    start_of_day, end_of_day = day_window(day, tz)

    def in_window(instant: Optional[datetime]) -> bool:
        return instant is not None and start_of_day <= instant < end_of_day

    sleep_minutes = 0
    longest_sleep = 0
    consumed: Dict[str, float] = {}
    solids: Dict[str, float] = {}
    feed_count = 0
    breast_seconds = {"LEFT": 0, "RIGHT": 0}
    diaper_count = 0
    poop_count = 0
    note_count = 0
    bath_count = 0
    milestone_count = 0

    for activity in activities:
        kind = activity.kind

        if kind == ActivityKind.SLEEP:
            # open sessions have nothing to attribute yet
            if activity.end_time is None:
                continue
            overlap_start = max(activity.start_time, start_of_day)
            overlap_end = min(activity.end_time, end_of_day)
            if overlap_end > overlap_start:
                minutes = int((overlap_end - overlap_start).total_seconds() // 60)
                sleep_minutes += minutes
                longest_sleep = max(longest_sleep, minutes)

        elif kind == ActivityKind.FEED:
            if not in_window(activity.time):
                continue
            feed_count += 1
            if activity.amount:
                unit = activity.unit_abbr or "oz"
                bucket = solids if activity.type == "SOLIDS" else consumed
                bucket[unit] = bucket.get(unit, 0) + activity.amount
            if activity.type == "BREAST" and activity.side in breast_seconds:
                if activity.feed_duration:
                    breast_seconds[activity.side] += activity.feed_duration
                elif activity.amount:
                    breast_seconds[activity.side] += int(activity.amount * 60)

        elif kind == ActivityKind.DIAPER:
            if in_window(activity.time):
                diaper_count += 1
                if activity.type in ("DIRTY", "BOTH"):
                    poop_count += 1

        elif kind == ActivityKind.NOTE:
            if in_window(activity.time):
                note_count += 1

        elif kind == ActivityKind.BATH:
            if in_window(activity.time):
                bath_count += 1

        elif kind == ActivityKind.MILESTONE:
            if in_window(activity.date):
                milestone_count += 1

        else:
            raise ValueError(f"Unknown activity kind: {kind}")

    awake_minutes = max(0, elapsed_minutes_of_day(day, tz, now) - sleep_minutes)

    return DailyStats(
        day=day,
        timezone=tz.key,
        awake_minutes=awake_minutes,
        sleep_minutes=sleep_minutes,
        longest_sleep_minutes=longest_sleep,
        feed_count=feed_count,
        diaper_count=diaper_count,
        poop_count=poop_count,
        left_breast_seconds=breast_seconds["LEFT"],
        right_breast_seconds=breast_seconds["RIGHT"],
        note_count=note_count,
        bath_count=bath_count,
        milestone_count=milestone_count,
        awake_time=format_minutes(awake_minutes),
        sleep_time=format_minutes(sleep_minutes),
        total_consumed=format_amounts(consumed),
        solids_consumed=format_amounts(solids),
        left_breast_time=format_minutes(breast_seconds["LEFT"] // 60),
        right_breast_time=format_minutes(breast_seconds["RIGHT"] // 60),
    )


def load_activities(db: Session, baby_id: int, start: datetime, end: datetime, family_id: Optional[int] = None):
    """
    Every non-deleted event of a baby touching [start, end], as tagged
    activities. Sleeps are included when they overlap the range at all.
    """
    rows = []

    sleeps = db.query(SleepLog).filter(
        SleepLog.baby_id == baby_id,
        SleepLog.deleted_at.is_(None),
        SleepLog.start_time <= end,
        or_(SleepLog.end_time.is_(None), SleepLog.end_time >= start),
    )
    if family_id is not None:
        sleeps = sleeps.filter(SleepLog.family_id == family_id)
    rows.extend(sleeps.all())

    for model, column in (
        (FeedLog, FeedLog.time),
        (DiaperLog, DiaperLog.time),
        (Note, Note.time),
        (BathLog, BathLog.time),
        (Milestone, Milestone.date),
    ):
        query = db.query(model).filter(
            model.baby_id == baby_id,
            model.deleted_at.is_(None),
            column.between(start, end),
        )
        if family_id is not None:
            query = query.filter(model.family_id == family_id)
        rows.extend(query.all())

    return [to_activity(row) for row in rows]


def generate_daily_summary(db: Session, baby_id: int, day: date, zone=None, family_id: Optional[int] = None,
                           now: Optional[datetime] = None) -> DailyStats:
    start_of_day, end_of_day = day_window(day, zone)
    activities = load_activities(db, baby_id, start_of_day, end_of_day, family_id)
    return compute_daily_stats(activities, day, zone, now)
