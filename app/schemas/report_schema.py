# app/schemas/report_schema.py

from datetime import date
from typing import List

from app.schemas.activity_schema import Activity
from app.schemas.base_schema import CamelModel


class DailyStats(CamelModel):
    day: date
    timezone: str

    awake_minutes: int = 0
    sleep_minutes: int = 0
    longest_sleep_minutes: int = 0
    feed_count: int = 0
    diaper_count: int = 0
    poop_count: int = 0
    left_breast_seconds: int = 0
    right_breast_seconds: int = 0
    note_count: int = 0
    bath_count: int = 0
    milestone_count: int = 0

    # Display strings: "Xh Ym" for durations, "None" for empty buckets
    awake_time: str = "0h 0m"
    sleep_time: str = "0h 0m"
    total_consumed: str = "None"
    solids_consumed: str = "None"
    left_breast_time: str = "0h 0m"
    right_breast_time: str = "0h 0m"


class TimelinePage(CamelModel):
    items: List[Activity]
    page: int
    page_size: int
    total_pages: int
    total_items: int
