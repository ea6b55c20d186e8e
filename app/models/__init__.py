from app.models.auth_models import AuthSession, Caretaker, Family
from app.models.baby_model import Baby
from app.models.bath_log_model import BathLog
from app.models.diaper_log_model import DiaperLog
from app.models.feed_log_model import FeedLog
from app.models.milestone_model import Milestone
from app.models.note_model import Note
from app.models.sleep_log_model import SleepLog

__all__ = [
    "AuthSession", "Caretaker", "Family",
    "Baby",
    "BathLog", "DiaperLog", "FeedLog", "Milestone", "Note", "SleepLog",
]
