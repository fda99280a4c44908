"""Session history package."""

from .models import Mode, Session, SessionStatus
from .recorder import SessionRecorder, ABANDON_THRESHOLD_SECONDS
from .store import SessionStore

__all__ = [
    "Mode",
    "Session",
    "SessionStatus",
    "SessionRecorder",
    "SessionStore",
    "ABANDON_THRESHOLD_SECONDS",
]
