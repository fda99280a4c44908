"""UI package."""

from .timer_widget import TimerWidget
from .session_history import SessionHistoryWidget
from .main_window import PomodoroWindow

__all__ = [
    "TimerWidget",
    "SessionHistoryWidget",
    "PomodoroWindow",
]
