"""Timer package."""

from .engine import (
    TimerEngine,
    RunState,
    DEFAULT_DURATIONS,
    NOTIFICATION_TITLE,
    NOTIFICATION_BODIES,
)
from .driver import TickDriver, DEFAULT_TICK_INTERVAL_MS

__all__ = [
    "TimerEngine",
    "RunState",
    "TickDriver",
    "DEFAULT_DURATIONS",
    "DEFAULT_TICK_INTERVAL_MS",
    "NOTIFICATION_TITLE",
    "NOTIFICATION_BODIES",
]
