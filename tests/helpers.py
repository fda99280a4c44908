"""Shared test helpers for Pomodoro."""

from datetime import datetime, timedelta, timezone

T0 = datetime(2026, 10, 17, 9, 0, 0, tzinfo=timezone.utc)


def at(seconds: float) -> datetime:
    """Absolute time *seconds* after ``T0``."""
    return T0 + timedelta(seconds=seconds)


class SignalCollector:
    """Utility to capture pyqtSignal emissions into a list."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeClock:
    """Manually advanced clock, starting at ``T0``."""

    def __init__(self, start: datetime = T0):
        self.now = start

    def __call__(self) -> datetime:
        return self.now

    def advance(self, seconds: float) -> datetime:
        self.now += timedelta(seconds=seconds)
        return self.now

    def set(self, seconds: float) -> datetime:
        self.now = at(seconds)
        return self.now


class RecordingNotifier:
    """NotificationScheduler double that remembers every call."""

    def __init__(self):
        self.calls: list[tuple] = []
        self.permission = True

    def request_permission(self) -> bool:
        self.calls.append(("request_permission",))
        return self.permission

    def schedule_at(self, timestamp, title, body):
        self.calls.append(("schedule_at", timestamp, title, body))

    def cancel_all(self):
        self.calls.append(("cancel_all",))

    @property
    def scheduled(self) -> list[tuple]:
        return [c for c in self.calls if c[0] == "schedule_at"]

    @property
    def last_call(self):
        return self.calls[-1] if self.calls else None


class FailingNotifier:
    """NotificationScheduler double whose every call blows up."""

    def schedule_at(self, timestamp, title, body):
        raise RuntimeError("notifications denied")

    def cancel_all(self):
        raise RuntimeError("notifications denied")
