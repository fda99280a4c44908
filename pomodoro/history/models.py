"""Session record model for the Pomodoro history.

A ``Session`` is created once, when an interval completes or is
abandoned, and never changes afterwards.  The JSON representation is the
one written to ``sessions.json``.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class Mode(Enum):
    FOCUS = "Focus"
    BREAK = "Break"

    @property
    def other(self) -> "Mode":
        return Mode.BREAK if self is Mode.FOCUS else Mode.FOCUS


class SessionStatus(Enum):
    COMPLETED = "completed"
    ABANDONED = "abandoned"


def _new_id() -> str:
    return str(uuid.uuid4())


def format_timestamp(value: datetime) -> str:
    """ISO-8601 in UTC, e.g. ``2026-10-17T09:30:00+00:00``."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def parse_timestamp(raw: str) -> datetime:
    if not isinstance(raw, str):
        raise TypeError(f"timestamp must be a string, got {type(raw).__name__}")
    value = datetime.fromisoformat(raw)
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


@dataclass(frozen=True)
class Session:
    """One recorded Focus or Break interval."""

    title: str
    mode: Mode
    start_timestamp: datetime
    end_timestamp: datetime
    duration_seconds: float
    status: SessionStatus
    id: str = field(default_factory=_new_id)

    @classmethod
    def between(
        cls,
        *,
        title: str,
        mode: Mode,
        start: datetime,
        end: datetime,
        status: SessionStatus,
    ) -> "Session":
        """Build a record whose duration is ``end - start`` (never negative)."""
        duration = max(0.0, (end - start).total_seconds())
        return cls(
            title=title,
            mode=mode,
            start_timestamp=start,
            end_timestamp=end,
            duration_seconds=duration,
            status=status,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "mode": self.mode.value,
            "start_timestamp": format_timestamp(self.start_timestamp),
            "end_timestamp": format_timestamp(self.end_timestamp),
            "duration_seconds": self.duration_seconds,
            "status": self.status.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Session":
        """Inverse of :meth:`to_dict`.

        Raises ``KeyError``, ``TypeError`` or ``ValueError`` when *data*
        does not match the stored schema.
        """
        if not isinstance(data, dict):
            raise TypeError(f"session entry must be an object, got {type(data).__name__}")
        title = data["title"]
        session_id = data["id"]
        duration = data["duration_seconds"]
        if not isinstance(title, str) or not isinstance(session_id, str):
            raise TypeError("id and title must be strings")
        if isinstance(duration, bool) or not isinstance(duration, (int, float)):
            raise TypeError("duration_seconds must be a number")
        return cls(
            id=session_id,
            title=title,
            mode=Mode(data["mode"]),
            start_timestamp=parse_timestamp(data["start_timestamp"]),
            end_timestamp=parse_timestamp(data["end_timestamp"]),
            duration_seconds=float(duration),
            status=SessionStatus(data["status"]),
        )

    def __repr__(self) -> str:
        return (
            f"<Session id={self.id} mode={self.mode.value} "
            f"status={self.status.value} duration={self.duration_seconds:.0f}s>"
        )
