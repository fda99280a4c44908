"""Turns finished or interrupted intervals into ``Session`` records.

The recorder owns the in-memory history (newest first) and writes the
whole list through the store after every new record.  It is driven by
``TimerEngine``; nothing else should call it.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta

from .models import Mode, Session, SessionStatus
from .store import SessionStore

logger = logging.getLogger(__name__)

# Interruptions at or below this many seconds of elapsed time are noise.
ABANDON_THRESHOLD_SECONDS = 1.0


class SessionRecorder:
    def __init__(
        self,
        store: SessionStore | None = None,
        *,
        abandon_threshold: float = ABANDON_THRESHOLD_SECONDS,
    ) -> None:
        self._store = store
        self._abandon_threshold = abandon_threshold
        self._sessions: list[Session] = store.load() if store is not None else []

    @property
    def sessions(self) -> tuple[Session, ...]:
        return tuple(self._sessions)

    @property
    def abandon_threshold(self) -> float:
        return self._abandon_threshold

    def record_completion(
        self,
        *,
        mode: Mode,
        title: str,
        end: datetime,
        start: datetime | None,
        full_duration: float,
    ) -> Session:
        """Record an interval that ran out while Running.

        *start* falls back to ``end - full_duration`` when the engine
        never captured one.
        """
        if start is None:
            start = end - timedelta(seconds=full_duration)
        return self._append(Session.between(
            title=_title_for(mode, title),
            mode=mode,
            start=start,
            end=end,
            status=SessionStatus.COMPLETED,
        ))

    def record_abandonment(
        self,
        *,
        mode: Mode,
        title: str,
        now: datetime,
        start: datetime | None,
        elapsed: float,
    ) -> Session | None:
        """Record an interrupted interval, unless it barely ran."""
        if elapsed <= self._abandon_threshold:
            logger.debug("Not recording %.2fs %s interval", elapsed, mode.value)
            return None
        if start is None:
            start = now - timedelta(seconds=elapsed)
        return self._append(Session.between(
            title=_title_for(mode, title),
            mode=mode,
            start=start,
            end=now,
            status=SessionStatus.ABANDONED,
        ))

    def _append(self, session: Session) -> Session:
        self._sessions.insert(0, session)
        logger.info(
            "Recorded %s %s session (%.0fs) %r",
            session.status.value,
            session.mode.value,
            session.duration_seconds,
            session.title,
        )
        if self._store is not None:
            self._store.save(self._sessions)
        return session


def _title_for(mode: Mode, title: str) -> str:
    return title.strip() if mode is Mode.FOCUS else ""
