"""Timer state machine for Pomodoro.

States
------
Idle      Not running; the display shows the full duration of the mode.
Running   Counting down towards ``end_timestamp``.
Paused    Frozen with ``paused_remaining`` seconds left.

Transitions
-----------
Idle → Running          (start, Focus needs a non-blank title)
Running → Paused        (pause)
Paused → Running        (resume)
Running → Idle          (tick once the end timestamp has passed)
Any → Idle              (reset / switch_mode)

Remaining time is always derived from the stored end timestamp and the
current time, never from counting ticks, so a late or skipped ``tick()``
still yields the right answer.  Every operation takes an optional
``now`` so callers (and tests) can drive the engine with their own clock.

Invalid calls are ignored rather than raised: the UI already disables
the corresponding buttons.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from enum import Enum

from PyQt6.QtCore import QObject, pyqtSignal

from ..history.models import Mode, Session
from ..history.recorder import SessionRecorder
from ..notifications.scheduler import NotificationScheduler, NullNotifier

logger = logging.getLogger(__name__)


# ── enums ─────────────────────────────────────────────────────────────────


class RunState(Enum):
    IDLE = "Idle"
    RUNNING = "Running"
    PAUSED = "Paused"


# ── constants ─────────────────────────────────────────────────────────────

DEFAULT_DURATIONS: dict[Mode, int] = {
    Mode.FOCUS: 25 * 60,
    Mode.BREAK: 5 * 60,
}

NOTIFICATION_TITLE = "Pomodoro"
NOTIFICATION_BODIES: dict[Mode, str] = {
    Mode.FOCUS: "Focus session complete.",
    Mode.BREAK: "Break time is over.",
}


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Focus/break countdown with session recording and notifications.

    Signals
    -------
    state_changed(new_state: RunState)
        Emitted on every run-state transition.
    mode_changed(new_mode: Mode)
        Emitted when ``switch_mode()`` toggles the mode.
    remaining_changed(seconds: float)
        Emitted whenever the displayed remaining time is recomputed.
    session_recorded(session: Session)
        Emitted after a completed or abandoned interval is recorded.
    """

    state_changed = pyqtSignal(object)
    mode_changed = pyqtSignal(object)
    remaining_changed = pyqtSignal(float)
    session_recorded = pyqtSignal(object)

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        recorder: SessionRecorder | None = None,
        notifier: NotificationScheduler | None = None,
        clock: Callable[[], datetime] = utc_now,
        mode: Mode = Mode.FOCUS,
    ) -> None:
        super().__init__(parent)

        self._recorder = recorder if recorder is not None else SessionRecorder()
        self._notifier: NotificationScheduler = (
            notifier if notifier is not None else NullNotifier()
        )
        self._clock = clock

        # ── snapshot ──────────────────────────────────────────────────
        self._mode: Mode = mode
        self._state: RunState = RunState.IDLE
        self._end_timestamp: datetime | None = None
        self._paused_remaining: float | None = None
        self._session_start: datetime | None = None
        self._focus_title: str = ""

        self._display_remaining: float = float(self.duration_for(mode))

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def run_state(self) -> RunState:
        return self._state

    @property
    def display_remaining(self) -> float:
        """Seconds shown on the clock as of the last recomputation."""
        return self._display_remaining

    @property
    def end_timestamp(self) -> datetime | None:
        return self._end_timestamp

    @property
    def paused_remaining(self) -> float | None:
        return self._paused_remaining

    @property
    def session_start_timestamp(self) -> datetime | None:
        return self._session_start

    @property
    def focus_title(self) -> str:
        return self._focus_title

    @focus_title.setter
    def focus_title(self, value: str) -> None:
        self._focus_title = value

    @property
    def sessions(self) -> tuple[Session, ...]:
        """Recorded sessions, newest first."""
        return self._recorder.sessions

    @property
    def full_duration(self) -> int:
        return self.duration_for(self._mode)

    @property
    def can_start(self) -> bool:
        if self._state != RunState.IDLE:
            return False
        return self._mode != Mode.FOCUS or bool(self._focus_title.strip())

    @property
    def status_text(self) -> str:
        """e.g. ``"Focus · Running"``."""
        return f"{self._mode.value} · {self._state.value}"

    @staticmethod
    def duration_for(mode: Mode) -> int:
        return DEFAULT_DURATIONS[mode]

    def remaining(self, now: datetime | None = None) -> float:
        """Seconds left at *now*, from the stored snapshot only."""
        if self._state == RunState.RUNNING and self._end_timestamp is not None:
            now = self._now(now)
            return max(0.0, (self._end_timestamp - now).total_seconds())
        if self._state == RunState.PAUSED and self._paused_remaining is not None:
            return max(0.0, self._paused_remaining)
        return float(self.full_duration)

    def formatted_time(self) -> str:
        """``MM:SS`` of the displayed remaining time, rounded down."""
        total = max(0, math.floor(self._display_remaining))
        minutes, seconds = divmod(total, 60)
        return f"{minutes:02d}:{seconds:02d}"

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def start(self, now: datetime | None = None) -> None:
        """Begin an interval.  Only valid from Idle (and with a title in Focus)."""
        if not self.can_start:
            return
        now = self._now(now)
        if self._session_start is None:
            self._session_start = now
        self._end_timestamp = now + timedelta(seconds=self.full_duration)
        self._paused_remaining = None
        self._set_state(RunState.RUNNING)
        self._update_display(now)
        self._schedule_notification(now)

    def pause(self, now: datetime | None = None) -> None:
        if self._state != RunState.RUNNING:
            return
        now = self._now(now)
        remaining = self.remaining(now)
        self._cancel_notifications()
        self._paused_remaining = remaining
        self._end_timestamp = None
        self._set_state(RunState.PAUSED)
        self._update_display(now)

    def resume(self, now: datetime | None = None) -> None:
        if self._state != RunState.PAUSED:
            return
        now = self._now(now)
        remaining = self._paused_remaining
        if remaining is None:
            remaining = float(self.full_duration)
        self._end_timestamp = now + timedelta(seconds=remaining)
        self._paused_remaining = None
        self._set_state(RunState.RUNNING)
        self._update_display(now)
        self._schedule_notification(now)

    def reset(self, now: datetime | None = None) -> None:
        """Stop whatever is going on and return to Idle.

        An interrupted interval is recorded as abandoned when it ran for
        longer than the recorder's threshold.
        """
        now = self._now(now)
        self._abandon_active(now)
        self._return_to_idle(float(self.full_duration))

    def switch_mode(self, now: datetime | None = None) -> None:
        """Toggle Focus ↔ Break and reset.

        An interrupted interval is recorded under the mode it ran in.
        """
        now = self._now(now)
        self._abandon_active(now)
        self._mode = self._mode.other
        logger.debug("Mode switched to %s", self._mode.value)
        self._return_to_idle(float(self.full_duration))
        self.mode_changed.emit(self._mode)

    def tick(self, now: datetime | None = None) -> None:
        """Recompute the display and complete the interval once it ran out.

        Safe to call at any frequency, or after an arbitrary gap.
        """
        now = self._now(now)
        remaining = self.remaining(now)
        if self._state == RunState.RUNNING and remaining <= 0:
            self._complete()
            self._return_to_idle(0.0)
            return
        self._display_remaining = remaining
        self.remaining_changed.emit(remaining)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: transitions
    # ══════════════════════════════════════════════════════════════════

    def _now(self, now: datetime | None) -> datetime:
        return now if now is not None else self._clock()

    def _set_state(self, new_state: RunState) -> None:
        if new_state != self._state:
            logger.debug("%s: %s -> %s", self._mode.value, self._state.value, new_state.value)
        self._state = new_state
        self.state_changed.emit(new_state)

    def _update_display(self, now: datetime) -> None:
        self._display_remaining = self.remaining(now)
        self.remaining_changed.emit(self._display_remaining)

    def _return_to_idle(self, display: float) -> None:
        self._cancel_notifications()
        self._end_timestamp = None
        self._paused_remaining = None
        self._session_start = None
        self._set_state(RunState.IDLE)
        self._display_remaining = display
        self.remaining_changed.emit(display)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: session recording
    # ══════════════════════════════════════════════════════════════════

    def _complete(self) -> None:
        end = self._end_timestamp
        if end is None:
            return
        session = self._recorder.record_completion(
            mode=self._mode,
            title=self._focus_title,
            end=end,
            start=self._session_start,
            full_duration=self.full_duration,
        )
        self.session_recorded.emit(session)

    def _abandon_active(self, now: datetime) -> None:
        if self._state not in (RunState.RUNNING, RunState.PAUSED):
            return
        elapsed = self.full_duration - self.remaining(now)
        session = self._recorder.record_abandonment(
            mode=self._mode,
            title=self._focus_title,
            now=now,
            start=self._session_start,
            elapsed=elapsed,
        )
        if session is not None:
            self.session_recorded.emit(session)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL: notifications (best effort)
    # ══════════════════════════════════════════════════════════════════

    def _schedule_notification(self, now: datetime) -> None:
        end = self._end_timestamp
        if end is None or end <= now:
            return
        try:
            self._notifier.cancel_all()
            self._notifier.schedule_at(end, NOTIFICATION_TITLE, NOTIFICATION_BODIES[self._mode])
        except Exception:
            logger.warning("Could not schedule notification", exc_info=True)

    def _cancel_notifications(self) -> None:
        try:
            self._notifier.cancel_all()
        except Exception:
            logger.warning("Could not cancel notifications", exc_info=True)
