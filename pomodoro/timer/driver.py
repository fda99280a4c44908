"""Periodic tick source for the timer engine."""

from __future__ import annotations

from PyQt6.QtCore import QObject, QTimer

from .engine import TimerEngine

DEFAULT_TICK_INTERVAL_MS = 500
MIN_TICK_INTERVAL_MS = 50


class TickDriver(QObject):
    """Calls ``engine.tick()`` on a ``QTimer``.

    The interval only affects how often the display refreshes; the
    engine computes remaining time from timestamps, so a slow or stalled
    event loop never makes the countdown drift.
    """

    def __init__(
        self,
        engine: TimerEngine,
        parent: QObject | None = None,
        *,
        interval_ms: int = DEFAULT_TICK_INTERVAL_MS,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._qt_timer = QTimer(self)
        self._qt_timer.setInterval(max(MIN_TICK_INTERVAL_MS, interval_ms))
        self._qt_timer.timeout.connect(self._on_timeout)

    @property
    def interval_ms(self) -> int:
        return self._qt_timer.interval()

    @property
    def is_active(self) -> bool:
        return self._qt_timer.isActive()

    def start(self) -> None:
        self._qt_timer.start()
        self._engine.tick()

    def stop(self) -> None:
        self._qt_timer.stop()

    def _on_timeout(self) -> None:
        self._engine.tick()
