"""Local notification collaborators.

The timer engine only ever asks for "notify at time T with this message"
and "cancel whatever is pending".  How (and whether) that reaches the
user is up to the implementation injected here.
"""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Protocol, runtime_checkable

from PyQt6.QtCore import QObject, QTimer
from PyQt6.QtWidgets import QSystemTrayIcon

logger = logging.getLogger(__name__)


@runtime_checkable
class NotificationScheduler(Protocol):
    def schedule_at(self, timestamp: datetime, title: str, body: str) -> None: ...

    def cancel_all(self) -> None: ...


@runtime_checkable
class NotificationAuthorizer(Protocol):
    def request_permission(self) -> bool: ...


class NullNotifier:
    """Accepts every request and does nothing."""

    def request_permission(self) -> bool:
        return False

    def schedule_at(self, timestamp: datetime, title: str, body: str) -> None:
        pass

    def cancel_all(self) -> None:
        pass


class TrayNotifier(QObject):
    """Delivers notifications as system-tray balloon messages.

    A single-shot ``QTimer`` holds the pending request; scheduling again
    replaces it.  Delivery is suppressed until ``request_permission()``
    has succeeded.
    """

    def __init__(
        self,
        tray_icon: QSystemTrayIcon | None = None,
        parent: QObject | None = None,
        *,
        enabled: bool = True,
    ) -> None:
        super().__init__(parent)
        self._tray_icon = tray_icon
        self._enabled = enabled
        self._authorized = False
        self._pending: tuple[str, str] | None = None

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self._deliver)

    @property
    def authorized(self) -> bool:
        return self._authorized

    @property
    def has_pending(self) -> bool:
        return self._timer.isActive()

    @property
    def pending_message(self) -> tuple[str, str] | None:
        return self._pending if self.has_pending else None

    def request_permission(self) -> bool:
        """Tray messages need a tray; there is no other permission to ask."""
        if not self._enabled:
            self._authorized = False
        elif self._tray_icon is None:
            self._authorized = False
        else:
            self._authorized = (
                QSystemTrayIcon.isSystemTrayAvailable()
                and QSystemTrayIcon.supportsMessages()
            )
        if not self._authorized:
            logger.info("Notifications unavailable; timer continues without them")
        return self._authorized

    def schedule_at(self, timestamp: datetime, title: str, body: str) -> None:
        self.cancel_all()
        delay = (timestamp - datetime.now(timezone.utc)).total_seconds()
        if delay <= 0:
            return
        self._pending = (title, body)
        self._timer.start(int(delay * 1000))
        logger.debug("Notification scheduled in %.1fs: %s", delay, body)

    def cancel_all(self) -> None:
        self._timer.stop()
        self._pending = None

    def _deliver(self) -> None:
        pending, self._pending = self._pending, None
        if pending is None or not self._authorized or self._tray_icon is None:
            return
        title, body = pending
        self._tray_icon.showMessage(title, body)
