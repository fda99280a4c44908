"""Notification package."""

from .scheduler import (
    NotificationAuthorizer,
    NotificationScheduler,
    NullNotifier,
    TrayNotifier,
)

__all__ = [
    "NotificationAuthorizer",
    "NotificationScheduler",
    "NullNotifier",
    "TrayNotifier",
]
