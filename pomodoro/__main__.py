"""Allow running Pomodoro as a module: python -m pomodoro."""

import logging
import os
import sys

from PyQt6.QtWidgets import QApplication, QSystemTrayIcon

from .history import SessionRecorder, SessionStore
from .notifications import TrayNotifier
from .settings import load_settings
from .timer import TickDriver, TimerEngine
from .ui.main_window import PomodoroWindow, make_tray_icon


def configure_logging() -> None:
    level_name = os.environ.get("POMODORO_LOG_LEVEL", "INFO").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def main() -> None:
    configure_logging()
    logger = logging.getLogger("pomodoro")

    app = QApplication(sys.argv)
    app.setApplicationName("Pomodoro")
    app.setOrganizationName("Pomodoro")

    settings = load_settings()

    tray_icon = QSystemTrayIcon(make_tray_icon(), app)
    tray_icon.show()
    notifier = TrayNotifier(tray_icon, app, enabled=settings.notifications_enabled)
    notifier.request_permission()

    store = SessionStore()
    engine = TimerEngine(
        recorder=SessionRecorder(store),
        notifier=notifier,
    )
    engine.focus_title = settings.last_focus_title
    logger.info(
        "Pomodoro ready (%d session(s) in %s)", len(engine.sessions), store.path
    )

    window = PomodoroWindow(engine, settings, tray_icon)
    driver = TickDriver(engine, window, interval_ms=settings.tick_interval_ms)
    driver.start()
    window.show()

    sys.exit(app.exec())


if __name__ == "__main__":
    main()
