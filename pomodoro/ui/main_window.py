"""Main Pomodoro window: timer card, recent sessions, tray icon."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QIcon, QImage, QPainter, QPen, QPixmap
from PyQt6.QtWidgets import (
    QMainWindow, QSystemTrayIcon, QVBoxLayout, QWidget,
)

from ..settings import Settings, save_settings
from ..timer.engine import RunState, TimerEngine
from .session_history import SessionHistoryWidget
from .timer_widget import TimerWidget


# ── tray icon ─────────────────────────────────────────────────────────────


def make_tray_icon(state: RunState = RunState.IDLE) -> QIcon:
    """Paint the tray glyph for *state*: ring when idle, disc while
    running, two bars while paused."""
    size = 64  # painted at double size, shown at 32 px
    img = QImage(size, size, QImage.Format.Format_ARGB32_Premultiplied)
    img.fill(Qt.GlobalColor.transparent)
    painter = QPainter(img)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    ink = QColor(0, 0, 0, 220)
    painter.setPen(Qt.PenStyle.NoPen)
    painter.setBrush(ink)

    mid_x, mid_y, radius = size // 2, size // 2, size // 2 - 4

    if state == RunState.RUNNING:
        painter.drawEllipse(mid_x - radius, mid_y - radius, radius * 2, radius * 2)
    elif state == RunState.PAUSED:
        bar_width, bar_height = 8, 28
        gap = 6
        y = mid_y - bar_height // 2
        painter.drawRoundedRect(mid_x - gap - bar_width, y, bar_width, bar_height, 3, 3)
        painter.drawRoundedRect(mid_x + gap, y, bar_width, bar_height, 3, 3)
    else:
        painter.setPen(QPen(ink, 4))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawEllipse(mid_x - radius, mid_y - radius, radius * 2, radius * 2)

    painter.end()

    img.setDevicePixelRatio(2.0)
    return QIcon(QPixmap.fromImage(img))


# ══════════════════════════════════════════════════════════════════════════
#  MAIN WINDOW
# ══════════════════════════════════════════════════════════════════════════


class PomodoroWindow(QMainWindow):
    def __init__(
        self,
        engine: TimerEngine,
        settings: Settings | None = None,
        tray_icon: QSystemTrayIcon | None = None,
    ) -> None:
        super().__init__()
        self._engine = engine
        self._settings = settings or Settings()
        self._tray_icon = tray_icon

        self.setWindowTitle("Pomodoro")
        self.setMinimumSize(300, 240)
        self._restore_geometry()
        if self._settings.always_on_top:
            self.setWindowFlag(Qt.WindowType.WindowStaysOnTopHint, True)

        # ── central widget ────────────────────────────────────────────
        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)
        layout.setContentsMargins(16, 12, 16, 12)
        layout.setSpacing(8)

        self._timer_widget = TimerWidget(engine, central)
        layout.addWidget(self._timer_widget)

        self._session_history = SessionHistoryWidget(engine, central)
        self._session_history.title_clicked.connect(self._on_history_title_clicked)
        layout.addWidget(self._session_history)
        layout.addStretch()

        # ── tray ──────────────────────────────────────────────────────
        engine.state_changed.connect(self._update_tray_state)
        engine.remaining_changed.connect(self._update_tray_tooltip)
        self._update_tray_state(engine.run_state)

    @property
    def timer_widget(self) -> TimerWidget:
        return self._timer_widget

    @property
    def session_history(self) -> SessionHistoryWidget:
        return self._session_history

    # ── slots ─────────────────────────────────────────────────────────

    def _on_history_title_clicked(self, title: str) -> None:
        if self._engine.run_state == RunState.IDLE:
            self._timer_widget.set_focus_title(title)

    def _update_tray_state(self, state: RunState) -> None:
        if self._tray_icon is None:
            return
        self._tray_icon.setIcon(make_tray_icon(state))
        self._update_tray_tooltip(self._engine.display_remaining)

    def _update_tray_tooltip(self, _remaining: float) -> None:
        if self._tray_icon is None:
            return
        self._tray_icon.setToolTip(
            f"Pomodoro: {self._engine.status_text} {self._engine.formatted_time()}"
        )

    # ── geometry persistence ──────────────────────────────────────────

    def _restore_geometry(self) -> None:
        s = self._settings
        self.resize(max(300, s.window_width), max(240, s.window_height))
        if s.window_x is not None and s.window_y is not None:
            self.move(s.window_x, s.window_y)

    def _save_geometry(self) -> None:
        s = self._settings
        geo = self.geometry()
        s.window_x, s.window_y = geo.x(), geo.y()
        s.window_width, s.window_height = geo.width(), geo.height()
        s.last_focus_title = self._engine.focus_title
        save_settings(s)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._save_geometry()
        if self._tray_icon is not None:
            self._tray_icon.hide()
        event.accept()
