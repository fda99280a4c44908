"""Session history widget showing the most recent recorded intervals.

Sits below the timer.  Clicking a Focus title emits
``title_clicked(str)`` so the timer can reuse it.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QFrame, QSizePolicy,
)

from ..history.models import Mode, Session, SessionStatus
from ..timer.engine import TimerEngine

MAX_ROWS = 5


class SessionHistoryWidget(QWidget):
    """Displays the newest sessions recorded by the engine."""

    title_clicked = pyqtSignal(str)

    def __init__(
        self,
        engine: TimerEngine,
        parent: QWidget | None = None,
        *,
        max_rows: int = MAX_ROWS,
    ) -> None:
        super().__init__(parent)
        self._engine = engine
        self._max_rows = max_rows
        self._row_widgets: list[QWidget] = []
        self._build_ui()
        self._engine.session_recorded.connect(lambda _session: self.refresh())
        self.refresh()

    # ── build ─────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(0, 8, 0, 0)
        layout.setSpacing(6)

        header = QLabel("Recent Sessions")
        header.setAlignment(Qt.AlignmentFlag.AlignCenter)
        header.setStyleSheet("font-size: 13px; font-weight: 600; color: #7A7A9A;")
        layout.addWidget(header)

        self._rows_container = QVBoxLayout()
        self._rows_container.setSpacing(4)
        layout.addLayout(self._rows_container)

        self._empty_label = QLabel("No sessions yet")
        self._empty_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._empty_label.setStyleSheet("font-size: 12px; color: #313154;")
        layout.addWidget(self._empty_label)

    @property
    def row_count(self) -> int:
        return len(self._row_widgets)

    # ── refresh ───────────────────────────────────────────────────────

    def refresh(self) -> None:
        """Rebuild the rows from the engine's session list."""
        for w in self._row_widgets:
            w.setParent(None)
            w.deleteLater()
        self._row_widgets.clear()

        recent = self._engine.sessions[: self._max_rows]
        self._empty_label.setVisible(not recent)

        for sess in recent:
            row = self._make_row(sess)
            self._rows_container.addWidget(row)
            self._row_widgets.append(row)

    # ── row builder ───────────────────────────────────────────────────

    def _make_row(self, sess: Session) -> QWidget:
        frame = QFrame(self)
        row = QHBoxLayout(frame)
        row.setContentsMargins(8, 4, 8, 4)
        row.setSpacing(8)

        if sess.mode == Mode.FOCUS:
            label_text = sess.title or "Untitled focus"
        else:
            label_text = "Break"
        if sess.status == SessionStatus.ABANDONED:
            label_text += " (stopped)"
        title_lbl = QLabel(label_text)
        title_lbl.setStyleSheet("font-size: 12px;")
        title_lbl.setSizePolicy(
            QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Preferred,
        )
        if sess.title:
            title = sess.title
            title_lbl.setCursor(Qt.CursorShape.PointingHandCursor)
            title_lbl.mousePressEvent = lambda e, t=title: self.title_clicked.emit(t)

        mins = int(sess.duration_seconds) // 60
        dur_lbl = QLabel(f"{mins}m")
        dur_lbl.setStyleSheet("font-size: 12px; color: #7A7A9A;")
        dur_lbl.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)

        time_lbl = QLabel(sess.end_timestamp.astimezone().strftime("%H:%M"))
        time_lbl.setStyleSheet("font-size: 11px; color: #7A7A9A;")
        time_lbl.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)

        row.addWidget(title_lbl)
        row.addWidget(dur_lbl)
        row.addWidget(time_lbl)
        return frame
