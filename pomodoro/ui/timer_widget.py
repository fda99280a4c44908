"""Main timer display widget.

Layout (top → bottom):
    - Remaining time (large, monospaced)
    - "Mode · State" caption
    - Focus title input (Focus mode only)
    - Start / Pause / Resume + Reset
    - Switch Mode
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QLineEdit,
)

from ..history.models import Mode
from ..timer.engine import TimerEngine, RunState


class TimerWidget(QWidget):
    """The timer card: clock, caption, title input and controls."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._build_ui()
        self._connect_signals()
        self._on_state_changed(engine.run_state)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        # ── clock ────────────────────────────────────────────────────
        self._time_label = QLabel(self._engine.formatted_time(), self)
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        font = QFont()
        font.setPointSize(48)
        font.setWeight(QFont.Weight.DemiBold)
        font.setStyleHint(QFont.StyleHint.Monospace)
        self._time_label.setFont(font)
        layout.addWidget(self._time_label)

        self._status_label = QLabel(self._engine.status_text, self)
        self._status_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._status_label.setStyleSheet("font-size: 13px; color: #7A7A9A;")
        layout.addWidget(self._status_label)

        # ── focus title ──────────────────────────────────────────────
        self._title_input = QLineEdit(self)
        self._title_input.setPlaceholderText("What are you focusing on?")
        self._title_input.setMaxLength(100)
        self._title_input.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._title_input.setText(self._engine.focus_title)
        layout.addWidget(self._title_input)

        # ── main controls ────────────────────────────────────────────
        btn_row = QHBoxLayout()
        btn_row.setSpacing(10)
        btn_row.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._start_pause_btn = QPushButton("Start", self)
        self._start_pause_btn.setObjectName("primaryButton")

        self._reset_btn = QPushButton("Reset", self)
        self._reset_btn.setObjectName("secondaryButton")

        btn_row.addWidget(self._start_pause_btn)
        btn_row.addWidget(self._reset_btn)
        layout.addLayout(btn_row)

        self._switch_btn = QPushButton("Switch Mode", self)
        self._switch_btn.setObjectName("secondaryButton")
        layout.addWidget(self._switch_btn, alignment=Qt.AlignmentFlag.AlignCenter)

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        self._start_pause_btn.clicked.connect(self._on_start_pause)
        self._reset_btn.clicked.connect(lambda: self._engine.reset())
        self._switch_btn.clicked.connect(lambda: self._engine.switch_mode())
        self._title_input.textChanged.connect(self._on_title_changed)

        self._engine.remaining_changed.connect(self._refresh_display)
        self._engine.state_changed.connect(self._on_state_changed)
        self._engine.mode_changed.connect(lambda _mode: self._on_state_changed(self._engine.run_state))

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_start_pause(self) -> None:
        state = self._engine.run_state
        if state == RunState.RUNNING:
            self._engine.pause()
        elif state == RunState.PAUSED:
            self._engine.resume()
        else:
            self._engine.start()

    def _on_title_changed(self, text: str) -> None:
        self._engine.focus_title = text
        self._update_controls(self._engine.run_state)

    def _on_state_changed(self, state: RunState) -> None:
        if state == RunState.RUNNING:
            self._start_pause_btn.setText("Pause")
        elif state == RunState.PAUSED:
            self._start_pause_btn.setText("Resume")
        else:
            self._start_pause_btn.setText("Start")

        self._status_label.setText(self._engine.status_text)
        self._update_controls(state)
        self._refresh_display(self._engine.display_remaining)

    def _update_controls(self, state: RunState) -> None:
        """Enable/disable controls the way the engine would accept them."""
        is_idle = state == RunState.IDLE
        is_focus = self._engine.mode == Mode.FOCUS

        self._title_input.setVisible(is_focus)
        self._title_input.setEnabled(state != RunState.RUNNING)

        # Start is disabled until a Focus interval has a title
        self._start_pause_btn.setEnabled(not is_idle or self._engine.can_start)
        self._reset_btn.setEnabled(not is_idle)

    def set_focus_title(self, title: str) -> None:
        """Fill the title input (and so the engine's focus title)."""
        self._title_input.setText(title)

    def _refresh_display(self, _remaining: float) -> None:
        self._time_label.setText(self._engine.formatted_time())
