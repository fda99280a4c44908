"""Smoke tests for the widgets, the window and the tick driver."""

import json

import pytest

from pomodoro.history import Mode
from pomodoro.settings import Settings
from pomodoro.timer import RunState, TickDriver
from pomodoro.ui import PomodoroWindow, SessionHistoryWidget, TimerWidget
from pomodoro.ui.main_window import make_tray_icon

from helpers import at


@pytest.mark.usefixtures("qapp")
class TestTimerWidget:

    def test_initial_display(self, engine):
        w = TimerWidget(engine)
        assert w._time_label.text() == "25:00"
        assert w._status_label.text() == "Focus · Idle"
        assert w._start_pause_btn.text() == "Start"

    def test_start_disabled_until_title(self, engine):
        w = TimerWidget(engine)
        assert not w._start_pause_btn.isEnabled()
        w.set_focus_title("Write report")
        assert engine.focus_title == "Write report"
        assert w._start_pause_btn.isEnabled()

    def test_title_flows_to_engine_only(self, engine):
        w = TimerWidget(engine)
        w._title_input.setText("Read paper")
        assert engine.focus_title == "Read paper"
        assert not hasattr(TimerWidget, "focus_title_changed")

    def test_start_pause_resume_cycle(self, engine):
        w = TimerWidget(engine)
        w.set_focus_title("Write report")

        w._start_pause_btn.click()
        assert engine.run_state == RunState.RUNNING
        assert w._start_pause_btn.text() == "Pause"
        assert not w._title_input.isEnabled()

        engine.tick(at(60))
        assert w._time_label.text() == "24:00"

        w._start_pause_btn.click()
        assert engine.run_state == RunState.PAUSED
        assert w._start_pause_btn.text() == "Resume"

        w._start_pause_btn.click()
        assert engine.run_state == RunState.RUNNING

    def test_switch_mode_hides_title(self, engine):
        w = TimerWidget(engine)
        w._switch_btn.click()
        assert engine.mode == Mode.BREAK
        assert w._title_input.isHidden()
        assert w._time_label.text() == "05:00"
        assert w._status_label.text() == "Break · Idle"
        assert w._start_pause_btn.isEnabled()

    def test_reset_button(self, focus_engine):
        w = TimerWidget(focus_engine)
        assert not w._reset_btn.isEnabled()
        focus_engine.start(at(0))
        assert w._reset_btn.isEnabled()
        w._reset_btn.click()
        assert focus_engine.run_state == RunState.IDLE


@pytest.mark.usefixtures("qapp")
class TestSessionHistoryWidget:

    def test_empty(self, engine):
        w = SessionHistoryWidget(engine)
        assert w.row_count == 0
        assert not w._empty_label.isHidden()

    def test_refreshes_on_new_session(self, focus_engine):
        w = SessionHistoryWidget(focus_engine)
        focus_engine.start(at(0))
        focus_engine.tick(at(1500))
        assert w.row_count == 1
        assert w._empty_label.isHidden()

    def test_caps_rows(self, focus_engine):
        w = SessionHistoryWidget(focus_engine, max_rows=2)
        for i in range(3):
            focus_engine.start(at(i * 100))
            focus_engine.reset(at(i * 100 + 50))
        assert len(focus_engine.sessions) == 3
        assert w.row_count == 2


@pytest.mark.usefixtures("qapp")
class TestWindow:

    def test_tray_icons_render(self):
        images = {}
        for state in RunState:
            icon = make_tray_icon(state)
            assert not icon.isNull()
            images[state] = icon.pixmap(32, 32).toImage()
        # each state paints a different glyph
        assert images[RunState.IDLE] != images[RunState.RUNNING]
        assert images[RunState.RUNNING] != images[RunState.PAUSED]

    def test_close_saves_geometry_and_title(self, focus_engine, tmp_path, monkeypatch):
        path = tmp_path / "settings.json"
        monkeypatch.setattr("pomodoro.settings.SETTINGS_PATH", path)

        window = PomodoroWindow(focus_engine, Settings())
        window.show()
        window.close()

        data = json.loads(path.read_text(encoding="utf-8"))
        assert data["last_focus_title"] == "Write report"
        assert data["window_width"] >= 300


@pytest.mark.usefixtures("qapp")
class TestTickDriver:

    def test_start_stop(self, engine):
        driver = TickDriver(engine, interval_ms=500)
        assert driver.interval_ms == 500
        driver.start()
        assert driver.is_active
        driver.stop()
        assert not driver.is_active

    def test_interval_is_clamped(self, engine):
        assert TickDriver(engine, interval_ms=1).interval_ms == 50

    def test_timeout_ticks_engine(self, focus_engine, clock):
        driver = TickDriver(focus_engine)
        focus_engine.start()
        clock.advance(1500)
        driver._on_timeout()
        assert focus_engine.run_state == RunState.IDLE
        assert len(focus_engine.sessions) == 1
