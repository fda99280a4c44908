"""Shared pytest fixtures for Pomodoro tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication  # noqa: E402

from pomodoro.history import SessionRecorder, SessionStore  # noqa: E402
from pomodoro.timer.engine import TimerEngine  # noqa: E402

from helpers import FakeClock, RecordingNotifier  # noqa: E402


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def notifier():
    return RecordingNotifier()


@pytest.fixture
def store(tmp_path):
    """Store pointed at a throwaway sessions.json."""
    return SessionStore(tmp_path / "Pomodoro" / "sessions.json")


@pytest.fixture
def engine(qapp, clock, notifier, store):
    """Fresh TimerEngine on a fake clock, persisting to a temp store."""
    return TimerEngine(
        recorder=SessionRecorder(store),
        notifier=notifier,
        clock=clock,
    )


@pytest.fixture
def focus_engine(engine):
    """Engine in Focus mode with a usable title."""
    engine.focus_title = "Write report"
    return engine
