"""Tests for JSON-backed settings."""

import json

from pomodoro.settings import Settings, load_settings, save_settings


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.notifications_enabled is True
        assert s.tick_interval_ms == 500
        assert s.window_x is None
        assert s.window_width == 300
        assert s.window_height == 240
        assert s.always_on_top is False
        assert s.last_focus_title == ""

    def test_round_trip(self, tmp_path, monkeypatch):
        path = tmp_path / "settings.json"
        monkeypatch.setattr("pomodoro.settings.SETTINGS_PATH", path)

        original = Settings(
            window_x=100, window_y=200, always_on_top=True,
            notifications_enabled=False, last_focus_title="Write report",
        )
        save_settings(original)
        loaded = load_settings()
        assert loaded == original

    def test_unknown_keys_are_ignored(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text(json.dumps({"work_duration": 60, "always_on_top": True}))
        loaded = load_settings(path)
        assert loaded.always_on_top is True
        assert not hasattr(loaded, "work_duration")

    def test_corrupt_file_yields_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("{oops")
        assert load_settings(path) == Settings()

    def test_non_object_yields_defaults(self, tmp_path):
        path = tmp_path / "settings.json"
        path.write_text("[1, 2]")
        assert load_settings(path) == Settings()

    def test_tick_interval_is_clamped(self):
        assert Settings(tick_interval_ms=1).tick_interval_ms == 50

    def test_save_failure_is_swallowed(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("x")
        save_settings(Settings(), blocker / "settings.json")
