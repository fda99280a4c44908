"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/Pomodoro/settings.json

Focus and break durations are fixed and deliberately not part of this
file.

Usage::

    settings = load_settings()
    settings.always_on_top = True
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

from .history.store import APP_SUPPORT_DIR
from .timer.driver import DEFAULT_TICK_INTERVAL_MS, MIN_TICK_INTERVAL_MS

logger = logging.getLogger(__name__)

SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS
    last_focus_title: str = ""

    # ── notifications ─────────────────────────────────────────────────
    notifications_enabled: bool = True

    # ── window ────────────────────────────────────────────────────────
    window_x: int | None = None
    window_y: int | None = None
    window_width: int = 300
    window_height: int = 240
    always_on_top: bool = False

    def __post_init__(self) -> None:
        self.tick_interval_ms = max(MIN_TICK_INTERVAL_MS, int(self.tick_interval_ms))


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from disk, falling back to defaults."""
    path = path or SETTINGS_PATH
    try:
        if path.exists():
            data = json.loads(path.read_text(encoding="utf-8"))
            # Only use keys that exist in the dataclass
            valid_keys = {f.name for f in fields(Settings)}
            filtered = {k: v for k, v in data.items() if k in valid_keys}
            return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("Ignoring unreadable settings %s: %s", path, exc)
    return Settings()


def save_settings(settings: Settings, path: Path | None = None) -> None:
    """Write settings to disk as JSON."""
    path = path or SETTINGS_PATH
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(
            json.dumps(asdict(settings), indent=2, sort_keys=True) + "\n",
            encoding="utf-8",
        )
    except OSError as exc:
        logger.warning("Could not save settings %s: %s", path, exc)
