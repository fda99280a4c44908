"""JSON persistence for the session history.

History is stored at:
    ~/Library/Application Support/Pomodoro/sessions.json

The file holds a JSON array, newest session first.  Reading is lenient
(anything unexpected yields an empty history) and writing is best-effort:
the in-memory list stays authoritative when the disk is not cooperating.

Usage::

    store = SessionStore()
    sessions = store.load()
    store.save(sessions)
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable
from pathlib import Path

from PyQt6.QtCore import QIODevice, QSaveFile

from .models import Session

logger = logging.getLogger(__name__)


# ── paths ────────────────────────────────────────────────────────────────

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "Pomodoro"
SESSIONS_FILENAME = "sessions.json"
SESSIONS_PATH = APP_SUPPORT_DIR / SESSIONS_FILENAME


def dumps_sessions(sessions: Iterable[Session]) -> str:
    """Serialize *sessions* deterministically (sorted keys, 2-space indent)."""
    payload = [s.to_dict() for s in sessions]
    return json.dumps(payload, indent=2, sort_keys=True, ensure_ascii=False) + "\n"


def loads_sessions(text: str) -> list[Session]:
    """Parse the stored representation.  Raises on any schema mismatch."""
    data = json.loads(text)
    if not isinstance(data, list):
        raise TypeError(f"expected a JSON array, got {type(data).__name__}")
    return [Session.from_dict(entry) for entry in data]


class SessionStore:
    """Loads and saves the ordered session list at a fixed location."""

    def __init__(self, path: Path | str | None = None) -> None:
        self._path = Path(path) if path is not None else SESSIONS_PATH

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> list[Session]:
        """Return the stored sessions, or ``[]`` if none can be read."""
        try:
            text = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.debug("No session history at %s", self._path)
            return []
        except OSError as exc:
            logger.warning("Could not read session history %s: %s", self._path, exc)
            return []
        try:
            sessions = loads_sessions(text)
        except (
            ValueError, TypeError, KeyError, OverflowError, RecursionError,
        ) as exc:
            logger.warning(
                "Discarding unreadable session history %s: %s", self._path, exc
            )
            return []
        logger.debug("Loaded %d session(s) from %s", len(sessions), self._path)
        return sessions

    def save(self, sessions: Iterable[Session]) -> bool:
        """Atomically replace the stored history with *sessions*.

        Returns ``False`` (after logging) when the write failed; the
        previous file content is left untouched in that case.
        """
        try:
            data = dumps_sessions(sessions).encode("utf-8")
            self._path.parent.mkdir(parents=True, exist_ok=True)
        except (OSError, TypeError, ValueError) as exc:
            logger.warning("Could not prepare session history %s: %s", self._path, exc)
            return False

        out = QSaveFile(str(self._path))
        if not out.open(QIODevice.OpenModeFlag.WriteOnly):
            logger.warning(
                "Could not open %s for writing: %s", self._path, out.errorString()
            )
            return False
        if out.write(data) != len(data):
            error = out.errorString()
            out.cancelWriting()
            out.commit()
            logger.warning("Short write to %s: %s", self._path, error)
            return False
        if not out.commit():
            logger.warning(
                "Could not commit session history %s: %s", self._path, out.errorString()
            )
            return False
        return True
