"""Application settings with JSON persistence.

Settings are stored at:
    ~/Library/Application Support/Countdown/settings.json

Only preferences live here.  The countdown itself always starts fresh.

Usage::

    settings = load_settings()
    settings.dark_theme = True
    save_settings(settings)
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, asdict, fields
from pathlib import Path

logger = logging.getLogger(__name__)

APP_SUPPORT_DIR = Path.home() / "Library" / "Application Support" / "Countdown"
SETTINGS_PATH = APP_SUPPORT_DIR / "settings.json"


@dataclass
class Settings:
    """All user-configurable preferences."""

    # ── timer ─────────────────────────────────────────────────────────
    tick_interval_ms: int = 10
    blink_interval_ms: int = 500

    # ── appearance ────────────────────────────────────────────────────
    dark_theme: bool | None = None         # None = follow the system

    # ── diagnostics ───────────────────────────────────────────────────
    log_level: str = "WARNING"

    # ── window ────────────────────────────────────────────────────────
    window_width: int = 360
    window_height: int = 640


def resolve_log_level(name: str) -> int:
    """Map a level name like ``"debug"`` to its number (WARNING if unknown)."""
    level = logging.getLevelName(str(name).upper())
    return level if isinstance(level, int) else logging.WARNING


def _accepts(default, value) -> bool:
    """Whether *value* from JSON fits a field whose default is *default*."""
    if default is None:  # dark_theme: None or a bool
        return value is None or isinstance(value, bool)
    if isinstance(default, bool):
        return isinstance(value, bool)
    if isinstance(default, int):
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, type(default))


def load_settings() -> Settings:
    """Load settings from disk, falling back to defaults.

    Unknown keys are ignored.  A value of the wrong type is dropped with a
    warning and its field keeps the default.
    """
    if not SETTINGS_PATH.exists():
        return Settings()
    try:
        data = json.loads(SETTINGS_PATH.read_text(encoding="utf-8"))
        defaults = {f.name: f.default for f in fields(Settings)}
        filtered = {}
        for key, value in data.items():
            if key not in defaults:
                continue
            if not _accepts(defaults[key], value):
                logger.warning(
                    "ignoring setting %s=%r in %s: wrong type",
                    key, value, SETTINGS_PATH,
                )
                continue
            filtered[key] = value
        return Settings(**filtered)
    except (OSError, ValueError, TypeError, AttributeError) as exc:
        logger.warning("ignoring unreadable settings at %s: %s", SETTINGS_PATH, exc)
        return Settings()


def save_settings(settings: Settings) -> None:
    """Write settings to disk as JSON."""
    APP_SUPPORT_DIR.mkdir(parents=True, exist_ok=True)
    SETTINGS_PATH.write_text(
        json.dumps(asdict(settings), indent=2) + "\n",
        encoding="utf-8",
    )
