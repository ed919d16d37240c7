"""Main application window."""

from __future__ import annotations

import logging

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QMainWindow

from .settings import Settings, load_settings, save_settings
from .timer.engine import TimerEngine
from .timer.state import RunState, TimerSnapshot
from .ui.styles import build_stylesheet, palette_for, system_prefers_dark
from .ui.timer_widget import TimerWidget

logger = logging.getLogger(__name__)


class CountdownApp(QMainWindow):
    """Single-timer window.  Flashes its palette while the alert blinks."""

    def __init__(self, settings: Settings | None = None) -> None:
        super().__init__()
        self.setWindowTitle("Countdown")

        # ── settings ──────────────────────────────────────────────────
        self._settings: Settings = settings if settings is not None else load_settings()
        self.resize(self._settings.window_width, self._settings.window_height)

        # ── engine ────────────────────────────────────────────────────
        self._timer_engine = TimerEngine.from_settings(self._settings, parent=self)

        # ── theme ─────────────────────────────────────────────────────
        if self._settings.dark_theme is None:
            self._dark = system_prefers_dark()
        else:
            self._dark = bool(self._settings.dark_theme)
        self._inverted = False

        # ── UI ────────────────────────────────────────────────────────
        self._timer_widget = TimerWidget(self._timer_engine, self)
        self.setCentralWidget(self._timer_widget)
        self._apply_palette()

        self._timer_engine.subscribe(self._on_snapshot)

    @property
    def engine(self) -> TimerEngine:
        return self._timer_engine

    # ══════════════════════════════════════════════════════════════════
    #  THEME
    # ══════════════════════════════════════════════════════════════════

    def _apply_palette(self) -> None:
        palette = palette_for(self._dark, self._inverted)
        self.setStyleSheet(build_stylesheet(palette))
        self._timer_widget.apply_palette(palette)

    def _on_snapshot(self, snapshot: TimerSnapshot) -> None:
        if snapshot.alert_phase != self._inverted:
            self._inverted = snapshot.alert_phase
            self._apply_palette()

    # ══════════════════════════════════════════════════════════════════
    #  KEYBOARD SHORTCUTS
    # ══════════════════════════════════════════════════════════════════

    def _on_space(self) -> None:
        """Start, pause, or resume the timer."""
        if self._timer_engine.is_running:
            self._timer_engine.pause()
        else:
            self._timer_engine.start()

    def _on_escape(self) -> None:
        """Reset the timer (no-op when already INIT)."""
        if self._timer_engine.run_state is not RunState.INIT:
            self._timer_engine.reset()

    def keyPressEvent(self, event) -> None:  # type: ignore[override]
        """Handle Space (start/pause) and Escape (reset) globally."""
        key = event.key()
        if key == Qt.Key.Key_Space and not event.modifiers():
            self._on_space()
            event.accept()
            return
        if key == Qt.Key.Key_Escape:
            self._on_escape()
            event.accept()
            return
        super().keyPressEvent(event)

    # ══════════════════════════════════════════════════════════════════
    #  WINDOW EVENTS
    # ══════════════════════════════════════════════════════════════════

    def _save_geometry(self) -> None:
        size = self.size()
        self._settings.window_width = size.width()
        self._settings.window_height = size.height()
        try:
            save_settings(self._settings)
        except OSError as exc:
            logger.warning("could not save settings: %s", exc)

    def closeEvent(self, event) -> None:  # type: ignore[override]
        self._timer_engine.reset()
        self._save_geometry()
        event.accept()
