"""Timer state machine for Countdown.

States
------
INIT       Configured but not started.  Pending duration is editable.
RUNNING    Counting down.
PAUSED     Frozen mid-countdown, resumable.
DONE       Reached zero.  The alert blink loop runs until reset.

Transitions
-----------
INIT → RUNNING       (start, pending duration > 0)
RUNNING → PAUSED     (pause)
PAUSED → RUNNING     (start)
RUNNING → DONE       (remaining time reaches 0)
Any → INIT           (reset)

``start()`` from DONE is ignored: a finished countdown has to be reset
first, which restores the duration it was started with.

Time accounting
---------------
Every tick subtracts the *measured* time since the previous tick from the
remaining milliseconds, never the nominal interval, so a late or
coalesced timer event cannot make the countdown drift.  Pausing applies
one last partial correction before the clock is frozen.
"""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable

from PyQt6.QtCore import QElapsedTimer, QObject, Qt, QTimer, pyqtSignal

from .progress import ProgressModel
from .state import (
    MAX_SECONDS,
    Affordances,
    RunState,
    TimerSnapshot,
    affordances,
    seconds_for_millis,
)

if TYPE_CHECKING:
    from ..settings import Settings

logger = logging.getLogger(__name__)


# ── constants ─────────────────────────────────────────────────────────────

TICK_INTERVAL_MS = 10
MAX_TICK_INTERVAL_MS = 100  # slower ticks make the display visibly lag
BLINK_INTERVAL_MS = 500


class _Loop(Enum):
    """Which periodic activity currently owns the Qt timer."""

    NONE = auto()
    TICK = auto()
    BLINK = auto()


Listener = Callable[[TimerSnapshot], None]


# ── engine ────────────────────────────────────────────────────────────────


class TimerEngine(QObject):
    """Qt-based countdown timer with drift-corrected ticking.

    Signals
    -------
    snapshot_changed(snapshot: TimerSnapshot)
        Emitted synchronously after every state mutation.
    state_changed(new_state: RunState)
        Emitted on every run-state transition.
    finished()
        Emitted once each time a countdown reaches zero.
    """

    snapshot_changed = pyqtSignal(object)
    state_changed = pyqtSignal(object)
    finished = pyqtSignal()

    def __init__(
        self,
        parent: QObject | None = None,
        *,
        tick_interval_ms: int = TICK_INTERVAL_MS,
        blink_interval_ms: int = BLINK_INTERVAL_MS,
        clock: Callable[[], int] | None = None,
    ) -> None:
        super().__init__(parent)

        if not 1 <= tick_interval_ms <= MAX_TICK_INTERVAL_MS:
            raise ValueError(
                f"tick_interval_ms must be between 1 and "
                f"{MAX_TICK_INTERVAL_MS}, got {tick_interval_ms}"
            )
        if blink_interval_ms <= 0:
            raise ValueError(
                f"blink_interval_ms must be positive, got {blink_interval_ms}"
            )

        # ── configuration ─────────────────────────────────────────────
        self._tick_interval_ms: int = tick_interval_ms
        self._blink_interval_ms: int = blink_interval_ms

        # ── countdown state ───────────────────────────────────────────
        self._state: RunState = RunState.INIT
        self._initial_seconds: int = 0
        self._remaining_millis: int = 0
        self._display_seconds: int = 0
        self._alert_phase: bool = False

        # ── clock (monotonic milliseconds) ────────────────────────────
        if clock is None:
            self._elapsed = QElapsedTimer()
            self._elapsed.start()
            clock = self._elapsed.elapsed
        self._clock: Callable[[], int] = clock
        self._last_tick_ms: int = 0

        # ── Qt timer, shared by the tick and blink loops ──────────────
        self._loop: _Loop = _Loop.NONE
        self._qt_timer = QTimer(self)
        self._qt_timer.setTimerType(Qt.TimerType.PreciseTimer)
        self._qt_timer.timeout.connect(self._on_timeout)

    @classmethod
    def from_settings(
        cls, settings: Settings, parent: QObject | None = None,
    ) -> TimerEngine:
        """Build an engine from user settings, clamping out-of-range timing."""
        tick = max(1, min(MAX_TICK_INTERVAL_MS, int(settings.tick_interval_ms)))
        blink = max(1, int(settings.blink_interval_ms))
        return cls(parent, tick_interval_ms=tick, blink_interval_ms=blink)

    # ══════════════════════════════════════════════════════════════════
    #  PUBLIC PROPERTIES
    # ══════════════════════════════════════════════════════════════════

    @property
    def run_state(self) -> RunState:
        return self._state

    @property
    def initial_seconds(self) -> int:
        """Duration captured by the last start from INIT."""
        return self._initial_seconds

    @property
    def remaining_millis(self) -> int:
        return self._remaining_millis

    @property
    def display_seconds(self) -> int:
        """Seconds shown on the clock (the pending duration while INIT)."""
        return self._display_seconds

    @property
    def alert_phase(self) -> bool:
        return self._alert_phase

    @property
    def is_running(self) -> bool:
        return self._state is RunState.RUNNING

    @property
    def tick_interval_ms(self) -> int:
        return self._tick_interval_ms

    @property
    def blink_interval_ms(self) -> int:
        return self._blink_interval_ms

    @property
    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            initial_seconds=self._initial_seconds,
            remaining_millis=self._remaining_millis,
            display_seconds=self._display_seconds,
            run_state=self._state,
            alert_phase=self._alert_phase,
        )

    @property
    def progress(self) -> ProgressModel:
        return ProgressModel.from_snapshot(self.snapshot)

    @property
    def affordances(self) -> Affordances:
        return affordances(self.snapshot)

    # ══════════════════════════════════════════════════════════════════
    #  OBSERVATION
    # ══════════════════════════════════════════════════════════════════

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Call *listener* with the new snapshot after every mutation.

        A listener that raises is logged and skipped; the engine state and
        the other listeners are unaffected.  Returns a callable that removes
        the listener.  Calling it more than once is harmless.
        """
        def deliver(snapshot: TimerSnapshot) -> None:
            try:
                listener(snapshot)
            except Exception:
                logger.exception("snapshot listener %r failed", listener)

        self.snapshot_changed.connect(deliver)

        def unsubscribe() -> None:
            try:
                self.snapshot_changed.disconnect(deliver)
            except TypeError:
                pass  # already disconnected

        return unsubscribe

    # ══════════════════════════════════════════════════════════════════
    #  CONTROLS
    # ══════════════════════════════════════════════════════════════════

    def configure(self, delta_seconds: int) -> None:
        """Add (or with a negative delta, remove) pending time.

        Only valid while INIT.  The result is clamped to 0..MAX_SECONDS.
        """
        if self._state is not RunState.INIT:
            logger.debug("configure ignored while %s", self._state.name)
            return
        pending = self._display_seconds + int(delta_seconds)
        pending = max(0, min(MAX_SECONDS, pending))
        if pending == self._display_seconds:
            return
        self._display_seconds = pending
        self._remaining_millis = pending * 1000
        self._publish()

    def add_time(self, seconds: int) -> None:
        self.configure(abs(int(seconds)))

    def remove_time(self, seconds: int) -> None:
        self.configure(-abs(int(seconds)))

    def start(self) -> None:
        """Start from INIT, or resume from PAUSED."""
        if self._state is RunState.INIT:
            if self._display_seconds == 0:
                logger.debug("start ignored: no duration configured")
                return
            self._initial_seconds = self._display_seconds
            self._remaining_millis = self._initial_seconds * 1000
        elif self._state is not RunState.PAUSED:
            logger.debug("start ignored while %s", self._state.name)
            return

        self._cancel_activity()
        self._alert_phase = False
        self._begin_loop(_Loop.TICK, self._tick_interval_ms)
        self._set_state(RunState.RUNNING)

    def pause(self) -> None:
        """Freeze the countdown.  Only valid while RUNNING."""
        if self._state is not RunState.RUNNING:
            logger.debug("pause ignored while %s", self._state.name)
            return
        self._apply_elapsed(self._clock())
        self._cancel_activity()
        if self._remaining_millis == 0:
            # The partial interval ran the clock out.
            self._finish()
            return
        self._alert_phase = False
        self._set_state(RunState.PAUSED)

    def reset(self) -> None:
        """Cancel everything and restore the duration the run started with."""
        self._cancel_activity()
        self._display_seconds = self._initial_seconds
        self._remaining_millis = self._initial_seconds * 1000
        self._alert_phase = False
        self._set_state(RunState.INIT)

    # ══════════════════════════════════════════════════════════════════
    #  INTERNAL — timer mechanics
    # ══════════════════════════════════════════════════════════════════

    def _begin_loop(self, loop: _Loop, interval_ms: int) -> None:
        self._loop = loop
        self._last_tick_ms = self._clock()
        self._qt_timer.setInterval(interval_ms)
        self._qt_timer.start()

    def _cancel_activity(self) -> None:
        self._qt_timer.stop()
        self._loop = _Loop.NONE

    def _on_timeout(self) -> None:
        if self._loop is _Loop.TICK:
            self._on_tick()
        elif self._loop is _Loop.BLINK:
            self._on_blink()

    def _on_tick(self) -> None:
        if self._loop is not _Loop.TICK:
            return
        self._apply_elapsed(self._clock())
        if self._remaining_millis == 0:
            self._finish()
        else:
            self._publish()

    def _on_blink(self) -> None:
        if self._loop is not _Loop.BLINK:
            return
        self._alert_phase = not self._alert_phase
        self._publish()

    def _apply_elapsed(self, now_ms: int) -> None:
        elapsed = max(0, now_ms - self._last_tick_ms)
        self._last_tick_ms = now_ms
        self._remaining_millis = max(0, self._remaining_millis - elapsed)
        self._display_seconds = seconds_for_millis(self._remaining_millis)

    def _finish(self) -> None:
        self._cancel_activity()
        self._remaining_millis = 0
        self._display_seconds = 0
        self._alert_phase = True  # first flash is immediate
        self._begin_loop(_Loop.BLINK, self._blink_interval_ms)
        logger.info("countdown of %ds finished", self._initial_seconds)
        self._set_state(RunState.DONE)
        if self._state is RunState.DONE:  # a listener may have reset already
            self.finished.emit()

    def _set_state(self, new_state: RunState) -> None:
        old_state = self._state
        self._state = new_state
        logger.debug(
            "%s -> %s (%d ms left)",
            old_state.name, new_state.name, self._remaining_millis,
        )
        self._publish()
        if old_state is not new_state and self._state is new_state:
            self.state_changed.emit(new_state)

    def _publish(self) -> None:
        self.snapshot_changed.emit(self.snapshot)
