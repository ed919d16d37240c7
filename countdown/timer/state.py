"""Run states, snapshots and UI gating for the countdown timer."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RunState(Enum):
    INIT = "init"
    RUNNING = "running"
    PAUSED = "paused"
    DONE = "done"


# ── constants ─────────────────────────────────────────────────────────────

MAX_SECONDS = 59 * 60 + 59  # 59:59, one hour ceiling
ADJUST_STEPS = (1, 10)  # +/- buttons offered by the UI


def seconds_for_millis(millis: int) -> int:
    """Whole seconds shown for *millis* left on the clock (rounded up)."""
    if millis <= 0:
        return 0
    return -(-millis // 1000)


def format_clock(seconds: int) -> str:
    """``MM:SS`` for a duration in seconds."""
    minutes, secs = divmod(max(0, seconds), 60)
    return f"{minutes:02d}:{secs:02d}"


# ── snapshot ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class TimerSnapshot:
    """Immutable view of the engine published to listeners.

    ``initial_seconds`` is the duration captured when the countdown was
    started and stays fixed until the next reset.  While INIT,
    ``display_seconds`` is the pending (editable) duration.
    """

    initial_seconds: int = 0
    remaining_millis: int = 0
    display_seconds: int = 0
    run_state: RunState = RunState.INIT
    alert_phase: bool = False

    @property
    def clock_text(self) -> str:
        return format_clock(self.display_seconds)


# ── affordances ───────────────────────────────────────────────────────────


@dataclass(frozen=True)
class Affordances:
    """Which controls a presentation layer should enable.

    Advisory only: the engine ignores the same commands on its own.
    """

    can_add: bool
    can_remove: bool
    can_start: bool
    can_pause: bool
    can_reset: bool


def affordances(snapshot: TimerSnapshot) -> Affordances:
    state = snapshot.run_state
    is_init = state is RunState.INIT
    return Affordances(
        can_add=is_init and snapshot.display_seconds < MAX_SECONDS,
        can_remove=is_init and snapshot.display_seconds > 0,
        can_start=(is_init and snapshot.display_seconds > 0)
        or state is RunState.PAUSED,
        can_pause=state is RunState.RUNNING,
        can_reset=not is_init,
    )
