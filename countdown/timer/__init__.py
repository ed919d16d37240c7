"""Timer package."""

from .engine import (
    TimerEngine,
    TICK_INTERVAL_MS,
    MAX_TICK_INTERVAL_MS,
    BLINK_INTERVAL_MS,
)
from .progress import ProgressModel
from .state import (
    RunState,
    TimerSnapshot,
    Affordances,
    affordances,
    format_clock,
    seconds_for_millis,
    MAX_SECONDS,
    ADJUST_STEPS,
)

__all__ = [
    "TimerEngine",
    "TICK_INTERVAL_MS",
    "MAX_TICK_INTERVAL_MS",
    "BLINK_INTERVAL_MS",
    "ProgressModel",
    "RunState",
    "TimerSnapshot",
    "Affordances",
    "affordances",
    "format_clock",
    "seconds_for_millis",
    "MAX_SECONDS",
    "ADJUST_STEPS",
]
