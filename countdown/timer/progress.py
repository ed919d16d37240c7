"""Derived presentation values for a timer snapshot."""

from __future__ import annotations

from dataclasses import dataclass

from .state import RunState, TimerSnapshot


@dataclass(frozen=True)
class ProgressModel:
    """Fraction of the countdown left, plus whether the alert is blinking.

    Pure data: build one per snapshot with :meth:`from_snapshot`.
    """

    fraction: float = 0.0
    blinking: bool = False

    @classmethod
    def from_snapshot(cls, snapshot: TimerSnapshot) -> ProgressModel:
        if snapshot.initial_seconds > 0:
            # A pending duration edited above the last run can exceed 1.
            fraction = min(1.0, snapshot.display_seconds / snapshot.initial_seconds)
        else:
            fraction = 0.0
        return cls(
            fraction=fraction,
            blinking=snapshot.run_state is RunState.DONE,
        )

    @property
    def sweep_degrees(self) -> float:
        """Arc sweep for a ring drawn clockwise from 12 o'clock."""
        return self.fraction * 360.0
