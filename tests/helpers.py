"""Shared test helpers for Countdown."""

from countdown.timer.engine import TimerEngine


class SignalCollector:
    """Listener / slot that records everything it receives."""

    def __init__(self):
        self.items: list = []

    def slot(self, *args):
        self.items.append(args if len(args) > 1 else args[0] if args else None)

    def __call__(self, *args):
        self.slot(*args)

    def __len__(self):
        return len(self.items)

    def __getitem__(self, idx):
        return self.items[idx]

    @property
    def last(self):
        return self.items[-1] if self.items else None

    def clear(self):
        self.items.clear()


class FakeClock:
    """Monotonic millisecond clock that only moves when told to."""

    def __init__(self, start: int = 1_000):
        self.now = start

    def __call__(self) -> int:
        return self.now

    def advance(self, millis: int) -> None:
        self.now += millis


def run_for(engine: TimerEngine, clock: FakeClock, millis: int, step: int = 10) -> None:
    """Advance *clock* by *millis*, ticking the engine every *step* ms."""
    left = millis
    while left > 0:
        dt = min(step, left)
        clock.advance(dt)
        engine._on_tick()
        left -= dt
