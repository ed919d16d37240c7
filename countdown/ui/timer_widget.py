"""Main timer display widget.

Layout (top → bottom):
    - MM:SS time label
    - ProgressRing
    - Time-setting row: -10  -1  +1  +10   (editable only before start)
    - Control row: Reset, Start / Pause / Continue
"""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QLabel, QPushButton, QSizePolicy,
)

from ..timer.engine import TimerEngine
from ..timer.progress import ProgressModel
from ..timer.state import (
    ADJUST_STEPS, RunState, TimerSnapshot, affordances, format_clock,
)
from .progress_ring import ProgressRing


START_LABELS: dict[RunState, str] = {
    RunState.INIT:    "Start",
    RunState.RUNNING: "Pause",
    RunState.PAUSED:  "Continue",
    RunState.DONE:    "Done",
}


class TimerWidget(QWidget):
    """The countdown card: clock, dial and controls."""

    def __init__(self, engine: TimerEngine, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._engine = engine
        self._build_ui()
        self._connect_signals()
        self._on_snapshot(engine.snapshot)

    # ── build ─────────────────────────────────────────────────────────────

    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setSpacing(8)
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._time_label = QLabel(format_clock(0), self)
        self._time_label.setObjectName("timeLabel")
        self._time_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        layout.addWidget(self._time_label)

        ring_row = QHBoxLayout()
        ring_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._ring = ProgressRing(self)
        self._ring.setSizePolicy(
            QSizePolicy.Policy.Fixed, QSizePolicy.Policy.Fixed,
        )
        self._ring.setFixedSize(ProgressRing.RING_DIAMETER, ProgressRing.RING_DIAMETER)
        ring_row.addWidget(self._ring)
        layout.addLayout(ring_row)

        # ── time setting: -10 -1 +1 +10 ──────────────────────────────
        adjust_row = QHBoxLayout()
        adjust_row.setSpacing(8)
        adjust_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._remove_btns: dict[int, QPushButton] = {}
        self._add_btns: dict[int, QPushButton] = {}
        for step in sorted(ADJUST_STEPS, reverse=True):
            self._remove_btns[step] = self._circle_button(f"-{step}")
            adjust_row.addWidget(self._remove_btns[step])
        for step in sorted(ADJUST_STEPS):
            self._add_btns[step] = self._circle_button(f"+{step}")
            adjust_row.addWidget(self._add_btns[step])
        layout.addLayout(adjust_row)

        # ── controls ─────────────────────────────────────────────────
        control_row = QHBoxLayout()
        control_row.setSpacing(8)
        control_row.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._reset_btn = self._circle_button("Reset")
        self._start_pause_btn = self._circle_button("Start")
        control_row.addWidget(self._reset_btn)
        control_row.addWidget(self._start_pause_btn)
        layout.addLayout(control_row)

    def _circle_button(self, text: str) -> QPushButton:
        btn = QPushButton(text, self)
        btn.setObjectName("circleButton")
        return btn

    # ── signals ───────────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        for step, btn in self._remove_btns.items():
            btn.clicked.connect(
                lambda _checked=False, s=step: self._engine.remove_time(s)
            )
        for step, btn in self._add_btns.items():
            btn.clicked.connect(
                lambda _checked=False, s=step: self._engine.add_time(s)
            )
        self._reset_btn.clicked.connect(self._engine.reset)
        self._start_pause_btn.clicked.connect(self._on_start_pause)

        self._unsubscribe = self._engine.subscribe(self._on_snapshot)

    # ── slots ─────────────────────────────────────────────────────────────

    def _on_start_pause(self) -> None:
        if self._engine.is_running:
            self._engine.pause()
        else:
            self._engine.start()

    def _on_snapshot(self, snapshot: TimerSnapshot) -> None:
        self._time_label.setText(format_clock(snapshot.display_seconds))
        self._ring.set_fraction(ProgressModel.from_snapshot(snapshot).fraction)

        allowed = affordances(snapshot)
        for btn in self._remove_btns.values():
            btn.setEnabled(allowed.can_remove)
        for btn in self._add_btns.values():
            btn.setEnabled(allowed.can_add)
        self._reset_btn.setEnabled(allowed.can_reset)
        self._start_pause_btn.setText(START_LABELS[snapshot.run_state])
        self._start_pause_btn.setEnabled(allowed.can_start or allowed.can_pause)

    # ── theming ───────────────────────────────────────────────────────────

    def apply_palette(self, palette: dict[str, str]) -> None:
        self._ring.set_color(palette["primary"])

    def detach(self) -> None:
        """Stop listening to the engine."""
        self._unsubscribe()
