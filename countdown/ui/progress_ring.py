"""Pie-style progress indicator rendered with QPainter.

The filled wedge starts at 12 o'clock and sweeps clockwise in proportion
to the time left, so it shrinks back towards the top as the countdown
runs.  A thin line marks the 12 o'clock origin and an outline circle
shows the full dial.
"""

from __future__ import annotations

from PyQt6.QtCore import Qt, QPointF, QRectF
from PyQt6.QtGui import QColor, QPainter, QPen
from PyQt6.QtWidgets import QWidget


class ProgressRing(QWidget):
    """Custom-painted countdown dial."""

    RING_DIAMETER = 200
    RING_THICKNESS = 4
    MARGIN = 4

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(self.RING_DIAMETER, self.RING_DIAMETER)
        self._fraction: float = 0.0
        self._color = QColor("#6200EE")

    # ── public API ───────────────────────────────────────────────────────

    @property
    def fraction(self) -> float:
        return self._fraction

    def set_fraction(self, fraction: float) -> None:
        """Update the wedge (0..1)."""
        fraction = max(0.0, min(1.0, fraction))
        if fraction != self._fraction:
            self._fraction = fraction
            self.update()

    def set_color(self, color: str) -> None:
        self._color = QColor(color)
        self.update()

    # ── painting ─────────────────────────────────────────────────────────

    def paintEvent(self, event) -> None:  # type: ignore[override]
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)

        cx, cy = self.width() / 2, self.height() / 2
        diameter = min(self.width(), self.height()) - 2 * self.MARGIN
        radius = diameter / 2
        rect = QRectF(cx - radius, cy - radius, diameter, diameter)

        # ── origin line ──────────────────────────────────────────────
        painter.setPen(QPen(self._color, 1))
        painter.drawLine(QPointF(cx, cy), QPointF(cx, cy - radius))

        # ── wedge ────────────────────────────────────────────────────
        if self._fraction > 0:
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(self._color)
            # Qt angles are 1/16 degree; start at 12 o'clock, clockwise
            painter.drawPie(rect, 90 * 16, -int(self._fraction * 360 * 16))

        # ── outline ──────────────────────────────────────────────────
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.setPen(QPen(self._color, self.RING_THICKNESS))
        painter.drawEllipse(rect)

        painter.end()
