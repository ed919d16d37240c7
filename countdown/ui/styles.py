"""QSS stylesheet and light/dark palettes for Countdown.

While the alert blinks, the window swaps to the opposite palette on every
phase, so a finished countdown flashes between light and dark.
"""

from __future__ import annotations

from PyQt6.QtGui import QColor

# ── palettes ─────────────────────────────────────────────────────────────

LIGHT_PALETTE: dict[str, str] = {
    "surface":    "#FFFFFF",
    "primary":    "#6200EE",
    "on_surface": "#000000",
}

DARK_PALETTE: dict[str, str] = {
    "surface":    "#121212",
    "primary":    "#BB86FC",
    "on_surface": "#FFFFFF",
}

DISABLED_ALPHA = 0.38


def palette_for(dark: bool, inverted: bool = False) -> dict[str, str]:
    """Return the palette for the theme, or its opposite when *inverted*."""
    use_dark = dark != inverted
    return dict(DARK_PALETTE if use_dark else LIGHT_PALETTE)


def system_prefers_dark() -> bool:
    """True when the running QApplication reports a dark colour scheme."""
    from PyQt6.QtCore import Qt
    from PyQt6.QtWidgets import QApplication

    app = QApplication.instance()
    if app is None:
        return False
    hints = app.styleHints()
    if hints is None:
        return False
    return hints.colorScheme() == Qt.ColorScheme.Dark


def with_alpha(hex_color: str, alpha: float) -> str:
    """``rgba()`` QSS value for *hex_color* at *alpha* (0..1)."""
    c = QColor(hex_color)
    return f"rgba({c.red()}, {c.green()}, {c.blue()}, {int(round(alpha * 255))})"


# ── QSS builder ───────────────────────────────────────────────────────

def build_stylesheet(palette: dict[str, str]) -> str:
    p = palette
    disabled = with_alpha(p["on_surface"], DISABLED_ALPHA)
    return f"""
    /* ── global ─────────────────────────────────── */
    QWidget {{
        background-color: {p['surface']};
        color: {p['on_surface']};
        font-size: 14px;
    }}

    QLabel#timeLabel {{
        font-size: 72px;
        font-weight: 300;
    }}

    /* ── round outlined buttons ──────────────────── */
    QPushButton#circleButton {{
        background-color: transparent;
        color: {p['primary']};
        border: 2px solid {p['primary']};
        border-radius: 32px;
        min-width: 60px;
        max-width: 60px;
        min-height: 60px;
        max-height: 60px;
        font-weight: 600;
    }}

    QPushButton#circleButton:disabled {{
        color: {disabled};
        border-color: {disabled};
    }}
    """
