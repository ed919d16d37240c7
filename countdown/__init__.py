"""Countdown: a single countdown timer with a drift-corrected engine."""

__version__ = "0.1.0"
