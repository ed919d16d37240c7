"""Shared pytest fixtures for Countdown tests."""

import os
import sys

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PyQt6.QtWidgets import QApplication

from countdown.timer.engine import TimerEngine

from helpers import FakeClock


@pytest.fixture(scope="session")
def qapp():
    """A single QApplication instance shared across the entire test run."""
    app = QApplication.instance() or QApplication(sys.argv)
    yield app


@pytest.fixture(autouse=True)
def settings_path(tmp_path, monkeypatch):
    """Keep every test away from the real settings file."""
    path = tmp_path / "settings.json"
    monkeypatch.setattr("countdown.settings.SETTINGS_PATH", path)
    monkeypatch.setattr("countdown.settings.APP_SUPPORT_DIR", tmp_path)
    yield path


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine(qapp, clock):
    """Fresh TimerEngine driven by a manually advanced clock."""
    eng = TimerEngine(parent=None, clock=clock)
    yield eng
    eng.reset()
